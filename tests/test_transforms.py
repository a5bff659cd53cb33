import numpy as np
import pandas as pd
import pytest

from penguin_eda.transforms import (
    adelie_subset,
    body_mass_stats_by_species_island,
    count_by,
    drop_missing,
    filter_equals,
    mean_body_mass_by_species,
    sort_by,
)


def test_mean_body_mass_ignores_missing_rows(make_table):
    df = make_table([
        ("Adelie", "Torgersen", "male", 150.0),
        ("Adelie", "Torgersen", "female", np.nan),
        ("Gentoo", "Biscoe", "male", 200.0),
    ])

    result = mean_body_mass_by_species(df).set_index("species")["mean_body_mass_g"]

    assert result["Adelie"] == pytest.approx(150.0)
    assert result["Gentoo"] == pytest.approx(200.0)
    assert len(result) == 2


def test_mean_body_mass_matches_arithmetic_mean(penguins):
    result = mean_body_mass_by_species(penguins).set_index("species")["mean_body_mass_g"]

    for species in penguins["species"].unique():
        masses = [m for s, m in zip(penguins["species"], penguins["body_mass_g"]) if s == species and not np.isnan(m)]
        assert result[species] == pytest.approx(sum(masses) / len(masses))


def test_sorting_does_not_change_species_means(penguins):
    shuffled = penguins.sample(frac=1.0, random_state=3)
    pd.testing.assert_frame_equal(mean_body_mass_by_species(penguins), mean_body_mass_by_species(shuffled))


def test_species_island_stats_are_ordered(penguins):
    stats = body_mass_stats_by_species_island(penguins)

    assert list(stats.columns) == [
        "species",
        "island",
        "mean_body_mass_g",
        "max_body_mass_g",
        "min_body_mass_g",
        "sd_body_mass_g",
    ]
    assert (stats["max_body_mass_g"] >= stats["mean_body_mass_g"]).all()
    assert (stats["mean_body_mass_g"] >= stats["min_body_mass_g"]).all()
    assert (stats["sd_body_mass_g"].dropna() >= 0).all()
    # Adelie on three islands, Chinstrap on Dream, Gentoo on Biscoe
    assert len(stats) == 5


def test_species_island_sd_uses_sample_formula(make_table):
    df = make_table([
        ("Gentoo", "Biscoe", "male", 4000.0),
        ("Gentoo", "Biscoe", "female", 5000.0),
        ("Gentoo", "Biscoe", "male", 6000.0),
        ("Adelie", "Dream", "male", 3700.0),
    ])

    stats = body_mass_stats_by_species_island(df).set_index(["species", "island"])

    assert stats.loc[("Gentoo", "Biscoe"), "sd_body_mass_g"] == pytest.approx(1000.0)
    assert np.isnan(stats.loc[("Adelie", "Dream"), "sd_body_mass_g"])


def test_filter_female_keeps_only_female_rows(make_table):
    df = make_table([
        ("Adelie", "Dream", "female", 3300.0),
        ("Adelie", "Dream", "male", 3900.0),
        ("Adelie", "Biscoe", "female", 3400.0),
        ("Gentoo", "Biscoe", "male", 5500.0),
        ("Gentoo", "Biscoe", "female", 4600.0),
    ])

    females = filter_equals(df, "sex", "female")

    assert len(females) == 3
    assert (females["sex"] == "female").all()


def test_filter_is_idempotent(penguins):
    once = filter_equals(penguins, "species", "Adelie")
    twice = filter_equals(once, "species", "Adelie")

    pd.testing.assert_frame_equal(once, twice)


def test_filter_with_no_match_returns_empty_table(penguins):
    result = filter_equals(penguins, "island", "Atlantis")

    assert result.empty
    assert list(result.columns) == list(penguins.columns)


def test_filter_leaves_input_untouched(penguins):
    before = penguins.copy()
    filter_equals(penguins, "sex", "male")

    pd.testing.assert_frame_equal(penguins, before)


def test_sort_is_idempotent(penguins):
    once = sort_by(penguins, ["island", "sex"])
    twice = sort_by(once, ["island", "sex"])

    pd.testing.assert_frame_equal(once, twice)


def test_sort_is_stable_and_puts_missing_sex_last(make_table):
    df = make_table([
        ("Adelie", "Dream", "male", 3900.0),
        ("Adelie", "Dream", None, 3000.0),
        ("Adelie", "Dream", "female", 3300.0),
        ("Adelie", "Dream", "male", 3800.0),
    ])

    result = sort_by(df, ["island", "sex"])

    assert list(result["sex"].iloc[:3]) == ["female", "male", "male"]
    assert result["sex"].iloc[3] is None or pd.isna(result["sex"].iloc[3])
    # ties keep their original order
    assert list(result["body_mass_g"].iloc[1:3]) == [3900.0, 3800.0]


def test_drop_missing_is_idempotent(penguins):
    once = drop_missing(penguins)
    twice = drop_missing(once)

    pd.testing.assert_frame_equal(once, twice)
    assert not once.isna().any().any()


def test_drop_missing_only_checks_named_columns(penguins):
    result = drop_missing(penguins, ["body_mass_g"])

    assert len(result) == len(penguins) - 2
    assert result["sex"].isna().any()


def test_adelie_subset_is_filtered_and_sorted(penguins):
    adelie = adelie_subset(penguins)

    assert set(adelie["species"]) == {"Adelie"}
    assert len(adelie) == 13
    assert list(adelie["island"]) == sorted(adelie["island"])
    pd.testing.assert_frame_equal(adelie, sort_by(adelie, ["island", "sex"]))


def test_count_by_island(penguins):
    counts = count_by(adelie_subset(penguins), "island").set_index("island")["count"]

    assert counts.to_dict() == {"Biscoe": 3, "Dream": 3, "Torgersen": 7}
