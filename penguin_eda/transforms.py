"""Sorting, filtering and grouped summaries.

Every function returns a new DataFrame and leaves its input alone. Missing
values are handled by dropping incomplete rows before the groupwise step,
never by raising.
"""

import logging

import pandas as pd

logger = logging.getLogger(__name__)


def drop_missing(df: pd.DataFrame, columns=None) -> pd.DataFrame:
    """Drop rows with a missing value in any of ``columns`` (all columns if None)."""
    before = len(df)
    result = df.dropna(subset=columns).copy()
    logger.info("drop_missing: %s -> %s rows", before, len(result))
    return result


def filter_equals(df: pd.DataFrame, column: str, value) -> pd.DataFrame:
    """Keep rows where ``column == value``. No match gives an empty table."""
    result = df[df[column] == value].copy()
    if result.empty:
        logger.info("filter %s == %r matched no rows", column, value)
    return result


def sort_by(df: pd.DataFrame, keys, ascending=True) -> pd.DataFrame:
    """Stable sort on one or more keys. Missing values go last."""
    if isinstance(keys, str):
        keys = [keys]
    return df.sort_values(list(keys), ascending=ascending, kind="mergesort", na_position="last")


def adelie_subset(df: pd.DataFrame) -> pd.DataFrame:
    """Adelie rows only, ordered by island then sex."""
    return sort_by(filter_equals(df, "species", "Adelie"), ["island", "sex"])


def mean_body_mass_by_species(df: pd.DataFrame) -> pd.DataFrame:
    # Heaviest birds first so the pre-aggregation view is easy to read.
    # The sort has no effect on the means.
    ordered = sort_by(df, "body_mass_g", ascending=False)
    complete = drop_missing(ordered, ["species", "body_mass_g"])
    return (
        complete.groupby("species", observed=True)["body_mass_g"]
        .mean()
        .rename("mean_body_mass_g")
        .reset_index()
    )


def body_mass_stats_by_species_island(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/max/min/sd of body mass per (species, island).

    ``sd`` is the sample standard deviation (N - 1), so a group with a single
    bird has ``NaN`` for it.
    """
    complete = drop_missing(df, ["species", "island", "body_mass_g"])
    return (
        complete.groupby(["species", "island"], observed=True)["body_mass_g"]
        .agg(
            mean_body_mass_g="mean",
            max_body_mass_g="max",
            min_body_mass_g="min",
            sd_body_mass_g=lambda s: s.std(ddof=1),
        )
        .reset_index()
    )


def count_by(df: pd.DataFrame, column: str) -> pd.DataFrame:
    """Number of rows per category, in sorted category order."""
    return (
        df.dropna(subset=[column])
        .groupby(column, observed=True)
        .size()
        .rename("count")
        .reset_index()
    )
