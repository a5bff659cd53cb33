import logging
import os
import runpy

import pytest

from penguin_eda.data import sample_penguins

NOTEBOOK = os.path.join(os.path.dirname(__file__), os.pardir, "notebooks", "penguins_eda_instructor.py")


@pytest.fixture()
def offline_dataset(monkeypatch):
    def fake_load_dataset(name):
        # seaborn's copy has no year column and capitalizes sex
        df = sample_penguins().drop(columns=["year"])
        df["sex"] = df["sex"].map({"female": "Female", "male": "Male"})
        return df

    monkeypatch.setattr("penguin_eda.data.sns.load_dataset", fake_load_dataset)


def test_notebook_runs_top_to_bottom(tmp_path, monkeypatch, offline_dataset):
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level

    try:
        namespace = runpy.run_path(os.path.abspath(NOTEBOOK))
    finally:
        for handler in list(root.handlers):
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    assert len(namespace["adelie"]) == 13
    assert sorted(os.listdir(tmp_path / "figures")) == [
        "adelie_by_island.png",
        "adelie_counts_by_island.png",
        "mass_flipper_by_species.png",
    ]
    assert len(os.listdir(tmp_path / "logs")) == 1
