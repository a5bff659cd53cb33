import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

from penguin_eda.data import COLUMNS, sample_penguins


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture()
def penguins():
    return sample_penguins()


@pytest.fixture()
def make_table():
    """Build a penguin table from (species, island, sex, body_mass_g) tuples."""

    def _make(rows):
        records = []
        for i, (species, island, sex, mass) in enumerate(rows):
            flipper = np.nan if mass is None or np.isnan(mass) else 150.0 + mass / 100.0
            records.append((species, island, sex, 40.0, 18.0, flipper, mass, 2007 + i % 3))
        return pd.DataFrame(records, columns=COLUMNS)

    return _make
