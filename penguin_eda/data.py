"""Loading the Palmer penguins table.

The table is small (344 rows), so it is always fully loaded into a pandas
DataFrame. Callers get a fresh copy every time; nothing here keeps state.
"""

import logging
from pathlib import Path

import numpy as np
import pandas as pd
import seaborn as sns

logger = logging.getLogger(__name__)

SPECIES = ["Adelie", "Chinstrap", "Gentoo"]
ISLANDS = ["Biscoe", "Dream", "Torgersen"]
SEXES = ["female", "male"]

CATEGORICAL_COLUMNS = ["species", "island", "sex"]
NUMERIC_COLUMNS = [
    "bill_length_mm",
    "bill_depth_mm",
    "flipper_length_mm",
    "body_mass_g",
]
COLUMNS = CATEGORICAL_COLUMNS + NUMERIC_COLUMNS + ["year"]

# year is optional: seaborn's copy of the dataset does not have it
REQUIRED_COLUMNS = CATEGORICAL_COLUMNS + NUMERIC_COLUMNS


class PenguinSchemaError(ValueError):
    """The supplied table is missing columns the walkthrough needs."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Penguin table is missing columns: {', '.join(self.missing)}")


def _require_columns(df: pd.DataFrame) -> None:
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise PenguinSchemaError(missing)


def _warn_unexpected_categories(df: pd.DataFrame) -> None:
    # Unexpected categories are worth a warning, not a crash
    for column, allowed in (("species", SPECIES), ("island", ISLANDS), ("sex", SEXES)):
        unexpected = sorted(set(df[column].dropna()) - set(allowed))
        if unexpected:
            logger.warning("Unexpected %s values: %s", column, unexpected)


def check_schema(df: pd.DataFrame) -> None:
    """Raise on missing columns, warn on unknown categories.

    Expects sex already normalised to lower case, as ``load_penguins`` leaves it.
    """
    _require_columns(df)
    _warn_unexpected_categories(df)


def _normalize_sex(sex: pd.Series) -> pd.Series:
    """'MALE' -> 'male', '.' and blanks -> missing."""
    def clean(value):
        if not isinstance(value, str):
            return None
        value = value.strip().lower()
        return value if value in SEXES else None

    return sex.map(clean).astype(object)


def load_penguins(source=None) -> pd.DataFrame:
    """Return the penguins table as a new DataFrame.

    ``source`` can be a DataFrame (copied), a path to a CSV file, or None to
    use the copy of the dataset that ships with seaborn.
    """
    if source is None:
        df = sns.load_dataset("penguins")
        origin = "seaborn penguins dataset"
    elif isinstance(source, pd.DataFrame):
        df = source.copy()
        origin = "in-memory DataFrame"
    else:
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"Could not find penguin CSV at {path}")
        df = pd.read_csv(path, na_values=["NA", "."])
        origin = str(path)

    _require_columns(df)

    df = df.copy()
    df["sex"] = _normalize_sex(df["sex"])
    _warn_unexpected_categories(df)
    for column in NUMERIC_COLUMNS:
        df[column] = pd.to_numeric(df[column], errors="coerce").astype(float)

    logger.info("Loaded %s with shape %s", origin, df.shape)
    return df


def sample_penguins() -> pd.DataFrame:
    """A handful of real rows covering every species/island/sex combination.

    Includes two rows with no measurements and two with unknown sex, so the
    missing-value handling can be shown without downloading anything.
    """
    nan = np.nan
    rows = [
        ("Adelie", "Torgersen", "male", 39.1, 18.7, 181.0, 3750.0, 2007),
        ("Adelie", "Torgersen", "female", 39.5, 17.4, 186.0, 3800.0, 2007),
        ("Adelie", "Torgersen", "female", 40.3, 18.0, 195.0, 3250.0, 2007),
        ("Adelie", "Torgersen", None, nan, nan, nan, nan, 2007),
        ("Adelie", "Torgersen", "female", 36.7, 19.3, 193.0, 3450.0, 2007),
        ("Adelie", "Torgersen", "male", 39.3, 20.6, 190.0, 3650.0, 2007),
        ("Adelie", "Torgersen", None, 34.1, 18.1, 193.0, 3475.0, 2007),
        ("Adelie", "Biscoe", "female", 37.8, 18.3, 174.0, 3400.0, 2007),
        ("Adelie", "Biscoe", "male", 37.7, 18.7, 180.0, 3600.0, 2007),
        ("Adelie", "Biscoe", "female", 35.9, 19.2, 189.0, 3800.0, 2007),
        ("Adelie", "Dream", "female", 39.5, 16.7, 178.0, 3250.0, 2007),
        ("Adelie", "Dream", "male", 37.2, 18.1, 178.0, 3900.0, 2007),
        ("Adelie", "Dream", "male", 39.8, 19.1, 184.0, 4650.0, 2007),
        ("Chinstrap", "Dream", "female", 46.5, 17.9, 192.0, 3500.0, 2007),
        ("Chinstrap", "Dream", "male", 50.0, 19.5, 196.0, 3900.0, 2007),
        ("Chinstrap", "Dream", "male", 51.3, 19.2, 193.0, 3650.0, 2007),
        ("Chinstrap", "Dream", "female", 45.4, 18.7, 188.0, 3525.0, 2007),
        ("Gentoo", "Biscoe", "female", 46.1, 13.2, 211.0, 4500.0, 2007),
        ("Gentoo", "Biscoe", "male", 50.0, 16.3, 230.0, 5700.0, 2007),
        ("Gentoo", "Biscoe", "female", 48.7, 14.1, 210.0, 4450.0, 2007),
        ("Gentoo", "Biscoe", "male", 50.0, 15.2, 218.0, 5700.0, 2007),
        ("Gentoo", "Biscoe", None, 44.5, 14.3, 216.0, 4100.0, 2007),
        ("Gentoo", "Biscoe", None, nan, nan, nan, nan, 2009),
    ]
    return pd.DataFrame(rows, columns=COLUMNS)
