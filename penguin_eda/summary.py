"""Column-by-column summary of a table.

One row per column. Numeric columns get mean, sd and the five quantiles;
categorical columns get the number of distinct values and the most common
ones. Missing values are counted, then ignored.
"""

import logging

import numpy as np
import pandas as pd
from pandas.api.types import is_numeric_dtype

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    "column",
    "type",
    "n_missing",
    "complete_rate",
    "n_unique",
    "top_counts",
    "mean",
    "sd",
    "p0",
    "p25",
    "p50",
    "p75",
    "p100",
]


def _top_counts(values: pd.Series, limit=4) -> str:
    counts = values.value_counts().head(limit)
    return ", ".join(f"{str(name)[:3]}: {count}" for name, count in counts.items())


def summarize_columns(df: pd.DataFrame) -> pd.DataFrame:
    rows = []
    n_rows = len(df)
    for column in df.columns:
        values = df[column]
        n_missing = int(values.isna().sum())
        row = {
            "column": column,
            "n_missing": n_missing,
            "complete_rate": (n_rows - n_missing) / n_rows if n_rows else np.nan,
        }
        present = values.dropna()
        if is_numeric_dtype(values):
            row["type"] = "numeric"
            row["mean"] = present.mean()
            row["sd"] = present.std(ddof=1)
            for label, q in (("p0", 0.0), ("p25", 0.25), ("p50", 0.5), ("p75", 0.75), ("p100", 1.0)):
                row[label] = present.quantile(q) if len(present) else np.nan
        else:
            row["type"] = "categorical"
            row["n_unique"] = int(present.nunique())
            row["top_counts"] = _top_counts(present)
        rows.append(row)

    summary = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    logger.info("Summarized %s columns over %s rows", len(summary), n_rows)
    return summary


def format_summary(df: pd.DataFrame, title=None) -> str:
    """Text report: a short header, then categorical and numeric sections."""
    summary = summarize_columns(df)
    lines = []
    if title:
        lines.append(f"── {title} ──")
    lines.append(f"Rows: {len(df)}    Columns: {len(df.columns)}")

    categorical = summary[summary["type"] == "categorical"]
    if not categorical.empty:
        lines.append("")
        lines.append("Column type: categorical")
        lines.append(
            categorical[["column", "n_missing", "complete_rate", "n_unique", "top_counts"]]
            .astype({"n_unique": "Int64"})
            .to_string(index=False, float_format=lambda v: f"{v:.3f}")
        )

    numeric = summary[summary["type"] == "numeric"]
    if not numeric.empty:
        lines.append("")
        lines.append("Column type: numeric")
        lines.append(
            numeric[["column", "n_missing", "complete_rate", "mean", "sd", "p0", "p25", "p50", "p75", "p100"]]
            .to_string(index=False, float_format=lambda v: f"{v:.2f}")
        )

    return "\n".join(lines)
