"""Charts for the body mass vs. flipper length story.

All scatter charts put ``body_mass_g`` on x and ``flipper_length_mm`` on y.
Rows missing either value (or the color column, when one is used) are left
out of both the points and the regression lines.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from matplotlib.lines import Line2D
from sklearn.linear_model import LinearRegression

from penguin_eda.transforms import count_by

logger = logging.getLogger(__name__)

X = "body_mass_g"
Y = "flipper_length_mm"
LABELS = {
    "body_mass_g": "Body mass (g)",
    "flipper_length_mm": "Flipper length (mm)",
    "bill_length_mm": "Bill length (mm)",
    "bill_depth_mm": "Bill depth (mm)",
}


@dataclass(frozen=True)
class LineFit:
    slope: float
    intercept: float
    n: int

    def predict(self, x):
        return self.intercept + self.slope * np.asarray(x, dtype=float)


def fit_ols(df: pd.DataFrame, x: str = X, y: str = Y) -> Optional[LineFit]:
    """Least-squares line of ``y`` on ``x`` over rows that have both.

    Returns None when there are fewer than two usable rows or every x is the
    same, since no line is defined then.
    """
    complete = df[[x, y]].dropna()
    if len(complete) < 2 or complete[x].nunique() < 2:
        return None
    model = LinearRegression()
    model.fit(complete[[x]].to_numpy(dtype=float), complete[y].to_numpy(dtype=float))
    return LineFit(slope=float(model.coef_[0]), intercept=float(model.intercept_), n=len(complete))


def jitter(values, amount: float, rng: np.random.Generator) -> np.ndarray:
    """Add uniform noise in [-amount, amount] to every value."""
    values = np.asarray(values, dtype=float)
    if amount <= 0:
        return values
    return values + rng.uniform(-amount, amount, size=values.shape)


def category_palette(df: pd.DataFrame, column: str, palette="deep") -> dict:
    """Fixed category -> color mapping, so every panel colors a group the same way."""
    categories = sorted(df[column].dropna().unique())
    return dict(zip(categories, sns.color_palette(palette, n_colors=max(len(categories), 1))))


def add_titles(fig, title=None, subtitle=None):
    """Put a bold title and a grey subtitle across the top of the figure."""
    if title:
        fig.suptitle(title, fontsize=14, fontweight="bold", y=0.99)
    if subtitle:
        fig.text(0.5, 0.93, subtitle, ha="center", fontsize=10, color="dimgray")
    top = 0.90 if subtitle else 0.94 if title else 1.0
    fig.tight_layout(rect=(0, 0, 1, top))
    return fig


def _plot_points(ax, df, color, palette, jitter_width, jitter_height, alpha, fit_line, rng):
    needed = [X, Y] + ([color] if color else [])
    points = df.dropna(subset=needed).copy()
    points[X] = jitter(points[X], jitter_width, rng)
    points[Y] = jitter(points[Y], jitter_height, rng)

    if not points.empty:
        sns.scatterplot(
            data=points,
            x=X,
            y=Y,
            hue=color,
            hue_order=list(palette) if color else None,
            palette=palette if color else None,
            alpha=alpha,
            s=40,
            legend=False,
            ax=ax,
        )

    fits = {}
    if fit_line:
        # Lines are fitted on the real values, not the jittered ones
        clean = df.dropna(subset=needed)
        groups = clean.groupby(color, observed=True) if color else [(None, clean)]
        for name, group in groups:
            fit = fit_ols(group)
            if fit is None:
                continue
            xs = np.linspace(group[X].min(), group[X].max(), 50)
            line_color = palette[name] if color else "black"
            ax.plot(xs, fit.predict(xs), color=line_color, linewidth=2)
            fits[name] = fit

    ax.set_xlabel(LABELS[X])
    ax.set_ylabel(LABELS[Y])
    return fits


def _add_legend(target, color, palette):
    handles = [
        Line2D([0], [0], marker="o", linestyle="", color=c, label=str(name))
        for name, c in palette.items()
    ]
    if handles:
        target.legend(handles=handles, title=color, loc="lower right")


def scatter_mass_flipper(
    df: pd.DataFrame,
    color: Optional[str] = None,
    jitter_width: float = 0.0,
    jitter_height: float = 0.0,
    alpha: float = 1.0,
    fit_line: bool = False,
    title: Optional[str] = None,
    subtitle: Optional[str] = None,
    ax=None,
    seed: Optional[int] = None,
    figsize=(8, 5),
):
    """Scatter of body mass vs. flipper length, optionally colored and fitted.

    With ``color`` set, each category gets its own hue and its own regression
    line. Without it, one line is fitted through all the points.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    rng = np.random.default_rng(seed)
    palette = category_palette(df, color) if color else {}
    fits = _plot_points(ax, df, color, palette, jitter_width, jitter_height, alpha, fit_line, rng)
    if color:
        _add_legend(ax, color, palette)
    for name, fit in fits.items():
        logger.info("OLS fit %s: slope=%.4f intercept=%.2f n=%s", name or "all", fit.slope, fit.intercept, fit.n)

    add_titles(fig, title, subtitle)
    return fig


def facet_scatter(
    df: pd.DataFrame,
    cols: str,
    rows: Optional[str] = None,
    color: Optional[str] = None,
    jitter_width: float = 0.0,
    jitter_height: float = 0.0,
    alpha: float = 1.0,
    fit_line: bool = False,
    sharex: bool = False,
    sharey: bool = False,
    title: Optional[str] = None,
    subtitle: Optional[str] = None,
    seed: Optional[int] = None,
    panel_size=(4, 3.5),
):
    """One scatter panel per category of ``cols`` (and ``rows``, if given).

    Each panel gets its own axis ranges unless ``sharex``/``sharey`` is set.
    Combinations with no birds still get a panel, left empty.
    """
    col_values = sorted(df[cols].dropna().unique())
    row_values = sorted(df[rows].dropna().unique()) if rows else [None]
    n_rows, n_cols = len(row_values), max(len(col_values), 1)

    fig, axes = plt.subplots(
        n_rows,
        n_cols,
        figsize=(panel_size[0] * n_cols, panel_size[1] * n_rows),
        sharex=sharex,
        sharey=sharey,
        squeeze=False,
    )

    rng = np.random.default_rng(seed)
    palette = category_palette(df, color) if color else {}
    for i, row_value in enumerate(row_values):
        for j, col_value in enumerate(col_values):
            ax = axes[i][j]
            panel = df[df[cols] == col_value]
            label = f"{cols} = {col_value}"
            if rows:
                panel = panel[panel[rows] == row_value]
                label = f"{rows} = {row_value} | {label}"
            _plot_points(ax, panel, color, palette, jitter_width, jitter_height, alpha, fit_line, rng)
            ax.set_title(label, fontsize=10)

    if color:
        _add_legend(fig, color, palette)
    logger.info("Facet grid %sx%s on %s%s", n_rows, n_cols, cols, f" by {rows}" if rows else "")

    add_titles(fig, title, subtitle)
    return fig


def bar_counts(
    df: pd.DataFrame,
    column: str,
    colors: Optional[dict] = None,
    title: Optional[str] = None,
    subtitle: Optional[str] = None,
    figsize=(6, 4),
):
    """Bar per category with the number of rows on top.

    ``colors`` maps a category to a fill color and wins over the default
    palette for that category.
    """
    counts = count_by(df, column)
    categories = [str(c) for c in counts[column]]
    fills = dict(zip(categories, sns.color_palette("deep", n_colors=max(len(categories), 1))))
    fills.update({str(k): v for k, v in (colors or {}).items()})

    fig, ax = plt.subplots(figsize=figsize)
    bars = ax.bar(categories, counts["count"], color=[fills[c] for c in categories])
    ax.bar_label(bars)
    ax.set_xlabel(column)
    ax.set_ylabel("Count")

    add_titles(fig, title, subtitle)
    return fig


def save_figure(fig, name: str, output_dir: str = "figures") -> str:
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, f"{name}.png")
    fig.savefig(path, dpi=150, bbox_inches="tight")
    logger.info("Saved figure to %s", path)
    return path
