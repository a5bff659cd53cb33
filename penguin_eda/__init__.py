"""Helpers for the Palmer penguins EDA walkthrough notebook."""

from penguin_eda.config import EDAConfig, load_config
from penguin_eda.data import PenguinSchemaError, check_schema, load_penguins, sample_penguins
from penguin_eda.log_setup import setup_logging
from penguin_eda.summary import format_summary, summarize_columns
from penguin_eda.transforms import (
    adelie_subset,
    body_mass_stats_by_species_island,
    count_by,
    drop_missing,
    filter_equals,
    mean_body_mass_by_species,
    sort_by,
)

__all__ = [
    "EDAConfig",
    "PenguinSchemaError",
    "adelie_subset",
    "body_mass_stats_by_species_island",
    "check_schema",
    "count_by",
    "drop_missing",
    "filter_equals",
    "format_summary",
    "load_config",
    "load_penguins",
    "mean_body_mass_by_species",
    "sample_penguins",
    "setup_logging",
    "sort_by",
    "summarize_columns",
]
