"""Run settings for the penguin walkthrough.

Defaults live in ``EDAConfig``. Instructors can override any of them with an
environment variable named ``PENGUIN_EDA_<FIELD>`` (for example
``PENGUIN_EDA_OUTPUT_DIR=/tmp/figures``) without touching the notebook.
"""

import logging
import os
from dataclasses import dataclass, field, fields, replace
from typing import Dict, Tuple

logger = logging.getLogger(__name__)

ENV_PREFIX = "PENGUIN_EDA_"

# Fill colors for the island bar chart
DEFAULT_ISLAND_COLORS = {
    "Biscoe": "darkorange",
    "Dream": "purple",
    "Torgersen": "darkcyan",
}


@dataclass(frozen=True)
class EDAConfig:
    output_dir: str = "figures"
    log_dir: str = "logs"
    log_level: str = "INFO"
    seed: int = 0
    figsize: Tuple[float, float] = (8.0, 5.0)
    jitter_width: float = 30.0
    jitter_height: float = 1.0
    alpha: float = 0.6
    island_colors: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ISLAND_COLORS))


def _parse(raw, current):
    if isinstance(current, bool):
        return raw.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(current, int):
        return int(raw)
    if isinstance(current, float):
        return float(raw)
    if isinstance(current, tuple):
        # "8,5" -> (8.0, 5.0)
        return tuple(float(part) for part in raw.split(","))
    if isinstance(current, dict):
        # "Biscoe=orange,Dream=purple"
        pairs = [item.split("=", 1) for item in raw.split(",") if "=" in item]
        return {key.strip(): value.strip() for key, value in pairs}
    return raw


def load_config(environ=None, **overrides) -> EDAConfig:
    """Build the config from defaults, then environment, then keyword overrides."""
    environ = os.environ if environ is None else environ
    config = EDAConfig()

    env_values = {}
    for f in fields(EDAConfig):
        key = ENV_PREFIX + f.name.upper()
        if key not in environ:
            continue
        try:
            env_values[f.name] = _parse(environ[key], getattr(config, f.name))
        except ValueError as e:
            raise ValueError(f"Bad value for {key}: {environ[key]!r} ({e})") from e

    config = replace(config, **{**env_values, **overrides})
    if env_values:
        logger.info("Config overrides from environment: %s", sorted(env_values))
    return config
