import logging
import os

import pytest

from penguin_eda.config import DEFAULT_ISLAND_COLORS, EDAConfig, load_config
from penguin_eda.log_setup import setup_logging


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_defaults():
    config = load_config(environ={})

    assert config == EDAConfig()
    assert config.island_colors == DEFAULT_ISLAND_COLORS


def test_environment_overrides():
    config = load_config(environ={
        "PENGUIN_EDA_OUTPUT_DIR": "/tmp/figs",
        "PENGUIN_EDA_SEED": "42",
        "PENGUIN_EDA_ALPHA": "0.3",
        "PENGUIN_EDA_FIGSIZE": "10,6",
        "PENGUIN_EDA_ISLAND_COLORS": "Biscoe=red,Dream=blue",
    })

    assert config.output_dir == "/tmp/figs"
    assert config.seed == 42
    assert config.alpha == pytest.approx(0.3)
    assert config.figsize == (10.0, 6.0)
    assert config.island_colors == {"Biscoe": "red", "Dream": "blue"}


def test_keyword_overrides_win_over_environment():
    config = load_config(environ={"PENGUIN_EDA_SEED": "42"}, seed=7)

    assert config.seed == 7


def test_bad_environment_value():
    with pytest.raises(ValueError, match="PENGUIN_EDA_SEED"):
        load_config(environ={"PENGUIN_EDA_SEED": "many"})


def test_setup_logging_writes_file(tmp_path, restore_root_logger):
    log_path = setup_logging(str(tmp_path / "logs"))

    logging.getLogger("penguin_eda.test").info("Loaded penguins with shape %s", (344, 8))
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert os.path.dirname(log_path) == str(tmp_path / "logs")
    with open(log_path) as f:
        text = f.read()
    assert "| INFO | Starting penguin EDA run" in text
    assert "Loaded penguins with shape (344, 8)" in text


def test_setup_logging_twice_keeps_two_handlers(tmp_path, restore_root_logger):
    setup_logging(str(tmp_path / "logs"))
    setup_logging(str(tmp_path / "logs"))

    assert len(logging.getLogger().handlers) == 2
