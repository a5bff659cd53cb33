import logging
import os
import platform
from datetime import datetime

FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def setup_logging(log_dir="logs", level="INFO"):
    """Send log records to the console and to a timestamped file.

    Existing handlers are removed first so re-running the notebook cell does
    not print every message twice. Returns the log file path.
    """
    os.makedirs(log_dir, exist_ok=True)

    run_timestamp = datetime.now().strftime("%Y%m%d_%H%M")
    log_path = os.path.join(log_dir, f"run_{run_timestamp}.log")

    logger = logging.getLogger()
    logger.setLevel(level)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    file_handler = logging.FileHandler(log_path)
    file_handler.setLevel(level)

    formatter = logging.Formatter(FORMAT)
    console_handler.setFormatter(formatter)
    file_handler.setFormatter(formatter)

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    logging.info("Starting penguin EDA run")
    logging.info("Runtime info: Python %s on %s", platform.python_version(), platform.system())
    logging.info("Logs saved to %s", log_path)
    return log_path
