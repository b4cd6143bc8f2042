"""Logging configuration setup."""

import copy
import logging
import logging.config
import os
import sys
from datetime import datetime
from typing import Optional, Tuple

from organism.constants import DEFAULT_LOG_LEVEL, LOG_DIR, VALID_LOG_LEVELS

BASE_LOG_CFG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple_file": {
            "format": ("%(asctime)s - %(name)25s:%(lineno)-4d - " "%(levelname)-7s - %(message)s"),
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "file_handler": {
            "class": "logging.FileHandler",
            "level": "DEBUG",
            "formatter": "simple_file",
            "filename": "temp_log_name.log",
            "encoding": "utf-8",
        },
    },
    "loggers": {
        "organism": {
            "handlers": ["file_handler"],
            "propagate": False,
            "level": "INFO",
        },
        "organism.config": {
            "handlers": ["file_handler"],
            "propagate": False,
            "level": "INFO",
        },
    },
    "root": {
        "handlers": ["file_handler"],
        "level": "WARNING",
    },
}


def setup_logging(
    log_lvl_str: str = DEFAULT_LOG_LEVEL,
    *,
    log_dir: Optional[str] = None,
    quiet: bool = False,
) -> Tuple[str, str]:
    """
    Set up the logging system.

    Writes to a timestamped file under *log_dir* and applies the requested
    level to the package loggers.

    Args:
        log_lvl_str: The desired log level string (e.g., 'debug', 'info').
        log_dir: Directory for the log file (defaults to ``logs``).
        quiet: If *True*, suppress all ``print()`` output.

    Returns:
        A tuple of (log_file_path, validated_log_level).
    """
    log_lvl_valid = log_lvl_str.upper()
    if log_lvl_valid not in VALID_LOG_LEVELS:
        if not quiet:
            print(f"Warning: invalid log level '{log_lvl_str}'. Using 'INFO'.")
        log_lvl_valid = "INFO"

    log_dir = log_dir or LOG_DIR
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    os.makedirs(log_dir, exist_ok=True)
    log_fpath = os.path.join(log_dir, f"organism_{ts}_{log_lvl_valid}.log")

    log_cfg: dict = copy.deepcopy(BASE_LOG_CFG)
    log_cfg["handlers"]["file_handler"]["filename"] = log_fpath
    for logger_cfg in log_cfg["loggers"].values():
        logger_cfg["level"] = log_lvl_valid
    log_cfg["root"]["level"] = log_lvl_valid if log_lvl_valid == "DEBUG" else "WARNING"

    try:
        logging.config.dictConfig(log_cfg)
        if not quiet:
            print(
                f"Logging initialized. File log level: {log_lvl_valid}, " f"log file: {log_fpath}"
            )
    except (ValueError, TypeError, AttributeError, ImportError) as e_log_cfg:
        print(
            f"Error applying logging configuration: {e_log_cfg}",
            file=sys.stderr,
        )

    return log_fpath, log_lvl_valid
