# item_tally/utilities/config_logging.py
from __future__ import annotations

import copy
import logging.config
from typing import Any, Dict, Optional

from item_tally.utilities.settings import ReportSettings

LOGGING: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": "logs/item_tally.log",
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        },
    },
    "loggers": {
        # root logger
        "": {
            "level": "DEBUG",
            "handlers": ["console", "file"],
        },
        # workbook reader is chatty at DEBUG
        "openpyxl": {"level": "WARNING", "propagate": True},
    },
}


def build_logging_config(settings: Optional[ReportSettings] = None) -> Dict[str, Any]:
    """Return a copy of ``LOGGING`` pointed at the configured file and console level."""
    settings = settings or ReportSettings()
    cfg = copy.deepcopy(LOGGING)
    cfg["handlers"]["file"]["filename"] = str(settings.log_file)
    cfg["handlers"]["console"]["level"] = settings.log_level
    return cfg


def configure_logging(settings: Optional[ReportSettings] = None) -> Dict[str, Any]:
    """Create the log directory and apply the dictConfig. Returns the applied config."""
    settings = settings or ReportSettings()
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    cfg = build_logging_config(settings)
    logging.config.dictConfig(cfg)
    return cfg
