# elkargs/config/logging_config.py

import logging
import logging.config
import os
from typing import Any, Dict, List

from elkargs.config.settings import Settings

LOG_FILE_NAME = "elkargs.log"


def build_logging_config(settings: Settings) -> Dict[str, Any]:
    """
    Build the dictConfig mapping for the given Settings.

    - Root logger: console, plus <logs_dir>/app/elkargs.log when logs_dir is set
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    handlers: Dict[str, Dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "standard",
            "stream": "ext://sys.stdout",
        },
    }

    if settings.logs_dir:
        app_dir = os.path.join(settings.logs_dir, "app")
        os.makedirs(app_dir, exist_ok=True)
        handlers["app_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": "standard",
            "filename": os.path.join(app_dir, LOG_FILE_NAME),
            "mode": "a",
            "maxBytes": 10_000_000,   # 10 MB
            "backupCount": 5,
            "encoding": "utf-8",
        }

    handler_names: List[str] = list(handlers)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            "py.warnings": {
                "handlers": handler_names,
                "level": "WARNING",
                "propagate": False,
            },
        },
        "root": {
            "handlers": handler_names,
            "level": level,
        },
    }


def configure_logging(settings: Settings) -> None:
    """Configure application-wide logging from Settings."""
    logging.captureWarnings(True)
    logging.config.dictConfig(build_logging_config(settings))
