import logging
import sys
from logging.config import dictConfig
from typing import Any, Dict

from stock_tracker.core.config import APP_ENV, LOG_LEVEL

# access lines are written by request_logging_middleware
ACCESS_LOGGER = "access"
LEDGER_LOGGER = "stock_tracker.services.ledger"

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
ACCESS_FORMAT = (
    "%(asctime)s | ACCESS | %(client_addr)s | %(method)s | "
    "%(path)s | %(status_code)s | %(process_time_ms)sms"
)


def _root_level() -> str:
    if LOG_LEVEL:
        return LOG_LEVEL
    return "DEBUG" if APP_ENV == "development" else "INFO"


def build_logging_config(level: str) -> Dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": DEFAULT_FORMAT},
            "access": {"format": ACCESS_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": sys.stdout,
                "formatter": "default",
            },
            "access_console": {
                "class": "logging.StreamHandler",
                "stream": sys.stdout,
                "formatter": "access",
            },
        },
        "loggers": {
            ACCESS_LOGGER: {
                "handlers": ["access_console"],
                "level": "INFO",
                "propagate": False,
            },
            # excluded transactions are reported at WARNING; keep the
            # per-request ledger summaries at INFO even when root is DEBUG
            LEDGER_LOGGER: {"level": "INFO"},
            "sqlalchemy.engine": {"level": "WARNING"},
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
    }


def setup_logging():
    dictConfig(build_logging_config(_root_level()))
    logging.getLogger(__name__).debug("Logging configured", extra={"environment": APP_ENV})
