"""Structured JSON logging configuration for Cloud Run.

Configures Python stdlib logging to emit JSON with GCP-compatible field names.
Cloud Run auto-extracts `severity`, `message`, and other fields from JSON on stdout.

Usage:
    from notion_unfurl.logging_config import configure_logging
    configure_logging()
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "notion-unfurl",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def build_logging_config(level: str = "INFO") -> dict:
    """Return a copy of LOGGING_CONFIG with the root level set to ``level``."""
    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = level.upper()
    return config


def configure_logging(level: str = "INFO") -> None:
    """Apply structured JSON logging configuration.

    Call once at application startup (e.g., in FastAPI lifespan).
    All subsequent ``logging.getLogger()`` calls will emit JSON to stdout
    with GCP-compatible ``severity`` field mapped from Python's ``levelname``.
    """
    logging.config.dictConfig(build_logging_config(level))
