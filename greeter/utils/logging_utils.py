"""
Logging utilities for greeter.

The greeter's own messages and uvicorn's error/access logs share one format
and one set of sinks: stdout, plus a file under GREETER_LOG_DIR when that is
set. The level comes from GREETER_LOG_LEVEL unless given explicitly.
"""

import logging
import os
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level=None):
    """
    Turn a level name or number into a logging level.

    Args:
        level: Level name (e.g. "debug"), numeric level, or None to read
            GREETER_LOG_LEVEL from the environment

    Returns:
        Numeric logging level, INFO when the name is unknown
    """
    if level is None:
        level = os.environ.get("GREETER_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def _ensure_parent(log_file):
    parent = Path(log_file).parent
    parent.mkdir(parents=True, exist_ok=True)


def setup_logger(name="greeter", level=None, log_file=None, stream=None):
    """
    (Re)configure a logger with the greeter format.

    Calling it again replaces the previous handlers, so the CLI can apply the
    loaded log level after modules have already logged with the default one.

    Args:
        name: Logger name, the greeter package logger by default
        level: Level name or number (see resolve_level)
        log_file: Optional file that receives the same records as the stream
        stream: Console stream, stdout when None

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        _ensure_parent(log_file)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def uvicorn_log_config(level=None, log_file=None):
    """
    Build the dictConfig uvicorn applies at start-up.

    uvicorn installs its own logging configuration when it starts; handing it
    this one keeps its records in the greeter format and sinks.

    Args:
        level: Level name or number (see resolve_level)
        log_file: Optional file that also receives uvicorn's records

    Returns:
        dict: A logging.config.dictConfig schema
    """
    handler_names = ["console"]
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "greeter",
            "stream": "ext://sys.stdout",
        }
    }
    if log_file:
        _ensure_parent(log_file)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "greeter",
            "filename": str(log_file),
        }
        handler_names.append("file")

    numeric_level = resolve_level(level)
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"greeter": {"format": LOG_FORMAT}},
        "handlers": handlers,
        "loggers": {
            # uvicorn.error propagates into uvicorn; access has its own sinks
            "uvicorn": {"handlers": handler_names, "level": numeric_level, "propagate": False},
            "uvicorn.error": {"level": numeric_level},
            "uvicorn.access": {"handlers": handler_names, "level": numeric_level, "propagate": False},
        },
    }


def get_logger(name=None):
    """
    Get a logger, configuring its top-level package logger on first use.

    Handlers live on the package logger ("greeter") so that module loggers
    such as "greeter.server.app" propagate to a single set of handlers.

    Args:
        name: Logger name (optional)

    Returns:
        Logger instance
    """
    package_name = name.split(".")[0] if name else None
    package_logger = logging.getLogger(package_name)

    if not package_logger.hasHandlers():
        setup_logger(package_name, log_file=default_log_file(package_name))

    return logging.getLogger(name)


def default_log_file(name=None):
    """Return the log file under GREETER_LOG_DIR, or None when it is unset."""
    log_dir = os.environ.get("GREETER_LOG_DIR")
    if not log_dir:
        return None
    return Path(log_dir) / f"{name or 'greeter'}.log"
