"""
Utility functions for the greeter package.

This module provides the logging helpers used across the greeter package.
"""

from greeter.utils.logging_utils import (
    default_log_file,
    get_logger,
    setup_logger,
    uvicorn_log_config,
)

__all__ = [
    "default_log_file",
    "get_logger",
    "setup_logger",
    "uvicorn_log_config",
]
