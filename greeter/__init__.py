"""
Greeter HTTP server.

This package serves three fixed plain-text greetings over HTTP using a
FastAPI application run by uvicorn.
"""

from greeter.config import ServerConfig, load_config
from greeter.errors import ConfigError, GreeterError
from greeter.server import ROUTES, StaticRoute, create_app, serve

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "ServerConfig",
    "load_config",
    # Errors
    "ConfigError",
    "GreeterError",
    # Server
    "ROUTES",
    "StaticRoute",
    "create_app",
    "serve",
]
