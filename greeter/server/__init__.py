"""
Server module for serving the greeting endpoints.

This module provides a FastAPI-based HTTP server exposing three static
plain-text routes.
"""

from greeter.server.app import ROUTES, StaticRoute, app, create_app
from greeter.server.runner import create_server, serve

__all__ = ["ROUTES", "StaticRoute", "app", "create_app", "create_server", "serve"]
