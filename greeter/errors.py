"""Exception types raised by the greeter package."""


class GreeterError(Exception):
    """Base class for greeter errors."""


class ConfigError(GreeterError, ValueError):
    """Raised when the server configuration is invalid."""
