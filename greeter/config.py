"""Configuration for the greeter HTTP server."""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

import yaml

from greeter.errors import ConfigError
from greeter.utils.logging_utils import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "server.yml"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class ServerConfig:
    """Listening address of the server."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    def __post_init__(self):
        if not isinstance(self.host, str) or not self.host.strip():
            raise ConfigError("host must be a non-empty string")
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise ConfigError(f"port must be an integer, got {self.port!r}")
        if not 0 <= self.port <= 65535:
            raise ConfigError(f"port must be between 0 and 65535, got {self.port}")
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}/"

    @classmethod
    def from_mapping(cls, data: Mapping) -> "ServerConfig":
        """Create config from a parsed ``server`` section."""
        config = cls()
        if "host" in data:
            config = replace(config, host=data["host"])
        if "port" in data:
            config = replace(config, port=_parse_port(data["port"]))
        if "log_level" in data:
            config = replace(config, log_level=str(data["log_level"]))
        return config


def _parse_port(value) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ConfigError(f"port must be an integer, got {value!r}") from None


def load_config_file(path: Path) -> dict:
    """
    Read the ``server`` section of a YAML config file.

    Args:
        path: Path to the YAML file

    Returns:
        dict: The section, empty when the file does not exist
    """
    if not path.exists():
        logger.debug(f"No config file at {path}, using defaults")
        return {}

    try:
        with open(path, "r") as file:
            document = yaml.safe_load(file)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing configuration from {path}: {e}") from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigError(f"Configuration in {path} must be a mapping")

    section = document.get("server", {})
    if not isinstance(section, dict):
        raise ConfigError(f"'server' section in {path} must be a mapping")
    return section


def load_config(
    path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None
) -> ServerConfig:
    """
    Build the server configuration.

    Host and port come from the defaults and the YAML file only; the
    environment can change the log level (GREETER_LOG_LEVEL) but never
    moves the listener.

    Args:
        path: YAML config file (defaults to config/server.yml)
        env: Environment mapping (defaults to os.environ)

    Returns:
        ServerConfig: The validated configuration
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
    if env is None:
        env = os.environ

    settings = dict(load_config_file(Path(path)))

    if env.get("GREETER_LOG_LEVEL"):
        settings["log_level"] = env["GREETER_LOG_LEVEL"]

    return ServerConfig.from_mapping(settings)
