"""
Tests for the configuration module.

This module contains tests for ServerConfig and load_config, covering the
defaults, the YAML file and the log level taken from the environment.
"""

from pathlib import Path

import pytest

from greeter.config import DEFAULT_CONFIG_PATH, ServerConfig, load_config
from greeter.errors import ConfigError, GreeterError


class TestServerConfig:
    """Test suite for ServerConfig."""

    def test_defaults(self):
        """Test the default listening address."""
        config = ServerConfig()

        assert config.host == "127.0.0.1"
        assert config.port == 3000
        assert config.url == "http://127.0.0.1:3000/"

    @pytest.mark.parametrize("port", [-1, 65536, "3000", True])
    def test_invalid_port_raises_error(self, port):
        """Test out-of-range or non-integer ports are rejected."""
        with pytest.raises(ConfigError):
            ServerConfig(port=port)

    @pytest.mark.parametrize("host", ["", "   ", None])
    def test_invalid_host_raises_error(self, host):
        """Test empty hosts are rejected."""
        with pytest.raises(ConfigError) as excinfo:
            ServerConfig(host=host)

        assert "host must be a non-empty string" in str(excinfo.value)

    def test_invalid_log_level_raises_error(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ConfigError):
            ServerConfig(log_level="chatty")

    def test_config_error_is_value_error(self):
        """Test ConfigError can be caught as ValueError or GreeterError."""
        assert issubclass(ConfigError, ValueError)
        assert issubclass(ConfigError, GreeterError)


class TestLoadConfig:
    """Test suite for load_config."""

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test a missing config file falls back to defaults."""
        config = load_config(tmp_path / "absent.yml", env={})

        assert config == ServerConfig()

    def test_shipped_file_matches_defaults(self):
        """Test the bundled config/server.yml holds 127.0.0.1:3000."""
        assert Path(DEFAULT_CONFIG_PATH).exists()

        config = load_config(env={})

        assert (config.host, config.port) == ("127.0.0.1", 3000)

    def test_file_values_are_used(self, config_file):
        """Test host and port are read from the server section."""
        path = config_file("server:\n  host: 0.0.0.0\n  port: 8080\n")

        config = load_config(path, env={})

        assert config.host == "0.0.0.0"
        assert config.port == 8080

    def test_environment_sets_only_log_level(self, tmp_path):
        """Test GREETER_LOG_LEVEL applies while host/port variables are ignored."""
        config = load_config(
            tmp_path / "absent.yml",
            env={"GREETER_HOST": "0.0.0.0", "GREETER_PORT": "0", "GREETER_LOG_LEVEL": "debug"},
        )

        assert (config.host, config.port) == ("127.0.0.1", 3000)
        assert config.log_level == "debug"

    def test_listener_stays_fixed_with_environ(self, monkeypatch):
        """Test stray host/port variables in os.environ never move the listener."""
        monkeypatch.setenv("GREETER_HOST", "0.0.0.0")
        monkeypatch.setenv("GREETER_PORT", "0")

        config = load_config()

        assert config.url == "http://127.0.0.1:3000/"

    def test_non_numeric_port_raises_error(self, config_file):
        """Test a non-numeric port in the file is rejected."""
        with pytest.raises(ConfigError) as excinfo:
            load_config(config_file("server:\n  port: http\n"), env={})

        assert "port must be an integer" in str(excinfo.value)

    def test_empty_file_uses_defaults(self, config_file):
        """Test an empty YAML document is treated as no settings."""
        config = load_config(config_file(""), env={})

        assert config == ServerConfig()

    @pytest.mark.parametrize("text", ["- a\n- b\n", "server: 3000\n"])
    def test_non_mapping_raises_error(self, config_file, text):
        """Test documents that are not mappings are rejected."""
        with pytest.raises(ConfigError):
            load_config(config_file(text), env={})

    def test_malformed_yaml_raises_error(self, config_file):
        """Test YAML syntax errors surface as ConfigError."""
        with pytest.raises(ConfigError) as excinfo:
            load_config(config_file("server: [unclosed\n"), env={})

        assert "Error parsing configuration" in str(excinfo.value)
