# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""
Tests for configuration module.
"""

import importlib.metadata
import os
from pathlib import Path
from unittest.mock import patch

import pytest

import hostprobe
from hostprobe.config.config import Config
from hostprobe.config.constants import HostProbeConstants


def _clean_env() -> dict:
    return {k: v for k, v in os.environ.items() if not k.startswith("HOSTPROBE_")}


class TestConfigInitialization:
    """Test Config class initialization."""

    def test_config_with_defaults(self):
        """Test config initialization with default values."""
        with patch.dict("os.environ", _clean_env(), clear=True):
            config = Config()

            assert config.docker_binary == "docker"
            assert config.docker_endpoint == "unix:///var/run/docker.sock"
            assert config.command_timeout is None
            assert config.api_timeout == HostProbeConstants.DEFAULT_API_TIMEOUT
            assert not config.case_sensitive_headers
            assert config.log_level == "WARNING"

    def test_config_with_custom_values(self):
        """Test config with custom values."""
        config = Config(docker_binary="podman", command_timeout=5.0, docker_endpoint="tcp://10.0.0.5:2375")

        assert config.docker_binary == "podman"
        assert config.command_timeout == 5.0
        assert config.docker_endpoint == "tcp://10.0.0.5:2375"

    def test_config_from_env_variables(self):
        """Test config loading from environment variables."""
        env = _clean_env()
        env.update(
            {
                "HOSTPROBE_DOCKER_BINARY": "/opt/bin/docker",
                "HOSTPROBE_DOCKER_ENDPOINT": "tcp://docker.test:2375",
                "HOSTPROBE_COMMAND_TIMEOUT": "12",
                "HOSTPROBE_API_TIMEOUT": "2.5",
                "HOSTPROBE_CASE_SENSITIVE_HEADERS": "true",
                "HOSTPROBE_LOG_LEVEL": "info",
            }
        )
        with patch.dict("os.environ", env, clear=True):
            config = Config.from_env()

            assert config.docker_binary == "/opt/bin/docker"
            assert config.docker_endpoint == "tcp://docker.test:2375"
            assert config.command_timeout == 12.0
            assert config.api_timeout == 2.5
            assert config.case_sensitive_headers
            assert config.log_level == "INFO"

    def test_explicit_values_win_over_environment(self):
        """Test constructor arguments are not overridden by the environment."""
        with patch.dict("os.environ", {"HOSTPROBE_DOCKER_BINARY": "/opt/bin/docker"}):
            config = Config(docker_binary="podman")
            assert config.docker_binary == "podman"

    def test_invalid_timeout_rejected(self):
        """Test a non-numeric timeout is reported with its variable name."""
        with patch.dict("os.environ", {"HOSTPROBE_COMMAND_TIMEOUT": "soon"}):
            with pytest.raises(ValueError, match="HOSTPROBE_COMMAND_TIMEOUT"):
                Config()

    def test_blank_timeout_ignored(self):
        """Test an empty timeout variable means no timeout."""
        env = _clean_env()
        env["HOSTPROBE_COMMAND_TIMEOUT"] = "  "
        with patch.dict("os.environ", env, clear=True):
            assert Config().command_timeout is None


class TestConfigFromFile:
    """Test loading config from .env file."""

    def test_config_from_env_file(self, tmp_path, monkeypatch):
        """Test loading configuration from .env file."""
        # Registered so monkeypatch removes what load_dotenv sets.
        for key in ("HOSTPROBE_DOCKER_ENDPOINT", "HOSTPROBE_API_TIMEOUT"):
            monkeypatch.setenv(key, "placeholder")
            monkeypatch.delenv(key)

        env_file = tmp_path / ".env"
        env_file.write_text("HOSTPROBE_DOCKER_ENDPOINT=tcp://from-file:2375\nHOSTPROBE_API_TIMEOUT=7\n")

        config = Config.from_file(env_file)

        assert config.docker_endpoint == "tcp://from-file:2375"
        assert config.api_timeout == 7.0

    def test_environment_wins_over_env_file(self, tmp_path, monkeypatch):
        """Test existing environment variables are not overridden by the file."""
        monkeypatch.setenv("HOSTPROBE_DOCKER_ENDPOINT", "tcp://from-env:2375")
        env_file = tmp_path / ".env"
        env_file.write_text("HOSTPROBE_DOCKER_ENDPOINT=tcp://from-file:2375\n")

        assert Config.from_file(env_file).docker_endpoint == "tcp://from-env:2375"

    def test_missing_env_file(self, config):
        """Test a missing file falls back to the environment."""
        assert Config.from_file(Path("/nonexistent/.env")).docker_binary == config.docker_binary


class TestConstants:
    """Test exit code constants."""

    def test_exit_codes(self):
        assert HostProbeConstants.EXIT_OK == 0
        assert HostProbeConstants.EXIT_FAILED == 1
        assert HostProbeConstants.EXIT_FATAL == 2

    def test_version_matches_installed_distribution(self):
        """Test the reported version is the one the package was installed as."""
        installed = importlib.metadata.version("hostprobe")

        assert HostProbeConstants.VERSION == installed
        assert hostprobe.__version__ == installed
