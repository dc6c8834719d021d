# Copyright 2026 Cisco Systems, Inc.
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
Configuration class for Host Probe.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .constants import HostProbeConstants


def _env_float(name: str) -> float | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {value!r}") from None


@dataclass
class Config:
    """
    Configuration for Host Probe.

    Explicit constructor arguments win; anything left at its default is
    filled from ``HOSTPROBE_*`` environment variables.
    """

    # External command
    docker_binary: str = HostProbeConstants.DEFAULT_DOCKER_BINARY
    command_timeout: float | None = None

    # Docker Engine API
    docker_endpoint: str = HostProbeConstants.DEFAULT_DOCKER_ENDPOINT
    api_timeout: float = HostProbeConstants.DEFAULT_API_TIMEOUT

    # Tabular parsing
    case_sensitive_headers: bool = False

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self):
        """Load configuration from environment variables if not provided."""

        if self.docker_binary == HostProbeConstants.DEFAULT_DOCKER_BINARY:
            if env_binary := os.getenv("HOSTPROBE_DOCKER_BINARY"):
                self.docker_binary = env_binary

        if self.docker_endpoint == HostProbeConstants.DEFAULT_DOCKER_ENDPOINT:
            if env_endpoint := os.getenv("HOSTPROBE_DOCKER_ENDPOINT"):
                self.docker_endpoint = env_endpoint

        if self.command_timeout is None:
            self.command_timeout = _env_float("HOSTPROBE_COMMAND_TIMEOUT")

        if self.api_timeout == HostProbeConstants.DEFAULT_API_TIMEOUT:
            env_api_timeout = _env_float("HOSTPROBE_API_TIMEOUT")
            if env_api_timeout is not None:
                self.api_timeout = env_api_timeout

        if os.getenv("HOSTPROBE_CASE_SENSITIVE_HEADERS", "").lower() in ("true", "1"):
            self.case_sensitive_headers = True

        if self.log_level == "WARNING":
            if env_level := os.getenv("HOSTPROBE_LOG_LEVEL"):
                self.log_level = env_level.upper()

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create configuration from environment variables.

        Returns:
            Config instance with values from environment
        """
        return cls()

    @classmethod
    def from_file(cls, config_file: Path) -> "Config":
        """
        Load configuration from .env file.

        Values already present in the environment are not overridden.

        Args:
            config_file: Path to .env file

        Returns:
            Config instance
        """
        if config_file.exists():
            load_dotenv(config_file, override=False)

        return cls.from_env()
