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
Constants for Host Probe.
"""

try:
    from .._version import __version__ as PACKAGE_VERSION
except Exception:  # pragma: no cover
    PACKAGE_VERSION = "0.0.0-dev"


class HostProbeConstants:
    """Constants used throughout the probe."""

    VERSION = PACKAGE_VERSION

    # Process exit codes
    EXIT_OK = 0
    EXIT_FAILED = 1
    EXIT_FATAL = 2

    # Docker defaults
    DEFAULT_DOCKER_BINARY = "docker"
    DEFAULT_DOCKER_ENDPOINT = "unix:///var/run/docker.sock"
    DEFAULT_API_TIMEOUT = 30.0

    # Markers looked for in external tool output
    RUNNING_MARKER = "Up"
    PERMISSION_DENIED_MARKER = "permission denied"

    # Column headers of `docker ps -a`
    IMAGE_COLUMN = "IMAGE"
    STATUS_COLUMN = "STATUS"

    # Returned by the command runner when the binary cannot be executed
    COMMAND_NOT_FOUND_RETURNCODE = 127
