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
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest before running tests.
All fixtures defined here are available to every test module without
explicit imports.

Nothing here talks to a real docker binary or daemon: command output and
API responses are canned, describing the same host in both forms.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

import httpx
import pytest

from hostprobe.config.config import Config
from hostprobe.core.acquisition import DockerAPIProvider, DockerCLIProvider
from hostprobe.core.check_registry import CheckRegistry, build_default_registry
from hostprobe.core.command_runner import CommandResult

# ---------------------------------------------------------------------------
# Canned host state: "redis" running, "mysql" stopped
# ---------------------------------------------------------------------------

DOCKER_PS_OUTPUT = """\
CONTAINER ID   IMAGE     COMMAND                  CREATED        STATUS                   PORTS      NAMES
4c01db0b339c   redis     "docker-entrypoint.s…"   3 hours ago    Up 3 hours               6379/tcp   cache
d7886598dbe2   mysql     "docker-entrypoint.s…"   5 hours ago    Exited (0) 2 hours ago   3306/tcp   db
"""

DOCKER_IMAGES_OUTPUT = """\
REPOSITORY   TAG       IMAGE ID       CREATED       SIZE
ubuntu       22.04     3b418d7b466a   2 weeks ago   77.8MB
alpine       latest    c1aabb73d233   3 weeks ago   7.33MB
"""

API_CONTAINERS = [
    {"Id": "4c01db0b339c", "Image": "redis", "State": "running", "Status": "Up 3 hours", "Names": ["/cache"]},
    {"Id": "d7886598dbe2", "Image": "mysql", "State": "exited", "Status": "Exited (0) 2 hours ago", "Names": ["/db"]},
]

PERMISSION_DENIED_OUTPUT = (
    "permission denied while trying to connect to the Docker daemon socket at "
    "unix:///var/run/docker.sock: Get \"http://%2Fvar%2Frun%2Fdocker.sock/v1.24/containers/json\": "
    "dial unix /var/run/docker.sock: connect: permission denied\n"
)


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class FakeCommandRunner:
    """Command runner test double keyed on the argv after the binary name."""

    def __init__(self, outputs: dict[tuple[str, ...], tuple[str, int]] | None = None):
        self.outputs = dict(outputs or {})
        self.calls: list[tuple[str, ...]] = []

    def __call__(self, argv: Sequence[str]) -> CommandResult:
        argv = tuple(argv)
        self.calls.append(argv)
        output, returncode = self.outputs.get(argv[1:], (f"unknown command: {' '.join(argv)}", 1))
        return CommandResult(argv, output, returncode)


def docker_api_handler(containers: list[dict]):
    """Build an httpx handler that serves ``/containers/json`` like the daemon.

    The ``status`` filter is honoured, so a client that forgets to send it
    gets stopped containers back.
    """

    def _handler(request: httpx.Request) -> httpx.Response:
        if request.url.path != "/containers/json":
            return httpx.Response(404, json={"message": "page not found"})
        result = list(containers)
        filters = request.url.params.get("filters")
        if filters:
            wanted = json.loads(filters).get("status")
            if wanted:
                result = [c for c in result if c.get("State") in wanted]
        return httpx.Response(200, json=result)

    return _handler


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def config(monkeypatch) -> Config:
    """Config with no HOSTPROBE_* environment leaking in."""
    for key in (
        "HOSTPROBE_DOCKER_BINARY",
        "HOSTPROBE_DOCKER_ENDPOINT",
        "HOSTPROBE_COMMAND_TIMEOUT",
        "HOSTPROBE_API_TIMEOUT",
        "HOSTPROBE_CASE_SENSITIVE_HEADERS",
        "HOSTPROBE_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    return Config()


@pytest.fixture
def fake_runner() -> FakeCommandRunner:
    """Runner that answers ``docker ps -a`` and ``docker images`` with canned output."""
    return FakeCommandRunner(
        {
            ("ps", "-a"): (DOCKER_PS_OUTPUT, 0),
            ("images",): (DOCKER_IMAGES_OUTPUT, 0),
        }
    )


@pytest.fixture
def denied_runner() -> FakeCommandRunner:
    """Runner for a user that is not allowed to talk to the docker daemon."""
    return FakeCommandRunner(
        {
            ("ps", "-a"): (PERMISSION_DENIED_OUTPUT, 1),
            ("images",): (PERMISSION_DENIED_OUTPUT, 1),
        }
    )


@pytest.fixture
def runner_factory():
    """Build a :class:`FakeCommandRunner` from an ``{argv: (output, rc)}`` map."""
    return FakeCommandRunner


@pytest.fixture
def api_handler_factory():
    """Build a mock daemon handler from a list of container dicts."""
    return docker_api_handler


@pytest.fixture
def cli_provider(fake_runner) -> DockerCLIProvider:
    return DockerCLIProvider(runner=fake_runner)


@pytest.fixture
def api_transport() -> httpx.MockTransport:
    return httpx.MockTransport(docker_api_handler(API_CONTAINERS))


@pytest.fixture
def api_provider_factory(api_transport):
    """Factory building API providers on the mock transport, recording endpoints."""
    endpoints: list[str] = []

    def _factory(endpoint: str) -> DockerAPIProvider:
        endpoints.append(endpoint)
        return DockerAPIProvider(endpoint, transport=api_transport)

    _factory.endpoints = endpoints
    return _factory


@pytest.fixture
def registry(config, cli_provider, api_provider_factory) -> CheckRegistry:
    """Default registry wired to the canned host state."""
    return build_default_registry(
        config,
        cli_provider=cli_provider,
        api_provider_factory=api_provider_factory,
    )
