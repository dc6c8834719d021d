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
Docker state acquired from the Docker Engine API.

Endpoints are given the way the docker CLI accepts them in ``DOCKER_HOST``:

* ``unix:///var/run/docker.sock`` – local unix socket
* ``tcp://host:2375`` – plain HTTP over TCP
* ``http://host:2375`` / ``https://host:2376`` – explicit scheme

The container list is filtered by the daemon (``status=running``) and then
once more here on the ``Status`` text, so that both filters have to agree
before a container counts as running.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import SplitResult, urlsplit

import httpx

from ...config.constants import HostProbeConstants
from ..exceptions import AcquisitionError
from .base import ResourceStateProvider

logger = logging.getLogger(__name__)

# Host name used in URLs sent over a unix socket; the daemon ignores it.
_UNIX_SOCKET_BASE_URL = "http://docker"


def _check_port(parts: SplitResult, endpoint: str) -> None:
    """Raise ValueError if *endpoint* carries a port that is not a number."""
    # urlsplit only validates the port when .port is read
    try:
        parts.port
    except ValueError as e:
        raise ValueError(f"Invalid port in endpoint '{endpoint}': {e}") from None


class DockerAPIClient:
    """
    Minimal synchronous Docker Engine API client.

    :param endpoint: Daemon address (``unix://``, ``tcp://``, ``http(s)://``)
    :param timeout: Seconds before a request is abandoned
    :param transport: Optional httpx transport, replaces the socket/TCP one
    :raises ValueError: If *endpoint* is empty or has an unsupported scheme
    """

    def __init__(
        self,
        endpoint: str,
        timeout: float = HostProbeConstants.DEFAULT_API_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.endpoint = endpoint
        base_url, socket_path = self.parse_endpoint(endpoint)
        if transport is None and socket_path is not None:
            transport = httpx.HTTPTransport(uds=socket_path)
        self.base_url = base_url
        self.session = httpx.Client(
            base_url=base_url,
            transport=transport,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    @staticmethod
    def parse_endpoint(endpoint: str) -> tuple[str, str | None]:
        """Return ``(base_url, unix_socket_path)`` for *endpoint*."""
        if not endpoint or not endpoint.strip():
            raise ValueError("Docker endpoint is empty")
        parts = urlsplit(endpoint.strip())
        scheme = parts.scheme.lower()
        if scheme == "unix":
            path = parts.path or parts.netloc
            if not path:
                raise ValueError(f"No socket path in endpoint '{endpoint}'")
            return _UNIX_SOCKET_BASE_URL, path
        if scheme in ("tcp", "http", "https"):
            _check_port(parts, endpoint)
        if scheme == "tcp":
            if not parts.netloc:
                raise ValueError(f"No host in endpoint '{endpoint}'")
            return f"http://{parts.netloc}", None
        if scheme in ("http", "https"):
            if not parts.netloc:
                raise ValueError(f"No host in endpoint '{endpoint}'")
            return f"{scheme}://{parts.netloc}{parts.path.rstrip('/')}", None
        raise ValueError(f"Unsupported Docker endpoint scheme '{parts.scheme}' in '{endpoint}'")

    def get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        """GET *path* and decode the JSON body.

        Raises:
            httpx.HTTPError: On transport failure or a non-2xx status
            ValueError: If the body is not valid JSON
        """
        response = self.session.get(path, params=params)
        response.raise_for_status()
        return response.json()

    def list_containers(self, all: bool = False, filters: dict[str, list[str]] | None = None) -> list[dict]:
        """List containers, as ``docker ps`` would."""
        params = {"all": "1" if all else "0"}
        if filters:
            params["filters"] = json.dumps(filters)
        containers = self.get_json("/containers/json", params=params)
        if not isinstance(containers, list):
            raise ValueError(f"Expected a list of containers, got {type(containers).__name__}")
        return containers

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> DockerAPIClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class DockerAPIProvider(ResourceStateProvider):
    """
    Reads running containers from the Docker Engine API.

    A new client is built for every call so no connection outlives a check.

    :param endpoint: Daemon address passed to :class:`DockerAPIClient`
    :param timeout: Request timeout in seconds
    :param transport: Optional httpx transport (tests use ``httpx.MockTransport``)
    """

    def __init__(
        self,
        endpoint: str,
        timeout: float = HostProbeConstants.DEFAULT_API_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        super().__init__("docker-api")
        self.endpoint = endpoint
        self.timeout = timeout
        self.transport = transport

    def _create_client(self) -> DockerAPIClient:
        try:
            return DockerAPIClient(self.endpoint, timeout=self.timeout, transport=self.transport)
        except (ValueError, httpx.InvalidURL) as e:
            raise AcquisitionError(
                f"connect {self.endpoint}",
                f"Couldn't create Docker API client for '{self.endpoint}': {e}",
            ) from e

    def list_running_identifiers(self) -> list[str]:
        """Return the image of every running container."""
        with self._create_client() as client:
            try:
                containers = client.list_containers(all=False, filters={"status": ["running"]})
            except (httpx.HTTPError, ValueError) as e:
                raise AcquisitionError(
                    "GET /containers/json",
                    f"Couldn't list Docker containers at '{self.endpoint}': {e}",
                ) from e

        running = []
        for container in containers:
            if not isinstance(container, dict):
                logger.debug("%s: skipping non-object container entry %r", self.name, container)
                continue
            if HostProbeConstants.RUNNING_MARKER in str(container.get("Status", "")):
                running.append(str(container.get("Image", "")))
        logger.debug("%s: %d running container(s) at %s", self.name, len(running), self.endpoint)
        return running
