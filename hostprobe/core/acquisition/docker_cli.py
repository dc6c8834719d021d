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
Docker state acquired by scraping the ``docker`` command line tool.

``docker ps -a`` lists stopped containers too; a container is running when
its STATUS column contains ``Up`` (``Up 2 hours``, ``Up 5 seconds (healthy)``).
"""

from __future__ import annotations

import logging

from ...config.constants import HostProbeConstants
from ..command_runner import CommandRunner, make_command_runner
from ..exceptions import AcquisitionError, PermissionDeniedError
from ..tabular import Table, get_column_by_header, get_column_no_header
from .base import ResourceStateProvider

logger = logging.getLogger(__name__)


class DockerCLIProvider(ResourceStateProvider):
    """
    Reads images and running containers from ``docker`` text output.

    :param runner: Callable running an argv and returning a CommandResult;
                   defaults to :func:`~hostprobe.core.command_runner.run_command`
    :param docker_binary: Name or path of the docker executable
    :param case_sensitive_headers: Match column headers exactly
    """

    def __init__(
        self,
        runner: CommandRunner | None = None,
        docker_binary: str = HostProbeConstants.DEFAULT_DOCKER_BINARY,
        case_sensitive_headers: bool = False,
    ):
        super().__init__("docker-cli")
        self.runner = runner or make_command_runner()
        self.docker_binary = docker_binary
        self.case_sensitive_headers = case_sensitive_headers

    def _run(self, *args: str) -> str:
        """Run a docker subcommand and return its output, or raise if it failed."""
        argv = [self.docker_binary, *args]
        operation = " ".join(argv)
        result = self.runner(argv)
        if not result.succeeded:
            if HostProbeConstants.PERMISSION_DENIED_MARKER in result.output.lower():
                raise PermissionDeniedError(operation)
            detail = result.output.strip() or f"exit status {result.returncode}"
            raise AcquisitionError(operation, f"Error while running `{operation}`\n\t{detail}")
        return result.output

    def _table(self, output: str) -> Table:
        table = Table.from_text(output, case_sensitive=self.case_sensitive_headers)
        if table.dropped_rows:
            logger.debug("%s: ignored %d malformed row(s)", self.name, table.dropped_rows)
        return table

    def list_images(self) -> list[str]:
        """Return the REPOSITORY column of ``docker images``."""
        table = self._table(self._run("images"))
        return get_column_no_header(0, table)

    def list_running_identifiers(self) -> list[str]:
        """Return the image of every container whose status is up."""
        table = self._table(self._run("ps", "-a"))
        if table.is_empty:
            return []
        images = get_column_by_header(HostProbeConstants.IMAGE_COLUMN, table)
        statuses = get_column_by_header(HostProbeConstants.STATUS_COLUMN, table)
        running = [
            image for image, status in zip(images, statuses) if HostProbeConstants.RUNNING_MARKER in status
        ]
        logger.debug("%s: %d of %d container(s) running", self.name, len(running), len(table))
        return running
