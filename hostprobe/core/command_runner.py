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

"""Run external commands and capture their combined output."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..config.constants import HostProbeConstants
from .exceptions import AcquisitionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Combined stdout/stderr of a finished command and its exit status."""

    argv: tuple[str, ...]
    output: str
    returncode: int

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    @property
    def command_line(self) -> str:
        return " ".join(self.argv)


CommandRunner = Callable[[Sequence[str]], CommandResult]


def run_command(argv: Sequence[str], timeout: float | None = None) -> CommandResult:
    """
    Run *argv* and return its combined output.

    A binary that cannot be executed is reported as a failed result with
    return code 127 rather than an exception, the same way a shell would.
    Output is decoded as UTF-8; undecodable bytes become U+FFFD.

    Args:
        argv: Program and arguments
        timeout: Seconds to wait before giving up (``None`` waits forever)

    Returns:
        CommandResult with stderr folded into ``output``

    Raises:
        AcquisitionError: If the command does not finish within *timeout*
    """
    argv = tuple(argv)
    command_line = " ".join(argv)
    logger.debug("Running: %s", command_line)
    try:
        completed = subprocess.run(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        raise AcquisitionError(command_line, f"Timed out after {timeout}s running: {command_line}") from None
    except OSError as e:
        logger.debug("Could not execute %s: %s", command_line, e)
        return CommandResult(argv, str(e), HostProbeConstants.COMMAND_NOT_FOUND_RETURNCODE)

    logger.debug("%s exited with %d", command_line, completed.returncode)
    return CommandResult(argv, completed.stdout or "", completed.returncode)


def make_command_runner(timeout: float | None = None) -> CommandRunner:
    """Return a runner bound to *timeout*, for injection into providers."""

    def _run(argv: Sequence[str]) -> CommandResult:
        return run_command(argv, timeout=timeout)

    return _run
