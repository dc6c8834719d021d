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
Checklist runner that drives a check registry.

Checks run one after another.  A configuration problem with one check
(unknown name, wrong parameter count, bad regex) is recorded as a failed
outcome and the run continues.  An :class:`AcquisitionError` means the
host state could not be read at all; it is not caught here and ends the
run.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from pathlib import Path

from .check_registry import CheckRegistry
from .exceptions import ConfigurationError
from .loader import ChecklistLoader
from .models import CheckEntry, Checklist, ChecklistResult, CheckOutcome, Verdict

logger = logging.getLogger(__name__)


class ChecklistRunner:
    """Runs checklists against a registry."""

    def __init__(self, registry: CheckRegistry, loader: ChecklistLoader | None = None):
        """
        Initialize runner.

        Args:
            registry: Populated, read-only check registry
            loader: Checklist loader (default: ChecklistLoader())
        """
        self.registry = registry
        self.loader = loader or ChecklistLoader()

    def run_check(self, check_id: str, parameters: Sequence[str]) -> CheckOutcome:
        """Run a single check and wrap its verdict in an outcome.

        Raises:
            AcquisitionError: If host state could not be acquired.
        """
        parameters = list(parameters)
        start_time = time.time()
        error = None
        try:
            verdict = self.registry.invoke(check_id, parameters)
        except ConfigurationError as e:
            logger.warning("Check %s is misconfigured: %s", check_id, e)
            verdict = Verdict.fail(str(e))
            error = type(e).__name__
        duration = time.time() - start_time

        if verdict.passed:
            logger.info("PASS %s %s", check_id, parameters)
        else:
            logger.info("FAIL %s %s", check_id, parameters)
        return CheckOutcome(
            check_id=check_id,
            parameters=parameters,
            verdict=verdict,
            duration_seconds=duration,
            error=error,
        )

    def run_checklist(self, checklist: Checklist, fail_fast: bool = False) -> ChecklistResult:
        """Run every check in *checklist*, in order.

        Args:
            checklist: Checklist to run
            fail_fast: Stop after the first failed check

        Returns:
            ChecklistResult with one outcome per executed check
        """
        start_time = time.time()
        result = ChecklistResult(
            checklist_name=checklist.name,
            source=str(checklist.source) if checklist.source else None,
        )
        for entry in checklist.checks:
            outcome = self.run_check(entry.check_id, entry.parameters)
            result.outcomes.append(outcome)
            if fail_fast and not outcome.passed:
                logger.info("Stopping after first failure (%s)", entry.check_id)
                break
        result.duration_seconds = time.time() - start_time
        return result

    def run_file(self, path: str | Path, fail_fast: bool = False) -> ChecklistResult:
        """Load the checklist at *path* and run it."""
        return self.run_checklist(self.loader.load_checklist(path), fail_fast=fail_fast)


def run_checks(registry: CheckRegistry, entries: Sequence[CheckEntry], name: str = "adhoc") -> ChecklistResult:
    """Convenience function to run a list of entries without a checklist file."""
    return ChecklistRunner(registry).run_checklist(Checklist(name=name, checks=list(entries)))
