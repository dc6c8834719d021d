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
Data models for checks, verdicts and checklist results.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Verdict:
    """Result of a single check invocation.

    An exit code of ``0`` means the check passed and carries no message.
    Any other exit code is a failure and must explain itself.
    """

    exit_code: int = 0
    message: str = ""

    def __post_init__(self):
        if self.exit_code == 0 and self.message:
            raise ValueError("A passing verdict cannot carry a message")
        if self.exit_code != 0 and not self.message:
            raise ValueError("A failing verdict requires a diagnostic message")

    @classmethod
    def ok(cls) -> Verdict:
        return cls(0, "")

    @classmethod
    def fail(cls, message: str, exit_code: int = 1) -> Verdict:
        return cls(exit_code, message)

    @property
    def passed(self) -> bool:
        return self.exit_code == 0

    def to_dict(self) -> dict[str, Any]:
        return {"exit_code": self.exit_code, "message": self.message}


CheckHandler = Callable[[list[str]], Verdict]


@dataclass(frozen=True)
class CheckDefinition:
    """A registered check: its name, handler and fixed parameter count."""

    name: str
    handler: CheckHandler
    parameter_count: int


@dataclass
class CheckEntry:
    """One line of a checklist: which check to run with which parameters."""

    check_id: str
    parameters: list[str] = field(default_factory=list)


@dataclass
class Checklist:
    """A named, ordered list of checks loaded from a checklist file."""

    name: str
    checks: list[CheckEntry] = field(default_factory=list)
    source: Path | None = None

    def __len__(self) -> int:
        return len(self.checks)


@dataclass
class CheckOutcome:
    """Verdict of one checklist entry, plus how it got there."""

    check_id: str
    parameters: list[str]
    verdict: Verdict
    duration_seconds: float = 0.0
    error: str | None = None

    @property
    def passed(self) -> bool:
        return self.verdict.passed

    def to_dict(self) -> dict[str, Any]:
        return {
            "check_id": self.check_id,
            "parameters": list(self.parameters),
            "passed": self.passed,
            "exit_code": self.verdict.exit_code,
            "message": self.verdict.message,
            "duration_seconds": round(self.duration_seconds, 4),
            "error": self.error,
        }


@dataclass
class ChecklistResult:
    """Results of running every check in a checklist."""

    checklist_name: str
    outcomes: list[CheckOutcome] = field(default_factory=list)
    duration_seconds: float = 0.0
    timestamp: datetime = field(default_factory=datetime.now)
    source: str | None = None

    @property
    def total_count(self) -> int:
        return len(self.outcomes)

    @property
    def passed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def failed_count(self) -> int:
        return self.total_count - self.passed_count

    @property
    def all_passed(self) -> bool:
        return self.failed_count == 0

    def get_failures(self) -> list[CheckOutcome]:
        """Get all outcomes whose verdict did not pass."""
        return [o for o in self.outcomes if not o.passed]

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary for JSON serialization."""
        return {
            "checklist_name": self.checklist_name,
            "source": self.source,
            "all_passed": self.all_passed,
            "total_checks": self.total_count,
            "passed": self.passed_count,
            "failed": self.failed_count,
            "duration_seconds": round(self.duration_seconds, 4),
            "timestamp": self.timestamp.isoformat(),
            "outcomes": [o.to_dict() for o in self.outcomes],
        }
