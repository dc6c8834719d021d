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
Checklist loader.

A checklist is a YAML (or JSON, which YAML accepts) document::

    name: docker host baseline
    checklist:
      - id: dockerimage
        parameters: [ubuntu]
      - id: dockerrunning
        parameters: [redis]

Keys are matched case-insensitively, so ``Name`` / ``Checklist`` / ``ID`` /
``Parameters`` work too.  Scalar parameters are converted to strings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ChecklistLoadError
from .models import CheckEntry, Checklist

logger = logging.getLogger(__name__)


def _lower_keys(data: dict[Any, Any]) -> dict[str, Any]:
    return {str(key).lower(): value for key, value in data.items()}


class ChecklistLoader:
    """Loads :class:`Checklist` objects from files or parsed data."""

    def load_checklist(self, path: str | Path) -> Checklist:
        """Load a checklist from *path*.

        Raises:
            ChecklistLoadError: If the file is missing, unreadable or malformed.
        """
        path = Path(path)
        if not path.is_file():
            raise ChecklistLoadError(f"Checklist file not found: {path}")

        try:
            with open(path, encoding="utf-8") as fh:
                raw = yaml.safe_load(fh)
        except (OSError, yaml.YAMLError) as e:
            raise ChecklistLoadError(f"Failed to read checklist {path}: {e}") from e

        checklist = self.parse_checklist(raw, default_name=path.stem)
        checklist.source = path
        return checklist

    def parse_checklist(self, raw: Any, default_name: str = "checklist") -> Checklist:
        """Build a checklist from already-parsed YAML/JSON data."""
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ChecklistLoadError(f"Checklist must be a mapping, got {type(raw).__name__}")
        data = _lower_keys(raw)

        entries = data.get("checklist")
        if entries is None:
            entries = data.get("checks") or []
        if not isinstance(entries, list):
            raise ChecklistLoadError("'checklist' must be a list of checks")

        checks = [self._parse_entry(entry, position) for position, entry in enumerate(entries, 1)]
        name = str(data.get("name") or default_name)
        logger.debug("Loaded checklist '%s' with %d check(s)", name, len(checks))
        return Checklist(name=name, checks=checks)

    @staticmethod
    def _parse_entry(entry: Any, position: int) -> CheckEntry:
        if not isinstance(entry, dict):
            raise ChecklistLoadError(f"Check #{position} must be a mapping, got {type(entry).__name__}")
        data = _lower_keys(entry)

        check_id = data.get("id") or data.get("check")
        if not check_id:
            raise ChecklistLoadError(f"Check #{position} has no 'id'")

        parameters = data.get("parameters")
        if parameters is None:
            parameters = []
        elif not isinstance(parameters, list):
            raise ChecklistLoadError(f"Check #{position} ('{check_id}'): 'parameters' must be a list")
        for value in parameters:
            if isinstance(value, (dict, list)):
                raise ChecklistLoadError(f"Check #{position} ('{check_id}'): parameters must be scalars")

        return CheckEntry(
            check_id=str(check_id),
            parameters=["" if value is None else str(value) for value in parameters],
        )


def load_checklist(path: str | Path) -> Checklist:
    """Convenience wrapper around :meth:`ChecklistLoader.load_checklist`."""
    return ChecklistLoader().load_checklist(path)
