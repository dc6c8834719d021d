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
Check registry – name-addressable catalog of check handlers.

Architecture
~~~~~~~~~~~~

Checks are plain functions taking a list of string parameters and
returning a :class:`~hostprobe.core.models.Verdict`.  Each check is
registered under a name together with the exact number of parameters it
needs, so that a checklist written by hand can refer to it::

    registry = CheckRegistry()
    registry.register("dockerimage", docker_image, 1)
    verdict = registry.invoke("dockerimage", ["ubuntu"])

The registry is built once at startup (see :func:`build_default_registry`)
and passed explicitly to whatever runs checks.  It is **read-only** after
that, which is what makes concurrent reads safe without locking.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .exceptions import ArityMismatchError, UnknownCheckError
from .models import CheckDefinition, CheckHandler, Verdict

logger = logging.getLogger(__name__)


class CheckRegistry:
    """Central catalog of all known checks."""

    def __init__(self) -> None:
        self._checks: dict[str, CheckDefinition] = {}

    # -- Mutation (used during startup) ------------------------------------

    def register(self, name: str, handler: CheckHandler, parameter_count: int) -> None:
        """Register *handler* under *name*.

        Registering a name that already exists replaces the earlier
        definition (last write wins).  This lets a caller override a
        built-in check with its own implementation before any check runs.
        """
        if parameter_count < 0:
            raise ValueError(f"parameter_count must be >= 0, got {parameter_count}")
        if name in self._checks:
            logger.debug("Check '%s' re-registered; replacing previous definition", name)
        self._checks[name] = CheckDefinition(name=name, handler=handler, parameter_count=parameter_count)

    # -- Invocation ----------------------------------------------------------

    def invoke(self, name: str, parameters: Sequence[str]) -> Verdict:
        """Run check *name* with *parameters* and return its verdict unchanged.

        Raises:
            UnknownCheckError: If *name* was never registered.
            ArityMismatchError: If the parameter count is wrong.
        """
        definition = self._checks.get(name)
        if definition is None:
            raise UnknownCheckError(name)
        if len(parameters) != definition.parameter_count:
            raise ArityMismatchError(name, definition.parameter_count, len(parameters))
        logger.debug("Invoking check %s(%s)", name, ", ".join(parameters))
        return definition.handler(list(parameters))

    # -- Read-only accessors ------------------------------------------------

    def get(self, name: str) -> CheckDefinition | None:
        """Look up a check by name."""
        return self._checks.get(name)

    def names(self) -> list[str]:
        """Return registered check names, sorted."""
        return sorted(self._checks)

    def definitions(self) -> dict[str, CheckDefinition]:
        """Return a shallow copy of the full catalog."""
        return dict(self._checks)

    def __len__(self) -> int:
        return len(self._checks)

    def __contains__(self, name: str) -> bool:
        return name in self._checks


def build_default_registry(config=None, **provider_overrides) -> CheckRegistry:
    """Convenience: build a registry populated with every built-in check.

    Args:
        config: Optional :class:`~hostprobe.config.config.Config`; defaults
            to one read from the environment.
        **provider_overrides: Passed through to
            :func:`~hostprobe.checks.docker_checks.register_docker_checks`
            (``cli_provider``, ``api_provider_factory``).
    """
    from ..checks.docker_checks import register_docker_checks

    registry = CheckRegistry()
    register_docker_checks(registry, config=config, **provider_overrides)
    return registry
