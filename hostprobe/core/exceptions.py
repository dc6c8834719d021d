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

"""Host Probe exceptions.

This module defines custom exceptions for Host Probe operations.
All exceptions inherit from HostProbeError for easy catching.

There are two families:

* :class:`ConfigurationError` – the check itself was asked for wrongly
  (unknown name, wrong parameter count, bad regex, unreadable checklist).
  These are reported as a failed check and the run continues.
* :class:`AcquisitionError` – the current state of the host could not be
  obtained.  The state is unknown, so it is neither a pass nor a fail and
  the whole run stops.

Example:
    >>> from hostprobe.core.exceptions import AcquisitionError, ConfigurationError
    >>>
    >>> try:
    ...     verdict = registry.invoke("dockerimage", ["ubuntu"])
    ... except ConfigurationError as e:
    ...     print(f"Bad check: {e}")
    ... except AcquisitionError as e:
    ...     print(f"Could not read host state ({e.operation}): {e}")
"""


class HostProbeError(Exception):
    """Base exception for all Host Probe errors."""

    pass


class ConfigurationError(HostProbeError):
    """Raised when a check is requested with invalid configuration."""

    pass


class UnknownCheckError(ConfigurationError):
    """Raised when invoking a check name that was never registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown check: '{name}'")


class ArityMismatchError(ConfigurationError):
    """Raised when a check receives the wrong number of parameters."""

    def __init__(self, name: str, expected: int, given: int):
        self.name = name
        self.expected = expected
        self.given = given
        super().__init__(f"Check '{name}' expects {expected} parameter(s), got {given}")


class InvalidPatternError(ConfigurationError):
    """Raised when a user-supplied regular expression does not compile."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"Invalid regular expression '{pattern}': {reason}")


class ChecklistLoadError(ConfigurationError):
    """Raised when a checklist file cannot be read or is malformed.

    This can indicate:
    - Missing file
    - Invalid YAML/JSON
    - Entries without an ``id`` or with non-list parameters
    """

    pass


class AcquisitionError(HostProbeError):
    """Raised when resource state cannot be acquired.

    Attributes:
        operation: Human-readable name of the external operation that failed,
            e.g. ``docker ps -a`` or ``GET /containers/json``.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(message)


class PermissionDeniedError(AcquisitionError):
    """Raised when the external tool reports an authorization failure."""

    def __init__(self, operation: str):
        super().__init__(operation, f"Permission denied when running: {operation}")
