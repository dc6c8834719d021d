# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""Shared helper utilities for check modules."""

from __future__ import annotations

import re
from collections.abc import Sequence

from hostprobe.core.exceptions import InvalidPatternError
from hostprobe.core.models import Verdict


def parse_user_regex(pattern: str) -> re.Pattern[str]:
    """Compile a regular expression taken from a checklist.

    Raises:
        InvalidPatternError: If *pattern* is not a valid expression.
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def generic_failure(message: str, specified: str, actual: Sequence[str]) -> Verdict:
    """Build a failing verdict showing what was looked for and what was seen."""
    return Verdict.fail(f"{message}:\n\tSpecified: {specified}\n\tActual: {list(actual)!r}")


def render(found: bool, message: str, specified: str, actual: Sequence[str]) -> Verdict:
    """Pass if *found*, otherwise fail with :func:`generic_failure`."""
    if found:
        return Verdict.ok()
    return generic_failure(message, specified, actual)
