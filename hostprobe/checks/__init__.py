# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""
Built-in check modules.

Each module in this package implements a family of checks and a
``register_*_checks(registry, ...)`` function that adds them to a
:class:`~hostprobe.core.check_registry.CheckRegistry`.

Convention
~~~~~~~~~~

Every check handler follows the pattern::

    def <check_name>(parameters: list[str], <provider>, ...) -> Verdict:
        ...

Providers are bound with :func:`functools.partial` at registration time,
so the registry only ever sees ``handler(parameters) -> Verdict``.  A
handler acquires state once, compares, and renders; it never retries.
"""
