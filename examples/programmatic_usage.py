#!/usr/bin/env python3
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
Programmatic usage example - using Host Probe as a Python library.

This example demonstrates:
1. Building the default registry from configuration
2. Registering an extra check next to the built-in ones
3. Running a checklist file and processing the outcomes
"""

import sys
from pathlib import Path

from hostprobe import ChecklistRunner, Config, Verdict, build_default_registry
from hostprobe.core.acquisition import DockerCLIProvider
from hostprobe.core.exceptions import AcquisitionError


def image_count_at_most(parameters, provider):
    """Pass if no more than ``parameters[0]`` images are pulled."""
    limit = int(parameters[0])
    images = provider.list_images()
    if len(images) <= limit:
        return Verdict.ok()
    return Verdict.fail(f"Too many Docker images:\n\tSpecified: <= {limit}\n\tActual: {images!r}")


def main():
    checklist_path = Path(__file__).with_name("baseline.yaml")

    config = Config.from_env()
    registry = build_default_registry(config)

    provider = DockerCLIProvider(docker_binary=config.docker_binary)
    registry.register("dockerimagecount", lambda parameters: image_count_at_most(parameters, provider), 1)

    print(f"Running checklist: {checklist_path}")
    print(f"Available checks: {', '.join(registry.names())}\n")

    runner = ChecklistRunner(registry)
    try:
        result = runner.run_file(checklist_path)
        extra = runner.run_check("dockerimagecount", ["50"])
    except AcquisitionError as e:
        print(f"Could not read host state ({e.operation}): {e}")
        return 2

    result.outcomes.append(extra)

    print(f"{'=' * 60}")
    print(f"Checklist: {result.checklist_name}")
    print(f"{'=' * 60}")
    print(f"Passed: {result.passed_count}/{result.total_count}")
    print(f"Duration: {result.duration_seconds:.2f}s")

    for outcome in result.get_failures():
        print(f"\n[FAIL] {outcome.check_id} {' '.join(outcome.parameters)}")
        print(outcome.verdict.message)

    return 0 if result.all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
