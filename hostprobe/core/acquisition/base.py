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
Base interface for resource state providers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ResourceStateProvider(ABC):
    """Abstract source of the identifiers of currently running resources."""

    def __init__(self, name: str):
        """
        Initialize provider.

        Args:
            name: Short name of the provider, used in log messages
        """
        self.name = name

    @abstractmethod
    def list_running_identifiers(self) -> list[str]:
        """
        Return identifiers of running resources, in the order observed.

        Duplicates are kept.

        Raises:
            AcquisitionError: If the state cannot be obtained
        """
        pass

    def get_name(self) -> str:
        """Get the provider name."""
        return self.name
