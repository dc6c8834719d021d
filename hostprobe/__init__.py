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
Host Probe - Host compliance checks for Docker images and containers.
"""

try:
    from ._version import __version__
except ImportError:
    __version__ = "0.0.0+unknown"


def __getattr__(name: str):
    """Lazy-load public API symbols on first access.

    Keeps ``import hostprobe`` cheap: httpx and yaml are only imported when
    the registry, providers or loader are actually used.
    """
    _lazy_map = {
        "Config": (".config.config", "Config"),
        "HostProbeConstants": (".config.constants", "HostProbeConstants"),
        "CheckRegistry": (".core.check_registry", "CheckRegistry"),
        "build_default_registry": (".core.check_registry", "build_default_registry"),
        "Verdict": (".core.models", "Verdict"),
        "CheckDefinition": (".core.models", "CheckDefinition"),
        "Checklist": (".core.models", "Checklist"),
        "ChecklistResult": (".core.models", "ChecklistResult"),
        "Table": (".core.tabular", "Table"),
        "ChecklistLoader": (".core.loader", "ChecklistLoader"),
        "load_checklist": (".core.loader", "load_checklist"),
        "ChecklistRunner": (".core.runner", "ChecklistRunner"),
        "DockerCLIProvider": (".core.acquisition", "DockerCLIProvider"),
        "DockerAPIProvider": (".core.acquisition", "DockerAPIProvider"),
    }
    if name in _lazy_map:
        module_path, attr = _lazy_map[name]
        import importlib

        mod = importlib.import_module(module_path, __package__)
        val = getattr(mod, attr)
        # Cache on the module so __getattr__ is only called once per symbol
        globals()[name] = val
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Config",
    "HostProbeConstants",
    "CheckRegistry",
    "build_default_registry",
    "Verdict",
    "CheckDefinition",
    "Checklist",
    "ChecklistResult",
    "Table",
    "ChecklistLoader",
    "load_checklist",
    "ChecklistRunner",
    "DockerCLIProvider",
    "DockerAPIProvider",
]
