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

"""Command-line interface for Host Probe."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..config.config import Config
from ..config.constants import HostProbeConstants
from ..core.check_registry import CheckRegistry, build_default_registry
from ..core.exceptions import AcquisitionError, ChecklistLoadError
from ..core.models import ChecklistResult
from ..core.reporters.json_reporter import JSONReporter
from ..core.reporters.markdown_reporter import MarkdownReporter
from ..core.runner import ChecklistRunner

logger = logging.getLogger("hostprobe.cli")


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _load_config(args: argparse.Namespace) -> Config:
    """Load configuration from ``--env-file`` or the environment."""
    env_file = getattr(args, "env_file", None)
    config = Config.from_file(Path(env_file)) if env_file else Config.from_env()

    endpoint = getattr(args, "docker_endpoint", None)
    if endpoint:
        config.docker_endpoint = endpoint
    timeout = getattr(args, "timeout", None)
    if timeout is not None:
        config.command_timeout = timeout
        config.api_timeout = timeout
    if getattr(args, "case_sensitive_headers", False):
        config.case_sensitive_headers = True
    return config


def _configure_logging(args: argparse.Namespace, config: Config) -> None:
    level_name = "DEBUG" if getattr(args, "verbose", False) else config.log_level
    level = getattr(logging, str(level_name).upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def _build_registry(config: Config) -> CheckRegistry:
    return build_default_registry(config)


def _format_output(args: argparse.Namespace, result: ChecklistResult) -> str:
    """Generate the formatted output string for a checklist result."""
    fmt = getattr(args, "format", "summary")
    if fmt == "json":
        return JSONReporter(pretty=not getattr(args, "compact", False)).generate_report(result)
    if fmt == "markdown":
        return MarkdownReporter(detailed=True).generate_report(result)
    return _generate_summary(result)


def _write_output(args: argparse.Namespace, output: str) -> None:
    """Write *output* to a file or stdout."""
    if getattr(args, "output", None):
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(output)
        print(f"Report saved to: {args.output}")
    else:
        print(output)


def _report_fatal(e: AcquisitionError) -> int:
    logger.critical("Fatal error during '%s': %s", e.operation, e)
    print(f"Fatal: {e}", file=sys.stderr)
    return HostProbeConstants.EXIT_FATAL


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def run_checklist_command(args: argparse.Namespace, registry: CheckRegistry | None = None) -> int:
    """Handle the ``run`` command for a checklist file."""
    config = _load_config(args)
    _configure_logging(args, config)
    runner = ChecklistRunner(registry or _build_registry(config))

    try:
        result = runner.run_file(args.checklist, fail_fast=args.fail_fast)
    except ChecklistLoadError as e:
        print(f"Error loading checklist: {e}", file=sys.stderr)
        return HostProbeConstants.EXIT_FAILED
    except AcquisitionError as e:
        return _report_fatal(e)

    _write_output(args, _format_output(args, result))

    if result.all_passed:
        return HostProbeConstants.EXIT_OK
    return HostProbeConstants.EXIT_FAILED


def check_command(args: argparse.Namespace, registry: CheckRegistry | None = None) -> int:
    """Handle the ``check`` command for a single named check."""
    config = _load_config(args)
    _configure_logging(args, config)
    runner = ChecklistRunner(registry or _build_registry(config))

    try:
        outcome = runner.run_check(args.name, args.parameters)
    except AcquisitionError as e:
        return _report_fatal(e)

    if outcome.passed:
        print(f"[OK] {outcome.check_id}")
        return HostProbeConstants.EXIT_OK
    print(f"[FAIL] {outcome.check_id}\n{outcome.verdict.message}")
    return outcome.verdict.exit_code


def list_checks_command(args: argparse.Namespace, registry: CheckRegistry | None = None) -> int:
    """Handle the ``list-checks`` command."""
    config = _load_config(args)
    registry = registry or _build_registry(config)

    print("Available checks:")
    print("-" * 40)
    for name in registry.names():
        definition = registry.get(name)
        print(f"  {name:<24s} {definition.parameter_count} parameter(s)")
    return HostProbeConstants.EXIT_OK


# ---------------------------------------------------------------------------
# Summary formatter
# ---------------------------------------------------------------------------


def _generate_summary(result: ChecklistResult) -> str:
    lines = [
        "=" * 60,
        f"Checklist: {result.checklist_name}",
        "=" * 60,
        f"Status: {'[OK] ALL PASSED' if result.all_passed else '[FAIL] CHECKS FAILED'}",
        f"Passed: {result.passed_count}/{result.total_count}",
        f"Duration: {result.duration_seconds:.2f}s",
        "",
    ]
    for outcome in result.outcomes:
        tag = "[OK]" if outcome.passed else "[FAIL]"
        lines.append(f"  {tag} {outcome.check_id} {' '.join(outcome.parameters)}".rstrip())
        if not outcome.passed:
            for message_line in outcome.verdict.message.splitlines():
                lines.append(f"      {message_line}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Shared argparse helpers
# ---------------------------------------------------------------------------


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    """Add flags shared between all commands."""
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--env-file", metavar="PATH", help="Load HOSTPROBE_* settings from a .env file")
    parser.add_argument("--docker-endpoint", metavar="URL", help="Default Docker API endpoint")
    parser.add_argument(
        "--timeout",
        type=float,
        metavar="SECONDS",
        help="Give up on external commands and API calls after this many seconds",
    )
    parser.add_argument(
        "--case-sensitive-headers",
        action="store_true",
        help="Match column headers in command output case-sensitively",
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Host Probe - Host compliance checks for Docker images and containers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  hostprobe run checklist.yaml
  hostprobe run checklist.yaml --format json --output report.json
  hostprobe check dockerimage ubuntu
  hostprobe check dockerrunningapi unix:///var/run/docker.sock redis
  hostprobe list-checks
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {HostProbeConstants.VERSION}")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # -- run ---------------------------------------------------------------
    run_p = subparsers.add_parser("run", help="Run every check in a checklist file")
    run_p.add_argument("checklist", help="Path to checklist YAML/JSON file")
    run_p.add_argument(
        "--format",
        choices=["summary", "json", "markdown"],
        default="summary",
        help="Output format (default: summary)",
    )
    run_p.add_argument("--output", "-o", help="Output file path")
    run_p.add_argument("--compact", action="store_true", help="Compact JSON output")
    run_p.add_argument("--fail-fast", action="store_true", help="Stop after the first failed check")
    _add_common_flags(run_p)

    # -- check -------------------------------------------------------------
    check_p = subparsers.add_parser("check", help="Run a single check")
    check_p.add_argument("name", help="Check name, e.g. dockerimage")
    check_p.add_argument("parameters", nargs="*", help="Check parameters")
    _add_common_flags(check_p)

    # -- list-checks -------------------------------------------------------
    list_p = subparsers.add_parser("list-checks", help="List available checks")
    _add_common_flags(list_p)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return HostProbeConstants.EXIT_FAILED

    dispatch = {
        "run": run_checklist_command,
        "check": check_command,
        "list-checks": list_checks_command,
    }
    handler = dispatch.get(args.command)
    if handler:
        try:
            return handler(args)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return HostProbeConstants.EXIT_FAILED

    parser.print_help()
    return HostProbeConstants.EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
