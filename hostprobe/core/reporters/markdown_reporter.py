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
Markdown format reporter for checklist results.
"""

from ...core.models import ChecklistResult, CheckOutcome


class MarkdownReporter:
    """Generates Markdown format reports."""

    def __init__(self, detailed: bool = True):
        """
        Initialize Markdown reporter.

        Args:
            detailed: If True, include the diagnostic of every failed check
        """
        self.detailed = detailed

    def generate_report(self, result: ChecklistResult) -> str:
        """
        Generate Markdown report.

        Args:
            result: ChecklistResult object

        Returns:
            Markdown string
        """
        lines = []

        # Header
        lines.append("# Host Compliance Report")
        lines.append("")
        lines.append(f"**Checklist:** {result.checklist_name}")
        if result.source:
            lines.append(f"**Source:** {result.source}")
        lines.append(f"**Status:** {'[OK] ALL PASSED' if result.all_passed else '[FAIL] CHECKS FAILED'}")
        lines.append(f"**Duration:** {result.duration_seconds:.2f}s")
        lines.append(f"**Timestamp:** {result.timestamp.isoformat()}")
        lines.append("")

        # Summary
        lines.append("## Summary")
        lines.append("")
        lines.append(f"- **Total Checks:** {result.total_count}")
        lines.append(f"- **Passed:** {result.passed_count}")
        lines.append(f"- **Failed:** {result.failed_count}")
        lines.append("")

        # Checks
        if result.outcomes:
            lines.append("## Checks")
            lines.append("")
            lines.append("| Status | Check | Parameters |")
            lines.append("|--------|-------|------------|")
            for outcome in result.outcomes:
                status = "PASS" if outcome.passed else "FAIL"
                params = ", ".join(f"`{self._escape(p)}`" for p in outcome.parameters)
                lines.append(f"| {status} | {outcome.check_id} | {params} |")
            lines.append("")

        failures = result.get_failures()
        if self.detailed and failures:
            lines.append("## Failures")
            lines.append("")
            for outcome in failures:
                lines.extend(self._format_failure(outcome))

        return "\n".join(lines)

    @staticmethod
    def _escape(text: str) -> str:
        return text.replace("|", "\\|")

    def _format_failure(self, outcome: CheckOutcome) -> list[str]:
        lines = [f"### {outcome.check_id}", ""]
        if outcome.error:
            lines.append(f"**Error:** {outcome.error}")
            lines.append("")
        lines.append("```")
        lines.append(outcome.verdict.message.replace("\t", "    "))
        lines.append("```")
        lines.append("")
        return lines
