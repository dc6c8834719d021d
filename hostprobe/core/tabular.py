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
Parse whitespace-aligned tabular text, such as output from ``docker ps``.

Columns are separated by two or more whitespace characters, so a value may
contain single spaces (``Up 2 hours``, ``3 days ago``) without being split::

    CONTAINER ID   IMAGE   COMMAND                  CREATED       STATUS
    4c01db0b339c   redis   "docker-entrypoint.s…"   3 hours ago   Up 2 hours

Parsing is lenient on purpose.  Rows whose field count does not match the
header are dropped instead of raising, and asking for a column that is not
in the header returns an empty list.  Callers treat empty as "no data".
A tool that silently changes its output format will therefore look like a
host with nothing on it; see ``tests/test_tabular.py`` for the cases that
pin this down.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Sequence

logger = logging.getLogger(__name__)

#: Regex specifying the column separator
COLUMN_SEPARATOR_RE = re.compile(r"\s{2,}")

#: Shortest separator that :func:`split_columns` recognises
CANONICAL_SEPARATOR = "  "


def split_columns(line: str) -> list[str]:
    """Split one line into fields on runs of two or more whitespace characters."""
    stripped = line.strip()
    if not stripped:
        return []
    return COLUMN_SEPARATOR_RE.split(stripped)


def join_columns(fields: Iterable[str]) -> str:
    """Inverse of :func:`split_columns` for fields without double spaces."""
    return CANONICAL_SEPARATOR.join(fields)


def split_table(text: str) -> list[list[str]]:
    """Split *text* into a list of rows of fields, skipping blank lines."""
    rows = []
    for line in text.splitlines():
        fields = split_columns(line)
        if fields:
            rows.append(fields)
    return rows


class Table(Sequence):
    """
    Header-addressable table of whitespace-delimited fields.

    :param header: Column names, in order
    :param rows: Data rows; each must have ``len(header)`` fields or it is
                 dropped and counted in :attr:`dropped_rows`
    :param case_sensitive: Whether header lookups match case exactly
    """

    def __init__(
        self,
        header: Sequence[str] | None = None,
        rows: Iterable[Sequence[str]] | None = None,
        case_sensitive: bool = False,
    ) -> None:
        self.header: list[str] = list(header or [])
        self.case_sensitive = case_sensitive
        self.rows: list[list[str]] = []
        self.dropped_rows = 0
        for row in rows or []:
            if len(row) != len(self.header):
                self.dropped_rows += 1
                logger.debug(
                    "Dropping ragged row (%d fields, header has %d): %r",
                    len(row),
                    len(self.header),
                    row,
                )
                continue
            self.rows.append(list(row))

    @classmethod
    def from_text(cls, text: str, case_sensitive: bool = False) -> Table:
        """Build a table whose first non-blank line is the header."""
        lines = split_table(text)
        if not lines:
            return cls(case_sensitive=case_sensitive)
        return cls(lines[0], lines[1:], case_sensitive=case_sensitive)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index):
        return self.rows[index]

    def __iter__(self) -> Iterator[list[str]]:
        return iter(self.rows)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} columns={self.header!r} rows={len(self.rows)}>"

    @property
    def is_empty(self) -> bool:
        return not self.header

    def header_index(self, name: str) -> int | None:
        """Return the position of column *name*, or None if absent."""
        if self.case_sensitive:
            wanted = name
            names = self.header
        else:
            wanted = name.casefold()
            names = [col.casefold() for col in self.header]
        try:
            return names.index(wanted)
        except ValueError:
            return None

    def get_column(self, name: str) -> list[str]:
        """Values of column *name* across all data rows, or ``[]`` if absent."""
        index = self.header_index(name)
        if index is None:
            return []
        return [row[index] for row in self.rows]

    def column_at(self, index: int) -> list[str]:
        """Values of the *index*-th column across all data rows."""
        return [row[index] for row in self.rows if -len(row) <= index < len(row)]

    def records(self) -> list[dict[str, str]]:
        """Rows as dicts keyed by header name."""
        return [dict(zip(self.header, row)) for row in self.rows]


def parse_table(text: str, case_sensitive: bool = False) -> Table:
    """Convenience wrapper around :meth:`Table.from_text`."""
    return Table.from_text(text, case_sensitive=case_sensitive)


def get_column_by_header(name: str, table: Table) -> list[str]:
    """Return the column headed *name*; empty if the header is missing."""
    return table.get_column(name)


def get_column_no_header(index: int, table: Table) -> list[str]:
    """Return the *index*-th column of every data row, header excluded."""
    return table.column_at(index)


# ---------------------------------------------------------------------------
# Membership helpers
# ---------------------------------------------------------------------------


def str_in(target: str, candidates: Iterable[str]) -> bool:
    """True if *target* equals some candidate exactly."""
    return any(candidate == target for candidate in candidates)


def str_contained_in(target: str, candidates: Iterable[str]) -> bool:
    """True if *target* is a substring of some candidate."""
    return any(target in candidate for candidate in candidates)


def re_in(pattern: re.Pattern[str], candidates: Iterable[str]) -> bool:
    """True if *pattern* matches somewhere in some candidate."""
    return any(pattern.search(candidate) for candidate in candidates)
