# Feedback Report
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Report generation errors.

Configuration problems are reported via `ConfigError` (see `config`). The
classes here cover problems found in the feedback data itself.
"""

from dataclasses import dataclass
from pathlib import Path


class ReportError(RuntimeError):
    """Base class for problems detected in the input table."""


@dataclass(eq=False)
class TableError(ReportError):
    """Raised when the CSV input cannot be parsed."""

    message: str
    path: Path | None = None
    line: int | None = None

    def __str__(self) -> str:
        if self.path is not None:
            if self.line is not None:
                return f"{self.path}:{self.line}: {self.message}"
            return f"{self.path}: {self.message}"
        return self.message


class EmptyInputError(ReportError):
    """Raised when the input table has no header row."""


class RaggedRowError(ReportError):
    """Raised when a data row does not have as many cells as there are headers."""

    def __init__(self, expected: int, actual: int, *, row_number: int | None = None) -> None:
        self.expected = expected
        self.actual = actual
        self.row_number = row_number

        where = f"Row {row_number}" if row_number is not None else "Row"
        super().__init__(f"{where} has {actual} cell(s), expected {expected} (one per header)")
