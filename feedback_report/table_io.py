# Feedback Report
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Reading the CSV table and writing the HTML document.

Both directions work on whole files: the input is read into memory before
parsing, and the output is written in a single step once the complete
document exists.
"""

import csv
import io
import os
import stat
import tempfile
from pathlib import Path

from feedback_report.errors import TableError


def load_table(
    path: Path,
    *,
    encoding: str = "utf-8",
    delimiter: str = ",",
    skip_blank_rows: bool = True,
) -> list[list[str]]:
    """
    Read a CSV file into a list of rows.

    Args:
        path:
            CSV file path.
        encoding:
            Text encoding. For UTF-8 a leading byte order mark is dropped.
        delimiter:
            Field delimiter.
        skip_blank_rows:
            If True, lines that are empty or hold only whitespace
            do not produce a row.

    Returns:
        All rows in file order, each a list of cell strings.

    Raises:
        TableError:
            If the CSV parser rejects the content.
        OSError:
            If the file cannot be read.
    """

    if encoding.lower().replace("-", "_") in ("utf_8", "utf8"):
        encoding = "utf-8-sig"

    # newline="" keeps \r\n inside quoted cells as written.
    with path.open(encoding=encoding, newline="") as handle:
        text = handle.read()

    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
    rows: list[list[str]] = []
    try:
        for row in reader:
            if skip_blank_rows and _is_blank_row(row):
                continue
            rows.append(row)
    except csv.Error as exc:
        raise TableError(f"Invalid CSV: {exc}", path=path, line=reader.line_num) from exc

    return rows


def write_document(path: Path, document: str) -> None:
    """
    Write the HTML document atomically as UTF-8.

    The content goes to a temporary file next to `path` first, which then
    replaces the destination. Readers never observe a partially written
    report.

    Raises:
        OSError:
            If the file cannot be written.
    """

    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp = tempfile.mkstemp(prefix=path.name + ".", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(document)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp, _target_mode(path))
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


def _is_blank_row(row: list[str]) -> bool:
    """Return True for an empty line or a line holding only whitespace."""

    return not row or (len(row) == 1 and not row[0].strip())


def _target_mode(path: Path) -> int:
    """
    Permission bits for the written document.

    An existing file keeps its mode. A new file gets what a plain `open()`
    would give it under the current umask (`mkstemp` always uses 0600).
    """

    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
