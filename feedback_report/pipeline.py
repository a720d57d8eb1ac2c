# Feedback Report
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Report pipeline.

    load_table -> split_at(HEADER_ROWS) -> render_report -> assemble_document -> write_document

Every step gets its inputs passed explicitly. Nothing is written before the
full document has been built.
"""

from dataclasses import dataclass
from pathlib import Path

from feedback_report.config import EMPTY_INPUT_EMPTY, ReportConfig
from feedback_report.errors import EmptyInputError
from feedback_report.render import assemble_document, render_report
from feedback_report.sequences import split_at
from feedback_report.table_io import load_table, write_document


# Number of leading rows that hold the field labels.
HEADER_ROWS = 1


@dataclass(frozen=True)
class ReportResult:
    """
    Outcome of a successful report run.

    Attributes:
        input_path:
            CSV file that was read.
        output_path:
            HTML file that was written.
        headers:
            Field labels taken from the first row.
        row_count:
            Number of rendered data rows.
        byte_count:
            Size of the written document in bytes.
    """

    input_path: Path
    output_path: Path
    headers: tuple[str, ...]
    row_count: int
    byte_count: int


def render_table(table: list[list[str]], config: ReportConfig) -> str:
    """
    Turn a parsed table into the complete HTML document.

    Args:
        table:
            All parsed rows, header row first.
        config:
            Report configuration.

    Returns:
        The HTML document.

    Raises:
        EmptyInputError:
            If the table has no rows and empty input is not allowed.
        RaggedRowError:
            If a data row does not fit the headers under the configured policy.
    """

    if not table:
        if config.empty_input != EMPTY_INPUT_EMPTY:
            raise EmptyInputError("Input contains no rows, so there is no header row")
        return assemble_document("")

    header_rows, commentary = split_at(HEADER_ROWS, table)
    headers = header_rows[0]

    return assemble_document(render_report(headers, commentary, ragged_rows=config.ragged_rows))


def build_report(input_path: Path, output_path: Path, config: ReportConfig) -> ReportResult:
    """
    Read a CSV feedback export and write the HTML report.

    Args:
        input_path:
            CSV input file.
        output_path:
            Destination HTML file. It is replaced if it exists.
        config:
            Report configuration.

    Returns:
        A ReportResult describing what was written.

    Raises:
        ReportError:
            If the table cannot be parsed or rendered. No output is written.
        OSError:
            If reading or writing fails.
    """

    table = load_table(
        input_path,
        encoding=config.encoding,
        delimiter=config.delimiter,
        skip_blank_rows=config.skip_blank_rows,
    )
    document = render_table(table, config)

    write_document(output_path, document)

    headers = tuple(table[0]) if table else ()
    return ReportResult(
        input_path=input_path,
        output_path=output_path,
        headers=headers,
        row_count=max(len(table) - HEADER_ROWS, 0),
        byte_count=len(document.encode("utf-8")),
    )
