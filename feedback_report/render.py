# Feedback Report
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
HTML rendering of feedback rows.

Each data row becomes one definition list which pairs every header with the
cell at the same position:

    <dl><dt>Header</dt>
    <dd><div>escaped cell</div></dd>
    ...
    </dl>

Header text is emitted verbatim. It comes from whoever controls the CSV
schema, while cell values are free-form feedback and are always escaped.
"""

from typing import Sequence

from feedback_report.errors import RaggedRowError
from feedback_report.html_text import process_text


ROW_SEPARATOR = "<hr />\n"

RAGGED_PAD = "pad"
RAGGED_TRUNCATE = "truncate"
RAGGED_REJECT = "reject"
RAGGED_ROW_POLICIES = (RAGGED_PAD, RAGGED_TRUNCATE, RAGGED_REJECT)

HTML_HEADER: str = "\n".join(
    [
        "",
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        "  <title>Feedback from European Dojo</title>",
        '  <meta http-equiv="Content-Type" content="text/html; charset=utf-8" />',
        '  <style type="text/css">',
        "  body {font-family: helvetica, arial, sans-serif; }",
        "  dl {",
        "    margin: 0.5em 0;",
        "  }",
        "  dt { color: #666; }",
        "  dd { margin-bottom: 0.5em; }",
        "  </style>",
        "</head>",
        "<body>",
        "",
    ]
)

HTML_FOOTER: str = "</body>\n</html>"


def render_row(headers: Sequence[str], cells: Sequence[str]) -> str:
    """
    Render one data row as a definition list.

    Args:
        headers:
            Field labels, emitted without escaping.
        cells:
            Cell values for this row, one per header.

    Returns:
        The `<dl>` fragment, followed by a blank line.

    Raises:
        RaggedRowError:
            If `headers` and `cells` differ in length.
    """

    if len(headers) != len(cells):
        raise RaggedRowError(len(headers), len(cells))

    items = [
        f"<dt>{header}</dt>\n<dd><div>{process_text(cell)}</div></dd>\n"
        for header, cell in zip(headers, cells)
    ]
    return "<dl>" + "".join(items) + "</dl>\n\n"


def align_cells(
    headers: Sequence[str],
    cells: Sequence[str],
    policy: str,
    *,
    row_number: int | None = None,
) -> tuple[list[str], list[str]]:
    """
    Make a data row line up with the headers.

    Args:
        headers:
            Field labels.
        cells:
            Cell values of one data row.
        policy:
            `pad` fills missing trailing cells with empty strings and refuses
            rows with surplus cells. `truncate` keeps only the positions that
            exist on both sides. `reject` refuses any mismatch.
        row_number:
            1-based data row number, used in error messages.

    Returns:
        `(headers, cells)` of equal length.

    Raises:
        RaggedRowError:
            If the row cannot be aligned under the given policy.
        ValueError:
            If the policy is unknown.
    """

    if policy not in RAGGED_ROW_POLICIES:
        raise ValueError(f"Unknown ragged row policy: {policy!r}")

    expected = len(headers)
    actual = len(cells)
    if actual == expected:
        return list(headers), list(cells)

    if policy == RAGGED_TRUNCATE:
        size = min(expected, actual)
        return list(headers[:size]), list(cells[:size])

    if policy == RAGGED_PAD and actual < expected:
        return list(headers), list(cells) + [""] * (expected - actual)

    raise RaggedRowError(expected, actual, row_number=row_number)


def render_report(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    ragged_rows: str = RAGGED_PAD,
) -> str:
    """
    Render all data rows and join them with a horizontal rule.

    Rows keep their input order. An empty `rows` sequence yields an empty
    string.
    """

    fragments: list[str] = []
    for row_number, row in enumerate(rows, start=1):
        row_headers, row_cells = align_cells(headers, row, ragged_rows, row_number=row_number)
        fragments.append(render_row(row_headers, row_cells))

    return ROW_SEPARATOR.join(fragments)


def assemble_document(body_html: str) -> str:
    """Wrap rendered rows into the fixed HTML5 document shell."""

    return HTML_HEADER + body_html + HTML_FOOTER
