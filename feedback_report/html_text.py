# Feedback Report
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""HTML text helpers.

Cell values are free-form feedback and are escaped before they are embedded
into the report. Only text nodes are produced, never attribute values, so
quotes are left alone.
"""

import html


LINE_SEPARATOR = "</div><div>"


def escape_html(text: str) -> str:
    """Escape `&`, `<` and `>` (in that order) for use in an HTML text node."""

    return html.escape(text, quote=False)


def process_text(text: str) -> str:
    """Escape a multi-line cell value.

    Each line is escaped on its own and lines are joined with
    `</div><div>`, so the caller can wrap the result in a single
    `<div>...</div>` to get one block per line.
    """

    return LINE_SEPARATOR.join(escape_html(line) for line in text.split("\n"))
