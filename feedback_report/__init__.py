"""
Feedback report CLI package.

This package contains a small CLI tool that turns a CSV feedback export into a
static HTML report:
- the first CSV row provides the field labels,
- every following row becomes one definition list,
- rows are separated by a horizontal rule.
"""

from __future__ import annotations
