# Feedback Report
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Small CLI interaction helpers.

In interactive terminals, actions may ask before replacing a file. In
non-interactive contexts (CI, pipes) they must not prompt and require an
explicit `--force` instead.
"""

import sys
from pathlib import Path


def is_interactive_tty() -> bool:
    """
    Determine whether we can safely prompt the user.

    Returns:
        True if both stdin and stdout are connected to a TTY.
    """

    try:
        return sys.stdin.isatty() and sys.stdout.isatty()
    except Exception:  # noqa: BLE001
        return False


def prompt_yes_no(question: str, *, default_no: bool = True) -> bool:
    """
    Ask the user a yes/no question.

    Args:
        question:
            Prompt text without the trailing choice suffix.
        default_no:
            If true, empty input is treated as "no".

    Returns:
        True if the user answered yes.

    Raises:
        RuntimeError:
            If the prompt cannot be shown in a non-interactive session.
    """

    if not is_interactive_tty():
        raise RuntimeError("Cannot prompt in non-interactive mode")

    suffix = "[y/N]" if default_no else "[Y/n]"
    while True:
        answer = input(f"{question} {suffix} ").strip().lower()
        if not answer:
            return not default_no
        if answer in {"y", "yes"}:
            return True
        if answer in {"n", "no"}:
            return False


def prompt_overwrite(path: Path) -> bool:
    """Ask the user whether to overwrite an existing file."""

    return prompt_yes_no(f"File already exists: {path}. Overwrite?", default_no=True)
