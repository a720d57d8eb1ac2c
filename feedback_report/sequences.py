# Feedback Report
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Sequence helpers."""

from typing import Sequence, TypeVar


T = TypeVar("T")


def split_at(n: int, items: Sequence[T]) -> tuple[list[T], list[T]]:
    """Split a sequence into a prefix and a suffix.

    Args:
        n:
            Number of items in the prefix. Must be within `[0, len(items)]`.
        items:
            Sequence to split. Order is preserved in both parts.

    Returns:
        A `(prefix, suffix)` tuple where `prefix` holds the first `n` items
        and `suffix` all remaining items.

    Raises:
        ValueError:
            If `n` is out of range.
    """

    if n < 0 or n > len(items):
        raise ValueError(f"Split point {n} out of range for sequence of length {len(items)}")

    return list(items[:n]), list(items[n:])
