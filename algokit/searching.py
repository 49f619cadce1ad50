"""Binary search over sorted sequences: bounds and membership."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from typing import Any


def lower_bound(seq: Sequence[Any], key: Any) -> int:
    """Return the index of the first element of sorted ``seq`` not less than ``key``."""
    return bisect_left(seq, key)


def upper_bound(seq: Sequence[Any], key: Any) -> int:
    """Return the index of the first element of sorted ``seq`` greater than ``key``."""
    return bisect_right(seq, key)


def contains(seq: Sequence[Any], key: Any) -> bool:
    """Return True if ``key`` occurs in sorted ``seq``, in logarithmic time."""
    index = bisect_left(seq, key)
    return index < len(seq) and seq[index] == key