"""Multi-key sorting of records such as frontmatter mappings."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from functools import cmp_to_key
from typing import Any, Literal, TypeVar

R = TypeVar("R", bound=Mapping[str, Any])

SortOrder = Literal["asc", "desc"]

_DIGITS_RE = re.compile(r"(\d+)")


def sort_records(
    records: Sequence[R],
    keys: Sequence[str],
    orders: Sequence[SortOrder] | None = None,
) -> list[R]:
    """Return *records* sorted by each of *keys* in turn.

    Later keys break ties left by earlier ones.  ``orders[i]`` gives the
    direction for ``keys[i]``; keys without an entry sort ascending.

    Comparison rules:

    * ``None`` and missing values always sort last, in either direction.
    * Strings compare case-insensitively with embedded numbers compared
      numerically (``"item2"`` before ``"item10"``).
    * Booleans sort ``False`` before ``True``.
    * Numbers, dates and datetimes compare natively.

    The input sequence is not modified.

    Raises:
        ValueError: If an order is not ``"asc"`` or ``"desc"``.

    Example::

        sort_records(tags, ["count", "tag"], ["desc", "asc"])
    """
    orders = list(orders or [])
    for order in orders:
        if order not in ("asc", "desc"):
            raise ValueError(f"Unsupported sort order {order!r}; expected 'asc' or 'desc'")
    directions = [orders[i] if i < len(orders) else "asc" for i in range(len(keys))]

    def compare(a: R, b: R) -> int:
        for key, direction in zip(keys, directions):
            left, right = a.get(key), b.get(key)
            if left is None or right is None:
                result = (left is None) - (right is None)
                if result:
                    return result
                continue
            result = _compare_values(left, right)
            if result:
                return -result if direction == "desc" else result
        return 0

    return sorted(records, key=cmp_to_key(compare))


def _compare_values(left: Any, right: Any) -> int:
    if isinstance(left, str) and isinstance(right, str):
        left, right = _natural_key(left), _natural_key(right)
    try:
        return (left > right) - (left < right)
    except TypeError:
        return _compare_values(str(left), str(right))


def _natural_key(text: str) -> tuple[tuple[int, int | str], ...]:
    parts = _DIGITS_RE.split(text.casefold())
    return tuple((0, int(part)) if part.isdecimal() else (1, part) for part in parts if part)
