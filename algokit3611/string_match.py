"""Subsequence search: naive and Boyer-Moore-Horspool.

Both functions return the index of the first occurrence of ``pattern`` in
``text``, or ``len(text)`` when there is none. An empty pattern matches at 0.
``pred`` compares a projected text element with a projected pattern element;
``proj`` and ``s_proj`` project text and pattern elements respectively.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Hashable, Sequence
from typing import Any, Optional

Predicate = Callable[[Any, Any], bool]
Projection = Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


def naive_search(
    text: Sequence[Any],
    pattern: Sequence[Any],
    pred: Optional[Predicate] = None,
    proj: Optional[Projection] = None,
    s_proj: Optional[Projection] = None,
) -> int:
    """Find ``pattern`` in ``text`` by checking every start position."""
    pred = pred or operator.eq
    proj = proj or _identity
    s_proj = s_proj or _identity

    n, m = len(text), len(pattern)
    if m == 0:
        return 0
    if n == 0 or m > n:
        return n

    for start in range(n - m + 1):
        if all(
            pred(proj(t), s_proj(p))
            for t, p in zip(text[start:start + m], pattern)
        ):
            return start
    return n


def _shift_function(
    pattern: Sequence[Any],
    pred: Predicate,
    proj: Projection,
    s_proj: Projection,
    use_table: bool,
) -> Callable[[Any], int]:
    """Return a function mapping a text element to the Horspool shift."""
    m = len(pattern)
    projected = [s_proj(p) for p in pattern[:-1]]

    if use_table:
        try:
            table = {value: m - 1 - i for i, value in enumerate(projected)}
        except TypeError:
            pass
        else:
            def table_shift(element: Any) -> int:
                key = proj(element)
                if not isinstance(key, Hashable):
                    return _scan_shift(key)
                return table.get(key, m)

            def _scan_shift(key: Any) -> int:
                for i in range(len(projected) - 1, -1, -1):
                    if pred(key, projected[i]):
                        return m - 1 - i
                return m

            return table_shift

    def scan_shift(element: Any) -> int:
        key = proj(element)
        for i in range(len(projected) - 1, -1, -1):
            if pred(key, projected[i]):
                return m - 1 - i
        return m

    return scan_shift


def bmh_search(
    text: Sequence[Any],
    pattern: Sequence[Any],
    pred: Optional[Predicate] = None,
    proj: Optional[Projection] = None,
    s_proj: Optional[Projection] = None,
) -> int:
    """Find ``pattern`` in ``text`` with the Boyer-Moore-Horspool method."""
    use_table = pred is None
    pred = pred or operator.eq
    proj = proj or _identity
    s_proj = s_proj or _identity

    n, m = len(text), len(pattern)
    if m == 0:
        return 0
    if n == 0 or m > n:
        return n

    shift = _shift_function(pattern, pred, proj, s_proj, use_table)
    projected_pattern = [s_proj(p) for p in pattern]

    pos = 0
    while pos <= n - m:
        j = m - 1
        while j >= 0 and pred(proj(text[pos + j]), projected_pattern[j]):
            j -= 1
        if j < 0:
            return pos
        pos += shift(text[pos + m - 1])
    return n