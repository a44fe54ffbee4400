"""Assertion helpers for test bodies.

Every helper returns ``None`` when its condition holds and raises
:class:`~enki.core.outcome.TestFailed` at the first violation otherwise.
"""
from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

import numpy as np

from .outcome import TestFailed

ElementComparator = Callable[[Any, Any], bool]


def assert_true(condition: Any) -> None:
    """Assert that ``condition`` is true."""

    if not condition:
        raise TestFailed("Assertion failed")


def assert_no_exception(procedure: Callable[[], Any]) -> None:
    """Assert that calling ``procedure`` completes without raising."""

    try:
        procedure()
    except Exception as exc:
        raise TestFailed(f"Unexpected exception: {exc!r}") from exc


def assert_sequence_equals(
    a: Sequence[Any],
    b: Sequence[Any],
    equals: Optional[ElementComparator] = None,
) -> None:
    """Assert that two sequences hold equal elements in the same order.

    ``equals`` compares one pair of elements; by default values are compared
    with ``==`` and array elements with :func:`numpy.array_equal`.
    """

    if len(a) != len(b):
        raise TestFailed(f"Length mismatch: {len(a)} != {len(b)}")
    compare = equals or _values_equal
    for index, (left, right) in enumerate(zip(a, b)):
        if not compare(left, right):
            raise TestFailed(f"Element {index} differs: {left!r} != {right!r}")


def assert_sequence_in_range(seq: Sequence[Any], minimum: Any, maximum: Any) -> None:
    """Assert that every element of ``seq`` lies in ``[minimum, maximum]``."""

    for index, value in enumerate(seq):
        if value < minimum or value > maximum:
            raise TestFailed(
                f"Element {index} out of range: {value!r} not in [{minimum!r}, {maximum!r}]"
            )


def _values_equal(left: Any, right: Any) -> bool:
    if isinstance(left, np.ndarray) or isinstance(right, np.ndarray):
        return bool(np.array_equal(left, right))
    try:
        return bool(left == right)
    except ValueError:
        # containers holding arrays; compare element by element
        if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
            return len(left) == len(right) and all(
                _values_equal(item, other) for item, other in zip(left, right)
            )
        return bool(np.array_equal(left, right))
