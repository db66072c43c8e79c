"""Small helpers over sequences."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")


def index_of(values: Sequence[T], value: T) -> int:
    """Return the index of the first occurrence of ``value``, or -1."""
    return next((i for i, item in enumerate(values) if item == value), -1)


def take(values: Sequence[T], size: int) -> list[T]:
    """Return a new list of the first ``size`` items of ``values``."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if size > len(values):
        raise ValueError(f"size {size} exceeds sequence length {len(values)}")
    return list(values[:size])