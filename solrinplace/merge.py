"""Merge-join of two sorted streams."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

_MISSING = object()


@dataclass(frozen=True)
class Merged(Generic[T]):
    """One step of a merge: the left item, the right item, or both when they match."""

    left: Optional[T] = None
    right: Optional[T] = None


def merge(
    left: Iterable[T],
    right: Iterable[T],
    compare: Callable[[T, T], int],
) -> Iterator[Merged[T]]:
    """Walk two sorted iterables together, pairing items that compare equal.

    ``compare(a, b)`` returns a negative number when ``a`` sorts first,
    zero when the two match and a positive number when ``b`` sorts first.
    """
    right_iter = iter(right)
    pending = next(right_iter, _MISSING)

    for item in left:
        matched = False
        while pending is not _MISSING:
            order = compare(item, pending)
            if order < 0:
                break
            if order > 0:
                yield Merged(right=pending)
                pending = next(right_iter, _MISSING)
                continue
            yield Merged(left=item, right=pending)
            pending = next(right_iter, _MISSING)
            matched = True
            break
        if not matched:
            yield Merged(left=item)

    while pending is not _MISSING:
        yield Merged(right=pending)
        pending = next(right_iter, _MISSING)