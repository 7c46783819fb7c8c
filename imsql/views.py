"""Small lazy iterator adaptors."""

from __future__ import annotations

from typing import Iterable, Iterator, TypeVar, Union

T = TypeVar("T")
S = TypeVar("S")


def dedup(iterable: Iterable[T]) -> Iterator[T]:
    """Yield items, skipping any equal to the one just before it."""
    sentinel = object()
    previous: object = sentinel
    for item in iterable:
        if previous is sentinel or item != previous:
            yield item
        previous = item


def intersperse(iterable: Iterable[T], separator: S) -> Iterator[Union[T, S]]:
    """Yield items with ``separator`` between each adjacent pair."""
    iterator = iter(iterable)
    try:
        first = next(iterator)
    except StopIteration:
        return
    yield first
    for item in iterator:
        yield separator
        yield item