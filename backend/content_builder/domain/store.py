"""
Ordered section sequence.

Every operation returns a new list and leaves its input untouched; the
caller replaces the sequence it owns with the result. Invalid indices raise
IndexOutOfRange in every environment, including production.
"""
from typing import List, Sequence, TypeVar

from .exceptions import IndexOutOfRange

T = TypeVar("T")


def check_index(sequence: Sequence, index: int) -> None:
    # negative indices are rejected, not wrapped
    if not isinstance(index, int) or isinstance(index, bool):
        raise IndexOutOfRange(index, len(sequence))
    if index < 0 or index >= len(sequence):
        raise IndexOutOfRange(index, len(sequence))


def append(sequence: Sequence[T], item: T) -> List[T]:
    return [*sequence, item]


def replace_at(sequence: Sequence[T], index: int, item: T) -> List[T]:
    check_index(sequence, index)
    return [item if i == index else existing for i, existing in enumerate(sequence)]


def remove_at(sequence: Sequence[T], index: int) -> List[T]:
    check_index(sequence, index)
    return [existing for i, existing in enumerate(sequence) if i != index]


def move_to(sequence: Sequence[T], from_index: int, to_index: int) -> List[T]:
    """
    Move the element at from_index so that it ends up at to_index.

    Both indices must be valid for the sequence as it is before the move.
    """
    check_index(sequence, from_index)
    check_index(sequence, to_index)

    if from_index == to_index:
        return list(sequence)

    moved = sequence[from_index]
    remaining = [existing for i, existing in enumerate(sequence) if i != from_index]
    target = min(max(to_index, 0), len(remaining))

    return [*remaining[:target], moved, *remaining[target:]]
