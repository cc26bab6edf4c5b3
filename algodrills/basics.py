"""Small drills on fixed-length integer arrays."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence


def format_array(values: Iterable[object]) -> str:
    """Render values the way the drills print them: each one followed by a space."""
    return "".join(f"{value} " for value in values)


def zero_padded(values: Iterable[int], length: int) -> list[int]:
    """Build an array of ``length`` items: the given values first, zeros after.

    Raises ValueError when more values are given than fit in the array.
    """
    if length < 0:
        raise ValueError(f"array length must not be negative, got {length}")
    items = list(values)
    if len(items) > length:
        raise ValueError(
            f"too many initial values ({len(items)}) for an array of length {length}"
        )
    return items + [0] * (length - len(items))


def update_first(values: MutableSequence[int]) -> MutableSequence[int]:
    """Set the first element to 120 in place and return the same sequence.

    The caller sees the change, because the sequence itself is shared, not copied.
    """
    if not values:
        raise IndexError("cannot update the first element of an empty sequence")
    values[0] = 120
    return values