"""Bit manipulation helpers and bitmask techniques."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations
from typing import NamedTuple

_WORD_MASK = (1 << 64) - 1
_CASE_BIT = 1 << 5


def to_binary(n: int, width: int = 64) -> str:
    """Return the lowest ``width`` bits of ``n``, most significant first."""
    if width < 0:
        raise ValueError("width must be non-negative")
    return "".join(str((n >> i) & 1) for i in range(width - 1, -1, -1))


def is_odd(num: int) -> bool:
    """Return True if ``num`` is odd."""
    return bool(num & 1)


def is_power_of_two(num: int) -> bool:
    """Return True if ``num`` is a positive power of two."""
    return num > 0 and not num & (num - 1)


def is_bit_set(num: int, i: int) -> bool:
    """Return True if bit ``i`` of ``num`` is set."""
    return bool((num >> i) & 1)


def set_bit(num: int, i: int) -> int:
    """Return ``num`` with bit ``i`` set."""
    return num | (1 << i)


def unset_bit(num: int, i: int) -> int:
    """Return ``num`` with bit ``i`` cleared."""
    return num & ~(1 << i)


def toggle_bit(num: int, i: int) -> int:
    """Return ``num`` with bit ``i`` flipped."""
    return num ^ (1 << i)


def popcount(num: int) -> int:
    """Return the number of set bits; negatives are taken as 64-bit words."""
    if num < 0:
        num &= _WORD_MASK
    return num.bit_count()


def halve(num: int) -> int:
    """Return ``num`` shifted right by one bit."""
    return num >> 1


def double(num: int) -> int:
    """Return ``num`` shifted left by one bit."""
    return num << 1


def _check_char(ch: str) -> None:
    if len(ch) != 1:
        raise ValueError("expected a single character")


def to_lower(ch: str) -> str:
    """Lower-case an ASCII letter by setting bit 5."""
    _check_char(ch)
    return chr(ord(ch) | _CASE_BIT)


def to_upper(ch: str) -> str:
    """Upper-case an ASCII letter by clearing bit 5."""
    _check_char(ch)
    return chr(ord(ch) & ~_CASE_BIT)


def clear_lsb(num: int, i: int) -> int:
    """Clear bits ``0..i`` of ``num``."""
    return num & ~((1 << (i + 1)) - 1)


def clear_msb(num: int, i: int) -> int:
    """Keep only bits ``0..i`` of ``num``."""
    return num & ((1 << (i + 1)) - 1)


def availability_mask(days: Iterable[int]) -> int:
    """Return a bitmask with one bit set per available day."""
    mask = 0
    for day in days:
        mask |= 1 << day
    return mask


class WorkerPair(NamedTuple):
    """Two workers and the number of days both are available."""

    first: int
    second: int
    common_days: int


def best_worker_pair(availability: Iterable[Iterable[int]]) -> WorkerPair:
    """Find the pair of workers sharing the most available days.

    Returns ``WorkerPair(-1, -1, 0)`` when no pair shares any day.
    """
    masks = [availability_mask(days) for days in availability]
    best = WorkerPair(-1, -1, 0)
    for (i, first), (j, second) in combinations(enumerate(masks), 2):
        common = popcount(first & second)
        if common > best.common_days:
            best = WorkerPair(i, j, common)
    return best