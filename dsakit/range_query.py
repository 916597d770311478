"""Range-minimum and range-sum query structures."""

from __future__ import annotations

from collections.abc import Iterable


def _check_range(left: int, right: int, size: int) -> None:
    if not 0 <= left <= right < size:
        raise IndexError(f"range [{left}, {right}] out of bounds for size {size}")


class SparseTable:
    """Static range-minimum queries in O(1) after O(n log n) preprocessing."""

    def __init__(self, nums: Iterable[int]) -> None:
        values = list(nums)
        if not values:
            raise ValueError("sparse table needs at least one value")
        self._size = len(values)
        self._levels = [values]
        width = 1
        while 2 * width <= self._size:
            prev = self._levels[-1]
            self._levels.append(
                [min(prev[i], prev[i + width]) for i in range(self._size - 2 * width + 1)]
            )
            width *= 2

    def query(self, left: int, right: int) -> int:
        """Return the minimum of the inclusive range ``[left, right]``."""
        _check_range(left, right, self._size)
        j = (right - left + 1).bit_length() - 1
        level = self._levels[j]
        return min(level[left], level[right - (1 << j) + 1])


class SegmentTree:
    """Range sums with point assignment and lazy range addition."""

    def __init__(self, nums: Iterable[int]) -> None:
        values = list(nums)
        if not values:
            raise ValueError("segment tree needs at least one value")
        self._size = len(values)
        self._seg = [0] * (4 * self._size)
        self._lazy = [0] * (4 * self._size)
        self._build(values, 0, 0, self._size - 1)

    def _build(self, values: list[int], ind: int, low: int, high: int) -> None:
        if low == high:
            self._seg[ind] = values[low]
            return
        mid = (low + high) // 2
        self._build(values, 2 * ind + 1, low, mid)
        self._build(values, 2 * ind + 2, mid + 1, high)
        self._seg[ind] = self._seg[2 * ind + 1] + self._seg[2 * ind + 2]

    def _apply(self, ind: int, low: int, high: int, value: int) -> None:
        self._seg[ind] += (high - low + 1) * value
        if low != high:
            self._lazy[ind] += value

    def _push(self, ind: int, low: int, high: int) -> None:
        pending = self._lazy[ind]
        if pending:
            mid = (low + high) // 2
            self._apply(2 * ind + 1, low, mid, pending)
            self._apply(2 * ind + 2, mid + 1, high, pending)
            self._lazy[ind] = 0

    def _sum(self, left: int, right: int, ind: int, low: int, high: int) -> int:
        if right < low or high < left:
            return 0
        if left <= low and high <= right:
            return self._seg[ind]
        self._push(ind, low, high)
        mid = (low + high) // 2
        return self._sum(left, right, 2 * ind + 1, low, mid) + self._sum(
            left, right, 2 * ind + 2, mid + 1, high
        )

    def _assign(self, index: int, value: int, ind: int, low: int, high: int) -> None:
        if low == high:
            self._seg[ind] = value
            return
        self._push(ind, low, high)
        mid = (low + high) // 2
        if index <= mid:
            self._assign(index, value, 2 * ind + 1, low, mid)
        else:
            self._assign(index, value, 2 * ind + 2, mid + 1, high)
        self._seg[ind] = self._seg[2 * ind + 1] + self._seg[2 * ind + 2]

    def _add(self, left: int, right: int, value: int, ind: int, low: int, high: int) -> None:
        if right < low or high < left:
            return
        if left <= low and high <= right:
            self._apply(ind, low, high, value)
            return
        self._push(ind, low, high)
        mid = (low + high) // 2
        self._add(left, right, value, 2 * ind + 1, low, mid)
        self._add(left, right, value, 2 * ind + 2, mid + 1, high)
        self._seg[ind] = self._seg[2 * ind + 1] + self._seg[2 * ind + 2]

    def query(self, left: int, right: int) -> int:
        """Return the sum of the inclusive range ``[left, right]``."""
        _check_range(left, right, self._size)
        return self._sum(left, right, 0, 0, self._size - 1)

    def point_update(self, index: int, value: int) -> None:
        """Set the element at ``index`` to ``value``."""
        _check_range(index, index, self._size)
        self._assign(index, value, 0, 0, self._size - 1)

    def range_update(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every element of ``[left, right]``."""
        _check_range(left, right, self._size)
        self._add(left, right, value, 0, 0, self._size - 1)

    def query_sum_lazy(self, left: int, right: int) -> int:
        """Return the range sum, resolving pending range additions on the way."""
        return self.query(left, right)

    def __len__(self) -> int:
        return self._size