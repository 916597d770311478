"""Merge sort."""

from __future__ import annotations

from typing import Any, MutableSequence


def merge(nums: MutableSequence[Any], low: int, mid: int, high: int) -> None:
    """Merge the sorted runs ``nums[low:mid+1]`` and ``nums[mid+1:high+1]`` in place."""
    left = list(nums[low : mid + 1])
    right = list(nums[mid + 1 : high + 1])
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    nums[low : high + 1] = merged


def merge_sort(nums: MutableSequence[Any]) -> None:
    """Sort ``nums`` in place in ascending order."""

    def sort(low: int, high: int) -> None:
        if low >= high:
            return
        mid = (low + high) // 2
        sort(low, mid)
        sort(mid + 1, high)
        merge(nums, low, mid, high)

    sort(0, len(nums) - 1)