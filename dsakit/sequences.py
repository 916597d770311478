"""Array algorithms: cycle detection, subsequences, interval DP and monotonic stacks."""

from __future__ import annotations

import operator
from bisect import bisect_left
from collections.abc import Callable, Iterable, Sequence
from typing import Any


def find_duplicate(nums: Sequence[int]) -> int:
    """Return a repeated value in ``n + 1`` integers drawn from ``1..n``
    using Floyd's cycle detection."""
    if len(nums) < 2:
        raise ValueError("need at least two values")
    slow = nums[0]
    fast = nums[nums[0]]
    while slow != fast:
        slow = nums[slow]
        fast = nums[nums[fast]]
    slow = 0
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def length_of_lis(nums: Sequence[Any]) -> int:
    """Return the length of the longest strictly increasing subsequence (O(n^2))."""
    dp: list[int] = []
    for x in nums:
        dp.append(1 + max((d for y, d in zip(nums, dp) if y < x), default=0))
    return max(dp, default=0)


def longest_increasing_subsequence(nums: Sequence[Any]) -> list[Any]:
    """Return one longest strictly increasing subsequence (O(n^2))."""
    dp: list[int] = []
    prev: list[int | None] = []
    for i, x in enumerate(nums):
        best_len, best_prev = 1, None
        for j in range(i):
            if nums[j] < x and dp[j] + 1 > best_len:
                best_len, best_prev = dp[j] + 1, j
        dp.append(best_len)
        prev.append(best_prev)
    if not dp:
        return []
    index: int | None = dp.index(max(dp))
    result = []
    while index is not None:
        result.append(nums[index])
        index = prev[index]
    result.reverse()
    return result


def lis_tails(nums: Iterable[Any]) -> list[Any]:
    """Return the patience-sorting tails: ``tails[k]`` is the smallest possible
    last element of an increasing subsequence of length ``k + 1``."""
    tails: list[Any] = []
    for x in nums:
        pos = bisect_left(tails, x)
        if pos == len(tails):
            tails.append(x)
        else:
            tails[pos] = x
    return tails


def length_of_lis_fast(nums: Iterable[Any]) -> int:
    """Return the length of the longest strictly increasing subsequence (O(n log n))."""
    return len(lis_tails(nums))


def count_lis(nums: Sequence[Any]) -> int:
    """Return how many longest strictly increasing subsequences there are."""
    dp: list[int] = []
    counts: list[int] = []
    for i, x in enumerate(nums):
        length, ways = 1, 1
        for j in range(i):
            if nums[j] < x:
                if dp[j] + 1 > length:
                    length, ways = dp[j] + 1, counts[j]
                elif dp[j] + 1 == length:
                    ways += counts[j]
        dp.append(length)
        counts.append(ways)
    best = max(dp, default=0)
    return sum(c for d, c in zip(dp, counts) if d == best)


def longest_common_subsequence(text1: Sequence[Any], text2: Sequence[Any]) -> int:
    """Return the length of the longest common subsequence."""
    previous = [0] * (len(text2) + 1)
    for a in text1:
        current = [0]
        for j, b in enumerate(text2):
            current.append(previous[j] + 1 if a == b else max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def matrix_chain_order(dims: Sequence[int]) -> int:
    """Return the least number of scalar multiplications to multiply the chain
    of matrices whose ``i``-th matrix is ``dims[i-1] x dims[i]``."""
    n = len(dims)
    if n < 2:
        raise ValueError("need at least one matrix (two dimensions)")
    dp = [[0] * n for _ in range(n)]
    for i in range(n - 1, 0, -1):
        for j in range(i + 1, n):
            dp[i][j] = min(
                dims[i - 1] * dims[k] * dims[j] + dp[i][k] + dp[k + 1][j]
                for k in range(i, j)
            )
    return dp[1][n - 1]


def _nearest(
    nums: Sequence[Any],
    indices: Iterable[int],
    default: int,
    beats: Callable[[Any, Any], bool],
) -> list[int]:
    result = [default] * len(nums)
    stack: list[int] = []
    for i in indices:
        while stack and beats(nums[i], nums[stack[-1]]):
            result[stack.pop()] = i
        stack.append(i)
    return result


def next_greater_index(nums: Sequence[Any]) -> list[int]:
    """Index of the next strictly greater element, or ``len(nums)``."""
    return _nearest(nums, range(len(nums)), len(nums), operator.gt)


def prev_greater_index(nums: Sequence[Any]) -> list[int]:
    """Index of the previous strictly greater element, or -1."""
    return _nearest(nums, reversed(range(len(nums))), -1, operator.gt)


def next_smaller_index(nums: Sequence[Any]) -> list[int]:
    """Index of the next strictly smaller element, or ``len(nums)``."""
    return _nearest(nums, range(len(nums)), len(nums), operator.lt)


def prev_smaller_index(nums: Sequence[Any]) -> list[int]:
    """Index of the previous strictly smaller element, or -1."""
    return _nearest(nums, reversed(range(len(nums))), -1, operator.lt)


def _spans(
    arr: Sequence[Any],
    pop_left: Callable[[Any, Any], bool],
    pop_right: Callable[[Any, Any], bool],
) -> tuple[list[int], list[int]]:
    n = len(arr)
    left = [0] * n
    right = [0] * n
    stack: list[int] = []
    for i, x in enumerate(arr):
        while stack and pop_left(arr[stack[-1]], x):
            stack.pop()
        left[i] = i - stack[-1] if stack else i + 1
        stack.append(i)
    stack = []
    for j in reversed(range(n)):
        while stack and pop_right(arr[stack[-1]], arr[j]):
            stack.pop()
        right[j] = stack[-1] - j if stack else n - j
        stack.append(j)
    return left, right


def span_counts_greater(arr: Sequence[Any]) -> tuple[list[int], list[int]]:
    """Return how far each element reaches left and right over elements not
    smaller than it, so that ``left[i] * right[i]`` subarrays have ``arr[i]``
    as their (leftmost-tie) minimum."""
    return _spans(arr, operator.gt, operator.ge)


def span_counts_smaller(arr: Sequence[Any]) -> tuple[list[int], list[int]]:
    """Return how far each element reaches left and right over elements not
    greater than it, so that ``left[i] * right[i]`` subarrays have ``arr[i]``
    as their (leftmost-tie) maximum."""
    return _spans(arr, operator.lt, operator.le)