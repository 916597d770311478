"""Substring search: prefix function, KMP, Z-algorithm and Rabin-Karp."""

from __future__ import annotations

MOD = 1_000_000_007
_SECOND_MOD = 1_000_000_033
_FIRST_RADIX = 26
_SECOND_RADIX = 27


def lps_array(s: str) -> list[int]:
    """Return, for each position, the length of the longest proper prefix of
    ``s[:i+1]`` that is also its suffix."""
    lps = [0] * len(s)
    length = 0
    i = 1
    while i < len(s):
        if s[i] == s[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length == 0:
            i += 1
        else:
            length = lps[length - 1]
    return lps


def longest_prefix_suffix(s: str) -> str:
    """Return the longest proper prefix of ``s`` that is also a suffix."""
    if not s:
        return ""
    return s[: lps_array(s)[-1]]


def kmp_find(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    if not needle:
        return 0
    lps = lps_array(needle)
    matched = 0
    for i, ch in enumerate(haystack):
        while matched and ch != needle[matched]:
            matched = lps[matched - 1]
        if ch == needle[matched]:
            matched += 1
        if matched == len(needle):
            return i - len(needle) + 1
    return -1


def z_array(s: str) -> list[int]:
    """Return the Z-array of ``s``; the first entry is 0 by convention."""
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i < right:
            z[i] = min(right - i, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] > right:
            left, right = i, i + z[i]
    return z


def z_find(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle`` using the Z-array, or -1."""
    m = len(needle)
    if m == 0:
        return 0
    z = z_array(needle + haystack)
    return next((i - m for i in range(m, len(z)) if z[i] >= m), -1)


def rabin_karp_hash(s: str, radix: int = _FIRST_RADIX, modulus: int = MOD) -> int:
    """Return the polynomial hash of ``s`` with ``a`` as digit 0."""
    value = 0
    for ch in s:
        value = (value * radix + ord(ch) - ord("a")) % modulus
    return value


def rabin_karp_find(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle`` using a double
    rolling hash, or -1."""
    n, m = len(haystack), len(needle)
    if m > n:
        return -1
    schemes = ((_FIRST_RADIX, MOD), (_SECOND_RADIX, _SECOND_MOD))
    targets = [rabin_karp_hash(needle, r, mod) for r, mod in schemes]
    weights = [pow(r, m, mod) for r, mod in schemes]
    hashes = [rabin_karp_hash(haystack[:m], r, mod) for r, mod in schemes]
    for i in range(n - m + 1):
        if i:
            dropped = ord(haystack[i - 1]) - ord("a")
            added = ord(haystack[i + m - 1]) - ord("a")
            hashes = [
                (h * r - dropped * w + added) % mod
                for h, w, (r, mod) in zip(hashes, weights, schemes)
            ]
        if hashes == targets and haystack[i : i + m] == needle:
            return i
    return -1