"""String matching: failure function, KMP search, Z-function and bit-parallel LCS."""

from __future__ import annotations

from collections.abc import Sequence


def failure_function(pattern: Sequence) -> list[int]:
    """Return the KMP failure table with the ``-1`` convention.

    ``result[i] + 1`` is the length of the longest proper border of
    ``pattern[:i + 1]``.
    """
    pi = [-1] * len(pattern)
    j = -1
    for i, ch in enumerate(pattern[1:], start=1):
        while j >= 0 and ch != pattern[j + 1]:
            j = pi[j]
        if ch == pattern[j + 1]:
            j += 1
            pi[i] = j
        else:
            pi[i] = -1
    return pi


def kmp(text: Sequence, pattern: Sequence) -> list[int]:
    """Return every start position of ``pattern`` in ``text``, overlaps included."""
    if not pattern:
        return []
    pi = failure_function(pattern)
    last = len(pattern) - 1
    matches = []
    j = -1
    for i, ch in enumerate(text):
        while j >= 0 and ch != pattern[j + 1]:
            j = pi[j]
        if ch == pattern[j + 1]:
            j += 1
            if j == last:
                matches.append(i - j)
                j = pi[j]
    return matches


def z_function(s: Sequence) -> list[int]:
    """Return ``z`` where ``z[i]`` is the longest common prefix of ``s`` and ``s[i:]``."""
    n = len(s)
    if n == 0:
        return []
    z = [0] * n
    z[0] = n
    left = right = -1
    for i in range(1, n):
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if right < i + z[i] - 1:
            left, right = i, i + z[i] - 1
    return z


def lcs_length(a: Sequence, b: Sequence) -> int:
    """Return the length of the longest common subsequence of ``a`` and ``b``.

    Uses the bit-parallel method, with one arbitrary-size integer per symbol of ``b``.
    """
    masks: dict = {}
    for i, ch in enumerate(b):
        masks[ch] = masks.get(ch, 0) | (1 << i)
    row = 0
    for ch in a:
        x = masks.get(ch, 0) | row
        shifted = (row << 1) | 1
        row = x & (x ^ (x - shifted))
    return bin(row).count("1")