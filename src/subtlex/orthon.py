from __future__ import annotations
from typing import List


def are_neighbors(a: str, b: str) -> bool:
    """
    Coltheart-N relation: same length and exactly one differing position.
    Identical strings (zero differences) are not neighbours. Callers fold case first.
    """
    if len(a) != len(b):
        return False
    diffs = 0
    for x, y in zip(a, b):
        if x != y:
            diffs += 1
            if diffs > 1:
                return False
    return diffs == 1


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance, unit cost for insert/delete/substitute."""
    n, m = len(a), len(b)
    if n == 0:
        return m
    if m == 0:
        return n
    # d[i][j] = distance between a[:i] and b[:j]
    d: List[List[int]] = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        d[i][0] = i
    for j in range(m + 1):
        d[0][j] = j
    for i in range(1, n + 1):
        ca = a[i - 1]
        row, prev = d[i], d[i - 1]
        for j in range(1, m + 1):
            cost = 0 if ca == b[j - 1] else 1
            row[j] = min(
                prev[j] + 1,          # deletion
                row[j - 1] + 1,       # insertion
                prev[j - 1] + cost,   # substitution
            )
    return d[n][m]
