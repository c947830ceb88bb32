"""
Edit Distance
=============

Levenshtein distance between two words.

Used as the search heuristic: every graph edge is one primitive edit, so
moving along an edge changes the distance to any fixed target by at most
one. The estimate therefore never overestimates the remaining steps.
"""

from typing import Sequence


def levenshtein_distance(s: Sequence, t: Sequence) -> int:
    """Minimum number of insertions, deletions and substitutions turning s into t.

    Builds the full (len(s)+1) x (len(t)+1) table; row 0 and column 0 hold
    the cost of building each prefix from nothing.

    Example:
        >>> levenshtein_distance("kitten", "sitting")
        3
    """
    m, n = len(s), len(t)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        table[i][0] = i
    for j in range(n + 1):
        table[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            substitution_cost = 0 if s[i - 1] == t[j - 1] else 1
            table[i][j] = min(
                table[i - 1][j] + 1,                      # deletion
                table[i][j - 1] + 1,                      # insertion
                table[i - 1][j - 1] + substitution_cost   # substitution
            )

    return table[m][n]


def is_single_edit(s: str, t: str) -> bool:
    """True when s and t are exactly one primitive edit apart."""
    if abs(len(s) - len(t)) > 1 or s == t:
        return False
    return levenshtein_distance(s, t) == 1
