# src/brand_check/brand/distance.py
from __future__ import annotations
from typing import List


def levenshtein(a: str, b: str) -> int:
    """
    Distance d'édition (insertions, suppressions, substitutions) entre a et b.
    Compte en points de code : chaque élément d'un str Python est un caractère.
    """
    if not a or not b:
        return max(len(a or ""), len(b or ""))

    # lignes = préfixes de b, colonnes = préfixes de a
    matrix: List[List[int]] = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]
    for i in range(len(b) + 1):
        matrix[i][0] = i
    for j in range(len(a) + 1):
        matrix[0][j] = j

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            cost = 0 if b[i - 1] == a[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost,
            )
    return matrix[len(b)][len(a)]
