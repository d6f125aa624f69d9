"""
Line-level diff engine.

Aligns two line sequences on their longest common subsequence and returns
an edit script of same/added/removed lines. Import blocks are small, so the
full quadratic table is used.
"""

from typing import List, Sequence

from .types import DiffLine, DiffTag, EditScript


def lcs_table(a: Sequence[str], b: Sequence[str]) -> List[List[int]]:
    """
    Build the suffix LCS table.

    ``table[i][j]`` is the length of the longest common subsequence of
    ``a[i:]`` and ``b[j:]``.
    """
    n, m = len(a), len(b)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row, below = table[i], table[i + 1]
        for j in range(m - 1, -1, -1):
            if a[i] == b[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])
    return table


def count_operations(lines: Sequence[DiffLine]) -> int:
    """Count maximal runs of consecutive lines sharing a non-same tag."""
    operations = 0
    previous: DiffTag = "same"
    for line in lines:
        if line.tag != "same" and line.tag != previous:
            operations += 1
        previous = line.tag
    return operations


def diff(original: Sequence[str], new: Sequence[str]) -> EditScript:
    """
    Compute the edit script turning ``original`` into ``new``.

    When several minimal scripts exist the insertion is emitted first, which
    keeps the earlier original line aligned as ``same``.
    """
    table = lcs_table(original, new)
    lines: List[DiffLine] = []

    i, j = 0, 0
    n, m = len(original), len(new)
    while i < n and j < m:
        if original[i] == new[j]:
            lines.append(DiffLine("same", original[i]))
            i += 1
            j += 1
        elif table[i][j + 1] >= table[i + 1][j]:
            lines.append(DiffLine("added", new[j]))
            j += 1
        else:
            lines.append(DiffLine("removed", original[i]))
            i += 1

    lines.extend(DiffLine("removed", line) for line in original[i:])
    lines.extend(DiffLine("added", line) for line in new[j:])

    return EditScript(lines=lines, distance=count_operations(lines))


def diff_text(original: str, new: str) -> EditScript:
    return diff(original.split("\n"), new.split("\n"))
