import numpy as np
from numba import jit
from typing import List

from .model import SequentialPattern


@jit(nopython=True)
def _is_contiguous_subsequence(target: np.ndarray, sequence: np.ndarray) -> bool:
    """Check if target occurs as a contiguous run inside sequence"""
    m, n = len(target), len(sequence)
    if m > n:
        return False

    for start in range(n - m + 1):
        i = 0
        while i < m and sequence[start + i] == target[i]:
            i += 1
        if i == m:
            return True

    return False


def redundancy(patterns: List[SequentialPattern]) -> float:
    """
    Fraction of patterns that are a proper contiguous subsequence of another
    pattern in the list with the same support.
    """
    if not patterns:
        return 0.0

    arrays = [np.asarray(p.symbols, dtype=np.int64) for p in patterns]
    redundant = 0
    for i, pattern in enumerate(patterns):
        for j, other in enumerate(patterns):
            if i == j or other.support != pattern.support:
                continue
            if len(arrays[j]) <= len(arrays[i]):
                continue
            if _is_contiguous_subsequence(arrays[i], arrays[j]):
                redundant += 1
                break

    return redundant / len(patterns)
