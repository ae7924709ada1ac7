import numpy as np
from numba import jit
from typing import Iterator, Sequence, Tuple, Union


SymbolSequence = Union[Sequence[int], np.ndarray]


def _to_array(sequence: SymbolSequence) -> np.ndarray:
    """Convert a sequence of symbols to a contiguous int64 array"""
    return np.ascontiguousarray(sequence, dtype=np.int64).reshape(-1)


@jit(nopython=True)
def _contiguous_windows(sequence: np.ndarray, k: int) -> np.ndarray:
    """Generate all length-k contiguous windows of a sequence, shape (N, k)"""
    n_windows = max(len(sequence) - k + 1, 0)
    windows = np.empty((n_windows, k), dtype=np.int64)
    for i in range(n_windows):
        for j in range(k):
            windows[i, j] = sequence[i + j]

    return windows


class ContiguousWindows:
    """
    View over every contiguous length-k window of a sequence.
    Windows are computed on first use and yielded as tuples in ascending
    start offset order; iterating again restarts from offset 0.
    """

    def __init__(self, k: int, sequence: SymbolSequence) -> None:
        if k < 1:
            raise ValueError("Window length must be at least 1")
        self.k = k
        self._sequence = _to_array(sequence)
        self._windows = None

    def as_array(self) -> np.ndarray:
        if self._windows is None:
            self._windows = _contiguous_windows(self._sequence, self.k)
        return self._windows

    def __len__(self) -> int:
        return max(len(self._sequence) - self.k + 1, 0)

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        for window in self.as_array():
            yield tuple(window.tolist())
