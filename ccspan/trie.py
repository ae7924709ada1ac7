import numpy as np
from typing import Dict, Iterator, List, NamedTuple, Optional, Sequence, Tuple


Path = Sequence[int]
ROOT = 0


class TrieEntry(NamedTuple):
    path: Tuple[int, ...]
    count: int
    closed: bool


class PatternTrie:
    """
    Prefix tree over symbol sequences stored as an arena of nodes.

    Node ids index into parallel numpy arrays holding the occurrence count,
    the transient lock flag and the closed flag of every node. Children are
    kept per node as a symbol -> node id dict. Node 0 is the root and stands
    for the empty pattern.
    """

    def __init__(self, capacity: int = 64) -> None:
        capacity = max(int(capacity), 1)
        self._children: List[Dict[int, int]] = [{}]
        self._counts = np.zeros(capacity, dtype=np.int64)
        self._locked = np.zeros(capacity, dtype=np.bool_)
        self._closed = np.zeros(capacity, dtype=np.bool_)
        self._size = 1  # root

    def __len__(self) -> int:
        """Number of pattern nodes (root excluded)"""
        return self._size - 1

    def __contains__(self, path: Path) -> bool:
        node = self._find(path)
        return node is not None and node != ROOT

    def _grow(self) -> None:
        """Double the capacity of the state arrays"""
        extra = len(self._counts)
        self._counts = np.concatenate([self._counts, np.zeros(extra, dtype=np.int64)])
        self._locked = np.concatenate([self._locked, np.zeros(extra, dtype=np.bool_)])
        self._closed = np.concatenate([self._closed, np.zeros(extra, dtype=np.bool_)])

    def _new_node(self) -> int:
        if self._size == len(self._counts):
            self._grow()
        node = self._size
        self._children.append({})
        self._size += 1
        return node

    def _find(self, path: Path) -> Optional[int]:
        """Node id at the end of path, None if the path is absent"""
        node = ROOT
        for symbol in path:
            node = self._children[node].get(int(symbol))
            if node is None:
                return None
        return node

    def _find_or_create(self, path: Path) -> int:
        node = ROOT
        for symbol in path:
            symbol = int(symbol)
            child = self._children[node].get(symbol)
            if child is None:
                child = self._new_node()
                self._children[node][symbol] = child
            node = child
        return node

    def lookup(self, path: Path) -> int:
        """Frequency of the exact path, 0 when absent"""
        node = self._find(path)
        if node is None or node == ROOT:
            return 0
        return int(self._counts[node])

    def insert_and_count(
        self, path: Path, lock: bool = True, create_if_missing: bool = True
    ) -> bool:
        """
        Count one occurrence of path.
        Returns False without counting when the terminal node is already
        locked (the path was counted for the current sequence) or when the
        path is absent and may not be created.
        """
        if create_if_missing:
            node = self._find_or_create(path)
        else:
            node = self._find(path)
            if node is None:
                return False
        if node == ROOT or self._locked[node]:
            return False

        self._counts[node] += 1
        if lock:
            self._locked[node] = True
        return True

    def unlock_all(self) -> None:
        """Clear the lock flag of every node"""
        self._locked[: self._size] = False

    def is_closed(self, path: Path) -> bool:
        node = self._find(path)
        return node is not None and bool(self._closed[node])

    def mark(self, path: Path) -> None:
        node = self._find(path)
        if node is not None and node != ROOT:
            self._closed[node] = True

    def unmark(self, path: Path) -> None:
        node = self._find(path)
        if node is not None:
            self._closed[node] = False

    def finalize_candidate(self, path: Path, min_support: int, closure_policy) -> bool:
        """
        Apply minimum support and closure checks to a candidate whose count
        is complete for the current level.
        Returns True if the candidate is frequent and should seed growth.
        """
        count = self.lookup(path)
        if count < min_support:
            return False
        closure_policy.decide(tuple(path), count, self)
        return True

    def enumerate(self, closed_only: bool = False) -> Iterator[TrieEntry]:
        """Depth-first traversal in ascending symbol order, root excluded"""
        stack = [(ROOT, ())]
        while stack:
            node, path = stack.pop()
            if node != ROOT and (not closed_only or self._closed[node]):
                yield TrieEntry(path, int(self._counts[node]), bool(self._closed[node]))
            children = self._children[node]
            # push in reverse so the smallest symbol is visited first
            for symbol in sorted(children, reverse=True):
                stack.append((children[symbol], path + (symbol,)))
