#!/usr/bin/env python3
import math
import time
import logging
import numpy as np
from typing import Dict, List, Tuple

from .closure import ClosurePolicy
from .model import SequentialPattern
from .trie import PatternTrie
from .window import ContiguousWindows, SymbolSequence, _to_array


class InvalidInputError(ValueError):
    """Raised when a mining run is requested with unusable input"""


def _validate(sequences: List[SymbolSequence], relative_support: float) -> None:
    if len(sequences) == 0:
        raise InvalidInputError("Cannot mine patterns from empty sequence database")
    if not 0.0 <= relative_support <= 1.0:
        raise InvalidInputError("Support must be in the range [0,1]")


def _to_seqdb(sequences: List[SymbolSequence]) -> List[np.ndarray]:
    """Convert sequences to int64 arrays, rejecting non-integer symbols"""
    seqdb = []
    for seq in sequences:
        arr = np.asarray(seq)
        if arr.size > 0 and not np.issubdtype(arr.dtype, np.integer):
            raise InvalidInputError("All symbols must be integers")
        seqdb.append(_to_array(arr))
    return seqdb


def _min_support(n_sequences: int, relative_support: float) -> int:
    """Absolute support threshold, rounding half up"""
    return int(math.floor(n_sequences * relative_support + 0.5))


class CCSpan:
    """
    Level-wise miner of closed contiguous sequential patterns.

    Each level k scans the whole database for length-k windows, counts them
    in a pattern trie (at most once per sequence) and applies the closure
    policy to every frequent candidate. Mining stops at the first level
    without a frequent candidate.
    """

    def __init__(
        self, closure: ClosurePolicy = ClosurePolicy.PREFIX, verbose: bool = False
    ) -> None:
        self.closure = closure
        self.verbose = verbose

        # runtime statistics
        self.runtime = -1.0
        self.candidates = 0
        self.levels = 0
        self.min_support = 0

    def _add_length_k_patterns(
        self,
        trie: PatternTrie,
        k: int,
        min_support: int,
        seqdb: List[np.ndarray],
    ) -> int:
        """Count length-k candidates and return how many met min support"""
        candidates: Dict[Tuple[int, ...], None] = {}

        for sequence in seqdb:
            if len(sequence) < k:
                continue

            for candidate in ContiguousWindows(k, sequence):
                # a contiguous pattern cannot occur if its prefix never did
                if k > 1 and trie.lookup(candidate[:-1]) == 0:
                    continue
                # locked on insert so repeats within one sequence are not counted
                if trie.insert_and_count(candidate, lock=True, create_if_missing=True):
                    candidates.setdefault(candidate)
            trie.unlock_all()

        self.candidates += len(candidates)
        survivors = 0
        for candidate in candidates:
            if trie.finalize_candidate(candidate, min_support, self.closure):
                survivors += 1

        if self.verbose:
            logging.info(
                f"Level {k}: {len(candidates)} candidates, {survivors} frequent"
            )
        return survivors

    def mine(
        self, sequences: List[SymbolSequence], relative_support: float
    ) -> PatternTrie:
        """Build the pattern trie holding the closed patterns of sequences"""
        _validate(sequences, relative_support)
        seqdb = _to_seqdb(sequences)
        self.min_support = _min_support(len(seqdb), relative_support)
        self.candidates = 0

        if self.verbose:
            logging.info(
                f"Mining {len(seqdb)} sequences with min support {self.min_support}"
                f" ({self.closure.value} closure)"
            )
        start = time.time()

        trie = PatternTrie()
        k = 1
        while self._add_length_k_patterns(trie, k, self.min_support, seqdb) > 0:
            k += 1
        # the last level produced no frequent candidate
        self.levels = k - 1

        end = time.time()
        self.runtime = end - start
        if self.verbose:
            logging.info(
                f"Finished {self.levels} levels in {self.runtime:.4f} secs,"
                f" considered {self.candidates} candidates"
            )
        return trie

    def mine_to_list(
        self,
        sequences: List[SymbolSequence],
        relative_support: float,
        closed_only: bool = True,
    ) -> List[SequentialPattern]:
        """
        Patterns in lexicographic order with their supports.
        With closed_only=False every frequent pattern is returned, closed or not.
        """
        trie = self.mine(sequences, relative_support)
        return [
            SequentialPattern(entry.path, entry.count)
            for entry in trie.enumerate(closed_only=closed_only)
            if entry.count >= self.min_support
        ]

    def warmup(self):
        """Warmup to compile all JIT functions"""
        if self.verbose:
            logging.info("Warmup to compile JIT functions")
        sequences = [[1, 2, 3, 4], [2, 3, 4, 5], [1, 2, 4, 5]]
        miner = CCSpan(self.closure, verbose=False)
        _ = miner.mine_to_list(sequences, 0.5)
        if self.verbose:
            logging.info("Warmup finished")
