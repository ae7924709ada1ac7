from .ccspan import CCSpan, InvalidInputError
from .closure import ClosurePolicy
from .model import CoveredSequentialPattern, SequentialPattern
from .redundancy import redundancy
from .spmf import MalformedRecordError, SPMFParser, format_pattern, write_patterns
from .trie import PatternTrie, TrieEntry
from .window import ContiguousWindows

__all__ = [
    "CCSpan",
    "ClosurePolicy",
    "ContiguousWindows",
    "CoveredSequentialPattern",
    "InvalidInputError",
    "MalformedRecordError",
    "PatternTrie",
    "SPMFParser",
    "SequentialPattern",
    "TrieEntry",
    "format_pattern",
    "redundancy",
    "write_patterns",
]
