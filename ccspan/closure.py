from enum import Enum
from typing import Tuple


class ClosurePolicy(Enum):
    """
    Redundancy elimination applied to each frequent candidate.

    PREFIX: revoke the prefix when it has the candidate's support.
    PREFIX_SUFFIX: also revoke the suffix when it has the candidate's support.
    MAXIMAL: revoke prefix and suffix whenever the candidate is frequent.
    """

    PREFIX = "prefix"
    PREFIX_SUFFIX = "prefix-suffix"
    MAXIMAL = "maximal"

    @classmethod
    def from_name(cls, name: str) -> "ClosurePolicy":
        try:
            return cls(name.strip().lower().replace("_", "-"))
        except ValueError:
            choices = ", ".join(policy.value for policy in cls)
            raise ValueError(f"Unknown closure policy {name!r}, expected one of {choices}")

    @property
    def suffix(self) -> str:
        """Annotation token appended to written patterns"""
        if self is ClosurePolicy.MAXIMAL:
            return "#MAXIMAL"
        return "#CLOSED"

    def decide(self, path: Tuple[int, ...], count: int, trie) -> None:
        """Update closed marks in trie for a candidate that met support"""
        if len(path) > 1:
            prefix = path[:-1]
            suffix = path[1:]
            if self is ClosurePolicy.MAXIMAL:
                trie.unmark(prefix)
                trie.unmark(suffix)
            else:
                if trie.lookup(prefix) == count:
                    trie.unmark(prefix)
                if self is ClosurePolicy.PREFIX_SUFFIX and trie.lookup(suffix) == count:
                    trie.unmark(suffix)
        trie.mark(path)
