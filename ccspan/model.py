from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SequentialPattern:
    symbols: Tuple[int, ...]
    support: int

    def __str__(self) -> str:
        return "{" + ",".join(str(s) for s in self.symbols) + "}" + f" #SUP:{self.support}"


@dataclass(frozen=True)
class CoveredSequentialPattern(SequentialPattern):
    """Sequential pattern carrying a cover count next to its support"""

    cover: int

    def __str__(self) -> str:
        return super().__str__() + f" #COVER:{self.cover}"
