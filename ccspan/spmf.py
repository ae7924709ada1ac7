import logging
from typing import Callable, Iterable, List, Union

from .model import CoveredSequentialPattern, SequentialPattern


SUPPORT_PREFIX = "#SUP:"
COVER_PREFIX = "#COVER:"
SEPARATORS = ("-1", "-2")


class MalformedRecordError(ValueError):
    """Raised for a line that cannot be parsed as an SPMF record"""


def _parse_annotation(token: str, prefix: str, line: str) -> int:
    try:
        return int(token[len(prefix):])
    except ValueError:
        raise MalformedRecordError(f"Bad {prefix} annotation in line: {line!r}")


def _parse_symbol(token: str, line: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise MalformedRecordError(f"Non-integer token {token!r} in line: {line!r}")


class SPMFParser:
    """
    Reader for SPMF sequence and pattern files.
    Items are separated by the delimiter, -1 and -2 are item and sequence
    terminators, # starts an annotation.
    See http://www.philippe-fournier-viger.com/spmf/ for the format.
    """

    def __init__(self, delimiter: str = " ") -> None:
        self.delimiter = delimiter

    def _tokens(self, line: str) -> List[str]:
        return [t.strip() for t in line.strip().split(self.delimiter)]

    def parse_sequence(self, line: str) -> List[int]:
        """Parse the symbols of a sequence line, stopping at the first annotation"""
        sequence = []
        for token in self._tokens(line):
            if not token or token in SEPARATORS:
                continue
            if token.startswith("#"):
                break
            sequence.append(_parse_symbol(token, line))
        return sequence

    def parse_pattern(self, line: str) -> Union[SequentialPattern, CoveredSequentialPattern]:
        """Parse a pattern line with optional #SUP: and #COVER: annotations"""
        symbols = []
        support = 0
        cover = None
        for token in self._tokens(line):
            if not token or token in SEPARATORS:
                continue
            if token.startswith(SUPPORT_PREFIX):
                support = _parse_annotation(token, SUPPORT_PREFIX, line)
            elif token.startswith(COVER_PREFIX):
                cover = _parse_annotation(token, COVER_PREFIX, line)
            elif token.startswith("#"):
                continue  # algorithm suffix such as #CLOSED
            else:
                symbols.append(_parse_symbol(token, line))

        if cover is None:
            return SequentialPattern(tuple(symbols), support)
        return CoveredSequentialPattern(tuple(symbols), support, cover)

    def _parse_lines(self, source: Union[str, Iterable[str]], parse_line: Callable) -> list:
        """Parse every non-blank line, logging and skipping malformed ones"""
        if isinstance(source, str):
            with open(source, "r") as f:
                return self._parse_lines(f.readlines(), parse_line)

        records = []
        for lineno, line in enumerate(source, start=1):
            if not line.strip():
                continue
            try:
                records.append(parse_line(line))
            except MalformedRecordError as e:
                logging.warning(f"Skipping line {lineno}: {e}")
        return records

    def parse_sequences(self, source: Union[str, Iterable[str]]) -> List[List[int]]:
        """Read a sequence database from a file name or an iterable of lines"""
        return self._parse_lines(source, self.parse_sequence)

    def parse_patterns(self, source: Union[str, Iterable[str]]) -> list:
        """Read sequential patterns from a file name or an iterable of lines"""
        return self._parse_lines(source, self.parse_pattern)


def format_pattern(pattern: SequentialPattern, suffix: str = "") -> str:
    """Format a pattern as "<symbols> #SUP:<support>[ #COVER:<cover>][ <suffix>]" """
    parts = [str(s) for s in pattern.symbols]
    parts.append(f"{SUPPORT_PREFIX}{pattern.support}")
    if isinstance(pattern, CoveredSequentialPattern):
        parts.append(f"{COVER_PREFIX}{pattern.cover}")
    if suffix:
        parts.append(suffix)
    return " ".join(parts)


def write_patterns(
    patterns: Iterable[SequentialPattern], file_name: str, suffix: str = ""
) -> int:
    """Write one pattern per line, returns the number of patterns written"""
    cnt = 0
    with open(file_name, "w") as f:
        for pattern in patterns:
            f.write(format_pattern(pattern, suffix) + "\n")
            cnt += 1
    return cnt
