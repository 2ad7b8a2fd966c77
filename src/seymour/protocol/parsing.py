from __future__ import annotations

import re
from typing import List, Sequence

from .errors import InvalidIntegerArgument, MissingArgument, TooManyArguments

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")


def tokenize(line: str) -> List[str]:
    """Split a wire line on single spaces.

    No trimming and no collapsing: "A  B" yields ["A", "", "B"], so argument
    positions are purely positional. The empty line has no tokens.
    """
    if line == "":
        return []
    return line.split(" ")


def check_arity(tokens: Sequence[str], expected: int) -> None:
    # Only bounds the maximum; a short line is reported by extraction.
    actual = len(tokens) - 1
    if actual > expected:
        raise TooManyArguments(expected=expected, actual=actual)


def extract_str(tokens: Sequence[str], name: str, position: int) -> str:
    if position >= len(tokens):
        raise MissingArgument(name)
    return tokens[position]


def extract_int(tokens: Sequence[str], name: str, position: int) -> int:
    raw = extract_str(tokens, name, position)
    return parse_int(raw, name)


def parse_int(raw: str, name: str) -> int:
    """Parse a signed 64-bit decimal integer, never coercing."""
    if not _INT_RE.fullmatch(raw):
        raise InvalidIntegerArgument(argument=name, value=raw)
    value = int(raw)
    if value < INT64_MIN or value > INT64_MAX:
        raise InvalidIntegerArgument(argument=name, value=raw)
    return value


def check_int64(name: str, value: int) -> None:
    """Reject field values that would not render as a decodable integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < INT64_MIN or value > INT64_MAX:
        raise ValueError(f"{name} out of 64-bit range: {value}")
