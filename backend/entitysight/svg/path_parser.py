"""Path description parser — lexer + typed command stream.

Supports the subset of the SVG path grammar the host emits for outlines:
absolute ``M``, ``L``, ``C`` and ``Z``. Every other command letter still
delimits a token (so its arguments never leak into a neighbour) but is
skipped. Nothing here raises: bad numbers become NaN.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Union

logger = logging.getLogger(__name__)

_ARG_SEPARATOR_RE = re.compile(r"[\s,]+")

# 'e'/'E' belong to exponent notation inside numbers, never to a command.
_EXPONENT_LETTERS = frozenset("eE")


@dataclass(frozen=True)
class Coordinate:
    x: float
    y: float


@dataclass(frozen=True)
class MoveTo:
    point: Coordinate

    def points(self) -> list[Coordinate]:
        return [self.point]


@dataclass(frozen=True)
class LineTo:
    point: Coordinate

    def points(self) -> list[Coordinate]:
        return [self.point]


@dataclass(frozen=True)
class CurveTo:
    control1: Coordinate
    control2: Coordinate
    end: Coordinate

    def points(self) -> list[Coordinate]:
        return [self.control1, self.control2, self.end]


@dataclass(frozen=True)
class ClosePath:
    def points(self) -> list[Coordinate]:
        return []


PathCommand = Union[MoveTo, LineTo, CurveTo, ClosePath]


@dataclass(frozen=True)
class PathToken:
    """One command letter and the raw argument text that follows it."""

    letter: str
    args: str


def _is_command_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha() and ch not in _EXPONENT_LETTERS


def tokenize_path(data: str) -> list[PathToken]:
    """Split a path description into command tokens.

    Text before the first command letter is dropped.
    """
    tokens: list[PathToken] = []
    letter: str | None = None
    start = 0

    for i, ch in enumerate(data):
        if not _is_command_letter(ch):
            continue
        if letter is not None:
            tokens.append(PathToken(letter, data[start:i]))
        letter = ch
        start = i + 1

    if letter is not None:
        tokens.append(PathToken(letter, data[start:]))
    return tokens


def _to_number(text: str) -> float:
    # float() accepts digit separators, the host number grammar does not
    if "_" in text:
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


def parse_numbers(args: str) -> list[float]:
    """Parse whitespace/comma separated numbers, NaN for anything unparseable."""
    stripped = args.strip()
    if not stripped:
        return []
    return [_to_number(part) for part in _ARG_SEPARATOR_RE.split(stripped)]


def _coords(nums: list[float], count: int) -> list[Coordinate]:
    # Missing arguments degrade to NaN; surplus ones are ignored.
    padded = nums + [math.nan] * (2 * count - len(nums))
    return [Coordinate(padded[2 * i], padded[2 * i + 1]) for i in range(count)]


def parse_token(token: PathToken) -> PathCommand | None:
    """Turn a token into a command, or None for unsupported letters."""
    if token.letter == "Z":
        return ClosePath()
    if token.letter == "M":
        return MoveTo(*_coords(parse_numbers(token.args), 1))
    if token.letter == "L":
        return LineTo(*_coords(parse_numbers(token.args), 1))
    if token.letter == "C":
        return CurveTo(*_coords(parse_numbers(token.args), 3))
    logger.debug("Skipping unsupported path command %r", token.letter)
    return None


def parse_path(data: str) -> list[PathCommand]:
    """Parse a path description into an ordered list of commands."""
    commands: list[PathCommand] = []
    for token in tokenize_path(data):
        command = parse_token(token)
        if command is not None:
            commands.append(command)
    return commands


def extract_coordinates(data: str) -> list[Coordinate]:
    """All points of a path description, in command order (not deduplicated)."""
    return [pt for command in parse_path(data) for pt in command.points()]
