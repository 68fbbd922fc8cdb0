"""Pattern files: parsing single patterns and loading a directory of them."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import TextIO, Union

log = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class PatternType(IntEnum):
    """Category of a pattern, in menu order."""

    BLOCK = 0
    OSCILLATOR = 1
    GLIDER = 2
    GUN = 3
    SPACESHIP = 4
    EATER = 5
    SPACEFILLER = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_label(cls, text: str) -> "PatternType":
        """Map a category label to its type; unknown labels are oscillators."""
        for member in cls:
            if member.label == text:
                return member
        return cls.OSCILLATOR


@dataclass(frozen=True)
class Pattern:
    """A named grid of cells, ``height`` rows of ``length`` columns."""

    name: str
    type: PatternType
    height: int
    length: int
    cells: tuple[tuple[int, ...], ...]


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _header_line(stream: TextIO, what: str) -> str:
    line = stream.readline()
    if not line:
        raise ValueError(f"pattern is missing its {what} line")
    return line


def parse_pattern(stream: TextIO) -> Pattern:
    """Read a pattern: name, type, height, length, then one row of 0/1 per line."""
    name = _header_line(stream, "name")[:-1]
    type_line = _header_line(stream, "type")
    kind = PatternType.from_label(type_line[:-1]) if type_line.endswith("\n") else PatternType.OSCILLATOR
    height = _atoi(_header_line(stream, "height"))
    length = _atoi(_header_line(stream, "length"))
    if height < 0 or length < 0:
        raise ValueError(f"pattern {name!r} has negative dimensions")
    rows = []
    for _ in range(height):
        line = stream.readline()
        rows.append(tuple(1 if line[x : x + 1] == "1" else 0 for x in range(length)))
    return Pattern(name=name, type=kind, height=height, length=length, cells=tuple(rows))


def load_pattern(path: Union[str, os.PathLike]) -> Pattern:
    """Parse the pattern file at ``path``."""
    with open(path, encoding="utf-8") as stream:
        return parse_pattern(stream)


def load_patterns(directory: Union[str, os.PathLike] = "patterns") -> dict[PatternType, list[Pattern]]:
    """Load every regular file in ``directory``, grouped by pattern type."""
    storage: dict[PatternType, list[Pattern]] = {kind: [] for kind in PatternType}
    with os.scandir(directory) as entries:
        files = sorted(
            (entry for entry in entries if entry.is_file(follow_symlinks=False)),
            key=lambda entry: entry.name,
        )
    for entry in files:
        log.debug("%s", entry.name)
        pattern = load_pattern(Path(entry.path))
        storage[pattern.type].append(pattern)
    return storage