"""Data models for pathglob."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

# The escape character lets glob metacharacters be matched literally.
ESCAPE = "\\"

# Glob patterns always use '/' as the path separator, whatever the platform.
GLOB_SEPARATOR = "/"


class GlobErrorKind(str, Enum):
    """Reasons a pattern can fail validation.

    Each member carries a human-readable message in :attr:`message`.
    """

    zero_length = "zero-length"
    no_left_bracket = "no-left-bracket"
    truncated = "truncated"
    invalid_escape = "invalid-escape"
    invalid_range = "invalid-range"
    reserved_symbol = "reserved-symbol"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES = {
    GlobErrorKind.zero_length: "zero-length pattern",
    GlobErrorKind.no_left_bracket: "class must start with a left bracket ('[')",
    GlobErrorKind.truncated: "pattern truncated",
    GlobErrorKind.invalid_escape: "invalid escape sequence",
    GlobErrorKind.invalid_range: "invalid range",
    GlobErrorKind.reserved_symbol: "reserved symbol found in pattern",
}


class PatternError(ValueError):
    """Raised when a pattern is rejected by validation."""

    def __init__(self, pattern: str, offset: int, kind: GlobErrorKind) -> None:
        self.pattern = pattern
        self.offset = offset
        self.kind = kind
        super().__init__(f"Pattern {pattern} is invalid at position {offset + 1}: {kind.message}")


# ── Segmentation ─────────────────────────────────────────────────────────


class ChunkKind(str, Enum):
    """The three kinds of sub-pattern a glob pattern breaks down into."""

    simple = "simple"
    directory = "directory"
    recursive = "recursive"


@dataclass(frozen=True)
class Chunk:
    """One sub-pattern produced by the segmenter.

    ``content`` has its lead-in asterisks removed, so a directory or
    recursive chunk with empty content is a bare ``*`` or ``**``.
    ``rest`` is the part of the pattern that follows the chunk.
    """

    kind: ChunkKind
    content: str = ""
    rest: str = ""

    @property
    def is_bare(self) -> bool:
        return self.kind is not ChunkKind.simple and not self.content


# ── Character classes ───────────────────────────────────────────────────


@dataclass(frozen=True)
class CharacterClass:
    """A decoded ``[...]`` expression.

    ``members`` holds ``(lo, hi)`` pairs; a single scalar has ``lo == hi``.
    """

    negated: bool = False
    members: tuple[tuple[str, str], ...] = ()

    def lists(self, value: str) -> bool:
        """Return True if *value* appears literally as a member or range bound."""
        return any(value in member for member in self.members)

    def contains(self, value: str) -> bool:
        """Return True if *value* falls within any member, ignoring negation."""
        return any(lo <= value <= hi for lo, hi in self.members)


# ── Outcomes ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MatchOutcome:
    """Result of matching a path, or part of one.

    ``consumed`` is the number of path scalars matched.  When ``matched``
    is False it reports how far matching got before the mismatch.
    """

    matched: bool
    consumed: int = 0

    def __iter__(self) -> Iterator[object]:
        return iter((self.matched, self.consumed))

    def __bool__(self) -> bool:
        return self.matched


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating a pattern.

    On success ``length`` is the pattern length and ``error`` is None.
    On failure ``length`` is the offset of the first invalid scalar.
    """

    length: int
    error: GlobErrorKind | None = None

    def __iter__(self) -> Iterator[object]:
        return iter((self.length, self.error))

    @property
    def ok(self) -> bool:
        return self.error is None
