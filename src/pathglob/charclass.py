"""Character classes: ``[abc]``, ``[a-z]``, ``[!0-9]``.

A class matches a single scalar of the path.  ``!`` right after the opening
bracket negates it.  A ``]`` in the first member position is a literal
member, so ``[][!]`` matches ``]``, ``[`` and ``!``.  Inside a class only
``!``, ``-``, ``]`` and the escape character itself may be escaped.
"""

from __future__ import annotations

from .models import ESCAPE, GLOB_SEPARATOR, CharacterClass, GlobErrorKind
from .profile import DEFAULT_PROFILE, PlatformProfile

# Scalars that may follow an escape inside a class.
CLASS_ESCAPES = frozenset({"!", "-", "]", ESCAPE})


def _first_member(pattern: str) -> int:
    return 2 if len(pattern) > 1 and pattern[1] == "!" else 1


def class_is_valid(pattern: str) -> tuple[int, GlobErrorKind | None]:
    """Check the class at the start of *pattern*.

    Returns ``(width, None)`` with the width of the class including both
    brackets when it is valid.  Otherwise returns the offset of the scalar
    where validation failed together with the reason.
    """
    size = len(pattern)
    if size == 0:
        return 0, GlobErrorKind.zero_length
    if pattern[0] != "[":
        return 0, GlobErrorKind.no_left_bracket

    first = _first_member(pattern)
    # "[x]" is the shortest class, "[!x]" the shortest negated one.
    if size < first + 2:
        return size - 1, GlobErrorKind.truncated

    index = first
    while index < size:
        token = pattern[index]
        if token == "]" and index != first:
            return index + 1, None

        if token == ESCAPE:
            if index + 1 >= size:
                return size, GlobErrorKind.truncated
            index += 1
            if pattern[index] not in CLASS_ESCAPES:
                return index, GlobErrorKind.invalid_escape
        lo = pattern[index]
        index += 1

        # A hyphen right before the closing bracket is a literal member.
        if index + 1 < size and pattern[index] == "-" and pattern[index + 1] != "]":
            index += 1
            hi = pattern[index]
            if hi == ESCAPE or lo < GLOB_SEPARATOR < hi:
                return index, GlobErrorKind.invalid_range
            index += 1

    return size, GlobErrorKind.truncated


def get_class(pattern: str) -> tuple[bool, str]:
    """Return the negation flag and the ``[...]`` text at the start of *pattern*.

    Assumes the class is valid.  An unterminated class extends to the end
    of *pattern*.
    """
    negated = len(pattern) > 1 and pattern[1] == "!"
    first = _first_member(pattern)
    index = first
    while index < len(pattern):
        token = pattern[index]
        if token == "]" and index != first:
            return negated, pattern[: index + 1]
        if token == ESCAPE:
            index += 1
        index += 1
    return negated, pattern


def parse_class(pattern: str) -> CharacterClass:
    """Decode the class at the start of *pattern* into its members."""
    negated, subpattern = get_class(pattern)
    size = len(subpattern)
    members: list[tuple[str, str]] = []

    index = _first_member(subpattern)
    first = index
    while index < size:
        token = subpattern[index]
        if token == "]" and index != first:
            break
        if token == ESCAPE and index + 1 < size:
            index += 1
            token = subpattern[index]
        lo = hi = token
        index += 1

        if index + 1 < size and subpattern[index] == "-" and subpattern[index + 1] != "]":
            index += 1
            token = subpattern[index]
            if token == ESCAPE and index + 1 < size:
                index += 1
                token = subpattern[index]
            hi = token
            index += 1

        members.append((lo, hi))

    return CharacterClass(negated=negated, members=tuple(members))


def match_class(
    subpattern: str,
    value: str,
    negated: bool,
    profile: PlatformProfile = DEFAULT_PROFILE,
) -> bool:
    """Return True if the path scalar *value* is matched by the class.

    A path separator is matched only by a class that lists ``/``
    explicitly, and never by a negated class.
    """
    cls = parse_class(subpattern)
    if profile.is_separator(value):
        if negated:
            return False
        return cls.lists(GLOB_SEPARATOR)
    return cls.contains(value) != negated
