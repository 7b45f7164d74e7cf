"""Glob-style pattern matching against paths.

Patterns are matched chunk by chunk (see :mod:`pathglob.segment`):

* a leading simple chunk is matched anchored at the start of the path;
* a directory chunk (``*follower``) slides its wildcard across the path,
  one scalar at a time, until the follower matches.  It never skips a path
  separator;
* a recursive chunk (``**follower``) slides across path separators too,
  and its follower may be followed by further directory chunks.

All wildcards are non-greedy: they consume the fewest scalars that let the
rest of the pattern match.  The pattern is assumed to be valid (see
:func:`pathglob.validate.validate`).

Some examples::

    a                   the letter "a"
    *a                  anything but a separator, up to the first "a"
    **a                 anything at all, up to the first "a"
    /Users/*/Documents  "Documents" in any subdirectory of "/Users"
    /usr/**/[bc]a[!a-qsu-z]/?*.txt
                        "/usr/bat/x.txt", "/usr/foo/bar/car/note.txt", ...
"""

from __future__ import annotations

from .charclass import get_class, match_class
from .models import ESCAPE, GLOB_SEPARATOR, ChunkKind, MatchOutcome
from .profile import DEFAULT_PROFILE, PlatformProfile
from .segment import next_chunk


def match_simple(
    chunk: str,
    path: str,
    profile: PlatformProfile = DEFAULT_PROFILE,
) -> MatchOutcome:
    """Match a simple chunk against the start of *path*.

    Succeeds when the whole chunk is consumed; the path may have scalars
    left over.  On failure the outcome reports how many path scalars
    matched before the mismatch.
    """
    if not chunk and path:
        # an empty chunk never matches something
        return MatchOutcome(False, 0)

    index = 0
    count = 0
    while index < len(chunk) and count < len(path):
        token = chunk[index]
        value = path[count]

        if token == ESCAPE:
            index += 1
            if index == len(chunk):
                break
            if chunk[index] != value:
                return MatchOutcome(False, count)
        elif token == "[":
            negated, subpattern = get_class(chunk[index:])
            if not match_class(subpattern, value, negated, profile):
                return MatchOutcome(False, count)
            index += len(subpattern) - 1
        elif token == "?":
            if profile.is_separator(value):
                return MatchOutcome(False, count)
        elif token == GLOB_SEPARATOR:
            if not profile.is_separator(value):
                return MatchOutcome(False, count)
        elif token != value:
            return MatchOutcome(False, count)

        index += 1
        count += 1

    return MatchOutcome(index == len(chunk), count)


def _find_follower(
    head: str,
    path: str,
    profile: PlatformProfile,
    cross_separators: bool,
) -> tuple[int, int] | None:
    """Find the first offset in *path* where *head* matches.

    Returns ``(offset, count)`` or None.  Unless *cross_separators* is set
    the search stops at the first path separator.
    """
    for offset in range(len(path)):
        outcome = match_simple(head, path[offset:], profile)
        if outcome.matched:
            return offset, outcome.consumed
        if not cross_separators and profile.is_separator(path[offset]):
            return None
    return None


def match_directory(
    head: str,
    tail: str,
    path: str,
    profile: PlatformProfile = DEFAULT_PROFILE,
) -> MatchOutcome:
    """Match a directory chunk (``*`` followed by *head*) against *path*.

    *tail* is the remainder of the pattern after *head*.  When *tail* is
    empty this is the last chunk, so the wildcard keeps shifting until the
    follower ends exactly at the end of the path.
    """
    if not head:
        separator = profile.find_separator(path)
        if separator is None:
            return MatchOutcome(True, len(path))
        return MatchOutcome(False, separator)

    total = 0
    while True:
        found = _find_follower(head, path, profile, cross_separators=False)
        if found is None:
            return MatchOutcome(False, total)
        skipped, count = found
        if tail or skipped + count == len(path):
            return MatchOutcome(True, total + skipped + count)

        # Last chunk, but the path isn't consumed: the wildcard takes one
        # more scalar and the follower is searched for again.
        if profile.is_separator(path[skipped]):
            return MatchOutcome(False, total + skipped + count)
        total += skipped + 1
        path = path[skipped + 1 :]


def match_recursively(
    head: str,
    tail: str,
    path: str,
    profile: PlatformProfile = DEFAULT_PROFILE,
) -> MatchOutcome:
    """Match a recursive chunk (``**`` followed by *head*) against *path*.

    *tail* is the remainder of the pattern after *head*; the directory
    chunks at its start are followers of this recursive chunk and must all
    match too.  The search anchors *head* at the earliest position it
    matches, then tries the followers.  When a follower fails, the search
    re-anchors one scalar past the previous anchor and starts over.  On
    failure nothing is reported as consumed.
    """
    if not head:
        return MatchOutcome(True, len(path))

    anchor = 0
    while anchor < len(path):
        found = _find_follower(head, path[anchor:], profile, cross_separators=True)
        if found is None:
            break
        skipped, count = found
        anchor += skipped
        offset = anchor + count

        matched = True
        chunk = next_chunk(tail)
        while chunk.kind is ChunkKind.directory and (chunk.content or chunk.rest or offset < len(path)):
            outcome = match_directory(chunk.content, chunk.rest, path[offset:], profile)
            if not outcome.matched:
                matched = False
                break
            offset += outcome.consumed
            chunk = next_chunk(chunk.rest)

        if matched:
            return MatchOutcome(True, offset)
        anchor += 1

    return MatchOutcome(False, 0)


def match(
    pattern: str,
    path: str,
    profile: PlatformProfile = DEFAULT_PROFILE,
) -> MatchOutcome:
    """Match *path* against the glob *pattern*.

    Returns an outcome whose ``matched`` flag is True when the whole path
    matches the whole pattern.  ``consumed`` is the number of path scalars
    matched.  On failure it counts the scalars matched by the chunks before
    the failing one; a failing leading simple chunk or a trailing bare ``*``
    reports how far it got itself.

    The pattern is assumed to be valid; call
    :func:`pathglob.validate.validate` first.
    """
    count = 0
    chunk = next_chunk(pattern)

    # Only the first chunk can be simple.
    if chunk.kind is ChunkKind.simple:
        outcome = match_simple(chunk.content, path, profile)
        if not outcome.matched:
            return outcome
        count = outcome.consumed
        path = path[count:]
        if not chunk.rest:
            return MatchOutcome(not path, count)
        chunk = next_chunk(chunk.rest)

    while chunk.kind is ChunkKind.directory and (chunk.content or chunk.rest or path):
        if chunk.is_bare:
            # a trailing "*" matches the rest of the path up to a separator
            outcome = match_directory("", "", path, profile)
            return MatchOutcome(outcome.matched, count + outcome.consumed)

        outcome = match_directory(chunk.content, chunk.rest, path, profile)
        if not outcome.matched:
            return MatchOutcome(False, count)
        count += outcome.consumed
        path = path[outcome.consumed :]
        chunk = next_chunk(chunk.rest)

    while chunk.kind is ChunkKind.recursive and (chunk.content or chunk.rest or path):
        if chunk.is_bare:
            # a trailing "**" matches everything that's left
            return MatchOutcome(True, count + len(path))

        outcome = match_recursively(chunk.content, chunk.rest, path, profile)
        if not outcome.matched:
            return MatchOutcome(False, count)
        count += outcome.consumed
        path = path[outcome.consumed :]

        # skip the directory chunks the recursive chunk has already matched
        chunk = next_chunk(chunk.rest)
        while chunk.kind is ChunkKind.directory:
            chunk = next_chunk(chunk.rest)

    return MatchOutcome(not path, count)
