"""Grammar check for glob patterns."""

from __future__ import annotations

from .charclass import class_is_valid
from .models import ESCAPE, GlobErrorKind, ValidationOutcome
from .profile import DEFAULT_PROFILE, PlatformProfile

# Scalars that may follow an escape outside a class.
GLOB_ESCAPES = frozenset({"?", "[", "*", ESCAPE})


def _next_valid_chunk(
    pattern: str, start: int, profile: PlatformProfile
) -> tuple[int, GlobErrorKind | None]:
    """Validate the chunk beginning at *start*.

    Returns the offset just past the chunk, or the offset of the first
    invalid scalar together with the reason.
    """
    end = start
    while end < len(pattern) and pattern[end] == "*":
        end += 1

    escaped = False
    while end < len(pattern):
        token = pattern[end]
        if profile.is_reserved(token):
            return end, GlobErrorKind.reserved_symbol

        if escaped:
            escaped = False
            if token not in GLOB_ESCAPES:
                return end, GlobErrorKind.invalid_escape
        elif token == ESCAPE:
            escaped = True
        elif token == "[":
            width, error = class_is_valid(pattern[end:])
            # on error, scan up to and including the failing scalar
            scanned = width if error is None else width + 1
            reserved = profile.find_reserved(pattern[end : end + scanned])
            if reserved is not None:
                return end + reserved, GlobErrorKind.reserved_symbol
            if error is not None:
                return end + width, error
            end += width
            continue
        elif token == "*":
            break
        end += 1

    if escaped:
        return len(pattern), GlobErrorKind.truncated
    return end, None


def validate(pattern: str, profile: PlatformProfile = DEFAULT_PROFILE) -> ValidationOutcome:
    """Check that *pattern* is a well-formed glob pattern.

    On success the outcome's ``length`` is ``len(pattern)``.  Otherwise it
    is the zero-based offset of the first invalid scalar and ``error``
    says what is wrong.
    """
    offset = 0
    while offset < len(pattern):
        end, error = _next_valid_chunk(pattern, offset, profile)
        if error is not None:
            return ValidationOutcome(end, error)
        offset = end
    return ValidationOutcome(offset, None)
