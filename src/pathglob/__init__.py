"""pathglob: Match file-system paths against glob patterns."""

from __future__ import annotations

__version__ = "0.1.0"

from .engine import GlobEngine
from .loader import load_profile, load_profile_from_dict, load_profile_from_str
from .match import match
from .models import (
    CharacterClass,
    Chunk,
    ChunkKind,
    GlobErrorKind,
    MatchOutcome,
    PatternError,
    ValidationOutcome,
)
from .profile import DEFAULT_PROFILE, POSIX, WINDOWS, PlatformProfile, profile_by_name
from .validate import validate

__all__ = [
    "DEFAULT_PROFILE",
    "POSIX",
    "WINDOWS",
    "CharacterClass",
    "Chunk",
    "ChunkKind",
    "GlobEngine",
    "GlobErrorKind",
    "MatchOutcome",
    "PatternError",
    "PlatformProfile",
    "ValidationOutcome",
    "load_profile",
    "load_profile_from_dict",
    "load_profile_from_str",
    "match",
    "profile_by_name",
    "validate",
]
