"""Platform profiles: path separators and reserved symbols."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PlatformProfile:
    """Path conventions of a target platform.

    ``separator`` is the scalar that delimits path components in the paths
    being matched.  Some platforms also accept an ``alternate_separator``.
    ``reserved_symbols`` are scalars that can never appear in a path, so a
    pattern holding one of them is rejected by validation.
    """

    name: str
    separator: str = "/"
    alternate_separator: str | None = None
    reserved_symbols: frozenset[str] = field(default_factory=frozenset)

    def is_separator(self, value: str) -> bool:
        return value == self.separator or value == self.alternate_separator

    def is_reserved(self, value: str) -> bool:
        return value in self.reserved_symbols

    def find_reserved(self, text: str) -> int | None:
        """Return the offset of the first reserved symbol in *text*, or None."""
        for index, value in enumerate(text):
            if value in self.reserved_symbols:
                return index
        return None

    def find_separator(self, path: str) -> int | None:
        """Return the offset of the first separator in *path*, or None."""
        for index, value in enumerate(path):
            if self.is_separator(value):
                return index
        return None


# "Most UNIX file systems" reserve NUL and '/'.  '/' is the separator, so
# NUL is the only reserved symbol.
POSIX = PlatformProfile(
    name="posix",
    separator="/",
    reserved_symbols=frozenset({"\x00"}),
)

# NTFS reserves the ASCII control codes and " * / : < > ? \ |.  The
# wildcards and both separators are needed by glob patterns, leaving the rest.
WINDOWS = PlatformProfile(
    name="windows",
    separator="\\",
    alternate_separator="/",
    reserved_symbols=frozenset(
        {chr(code) for code in range(0x20)} | {"\x7f", '"', ":", "<", ">", "|"}
    ),
)

BUILTIN_PROFILES: dict[str, PlatformProfile] = {
    POSIX.name: POSIX,
    WINDOWS.name: WINDOWS,
}

DEFAULT_PROFILE = WINDOWS if os.name == "nt" else POSIX


def profile_by_name(name: str) -> PlatformProfile:
    """Return a built-in profile by name (``posix`` or ``windows``)."""
    try:
        return BUILTIN_PROFILES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown platform profile: {name} (expected one of {', '.join(BUILTIN_PROFILES)})"
        ) from None
