"""YAML/dict loader for PlatformProfile documents."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .profile import PlatformProfile, profile_by_name

# Wildcards can't double as path separators.  The escape character can:
# Windows paths use it.
_GLOB_WILDCARDS = frozenset({"*", "?", "["})


def _parse_scalar(raw: Any, field_name: str) -> str:
    if not isinstance(raw, str) or len(raw) != 1:
        raise ValueError(f"{field_name} must be a single character, got {raw!r}")
    return raw


def _parse_bound(raw: Any) -> int:
    """Range bounds are code points or single characters."""
    if isinstance(raw, str):
        return ord(_parse_scalar(raw, "range bound"))
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    raise ValueError(f"Invalid range bound: {raw!r}")


def _parse_range(raw: Any) -> set[str]:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"Reserved range must be a [low, high] pair, got {raw!r}")
    lo, hi = _parse_bound(raw[0]), _parse_bound(raw[1])
    if not 0 <= lo <= hi <= 0x10FFFF:
        raise ValueError(f"Invalid reserved range: {raw!r}")
    return {chr(code) for code in range(lo, hi + 1)}


def _parse_reserved(raw: dict[str, Any] | None, base: PlatformProfile | None) -> frozenset[str]:
    if raw is None:
        return base.reserved_symbols if base is not None else frozenset()
    if not isinstance(raw, dict):
        raise ValueError("reserved must be a mapping with 'symbols' and/or 'ranges'")
    symbols: set[str] = set()
    for symbol in raw.get("symbols") or []:
        symbols.add(_parse_scalar(symbol, "reserved symbol"))
    for entry in raw.get("ranges") or []:
        symbols |= _parse_range(entry)
    return frozenset(symbols)


def load_profile_from_dict(data: dict[str, Any]) -> PlatformProfile:
    """Parse a PlatformProfile from a raw dictionary (e.g. parsed YAML/JSON).

    A document may name a built-in ``base`` profile; fields it leaves out
    are taken from the base.
    """
    kind = data.get("kind", "PlatformProfile")
    if kind != "PlatformProfile":
        raise ValueError(f"Unsupported kind: {kind} (expected PlatformProfile)")

    base = profile_by_name(data["base"]) if data.get("base") else None
    metadata = data.get("metadata") or {}
    if not isinstance(metadata, dict):
        raise ValueError("metadata must be a mapping")
    name = metadata.get("name") or (base.name if base is not None else "unnamed")

    if "separator" in data:
        separator = _parse_scalar(data["separator"], "separator")
    else:
        separator = base.separator if base is not None else "/"

    if "alternate_separator" in data:
        raw_alternate = data["alternate_separator"]
        alternate = None if raw_alternate is None else _parse_scalar(raw_alternate, "alternate_separator")
    else:
        alternate = base.alternate_separator if base is not None else None

    reserved = _parse_reserved(data.get("reserved"), base)

    for value in (separator, alternate):
        if value is None:
            continue
        if value in reserved:
            raise ValueError(f"Separator {value!r} is also a reserved symbol")
        if value in _GLOB_WILDCARDS:
            raise ValueError(f"Separator {value!r} is a glob wildcard")

    return PlatformProfile(
        name=name,
        separator=separator,
        alternate_separator=alternate,
        reserved_symbols=reserved,
    )


def load_profile_from_str(text: str) -> PlatformProfile:
    """Parse a PlatformProfile from a YAML string."""
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("Expected a YAML mapping at the top level")
    return load_profile_from_dict(data)


def load_profile(path: str | Path) -> PlatformProfile:
    """Load a PlatformProfile from a YAML file on disk."""
    p = Path(path)
    return load_profile_from_str(p.read_text(encoding="utf-8"))
