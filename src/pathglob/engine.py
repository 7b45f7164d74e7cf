"""Profile-bound glob engine."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from .match import match
from .models import MatchOutcome, PatternError, ValidationOutcome
from .profile import DEFAULT_PROFILE, PlatformProfile
from .validate import validate

logger = logging.getLogger(__name__)


class GlobEngine:
    """Validates glob patterns and matches paths for one platform profile.

    The module-level :func:`~pathglob.validate.validate` and
    :func:`~pathglob.match.match` functions are stateless; the engine binds
    them to a profile and logs what it does.  An engine holds no mutable
    state, so a single instance can be shared between threads.
    """

    def __init__(self, profile: PlatformProfile | None = None) -> None:
        self._profile = profile if profile is not None else DEFAULT_PROFILE

    @property
    def profile(self) -> PlatformProfile:
        return self._profile

    # ── Validation ───────────────────────────────────────────────────

    def validate(self, pattern: str) -> ValidationOutcome:
        """Check the grammar of *pattern* against this engine's profile."""
        outcome = validate(pattern, self._profile)
        if outcome.ok:
            logger.debug("[glob.validate] pattern=%r length=%d", pattern, outcome.length)
        else:
            logger.debug(
                "[glob.invalid] pattern=%r offset=%d error=%s",
                pattern,
                outcome.length,
                outcome.error.value if outcome.error else None,
            )
        return outcome

    def check(self, pattern: str) -> str:
        """Return *pattern* unchanged if valid, else raise :class:`PatternError`."""
        outcome = self.validate(pattern)
        if outcome.error is not None:
            raise PatternError(pattern, outcome.length, outcome.error)
        return pattern

    # ── Matching ─────────────────────────────────────────────────────

    def match(self, pattern: str, path: str) -> MatchOutcome:
        """Match *path* against an already validated *pattern*."""
        outcome = match(pattern, path, self._profile)
        logger.debug(
            "[glob.match] pattern=%r path=%r matched=%s consumed=%d profile=%s",
            pattern,
            path,
            outcome.matched,
            outcome.consumed,
            self._profile.name,
        )
        return outcome

    def match_any(self, patterns: Iterable[str], path: str) -> bool:
        """Return True if any of the already validated *patterns* matches *path*."""
        return any(self.match(p, path).matched for p in patterns)

    def match_all(self, patterns: Iterable[str], path: str) -> list[dict[str, Any]]:
        """Validate and match every pattern, returning one result per pattern.

        Useful for debugging.  Invalid patterns are reported, not raised;
        they are never matched.
        """
        results: list[dict[str, Any]] = []
        for pattern in patterns:
            validation = self.validate(pattern)
            result: dict[str, Any] = {
                "pattern": pattern,
                "valid": validation.ok,
                "error": validation.error.value if validation.error else None,
                "offset": validation.length,
                "matched": False,
                "consumed": 0,
            }
            if validation.ok:
                outcome = self.match(pattern, path)
                result["matched"] = outcome.matched
                result["consumed"] = outcome.consumed
            results.append(result)
        return results
