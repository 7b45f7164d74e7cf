"""Tests for pattern validation."""

from __future__ import annotations

import pytest

from pathglob import POSIX, WINDOWS, GlobErrorKind, ValidationOutcome, validate


class TestValidate:
    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("", (0, None)),
            ("a", (1, None)),
            ("abc", (3, None)),
            ("?", (1, None)),
            ("a?", (2, None)),
            ("?b", (2, None)),
            (r"\?", (2, None)),
            (r"a\?", (3, None)),
            (r"\?b", (3, None)),
            (r"\[", (2, None)),
            (r"a\[", (3, None)),
            (r"\[b", (3, None)),
            (r"\*", (2, None)),
            (r"a\*", (3, None)),
            (r"\*b", (3, None)),
            (r"\\", (2, None)),
            (r"a\\", (3, None)),
            (r"\\b", (3, None)),
            (r"\b", (1, GlobErrorKind.invalid_escape)),
            (r"a\b", (2, GlobErrorKind.invalid_escape)),
            ("[]", (1, GlobErrorKind.truncated)),
            ("[!]", (2, GlobErrorKind.truncated)),
            ("[a]", (3, None)),
            ("[!a]", (4, None)),
            ("[]]", (3, None)),
            ("[]![]", (5, None)),
            ("[-]", (3, None)),
            ("[a-]", (4, None)),
            ("[-b]", (4, None)),
            ("[a-z]", (5, None)),
            (r"[?*\\]", (6, None)),
            (r"[\!\-?*\]]", (10, None)),
            ("*asdf", (5, None)),
            ("*asdf*", (6, None)),
            ("\x00", (0, GlobErrorKind.reserved_symbol)),
        ],
    )
    def test_grammar(self, pattern: str, expected: tuple) -> None:
        assert tuple(validate(pattern, POSIX)) == expected

    def test_success_reports_length(self) -> None:
        outcome = validate("/usr/**/[bc]a[!a-qsu-z]/?*.txt", POSIX)
        assert outcome == ValidationOutcome(30, None)
        assert outcome.ok

    def test_trailing_escape(self) -> None:
        assert validate("a\\", POSIX) == ValidationOutcome(2, GlobErrorKind.truncated)

    def test_reserved_symbol_offset(self) -> None:
        assert validate("ab\x00c", POSIX) == ValidationOutcome(2, GlobErrorKind.reserved_symbol)

    def test_reserved_symbol_inside_class(self) -> None:
        assert validate("[a\x00]", POSIX) == ValidationOutcome(2, GlobErrorKind.reserved_symbol)

    def test_class_errors_are_offset_by_chunk(self) -> None:
        assert validate("*x[a-", POSIX) == ValidationOutcome(5, GlobErrorKind.truncated)
        assert validate("x[.-0]", POSIX) == ValidationOutcome(4, GlobErrorKind.invalid_range)
        assert validate(r"x[\q]", POSIX) == ValidationOutcome(3, GlobErrorKind.invalid_escape)

    def test_asterisk_in_class_does_not_end_chunk(self) -> None:
        assert validate("[*]*[*]", POSIX) == ValidationOutcome(7, None)

    def test_windows_reserved_symbols(self) -> None:
        assert validate("a:b", WINDOWS) == ValidationOutcome(1, GlobErrorKind.reserved_symbol)
        assert validate("a:b", POSIX) == ValidationOutcome(3, None)
        assert validate("a\tb", WINDOWS) == ValidationOutcome(1, GlobErrorKind.reserved_symbol)
        assert validate('[a"]', WINDOWS) == ValidationOutcome(2, GlobErrorKind.reserved_symbol)
        assert validate("C/Users/*/x.dll", WINDOWS).ok


class TestErrorKind:
    def test_values_and_messages(self) -> None:
        assert GlobErrorKind("truncated") is GlobErrorKind.truncated
        assert GlobErrorKind.invalid_range.message == "invalid range"
        assert GlobErrorKind.zero_length.message == "zero-length pattern"
        assert "reserved symbol" in GlobErrorKind.reserved_symbol.message

    def test_every_kind_has_a_message(self) -> None:
        for kind in GlobErrorKind:
            assert kind.message
