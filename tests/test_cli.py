"""Tests for the pathglob command line."""

from __future__ import annotations

from pathlib import Path

import pytest

from pathglob.cli import EXIT_INVALID, EXIT_MATCH, EXIT_MISMATCH, build_parser, main


class TestMain:
    def test_match(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["-p", "posix", "/Users/*/Documents", "/Users/alice/Documents"])
        assert code == EXIT_MATCH
        out = capsys.readouterr().out
        assert out.strip() == "Pattern /Users/*/Documents matches path /Users/alice/Documents"

    def test_mismatch_reports_position(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["-p", "posix", "/Users/*/Documents", "/Users/alice/bob/Documents"])
        assert code == EXIT_MISMATCH
        out = capsys.readouterr().out
        assert out.strip() == (
            "Pattern /Users/*/Documents mismatches at position 8 "
            "in path /Users/alice/bob/Documents"
        )

    def test_invalid_pattern(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["-p", "posix", r"a\b", "ab"])
        assert code == EXIT_INVALID
        err = capsys.readouterr().err
        assert "Pattern a\\b is invalid at position 3: invalid escape sequence." in err

    def test_windows_profile(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--profile", "windows", "C/**/*.dll", r"C\Windows\System32\kernel32.dll"])
        assert code == EXIT_MATCH
        assert "matches path" in capsys.readouterr().out

    def test_profile_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        profile = tmp_path / "colon.yaml"
        profile.write_text(
            "kind: PlatformProfile\nmetadata:\n  name: colon\nseparator: ':'\n",
            encoding="utf-8",
        )
        assert main(["-p", str(profile), "a/*/c", "a:b:c"]) == EXIT_MATCH
        assert main(["-p", str(profile), "a/*/c", "a/b/c"]) == EXIT_MISMATCH

    def test_missing_profile_file(self, tmp_path: Path) -> None:
        assert main(["-p", str(tmp_path / "nope.yaml"), "*", "a"]) == EXIT_INVALID

    def test_bad_profile_file(self, tmp_path: Path) -> None:
        profile = tmp_path / "bad.yaml"
        profile.write_text("separator: '*'\n", encoding="utf-8")
        assert main(["-p", str(profile), "*", "a"]) == EXIT_INVALID

    def test_profile_with_scalar_metadata(self, tmp_path: Path) -> None:
        profile = tmp_path / "flat.yaml"
        profile.write_text("metadata: flat\nseparator: ':'\n", encoding="utf-8")
        assert main(["-p", str(profile), "*", "a"]) == EXIT_INVALID

    def test_wrong_argument_count(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["only-a-pattern"])
        assert excinfo.value.code == 2


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args(["*.txt", "notes.txt"])
        assert args.pattern == "*.txt"
        assert args.path == "notes.txt"
        assert args.profile is None
        assert not args.verbose
        assert not args.quiet
