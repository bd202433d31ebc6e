from __future__ import annotations

import json
from pathlib import Path

import pytest

from reserved_usernames.__main__ import main


def _run(tmp_path: Path, *argv: str) -> int:
    return main(["--cache-file", str(tmp_path / "cache.json"), *argv])


def test_check_exit_code_and_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, "check", "john") == 0
    assert capsys.readouterr().out.strip() == "john: available"

    assert _run(tmp_path, "--custom=acme", "check", "ACME", "john") == 1
    out = capsys.readouterr().out.splitlines()
    assert out == ["ACME: RESERVED", "john: available"]


def test_suggest_and_validate(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, "suggest", "admin", "--count", "2") == 0
    assert capsys.readouterr().out.split() == ["admin1", "admin2"]

    assert _run(tmp_path, "validate", "ab", "--min-length", "3") == 1
    out = capsys.readouterr().out
    assert "ab: INVALID" in out
    assert "Username must be at least 3 characters" in out


def test_stats_and_export(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, "stats") == 0
    stats = json.loads(capsys.readouterr().out)
    assert stats["total"] > 0

    assert _run(tmp_path, "export", "--format", "csv") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "name"
    assert "admin" in lines


def test_clear_cache(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "cache.json").write_text("{}", encoding="utf-8")

    assert _run(tmp_path, "clear-cache") == 0
    assert capsys.readouterr().out.strip() == "removed"
    assert not (tmp_path / "cache.json").exists()
