"""Tests for shared filesystem helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from relink.platform.filesystem import (
    ensure_directory,
    ensure_parent_directory,
    resolve_to_cwd_if_relative,
    true_case_path,
)


def test_ensure_directory_creates_nested_folders(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b"

    assert ensure_directory(target) == target
    assert target.is_dir()


def test_ensure_directory_rejects_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "file"
    _ = target.write_text("x")

    with pytest.raises(NotADirectoryError):
        _ = ensure_directory(target)


def test_ensure_parent_directory(tmp_path: Path) -> None:
    target = tmp_path / "db" / "m.db"

    assert ensure_parent_directory(target) == tmp_path / "db"
    assert not target.exists()


def test_resolve_to_cwd_if_relative(tmp_path: Path) -> None:
    assert resolve_to_cwd_if_relative("music", cwd=tmp_path) == tmp_path / "music"
    assert resolve_to_cwd_if_relative(tmp_path / "x", cwd=Path("/other")) == tmp_path / "x"


def test_true_case_path_keeps_exact_names(tmp_path: Path) -> None:
    (tmp_path / "Music" / "Album").mkdir(parents=True)

    assert true_case_path(tmp_path / "Music" / "Album") == tmp_path / "Music" / "Album"


def test_true_case_path_fixes_casing_from_listing(tmp_path: Path) -> None:
    """Components are respelled from their parent's listing when only the case differs."""

    (tmp_path / "Music").mkdir()

    resolved = true_case_path(tmp_path / "MUSIC" / "Album")

    assert resolved == tmp_path / "Music" / "Album"


def test_true_case_path_keeps_unknown_components(tmp_path: Path) -> None:
    assert true_case_path(tmp_path / "missing" / "child") == tmp_path / "missing" / "child"
