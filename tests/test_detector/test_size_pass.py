"""Tests for size grouping."""

import os
from pathlib import Path
from typing import Callable

import pytest

from dupscan.detector.size_pass import SizePass

MakeFile = Callable[[str, bytes], Path]


def test_groups_files_by_size(tree: Path, make_file: MakeFile) -> None:
    """Test that only sizes shared by 2+ files are kept."""
    a = make_file("a.txt", b"hello")
    b = make_file("nested/deep/b.txt", b"world")
    make_file("c.txt", b"hi")

    candidates = SizePass().find_candidates(tree)

    assert candidates == {5: [a, b]}


def test_zero_byte_files_form_a_group(tree: Path, make_file: MakeFile) -> None:
    """Test that empty files are candidates."""
    empties = [make_file(f"e{i}", b"") for i in range(3)]

    assert SizePass().find_candidates(tree) == {0: empties}


def test_empty_directory(tree: Path) -> None:
    """Test that an empty tree yields no candidates."""
    assert SizePass().find_candidates(tree) == {}


def test_missing_root_yields_nothing(tmp_path: Path) -> None:
    """Test that a nonexistent root does not raise."""
    assert SizePass().find_candidates(tmp_path / "nope") == {}


def test_file_as_root_yields_nothing(make_file: MakeFile) -> None:
    """Test that a regular file passed as root does not raise."""
    path = make_file("a.txt", b"data")

    assert SizePass().find_candidates(path) == {}


def test_min_size_filter(tree: Path, make_file: MakeFile) -> None:
    """Test that files below min_size are ignored."""
    make_file("s1", b"ab")
    make_file("s2", b"ab")
    big1 = make_file("b1", b"abcdef")
    big2 = make_file("b2", b"abcdef")

    assert SizePass(min_size=3).find_candidates(tree) == {6: [big1, big2]}


def test_walk_order_is_sorted(tree: Path, make_file: MakeFile) -> None:
    """Test deterministic traversal order."""
    for name in ("b/2", "a/1", "c", "a/0"):
        make_file(name, b"x")

    walked = [record.path for record in SizePass().walk_files(tree)]

    assert walked == [tree / "c", tree / "a" / "0", tree / "a" / "1", tree / "b" / "2"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_symlinks_are_excluded(tree: Path, make_file: MakeFile, tmp_path: Path) -> None:
    """Test that symlinked files and directories are not followed."""
    target = make_file("real.txt", b"same")
    (tree / "link.txt").symlink_to(target)

    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "other.txt").write_bytes(b"same")
    (tree / "linkdir").symlink_to(outside, target_is_directory=True)

    assert SizePass().find_candidates(tree) == {}


@pytest.mark.skipif(not hasattr(os, "link"), reason="hardlinks unsupported")
def test_hardlinks_kept_by_default(tree: Path, make_file: MakeFile) -> None:
    """Test that hardlinks count as separate paths unless ignored."""
    original = make_file("a.txt", b"data")
    linked = tree / "b.txt"
    os.link(original, linked)

    assert SizePass().find_candidates(tree) == {4: [original, linked]}
    assert SizePass(ignore_hardlinks=True).find_candidates(tree) == {}


def test_vanished_file_is_skipped(
    tree: Path, make_file: MakeFile, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that a stat failure drops the file instead of raising."""
    a = make_file("a.txt", b"data")
    b = make_file("b.txt", b"data")
    gone = make_file("c.txt", b"data")

    real_lstat = Path.lstat

    def flaky_lstat(self: Path) -> os.stat_result:
        if self == gone:
            raise FileNotFoundError(str(self))
        return real_lstat(self)

    monkeypatch.setattr(Path, "lstat", flaky_lstat)

    assert SizePass().find_candidates(tree) == {4: [a, b]}
