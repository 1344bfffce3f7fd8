"""Tests for the partial/full hashing pass."""

from pathlib import Path
from typing import Callable

from dupscan.detector.checksum_pass import ChecksumPass, group_by_hash
from dupscan.detector.hasher import ContentHasher

MakeFile = Callable[[str, bytes], Path]


class RecordingHasher(ContentHasher):
    """Hasher that remembers which files were hashed in full."""

    def __init__(self) -> None:
        super().__init__()
        self.partial_calls: list[Path] = []
        self.full_calls: list[Path] = []

    def partial_hash(self, path: Path) -> str:
        self.partial_calls.append(path)
        return super().partial_hash(path)

    def full_hash(self, path: Path) -> str:
        self.full_calls.append(path)
        return super().full_hash(path)


def test_group_by_hash_skips_empty_fingerprints() -> None:
    """Test that unreadable files never share a key."""
    paths = [Path("a"), Path("b"), Path("c")]
    fingerprints = {Path("a"): "", Path("b"): "", Path("c"): "k"}

    groups = group_by_hash(paths, fingerprints.__getitem__)

    assert groups == {"k": [Path("c")]}


def test_full_hash_only_for_partial_matches(make_file: MakeFile) -> None:
    """Test that files unique in their first block are never read in full."""
    a = make_file("a.bin", b"A" * 5000)
    b = make_file("b.bin", b"A" * 5000)
    c = make_file("c.bin", b"C" * 5000)

    hasher = RecordingHasher()
    result = ChecksumPass(hasher).find_duplicates({5000: [a, b, c]})

    assert [paths for _, paths in result] == [[a, b]]
    assert hasher.partial_calls == [a, b, c]
    assert hasher.full_calls == [a, b]


def test_partial_match_rejected_by_full_hash(make_file: MakeFile) -> None:
    """Test that a shared first block is not sufficient."""
    prefix = b"z" * 4096
    a = make_file("a.bin", prefix + b"1")
    b = make_file("b.bin", prefix + b"2")

    hasher = RecordingHasher()
    result = ChecksumPass(hasher).find_duplicates({4097: [a, b]})

    assert result == []
    assert hasher.full_calls == [a, b]


def test_multiple_groups_within_one_size(make_file: MakeFile) -> None:
    """Test that one size bucket can yield several duplicate groups."""
    a1 = make_file("a1", b"aaaa")
    b1 = make_file("b1", b"bbbb")
    a2 = make_file("a2", b"aaaa")
    b2 = make_file("b2", b"bbbb")

    result = ChecksumPass(ContentHasher()).find_duplicates({4: [a1, b1, a2, b2]})

    assert [paths for _, paths in result] == [[a1, a2], [b1, b2]]


def test_unreadable_file_dropped(make_file: MakeFile, tmp_path: Path) -> None:
    """Test that a file vanishing before hashing is excluded."""
    a = make_file("a", b"same")
    b = make_file("b", b"same")
    missing = tmp_path / "missing"

    result = ChecksumPass(ContentHasher()).find_duplicates({4: [a, missing, b]})

    assert [paths for _, paths in result] == [[a, b]]


def test_empty_input() -> None:
    """Test that no size groups means no work."""
    hasher = RecordingHasher()

    assert ChecksumPass(hasher).find_duplicates({}) == []
    assert hasher.partial_calls == []
