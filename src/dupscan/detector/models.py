"""Data models for files and duplicate groups."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileRecord:
    """A regular file as observed during the directory walk."""

    path: Path
    size: int
    device: int = 0
    inode: int = 0

    @property
    def file_key(self) -> tuple[int, int]:
        """Identity of the underlying inode, shared by hardlinks."""
        return (self.device, self.inode)


@dataclass(frozen=True)
class DuplicateGroup:
    """A group of files confirmed to have identical content."""

    group_id: int
    paths: tuple[Path, ...]
    fingerprint: str = ""

    def __post_init__(self) -> None:
        if len(self.paths) < 2:
            raise ValueError("A duplicate group needs at least two paths")

    @property
    def count(self) -> int:
        """Number of duplicate files in this group."""
        return len(self.paths)

    @property
    def representative(self) -> Path:
        """First member, used to look up the group's file size."""
        return self.paths[0]
