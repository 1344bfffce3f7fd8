"""Pass 1: Group files by size."""

import os
import stat
from pathlib import Path
from typing import Iterator

from ..common.logging import get_logger
from .models import FileRecord

logger = get_logger(__name__)


class SizePass:
    """First pass: walk the tree and group regular files by size."""

    def __init__(self, min_size: int = 0, ignore_hardlinks: bool = False) -> None:
        """Initialize size pass.

        Args:
            min_size: Minimum file size to consider
            ignore_hardlinks: Keep only the first path seen for each inode
        """
        self.min_size = min_size
        self.ignore_hardlinks = ignore_hardlinks

    def walk_files(self, root: Path) -> Iterator[FileRecord]:
        """Yield a record for every regular file under root.

        Symlinks and special files are skipped and symlinked directories
        are not descended into. Entries are visited in sorted order so the
        output is stable for a given snapshot.
        """
        root = Path(root)

        def on_error(error: OSError) -> None:
            if error.filename is not None and Path(error.filename) == root:
                logger.warning(f"Cannot read scan root {root}: {error}")
            else:
                logger.debug(f"Skipping unreadable directory: {error}")

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            dirnames.sort()
            for name in sorted(filenames):
                path = Path(dirpath) / name
                try:
                    st = path.lstat()
                except OSError as e:
                    logger.debug(f"Skipping {path}: {e}")
                    continue

                if not stat.S_ISREG(st.st_mode):
                    continue

                yield FileRecord(
                    path=path,
                    size=st.st_size,
                    device=st.st_dev,
                    inode=st.st_ino,
                )

    def find_candidates(self, root: Path) -> dict[int, list[Path]]:
        """Find files sharing their size with at least one other file.

        Args:
            root: Directory to scan

        Returns:
            Dictionary mapping size to list of paths, each with 2+ entries
        """
        logger.info(f"Pass 1: Grouping files by size (min_size={self.min_size})")

        size_groups: dict[int, list[Path]] = {}
        seen_inodes: set[tuple[int, int]] = set()
        files_seen = 0

        for record in self.walk_files(root):
            if record.size < self.min_size:
                continue

            if self.ignore_hardlinks:
                if record.file_key in seen_inodes:
                    logger.debug(f"Skipping hardlink {record.path}")
                    continue
                seen_inodes.add(record.file_key)

            size_groups.setdefault(record.size, []).append(record.path)
            files_seen += 1

        candidates = {
            size: paths for size, paths in size_groups.items() if len(paths) >= 2
        }

        total_files = sum(len(paths) for paths in candidates.values())
        logger.info(
            f"Scanned {files_seen} files, {total_files} share a size "
            f"across {len(candidates)} size groups"
        )

        return candidates
