"""Pass 2: Group same-size files by partial, then full, content hash."""

from pathlib import Path
from typing import Callable

from ..common.logging import get_logger
from .hasher import ContentHasher

logger = get_logger(__name__)


def group_by_hash(paths: list[Path], hash_func: Callable[[Path], str]) -> dict[str, list[Path]]:
    """Bucket paths by fingerprint, dropping files that could not be read."""
    groups: dict[str, list[Path]] = {}
    for path in paths:
        fingerprint = hash_func(path)
        if not fingerprint:
            logger.debug(f"Dropping unreadable file {path}")
            continue
        groups.setdefault(fingerprint, []).append(path)
    return groups


class ChecksumPass:
    """Second pass: two-step hashing within each size group.

    A file is only read in full if its first block matched another file of
    the same size.
    """

    def __init__(self, hasher: ContentHasher) -> None:
        """Initialize checksum pass.

        Args:
            hasher: Hasher used for both the partial and full pass
        """
        self.hasher = hasher
        self.partial_hashes = 0
        self.full_hashes = 0

    def resolve_group(self, paths: list[Path]) -> list[tuple[str, list[Path]]]:
        """Resolve one size group into confirmed duplicate sets.

        Args:
            paths: Paths of files that all have the same size

        Returns:
            List of (full fingerprint, paths) pairs with 2+ paths each
        """
        self.partial_hashes += len(paths)
        partial_groups = group_by_hash(paths, self.hasher.partial_hash)

        duplicates = []
        for candidates in partial_groups.values():
            if len(candidates) < 2:
                continue

            self.full_hashes += len(candidates)
            full_groups = group_by_hash(candidates, self.hasher.full_hash)
            for fingerprint, members in full_groups.items():
                if len(members) >= 2:
                    duplicates.append((fingerprint, members))

        return duplicates

    def find_duplicates(
        self, size_groups: dict[int, list[Path]]
    ) -> list[tuple[str, list[Path]]]:
        """Find true duplicates among size-matched candidates.

        Args:
            size_groups: Groups of files with same size

        Returns:
            List of (full fingerprint, paths) pairs in size-group order
        """
        logger.info("Pass 2: Computing partial and full hashes")

        if not size_groups:
            logger.info("No candidates to check")
            return []

        duplicates = []
        for size, paths in size_groups.items():
            found = self.resolve_group(paths)
            if found:
                logger.debug(f"Size {size}: {len(found)} duplicate groups")
            duplicates.extend(found)

        total_files = sum(len(paths) for _, paths in duplicates)
        logger.info(
            f"Found {total_files} duplicate files in {len(duplicates)} groups "
            f"({self.partial_hashes} partial hashes, {self.full_hashes} full hashes)"
        )

        return duplicates
