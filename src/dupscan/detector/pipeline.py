"""Multi-pass duplicate detection pipeline."""

from pathlib import Path
from typing import Optional

from ..common.logging import get_logger
from ..config.settings import Settings, default_settings
from .byte_pass import BytePass
from .checksum_pass import ChecksumPass
from .hasher import ContentHasher
from .models import DuplicateGroup
from .size_pass import SizePass

logger = get_logger(__name__)


class DetectionPipeline:
    """Orchestrates multi-pass duplicate detection."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize detection pipeline.

        Args:
            settings: Hashing and scan settings (built-in defaults when omitted)
        """
        self.settings = settings or default_settings()
        self.hasher = ContentHasher(
            partial_read_size=self.settings.partial_read_size,
            chunk_size=self.settings.chunk_size,
        )
        self.size_pass = SizePass(
            min_size=self.settings.min_file_size,
            ignore_hardlinks=self.settings.ignore_hardlinks,
        )
        self.checksum_pass = ChecksumPass(self.hasher)
        self.byte_pass = BytePass()

    def detect_duplicates(self, root: Path) -> list[DuplicateGroup]:
        """Run duplicate detection pipeline.

        Args:
            root: Directory to scan; validating it is the caller's job

        Returns:
            List of duplicate groups in deterministic order
        """
        logger.info(f"Starting duplicate detection in {root}")

        # Pass 1: Group by size
        size_groups = self.size_pass.find_candidates(root)

        if not size_groups:
            logger.info("No duplicate candidates found")
            return []

        # Pass 2: Partial then full hash
        hash_groups = self.checksum_pass.find_duplicates(size_groups)

        if not hash_groups:
            logger.info("No true duplicates found")
            return []

        # Pass 3: Optional byte comparison
        if self.settings.byte_compare:
            hash_groups = self.byte_pass.verify_duplicates(hash_groups)

        duplicate_groups = [
            DuplicateGroup(group_id=group_id, paths=tuple(paths), fingerprint=fingerprint)
            for group_id, (fingerprint, paths) in enumerate(hash_groups, start=1)
        ]

        logger.info(f"Detection complete: {len(duplicate_groups)} duplicate groups found")
        return duplicate_groups


def find_duplicates(root: Path) -> list[list[Path]]:
    """Find groups of byte-identical files under root.

    Uses built-in defaults; the environment is not consulted.

    Args:
        root: Existing directory to scan

    Returns:
        List of groups, each a list of two or more paths
    """
    groups = DetectionPipeline(default_settings()).detect_duplicates(Path(root))
    return [list(group.paths) for group in groups]
