"""Pass 3: Optional byte-by-byte comparison."""

import filecmp
import os
from pathlib import Path

from ..common.logging import get_logger

logger = get_logger(__name__)


class BytePass:
    """Third pass (optional): byte-by-byte file comparison.

    Rules out fingerprint collisions by comparing every member against a
    representative of each equivalence class.
    """

    def split_group(self, paths: list[Path]) -> list[list[Path]]:
        """Partition paths into classes of byte-identical files.

        Args:
            paths: Paths sharing a full fingerprint

        Returns:
            Classes with at least two members, in first-seen order
        """
        classes: list[list[Path]] = []
        for path in paths:
            if not os.access(path, os.R_OK):
                logger.debug(f"Dropping unreadable file {path}")
                continue
            if not self._place(path, classes):
                classes.append([path])

        return [members for members in classes if len(members) >= 2]

    def _place(self, path: Path, classes: list[list[Path]]) -> bool:
        """Append path to the first class it matches.

        A representative that can no longer be read is removed and the next
        member of its class, already known to be identical, takes over.
        Returns True once path is placed, or dropped as unreadable.
        """
        i = 0
        while i < len(classes):
            members = classes[i]
            try:
                if filecmp.cmp(members[0], path, shallow=False):
                    members.append(path)
                    return True
            except OSError as e:
                if not os.access(path, os.R_OK):
                    logger.debug(f"Dropping {path} from byte comparison: {e}")
                    return True
                logger.debug(f"Dropping vanished representative {members[0]}: {e}")
                members.pop(0)
                if not members:
                    classes.pop(i)
                continue
            i += 1
        return False

    def verify_duplicates(
        self, groups: list[tuple[str, list[Path]]]
    ) -> list[tuple[str, list[Path]]]:
        """Verify duplicates with byte comparison.

        Args:
            groups: (fingerprint, paths) pairs from the checksum pass

        Returns:
            Verified (fingerprint, paths) pairs
        """
        logger.info("Pass 3: Byte-by-byte comparison")

        verified = []
        for fingerprint, paths in groups:
            for members in self.split_group(paths):
                verified.append((fingerprint, members))

        filecmp.clear_cache()

        if len(verified) != len(groups):
            logger.warning(
                f"Byte comparison changed group count from {len(groups)} to {len(verified)}"
            )

        return verified
