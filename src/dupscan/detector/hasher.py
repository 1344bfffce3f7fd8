"""Content fingerprints for duplicate candidates."""

import hashlib
from pathlib import Path

from ..common.constants import (
    ACCUMULATOR_HEX_WIDTH,
    ACCUMULATOR_MASK,
    CHUNK_SIZE,
    GOLDEN_RATIO,
    PARTIAL_READ_SIZE,
)
from ..common.logging import get_logger

logger = get_logger(__name__)


def chunk_digest(chunk: bytes) -> int:
    """Deterministic 64-bit hash of a chunk.

    The builtin ``hash`` is salted per process, so it cannot back a
    fingerprint that must be stable across runs.
    """
    return int.from_bytes(hashlib.blake2b(chunk, digest_size=8).digest(), "little")


class ContentHasher:
    """Computes fixed-width fingerprints of a file's leading bytes or contents.

    The fingerprint combines per-chunk digests into two 64-bit accumulators,
    one mixed with shift-and-XOR and one with multiply-and-XOR, rendered as
    32 hex characters. An empty string signals an unreadable file and must
    never be used as a grouping key.
    """

    def __init__(
        self,
        partial_read_size: int = PARTIAL_READ_SIZE,
        chunk_size: int = CHUNK_SIZE,
    ) -> None:
        """Initialize hasher.

        Args:
            partial_read_size: Ceiling in bytes for partial hashes
            chunk_size: Bytes read per I/O call
        """
        if partial_read_size <= 0 or chunk_size <= 0:
            raise ValueError("partial_read_size and chunk_size must be positive")
        self.partial_read_size = partial_read_size
        self.chunk_size = chunk_size

    def compute_hash(self, path: Path, max_bytes: int = 0) -> str:
        """Fingerprint up to ``max_bytes`` of a file.

        Args:
            path: File to read
            max_bytes: Byte ceiling, 0 reads the whole file

        Returns:
            32-character hex fingerprint, or "" if the file cannot be read
        """
        hash1 = 0
        hash2 = 0
        total_read = 0

        try:
            with open(path, "rb") as f:
                while True:
                    to_read = self.chunk_size
                    if max_bytes > 0:
                        to_read = min(to_read, max_bytes - total_read)

                    chunk = f.read(to_read)
                    if not chunk:
                        break

                    digest = chunk_digest(chunk)
                    hash1 ^= (digest + GOLDEN_RATIO + (hash1 << 6) + (hash1 >> 2)) & ACCUMULATOR_MASK
                    hash2 ^= (digest * 31 + hash2) & ACCUMULATOR_MASK
                    total_read += len(chunk)

                    if max_bytes > 0 and total_read >= max_bytes:
                        break
        except OSError as e:
            logger.debug(f"Cannot hash {path}: {e}")
            return ""

        width = ACCUMULATOR_HEX_WIDTH
        return f"{hash1:0{width}x}{hash2:0{width}x}"

    def partial_hash(self, path: Path) -> str:
        """Fingerprint of the first ``partial_read_size`` bytes."""
        return self.compute_hash(path, self.partial_read_size)

    def full_hash(self, path: Path) -> str:
        """Fingerprint of the entire file."""
        return self.compute_hash(path)
