"""Wasted-space accounting and human-readable sizes."""

import os
from dataclasses import dataclass, field

from ..common.constants import SIZE_UNITS
from ..common.logging import get_logger
from ..detector.models import DuplicateGroup

logger = get_logger(__name__)


def format_size(num_bytes: float) -> str:
    """Format a byte count with 1024-based units and two decimals.

    >>> format_size(1536)
    '1.50 KB'
    """
    size = float(num_bytes)
    unit = SIZE_UNITS[0]
    for unit in SIZE_UNITS:
        if size < 1024 or unit == SIZE_UNITS[-1]:
            break
        size /= 1024
    return f"{size:.2f} {unit}"


def wasted_space(size: int, count: int) -> int:
    """Bytes reclaimable by keeping a single copy."""
    return size * max(count - 1, 0)


@dataclass
class GroupSummary:
    """Size accounting for one duplicate group."""

    group: DuplicateGroup
    size: int

    @property
    def wasted_size(self) -> int:
        return wasted_space(self.size, self.group.count)

    @property
    def total_size(self) -> int:
        return self.size * self.group.count


@dataclass
class ScanReport:
    """Summaries for all groups of a scan."""

    groups: list[GroupSummary] = field(default_factory=list)

    @property
    def total_groups(self) -> int:
        return len(self.groups)

    @property
    def total_files(self) -> int:
        return sum(s.group.count for s in self.groups)

    @property
    def total_wasted(self) -> int:
        return sum(s.wasted_size for s in self.groups)

    def by_wasted_size(self) -> list[GroupSummary]:
        """Groups sorted by wasted space, largest first."""
        return sorted(self.groups, key=lambda s: s.wasted_size, reverse=True)


def representative_size(group: DuplicateGroup) -> int:
    """Size of the group's first member, 0 if it has vanished."""
    try:
        return os.stat(group.representative).st_size
    except OSError as e:
        logger.warning(f"Cannot stat {group.representative}: {e}")
        return 0


def summarize(groups: list[DuplicateGroup]) -> ScanReport:
    """Build the wasted-space report for a list of duplicate groups.

    Args:
        groups: Output of the detection pipeline

    Returns:
        Report with one summary per group, in input order
    """
    return ScanReport(
        groups=[GroupSummary(group=g, size=representative_size(g)) for g in groups]
    )
