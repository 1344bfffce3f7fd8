"""CSV and JSON export functionality."""

import csv
import json
from pathlib import Path

from ..common.logging import get_logger
from .formatter import ScanReport, format_size

logger = get_logger(__name__)


class ReportExporter:
    """Exports a scan report to CSV or JSON."""

    def export_csv(self, report: ScanReport, output_path: Path) -> None:
        """Export duplicate groups to CSV, one row per file.

        Args:
            report: Summarized scan
            output_path: Output file path
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", newline="") as f:
            writer = csv.writer(f)

            # Header
            writer.writerow([
                "group_id",
                "path",
                "size",
                "fingerprint",
                "group_count",
                "group_wasted_size",
            ])

            # Data
            for summary in report.groups:
                group = summary.group
                for path in group.paths:
                    writer.writerow([
                        group.group_id,
                        str(path),
                        summary.size,
                        group.fingerprint,
                        group.count,
                        summary.wasted_size,
                    ])

        logger.info(f"Exported {report.total_groups} groups to CSV: {output_path}")

    def export_json(self, report: ScanReport, output_path: Path) -> None:
        """Export duplicate groups to JSON.

        Args:
            report: Summarized scan
            output_path: Output file path
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "total_groups": report.total_groups,
            "total_files": report.total_files,
            "total_wasted_space": report.total_wasted,
            "total_wasted_space_human": format_size(report.total_wasted),
            "groups": [
                {
                    "group_id": summary.group.group_id,
                    "size": summary.size,
                    "fingerprint": summary.group.fingerprint,
                    "count": summary.group.count,
                    "wasted_size": summary.wasted_size,
                    "paths": [str(p) for p in summary.group.paths],
                }
                for summary in report.groups
            ],
        }

        with open(output_path, "w") as f:
            json.dump(data, f, indent=2)

        logger.info(f"Exported {report.total_groups} groups to JSON: {output_path}")

    def export(self, report: ScanReport, output_path: Path, format: str) -> None:
        """Export in the named format ("csv" or "json")."""
        if format == "csv":
            self.export_csv(report, output_path)
        elif format == "json":
            self.export_json(report, output_path)
        else:
            raise ValueError(f"Unsupported report format: {format}")
