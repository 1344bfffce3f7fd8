"""Scan command."""

import time
from datetime import timedelta
from pathlib import Path
from typing import Optional

import typer
from humanize import intcomma, naturaldelta

from ..common.constants import REPORT_FORMATS
from ..common.exceptions import DupScanError
from ..common.paths import resolve_root
from ..config.settings import get_settings
from ..detector.pipeline import DetectionPipeline
from ..reporting.exporter import ReportExporter
from ..reporting.formatter import ScanReport, format_size, summarize
from .formatters import (
    console,
    create_progress,
    create_table,
    print_error,
    print_info,
    print_panel,
    print_success,
)


def _print_groups(report: ScanReport, top: int) -> None:
    summaries = report.by_wasted_size()
    if top > 0:
        print_info(f"Top {min(top, len(summaries))} duplicate groups by wasted space:")
        summaries = summaries[:top]

    table = create_table()
    table.add_column("Group", style="cyan", width=7)
    table.add_column("Files", style="yellow", width=7)
    table.add_column("Size", style="green", width=12)
    table.add_column("Wasted", style="red", width=12)
    table.add_column("Paths", style="white")

    for summary in summaries:
        group = summary.group
        table.add_row(
            str(group.group_id),
            str(group.count),
            format_size(summary.size),
            format_size(summary.wasted_size),
            "\n".join(str(p) for p in group.paths),
        )

    console.print(table)


def scan(
    path: Optional[str] = typer.Argument(
        None, help="Directory to scan (prompted for when omitted)"
    ),
    min_size: Optional[int] = typer.Option(
        None, "--min-size", min=0, help="Minimum file size in bytes"
    ),
    byte_compare: Optional[bool] = typer.Option(
        None, "--byte-compare/--no-byte-compare", help="Confirm matches byte by byte"
    ),
    ignore_hardlinks: Optional[bool] = typer.Option(
        None, "--ignore-hardlinks/--include-hardlinks", help="Report one path per inode"
    ),
    top: int = typer.Option(
        10, "--top", "-n", min=0, help="Number of groups to list (0 for all)"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Also export the report to this file"
    ),
    format: str = typer.Option(
        "csv", "--format", "-f", help="Export format: csv or json"
    ),
) -> None:
    """Scan a directory tree for duplicate files."""
    if format.lower() not in REPORT_FORMATS:
        print_error(f"Invalid format: {format}. Must be 'csv' or 'json'")
        raise typer.Exit(1)

    if path is None:
        path = typer.prompt("Enter directory path to scan")

    try:
        root = resolve_root(path)
    except DupScanError as e:
        print_error(str(e))
        raise typer.Exit(1)

    overrides = {
        "min_file_size": min_size,
        "byte_compare": byte_compare,
        "ignore_hardlinks": ignore_hardlinks,
    }
    settings = get_settings().model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )

    try:
        print_info(f"Scanning {root}")
        pipeline = DetectionPipeline(settings)
        started = time.monotonic()

        with create_progress() as progress:
            progress.add_task("[cyan]Finding duplicates...", total=None)
            duplicate_groups = pipeline.detect_duplicates(root)

        elapsed = timedelta(seconds=time.monotonic() - started)
        report = summarize(duplicate_groups)

        if output is not None:
            ReportExporter().export(report, output, format.lower())
    except (DupScanError, OSError) as e:
        print_error(f"Scan failed: {e}")
        raise typer.Exit(1)

    if output is not None:
        print_success(f"Exported report to: {output}")

    if not duplicate_groups:
        print_success(f"No duplicates found! (took {naturaldelta(elapsed)})")
        return

    summary_text = f"""
Duplicate groups: {intcomma(report.total_groups)}
Duplicate files: {intcomma(report.total_files)}
Wasted space: {format_size(report.total_wasted)}
Elapsed: {naturaldelta(elapsed)}
"""
    print_panel("Scan Summary", summary_text.strip(), style="green")
    _print_groups(report, top)
