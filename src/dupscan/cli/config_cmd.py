"""Configuration commands."""

import typer
from humanize import naturalsize

from ..config.settings import get_settings
from .formatters import console, create_table

config_app = typer.Typer(help="Inspect configuration settings")


@config_app.command()
def show() -> None:
    """Show effective configuration (set via DUPSCAN_* variables or .env)."""
    settings = get_settings()

    table = create_table(title="Configuration")
    table.add_column("Setting", style="cyan", width=20)
    table.add_column("Value", style="white")

    table.add_row("Partial read size", naturalsize(settings.partial_read_size, binary=True))
    table.add_row("Chunk size", naturalsize(settings.chunk_size, binary=True))
    table.add_row("Min file size", str(settings.min_file_size))
    table.add_row("Byte compare", str(settings.byte_compare))
    table.add_row("Ignore hardlinks", str(settings.ignore_hardlinks))
    table.add_row("Log level", settings.log_level)
    table.add_row("Log file", str(settings.log_file) if settings.log_file else "None")

    console.print(table)
