"""
Info command - header and track summary.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.display.tables import display_header, display_tracks_table
from cli.loader import load_smf

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="MIDI file to analyze"),
    strict: bool = typer.Option(False, "--strict", help="Require end-of-track in every track"),
) -> None:
    """
    Display MIDI file information.

    Shows the header fields and, for every track, its byte offset,
    declared length, event count, duration in ticks, channels used and
    name.

    Examples:

        smftool info song.mid

        smftool info song.mid --strict
    """
    data, smf = load_smf(file, strict=strict)

    display_header(smf, file, len(data))
    console.print()
    display_tracks_table(smf)


if __name__ == "__main__":
    app()
