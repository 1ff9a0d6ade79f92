"""
Events command - event table for one track.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.display.tables import display_events_table
from cli.loader import get_track_or_exit, load_smf

console = Console()
app = typer.Typer()


@app.command()
def events(
    file: Path = typer.Argument(..., help="MIDI file to analyze"),
    track: int = typer.Argument(..., help="Track number (0 = first track)"),
    limit: int = typer.Option(50, "--limit", "-n", help="Maximum events to show"),
    show_all: bool = typer.Option(False, "--all", "-a", help="Show every event"),
) -> None:
    """
    Display the decoded events of a track.

    Events written with running status are marked (rs).

    Examples:

        smftool events song.mid 1

        smftool events song.mid 0 --all
    """
    _data, smf = load_smf(file)
    selected = get_track_or_exit(smf, track)

    display_events_table(selected, track, limit=None if show_all else limit)


if __name__ == "__main__":
    app()
