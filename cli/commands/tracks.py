"""
List command - print the track listing.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.display.formatters import format_listing_name
from cli.loader import load_smf

console = Console()
app = typer.Typer()


@app.command()
def tracks(
    file: Path = typer.Argument(..., help="MIDI file to list"),
    strict: bool = typer.Option(False, "--strict", help="Require end-of-track in every track"),
) -> None:
    """
    List the tracks of a MIDI file.

    Prints one line per track after the first (the conductor track):
    the track number and the payload of the track's second event, which
    is the track name in files written by most sequencers.

    Examples:

        smftool list song.mid
    """
    _data, smf = load_smf(file, strict=strict)

    for i, track in enumerate(smf.tracks[1:], start=1):
        name = format_listing_name(track.events[1].data) if len(track.events) > 1 else ""
        console.print(f"[{i}] {name}", markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    app()
