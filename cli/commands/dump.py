"""
Dump command - hex dump of one track chunk.
"""

from pathlib import Path

import typer
from rich.console import Console

from smftool.models.track import TRACK_HEADER_LENGTH
from cli.display.hex_view import display_hex_dump
from cli.loader import get_track_or_exit, load_smf

console = Console()
app = typer.Typer()


@app.command()
def dump(
    file: Path = typer.Argument(..., help="MIDI file to dump"),
    track: int = typer.Argument(..., help="Track number (0 = first track)"),
    lines: int = typer.Option(32, "--lines", "-l", help="Maximum lines to show"),
) -> None:
    """
    Hex dump of a track chunk as stored in the file.

    The 8-byte chunk header is highlighted, and end-of-track is marked.

    Examples:

        smftool dump song.mid 1

        smftool dump song.mid 2 --lines 100
    """
    data, smf = load_smf(file)
    selected = get_track_or_exit(smf, track)
    start, end = smf.track_spans()[track]

    regions = [(0, TRACK_HEADER_LENGTH, "bold bright_blue")]
    if selected.has_end_of_track:
        eot = selected.events[-1]
        regions.append((TRACK_HEADER_LENGTH + eot.offset, end - start, "bold red"))

    display_hex_dump(
        data[start:end],
        title=f"Track {track} ({selected.length} bytes)",
        start_offset=start,
        max_lines=lines,
        regions=regions,
    )


if __name__ == "__main__":
    app()
