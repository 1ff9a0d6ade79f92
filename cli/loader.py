"""
Shared file loading for CLI commands.

Reads and decodes a MIDI file, turning decoder errors into a red error
message and exit code 1.
"""

from pathlib import Path
from typing import Tuple

import typer
from rich.console import Console
from rich.markup import escape

from smftool.formats.smf.reader import SMFReader
from smftool.models.smf import SMF
from smftool.utils.validation import SMFError

console = Console()


def load_smf(file: Path, strict: bool = False) -> Tuple[bytes, SMF]:
    """
    Read and decode a MIDI file for display.

    Returns:
        Tuple of (raw file bytes, decoded document)

    Raises:
        typer.Exit: With code 1 if the file is missing or invalid
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    reader = SMFReader(strict=strict)
    try:
        smf = reader.parse_file(file)
    except SMFError as e:
        console.print(f"[red]Error: {escape(str(file))}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    return reader.raw_data, smf


def get_track_or_exit(smf: SMF, track: int):
    """Return ``smf.tracks[track]`` or exit with an error."""
    if not 0 <= track < len(smf.tracks):
        console.print(f"[red]Invalid track number: {track}. Use 0-{len(smf.tracks) - 1}.[/red]")
        raise typer.Exit(1)
    return smf.tracks[track]
