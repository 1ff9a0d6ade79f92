"""
Swap command - exchange two tracks of a MIDI file.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from smftool.converters.track_swap import TrackSwapper, default_output_path
from smftool.utils.validation import SMFError

console = Console()
app = typer.Typer()


@app.command()
def swap(
    file: Path = typer.Argument(..., help="Source MIDI file"),
    track_a: int = typer.Argument(..., help="First track number (1 or higher)"),
    track_b: int = typer.Argument(..., help="Second track number (1 or higher)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file path"),
    strict: bool = typer.Option(False, "--strict", help="Require end-of-track in every track"),
) -> None:
    """
    Swap two tracks of a MIDI file.

    Track chunks are moved as raw bytes; nothing else in the file changes.
    Track numbers are the ones shown by [cyan]smftool list[/cyan]. Track 0
    (the conductor track) cannot be swapped.

    The output defaults to <name>_swap_<A>_<B>.mid next to the source.

    Examples:

        smftool swap song.mid 1 3

        smftool swap song.mid 2 4 -o reordered.mid
    """
    if not file.exists():
        console.print(f"[red]Error: Source file not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    for number in (track_a, track_b):
        if number < 1:
            console.print(f"[red]Invalid track number: {number}. Track numbers start at 1.[/red]")
            raise typer.Exit(1)

    output_path = output or default_output_path(file, track_a, track_b)

    swapper = TrackSwapper(strict=strict)
    try:
        written = swapper.swap_file(file, track_a, track_b, output_path)
    except (SMFError, OSError) as e:
        console.print(f"[red]Error: {escape(str(file))}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(
        f"[green]✓[/green] Swapped track {track_a} and {track_b}: {escape(str(written))}"
    )


if __name__ == "__main__":
    app()
