"""
Rich table displays for MIDI file information.
"""

from pathlib import Path
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from smftool.models.smf import SMF
from smftool.models.track import Track
from cli.display.formatters import format_channels, format_event_data

console = Console()

FORMAT_NAMES = {
    0: "single track",
    1: "multi track, synchronous",
    2: "multi track, independent",
}


def display_header(smf: SMF, file: Path, file_size: int) -> None:
    """Display the file header panel."""
    header = smf.header
    format_name = FORMAT_NAMES.get(header.format, "unknown")

    trailing = file_size - smf.total_size
    content = f"""[bold]File:[/bold] {escape(str(file))}
[bold]Size:[/bold] {file_size} bytes
[bold]Format:[/bold] {header.format} ({format_name})
[bold]Tracks:[/bold] {header.num_tracks}
[bold]Division:[/bold] {header.ticks_per_quarter} ticks per quarter note"""

    if trailing > 0:
        content += f"\n[yellow]Trailing data:[/yellow] {trailing} bytes after last track"

    console.print(
        Panel(content, title="[bold blue]MIDI File Info[/bold blue]", border_style="blue", expand=False)
    )


def display_tracks_table(smf: SMF) -> None:
    """Display a summary table of all tracks."""
    table = Table(
        title="Tracks",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Offset", style="dim")
    table.add_column("Length", justify="right")
    table.add_column("Events", justify="right")
    table.add_column("Ticks", justify="right")
    table.add_column("Channels")
    table.add_column("Name", style="green")
    table.add_column("EOT")

    for i, (track, (start, _end)) in enumerate(zip(smf.tracks, smf.track_spans())):
        eot = "[green]yes[/green]" if track.has_end_of_track else "[yellow]no[/yellow]"
        table.add_row(
            str(i),
            f"0x{start:06X}",
            str(track.length),
            str(len(track.events)),
            str(track.duration),
            format_channels(track.channels),
            escape(track.name or ""),
            eot,
        )

    console.print(table)


def display_events_table(track: Track, index: int, limit: Optional[int] = None) -> None:
    """
    Display the events of one track.

    Args:
        track: Decoded track
        index: Track index, for the title
        limit: Maximum number of events to show
    """
    events = track.events if limit is None else track.events[:limit]

    table = Table(
        title=f"Track {index} Events",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Offset", style="dim")
    table.add_column("Delta", justify="right")
    table.add_column("Tick", justify="right")
    table.add_column("Type", style="cyan")
    table.add_column("Ch", justify="right")
    table.add_column("Data")

    tick = 0
    for i, event in enumerate(events):
        tick += event.delta
        type_name = event.type_name
        if event.running_status:
            type_name += " [dim](rs)[/dim]"
        channel = "" if event.channel is None else str(event.channel + 1)
        table.add_row(
            str(i),
            f"0x{event.offset:04X}",
            str(event.delta),
            str(tick),
            type_name,
            channel,
            escape(format_event_data(event)),
        )

    console.print(table)

    if len(track.events) > len(events):
        console.print(f"[dim]... {len(track.events) - len(events)} more events ...[/dim]")
