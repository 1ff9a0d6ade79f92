"""
smftool - Standard MIDI File inspector and track swapper.

A CLI tool for listing, analyzing and reordering the tracks of .mid files.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from smftool import __version__
from cli.commands.info import info
from cli.commands.tracks import tracks
from cli.commands.swap import swap
from cli.commands.events import events
from cli.commands.dump import dump

console = Console()

# Main app
app = typer.Typer(
    name="smftool",
    help="Inspect Standard MIDI Files and swap their tracks.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="list")(tracks)
app.command(name="swap")(swap)
app.command(name="info")(info)
app.command(name="events")(events)
app.command(name="dump")(dump)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]smftool[/bold] version {__version__}")
    console.print("[dim]Standard MIDI File decoder and track swapper[/dim]")


def setup_logging(verbose: bool) -> None:
    """Route library log messages through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show decoder debug output"),
) -> None:
    """
    smftool - Inspect Standard MIDI Files and swap their tracks.

    [bold]Quick Start:[/bold]

        smftool list song.mid          # Track numbers and names
        smftool swap song.mid 1 2      # Writes song_swap_1_2.mid

    [bold]Analysis Commands:[/bold]

        smftool info song.mid          # Header and track summary
        smftool events song.mid 1      # Decoded events of a track
        smftool dump song.mid 1        # Hex dump of a track chunk

    Use --help with any command for more details.
    """
    setup_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
