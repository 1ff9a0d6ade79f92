"""
Hex dump display utilities.
"""

from typing import Sequence, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

console = Console()


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    start_offset: int = 0,
    bytes_per_line: int = 16,
    max_lines: int = 32,
    regions: Sequence[Tuple[int, int, str]] = (),
) -> None:
    """
    Display formatted hex dump with Rich.

    Args:
        data: Bytes to show
        title: Panel title
        start_offset: Address of ``data[0]`` in the file
        bytes_per_line: Bytes per row
        max_lines: Maximum rows before truncating
        regions: (start, end, style) ranges relative to ``data`` to color
    """
    lines = []
    end = min(len(data), max_lines * bytes_per_line)

    for offset in range(0, end, bytes_per_line):
        chunk = data[offset : offset + bytes_per_line]

        line = Text()
        line.append(f"{start_offset + offset:08X}  ", style="dim")

        for i, b in enumerate(chunk):
            if i == 8:
                line.append(" ")  # Extra space at midpoint
            line.append(f"{b:02X} ", style=_style_for(offset + i, regions))

        # Pad short last line so the ASCII column lines up
        missing = bytes_per_line - len(chunk)
        line.append("   " * missing + (" " if len(chunk) <= 8 else ""))

        ascii_str = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)
        line.append(f" {ascii_str}", style="cyan")
        lines.append(line)

    if len(data) > end:
        remaining = len(data) - end
        lines.append(Text(f"... {remaining} more bytes ...", style="dim"))

    content = Text("\n").join(lines)
    console.print(Panel(content, title=title, border_style="blue", expand=False))


def _style_for(pos: int, regions: Sequence[Tuple[int, int, str]]) -> str:
    for start, end, style in regions:
        if start <= pos < end:
            return style
    return ""
