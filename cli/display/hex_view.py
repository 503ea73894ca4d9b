"""
Hex dump display utilities.
"""

from rich.console import Console
from rich.panel import Panel

from avrinfo.models.header import HEADER_SIZE

console = Console()


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    start_offset: int = 0,
    bytes_per_line: int = 16,
    max_lines: int = 12,
    header_size: int = HEADER_SIZE,
) -> None:
    """
    Display header and leading sample bytes as a Rich hex dump.

    Bytes inside the header are shown bright, sample data dim, with a
    marker line where the sample data starts.
    """
    lines = []
    end = min(len(data), max_lines * bytes_per_line)

    for offset in range(0, end, bytes_per_line):
        if offset == header_size:
            lines.append(f"[yellow]{'-- sample data ':-<{bytes_per_line * 4 + 12}}[/yellow]")

        chunk = data[offset : offset + bytes_per_line]
        style = "white" if offset < header_size else "dim"

        hex_str = " ".join(f"{b:02X}" for b in chunk)
        ascii_str = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)

        lines.append(
            f"[dim]{start_offset + offset:08X}[/dim]  "
            f"[{style}]{hex_str:<{bytes_per_line * 3}}[/{style}] [cyan]{ascii_str}[/cyan]"
        )

    if len(data) > end:
        lines.append(f"[dim]... {len(data) - end} more bytes ...[/dim]")

    console.print(Panel("\n".join(lines), title=title, border_style="blue", expand=False))
