"""
Dump command - annotated hex dump of an AVR header.
"""

from pathlib import Path
from typing import List, Tuple

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from avrinfo.formats.avr.binary_parser import field_regions
from avrinfo.models.header import HEADER_SIZE

console = Console()
app = typer.Typer()

# Color per header field
REGION_COLORS = {
    "magic": "bright_blue",
    "sample_name": "cyan",
    "mono_raw": "magenta",
    "bits_per_sample": "magenta",
    "signed_raw": "magenta",
    "loop_raw": "magenta",
    "midi_raw": "green",
    "replay_freq_raw": "yellow",
    "sample_rate": "yellow",
    "sample_length": "yellow",
    "loop_start": "blue",
    "loop_end": "blue",
    "midi_split": "dim",
    "sample_compression": "dim",
    "reserved": "dim",
    "sample_name_extra": "cyan",
    "comment": "green",
}

# Header regions with start, end, name and color
REGIONS: List[Tuple[int, int, str, str]] = [
    (start, end, name, REGION_COLORS.get(name, "white")) for start, end, name in field_regions()
]


def get_region_for_offset(offset: int) -> Tuple[str, str]:
    """Get region name and color for a header offset."""
    for start, end, name, color in REGIONS:
        if start <= offset < end:
            return name, color
    return "sample_data", "white"


def format_hex_line(data: bytes, offset: int, bytes_per_line: int = 16) -> Text:
    """
    Format a single hex dump line, coloring each byte by its header field.

    Returns Rich Text object with colored output.
    """
    text = Text()
    text.append(f"{offset:3d} ", style="dim")

    for i, byte in enumerate(data):
        _, color = get_region_for_offset(offset + i)
        style = "dim" if byte == 0x00 else color
        text.append(f"{byte:02X}", style=style)
        text.append(" ")

    # Pad if less than full line
    if len(data) < bytes_per_line:
        text.append("   " * (bytes_per_line - len(data)))

    text.append(" ", style="dim")
    for byte in data:
        if 32 <= byte < 127:
            text.append(chr(byte), style="green")
        else:
            text.append(".", style="dim")

    return text


def create_legend() -> Table:
    """Create a legend of header fields for the hex dump colors."""
    table = Table(title="Legend", box=box.SIMPLE, show_header=False, expand=False)
    table.add_column("Field", width=20)
    table.add_column("Bytes", width=16)

    for start, end, name, color in REGIONS:
        table.add_row(Text(name, style=color), f"{start}..{end} ({end - start} bytes)")

    return table


@app.command()
def dump(
    file: Path = typer.Argument(..., help="AVR file to dump"),
    offset: int = typer.Option(0, "--offset", "-o", help="Offset of the AVR header in the file"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the legend"),
) -> None:
    """
    Annotated hex dump of an AVR header.

    Each byte is colored by the header field it belongs to.

    Examples:

        avrinfo dump kick.avr

        avrinfo dump kick.avr --width 8
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    with open(file, "rb") as f:
        f.seek(offset)
        data = f.read(HEADER_SIZE)

    if len(data) < HEADER_SIZE:
        console.print(
            f"[red]Error: File too short for an AVR header: {len(data)} of {HEADER_SIZE} bytes[/red]"
        )
        raise typer.Exit(1)

    if not no_legend:
        console.print(create_legend())
        console.print()

    console.print(
        Panel(
            f"[bold]File:[/bold] {file}\n"
            f"[bold]Header Offset:[/bold] {offset}\n"
            f"[bold]Magic:[/bold] {data[:4].decode('latin-1')!r}",
            title="[bold]AVR Header Dump[/bold]",
            border_style="blue",
        )
    )

    for line_offset in range(0, HEADER_SIZE, width):
        chunk = data[line_offset : line_offset + width]
        console.print(format_hex_line(chunk, line_offset, width))
