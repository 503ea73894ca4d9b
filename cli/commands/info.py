"""
Info command - display AVR header information.
"""

import json
from pathlib import Path

import typer
from rich.console import Console

from avrinfo.formats.avr.reader import AvrReader
from cli.commands import get_config
from cli.display.hex_view import display_hex_dump
from cli.display.tables import display_avr_info, display_errors

console = Console()
app = typer.Typer()


@app.command()
def info(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="AVR file to analyze"),
    offset: int = typer.Option(0, "--offset", "-o", help="Offset of the AVR header in the file"),
    as_json: bool = typer.Option(False, "--json", "-j", help="Print metadata as JSON"),
    show_hex: bool = typer.Option(False, "--hex", "-x", help="Show hex dump of the header"),
) -> None:
    """
    Display AVR sample header information.

    Shows sample name, format flags, loop points, MIDI notes and the
    derived channel count, playtime and bitrate.

    Examples:

        avrinfo info kick.avr

        avrinfo info kick.avr --json
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    config = get_config(ctx)
    size = file.stat().st_size

    with open(file, "rb") as f:
        result = AvrReader(text_encoding=config.text_encoding).extract(f, offset, size)
        if show_hex and result.ok:
            f.seek(offset)
            raw = f.read(256)

    if as_json:
        console.print_json(json.dumps(result.to_dict()))
        if not result.ok:
            raise typer.Exit(1)
        return

    if not result.ok:
        display_errors(result)
        raise typer.Exit(1)

    display_avr_info(result, str(file))

    if show_hex:
        display_hex_dump(raw, title="AVR Header", start_offset=offset)
