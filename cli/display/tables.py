"""
Rich table displays for AVR header information.
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from avrinfo.models.result import ExtractionResult
from cli.display.formatters import (
    format_bitrate,
    format_duration,
    format_flag,
    format_midi_notes,
    format_replay_freq,
)

console = Console()


def display_avr_info(result: ExtractionResult, filepath: str) -> None:
    """Display complete AVR header information with Rich formatting."""
    header = result.header
    flags = result.flags
    audio = result.audio

    if result.rate_error:
        status = "[red]Undefined playtime[/red]"
    elif result.warnings:
        status = "[yellow]Warnings[/yellow]"
    else:
        status = "[green]Valid[/green]"

    overview = f"""[bold]File:[/bold] {filepath}
[bold]Sample Name:[/bold] {header.full_sample_name or "N/A"}
[bold]Format:[/bold] {header.magic.decode("latin-1")} ({result.fileformat})
[bold]Status:[/bold] {status}
[bold]Sample Data:[/bold] {result.avdataoffset}-{result.avdataend} ({result.avdataend - result.avdataoffset} bytes)"""

    console.print(
        Panel(
            overview,
            title="[bold blue]AVR Sample Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    # Audio panel
    if audio.playtime_seconds is None:
        playtime = bitrate = "[red]undefined[/red]"
    else:
        playtime = format_duration(audio.playtime_seconds)
        bitrate = f"{format_bitrate(audio.bitrate)} {audio.bitrate_mode.upper()}"

    audio_content = f"""[bold]Channels:[/bold] {audio.channels} ({"stereo" if flags.stereo else "mono"})
[bold]Sample Rate:[/bold] {audio.sample_rate} Hz
[bold]Resolution:[/bold] {audio.bits_per_sample} bits ({"signed" if flags.signed else "unsigned"})
[bold]Playtime:[/bold] {playtime}
[bold]Bitrate:[/bold] {bitrate}
[bold]Lossless:[/bold] {"Yes" if audio.lossless else "No"}"""

    console.print(
        Panel(
            audio_content, title="[bold cyan]Audio[/bold cyan]", border_style="cyan", expand=False
        )
    )

    # Header fields table
    table = Table(title="Header Fields", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan", width=20)
    table.add_column("Value", width=44)

    table.add_row("Stereo", format_flag(flags.stereo, header.mono_raw))
    table.add_row("Signed", format_flag(flags.signed, header.signed_raw))
    table.add_row("Loop", format_flag(flags.loop, header.loop_raw))
    table.add_row("Loop Start", str(header.loop_start))
    table.add_row("Loop End", str(header.loop_end))
    table.add_row("Sample Length", str(header.sample_length))
    table.add_row("MIDI Notes", format_midi_notes(result.midi_notes, header.midi_raw))
    table.add_row("Replay Speed", format_replay_freq(header.replay_freq_raw, header.replay_freq_hz))
    table.add_row("MIDI Split", f"0x{header.midi_split:04X}")
    table.add_row("Compression", f"0x{header.sample_compression:04X}")
    table.add_row("Reserved", f"0x{header.reserved:04X}")
    table.add_row("Name Extra", header.sample_name_extra or "[dim]-[/dim]")
    table.add_row("Comment", header.comment or "[dim]-[/dim]")

    console.print(table)

    display_warnings(result)


def display_warnings(result: ExtractionResult) -> None:
    """Display warnings and the sample rate error attached to a result."""
    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")
    if result.rate_error:
        console.print(f"[red]Error:[/red] {result.rate_error}")


def display_errors(result: ExtractionResult) -> None:
    """Display errors attached to a failed result."""
    for error in result.errors:
        console.print(f"[red]Error:[/red] {error}")
