"""
Display formatting utilities for CLI output.
"""

from typing import Optional, Sequence

from avrinfo.utils.audio import note_name


def format_duration(seconds: float) -> str:
    """
    Format a playtime.

    Returns:
        "2.000 s" below a minute, "1:05.250" otherwise
    """
    if seconds < 60:
        return f"{seconds:.3f} s"
    minutes = int(seconds // 60)
    return f"{minutes}:{seconds - minutes * 60:06.3f}"


def format_bitrate(bitrate: float) -> str:
    """
    Format a bitrate in bits per second.

    Returns:
        "128 kbps (128000 bps)"
    """
    return f"{bitrate / 1000:g} kbps ({bitrate:.0f} bps)"


def format_flag(value: bool, raw: int, on: str = "Yes", off: str = "No") -> str:
    """
    Format a flag with its raw word.

    Returns:
        "Yes (raw: 0xFFFF)" or "No (raw: 0x0000)"
    """
    label = f"[green]{on}[/green]" if value else f"[dim]{off}[/dim]"
    return f"{label} (raw: 0x{raw:04X})"


def format_midi_notes(notes: Sequence[int], raw: int) -> str:
    """
    Format MIDI notes with names and the raw word.

    Returns:
        "60 (C4), 5 (F-1) (raw: 0x3C05)" or "None (raw: 0xFFFF)"
    """
    if notes:
        names = ", ".join(f"{n} ({note_name(n)})" for n in notes)
    else:
        names = "None"
    return f"{names} (raw: 0x{raw:04X})"


def format_replay_freq(code: int, frequency: Optional[int]) -> str:
    """
    Format the replay speed code.

    Returns:
        "8.084 kHz (code 1)" or "Not defined (code 0xFF)"
    """
    if frequency is None:
        return f"Not defined (code 0x{code:02X})"
    return f"{frequency / 1000:.3f} kHz (code {code})"

