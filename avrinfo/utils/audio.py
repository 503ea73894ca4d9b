"""
Semantic interpretation of decoded AVR header values.

Derives flags and MIDI notes from raw fields, checks the declared sample
length against the data actually present, and computes playback
characteristics (channels, playtime, bitrate).
"""

import logging
from typing import List, Optional

from avrinfo.models.result import AudioCharacteristics, AvrFlags
from avrinfo.utils.validation import InvalidSampleRate, TruncatedData

logger = logging.getLogger(__name__)

# Marks "no note defined" in either half of the MIDI word
MIDI_NOTE_UNDEFINED = 0xFF

NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]


def derive_flags(mono_raw: int, signed_raw: int, loop_raw: int) -> AvrFlags:
    """Project the raw mono/signed/loop words onto booleans (non-zero = on)."""
    return AvrFlags(
        stereo=mono_raw != 0,
        signed=signed_raw != 0,
        loop=loop_raw != 0,
    )


def decode_midi_notes(midi_raw: int) -> List[int]:
    """
    Split the MIDI word into its note numbers.

    The high byte comes first, then the low byte. Either half equal to 0xFF
    means "no note defined" and is skipped.

    Example:
        >>> decode_midi_notes(0xFF05)
        [5]
        >>> decode_midi_notes(0x3C05)
        [60, 5]
    """
    notes = []
    high = (midi_raw >> 8) & 0xFF
    low = midi_raw & 0xFF

    if high != MIDI_NOTE_UNDEFINED:
        notes.append(high)
    if low != MIDI_NOTE_UNDEFINED:
        notes.append(low)

    return notes


def bytes_per_sample(bits_per_sample: int) -> int:
    """Storage size of one sample; 12-bit samples are coded on 16 bits."""
    return 1 if bits_per_sample == 8 else 2


def check_sample_data_length(
    sample_length: int, bits_per_sample: int, data_start: int, data_end: int
) -> Optional[TruncatedData]:
    """
    Compare the declared sample data size with the bytes actually present.

    Args:
        sample_length: Sample length from the header
        bits_per_sample: Sample resolution from the header
        data_start: Offset of the first sample byte
        data_end: Offset just past the last sample byte

    Returns:
        TruncatedData warning on mismatch, otherwise None
    """
    expected = sample_length * bytes_per_sample(bits_per_sample)
    found = data_end - data_start

    if expected != found:
        warning = TruncatedData(expected=expected, found=found)
        logger.warning(warning.message)
        return warning

    return None


def compute_characteristics(
    sample_length: int, sample_rate: int, bits_per_sample: int, stereo: bool
) -> AudioCharacteristics:
    """
    Derive channel count, playtime and bitrate.

    Raises:
        InvalidSampleRate: If sample_rate is zero, or the resulting playtime
            is zero so no bitrate can be derived
    """
    channels = 2 if stereo else 1

    if sample_rate == 0:
        raise InvalidSampleRate(
            f"Sample rate is 0 Hz: playtime and bitrate are undefined "
            f"(sample length {sample_length})",
            sample_rate=sample_rate,
            sample_length=sample_length,
        )

    playtime_seconds = (sample_length / channels) / sample_rate

    if playtime_seconds == 0:
        raise InvalidSampleRate(
            f"Sample length is 0: bitrate is undefined at {sample_rate} Hz",
            sample_rate=sample_rate,
            sample_length=sample_length,
        )

    bitrate = (sample_length * (8 if bits_per_sample == 8 else 16)) / playtime_seconds

    return AudioCharacteristics(
        channels=channels,
        sample_rate=sample_rate,
        bits_per_sample=bits_per_sample,
        playtime_seconds=playtime_seconds,
        bitrate=bitrate,
    )


def note_name(note: int) -> str:
    """Get note name (e.g. C4) for a MIDI note number."""
    if 0 <= note <= 127:
        return f"{NOTE_NAMES[note % 12]}{note // 12 - 1}"
    return f"?{note}"
