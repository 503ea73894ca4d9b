"""
avrinfo - Header metadata reader for AVR audio files.

This library provides tools to:
- Read the 128-byte "2BIT" header of AVR sample files
- Derive flags, MIDI notes and playback characteristics
- Write AVR headers (e.g. for test fixtures or re-tagging)

Example usage:
    from avrinfo import AvrReader

    result = AvrReader.read("sample.avr")
    print(result.header.sample_name, result.audio.playtime_seconds)

    # Host-library style: errors are reported in the result
    with open("sample.avr", "rb") as f:
        result = AvrReader().extract(f, 0, size)
    if not result.ok:
        print(result.errors)
"""

__version__ = "0.1.0"
__author__ = "avrinfo Contributors"

from avrinfo.config import AnalyzerConfig
from avrinfo.formats.avr.binary_parser import AvrParser
from avrinfo.formats.avr.reader import AvrReader
from avrinfo.formats.avr.writer import AvrWriter
from avrinfo.models.header import AvrHeader
from avrinfo.models.result import AudioCharacteristics, AvrFlags, ExtractionResult
from avrinfo.utils.validation import (
    AvrError,
    FormatMismatch,
    InvalidSampleRate,
    IoError,
    TruncatedData,
)

__all__ = [
    "AnalyzerConfig",
    "AvrParser",
    "AvrReader",
    "AvrWriter",
    "AvrHeader",
    "AvrFlags",
    "AudioCharacteristics",
    "ExtractionResult",
    "AvrError",
    "FormatMismatch",
    "InvalidSampleRate",
    "IoError",
    "TruncatedData",
]
