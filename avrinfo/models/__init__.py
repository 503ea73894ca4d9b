"""Data models for AVR header analysis."""

from avrinfo.models.header import AvrHeader
from avrinfo.models.result import AudioCharacteristics, AvrFlags, ExtractionResult

__all__ = [
    "AvrHeader",
    "AvrFlags",
    "AudioCharacteristics",
    "ExtractionResult",
]
