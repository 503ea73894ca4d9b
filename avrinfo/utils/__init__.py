"""Utility functions for avrinfo."""

from avrinfo.utils.binary import big_endian_to_int, int_to_big_endian, trimmed_text
from avrinfo.utils.validation import (
    AvrError,
    FormatMismatch,
    InvalidSampleRate,
    IoError,
    TruncatedData,
)

__all__ = [
    "big_endian_to_int",
    "int_to_big_endian",
    "trimmed_text",
    "AvrError",
    "FormatMismatch",
    "InvalidSampleRate",
    "IoError",
    "TruncatedData",
]
