"""
Error types and data validation utilities for AVR header data.
"""

from dataclasses import dataclass

from avrinfo.models.header import AVR_MAGIC
from avrinfo.utils.binary import print_hex_bytes

VALID_BITS_PER_SAMPLE = (8, 12, 16)


class AvrError(Exception):
    """Base class for all AVR analysis errors."""

    pass


class FormatMismatch(AvrError):
    """Raised when the header does not start with the "2BIT" magic."""

    def __init__(self, expected: bytes, actual: bytes, offset: int = 0):
        self.expected = expected
        self.actual = actual
        self.offset = offset
        super().__init__(
            f'Expecting "{print_hex_bytes(expected)}" at offset {offset}, '
            f'found "{print_hex_bytes(actual)}"'
        )


class IoError(AvrError):
    """Raised when the header cannot be read from the stream."""

    def __init__(self, message: str, offset: int = 0, requested: int = 0, received: int = 0):
        self.offset = offset
        self.requested = requested
        self.received = received
        super().__init__(message)


class InvalidSampleRate(AvrError):
    """Raised when playtime or bitrate cannot be derived from the header."""

    def __init__(self, message: str, sample_rate: int = 0, sample_length: int = 0):
        self.sample_rate = sample_rate
        self.sample_length = sample_length
        super().__init__(message)


class ValidationError(AvrError):
    """Raised when header values are out of range for encoding."""

    pass


class ConfigurationError(AvrError):
    """Raised when configuration cannot be loaded or is invalid."""

    pass


@dataclass(frozen=True)
class TruncatedData:
    """
    Non-fatal warning: declared sample length does not match the data present.
    """

    expected: int  # Bytes declared by the header
    found: int  # Bytes between data start and data end

    @property
    def message(self) -> str:
        return (
            f"Probable truncated file: expecting {self.expected} bytes of audio data, "
            f"found {self.found}"
        )

    def __str__(self) -> str:
        return self.message


def validate_magic(raw: bytes, offset: int = 0) -> None:
    """
    Check the first 4 bytes of a header against the AVR magic.

    Args:
        raw: Header bytes (at least 4)
        offset: Stream offset of the header, for error reporting

    Raises:
        FormatMismatch: If the magic does not match
    """
    magic = bytes(raw[:4])
    if magic != AVR_MAGIC:
        raise FormatMismatch(AVR_MAGIC, magic, offset)


def validate_avr_header(data: bytes) -> bool:
    """
    Validate AVR file header magic.

    Args:
        data: File data (at least 4 bytes)

    Returns:
        True if the data starts with "2BIT"
    """
    if len(data) < 4:
        return False

    return data[:4] == AVR_MAGIC
