"""
Byte-level decoding helpers for AVR headers.

All multi-byte values in an AVR header are Motorola (big-endian) unsigned
integers. The helpers here never depend on the host byte order:
values are always unpacked with an explicit ">" struct format.
"""

import struct
from typing import Union

# Characters stripped from the end of fixed-width text fields
TEXT_PADDING = b" \t\n\r\x00\x0b"


def big_endian_to_int(data: Union[bytes, bytearray], width: int = 0) -> int:
    """
    Decode an unsigned big-endian integer of 1 to 4 bytes.

    Args:
        data: Raw bytes
        width: Expected width in bytes (defaults to len(data))

    Returns:
        Unsigned integer value

    Raises:
        ValueError: If width is not 1-4 or does not match the data

    Example:
        >>> big_endian_to_int(b"\\x00\\x1f\\x40", 3)
        8000
    """
    if not width:
        width = len(data)

    if not 1 <= width <= 4:
        raise ValueError(f"Integer width must be 1-4 bytes, got {width}")
    if len(data) != width:
        raise ValueError(f"Expected {width} bytes, got {len(data)}")

    # Left-pad to 4 bytes so one struct format covers every width
    return struct.unpack(">I", b"\x00" * (4 - width) + bytes(data))[0]


def int_to_big_endian(value: int, width: int) -> bytes:
    """
    Encode an unsigned integer as big-endian bytes.

    Args:
        value: Value to encode
        width: Output width in bytes (1-4)

    Returns:
        Encoded bytes of exactly `width` length

    Raises:
        ValueError: If the value does not fit in the requested width
    """
    if not 1 <= width <= 4:
        raise ValueError(f"Integer width must be 1-4 bytes, got {width}")

    limit = 1 << (8 * width)
    if not 0 <= value < limit:
        raise ValueError(f"Value {value} does not fit in {width} unsigned bytes")

    return struct.pack(">I", value)[4 - width :]


def trimmed_text(data: bytes, encoding: str = "latin-1") -> str:
    """
    Decode a fixed-width text field, stripping trailing NUL/space padding.

    Args:
        data: Raw field bytes
        encoding: Text encoding of the field

    Returns:
        Decoded text without trailing padding
    """
    return data.rstrip(TEXT_PADDING).decode(encoding, errors="replace")


def padded_text(text: str, width: int, encoding: str = "latin-1") -> bytes:
    """Encode text into a NUL-padded field, truncating if it is too long."""
    raw = text.encode(encoding, errors="replace")[:width]
    return raw.ljust(width, b"\x00")


def print_hex_bytes(data: bytes) -> str:
    """Format bytes as space separated hex pairs, e.g. "32 42 49 54"."""
    return " ".join(f"{b:02X}" for b in data)
