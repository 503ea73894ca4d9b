"""
AVR binary header parser.

Reads the fixed 128-byte header of an AVR (.avr) audio file and decodes
each field at its documented offset. See avrinfo.models.header for the
complete layout.
"""

import logging
from typing import BinaryIO, Dict, List, Optional, Tuple

from avrinfo.models.header import AVR_MAGIC, HEADER_SIZE, NAME_SIZE, AvrHeader
from avrinfo.utils.binary import big_endian_to_int, trimmed_text
from avrinfo.utils.validation import IoError, validate_magic

logger = logging.getLogger(__name__)

# Field table: name -> (offset, width, kind)
# kind is "int" for unsigned big-endian integers, "text" for padded strings
FIELDS: Dict[str, Tuple[int, int, str]] = {
    "sample_name": (4, 8, "text"),
    "mono_raw": (12, 2, "int"),
    "bits_per_sample": (14, 2, "int"),
    "signed_raw": (16, 2, "int"),
    "loop_raw": (18, 2, "int"),
    "midi_raw": (20, 2, "int"),
    "replay_freq_raw": (22, 1, "int"),
    "sample_rate": (23, 3, "int"),
    "sample_length": (26, 4, "int"),
    "loop_start": (30, 4, "int"),
    "loop_end": (34, 4, "int"),
    "midi_split": (38, 2, "int"),
    "sample_compression": (40, 2, "int"),
    "reserved": (42, 2, "int"),
    "sample_name_extra": (44, 20, "text"),
    "comment": (64, 64, "text"),
}


class AvrParser:
    """
    Parser for AVR binary headers.

    Example:
        parser = AvrParser()
        with open("sample.avr", "rb") as f:
            raw = parser.read_header(f, 0)
        header = parser.parse_bytes(raw)
    """

    HEADER_MAGIC = AVR_MAGIC
    HEADER_SIZE = HEADER_SIZE

    def __init__(self, text_encoding: str = "latin-1"):
        self.text_encoding = text_encoding
        self.data: bytes = b""
        self.header: Optional[AvrHeader] = None

    def read_header(self, stream: BinaryIO, offset: int = 0) -> bytes:
        """
        Read the raw 128-byte header from a stream.

        Performs exactly one seek and one read.

        Args:
            stream: Seekable binary stream
            offset: Offset of the header in the stream

        Returns:
            The raw header bytes

        Raises:
            IoError: If the seek or read fails, or fewer than 128 bytes are available
        """
        logger.debug("Reading %d byte AVR header at offset %d", self.HEADER_SIZE, offset)

        try:
            stream.seek(offset)
            raw = stream.read(self.HEADER_SIZE)
        except (OSError, ValueError) as e:
            raise IoError(
                f"Cannot read AVR header at offset {offset}: {e}",
                offset=offset,
                requested=self.HEADER_SIZE,
            ) from e

        received = len(raw) if raw else 0
        if received != self.HEADER_SIZE:
            raise IoError(
                f"Short read at offset {offset}: expected {self.HEADER_SIZE} bytes, "
                f"got {received}",
                offset=offset,
                requested=self.HEADER_SIZE,
                received=received,
            )

        return bytes(raw)

    def parse_bytes(self, data: bytes, offset: int = 0) -> AvrHeader:
        """
        Validate the magic and decode a raw header.

        Args:
            data: Raw header (128 bytes)
            offset: Stream offset of the header, for error reporting

        Returns:
            Decoded AvrHeader

        Raises:
            FormatMismatch: If the magic is not "2BIT"
            ValueError: If data is not exactly 128 bytes
        """
        self.data = data
        self.header = None

        validate_magic(data, offset)
        self.header = self.decode_fields(data)

        return self.header

    def decode_fields(self, data: bytes) -> AvrHeader:
        """
        Decode every header field from a 128-byte buffer.

        Decoding never fails for a correctly sized buffer; the magic is
        copied as-is and not validated here.
        """
        if len(data) != self.HEADER_SIZE:
            raise ValueError(
                f"Invalid AVR header size: {len(data)} (expected {self.HEADER_SIZE})"
            )

        values = {}
        for name, (start, width, kind) in FIELDS.items():
            chunk = data[start : start + width]
            if kind == "text":
                values[name] = trimmed_text(chunk, self.text_encoding)
            else:
                values[name] = big_endian_to_int(chunk, width)

        name_start = FIELDS["sample_name"][0]
        values["name_full"] = data[name_start + NAME_SIZE - 1] != 0

        header = AvrHeader(magic=bytes(data[0:4]), **values)
        logger.debug("Decoded AVR header: %s", header)

        return header

    def dump_structure(self) -> str:
        """
        Generate a text dump of the header structure for debugging.

        Returns:
            Formatted structure description
        """
        lines = ["AVR Header Structure:"]
        lines.append(f"  Header size: {len(self.data)} bytes")

        if self.header:
            lines.append(f"  Magic valid: {self.header.magic == self.HEADER_MAGIC}")

        lines.append("")
        lines.append("  Fields:")
        for name, (start, width, kind) in FIELDS.items():
            value = getattr(self.header, name) if self.header else None
            lines.append(f"    {name:20} @ {start:3d} ({width:2d} bytes): {value!r}")

        return "\n".join(lines)


def field_regions() -> List[Tuple[int, int, str]]:
    """
    List (start, end, name) for every header region, including the magic.

    Returns:
        Regions sorted by offset
    """
    regions = [(0, 4, "magic")]
    for name, (start, width, _) in FIELDS.items():
        regions.append((start, start + width, name))
    return sorted(regions)
