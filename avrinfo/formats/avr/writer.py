"""
AVR file writer.

Encodes AvrHeader objects to the 128-byte binary header, optionally
followed by raw sample data.
"""

from pathlib import Path
from typing import Union

from avrinfo.formats.avr.binary_parser import FIELDS
from avrinfo.models.header import HEADER_SIZE, AvrHeader
from avrinfo.utils.binary import int_to_big_endian, padded_text
from avrinfo.utils.validation import ValidationError


class AvrWriter:
    """
    Writer for AVR audio files.

    Example:
        header = AvrHeader.create("SNARE", bits_per_sample=16,
                                  sample_rate=22050, sample_length=1024)
        AvrWriter.write(header, "snare.avr", sample_data=samples)
    """

    HEADER_SIZE = HEADER_SIZE

    def __init__(self, text_encoding: str = "latin-1"):
        self.text_encoding = text_encoding
        self._buffer: bytearray = bytearray()

    @classmethod
    def write(
        cls, header: AvrHeader, filepath: Union[str, Path], sample_data: bytes = b""
    ) -> None:
        """
        Write a header and its sample data to an AVR file.

        Args:
            header: Header to write
            filepath: Output file path
            sample_data: Raw sample bytes appended after the header
        """
        writer = cls()
        data = writer.to_bytes(header) + sample_data

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, "wb") as f:
            f.write(data)

    def to_bytes(self, header: AvrHeader) -> bytes:
        """
        Convert a header to its 128-byte binary form.

        Args:
            header: Header to encode

        Returns:
            Encoded header

        Raises:
            ValidationError: If the magic is not 4 bytes or a value does not fit its field
        """
        self._buffer = bytearray(self.HEADER_SIZE)

        if len(header.magic) != 4:
            raise ValidationError(f"Magic must be 4 bytes, got {len(header.magic)}")
        self._buffer[0:4] = header.magic

        # midi_split and sample_compression occupy 38..40 and 40..42
        for name, (start, width, kind) in FIELDS.items():
            value = getattr(header, name)
            if kind == "text":
                self._buffer[start : start + width] = padded_text(
                    value, width, self.text_encoding
                )
            else:
                try:
                    self._buffer[start : start + width] = int_to_big_endian(value, width)
                except ValueError as e:
                    raise ValidationError(f"{name}: {e}") from e

        return bytes(self._buffer)
