"""Tests for the AVR binary header parser."""

import io

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from avrinfo.formats.avr.binary_parser import FIELDS, AvrParser, field_regions
from avrinfo.formats.avr.writer import AvrWriter
from avrinfo.models.header import AvrHeader
from avrinfo.utils.validation import FormatMismatch, IoError, ValidationError


class TestAvrParser:
    """Test cases for AVR header decoding."""

    def test_parse_header(self, sample_header_bytes):
        """Test parsing a complete header."""
        parser = AvrParser()
        header = parser.parse_bytes(sample_header_bytes)

        assert header.magic == b"2BIT"
        assert header.sample_name == "KICK01"
        assert header.bits_per_sample == 16
        assert header.sample_rate == 22050
        assert header.sample_length == 4410

    def test_roundtrip_every_field(self, sample_header, sample_header_bytes):
        """Test that encoding then decoding reproduces every field."""
        header = AvrParser().parse_bytes(sample_header_bytes)

        assert header == sample_header

    def test_field_offsets(self):
        """Test that fields are read from their documented byte ranges."""
        data = bytearray(128)
        data[0:4] = b"2BIT"
        data[4:12] = b"NAME\x00\x00\x00\x00"
        data[12:14] = b"\xff\xff"
        data[14:16] = b"\x00\x0c"
        data[20:22] = b"\x3c\x05"
        data[22] = 0x05
        data[23:26] = b"\x00\xac\x44"
        data[26:30] = b"\x00\x01\x00\x00"
        data[30:34] = b"\x00\x00\x00\x10"
        data[34:38] = b"\x00\x00\xff\x00"
        data[38:40] = b"\x00\x01"
        data[40:42] = b"\x00\x02"
        data[42:44] = b"\x00\x03"
        data[44:64] = b"MORE".ljust(20, b"\x00")
        data[64:128] = b"A comment   ".ljust(64, b"\x00")

        header = AvrParser().parse_bytes(bytes(data))

        assert header.sample_name == "NAME"
        assert header.mono_raw == 0xFFFF
        assert header.bits_per_sample == 12
        assert header.midi_raw == 0x3C05
        assert header.replay_freq_raw == 5
        assert header.sample_rate == 44100
        assert header.sample_length == 65536
        assert header.loop_start == 16
        assert header.loop_end == 0xFF00
        assert header.midi_split == 1
        assert header.sample_compression == 2
        assert header.reserved == 3
        assert header.sample_name_extra == "MORE"
        assert header.comment == "A comment"

    def test_all_zero_fields(self):
        """Test a header with valid magic and nothing else."""
        header = AvrParser().parse_bytes(b"2BIT" + bytes(124))

        assert header.sample_name == ""
        assert header.mono_raw == 0
        assert header.sample_rate == 0
        assert header.comment == ""

    def test_invalid_magic_rejected(self):
        """Test that a wrong magic raises FormatMismatch."""
        parser = AvrParser()

        with pytest.raises(FormatMismatch) as exc_info:
            parser.parse_bytes(b"RIFF" + bytes(124), offset=512)

        error = exc_info.value
        assert error.expected == b"2BIT"
        assert error.actual == b"RIFF"
        assert error.offset == 512
        assert "32 42 49 54" in str(error)
        assert "52 49 46 46" in str(error)
        assert parser.header is None

    def test_header_size_validation(self):
        """Test that decoding requires exactly 128 bytes."""
        with pytest.raises(ValueError, match="Invalid AVR header size"):
            AvrParser().decode_fields(b"2BIT" + bytes(10))

    def test_decode_ignores_magic(self):
        """Test that field decoding alone never checks the magic."""
        header = AvrParser().decode_fields(b"XXXX" + bytes(124))

        assert header.magic == b"XXXX"

    def test_dump_structure(self, sample_header_bytes):
        """Test structure dump for debugging."""
        parser = AvrParser()
        parser.parse_bytes(sample_header_bytes)

        dump = parser.dump_structure()

        assert "AVR Header Structure" in dump
        assert "Magic valid: True" in dump
        assert "sample_rate" in dump

    def test_field_regions_cover_header(self):
        """Test regions start at the magic and end at the comment."""
        regions = field_regions()

        assert regions[0] == (0, 4, "magic")
        assert regions[-1] == (64, 128, "comment")
        assert len(regions) == len(FIELDS) + 1


class TestHeaderReader:
    """Test cases for reading the header from a stream."""

    def test_read_at_offset(self, sample_header_bytes):
        """Test reading a header that follows other data."""
        stream = io.BytesIO(b"\xaa" * 64 + sample_header_bytes + bytes(32))

        raw = AvrParser().read_header(stream, 64)

        assert raw == sample_header_bytes

    def test_short_read(self):
        """Test that fewer than 128 bytes raises IoError."""
        stream = io.BytesIO(b"2BIT" + bytes(50))

        with pytest.raises(IoError) as exc_info:
            AvrParser().read_header(stream, 0)

        assert exc_info.value.requested == 128
        assert exc_info.value.received == 54

    def test_read_past_end(self):
        """Test that an offset past the end raises IoError."""
        with pytest.raises(IoError, match="Short read at offset 1000"):
            AvrParser().read_header(io.BytesIO(bytes(200)), 1000)

    def test_closed_stream(self):
        """Test that stream failures are wrapped in IoError."""
        stream = io.BytesIO(bytes(200))
        stream.close()

        with pytest.raises(IoError, match="Cannot read AVR header"):
            AvrParser().read_header(stream, 0)


class TestAvrWriter:
    """Test cases for the header writer."""

    def test_header_size(self, sample_header):
        assert len(AvrWriter().to_bytes(sample_header)) == 128

    def test_overlapping_reserved_block(self):
        """Test split/compression each keep their own two bytes."""
        data = AvrWriter().to_bytes(AvrHeader(midi_split=0xAABB, sample_compression=0xCCDD))

        assert data[38:42] == b"\xaa\xbb\xcc\xdd"

    def test_value_out_of_range(self):
        """Test that values too large for their field are rejected."""
        with pytest.raises(ValidationError, match="sample_rate"):
            AvrWriter().to_bytes(AvrHeader(sample_rate=0x1000000))

    def test_bad_magic_length(self):
        with pytest.raises(ValidationError, match="Magic must be 4 bytes"):
            AvrWriter().to_bytes(AvrHeader(magic=b"2BI"))

    def test_write_file(self, tmp_path, sample_header):
        """Test writing header and sample data to disk."""
        filepath = tmp_path / "out" / "sample.avr"

        AvrWriter.write(sample_header, filepath, sample_data=b"\x01\x02")

        data = filepath.read_bytes()
        assert len(data) == 130
        assert data[:4] == b"2BIT"
        assert data[128:] == b"\x01\x02"


class TestAvrHeader:
    """Test cases for derived header properties."""

    def test_create_flags(self):
        header = AvrHeader.create("PAD", stereo=True, signed=True, loop=False, sample_rate=8000)

        assert header.mono_raw == 0xFFFF
        assert header.signed_raw == 0xFFFF
        assert header.loop_raw == 0
        assert header.sample_rate == 8000

    def test_full_sample_name(self):
        """Test the extension field is appended only to a full name."""
        assert AvrHeader(sample_name="ABCDEFGH", sample_name_extra="IJ").full_sample_name == (
            "ABCDEFGHIJ"
        )
        assert AvrHeader(sample_name="ABC", sample_name_extra="IJ").full_sample_name == "ABC"

    def test_full_sample_name_uses_stored_last_byte(self):
        """Test a name ending in a space still counts as full."""
        data = bytearray(AvrWriter().to_bytes(AvrHeader(sample_name_extra="EXT")))
        data[4:12] = b"ABCDEFG "

        header = AvrParser().decode_fields(bytes(data))

        assert header.sample_name == "ABCDEFG"
        assert header.name_full is True
        assert header.full_sample_name == "ABCDEFG EXT"

    def test_short_stored_name_ignores_extra(self):
        data = AvrWriter().to_bytes(AvrHeader(sample_name="ABC", sample_name_extra="EXT"))

        header = AvrParser().decode_fields(data)

        assert header.name_full is False
        assert header.full_sample_name == "ABC"

    def test_replay_freq(self):
        assert AvrHeader(replay_freq_raw=1).replay_freq_hz == 8084
        assert AvrHeader(replay_freq_raw=7).replay_freq_hz == 47261
        assert AvrHeader(replay_freq_raw=0xFF).replay_freq_hz is None
        assert AvrHeader(replay_freq_raw=9).replay_freq_hz is None

    def test_midi_split_span(self):
        header = AvrHeader(midi_split=0x0102, sample_compression=0x0304)

        assert header.midi_split_span == 0x01020304

    def test_expected_data_size(self):
        assert AvrHeader(bits_per_sample=8, sample_length=1000).expected_data_size == 1000
        assert AvrHeader(bits_per_sample=12, sample_length=1000).expected_data_size == 2000
        assert AvrHeader(bits_per_sample=16, sample_length=1000).expected_data_size == 2000
