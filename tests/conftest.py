"""Test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from avrinfo.formats.avr.writer import AvrWriter
from avrinfo.models.header import AvrHeader


def build_header(**fields) -> bytes:
    """Encode a synthetic AVR header with the given field values."""
    return AvrWriter().to_bytes(AvrHeader(**fields))


@pytest.fixture
def sample_header():
    """Return a header with every field set to a distinctive value."""
    return AvrHeader(
        magic=b"2BIT",
        sample_name="KICK01",
        mono_raw=0xFFFF,
        bits_per_sample=16,
        signed_raw=0xFFFF,
        loop_raw=0xFFFF,
        midi_raw=0xFF3C,
        replay_freq_raw=3,
        sample_rate=22050,
        sample_length=4410,
        loop_start=100,
        loop_end=4000,
        midi_split=0x1234,
        sample_compression=0x5678,
        reserved=0x9ABC,
        sample_name_extra="EXTRA",
        comment="Made on an Atari Falcon",
    )


@pytest.fixture
def sample_header_bytes(sample_header):
    """Return the encoded sample header."""
    return AvrWriter().to_bytes(sample_header)


@pytest.fixture
def avr_file(tmp_path, sample_header):
    """Return path to an AVR file with complete sample data."""
    filepath = tmp_path / "kick.avr"
    AvrWriter.write(
        sample_header, filepath, sample_data=bytes(sample_header.expected_data_size)
    )
    return filepath


@pytest.fixture
def truncated_avr_file(tmp_path, sample_header):
    """Return path to an AVR file missing its last sample bytes."""
    filepath = tmp_path / "truncated.avr"
    AvrWriter.write(
        sample_header, filepath, sample_data=bytes(sample_header.expected_data_size - 10)
    )
    return filepath


@pytest.fixture
def wav_file(tmp_path):
    """Return path to a non-AVR file."""
    filepath = tmp_path / "sample.wav"
    filepath.write_bytes(b"RIFF" + bytes(200))
    return filepath
