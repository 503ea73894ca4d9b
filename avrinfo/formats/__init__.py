"""Format handlers for AVR audio files."""

from avrinfo.formats.avr import AvrParser, AvrReader, AvrWriter

__all__ = ["AvrParser", "AvrReader", "AvrWriter"]
