"""AVR format handlers."""

from avrinfo.formats.avr.binary_parser import AvrParser
from avrinfo.formats.avr.reader import AvrReader
from avrinfo.formats.avr.writer import AvrWriter

__all__ = ["AvrParser", "AvrReader", "AvrWriter"]
