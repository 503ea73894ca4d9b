#!/usr/bin/env python3
"""
Example: Create an AVR file

Writes a one second 8-bit mono sine wave with a MIDI root note, then
reads it back.
"""

import math
import sys

sys.path.insert(0, "..")

from avrinfo import AvrHeader, AvrReader, AvrWriter


def main():
    rate = 8000
    samples = bytes(
        int(127 + 120 * math.sin(2 * math.pi * 440 * i / rate)) for i in range(rate)
    )

    header = AvrHeader.create(
        "SINE440",
        bits_per_sample=8,
        sample_rate=rate,
        sample_length=len(samples),
        loop_end=len(samples),
        midi_raw=0xFF45,  # A4
        comment="440 Hz test tone",
    )
    AvrWriter.write(header, "sine440.avr", sample_data=samples)

    result = AvrReader.read("sine440.avr")
    print(result.to_dict())


if __name__ == "__main__":
    main()
