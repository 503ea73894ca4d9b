#!/usr/bin/env python3
"""
Example: Basic AVR header analysis

Shows how to read an AVR file and print its header information.
"""

import sys

sys.path.insert(0, "..")

from avrinfo import AvrReader
from avrinfo.utils.audio import note_name


def main(filepath: str):
    result = AvrReader.read(filepath)
    header = result.header

    # Basic info
    print(f"Sample Name: {header.full_sample_name}")
    print(f"Channels: {result.audio.channels}")
    print(f"Sample Rate: {result.audio.sample_rate} Hz")
    print(f"Resolution: {result.audio.bits_per_sample} bits")
    print(f"Signed: {result.flags.signed}")
    if result.rate_error:
        print(f"Playtime: undefined ({result.rate_error})")
    else:
        print(f"Playtime: {result.audio.playtime_seconds:.3f} s")
        print(f"Bitrate: {result.audio.bitrate:.0f} bps")
    print()

    # Loop and MIDI
    if result.flags.loop:
        print(f"Loop: {header.loop_start}-{header.loop_end}")
    notes = ", ".join(note_name(n) for n in result.midi_notes) or "none"
    print(f"MIDI Notes: {notes}")

    for warning in result.warnings:
        print(f"Warning: {warning}")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "sample.avr")
