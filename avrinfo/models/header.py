"""
AVR header data model.

AVR Header Structure (128 bytes, all values big-endian):
    Offset  Size    Description
    0       4       Magic "2BIT"
    4       8       Sample name (unused space filled with 0)
    12      2       Mono/stereo (0 = mono, 0xFFFF = stereo)
    14      2       Resolution (8, 12 or 16 bits)
    16      2       Signed (0 = unsigned, 0xFFFF = signed)
    18      2       Loop (0 = no loop, 0xFFFF = loop on)
    20      2       MIDI note (0xFFnn, 0xFFFF = no note defined)
    22      1       Replay speed code (0xFF = not defined)
    23      3       Sample rate in Hz
    26      4       Sample length (samples, 2 * bytes in stereo)
    30      4       Loop begin (0 for no loop)
    34      4       Loop end (equal to length for no loop)
    38      2x2     Reserved, MIDI keyboard split
    40      2x2     Reserved, sample compression
    42      2       Reserved
    44      20      Additional name space, used if name[7] != 0
    64      64      User data (comment)
    128     ?       Sample data (12-bit samples are coded on 16 bits)

The format documentation declares both reserved split/compression blocks as
two shorts, so their ranges overlap at 40..42. Each is decoded as a single
short at its start offset; midi_split_span keeps the wider reading.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

AVR_MAGIC = b"2BIT"
HEADER_SIZE = 128
NAME_SIZE = 8

MONO_STEREO = 0xFFFF
NO_MIDI_NOTE = 0xFFFF
REPLAY_FREQ_UNDEFINED = 0xFF

# Replay speed code -> nominal frequency in Hz
REPLAY_FREQUENCIES: Dict[int, int] = {
    0: 5485,
    1: 8084,
    2: 10971,
    3: 16168,
    4: 21942,
    5: 32336,
    6: 43885,
    7: 47261,
}


@dataclass(frozen=True)
class AvrHeader:
    """
    Decoded AVR file header.

    Raw words (mono_raw, signed_raw, loop_raw, midi_raw, replay_freq_raw)
    are kept as stored; flags and MIDI notes are derived from them.
    name_full records whether the last byte of the stored 8-byte name is
    non-zero, which is what enables the additional name space.
    """

    magic: bytes = AVR_MAGIC
    sample_name: str = ""
    mono_raw: int = 0
    bits_per_sample: int = 8
    signed_raw: int = 0
    loop_raw: int = 0
    midi_raw: int = NO_MIDI_NOTE
    replay_freq_raw: int = REPLAY_FREQ_UNDEFINED
    sample_rate: int = 0
    sample_length: int = 0
    loop_start: int = 0
    loop_end: int = 0
    midi_split: int = 0
    sample_compression: int = 0
    reserved: int = 0
    sample_name_extra: str = ""
    comment: str = ""
    name_full: bool = field(default=False, compare=False)

    @classmethod
    def create(
        cls,
        sample_name: str = "",
        stereo: bool = False,
        signed: bool = False,
        loop: bool = False,
        **fields,
    ) -> "AvrHeader":
        """
        Build a header from friendly flag arguments.

        Example:
            header = AvrHeader.create("KICK", stereo=True, bits_per_sample=16,
                                      sample_rate=22050, sample_length=4096)
        """
        return cls(
            sample_name=sample_name,
            mono_raw=MONO_STEREO if stereo else 0,
            signed_raw=0xFFFF if signed else 0,
            loop_raw=0xFFFF if loop else 0,
            **fields,
        )

    @property
    def midi_split_span(self) -> int:
        """32-bit reading of the documented split block (38..42)."""
        return (self.midi_split << 16) | self.sample_compression

    @property
    def full_sample_name(self) -> str:
        """Sample name including the extension field when the name is full."""
        full = self.name_full or len(self.sample_name) >= NAME_SIZE
        if full and self.sample_name_extra:
            return self.sample_name.ljust(NAME_SIZE) + self.sample_name_extra
        return self.sample_name

    @property
    def replay_freq_hz(self) -> Optional[int]:
        """Nominal replay frequency, None when undefined or unknown."""
        return REPLAY_FREQUENCIES.get(self.replay_freq_raw)

    @property
    def bytes_per_sample(self) -> int:
        """Storage bytes per sample; 12-bit samples occupy 16 bits."""
        return 1 if self.bits_per_sample == 8 else 2

    @property
    def expected_data_size(self) -> int:
        """Size of the sample payload declared by the header, in bytes."""
        return self.sample_length * self.bytes_per_sample
