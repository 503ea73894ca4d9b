"""
Analysis result model - the output record of one AVR file analysis.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from avrinfo.models.header import AvrHeader


@dataclass(frozen=True)
class AvrFlags:
    """
    Boolean projections of the raw mono/signed/loop words.
    """

    stereo: bool = False
    signed: bool = False
    loop: bool = False


@dataclass(frozen=True)
class AudioCharacteristics:
    """
    Playback characteristics derived from the header.
    """

    channels: int  # 1 or 2
    sample_rate: int  # Hz
    bits_per_sample: int  # 8, 12 or 16
    playtime_seconds: Optional[float]  # None if the sample rate is unusable
    bitrate: Optional[float]  # Bits per second
    dataformat: str = "avr"
    lossless: bool = True
    bitrate_mode: str = "cbr"


@dataclass(frozen=True)
class ExtractionResult:
    """
    Complete result of analyzing one AVR file.

    Built once, after every stage of the analysis has run. A failed
    analysis is represented by ExtractionResult.failure(), which carries
    only the error and no AVR-specific data. A header whose sample rate
    or length makes playtime undefined still decodes; rate_error then
    describes why playtime and bitrate are None.

    Attributes:
        fileformat: "avr" on success, None on failure
        avdataoffset: Offset of the first sample byte (after the header)
        avdataend: Offset just past the sample data
        header: Decoded header fields
        flags: Stereo/signed/loop flags
        midi_notes: 0-2 MIDI note numbers
        audio: Derived playback characteristics
        warnings: Non-fatal findings (e.g. truncated sample data)
        errors: Fatal findings (only set on failure)
        rate_error: InvalidSampleRate message, if playtime is undefined
    """

    fileformat: Optional[str] = None
    avdataoffset: int = 0
    avdataend: int = 0
    header: Optional[AvrHeader] = None
    flags: Optional[AvrFlags] = None
    midi_notes: Tuple[int, ...] = ()
    audio: Optional[AudioCharacteristics] = None
    warnings: Tuple[str, ...] = ()
    errors: Tuple[str, ...] = field(default=())
    rate_error: Optional[str] = None

    @classmethod
    def failure(cls, message: str, avdataoffset: int = 0, avdataend: int = 0) -> "ExtractionResult":
        """Create a result that only records a fatal error."""
        return cls(avdataoffset=avdataoffset, avdataend=avdataend, errors=(message,))

    @property
    def ok(self) -> bool:
        """True if the analysis succeeded."""
        return self.fileformat is not None and not self.errors

    def to_dict(self) -> Dict[str, Any]:
        """
        Render the result as a nested metadata dictionary.

        Failed results contain only the data offsets and the error list.
        Undefined playtime and bitrate are left out, and the rate error is
        listed under "error".
        """
        result: Dict[str, Any] = {
            "avdataoffset": self.avdataoffset,
            "avdataend": self.avdataend,
        }

        errors = list(self.errors)
        if self.rate_error:
            errors.append(self.rate_error)
        if errors:
            result["error"] = errors

        if not self.ok:
            return result

        header = self.header
        flags = self.flags
        audio = self.audio

        result["fileformat"] = self.fileformat
        result["avr"] = {
            "raw": {
                "magic": header.magic.decode("latin-1"),
                "mono": header.mono_raw,
                "signed": header.signed_raw,
                "loop": header.loop_raw,
                "midi": header.midi_raw,
                "replay_freq": header.replay_freq_raw,
            },
            "sample_name": header.sample_name,
            "bits_per_sample": header.bits_per_sample,
            "sample_rate": header.sample_rate,
            "sample_length": header.sample_length,
            "loop_start": header.loop_start,
            "loop_end": header.loop_end,
            "midi_split": header.midi_split,
            "sample_compression": header.sample_compression,
            "reserved": header.reserved,
            "sample_name_extra": header.sample_name_extra,
            "comment": header.comment,
            "flags": {
                "stereo": flags.stereo,
                "signed": flags.signed,
                "loop": flags.loop,
            },
            "midi_notes": list(self.midi_notes),
        }
        result["audio"] = {
            "dataformat": audio.dataformat,
            "lossless": audio.lossless,
            "bitrate_mode": audio.bitrate_mode,
            "bits_per_sample": audio.bits_per_sample,
            "sample_rate": audio.sample_rate,
            "channels": audio.channels,
        }
        if audio.bitrate is not None:
            result["audio"]["bitrate"] = audio.bitrate
        if audio.playtime_seconds is not None:
            result["playtime_seconds"] = audio.playtime_seconds

        if self.warnings:
            result["warning"] = list(self.warnings)

        return result
