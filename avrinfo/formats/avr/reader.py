"""
AVR file reader.

Runs the complete header analysis: read, magic check, field decoding,
flag/MIDI interpretation, sample length check and playback characteristics.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Union

from avrinfo.formats.avr.binary_parser import AvrParser
from avrinfo.models.result import AudioCharacteristics, ExtractionResult
from avrinfo.utils.audio import (
    check_sample_data_length,
    compute_characteristics,
    decode_midi_notes,
    derive_flags,
)
from avrinfo.utils.validation import AvrError, InvalidSampleRate, validate_avr_header

logger = logging.getLogger(__name__)


class AvrReader:
    """
    Reader for AVR audio file headers.

    Example:
        result = AvrReader.read("sample.avr")
        print(f"{result.header.sample_name}: {result.audio.playtime_seconds:.2f}s")
    """

    FILE_FORMAT = "avr"

    def __init__(self, text_encoding: str = "latin-1"):
        self.parser = AvrParser(text_encoding=text_encoding)

    @classmethod
    def read(cls, filepath: Union[str, Path], text_encoding: str = "latin-1") -> ExtractionResult:
        """
        Analyze an AVR file on disk.

        The header is expected at offset 0 and the sample data to run to
        the end of the file.

        Args:
            filepath: Path to .avr file
            text_encoding: Encoding of the name/comment fields

        Returns:
            ExtractionResult

        Raises:
            FileNotFoundError: If the file does not exist
            AvrError: If the header cannot be analyzed
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        reader = cls(text_encoding=text_encoding)
        with open(filepath, "rb") as f:
            return reader.analyze(f, 0, filepath.stat().st_size)

    def analyze(self, stream: BinaryIO, avdataoffset: int, avdataend: int) -> ExtractionResult:
        """
        Analyze the AVR header found at avdataoffset.

        Args:
            stream: Seekable binary stream
            avdataoffset: Offset of the header in the stream
            avdataend: Offset just past the sample data

        Returns:
            Fully populated ExtractionResult. If the sample rate or length
            leaves playtime undefined, playtime and bitrate are None and
            rate_error holds the InvalidSampleRate message.

        Raises:
            IoError: If the header cannot be read
            FormatMismatch: If the magic is not "2BIT"
        """
        raw = self.parser.read_header(stream, avdataoffset)
        header = self.parser.parse_bytes(raw, avdataoffset)
        data_start = avdataoffset + AvrParser.HEADER_SIZE

        flags = derive_flags(header.mono_raw, header.signed_raw, header.loop_raw)
        midi_notes = decode_midi_notes(header.midi_raw)

        warnings = []
        truncated = check_sample_data_length(
            header.sample_length, header.bits_per_sample, data_start, avdataend
        )
        if truncated:
            warnings.append(truncated.message)

        rate_error = None
        try:
            audio = compute_characteristics(
                header.sample_length, header.sample_rate, header.bits_per_sample, flags.stereo
            )
        except InvalidSampleRate as e:
            logger.warning("%s", e)
            rate_error = str(e)
            audio = AudioCharacteristics(
                channels=2 if flags.stereo else 1,
                sample_rate=header.sample_rate,
                bits_per_sample=header.bits_per_sample,
                playtime_seconds=None,
                bitrate=None,
            )

        logger.debug(
            "AVR analysis done: %d ch, %d Hz, %d bits, playtime %s",
            audio.channels,
            audio.sample_rate,
            audio.bits_per_sample,
            audio.playtime_seconds,
        )

        return ExtractionResult(
            fileformat=self.FILE_FORMAT,
            avdataoffset=data_start,
            avdataend=avdataend,
            header=header,
            flags=flags,
            midi_notes=tuple(midi_notes),
            audio=audio,
            warnings=tuple(warnings),
            rate_error=rate_error,
        )

    def extract(self, stream: BinaryIO, avdataoffset: int, avdataend: int) -> ExtractionResult:
        """
        Analyze like analyze(), but report AVR errors inside the result.

        Returns:
            ExtractionResult; on failure it carries only the error message
        """
        try:
            return self.analyze(stream, avdataoffset, avdataend)
        except AvrError as e:
            logger.info("AVR analysis failed: %s", e)
            return ExtractionResult.failure(str(e), avdataoffset, avdataend)

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file can be read as AVR.

        Args:
            filepath: Path to check

        Returns:
            True if the file starts with the "2BIT" magic
        """
        filepath = Path(filepath)

        if not filepath.exists():
            return False

        try:
            with open(filepath, "rb") as f:
                header = f.read(4)
        except OSError:
            return False

        return validate_avr_header(header)

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about an AVR file without raising.

        Args:
            filepath: Path to .avr file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        try:
            size = filepath.stat().st_size
            with open(filepath, "rb") as f:
                result = cls().extract(f, 0, size)
        except OSError as e:
            logger.info("Cannot open %s: %s", filepath, e)
            return {"valid": False, "errors": [f"Cannot open {filepath}: {e.strerror or e}"]}

        info = {
            "valid": result.ok,
            "size": size,
            "header_size": AvrParser.HEADER_SIZE,
        }

        if result.ok:
            info["sample_name"] = result.header.full_sample_name
            info["channels"] = result.audio.channels
            info["sample_rate"] = result.audio.sample_rate
            info["playtime_seconds"] = result.audio.playtime_seconds
            info["warnings"] = list(result.warnings)
            if result.rate_error:
                info["errors"] = [result.rate_error]
        else:
            info["errors"] = list(result.errors)

        return info
