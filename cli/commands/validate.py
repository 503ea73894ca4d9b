"""
Validate command - check AVR header integrity and value ranges.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, List

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from avrinfo.formats.avr.reader import AvrReader
from avrinfo.models.header import HEADER_SIZE, REPLAY_FREQ_UNDEFINED, REPLAY_FREQUENCIES
from avrinfo.models.result import ExtractionResult
from avrinfo.utils.validation import VALID_BITS_PER_SAMPLE
from cli.commands import get_config

console = Console()
app = typer.Typer()


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: str  # "error", "warning", "info"
    area: str
    offset: int
    message: str
    expected: str = ""
    actual: str = ""


@dataclass
class ValidationResult:
    """Result of validating an AVR file."""

    filepath: str
    valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    info: List[ValidationIssue] = field(default_factory=list)


class AvrValidator:
    """
    Validate AVR header structure and content.

    The analysis itself decides validity (magic, readable header, sample
    rate). Range checks on individual fields only add warnings. Only the
    header is read from the stream; size is the offset just past the
    sample data.
    """

    def __init__(
        self, stream: BinaryIO, size: int, filepath: str, text_encoding: str = "latin-1"
    ):
        self.stream = stream
        self.size = size
        self.filepath = filepath
        self.text_encoding = text_encoding
        self.issues: List[ValidationIssue] = []
        self.result: ExtractionResult = ExtractionResult()

    def validate(self) -> ValidationResult:
        """Perform full validation and return result."""
        self.issues = []

        reader = AvrReader(text_encoding=self.text_encoding)
        self.result = reader.extract(self.stream, 0, self.size)

        if self.result.ok:
            self._add_issue("info", "Header", 0, "Magic is valid (2BIT)")
            self._validate_data_length()
            self._validate_resolution()
            self._validate_replay_freq()
            self._validate_midi_notes()
            self._validate_loop_points()
            self._validate_sample_rate()
        else:
            for message in self.result.errors:
                self._add_issue("error", "Header", 0, message)

        errors = [i for i in self.issues if i.severity == "error"]
        warnings = [i for i in self.issues if i.severity == "warning"]
        info = [i for i in self.issues if i.severity == "info"]

        return ValidationResult(
            filepath=self.filepath,
            valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            info=info,
        )

    def _add_issue(
        self,
        severity: str,
        area: str,
        offset: int,
        message: str,
        expected: str = "",
        actual: str = "",
    ) -> None:
        """Add a validation issue."""
        self.issues.append(
            ValidationIssue(
                severity=severity,
                area=area,
                offset=offset,
                message=message,
                expected=expected,
                actual=actual,
            )
        )

    def _validate_data_length(self) -> None:
        """Report the truncation check from the analysis."""
        header = self.result.header
        found = self.result.avdataend - self.result.avdataoffset

        if self.result.warnings:
            for message in self.result.warnings:
                self._add_issue(
                    "warning",
                    "Sample Data",
                    HEADER_SIZE,
                    message,
                    f"{header.expected_data_size} bytes",
                    f"{found} bytes",
                )
        else:
            self._add_issue("info", "Sample Data", HEADER_SIZE, f"{found} bytes of sample data")

    def _validate_sample_rate(self) -> None:
        """Report a sample rate or length that leaves playtime undefined."""
        header = self.result.header
        if self.result.rate_error:
            self._add_issue(
                "error",
                "Sample Rate",
                23,
                self.result.rate_error,
                "rate > 0, length > 0",
                f"{header.sample_rate} Hz, {header.sample_length}",
            )

    def _validate_resolution(self) -> None:
        """Check bits per sample is 8, 12 or 16."""
        bits = self.result.header.bits_per_sample
        if bits not in VALID_BITS_PER_SAMPLE:
            self._add_issue(
                "warning",
                "Resolution",
                14,
                f"Unusual resolution: {bits} bits",
                "8, 12 or 16",
                str(bits),
            )
        else:
            self._add_issue("info", "Resolution", 14, f"Resolution is {bits} bits")

    def _validate_replay_freq(self) -> None:
        """Check the replay speed code is known."""
        code = self.result.header.replay_freq_raw
        if code != REPLAY_FREQ_UNDEFINED and code not in REPLAY_FREQUENCIES:
            self._add_issue(
                "warning",
                "Replay Speed",
                22,
                f"Unknown replay speed code: 0x{code:02X}",
                "0-7 or 0xFF",
                f"0x{code:02X}",
            )

    def _validate_midi_notes(self) -> None:
        """Check MIDI notes are in MIDI range."""
        for note in self.result.midi_notes:
            if note > 127:
                self._add_issue(
                    "warning",
                    "MIDI Note",
                    20,
                    "MIDI note out of range",
                    "0-127",
                    str(note),
                )

    def _validate_loop_points(self) -> None:
        """Check loop points fall inside the sample when looping."""
        header = self.result.header
        if not self.result.flags.loop:
            return

        if header.loop_start > header.loop_end or header.loop_end > header.sample_length:
            self._add_issue(
                "warning",
                "Loop",
                30,
                "Loop points outside sample",
                f"0 <= start <= end <= {header.sample_length}",
                f"{header.loop_start}-{header.loop_end}",
            )
        else:
            self._add_issue(
                "info", "Loop", 30, f"Loop {header.loop_start}-{header.loop_end}"
            )


def display_validation(result: ValidationResult, verbose: bool = False) -> None:
    """Display validation result with Rich formatting."""
    if result.valid:
        status = "[bold green]VALID[/bold green]"
        border = "green"
    else:
        status = "[bold red]INVALID[/bold red]"
        border = "red"

    console.print(
        Panel(
            f"[bold]File:[/bold] {result.filepath}\n"
            f"[bold]Status:[/bold] {status}\n\n"
            f"Errors: [red]{len(result.errors)}[/red]  "
            f"Warnings: [yellow]{len(result.warnings)}[/yellow]  "
            f"Info: [blue]{len(result.info)}[/blue]",
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    if result.errors or result.warnings:
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold cyan")
        table.add_column("Severity", width=10)
        table.add_column("Area", style="cyan", width=14)
        table.add_column("Offset", style="dim", width=8)
        table.add_column("Message", width=40)
        table.add_column("Expected", style="green", width=16)
        table.add_column("Actual", style="red", width=12)

        for issue in result.errors:
            table.add_row(
                "[red]ERROR[/red]",
                issue.area,
                str(issue.offset),
                issue.message,
                issue.expected,
                issue.actual,
            )

        for issue in result.warnings:
            table.add_row(
                "[yellow]WARN[/yellow]",
                issue.area,
                str(issue.offset),
                issue.message,
                issue.expected,
                issue.actual,
            )

        console.print(table)

    if result.info and (verbose or (not result.errors and not result.warnings)):
        info_table = Table(title="Validation Checks", box=box.SIMPLE, show_header=False)
        info_table.add_column("", width=60)

        for issue in result.info:
            info_table.add_row(f"[green]OK[/green] {issue.area}: {issue.message}")

        console.print(info_table)


@app.command()
def validate(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="AVR file to validate"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show all validation details"),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat warnings as errors"),
) -> None:
    """
    Validate an AVR file header and its sample data length.

    Checks for:

    - Valid "2BIT" header magic
    - Sample data length matching the header
    - Usable sample rate
    - Resolution, replay speed, MIDI note and loop point ranges

    Examples:

        avrinfo validate kick.avr

        avrinfo validate kick.avr --strict
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    config = get_config(ctx)

    with open(file, "rb") as f:
        validator = AvrValidator(
            f, file.stat().st_size, str(file), text_encoding=config.text_encoding
        )
        result = validator.validate()

    # In strict mode, treat warnings as errors
    if (strict or config.strict) and result.warnings:
        result.valid = False

    display_validation(result, verbose=verbose)

    if not result.valid:
        raise typer.Exit(1)
