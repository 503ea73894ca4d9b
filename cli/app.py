"""
avrinfo - Header metadata reader for AVR audio files.

Command line front-end for inspecting and validating AVR samples.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from avrinfo import __version__
from avrinfo.config import AnalyzerConfig
from avrinfo.utils.logging import setup_logging
from avrinfo.utils.validation import ConfigurationError
from cli.commands.dump import dump
from cli.commands.info import info
from cli.commands.validate import validate

console = Console()

# Main app
app = typer.Typer(
    name="avrinfo",
    help="Inspect and validate AVR (2BIT) audio sample headers.",
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="info")(info)
app.command(name="validate")(validate)
app.command(name="dump")(dump)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]avrinfo[/bold] version {__version__}")
    console.print("[dim]Header metadata reader for AVR audio files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML configuration file"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="Log level (DEBUG, INFO, WARNING, ERROR)"
    ),
) -> None:
    """
    avrinfo - Inspect AVR audio sample headers.

    [bold]Commands:[/bold]

        avrinfo info sample.avr         # Header, flags and playback info
        avrinfo info sample.avr --json  # Metadata as JSON
        avrinfo validate sample.avr     # Check header and data length
        avrinfo dump sample.avr         # Annotated header hex dump

    Use --help with any command for more details.
    """
    if version_flag:
        version()
        raise typer.Exit()

    try:
        config = AnalyzerConfig.load(config_file)
        if log_level:
            config.log_level = log_level
            config.validate()
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(2)

    setup_logging(config.log_level, config.log_format)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
