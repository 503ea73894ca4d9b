"""
CLI display modules.
"""

from cli.display.tables import (
    display_avr_info,
    display_errors,
    display_warnings,
)
from cli.display.hex_view import display_hex_dump

__all__ = [
    "display_avr_info",
    "display_errors",
    "display_warnings",
    "display_hex_dump",
]
