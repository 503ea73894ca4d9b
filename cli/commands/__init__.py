"""
CLI commands.
"""

import typer

from avrinfo.config import AnalyzerConfig


def get_config(ctx: typer.Context) -> AnalyzerConfig:
    """Return the config loaded by the app callback, or defaults."""
    if ctx.obj is None:
        ctx.obj = AnalyzerConfig()
    return ctx.obj
