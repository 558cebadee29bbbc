"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated, Optional

import typer

from mdpreview.cli.commands import _settings, detect_cmd, format_cmd, lists_cmd, render_cmd


app = typer.Typer(name="mdpreview", no_args_is_help=True, help="Markdown live-preview renderer")


@app.callback()
def main(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
    ):
    """Configure logging before any command runs."""
    settings = _settings(overrides={"log_level": log_level.upper() if log_level else None})
    logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(name)s: %(message)s")


app.command(name="render")(render_cmd)
app.command(name="detect")(detect_cmd)
app.command(name="lists")(lists_cmd)
app.command(name="format")(format_cmd)
