"""CLI command implementations"""

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdpreview.config import Settings, load_config
from mdpreview.core.convert.codeblocks import detect_code_blocks
from mdpreview.core.convert.lists import process_lists
from mdpreview.core.detect import detect_lists
from mdpreview.core.formatting import EmptySelectionError, toggle_format
from mdpreview.core.models import FormatKind
from mdpreview.core.pipeline import render_document


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail("Invalid configuration", e)


def _read_source(path: str) -> str:
    """Read markdown from a file path, or from stdin when path is '-'."""
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"Cannot read {path}", e)


def render_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to render, or '-' for stdin")],
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Write HTML to this file")] = None,
    contrast: Annotated[bool, typer.Option("--contrast", help="Add the contrast class to headings")] = False,
    escape: Annotated[Optional[bool], typer.Option("--escape/--no-escape", help="HTML-escape non-code text")] = None,
    ):
    """Render markdown to preview HTML."""
    settings = _settings(overrides={"escape_text": escape})
    result = render_document(_read_source(path), settings, contrast=contrast)

    if out:
        try:
            Path(out).write_text(result.html, encoding="utf-8")
        except OSError as e:
            _fail(f"Cannot write {out}", e)
        typer.echo(f"Rendered {path} -> {out} ({result.blocks_processed} code block(s))")
    else:
        typer.echo(result.html)


def detect_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to inspect, or '-' for stdin")],
    ):
    """Report the lists and code blocks found in a document."""
    settings = _settings()
    text = _read_source(path)
    lists = detect_lists(text)
    code = detect_code_blocks(text, settings)

    kinds = [name for name, found in (("ordered", lists.has_ordered), ("unordered", lists.has_unordered)) if found]
    typer.echo(f"Lists: {', '.join(kinds) if kinds else 'none'}")
    status = " (incomplete)" if code.has_incomplete else ""
    typer.echo(f"Code blocks: {code.count}{status}")
    for block in code.blocks:
        state = "complete" if block.is_complete else "incomplete"
        typer.echo(f"  #{block.index} {block.css_language} @{block.start} {state}")


def lists_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to process, or '-' for stdin")],
    ):
    """Group list lines into <ol>/<ul> containers, leaving other lines untouched."""
    typer.echo(process_lists(_read_source(path)))


def format_cmd(
    text: Annotated[str, typer.Argument(help="Selected text to toggle")],
    kind: Annotated[FormatKind, typer.Option("--kind", "-k", help="Format to toggle")] = FormatKind.bold,
    ):
    """Toggle bold or italic delimiters around TEXT."""
    try:
        result = toggle_format(text, kind)
    except EmptySelectionError as e:
        _fail(str(e))
    typer.echo(result.text)
