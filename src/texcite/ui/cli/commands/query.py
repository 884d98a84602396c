"""Read-only citation queries."""

from __future__ import annotations

from pathlib import Path

import typer

from texcite.api import CitationSession

from .._options import ColumnOption, DocumentArgument, LineOption, OffsetOption, UniqueOption
from ..state import emit_warning
from ..utils import load_buffer, load_cli_config


def _session(
    document: Path,
    offset: int | None,
    line: int | None,
    column: int,
) -> CitationSession:
    return CitationSession(load_buffer(document, offset, line, column), load_cli_config())


def _not_found(message: str) -> typer.Exit:
    emit_warning(message)
    return typer.Exit(code=1)


def locate(
    document: DocumentArgument,
    offset: OffsetOption = None,
    line: LineOption = None,
    column: ColumnOption = 1,
) -> None:
    """Print the citation command enclosing the caret and its span."""
    session = _session(document, offset, line, column)
    match = session.locate()
    if match is None:
        raise _not_found(f"No citation command at offset {session.buffer.point}.")
    typer.echo(f"{match.command}\t{match.span.start}\t{match.span.end}")


def key(
    document: DocumentArgument,
    offset: OffsetOption = None,
    line: LineOption = None,
    column: ColumnOption = 1,
) -> None:
    """Print the citation key under the caret and its span."""
    session = _session(document, offset, line, column)
    token = session.key_at_point()
    if token is None:
        raise _not_found(f"No citation key at offset {session.buffer.point}.")
    typer.echo(f"{token.text}\t{token.span.start}\t{token.span.end}")


def keys(
    document: DocumentArgument,
    offset: OffsetOption = None,
    line: LineOption = None,
    column: ColumnOption = 1,
) -> None:
    """Print every key of the citation enclosing the caret, one per line."""
    session = _session(document, offset, line, column)
    citation = session.citation_at_point()
    if citation is None:
        raise _not_found(f"No citation command at offset {session.buffer.point}.")
    for entry in citation.keys:
        typer.echo(entry)


def cited(document: DocumentArgument, unique: UniqueOption = False) -> None:
    """Print the keys of every citation in the document."""
    session = _session(document, 0, None, 1)
    for entry in session.cited_keys(unique=unique):
        typer.echo(entry)


def bibfiles(document: DocumentArgument) -> None:
    """Print the bibliography files declared in the document."""
    session = _session(document, 0, None, 1)
    for name in session.bibliography_files():
        typer.echo(name)


__all__ = ["bibfiles", "cited", "key", "keys", "locate"]
