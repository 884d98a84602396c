"""Auxiliary helpers used by CLI commands."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import typer

from texcite.adapters.buffer import TextBuffer
from texcite.core.config import CitationConfig, load_config
from texcite.core.exceptions import ConfigurationError

from .state import emit_error, get_cli_state


def load_buffer(path: Path, offset: int | None, line: int | None, column: int) -> TextBuffer:
    """Read ``path`` and place the caret from ``--offset`` or ``--line/--column``."""
    try:
        buffer = TextBuffer.from_file(path)
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"Document is not valid UTF-8 text: {path}") from exc
    if offset is not None and line is not None:
        raise typer.BadParameter("Use either --offset or --line/--column, not both.")
    try:
        if offset is not None:
            buffer.point = offset
        elif line is not None:
            buffer.point = buffer.offset_for(line, column)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return buffer


def load_cli_config() -> CitationConfig:
    """Return the configuration selected with the global ``--config`` option."""
    try:
        return load_config(get_cli_state().config_path)
    except ConfigurationError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


def split_key_arguments(values: Iterable[str] | None) -> list[str]:
    """Flatten ``a,b c`` style key arguments into a list of keys."""
    keys: list[str] = []
    for raw in values or ():
        keys.extend(part.strip() for part in raw.split(",") if part.strip())
    return keys


__all__ = ["load_buffer", "load_cli_config", "split_key_arguments"]
