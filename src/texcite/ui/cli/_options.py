"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


CARET_PANEL = "Caret"
INSERTION_PANEL = "Insertion"
OUTPUT_PANEL = "Output"

DocumentArgument = Annotated[
    Path,
    typer.Argument(
        metavar="FILE",
        help="LaTeX source document.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
]

OffsetOption = Annotated[
    int | None,
    typer.Option(
        "--offset",
        "-o",
        min=0,
        help="Caret position as a 0-based character offset.",
        rich_help_panel=CARET_PANEL,
    ),
]

LineOption = Annotated[
    int | None,
    typer.Option(
        "--line",
        "-l",
        min=1,
        help="Caret line (1-based), combined with --column.",
        rich_help_panel=CARET_PANEL,
    ),
]

ColumnOption = Annotated[
    int,
    typer.Option(
        "--column",
        "-c",
        min=1,
        help="Caret column (1-based) on the line given by --line.",
        rich_help_panel=CARET_PANEL,
    ),
]

KeysArgument = Annotated[
    list[str] | None,
    typer.Argument(
        metavar="KEY...",
        help="Citation keys to insert; comma-separated values are split.",
    ),
]

CommandOption = Annotated[
    str | None,
    typer.Option(
        "--command",
        help="Citation command for a new macro; skips the command prompt.",
        rich_help_panel=INSERTION_PANEL,
    ),
]

InvertPromptOption = Annotated[
    bool,
    typer.Option(
        "--invert-prompt",
        help="Invert the configured prompt-for-cite-style behaviour.",
        rich_help_panel=INSERTION_PANEL,
    ),
]

PrenoteOption = Annotated[
    str | None,
    typer.Option(
        "--prenote",
        help="Value for the Prenote argument of new citations.",
        rich_help_panel=INSERTION_PANEL,
    ),
]

PostnoteOption = Annotated[
    str | None,
    typer.Option(
        "--postnote",
        help="Value for the Postnote argument of new citations.",
        rich_help_panel=INSERTION_PANEL,
    ),
]

NoInputOption = Annotated[
    bool,
    typer.Option(
        "--no-input",
        help="Never prompt; a required command prompt aborts the insertion.",
        rich_help_panel=INSERTION_PANEL,
    ),
]

InPlaceOption = Annotated[
    bool,
    typer.Option(
        "--in-place",
        "-i",
        help="Rewrite FILE instead of printing the edited document.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

UniqueOption = Annotated[
    bool,
    typer.Option(
        "--unique",
        help="Report each key once, at its first occurrence.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]
