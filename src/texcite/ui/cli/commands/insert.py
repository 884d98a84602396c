"""Insert citation keys into a document."""

from __future__ import annotations

import logging

import typer

from texcite.adapters.selector import ConsoleSelector, StaticArguments, StaticSelector
from texcite.api import CitationSession
from texcite.core.exceptions import CitationError
from texcite.core.protocols import ArgumentReader, Selector

from .._options import (
    ColumnOption,
    CommandOption,
    DocumentArgument,
    InPlaceOption,
    InvertPromptOption,
    KeysArgument,
    LineOption,
    NoInputOption,
    OffsetOption,
    PostnoteOption,
    PrenoteOption,
)
from ..state import emit_error, get_cli_state
from ..utils import load_buffer, load_cli_config, split_key_arguments


logger = logging.getLogger(__name__)


def insert(
    document: DocumentArgument,
    citation_keys: KeysArgument = None,
    offset: OffsetOption = None,
    line: LineOption = None,
    column: ColumnOption = 1,
    command: CommandOption = None,
    invert_prompt: InvertPromptOption = False,
    prenote: PrenoteOption = None,
    postnote: PostnoteOption = None,
    no_input: NoInputOption = False,
    in_place: InPlaceOption = False,
) -> None:
    """Insert KEY... at the caret, extending the citation already open there."""
    state = get_cli_state()
    buffer = load_buffer(document, offset, line, column)
    console_selector = ConsoleSelector(console=state.err_console)

    selector: Selector = StaticSelector() if no_input else console_selector
    reader: ArgumentReader
    if prenote is not None or postnote is not None or no_input:
        reader = StaticArguments({"Prenote": prenote, "Postnote": postnote})
    else:
        reader = console_selector

    session = CitationSession(buffer, load_cli_config(), selector=selector, reader=reader)
    try:
        session.insert_citation(
            split_key_arguments(citation_keys),
            invert_prompt=invert_prompt,
            command=command,
        )
    except CitationError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    if in_place:
        buffer.write(document)
        logger.info("Updated %s", document)
        typer.echo(str(buffer.point))
        return

    typer.echo(buffer.text, nl=False)
    state.err_console.print(f"caret: {buffer.point}", highlight=False)


__all__ = ["insert"]
