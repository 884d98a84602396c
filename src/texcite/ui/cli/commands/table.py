"""Display the configured citation commands."""

from __future__ import annotations

from texcite.core.commands import CommandSpec

from ..state import get_cli_state
from ..utils import load_cli_config


def _format_shape(spec: CommandSpec) -> str:
    if spec.arguments is None:
        return "{Keys}"
    parts: list[str] = []
    for slot in spec.arguments:
        label = f"{slot.label}*" if slot.key else slot.label
        parts.append(f"[{label}]" if slot.optional else f"{{{label}}}")
    return "".join(parts)


def list_commands() -> None:
    """Print a table of the citation commands and their argument shapes."""
    from rich import box
    from rich.table import Table

    config = load_cli_config()
    table = Table(
        title="Citation Commands",
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    table.add_column("Commands", style="magenta", overflow="fold")
    table.add_column("Arguments", style="green", no_wrap=True)

    for spec in config.table():
        table.add_row(", ".join(spec.names), _format_shape(spec))

    console = get_cli_state().console
    console.print(table)
    console.print(f"Default command: [bold]{config.default_command}[/]")


__all__ = ["list_commands"]
