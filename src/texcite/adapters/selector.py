"""Command selectors and argument readers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
import logging
from typing import TYPE_CHECKING

from texcite.core.commands import ArgSlot
from texcite.core.protocols import Aborted, CommandChoice, Selected


if TYPE_CHECKING:
    from rich.console import Console


logger = logging.getLogger(__name__)


def remember(history: list[str], value: str) -> None:
    """Move ``value`` to the front of ``history``."""
    if value in history:
        history.remove(value)
    history.insert(0, value)


class StaticSelector:
    """Selector replaying scripted answers; an exhausted script aborts.

    An empty answer selects the default command.
    """

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self._answers = list(answers)

    def choose_command(
        self,
        candidates: Sequence[str],
        history: list[str],
        default: str,
    ) -> CommandChoice:
        if not self._answers:
            return Aborted()
        command = self._answers.pop(0) or default
        remember(history, command)
        return Selected(command)


class StaticArguments:
    """Argument reader backed by a mapping of slot labels to values."""

    def __init__(self, values: Mapping[str, str | None] | None = None) -> None:
        self._values = {key.lower(): value for key, value in (values or {}).items()}

    def read_argument(self, slot: ArgSlot) -> str | None:
        return self._values.get(slot.label.lower())


class ConsoleSelector:
    """Interactive prompts rendered with Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console

    def choose_command(
        self,
        candidates: Sequence[str],
        history: list[str],
        default: str,
    ) -> CommandChoice:
        from rich import get_console
        from rich.prompt import Prompt

        console = self.console or get_console()
        logger.debug("Prompting among %d citation commands", len(candidates))
        console.print(f"Commands: {', '.join(candidates)}", highlight=False)
        if history:
            console.print(f"Recent: {', '.join(history)}", highlight=False)
        try:
            answer = Prompt.ask(
                "Citation command",
                console=console,
                default=default,
            )
        except (KeyboardInterrupt, EOFError):
            return Aborted()
        command = answer.strip().lstrip("\\") or default
        remember(history, command)
        return Selected(command)

    def read_argument(self, slot: ArgSlot) -> str | None:
        from rich.prompt import Prompt

        answer = Prompt.ask(
            slot.label if not slot.optional else f"{slot.label} (optional)",
            console=self.console,
            default="",
            show_default=False,
        )
        return answer.strip() or None


__all__ = ["ConsoleSelector", "StaticArguments", "StaticSelector", "remember"]
