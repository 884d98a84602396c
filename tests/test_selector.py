from __future__ import annotations

import io

import pytest
from rich.console import Console
from rich.prompt import Prompt

from texcite.adapters.selector import ConsoleSelector, StaticArguments, StaticSelector, remember
from texcite.core.commands import ArgSlot
from texcite.core.protocols import Aborted, ArgumentReader, Selected, Selector


def test_remember_moves_value_to_front() -> None:
    history = ["cite", "citep"]

    remember(history, "citep")
    remember(history, "textcite")

    assert history == ["textcite", "citep", "cite"]


def test_static_selector_replays_answers() -> None:
    selector = StaticSelector(["citep", ""])
    history: list[str] = []

    assert selector.choose_command(["cite", "citep"], history, "cite") == Selected("citep")
    assert selector.choose_command(["cite", "citep"], history, "cite") == Selected("cite")
    assert selector.choose_command(["cite", "citep"], history, "cite") == Aborted()
    assert history == ["cite", "citep"]


def test_static_arguments_match_labels_case_insensitively() -> None:
    reader = StaticArguments({"prenote": "see", "Postnote": None})

    assert reader.read_argument(ArgSlot(label="Prenote", optional=True)) == "see"
    assert reader.read_argument(ArgSlot(label="Postnote", optional=True)) is None
    assert reader.read_argument(ArgSlot(label="Other")) is None


def test_adapters_satisfy_protocols() -> None:
    assert isinstance(StaticSelector(), Selector)
    assert isinstance(ConsoleSelector(), Selector)
    assert isinstance(StaticArguments(), ArgumentReader)
    assert isinstance(ConsoleSelector(), ArgumentReader)


def test_console_selector_strips_backslash(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Prompt, "ask", classmethod(lambda cls, *args, **kwargs: "\\citet"))
    history: list[str] = []

    choice = ConsoleSelector().choose_command(["cite", "citet"], history, "cite")

    assert choice == Selected("citet")
    assert history == ["citet"]


def test_console_selector_defaults_to_configured_command(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    defaults: list[str] = []

    def blank_answer(cls, *args, **kwargs):
        defaults.append(kwargs["default"])
        return ""

    monkeypatch.setattr(Prompt, "ask", classmethod(blank_answer))
    console = Console(file=io.StringIO(), width=200)
    history = ["citet"]

    choice = ConsoleSelector(console).choose_command(["cite", "citet"], history, "cite")

    assert choice == Selected("cite")
    assert defaults == ["cite"]
    assert history == ["cite", "citet"]
    shown = console.file.getvalue()
    assert "Commands: cite, citet" in shown
    assert "Recent: citet" in shown


def test_console_selector_interrupt_aborts(monkeypatch: pytest.MonkeyPatch) -> None:
    def interrupted(cls, *args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(Prompt, "ask", classmethod(interrupted))

    assert ConsoleSelector().choose_command(["cite"], [], "cite") == Aborted()


def test_console_reader_returns_none_for_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(Prompt, "ask", classmethod(lambda cls, *args, **kwargs: "  "))

    assert ConsoleSelector().read_argument(ArgSlot(label="Prenote", optional=True)) is None
