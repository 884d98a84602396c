from __future__ import annotations

from pydantic import ValidationError
import pytest

from texcite.core.commands import DEFAULT_COMMANDS, ArgSlot, CommandSpec, CommandTable


def test_default_commands_have_at_most_one_key_slot() -> None:
    for spec in DEFAULT_COMMANDS:
        if spec.arguments is None:
            continue
        assert sum(1 for slot in spec.arguments if slot.key) <= 1


def test_default_cite_family_shape() -> None:
    table = CommandTable(DEFAULT_COMMANDS)

    spec = table.lookup("parencite*")

    assert spec is not None
    assert spec.arguments is not None
    assert [slot.label for slot in spec.arguments] == ["Prenote", "Postnote", "Keys"]
    assert spec.key_slot == ArgSlot(label="Keys", key=True)
    assert table.lookup("nocite") is not None
    assert table.lookup("nocite").arguments is None


def test_lookup_unknown_command_returns_none() -> None:
    table = CommandTable(DEFAULT_COMMANDS)

    assert table.lookup("emph") is None
    assert "emph" not in table
    assert "cite" in table


def test_two_key_slots_are_rejected() -> None:
    with pytest.raises(ValidationError, match="key-bearing"):
        CommandSpec(
            names=("mycite",),
            arguments=(ArgSlot(label="A", key=True), ArgSlot(label="B", key=True)),
        )


def test_optional_key_slot_is_rejected() -> None:
    with pytest.raises(ValidationError, match="cannot be optional"):
        ArgSlot(label="Keys", optional=True, key=True)


def test_names_are_normalised() -> None:
    spec = CommandSpec(names=("\\cite", "cite", " citet "))

    assert spec.names == ("cite", "citet")


def test_empty_names_are_rejected() -> None:
    with pytest.raises(ValidationError):
        CommandSpec(names=())
    with pytest.raises(ValidationError):
        CommandSpec(names=("  ",))


def test_specs_are_immutable() -> None:
    spec = CommandSpec(names=("cite",))

    with pytest.raises(ValidationError):
        spec.names = ("other",)  # type: ignore[misc]


def test_first_declaration_of_alias_wins() -> None:
    first = CommandSpec(names=("cite", "citet"))
    second = CommandSpec(
        names=("citet", "footcite"),
        arguments=(ArgSlot(label="Note", optional=True), ArgSlot(label="Keys", key=True)),
    )
    table = CommandTable([first, second])

    assert table.lookup("citet") is first
    assert table.lookup("footcite") is second
    assert table.names() == ("cite", "citet", "footcite")
    assert len(table) == 2
    assert list(table) == [first, second]


def test_slot_rendering() -> None:
    assert ArgSlot(label="Prenote", optional=True).render("see") == "[see]"
    assert ArgSlot(label="Keys", key=True).render("a") == "{a}"
