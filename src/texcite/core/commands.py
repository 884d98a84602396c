"""Citation command table.

ArgSlot

`label` (`str`)
: Human readable name of the argument, used when prompting for its value
  (e.g. ``Prenote``).

`optional` (`bool`)
: Render the argument between square brackets and omit it when empty.

`key` (`bool`)
: Mark the argument receiving the citation keys. A command declares at most
  one key-bearing argument, and that argument is always mandatory.

CommandSpec

`names` (`tuple[str, ...]`)
: Command aliases sharing the same argument shape, without the leading
  backslash (``cite``, ``parencite*``).

`arguments` (`tuple[ArgSlot, ...] | None`)
: Ordered argument shape. ``None`` stands for a single mandatory key-bearing
  argument.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ArgSlot(BaseModel):
    """One argument position in a command's declared shape."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str
    optional: bool = False
    key: bool = False

    @model_validator(mode="after")
    def _check_key_is_mandatory(self) -> ArgSlot:
        if self.key and self.optional:
            raise ValueError(f"Key-bearing argument '{self.label}' cannot be optional.")
        return self

    def render(self, value: str) -> str:
        """Wrap ``value`` in the delimiters matching the slot kind."""
        return f"[{value}]" if self.optional else f"{{{value}}}"


class CommandSpec(BaseModel):
    """Command aliases sharing a single argument shape."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    names: tuple[str, ...] = Field(min_length=1)
    arguments: tuple[ArgSlot, ...] | None = None

    @field_validator("names")
    @classmethod
    def _normalise_names(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        names: list[str] = []
        for raw in value:
            name = raw.strip().lstrip("\\")
            if not name:
                raise ValueError("Command names cannot be empty.")
            if name not in names:
                names.append(name)
        return tuple(names)

    @model_validator(mode="after")
    def _check_single_key_slot(self) -> CommandSpec:
        if self.arguments is not None:
            key_slots = [slot for slot in self.arguments if slot.key]
            if len(key_slots) > 1:
                raise ValueError(
                    f"Command '{self.names[0]}' declares {len(key_slots)} key-bearing arguments."
                )
        return self

    @property
    def key_slot(self) -> ArgSlot | None:
        """Return the key-bearing argument, if the shape declares one."""
        if self.arguments is None:
            return None
        return next((slot for slot in self.arguments if slot.key), None)


class CommandTable:
    """Read-only lookup from command name to its :class:`CommandSpec`."""

    def __init__(self, specs: Iterable[CommandSpec]) -> None:
        self._specs = tuple(specs)
        self._index: dict[str, CommandSpec] = {}
        for spec in self._specs:
            for name in spec.names:
                # The first declaration of an alias wins.
                self._index.setdefault(name, spec)

    def lookup(self, name: str) -> CommandSpec | None:
        """Return the command spec declaring ``name``, or ``None`` for other macros."""
        return self._index.get(name)

    def names(self) -> tuple[str, ...]:
        """Return every alias in configuration order."""
        return tuple(self._index)

    @property
    def specs(self) -> tuple[CommandSpec, ...]:
        return self._specs

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)


_CITE_FAMILY = (
    "cite",
    "Cite",
    "citet",
    "Citet",
    "citep",
    "Citep",
    "citealt",
    "Citealt",
    "citealp",
    "Citealp",
    "parencite",
    "Parencite",
    "footcite",
    "footcitetext",
    "textcite",
    "Textcite",
    "smartcite",
    "Smartcite",
    "cite*",
    "parencite*",
    "autocite",
    "Autocite",
    "autocite*",
    "Autocite*",
    "citeauthor",
    "Citeauthor",
    "citeauthor*",
    "Citeauthor*",
    "citetitle",
    "Citetitle",
    "citetitle*",
    "Citetitle*",
    "citeyear",
    "Citeyear",
    "citeyear*",
    "Citeyear*",
    "citedate",
    "Citedate",
    "citedate*",
    "Citedate*",
    "citeurl",
    "fullcite",
    "footfullcite",
    "notecite",
    "Notecite",
    "pnotecite",
    "Pnotecite",
    "fnotecite",
)

DEFAULT_COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec(
        names=_CITE_FAMILY,
        arguments=(
            ArgSlot(label="Prenote", optional=True),
            ArgSlot(label="Postnote", optional=True),
            ArgSlot(label="Keys", key=True),
        ),
    ),
    CommandSpec(names=("nocite", "supercite")),
)


__all__ = ["DEFAULT_COMMANDS", "ArgSlot", "CommandSpec", "CommandTable"]
