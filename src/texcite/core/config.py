"""Configuration models for citation editing.

CitationConfig

`commands` (`tuple[CommandSpec, ...]`)
: Citation commands recognised at point, grouped by argument shape. Defaults
  to the biblatex and natbib ``cite`` family plus ``nocite``/``supercite``.

`default_command` (`str`)
: Command inserted when no prompt is shown. Defaults to ``cite``.

`prompt_for_cite_style` (`bool`)
: Ask for the command name when synthesizing a new citation. Inverted per
  call by the ``invert_prompt`` flag of the inserter.

`prompt_for_extra_arguments` (`bool`)
: Ask for the non-key arguments (prenote, postnote) declared by the command
  shape. When `False`, new citations only receive the key argument.

Example ``texcite.yml``:

```yaml
default_command: parencite
prompt_for_cite_style: false
commands:
  - names: [cite, parencite, textcite]
    arguments:
      - {label: Prenote, optional: true}
      - {label: Postnote, optional: true}
      - {label: Keys, key: true}
  - names: [nocite]
```
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
import yaml

from .commands import DEFAULT_COMMANDS, CommandSpec, CommandTable
from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)


class CitationConfig(BaseModel):
    """Immutable citation settings assembled once at startup."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    commands: tuple[CommandSpec, ...] = DEFAULT_COMMANDS
    default_command: str = "cite"
    prompt_for_cite_style: bool = True
    prompt_for_extra_arguments: bool = True

    def table(self) -> CommandTable:
        """Build the lookup table for the configured commands."""
        return CommandTable(self.commands)


def load_config(path: Path | str | None = None) -> CitationConfig:
    """Load a YAML configuration file, or the defaults when ``path`` is ``None``."""
    if path is None:
        return CitationConfig()

    config_path = Path(path)
    try:
        payload: Any = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Unable to read configuration '{config_path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in '{config_path}': {exc}") from exc

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ConfigurationError(f"Configuration '{config_path}' must be a mapping.")

    try:
        config = CitationConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration '{config_path}': {exc}") from exc

    logger.debug(
        "Loaded %d citation command group(s) from %s", len(config.commands), config_path
    )
    return config


__all__ = ["CitationConfig", "load_config"]
