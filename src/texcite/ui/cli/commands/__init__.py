"""Command implementations for the texcite CLI."""

from __future__ import annotations

from .insert import insert
from .query import bibfiles, cited, key, keys, locate
from .table import list_commands


__all__ = ["bibfiles", "cited", "insert", "key", "keys", "list_commands", "locate"]
