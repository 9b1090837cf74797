"""Exception types raised by thalweg."""
from __future__ import annotations

from typing import Any


class ThalwegError(Exception):
    """Base class for thalweg errors."""


class ParseError(ThalwegError, ValueError):
    """Malformed coordinate or depth text."""


class EmptyGraphError(ThalwegError, ValueError):
    """An operation needed at least one sounding and got none."""


class UnreachableError(ThalwegError):
    """No channel connects the snapped source and sink."""

    def __init__(self, source: Any, sink: Any) -> None:
        super().__init__(f"No path found between {source} and {sink}")
        self.source = source
        self.sink = sink
