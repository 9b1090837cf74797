"""Utilities to reconstruct paths from predecessor maps."""
from __future__ import annotations

from typing import Callable, Dict, Hashable, List, TypeVar

from thalweg.core.errors import UnreachableError

T = TypeVar("T")


def reconstruct_path(
    came_from: Dict[Hashable, T],
    source: T,
    sink: T,
    key: Callable[[T], Hashable],
) -> List[T]:
    """Walk predecessors from sink back to source and return source -> sink order."""
    path = [sink]
    seen = {key(sink)}
    current = sink
    while key(current) != key(source):
        try:
            current = came_from[key(current)]
        except KeyError:
            raise UnreachableError(source, sink) from None
        if key(current) in seen:
            raise UnreachableError(source, sink)
        seen.add(key(current))
        path.append(current)
    path.reverse()
    return path
