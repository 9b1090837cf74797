"""Deepest-channel (thalweg) search through irregular depth soundings."""

from thalweg.core.errors import EmptyGraphError, ParseError, ThalwegError, UnreachableError
from thalweg.core.geodesy import Coordinate, Location, closest_point, distance_between
from thalweg.routing.graph import Graph, SearchResult
from thalweg.routing.heap import PriorityHeap

__all__ = [
    "Coordinate",
    "EmptyGraphError",
    "Graph",
    "Location",
    "ParseError",
    "PriorityHeap",
    "SearchResult",
    "ThalwegError",
    "UnreachableError",
    "closest_point",
    "distance_between",
]
