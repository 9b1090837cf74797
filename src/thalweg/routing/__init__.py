"""Sounding graph, priority queue and shortest-path search."""

from thalweg.routing.graph import Graph, SearchResult
from thalweg.routing.heap import PriorityHeap

__all__ = [
    "Graph",
    "PriorityHeap",
    "SearchResult",
]
