"""Sounding graph and deepest-channel search.

Vertices are the sounding coordinates. Edges are implicit: two soundings are
connected when they lie closer than ``resolution`` under the graph's metric.
Entering a sounding costs ``max_depth - depth + 1``, so the cheapest route is
the one through the deepest water.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Sequence, Set, Tuple

from thalweg.core.errors import EmptyGraphError, UnreachableError
from thalweg.core.geodesy import PLANAR, Coordinate, Location, Metric, closest_point, coordinate_key
from thalweg.routing.heap import PriorityHeap
from thalweg.routing.neighbors import LinearNeighbors, NeighborIndex
from thalweg.routing.reconstruct import reconstruct_path

logger = logging.getLogger(__name__)

Key = Callable[[Coordinate], Hashable]


@dataclass
class SearchResult:
    path: List[Location]
    cost: float
    explored: int
    source: Coordinate
    sink: Coordinate


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def is_neighbor(graph: "Graph", current: Coordinate, candidate: Coordinate, unvisited: Set[Hashable]) -> bool:
    """Edge filter used during relaxation: adjacent, distinct and not yet settled."""
    return (
        candidate != current
        and graph.key(candidate) in unvisited
        and graph.adjacent(current, candidate)
    )


class Graph:
    """Immutable graph over a fixed set of soundings.

    Args:
        samples: Soundings to search over. Must not be empty.
        resolution: Maximum metric distance at which two soundings connect.
        metric: Distance definition for adjacency and snapping.
        use_index: Enumerate neighbour candidates through an STRtree instead
            of scanning every sounding.
        round_priorities: Hand rounded integer distances to the priority queue.
        key: Hash/equality strategy for the search containers.
    """

    def __init__(
        self,
        samples: Iterable[Location],
        resolution: float,
        metric: Metric = PLANAR,
        use_index: bool = True,
        round_priorities: bool = False,
        key: Key = coordinate_key,
    ) -> None:
        self._samples: Tuple[Location, ...] = tuple(samples)
        if not self._samples:
            raise EmptyGraphError("a graph needs at least one sounding")
        if not resolution > 0:
            raise ValueError(f"resolution must be positive, got {resolution}")
        self._resolution = float(resolution)
        self._metric = metric
        self._round_priorities = round_priorities
        self._key = key
        self._max_depth = max(loc.depth for loc in self._samples)

        # first sounding wins when a coordinate repeats
        self._by_key: Dict[Hashable, Location] = {}
        for loc in self._samples:
            self._by_key.setdefault(key(loc.coord), loc)
        self._vertices: List[Coordinate] = [loc.coord for loc in self._by_key.values()]

        if use_index:
            self._neighbors = NeighborIndex(self._vertices, self._resolution, metric)
        else:
            self._neighbors = LinearNeighbors(self._vertices)

        logger.debug(
            "Graph built: %d soundings, %d vertices, resolution=%s, metric=%s, max_depth=%s",
            len(self._samples), len(self._vertices), self._resolution, metric.name, self._max_depth,
        )

    def __len__(self) -> int:
        return len(self._samples)

    @property
    def samples(self) -> Tuple[Location, ...]:
        return self._samples

    @property
    def coordinates(self) -> List[Coordinate]:
        return list(self._vertices)

    @property
    def resolution(self) -> float:
        return self._resolution

    @property
    def max_depth(self) -> float:
        return self._max_depth

    @property
    def metric(self) -> Metric:
        return self._metric

    def key(self, coord: Coordinate) -> Hashable:
        return self._key(coord)

    def find(self, coord: Coordinate) -> Optional[Location]:
        return self._by_key.get(self._key(coord))

    def contains(self, coord: Coordinate) -> bool:
        return self._key(coord) in self._by_key

    def adjacent(self, lhs: Coordinate, rhs: Coordinate) -> bool:
        return (
            self.contains(lhs)
            and self.contains(rhs)
            and self._key(lhs) != self._key(rhs)
            and self._metric.distance(lhs, rhs) < self._resolution
        )

    def weight(self, coord: Coordinate) -> float:
        loc = self.find(coord)
        if loc is None:
            return math.nan
        return self._max_depth - loc.depth + 1

    def neighbors(self, current: Coordinate, unvisited: Set[Hashable]) -> List[Coordinate]:
        """Unsettled vertices adjacent to current, in sounding order."""
        vertices = self._vertices
        return [
            vertices[idx]
            for idx in self._neighbors.candidates(current)
            if is_neighbor(self, current, vertices[idx], unvisited)
        ]

    def snap(self, coord: Coordinate) -> Coordinate:
        """Nearest stored coordinate to an arbitrary query point."""
        return closest_point(coord, self._vertices, self._metric)

    def search(self, source: Coordinate, sink: Coordinate) -> SearchResult:
        key = self._key
        source_on_grid = self.snap(source)
        sink_on_grid = self.snap(sink)

        unvisited: Set[Hashable] = {key(v) for v in self._vertices}
        tentative_distance: Dict[Hashable, float] = {key(source_on_grid): 0.0}
        came_from: Dict[Hashable, Coordinate] = {}

        next_heap: PriorityHeap[Coordinate] = PriorityHeap(key=key)
        next_heap.push(source_on_grid, 0)
        explored = 0

        while not next_heap.empty():
            current = next_heap.pop()
            explored += 1
            distance_to_here = tentative_distance[key(current)]

            for neighbor in self.neighbors(current, unvisited):
                new_distance = distance_to_here + self.weight(neighbor)
                known = tentative_distance.get(key(neighbor))
                if known is None or new_distance < known:
                    tentative_distance[key(neighbor)] = new_distance
                    came_from[key(neighbor)] = current
                    priority = round_half_away(new_distance) if self._round_priorities else new_distance
                    if known is None:
                        next_heap.push(neighbor, priority)
                    else:
                        next_heap.decrease_priority(neighbor, priority)

            unvisited.discard(key(current))

        cost = tentative_distance.get(key(sink_on_grid))
        if cost is None:
            logger.debug("Sink %s unreachable from %s after %d pops", sink_on_grid, source_on_grid, explored)
            raise UnreachableError(source_on_grid, sink_on_grid)

        coords = reconstruct_path(came_from, source_on_grid, sink_on_grid, key)
        path = [self._by_key[key(c)] for c in coords]
        logger.debug(
            "Path %s -> %s: %d soundings, cost=%.3f, explored=%d",
            source_on_grid, sink_on_grid, len(path), cost, explored,
        )
        return SearchResult(
            path=path,
            cost=cost,
            explored=explored,
            source=source_on_grid,
            sink=sink_on_grid,
        )

    def shortest_path(self, source: Coordinate, sink: Coordinate) -> List[Location]:
        return self.search(source, sink).path

    def path_cost(self, path: Sequence[Location]) -> float:
        """Cost accrued along a path: the weight of every sounding after the first."""
        return sum(self.weight(loc.coord) for loc in path[1:])

    def thalweg(self, points: Sequence[Coordinate]) -> List[Location]:
        """Chain shortest paths through consecutive points of interest."""
        if len(points) < 2:
            raise ValueError(f"a thalweg needs at least two points, got {len(points)}")
        full_path: List[Location] = []
        for source, sink in zip(points, points[1:]):
            leg = self.shortest_path(source, sink)
            if full_path and full_path[-1] == leg[0]:
                leg = leg[1:]
            full_path.extend(leg)
        return full_path
