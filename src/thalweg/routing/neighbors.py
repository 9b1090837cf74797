"""Candidate neighbour enumeration for the implicit sounding graph."""
from __future__ import annotations

from typing import List, Sequence

from shapely.geometry import Point, box
from shapely.strtree import STRtree

from thalweg.core.geodesy import Coordinate, Metric


class LinearNeighbors:
    """Every sample is a candidate; the exact adjacency test does the filtering."""

    def __init__(self, coords: Sequence[Coordinate]) -> None:
        self._indices = list(range(len(coords)))

    def candidates(self, coord: Coordinate) -> List[int]:
        return self._indices


class NeighborIndex:
    """STRtree over sample points, queried with the metric's envelope box.

    Candidates are a superset of the samples within ``resolution`` of the
    query coordinate and come back in sample order.
    """

    def __init__(self, coords: Sequence[Coordinate], resolution: float, metric: Metric) -> None:
        self._resolution = resolution
        self._metric = metric
        self._tree = STRtree([Point(c.longitude, c.latitude) for c in coords])

    def candidates(self, coord: Coordinate) -> List[int]:
        dlat, dlon = self._metric.envelope(coord, self._resolution)
        lon, lat = coord.longitude, coord.latitude
        windows = [box(lon - dlon, lat - dlat, lon + dlon, lat + dlat)]
        if self._metric.wraps_longitude:
            if lon - dlon < -180.0:
                windows.append(box(lon - dlon + 360.0, lat - dlat, 180.0, lat + dlat))
            if lon + dlon > 180.0:
                windows.append(box(-180.0, lat - dlat, lon + dlon - 360.0, lat + dlat))
        hits = set()
        for window in windows:
            hits.update(int(idx) for idx in self._tree.query(window))
        return sorted(hits)
