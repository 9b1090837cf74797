"""Coordinates, soundings and lightweight distance helpers."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Tuple

import numpy as np

from thalweg.core.errors import EmptyGraphError


# Smaller than any useful resolution for latitude and longitude.
EPSILON = 1e-10
METERS_PER_NM = 1852.0
NM_PER_DEGREE = 60.0


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def __hash__(self) -> int:
        return hash(self.latitude) ^ hash(self.longitude)

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"


@dataclass(frozen=True)
class Location:
    """One sounding: a coordinate and a positive depth in metres."""

    coord: Coordinate
    depth: float

    @property
    def latitude(self) -> float:
        return self.coord.latitude

    @property
    def longitude(self) -> float:
        return self.coord.longitude


def coordinate_key(coord: Coordinate) -> Tuple[float, float]:
    """Default hash/equality strategy for search containers."""
    return (coord.latitude, coord.longitude)


def is_close(lhs: float, rhs: float) -> bool:
    return abs(lhs - rhs) < EPSILON


def coordinates_close(lhs: Coordinate, rhs: Coordinate) -> bool:
    return is_close(lhs.latitude, rhs.latitude) and is_close(lhs.longitude, rhs.longitude)


def shortest_dlon(lon1: float, lon2: float) -> float:
    """Return the shortest longitudinal delta from lon1 to lon2 in degrees."""
    return (lon2 - lon1 + 180) % 360 - 180


def distance_between(lhs: Coordinate, rhs: Coordinate) -> float:
    """Planar distance in raw degrees."""
    return math.hypot(rhs.latitude - lhs.latitude, rhs.longitude - lhs.longitude)


def rhumb_distance_m(lhs: Coordinate, rhs: Coordinate) -> float:
    """Return approximate rhumb line distance in metres."""
    dlat = rhs.latitude - lhs.latitude
    dlon = shortest_dlon(lhs.longitude, rhs.longitude)
    lat_avg = (lhs.latitude + rhs.latitude) / 2
    # Adjust longitude for convergence
    dlon_adjusted = dlon * math.cos(math.radians(lat_avg))
    return math.sqrt(dlat**2 + dlon_adjusted**2) * NM_PER_DEGREE * METERS_PER_NM


def _planar_many(target: Coordinate, lats: np.ndarray, lons: np.ndarray) -> np.ndarray:
    return np.hypot(lats - target.latitude, lons - target.longitude)


def _rhumb_many(target: Coordinate, lats: np.ndarray, lons: np.ndarray) -> np.ndarray:
    dlat = lats - target.latitude
    dlon = (lons - target.longitude + 180) % 360 - 180
    lat_avg = (lats + target.latitude) / 2
    dlon_adjusted = dlon * np.cos(np.radians(lat_avg))
    return np.sqrt(dlat**2 + dlon_adjusted**2) * NM_PER_DEGREE * METERS_PER_NM


def _planar_envelope(coord: Coordinate, radius: float) -> Tuple[float, float]:
    return radius, radius


def _rhumb_envelope(coord: Coordinate, radius: float) -> Tuple[float, float]:
    dlat = radius / (NM_PER_DEGREE * METERS_PER_NM)
    # cos of the worst mean latitude inside the box bounds the longitude scale
    worst_lat = abs(coord.latitude) + dlat
    if worst_lat >= 90.0:
        return dlat, 180.0
    dlon = dlat / math.cos(math.radians(worst_lat))
    return dlat, min(dlon, 180.0)


@dataclass(frozen=True)
class Metric:
    """Distance definition shared by adjacency, snapping and the neighbour index.

    Attributes:
        name: Identifier used in configuration.
        distance: Scalar distance between two coordinates.
        distances: Vectorised distance from one coordinate to arrays of lat/lon.
        envelope: Degree half-widths (dlat, dlon) of a box covering a radius.
        wraps_longitude: Whether distances are taken across the antimeridian.
    """

    name: str
    distance: Callable[[Coordinate, Coordinate], float]
    distances: Callable[[Coordinate, np.ndarray, np.ndarray], np.ndarray]
    envelope: Callable[[Coordinate, float], Tuple[float, float]]
    wraps_longitude: bool = False


PLANAR = Metric("planar", distance_between, _planar_many, _planar_envelope)
RHUMB = Metric("rhumb", rhumb_distance_m, _rhumb_many, _rhumb_envelope, wraps_longitude=True)
METRICS = {metric.name: metric for metric in (PLANAR, RHUMB)}


def get_metric(name: str) -> Metric:
    try:
        return METRICS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown metric '{name}'. Valid: {sorted(METRICS)}") from None


def closest_point(target: Coordinate, candidates: Iterable[Coordinate], metric: Metric = PLANAR) -> Coordinate:
    """Return the candidate nearest to target.

    Ties resolve to the earliest candidate in iteration order.
    """
    points = list(candidates)
    if not points:
        raise EmptyGraphError("cannot find the closest point among zero candidates")
    lats = np.fromiter((p.latitude for p in points), dtype=np.float64, count=len(points))
    lons = np.fromiter((p.longitude for p in points), dtype=np.float64, count=len(points))
    idx = int(np.argmin(metric.distances(target, lats, lons)))
    return points[idx]
