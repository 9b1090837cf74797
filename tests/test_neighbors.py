from __future__ import annotations

from thalweg.core.geodesy import PLANAR, RHUMB, Coordinate
from thalweg.routing.neighbors import LinearNeighbors, NeighborIndex


def test_planar_candidates_cover_resolution() -> None:
    coords = [Coordinate(float(r), float(c)) for r in range(5) for c in range(5)]
    index = NeighborIndex(coords, 1.5, PLANAR)
    hits = index.candidates(Coordinate(2.0, 2.0))
    assert hits == sorted(hits)
    within = [i for i, c in enumerate(coords) if PLANAR.distance(Coordinate(2.0, 2.0), c) < 1.5]
    assert set(within) <= set(hits)
    assert 0 not in hits


def test_rhumb_candidates_wrap_antimeridian() -> None:
    coords = [Coordinate(0.0, 179.999), Coordinate(0.0, -179.999), Coordinate(0.0, 0.0)]
    index = NeighborIndex(coords, 500.0, RHUMB)
    assert index.candidates(coords[0]) == [0, 1]
    assert index.candidates(coords[1]) == [0, 1]


def test_linear_candidates_are_everything() -> None:
    coords = [Coordinate(0.0, 0.0), Coordinate(50.0, 50.0)]
    assert LinearNeighbors(coords).candidates(Coordinate(1.0, 1.0)) == [0, 1]


def test_rhumb_candidates_near_pole_span_all_longitudes() -> None:
    coords = [Coordinate(89.9999, 0.0), Coordinate(89.9999, 170.0)]
    index = NeighborIndex(coords, 300.0, RHUMB)
    assert index.candidates(coords[0]) == [0, 1]
    assert index.candidates(coords[1]) == [0, 1]
