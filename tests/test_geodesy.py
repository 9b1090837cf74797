from __future__ import annotations

import pytest

from thalweg.core.errors import EmptyGraphError
from thalweg.core.geodesy import (
    PLANAR,
    RHUMB,
    Coordinate,
    closest_point,
    coordinates_close,
    distance_between,
    get_metric,
    is_close,
    rhumb_distance_m,
)


def test_distance_is_symmetric_and_zero_on_self() -> None:
    a = Coordinate(49.2, -112.94)
    b = Coordinate(48.7, -123.7)
    assert distance_between(a, a) == 0.0
    assert distance_between(a, b) == distance_between(b, a)
    assert distance_between(Coordinate(0.0, 0.0), Coordinate(3.0, 4.0)) == pytest.approx(5.0)


def test_rhumb_distance_one_minute_of_latitude_is_one_nautical_mile() -> None:
    a = Coordinate(10.0, 20.0)
    b = Coordinate(10.0 + 1.0 / 60.0, 20.0)
    assert rhumb_distance_m(a, b) == pytest.approx(1852.0)
    assert rhumb_distance_m(a, a) == 0.0


def test_rhumb_distance_wraps_antimeridian() -> None:
    west = Coordinate(0.0, 179.99)
    east = Coordinate(0.0, -179.99)
    assert rhumb_distance_m(west, east) == pytest.approx(0.02 * 60 * 1852.0)


def test_coordinate_hash_and_equality() -> None:
    a = Coordinate(1.5, -2.25)
    b = Coordinate(1.5, -2.25)
    assert a == b
    assert hash(a) == hash(b)
    assert hash(Coordinate(1.5, -2.25)) == hash(Coordinate(-2.25, 1.5))
    assert Coordinate(1.5, -2.25) != Coordinate(-2.25, 1.5)
    assert len({a, b, Coordinate(-2.25, 1.5)}) == 2


def test_closeness_uses_fixed_epsilon() -> None:
    assert is_close(49.2, 49.2 + 1e-12)
    assert not is_close(49.2, 49.2 + 1e-8)
    assert coordinates_close(Coordinate(49.2, -112.94), Coordinate(49.2 + 1e-12, -112.94))


def test_closest_point_picks_minimum() -> None:
    candidates = [Coordinate(0.0, 0.0), Coordinate(1.0, 1.0), Coordinate(2.0, 2.0)]
    assert closest_point(Coordinate(1.2, 0.9), candidates) == Coordinate(1.0, 1.0)
    assert closest_point(Coordinate(5.0, 5.0), iter(candidates)) == Coordinate(2.0, 2.0)


def test_closest_point_ties_go_to_first_candidate() -> None:
    candidates = [Coordinate(0.0, 1.0), Coordinate(0.0, -1.0), Coordinate(1.0, 0.0)]
    assert closest_point(Coordinate(0.0, 0.0), candidates) == Coordinate(0.0, 1.0)
    assert closest_point(Coordinate(0.0, 0.0), candidates[::-1]) == Coordinate(1.0, 0.0)


def test_closest_point_empty_raises() -> None:
    with pytest.raises(EmptyGraphError):
        closest_point(Coordinate(0.0, 0.0), [])


def test_rhumb_envelope_covers_radius() -> None:
    centre = Coordinate(60.0, 10.0)
    dlat, dlon = RHUMB.envelope(centre, 5000.0)
    assert rhumb_distance_m(centre, Coordinate(60.0 + dlat, 10.0)) == pytest.approx(5000.0)
    assert rhumb_distance_m(centre, Coordinate(60.0, 10.0 + dlon)) >= 5000.0 * 0.99


def test_get_metric() -> None:
    assert get_metric("planar") is PLANAR
    assert get_metric("RHUMB") is RHUMB
    with pytest.raises(ValueError):
        get_metric("haversine")
