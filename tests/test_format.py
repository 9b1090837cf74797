from __future__ import annotations

import json

import pytest

from thalweg.core.geodesy import Coordinate, Location
from thalweg.io.format import OutputFormat, convert, extension, format_dms

LON = 112 + 56 / 60 + 24.36 / 3600
HEADER = '"Lat (DMS)" "Long (DMS)" "Depth (m)"\n'


def _loc(lat: float, lon: float, depth: float) -> Location:
    return Location(Coordinate(lat, lon), depth)


def test_to_dms_no_value() -> None:
    assert convert(OutputFormat.DMS, []) == HEADER


def test_to_dms_one_value() -> None:
    expected = HEADER + "00-00-0.000N 00-00-0.000E 0.000\n"
    assert convert(OutputFormat.DMS, [_loc(0.0, 0.0, 0.0)]) == expected


def test_to_dms_many_values() -> None:
    expected = HEADER + "49-12-0.000N 112-56-24.360W 100.000\n" + "49-12-0.000S 112-56-24.360E 7.250\n"
    path = [_loc(49.2, -LON, 100.0), _loc(-49.2, LON, 7.25)]
    assert convert(OutputFormat.DMS, path) == expected


def test_format_dms_carries_rounded_seconds() -> None:
    assert format_dms(10.0 + 59.9999999 / 60.0, "N", "S") == "11-00-0.000N"


def test_to_geojson_no_value() -> None:
    expected = (
        '{"type":"FeatureCollection","features":['
        '{"type":"Feature","properties":{},"geometry":'
        '{"type":"LineString","coordinates":[]}'
        "}]"
        "}"
    )
    assert convert(OutputFormat.GEOJSON, []) == expected


def test_to_geojson_many_values() -> None:
    path = [_loc(48.7, -123.7, 100.4), _loc(49.7, -123.7, 100.4)]
    expected = (
        '{"type":"FeatureCollection","features":['
        '{"type":"Feature","properties":{},"geometry":'
        '{"type":"LineString","coordinates":[[-123.7,48.7,-100.4],[-123.7,49.7,-100.4]]}'
        "}]"
        "}"
    )
    out = convert(OutputFormat.GEOJSON, path)
    assert out == expected
    assert json.loads(out)["features"][0]["geometry"]["type"] == "LineString"


def test_output_format_parse_and_extension() -> None:
    assert OutputFormat.parse("GeoJSON") is OutputFormat.GEOJSON
    assert OutputFormat.parse("dms") is OutputFormat.DMS
    assert extension(OutputFormat.DMS) == "txt"
    assert extension(OutputFormat.GEOJSON) == "geojson"
    with pytest.raises(ValueError):
        OutputFormat.parse("kml")
