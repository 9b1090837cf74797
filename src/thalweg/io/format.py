"""Writers for thalweg paths."""
from __future__ import annotations

import json
from enum import Enum
from typing import Sequence

from thalweg.core.geodesy import Location


class OutputFormat(str, Enum):
    DMS = "dms"
    GEOJSON = "geojson"

    @classmethod
    def parse(cls, text: str) -> "OutputFormat":
        try:
            return cls(text.lower())
        except ValueError:
            raise ValueError(f"unrecognized output format '{text}'") from None


DMS_HEADER = '"Lat (DMS)" "Long (DMS)" "Depth (m)"'


def extension(fmt: OutputFormat) -> str:
    return {OutputFormat.DMS: "txt", OutputFormat.GEOJSON: "geojson"}[fmt]


def format_dms(value: float, positive: str, negative: str) -> str:
    """Format decimal degrees as ``DD-MM-S.sssH``."""
    marker = positive if value >= 0 else negative
    total = abs(value)
    degrees = int(total)
    minutes_full = (total - degrees) * 60.0
    minutes = int(minutes_full)
    seconds = (minutes_full - minutes) * 60.0
    if round(seconds, 3) >= 60.0:
        seconds = 0.0
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        degrees += 1
    return f"{degrees:02d}-{minutes:02d}-{seconds:.3f}{marker}"


def format_location(loc: Location) -> str:
    lat = format_dms(loc.latitude, "N", "S")
    lon = format_dms(loc.longitude, "E", "W")
    return f"{lat} {lon} {loc.depth:.3f}"


def to_dms(path: Sequence[Location]) -> str:
    lines = [DMS_HEADER]
    lines.extend(format_location(loc) for loc in path)
    return "\n".join(lines) + "\n"


def to_geojson(path: Sequence[Location]) -> str:
    collection = {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {},
                "geometry": {
                    "type": "LineString",
                    "coordinates": [[loc.longitude, loc.latitude, -loc.depth] for loc in path],
                },
            }
        ],
    }
    return json.dumps(collection, separators=(",", ":"))


def convert(fmt: OutputFormat, path: Sequence[Location]) -> str:
    if fmt is OutputFormat.GEOJSON:
        return to_geojson(path)
    return to_dms(path)
