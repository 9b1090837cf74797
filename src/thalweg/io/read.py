"""Readers for DMS sounding files and point-of-interest files."""
from __future__ import annotations

import csv
import logging
import math
from pathlib import Path
from typing import Iterable, List, TextIO

from thalweg.core.errors import ParseError
from thalweg.core.geodesy import Coordinate, Location

logger = logging.getLogger(__name__)

_LATITUDE_MARKERS = {"N": False, "S": True}
_LONGITUDE_MARKERS = {"E": False, "W": True}


def _dms_to_degrees(value: str, bound: int, negate: bool) -> float:
    sections = value.split("-")
    if len(sections) != 3:
        raise ParseError(f"{value} has an unexpected number of sections")
    try:
        degrees = int(sections[0])
        minutes = int(sections[1])
        seconds = float(sections[2])
    except ValueError:
        raise ParseError(f"{value} contains a non-numeric section") from None
    if degrees < -bound or degrees > bound:
        raise ParseError(f"{value} has a degree value outside the expected bounds")
    if minutes < 0 or minutes > 60:
        raise ParseError(f"{value} has a minute value outside the expected bounds")
    if not math.isfinite(seconds) or seconds < 0.0 or seconds > 60.0:
        raise ParseError(f"{value} has a second value outside the expected bounds")
    out = degrees + minutes / 60.0 + seconds / 3600.0
    return -out if negate else out


def _parse_dms(text: str, markers: dict, bound: int) -> float:
    if not text:
        raise ParseError("empty coordinate")
    direction = text[-1].upper()
    if direction not in markers:
        raise ParseError(f"{text} contains unexpected direction marker {text[-1]}")
    return _dms_to_degrees(text[:-1], bound, markers[direction])


def parse_dms_latitude(text: str) -> float:
    """Parse ``DD-MM-SS.sss[N|S]`` into signed decimal degrees."""
    return _parse_dms(text, _LATITUDE_MARKERS, 90)


def parse_dms_longitude(text: str) -> float:
    """Parse ``DDD-MM-SS.sss[E|W]`` into signed decimal degrees."""
    return _parse_dms(text, _LONGITUDE_MARKERS, 180)


def parse_depth(text: str) -> float:
    legal = bool(text) and all(c == "-" or c == "." or c.isdigit() for c in text)
    dash_ok = text.count("-") == (1 if text.startswith("-") else 0)
    if not legal or text.count(".") > 1 or not dash_ok:
        raise ParseError(f"{text} is not a legal number")
    try:
        return float(text)
    except ValueError:
        raise ParseError(f"{text} is not a legal number") from None


def parse_corner_line(line: str) -> Coordinate:
    fields = line.split()
    if len(fields) != 2:
        raise ParseError(f"expected 2 fields, got {len(fields)}")
    return Coordinate(parse_dms_latitude(fields[0]), parse_dms_longitude(fields[1]))


def parse_location_line(line: str) -> Location:
    fields = line.split()
    if len(fields) != 3:
        raise ParseError(f"expected 3 fields, got {len(fields)}")
    coord = Coordinate(parse_dms_latitude(fields[0]), parse_dms_longitude(fields[1]))
    return Location(coord, parse_depth(fields[2]))


def _read_lines(stream: Iterable[str], parse):
    out = []
    for lineno, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            out.append(parse(line))
        except ParseError as exc:
            logger.debug("Skipping line %d: %s", lineno, exc)
    return out


def read_data(stream: Iterable[str]) -> List[Location]:
    """Read ``LAT LON DEPTH`` lines, skipping headers and malformed lines."""
    return _read_lines(stream, parse_location_line)


def read_corners(stream: Iterable[str]) -> List[Coordinate]:
    """Read ``LAT LON`` lines, skipping headers and malformed lines."""
    return _read_lines(stream, parse_corner_line)


def read_corners_csv(stream: TextIO) -> List[Coordinate]:
    """Read decimal ``lat,lon`` rows."""
    out: List[Coordinate] = []
    for row in csv.reader(stream):
        if len(row) < 2:
            continue
        try:
            lat, lon = float(row[0]), float(row[1])
        except ValueError:
            logger.debug("Skipping csv row %s", row)
            continue
        if not (math.isfinite(lat) and math.isfinite(lon)) or abs(lat) > 90.0 or abs(lon) > 180.0:
            logger.debug("Skipping csv row %s: coordinate out of range", row)
            continue
        out.append(Coordinate(lat, lon))
    return out


def read_points(path: str | Path) -> List[Coordinate]:
    """Read points of interest; ``.csv`` files hold decimal degrees, anything else DMS."""
    path = Path(path)
    with path.open("r", encoding="utf-8", newline="") as handle:
        if path.suffix.lower() == ".csv":
            return read_corners_csv(handle)
        return read_corners(handle)


def read_data_directory(path: str | Path, pattern: str = "*.txt", min_depth: float = 0.0) -> List[Location]:
    """Aggregate soundings from every matching file, in file name order.

    Soundings not deeper than ``min_depth`` are dropped.
    """
    path = Path(path)
    data: List[Location] = []
    for file_name in sorted(path.glob(pattern)):
        if not file_name.is_file():
            continue
        with file_name.open("r", encoding="utf-8") as handle:
            found = read_data(handle)
        logger.debug("Read %d soundings from %s", len(found), file_name)
        data.extend(found)
    kept = [loc for loc in data if loc.depth > min_depth]
    if len(kept) != len(data):
        logger.info("Dropped %d soundings not deeper than %s m", len(data) - len(kept), min_depth)
    return kept
