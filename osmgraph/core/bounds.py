"""
Bounding Box Validation and Tiling
====================================

Provides the immutable :class:`BoundingBox`, the validator that turns
caller input into one, and the tile splitter used to keep individual
Overpass queries small.

Example::

    from osmgraph.core.bounds import validate_bounds, split_bounds

    bbox = validate_bounds({"north": 52.6, "south": 52.5, "east": 13.5, "west": 13.3})
    tiles = split_bounds(bbox)
    print(f"{len(tiles)} tiles of at most 0.05 deg")
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

import numpy as np

BOUND_FIELDS = ("north", "south", "east", "west")

# Areas whose latitude or longitude span exceeds this are fetched in tiles.
TILE_THRESHOLD_DEG = 0.1
DEFAULT_MAX_TILE_DEG = 0.05
DEFAULT_OVERLAP_FRACTION = 0.1


class InvalidBounds(ValueError):
    """Raised when a bounding box is malformed or out of range."""


@dataclass(frozen=True)
class BoundingBox:
    """A WGS84 bounding box in signed decimal degrees.

    Attributes:
        north: Northern latitude edge.
        south: Southern latitude edge.
        east: Eastern longitude edge.
        west: Western longitude edge.
    """

    north: float
    south: float
    east: float
    west: float

    @property
    def lat_span(self) -> float:
        return self.north - self.south

    @property
    def lon_span(self) -> float:
        return self.east - self.west

    def to_dict(self) -> Dict[str, float]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "north": self.north,
            "south": self.south,
            "east": self.east,
            "west": self.west,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BoundingBox":
        """Validate a mapping and build a BoundingBox from it."""
        return validate_bounds(data)


def _read_field(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


def _is_valid_number(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(float(value))


def validate_bounds(value: Any) -> BoundingBox:
    """Validate a bounding box and return it as a :class:`BoundingBox`.

    Checks run in a fixed order and stop at the first violation, so the
    error message always names the specific failing rule.

    Args:
        value: A mapping with ``north``, ``south``, ``east`` and ``west``
            keys, a BoundingBox, or any object exposing those attributes.

    Returns:
        The validated, immutable BoundingBox.

    Raises:
        InvalidBounds: If the shape, a field, or a range check fails.
    """
    if value is None or isinstance(
        value, (str, bytes, numbers.Number, list, tuple, set)
    ):
        raise InvalidBounds("Bounds must be an object")

    fields: Dict[str, float] = {}
    for name in BOUND_FIELDS:
        field_value = _read_field(value, name)
        if not _is_valid_number(field_value):
            raise InvalidBounds(f"{name} must be a valid number")
        fields[name] = float(field_value)

    north, south = fields["north"], fields["south"]
    east, west = fields["east"], fields["west"]

    if north <= south:
        raise InvalidBounds("North must be greater than south")
    if not (-90.0 <= north <= 90.0 and -90.0 <= south <= 90.0):
        raise InvalidBounds("Latitude must be between -90 and 90")
    if not (-180.0 <= east <= 180.0 and -180.0 <= west <= 180.0):
        raise InvalidBounds("Longitude must be between -180 and 180")
    if east <= west:
        raise InvalidBounds("East must be greater than west")

    if isinstance(value, BoundingBox):
        return value
    return BoundingBox(**fields)


def needs_tiling(bounds: BoundingBox, threshold_deg: float = TILE_THRESHOLD_DEG) -> bool:
    """Whether a box is large enough to be fetched in tiles.

    Args:
        bounds: A validated bounding box.
        threshold_deg: Maximum span (degrees) served by a single query.

    Returns:
        True if the latitude or longitude span exceeds the threshold.
    """
    return bounds.lat_span > threshold_deg or bounds.lon_span > threshold_deg


def split_bounds(
    bounds: Any,
    max_tile_deg: float = DEFAULT_MAX_TILE_DEG,
    overlap_fraction: float = DEFAULT_OVERLAP_FRACTION,
) -> List[BoundingBox]:
    """Partition a bounding box into an overlapping grid of tiles.

    The grid has ``ceil(span / max_tile_deg)`` cells per axis. Each cell is
    grown by ``overlap_fraction * max_tile_deg`` on every side so that
    ways crossing a cell border are fully returned by at least one tile,
    then clamped to the legal coordinate range.

    Args:
        bounds: Bounding box to split (validated first).
        max_tile_deg: Maximum tile edge length in degrees (~5 km at 0.05).
        overlap_fraction: Fraction of ``max_tile_deg`` added on each side.

    Returns:
        Tiles in row-major order starting at the south-west corner. A box
        that already fits in one tile yields a single expanded tile.

    Raises:
        InvalidBounds: If ``bounds`` is invalid.
        ValueError: If ``max_tile_deg`` is not positive.
    """
    bbox = validate_bounds(bounds)
    if max_tile_deg <= 0:
        raise ValueError(f"max_tile_deg must be positive, got {max_tile_deg}")

    rows = max(1, math.ceil(bbox.lat_span / max_tile_deg))
    cols = max(1, math.ceil(bbox.lon_span / max_tile_deg))
    lat_edges = np.linspace(bbox.south, bbox.north, rows + 1)
    lon_edges = np.linspace(bbox.west, bbox.east, cols + 1)
    overlap = overlap_fraction * max_tile_deg

    tiles: List[BoundingBox] = []
    for i in range(rows):
        south = max(-90.0, float(lat_edges[i]) - overlap)
        north = min(90.0, float(lat_edges[i + 1]) + overlap)
        for j in range(cols):
            west = max(-180.0, float(lon_edges[j]) - overlap)
            east = min(180.0, float(lon_edges[j + 1]) + overlap)
            tiles.append(BoundingBox(north=north, south=south, east=east, west=west))

    return tiles
