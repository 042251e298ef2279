"""
Configuration
===============

Runtime settings for the Overpass client and tiling, loadable from YAML::

    overpass_url: https://overpass-api.de/api/interpreter
    request_timeout_s: 90
    tiling:
      threshold_deg: 0.1
      max_tile_deg: 0.05
      overlap_fraction: 0.1
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple, Union

import yaml

from osmgraph.core.bounds import (
    DEFAULT_MAX_TILE_DEG,
    DEFAULT_OVERLAP_FRACTION,
    TILE_THRESHOLD_DEG,
)

OVERPASS_API = "https://overpass-api.de/api/interpreter"
DEFAULT_TIMEOUT = 25

# Minor road types that are not part of the drivable network.
EXCLUDED_HIGHWAY_TYPES = ("footway", "cycleway", "path", "service", "track")


@dataclass
class Config:
    """Settings for fetching and tiling OSM road data.

    Attributes:
        overpass_url: Overpass interpreter endpoint.
        query_timeout: ``[timeout:N]`` value embedded in each query.
        request_timeout_s: HTTP transport timeout per request.
        tile_threshold_deg: Spans above this are fetched in tiles.
        max_tile_deg: Maximum tile edge length in degrees.
        tile_overlap_fraction: Tile overlap as a fraction of max_tile_deg.
        excluded_highway_types: ``highway`` values filtered out of queries.
        user_agent: User-Agent header sent to the Overpass server.
        log_level: Logging level used by the command line tool.
    """

    overpass_url: str = OVERPASS_API
    query_timeout: int = DEFAULT_TIMEOUT
    request_timeout_s: float = 60.0
    tile_threshold_deg: float = TILE_THRESHOLD_DEG
    max_tile_deg: float = DEFAULT_MAX_TILE_DEG
    tile_overlap_fraction: float = DEFAULT_OVERLAP_FRACTION
    excluded_highway_types: Tuple[str, ...] = field(
        default_factory=lambda: tuple(EXCLUDED_HIGHWAY_TYPES)
    )
    user_agent: str = "osmgraph/0.1.0"
    log_level: str = "INFO"

    def __post_init__(self):
        self.excluded_highway_types = tuple(self.excluded_highway_types)
        for name in (
            "query_timeout",
            "request_timeout_s",
            "tile_threshold_deg",
            "max_tile_deg",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.tile_overlap_fraction < 0:
            raise ValueError(
                f"tile_overlap_fraction must be >= 0, got {self.tile_overlap_fraction}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """Build a Config from a mapping, ignoring unknown keys.

        A nested ``tiling`` section maps ``threshold_deg``,
        ``max_tile_deg`` and ``overlap_fraction`` onto the flat fields.
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {k: v for k, v in data.items() if k in known}

        tiling = data.get("tiling") or {}
        for key, attr in (
            ("threshold_deg", "tile_threshold_deg"),
            ("max_tile_deg", "max_tile_deg"),
            ("overlap_fraction", "tile_overlap_fraction"),
        ):
            if key in tiling:
                values[attr] = tiling[key]

        return cls(**values)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "Config":
        """Load configuration from a YAML file."""
        with open(yaml_path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})
