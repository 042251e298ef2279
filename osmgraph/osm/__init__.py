"""
OpenStreetMap data access for osmgraph.

Builds Overpass QL queries for a bounding box and fetches the results,
tiling and merging large areas.
"""

from osmgraph.osm.query import (
    DEFAULT_TIMEOUT,
    EXCLUDED_HIGHWAY_TYPES,
    build_overpass_query,
)
from osmgraph.osm.overpass import OverpassClient, TransportFailure, merge_osm_data

__all__ = [
    "DEFAULT_TIMEOUT",
    "EXCLUDED_HIGHWAY_TYPES",
    "build_overpass_query",
    "OverpassClient",
    "TransportFailure",
    "merge_osm_data",
]
