"""
Utility functions for osmgraph.
"""

from osmgraph.utils.geometry import (
    EARTH_RADIUS_KM,
    format_number,
    haversine_distance_km,
    haversine_distance_km_array,
    to_radians,
)

__all__ = [
    "EARTH_RADIUS_KM",
    "format_number",
    "haversine_distance_km",
    "haversine_distance_km_array",
    "to_radians",
]
