"""
Geometric Utility Functions
=============================

Angle conversion and great-circle distance used when weighting road
segments, plus the number formatting shared by the text exporters.
"""

import math
import numbers
from typing import Any

import numpy as np

EARTH_RADIUS_KM = 6371.0


def to_radians(degrees: float) -> float:
    """Convert an angle from degrees to radians.

    Args:
        degrees: Angle in degrees.

    Returns:
        Angle in radians.
    """
    return degrees * (math.pi / 180.0)


def haversine_distance_km(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """Great-circle distance between two WGS84 points.

    Uses the ``atan2`` form of the Haversine formula, which stays well
    conditioned both for antipodal points and for segments a few meters
    long.

    Args:
        lat1: Latitude of the first point (degrees).
        lon1: Longitude of the first point (degrees).
        lat2: Latitude of the second point (degrees).
        lon2: Longitude of the second point (degrees).

    Returns:
        Distance in kilometers. Exactly 0.0 for identical points.
    """
    d_lat = to_radians(lat2 - lat1)
    d_lon = to_radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(to_radians(lat1))
        * math.cos(to_radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def haversine_distance_km_array(
    lat1: np.ndarray,
    lon1: np.ndarray,
    lat2: np.ndarray,
    lon2: np.ndarray,
) -> np.ndarray:
    """Vectorized :func:`haversine_distance_km` over coordinate arrays.

    Args:
        lat1: (N,) latitudes of the start points.
        lon1: (N,) longitudes of the start points.
        lat2: (N,) latitudes of the end points.
        lon2: (N,) longitudes of the end points.

    Returns:
        (N,) array of distances in kilometers.
    """
    lat1 = np.asarray(lat1, dtype=np.float64)
    lon1 = np.asarray(lon1, dtype=np.float64)
    lat2 = np.asarray(lat2, dtype=np.float64)
    lon2 = np.asarray(lon2, dtype=np.float64)

    d_lat = np.radians(lat2 - lat1)
    d_lon = np.radians(lon2 - lon1)
    a = (
        np.sin(d_lat / 2) ** 2
        + np.cos(np.radians(lat1)) * np.cos(np.radians(lat2)) * np.sin(d_lon / 2) ** 2
    )
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def format_number(value: Any) -> str:
    """Render a number in its shortest decimal string form.

    Integral floats drop the trailing ``.0`` so that ``52.0`` and ``52``
    produce the same text.

    Args:
        value: An int or float (numpy scalars are accepted). Anything
            else is returned as ``str(value)``.

    Returns:
        Decimal string, e.g. ``"0.5"``, ``"100"``, ``"52.52"``.
    """
    if isinstance(value, (bool, np.bool_)):
        return str(value).lower()
    if not isinstance(value, numbers.Real):
        return str(value)
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)
