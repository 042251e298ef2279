"""
Overpass QL Query Construction
================================

Builds the query that returns every drivable ``highway`` way inside a
bounding box together with all of the nodes those ways reference.
"""

from typing import Any, Sequence

from osmgraph.config import DEFAULT_TIMEOUT, EXCLUDED_HIGHWAY_TYPES
from osmgraph.core.bounds import validate_bounds
from osmgraph.utils.geometry import format_number


def build_overpass_query(
    bounds: Any,
    timeout: int = DEFAULT_TIMEOUT,
    excluded_highways: Sequence[str] = EXCLUDED_HIGHWAY_TYPES,
) -> str:
    """Build an Overpass QL query for the road network inside a box.

    ``out body`` returns full way records (tags and node references);
    the ``>`` recursion followed by ``out skel qt`` adds every referenced
    node so each way can be resolved to coordinates.

    Args:
        bounds: Bounding box (mapping or BoundingBox); validated first.
        timeout: Server-side timeout in seconds.
        excluded_highways: ``highway`` values to filter out.

    Returns:
        Overpass QL query text.

    Raises:
        InvalidBounds: If ``bounds`` is invalid.
    """
    bbox = validate_bounds(bounds)
    box = ",".join(
        format_number(v) for v in (bbox.south, bbox.west, bbox.north, bbox.east)
    )
    exclusion = "|".join(excluded_highways)
    return (
        f"[out:json][timeout:{int(timeout)}];\n"
        "(\n"
        f'    way["highway"][highway!~"{exclusion}"]({box});\n'
        ");\n"
        "out body;\n"
        ">;\n"
        "out skel qt;\n"
    )
