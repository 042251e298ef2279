"""
Raw OSM Elements
==================

Typed views of the records returned by the Overpass API. Each record
decodes to either an :class:`OSMNode` or an :class:`OSMWay`; anything
else (relations, areas, garbage) decodes to ``None`` and is ignored by
the graph builder.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class OSMNode:
    """A map node with coordinates.

    Attributes:
        id: OSM node ID.
        lat: Latitude (WGS84), copied verbatim.
        lon: Longitude (WGS84), copied verbatim.
    """

    type = "node"

    id: int
    lat: float
    lon: float

    @property
    def key(self) -> Tuple[str, int]:
        return (self.type, self.id)


@dataclass(frozen=True)
class OSMWay:
    """An ordered sequence of node references with descriptive tags.

    Attributes:
        id: OSM way ID.
        nodes: Referenced node IDs in traversal order.
        tags: OSM tags (``highway``, ``name``, ``oneway``, ...).
    """

    type = "way"

    id: int
    nodes: Tuple[int, ...] = ()
    tags: Dict[str, str] = field(default_factory=dict)

    @property
    def key(self) -> Tuple[str, int]:
        return (self.type, self.id)

    def tag(self, name: str, default: str = "") -> str:
        value = self.tags.get(name)
        return default if value is None else str(value)


RawElement = Union[OSMNode, OSMWay]


def element_key(record: Mapping[str, Any]) -> Tuple[Any, Any]:
    """Identity of a raw Overpass record: the ``(type, id)`` pair."""
    return (record.get("type"), record.get("id"))


def parse_element(record: Any) -> Optional[RawElement]:
    """Decode one raw Overpass record.

    Args:
        record: A JSON object from the ``elements`` list.

    Returns:
        An OSMNode or OSMWay, or None for unsupported element types and
        records that are not mappings.
    """
    if not isinstance(record, Mapping):
        return None

    kind = record.get("type")
    if kind == "node":
        return OSMNode(
            id=record.get("id"),
            lat=record.get("lat"),
            lon=record.get("lon"),
        )
    if kind == "way":
        refs = record.get("nodes")
        tags = record.get("tags")
        return OSMWay(
            id=record.get("id"),
            nodes=tuple(refs) if isinstance(refs, (list, tuple)) else (),
            tags=dict(tags) if isinstance(tags, Mapping) else {},
        )
    return None


def iter_elements(osm_data: Any) -> Iterator[RawElement]:
    """Yield the decoded elements of an Overpass result.

    Null input or a result without an ``elements`` list yields nothing.
    """
    if not isinstance(osm_data, Mapping):
        return
    records = osm_data.get("elements")
    if not isinstance(records, list):
        return
    for record in records:
        element = parse_element(record)
        if element is not None:
            yield element
