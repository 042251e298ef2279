"""
Graph Construction from OSM Elements
======================================

Converts an Overpass result into a directed :class:`Graph`:

    1. every ``node`` element becomes a vertex (first-seen order);
    2. every consecutive node pair of every ``way`` becomes one or two
       directed edges, depending on the way's ``oneway`` tag, weighted
       by great-circle length in kilometers.

Segments with an endpoint missing from the result, or an endpoint
without finite numeric coordinates, are dropped silently. Such nodes are
still kept as vertices with their coordinates as given.

Example::

    from osmgraph.core.builder import convert_to_graph

    graph = convert_to_graph(overpass_json)
    print(f"{graph.num_nodes} nodes, {graph.num_edges} edges")
"""

import math
import numbers
from typing import Any, Dict, List, Mapping, Tuple

import numpy as np

from osmgraph.core.elements import OSMNode, OSMWay, iter_elements
from osmgraph.core.graph import Graph, GraphEdge, GraphNode
from osmgraph.utils.geometry import haversine_distance_km_array

FORWARD_ONEWAY_VALUES = frozenset({"yes", "true", "1"})
REVERSE_ONEWAY_VALUE = "-1"


def oneway_directions(tags: Mapping[str, str]) -> Tuple[bool, bool]:
    """Decide which travel directions a way allows.

    ``oneway=-1`` allows only travel against the node order;
    ``yes``/``true``/``1`` only along it. Any other value, including
    ``no``, ``reversible`` or a missing tag, allows both.

    Args:
        tags: OSM tags of the way.

    Returns:
        (forward, reverse) flags.
    """
    oneway = tags.get("oneway")
    if oneway == REVERSE_ONEWAY_VALUE:
        return False, True
    if oneway in FORWARD_ONEWAY_VALUES:
        return True, False
    return True, True


def _is_locatable(node: GraphNode) -> bool:
    for value in (node.lat, node.lon):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            return False
        if not math.isfinite(value):
            return False
    return True


def _way_edges(way: OSMWay, nodes: Dict[int, GraphNode]) -> List[GraphEdge]:
    pairs = [
        (nodes[u], nodes[v])
        for u, v in zip(way.nodes[:-1], way.nodes[1:])
        if u in nodes and v in nodes
    ]
    pairs = [(a, b) for a, b in pairs if _is_locatable(a) and _is_locatable(b)]
    if not pairs:
        return []

    coords = np.array(
        [(a.lat, a.lon, b.lat, b.lon) for a, b in pairs], dtype=np.float64
    )
    weights = haversine_distance_km_array(
        coords[:, 0], coords[:, 1], coords[:, 2], coords[:, 3]
    )

    forward, reverse = oneway_directions(way.tags)
    highway = way.tag("highway")
    name = way.tag("name")

    edges: List[GraphEdge] = []
    for (a, b), weight in zip(pairs, weights):
        weight = float(weight)
        if forward:
            edges.append(GraphEdge(a.id, b.id, way.id, weight, highway, name))
        if reverse:
            edges.append(GraphEdge(b.id, a.id, way.id, weight, highway, name))
    return edges


def convert_to_graph(osm_data: Any) -> Graph:
    """Build a directed road graph from a raw Overpass result.

    Args:
        osm_data: Parsed Overpass JSON (``{"elements": [...]}``). None or
            a malformed result produces an empty graph.

    Returns:
        Graph with ``directed=True`` and ``multigraph=False``.
    """
    elements = list(iter_elements(osm_data))

    nodes: Dict[int, GraphNode] = {}
    for element in elements:
        if isinstance(element, OSMNode):
            nodes[element.id] = GraphNode(element.id, element.lat, element.lon)

    edges: List[GraphEdge] = []
    for element in elements:
        if isinstance(element, OSMWay):
            edges.extend(_way_edges(element, nodes))

    return Graph(nodes=list(nodes.values()), edges=edges)
