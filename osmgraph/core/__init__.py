"""
Core modules: bounding boxes, raw OSM elements, and the road graph model
and builder.
"""

from osmgraph.core.bounds import (
    BoundingBox,
    InvalidBounds,
    needs_tiling,
    split_bounds,
    validate_bounds,
)
from osmgraph.core.elements import OSMNode, OSMWay, iter_elements, parse_element
from osmgraph.core.graph import Graph, GraphEdge, GraphNode
from osmgraph.core.builder import convert_to_graph, oneway_directions

__all__ = [
    "BoundingBox",
    "InvalidBounds",
    "needs_tiling",
    "split_bounds",
    "validate_bounds",
    "OSMNode",
    "OSMWay",
    "iter_elements",
    "parse_element",
    "Graph",
    "GraphEdge",
    "GraphNode",
    "convert_to_graph",
    "oneway_directions",
]
