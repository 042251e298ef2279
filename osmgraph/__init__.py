"""
osmgraph: OpenStreetMap Road Graphs
=====================================

osmgraph turns OpenStreetMap road data for a bounding box into a directed,
distance-weighted graph and exports it for use in other tools.

Key capabilities:
    - Bounding box validation and tiling of large areas
    - Overpass API queries with tiled, deduplicated fetching
    - One-way aware graph construction with Haversine edge weights
    - Export to JSON node-link, GraphML, CSV edge lists and TikZ

Quick start::

    from osmgraph import OverpassClient, convert_to_graph, export_graph

    data = OverpassClient().fetch(
        {"north": 52.52, "south": 52.50, "east": 13.41, "west": 13.39}
    )
    graph = convert_to_graph(data)
    print(export_graph(graph, "csv"))
"""

__version__ = "0.1.0"

from osmgraph.config import Config
from osmgraph.core.bounds import BoundingBox, InvalidBounds, split_bounds, validate_bounds
from osmgraph.core.builder import convert_to_graph
from osmgraph.core.graph import Graph, GraphEdge, GraphNode
from osmgraph.osm.overpass import OverpassClient, TransportFailure, merge_osm_data
from osmgraph.osm.query import build_overpass_query
from osmgraph.export.formats import UnsupportedFormat, export_graph
from osmgraph.session import GraphSession, Response

__all__ = [
    "Config",
    "BoundingBox",
    "InvalidBounds",
    "split_bounds",
    "validate_bounds",
    "convert_to_graph",
    "Graph",
    "GraphEdge",
    "GraphNode",
    "OverpassClient",
    "TransportFailure",
    "merge_osm_data",
    "build_overpass_query",
    "UnsupportedFormat",
    "export_graph",
    "GraphSession",
    "Response",
]
