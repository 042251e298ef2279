"""
Road Graph Data Model
=======================

The directed road graph produced by the builder and consumed by every
exporter. Its dictionary form is the node-link JSON layout::

    {
        "directed": true,
        "multigraph": false,
        "graph": {},
        "nodes": [{"id": 1, "lat": 52.52, "lon": 13.405}, ...],
        "edges": [{"source": 1, "target": 2, "wayId": 100,
                   "weight": 1.11, "highway": "residential", "name": ""}, ...]
    }

Parallel edges (two ways over the same node pair) are kept as separate
entries in ``edges``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

import networkx as nx


@dataclass(frozen=True)
class GraphNode:
    """A road graph vertex.

    Attributes:
        id: OSM node ID, unique within the graph.
        lat: Latitude (WGS84).
        lon: Longitude (WGS84).
    """

    id: int
    lat: float
    lon: float

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "lat": self.lat, "lon": self.lon}


@dataclass(frozen=True)
class GraphEdge:
    """A directed road segment between two consecutive way nodes.

    Attributes:
        source: Node ID the segment is travelled from.
        target: Node ID the segment is travelled to.
        way_id: OSM way the segment belongs to.
        weight: Great-circle length in kilometers.
        highway: OSM ``highway`` tag of the way ("" if absent).
        name: OSM ``name`` tag of the way ("" if absent).
    """

    source: int
    target: int
    way_id: int
    weight: float
    highway: str = ""
    name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "wayId": self.way_id,
            "weight": self.weight,
            "highway": self.highway,
            "name": self.name,
        }


@dataclass
class Graph:
    """Directed road graph in node-link form.

    Attributes:
        nodes: Vertices in first-seen order.
        edges: Edges in way-traversal order, forward before reverse.
        directed: Always True for graphs built from OSM data.
        multigraph: Always False; parallel edges are still listed
            individually in ``edges``.
        graph: Reserved graph-level metadata.
    """

    nodes: List[GraphNode] = field(default_factory=list)
    edges: List[GraphEdge] = field(default_factory=list)
    directed: bool = True
    multigraph: bool = False
    graph: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "Graph":
        return cls()

    @property
    def num_nodes(self) -> int:
        return len(self.nodes)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    def node_index(self) -> Dict[int, GraphNode]:
        """Map node ID to node."""
        return {node.id: node for node in self.nodes}

    def extent(self) -> Optional[Tuple[float, float, float, float]]:
        """Coordinate extent of all nodes.

        Returns:
            (min_lat, min_lon, max_lat, max_lon), or None for an empty graph.
        """
        if not self.nodes:
            return None
        lats = [n.lat for n in self.nodes]
        lons = [n.lon for n in self.nodes]
        return (min(lats), min(lons), max(lats), max(lons))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the node-link dictionary (stable key order)."""
        return {
            "directed": self.directed,
            "multigraph": self.multigraph,
            "graph": dict(self.graph),
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Graph":
        """Deserialize from a node-link dictionary.

        Missing edge attributes fall back to ``weight=0.0``, ``wayId=0``
        and empty ``highway``/``name`` strings.

        Args:
            data: Dictionary as produced by :meth:`to_dict`.

        Returns:
            Reconstructed Graph.
        """
        nodes = [
            GraphNode(id=n["id"], lat=n.get("lat", 0.0), lon=n.get("lon", 0.0))
            for n in data.get("nodes", [])
        ]
        edges = [
            GraphEdge(
                source=e["source"],
                target=e["target"],
                way_id=e.get("wayId", 0),
                weight=e.get("weight", 0.0),
                highway=e.get("highway") or "",
                name=e.get("name") or "",
            )
            for e in data.get("edges", [])
        ]
        return cls(
            nodes=nodes,
            edges=edges,
            directed=bool(data.get("directed", True)),
            multigraph=bool(data.get("multigraph", False)),
            graph=dict(data.get("graph") or {}),
        )

    def to_networkx(self) -> nx.MultiDiGraph:
        """Convert to a NetworkX MultiDiGraph.

        Node attributes: ``lat``, ``lon``. Edge attributes: ``way_id``,
        ``weight``, ``highway``, ``name``. Parallel edges are preserved.
        """
        G = nx.MultiDiGraph(**self.graph)
        for node in self.nodes:
            G.add_node(node.id, lat=node.lat, lon=node.lon)
        for edge in self.edges:
            G.add_edge(
                edge.source,
                edge.target,
                way_id=edge.way_id,
                weight=edge.weight,
                highway=edge.highway,
                name=edge.name,
            )
        return G
