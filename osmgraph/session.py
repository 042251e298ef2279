"""
Graph Session
===============

Request boundary between a front end (browser panel, CLI, web service)
and the graph pipeline. A :class:`GraphSession` keeps the most recently
built graph and answers build, lookup and export requests with a
:class:`Response` instead of raising.

Example::

    from osmgraph.session import GraphSession

    session = GraphSession()
    resp = session.build({"north": 52.52, "south": 52.50, "east": 13.41, "west": 13.39})
    if resp.success:
        csv_resp = session.export("csv")
        print(csv_resp.mime_type, len(csv_resp.data))
    else:
        print(resp.error)
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from osmgraph.config import Config
from osmgraph.core.bounds import InvalidBounds
from osmgraph.core.builder import convert_to_graph
from osmgraph.core.graph import Graph
from osmgraph.export.formats import UnsupportedFormat, get_export_format
from osmgraph.osm.overpass import OverpassClient, TransportFailure

logger = logging.getLogger(__name__)

NO_GRAPH_ERROR = "No graph data available"

FETCH_OSM_DATA = "FETCH_OSM_DATA"
GET_GRAPH = "GET_GRAPH"
EXPORT_GRAPH = "EXPORT_GRAPH"


@dataclass
class Response:
    """Outcome of a session request.

    Attributes:
        success: Whether the request succeeded.
        data: A Graph (build / lookup) or exported text (export).
        error: Failure message when ``success`` is False.
        mime_type: MIME type of exported text.
        extension: Suggested file extension of exported text.
    """

    success: bool
    data: Any = None
    error: Optional[str] = None
    mime_type: Optional[str] = None
    extension: Optional[str] = None

    @classmethod
    def failure(cls, error: str) -> "Response":
        return cls(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        result: Dict[str, Any] = {"success": self.success}
        if self.success:
            result["data"] = (
                self.data.to_dict() if isinstance(self.data, Graph) else self.data
            )
            if self.mime_type is not None:
                result["mimeType"] = self.mime_type
                result["extension"] = self.extension
        else:
            result["error"] = self.error
        return result


class GraphSession:
    """Build road graphs on request and export them.

    The session holds a single graph slot: each successful build replaces
    it, a failed build leaves it untouched.

    Args:
        client: Overpass client used for fetching. Built from ``config``
            if omitted.
        config: Settings for the default client.
    """

    def __init__(
        self,
        client: Optional[OverpassClient] = None,
        config: Optional[Config] = None,
    ):
        self.client = client or OverpassClient(config=config)
        self.graph: Optional[Graph] = None

    def build(self, bounds: Any) -> Response:
        """Fetch OSM data for a bounding box and build its road graph."""
        try:
            data = self.client.fetch(bounds)
        except (InvalidBounds, TransportFailure) as exc:
            logger.error("Error fetching OSM data: %s", exc)
            return Response.failure(str(exc))

        try:
            graph = convert_to_graph(data)
        except (ValueError, TypeError) as exc:
            logger.error("Error building graph: %s", exc)
            return Response.failure(f"Error building graph: {exc}")

        self.graph = graph
        logger.info(
            "Graph generated: %d nodes, %d edges", graph.num_nodes, graph.num_edges
        )
        return Response(success=True, data=graph)

    def get_graph(self) -> Response:
        """Return the most recently built graph."""
        if self.graph is None:
            return Response.failure(NO_GRAPH_ERROR)
        return Response(success=True, data=self.graph)

    def export(
        self,
        fmt: str,
        graph: Union[Graph, Mapping[str, Any], None] = None,
    ) -> Response:
        """Serialize a graph.

        Args:
            fmt: Format selector (``json``, ``graphml``, ``csv``, ``tikz``).
            graph: Graph or node-link mapping to export. Defaults to the
                session's current graph.

        Returns:
            Response carrying the text, MIME type and extension.
        """
        if graph is None:
            graph = self.graph
        if graph is None:
            return Response.failure(NO_GRAPH_ERROR)
        if not isinstance(graph, Graph):
            try:
                graph = Graph.from_dict(graph)
            except (KeyError, TypeError, AttributeError) as exc:
                logger.error("Malformed graph data: %r", exc)
                return Response.failure(f"Malformed graph data: {exc}")

        try:
            export_format = get_export_format(fmt)
        except UnsupportedFormat as exc:
            return Response.failure(str(exc))

        try:
            text = export_format.serializer(graph)
        except (ValueError, TypeError) as exc:
            logger.error("Error exporting graph as %s: %s", fmt, exc)
            return Response.failure(f"Error exporting graph: {exc}")

        return Response(
            success=True,
            data=text,
            mime_type=export_format.mime_type,
            extension=export_format.extension,
        )

    def handle(self, request: Mapping[str, Any]) -> Response:
        """Dispatch a message-style request.

        Supported ``type`` values: ``FETCH_OSM_DATA`` (with ``bounds``),
        ``GET_GRAPH``, and ``EXPORT_GRAPH`` (with ``format`` and optional
        ``data``).
        """
        kind = request.get("type") if isinstance(request, Mapping) else None
        logger.debug("Received request: %s", kind)

        if kind == FETCH_OSM_DATA:
            return self.build(request.get("bounds"))
        if kind == GET_GRAPH:
            return self.get_graph()
        if kind == EXPORT_GRAPH:
            return self.export(request.get("format"), request.get("data"))
        return Response.failure("Unknown request type")
