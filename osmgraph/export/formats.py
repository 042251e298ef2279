"""
Export Format Registry
========================

Maps format selectors to serializers, MIME types and file extensions.

Example::

    from osmgraph.export import export_graph, get_export_format

    text = export_graph(graph, "graphml")
    fmt = get_export_format("graphml")
    print(fmt.mime_type, fmt.extension)   # application/xml graphml
"""

from dataclasses import dataclass
from typing import Callable, Dict

from osmgraph.core.graph import Graph
from osmgraph.export.edge_list import convert_to_csv
from osmgraph.export.graphml import convert_to_graphml
from osmgraph.export.node_link import convert_to_json
from osmgraph.export.tikz import convert_to_tikz


class UnsupportedFormat(ValueError):
    """Raised for an unknown export format selector."""


@dataclass(frozen=True)
class ExportFormat:
    """An export target.

    Attributes:
        name: Format selector (``json``, ``graphml``, ``csv``, ``tikz``).
        serializer: Function rendering a Graph to text.
        mime_type: MIME type of the rendered text.
        extension: Suggested file extension, without the dot.
    """

    name: str
    serializer: Callable[[Graph], str]
    mime_type: str
    extension: str


EXPORT_FORMATS: Dict[str, ExportFormat] = {
    "json": ExportFormat("json", convert_to_json, "application/json", "json"),
    "graphml": ExportFormat("graphml", convert_to_graphml, "application/xml", "graphml"),
    "csv": ExportFormat("csv", convert_to_csv, "text/csv", "csv"),
    "tikz": ExportFormat("tikz", convert_to_tikz, "application/x-tex", "tex"),
}


def get_export_format(name: str) -> ExportFormat:
    """Look up an export format by selector.

    Raises:
        UnsupportedFormat: If ``name`` is not a known format.
    """
    try:
        return EXPORT_FORMATS[name]
    except (KeyError, TypeError):
        raise UnsupportedFormat(f"Unsupported format: {name}") from None


def export_graph(graph: Graph, fmt: str) -> str:
    """Serialize a graph in the given format."""
    return get_export_format(fmt).serializer(graph)


def suggested_filename(fmt: str, stem: str = "osm-graph") -> str:
    """Download file name for a format, e.g. ``osm-graph.tex`` for tikz."""
    return f"{stem}.{get_export_format(fmt).extension}"
