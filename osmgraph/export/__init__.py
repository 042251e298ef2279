"""
Text exporters for road graphs: JSON node-link, GraphML, CSV edge list
and TikZ.
"""

from osmgraph.export.node_link import convert_to_json
from osmgraph.export.graphml import convert_to_graphml, escape_xml
from osmgraph.export.edge_list import convert_to_csv
from osmgraph.export.tikz import convert_to_tikz
from osmgraph.export.formats import (
    EXPORT_FORMATS,
    ExportFormat,
    UnsupportedFormat,
    export_graph,
    get_export_format,
    suggested_filename,
)

__all__ = [
    "convert_to_json",
    "convert_to_graphml",
    "escape_xml",
    "convert_to_csv",
    "convert_to_tikz",
    "EXPORT_FORMATS",
    "ExportFormat",
    "UnsupportedFormat",
    "export_graph",
    "get_export_format",
    "suggested_filename",
]
