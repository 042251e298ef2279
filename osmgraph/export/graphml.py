"""
GraphML Export
================

Writes a directed GraphML document with coordinates on nodes and
length, way ID, road class and name on edges. Node IDs are the bare OSM
IDs, edges are numbered ``e0, e1, ...`` in graph order.
"""

from typing import Any, List
from xml.sax.saxutils import escape

from osmgraph.core.graph import Graph
from osmgraph.utils.geometry import format_number

_XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}

# (id, for, attr.name, attr.type)
GRAPHML_KEYS = [
    ("lat", "node", "lat", "double"),
    ("lon", "node", "lon", "double"),
    ("weight", "edge", "weight", "double"),
    ("wayId", "edge", "wayId", "long"),
    ("highway", "edge", "highway", "string"),
    ("name", "edge", "name", "string"),
]


def escape_xml(value: Any) -> str:
    """Escape a value for use in XML text or attribute content.

    Numbers are rendered in decimal form first; ``& < > " '`` become
    entity references.
    """
    return escape(format_number(value), _XML_ENTITIES)


def convert_to_graphml(graph: Graph) -> str:
    """Serialize a graph as GraphML.

    Args:
        graph: Graph to serialize.

    Returns:
        GraphML XML text.
    """
    lines: List[str] = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<graphml xmlns="http://graphml.graphdrawing.org/xmlns">',
    ]
    for key_id, domain, attr_name, attr_type in GRAPHML_KEYS:
        lines.append(
            f'    <key id="{key_id}" for="{domain}" '
            f'attr.name="{attr_name}" attr.type="{attr_type}"/>'
        )
    lines.append('    <graph id="G" edgedefault="directed">')

    for node in graph.nodes:
        lines.append(f'        <node id="{escape_xml(node.id)}">')
        lines.append(f'            <data key="lat">{escape_xml(node.lat)}</data>')
        lines.append(f'            <data key="lon">{escape_xml(node.lon)}</data>')
        lines.append("        </node>")

    for index, edge in enumerate(graph.edges):
        lines.append(
            f'        <edge id="e{index}" source="{escape_xml(edge.source)}" '
            f'target="{escape_xml(edge.target)}">'
        )
        lines.append(f'            <data key="weight">{escape_xml(edge.weight)}</data>')
        lines.append(f'            <data key="wayId">{escape_xml(edge.way_id)}</data>')
        lines.append(f'            <data key="highway">{escape_xml(edge.highway)}</data>')
        lines.append(f'            <data key="name">{escape_xml(edge.name)}</data>')
        lines.append("        </edge>")

    lines.append("    </graph>")
    lines.append("</graphml>")
    return "\n".join(lines)
