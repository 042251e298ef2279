"""
TikZ Export
=============

Renders the road graph as a standalone LaTeX/TikZ picture. Coordinates
are a linear fit of (lon, lat) into a square of ``scale_cm`` centimeters
with the origin at the south-west corner of the node extent; no map
projection is applied.

Each road is drawn once: an edge and its reverse share one ``\\draw``.
"""

from typing import List, Set

import numpy as np

from osmgraph.core.graph import Graph
from osmgraph.utils.geometry import format_number

DEFAULT_SCALE_CM = 10.0

TIKZ_PREAMBLE = [
    r"\documentclass[tikz]{standalone}",
    r"\begin{document}",
    r"\begin{tikzpicture}[",
    r"    vertex/.style={circle, fill=black, inner sep=0pt, minimum size=2pt},",
    r"    edge/.style={draw=gray!70, line width=0.4pt}",
    r"]",
]

TIKZ_CLOSING = [
    r"\end{tikzpicture}",
    r"\end{document}",
]


def _node_name(node_id) -> str:
    return f"n{format_number(node_id)}"


def convert_to_tikz(graph: Graph, scale_cm: float = DEFAULT_SCALE_CM) -> str:
    """Serialize a graph as a standalone TikZ document.

    Args:
        graph: Graph to serialize.
        scale_cm: Length the larger of the lat/lon spans is mapped to.

    Returns:
        LaTeX source text.
    """
    lines: List[str] = list(TIKZ_PREAMBLE)

    if not graph.nodes:
        lines.append("    % empty graph")
        lines.extend(TIKZ_CLOSING)
        return "\n".join(lines)

    lats = np.array([n.lat for n in graph.nodes], dtype=np.float64)
    lons = np.array([n.lon for n in graph.nodes], dtype=np.float64)
    min_lat, min_lon = lats.min(), lons.min()
    span = max(lats.max() - min_lat, lons.max() - min_lon)
    scale = scale_cm / span if span > 0 else 1.0

    xs = (lons - min_lon) * scale
    ys = (lats - min_lat) * scale

    node_ids: Set = set()
    for node, x, y in zip(graph.nodes, xs, ys):
        node_ids.add(node.id)
        lines.append(
            f"    \\node[vertex] ({_node_name(node.id)}) at ({x:.4f},{y:.4f}) {{}};"
        )

    drawn: Set[frozenset] = set()
    for edge in graph.edges:
        if edge.source not in node_ids or edge.target not in node_ids:
            continue
        pair = frozenset((edge.source, edge.target))
        if pair in drawn:
            continue
        drawn.add(pair)
        lines.append(
            f"    \\draw[edge] ({_node_name(edge.source)}) -- ({_node_name(edge.target)});"
        )

    lines.extend(TIKZ_CLOSING)
    return "\n".join(lines)
