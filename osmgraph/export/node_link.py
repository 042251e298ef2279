"""
JSON node-link export, the native representation of a :class:`Graph`.
"""

import json
from typing import Optional

from osmgraph.core.graph import Graph


def convert_to_json(graph: Graph, indent: Optional[int] = 2) -> str:
    """Serialize a graph as node-link JSON.

    Keys appear in the order ``directed, multigraph, graph, nodes, edges``.

    Args:
        graph: Graph to serialize.
        indent: JSON indentation; None for compact output.

    Returns:
        JSON text.
    """
    return json.dumps(graph.to_dict(), indent=indent)
