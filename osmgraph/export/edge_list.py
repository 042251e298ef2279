"""
CSV edge-list export (RFC 4180 quoting).
"""

import csv
import io

from osmgraph.core.graph import Graph
from osmgraph.utils.geometry import format_number

CSV_HEADER = ("source", "target", "weight", "highway", "name", "wayId")


def convert_to_csv(graph: Graph) -> str:
    """Serialize the edges of a graph as CSV.

    Fields containing a comma, double quote or line break are quoted,
    with embedded quotes doubled. Rows are separated by ``\\n`` and the
    text has no trailing newline, so an empty graph yields the header
    alone.

    Args:
        graph: Graph to serialize.

    Returns:
        CSV text.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(CSV_HEADER)
    for edge in graph.edges:
        writer.writerow(
            [
                format_number(edge.source),
                format_number(edge.target),
                format_number(edge.weight),
                edge.highway,
                edge.name,
                format_number(edge.way_id),
            ]
        )

    text = buffer.getvalue()
    return text[:-1] if text.endswith("\n") else text
