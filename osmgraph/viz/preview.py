"""
Road Graph Preview
====================

Quick-look rendering of a road graph: edges as line segments coloured by
``highway`` class, nodes as small dots, in plain lon/lat axes.

Example::

    from osmgraph.viz import GraphPreview

    preview = GraphPreview(output_dir="figures/")
    path = preview.plot_graph(graph, save_name="berlin_mitte")
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np

try:
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    from matplotlib.collections import LineCollection

    HAS_MPL = True
except ImportError:
    HAS_MPL = False

from osmgraph.core.graph import Graph

HIGHWAY_COLORS: Dict[str, str] = {
    "motorway": "#E74C3C",
    "trunk": "#E67E22",
    "primary": "#F39C12",
    "secondary": "#F1C40F",
    "tertiary": "#2ECC71",
    "residential": "#3498DB",
    "unclassified": "#9B59B6",
}
DEFAULT_EDGE_COLOR = "#7F8C8D"
NODE_COLOR = "#2C3E50"


def highway_color(highway: str) -> str:
    """Colour for a ``highway`` tag; ``*_link`` roads share their parent's."""
    base = highway[:-5] if highway.endswith("_link") else highway
    return HIGHWAY_COLORS.get(base, DEFAULT_EDGE_COLOR)


class GraphPreview:
    """Render road graphs to PNG files.

    Args:
        output_dir: Directory to save figures.
        dpi: Resolution for saved figures.

    Raises:
        ImportError: If matplotlib is not installed.
    """

    def __init__(self, output_dir: str = "./figures", dpi: int = 150):
        if not HAS_MPL:
            raise ImportError(
                "matplotlib is required for visualization. "
                "Install with: pip install osmgraph[viz]"
            )
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.dpi = dpi

    def plot_graph(
        self,
        graph: Graph,
        save_name: str = "graph",
        show_nodes: bool = True,
        title: Optional[str] = None,
        figsize: Tuple[float, float] = (10, 10),
    ) -> str:
        """Plot a road graph.

        Args:
            graph: Graph to draw.
            save_name: Output filename (without extension).
            show_nodes: Whether to draw node markers.
            title: Custom plot title.
            figsize: Figure size in inches.

        Returns:
            Path to the saved figure.
        """
        fig, ax = plt.subplots(1, 1, figsize=figsize)

        index = graph.node_index()
        segments: List[List[Tuple[float, float]]] = []
        colors: List[str] = []
        for edge in graph.edges:
            a = index.get(edge.source)
            b = index.get(edge.target)
            if a is None or b is None:
                continue
            segments.append([(a.lon, a.lat), (b.lon, b.lat)])
            colors.append(highway_color(edge.highway))

        if segments:
            ax.add_collection(
                LineCollection(segments, colors=colors, linewidths=1.0, alpha=0.8)
            )

        if graph.nodes:
            coords = np.array([(n.lon, n.lat) for n in graph.nodes], dtype=np.float64)
            if show_nodes:
                ax.scatter(coords[:, 0], coords[:, 1], s=2, color=NODE_COLOR, zorder=3)
            ax.update_datalim(coords)
            ax.autoscale_view()

        if title is None:
            title = f"Nodes: {graph.num_nodes} | Edges: {graph.num_edges}"
        ax.set_title(title, fontsize=10)
        ax.set_xlabel("Longitude")
        ax.set_ylabel("Latitude")
        ax.set_aspect("equal")
        ax.grid(True, alpha=0.3)

        plt.tight_layout()
        save_path = str(self.output_dir / f"{save_name}.png")
        plt.savefig(save_path, dpi=self.dpi, bbox_inches="tight")
        plt.close(fig)
        return save_path
