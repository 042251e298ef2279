"""
Command line interface: fetch a road graph for a bounding box and export it.

Usage::

    osmgraph --bbox 52.52 52.50 13.41 13.39 --format graphml --out berlin.graphml
    osmgraph --input overpass.json --format tikz > roads.tex
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from osmgraph.config import Config
from osmgraph.core.builder import convert_to_graph
from osmgraph.export.formats import EXPORT_FORMATS
from osmgraph.session import GraphSession

logger = logging.getLogger("osmgraph")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="osmgraph",
        description="Build a directed road graph from OpenStreetMap and export it.",
    )
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--bbox",
        nargs=4,
        type=float,
        metavar=("NORTH", "SOUTH", "EAST", "WEST"),
        help="Bounding box in decimal degrees: N S E W",
    )
    source.add_argument(
        "--input",
        help="Saved Overpass JSON result to convert instead of fetching",
    )
    ap.add_argument(
        "--format",
        default="json",
        choices=sorted(EXPORT_FORMATS),
        help="Export format (default: json)",
    )
    ap.add_argument("--out", help="Output path (default: stdout)")
    ap.add_argument("--config", help="YAML configuration file")
    ap.add_argument("--preview", help="Also render a PNG preview to this path")
    ap.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = Config.from_yaml(args.config) if args.config else Config()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    session = GraphSession(config=config)
    if args.input:
        with open(args.input, "r") as f:
            session.graph = convert_to_graph(json.load(f))
    else:
        north, south, east, west = args.bbox
        resp = session.build(
            {"north": north, "south": south, "east": east, "west": west}
        )
        if not resp.success:
            print(f"Error: {resp.error}", file=sys.stderr)
            return 1

    exported = session.export(args.format)
    if not exported.success:
        print(f"Error: {exported.error}", file=sys.stderr)
        return 1

    if args.out:
        with open(args.out, "w") as f:
            f.write(exported.data)
        logger.info(
            "Wrote %d nodes, %d edges to %s",
            session.graph.num_nodes,
            session.graph.num_edges,
            args.out,
        )
    else:
        sys.stdout.write(exported.data + "\n")

    if args.preview:
        from osmgraph.viz import GraphPreview

        preview_path = Path(args.preview)
        GraphPreview(output_dir=str(preview_path.parent)).plot_graph(
            session.graph, save_name=preview_path.stem
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
