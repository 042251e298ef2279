#!/usr/bin/env python3
"""
Example 2: Export a Graph in Every Format
===========================================

Converts a saved Overpass JSON result into a road graph and writes it as
JSON, GraphML, CSV and TikZ, plus a PNG preview if matplotlib is
installed.

Usage:
    python 02_export_formats.py overpass.json [output_dir]
"""

import json
import sys
from pathlib import Path

from osmgraph.core import convert_to_graph
from osmgraph.export import EXPORT_FORMATS, export_graph, suggested_filename


def main():
    if len(sys.argv) < 2:
        print("Usage: python 02_export_formats.py <overpass.json> [output_dir]")
        print('\nThe input is a raw Overpass API response: {"elements": [...]}')
        return

    with open(sys.argv[1], "r") as f:
        graph = convert_to_graph(json.load(f))

    output_dir = Path(sys.argv[2] if len(sys.argv) > 2 else "exports")
    output_dir.mkdir(parents=True, exist_ok=True)

    for fmt in EXPORT_FORMATS:
        path = output_dir / suggested_filename(fmt)
        path.write_text(export_graph(graph, fmt))
        print(f"  {fmt:<8} -> {path}")

    from osmgraph.viz import GraphPreview

    try:
        preview = GraphPreview(output_dir=str(output_dir))
    except ImportError:
        print("matplotlib not installed, skipping preview")
        return

    print(f"  preview  -> {preview.plot_graph(graph, save_name='preview')}")


if __name__ == "__main__":
    main()
