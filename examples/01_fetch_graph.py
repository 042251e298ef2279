#!/usr/bin/env python3
"""
Example 1: Fetch a Road Graph
===============================

This example fetches the drivable road network around Berlin Mitte from
the Overpass API, builds the directed graph, and prints a summary.

Usage:
    python 01_fetch_graph.py [north south east west]
"""

import sys

from osmgraph import OverpassClient, convert_to_graph, validate_bounds


def main():
    if len(sys.argv) == 5:
        north, south, east, west = (float(v) for v in sys.argv[1:])
    else:
        north, south, east, west = 52.52, 52.50, 13.41, 13.39

    bbox = validate_bounds({"north": north, "south": south, "east": east, "west": west})
    print(f"Fetching roads for {bbox}")

    client = OverpassClient()
    data = client.fetch(bbox)
    print(f"  Received {len(data.get('elements', []))} OSM elements")

    graph = convert_to_graph(data)

    # Print summary
    print("\n--- Graph Summary ---")
    print(f"  Nodes:        {graph.num_nodes}")
    print(f"  Edges:        {graph.num_edges}")
    total_km = sum(e.weight for e in graph.edges)
    print(f"  Total length: {total_km:.2f} km (directed)")

    road_types = {}
    for edge in graph.edges:
        road_types[edge.highway] = road_types.get(edge.highway, 0) + 1
    print("\n--- Edges by highway type ---")
    for highway, count in sorted(road_types.items(), key=lambda x: -x[1]):
        print(f"  {highway or '(none)':<16} {count}")

    # NetworkX view for further analysis
    G = graph.to_networkx()
    print(f"\nNetworkX: {G}")


if __name__ == "__main__":
    main()
