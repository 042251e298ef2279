"""
Tests for raw element decoding, the graph model and graph construction.
"""

import networkx as nx
import pytest

from osmgraph.core.builder import convert_to_graph, oneway_directions
from osmgraph.core.elements import (
    OSMNode,
    OSMWay,
    element_key,
    iter_elements,
    parse_element,
)
from osmgraph.core.graph import Graph, GraphEdge, GraphNode
from osmgraph.utils.geometry import haversine_distance_km

EMPTY_GRAPH = {
    "directed": True,
    "multigraph": False,
    "graph": {},
    "nodes": [],
    "edges": [],
}


def _two_node_way(tags=None, **way_fields):
    way = {"type": "way", "id": 100, "nodes": [1, 2]}
    if tags is not None:
        way["tags"] = tags
    way.update(way_fields)
    return {
        "elements": [
            {"type": "node", "id": 1, "lat": 52.52, "lon": 13.405},
            {"type": "node", "id": 2, "lat": 52.53, "lon": 13.406},
            way,
        ]
    }


class TestParseElement:
    """Tests for decoding raw Overpass records."""

    def test_node(self):
        el = parse_element({"type": "node", "id": 5, "lat": 1.5, "lon": 2.5})
        assert el == OSMNode(id=5, lat=1.5, lon=2.5)
        assert el.key == ("node", 5)

    def test_way(self):
        el = parse_element(
            {"type": "way", "id": 7, "nodes": [1, 2, 3], "tags": {"highway": "primary"}}
        )
        assert isinstance(el, OSMWay)
        assert el.nodes == (1, 2, 3)
        assert el.tag("highway") == "primary"
        assert el.tag("name") == ""
        assert el.key == ("way", 7)

    def test_way_without_nodes_or_tags(self):
        el = parse_element({"type": "way", "id": 7})
        assert el.nodes == ()
        assert el.tags == {}

    @pytest.mark.parametrize(
        "record", [{"type": "relation", "id": 1}, {"id": 1}, None, "node", 3]
    )
    def test_unsupported(self, record):
        assert parse_element(record) is None

    def test_iter_elements_malformed(self):
        assert list(iter_elements(None)) == []
        assert list(iter_elements({})) == []
        assert list(iter_elements({"elements": "nope"})) == []

    def test_element_key(self):
        assert element_key({"type": "way", "id": 7, "nodes": []}) == ("way", 7)
        assert element_key({"id": 7}) == (None, 7)


class TestOnewayDirections:
    """Tests for the one-way tag rule."""

    @pytest.mark.parametrize("value", ["yes", "true", "1"])
    def test_forward(self, value):
        assert oneway_directions({"oneway": value}) == (True, False)

    def test_reverse(self):
        assert oneway_directions({"oneway": "-1"}) == (False, True)

    @pytest.mark.parametrize("value", ["no", "reversible", "alternating", "YES", ""])
    def test_other_values_bidirectional(self, value):
        assert oneway_directions({"oneway": value}) == (True, True)

    def test_absent(self):
        assert oneway_directions({}) == (True, True)


class TestConvertToGraph:
    """Tests for convert_to_graph."""

    def test_null_input(self):
        assert convert_to_graph(None).to_dict() == EMPTY_GRAPH

    def test_missing_elements(self):
        assert convert_to_graph({}).to_dict() == EMPTY_GRAPH

    def test_empty_elements(self):
        assert convert_to_graph({"elements": []}).to_dict() == EMPTY_GRAPH

    def test_graph_flags(self):
        graph = convert_to_graph({"elements": []})
        assert graph.directed is True
        assert graph.multigraph is False

    def test_collects_nodes(self):
        graph = convert_to_graph(
            {
                "elements": [
                    {"type": "node", "id": 1, "lat": 52.52, "lon": 13.405},
                    {"type": "node", "id": 2, "lat": 52.53, "lon": 13.406},
                ]
            }
        )
        assert graph.nodes == [
            GraphNode(1, 52.52, 13.405),
            GraphNode(2, 52.53, 13.406),
        ]
        assert graph.edges == []

    def test_two_way_road(self):
        graph = convert_to_graph(_two_node_way({"highway": "residential"}))
        assert len(graph.edges) == 2
        assert (graph.edges[0].source, graph.edges[0].target) == (1, 2)
        assert (graph.edges[1].source, graph.edges[1].target) == (2, 1)

    def test_both_directions_share_attributes(self):
        graph = convert_to_graph(
            _two_node_way({"highway": "residential", "name": "Main St"})
        )
        fwd, rev = graph.edges
        assert fwd.way_id == rev.way_id == 100
        assert fwd.weight == rev.weight
        assert fwd.highway == rev.highway == "residential"
        assert fwd.name == rev.name == "Main St"

    def test_oneway_yes(self):
        graph = convert_to_graph(_two_node_way({"highway": "primary", "oneway": "yes"}))
        assert len(graph.edges) == 1
        assert (graph.edges[0].source, graph.edges[0].target) == (1, 2)

    def test_oneway_reverse(self):
        graph = convert_to_graph(_two_node_way({"highway": "primary", "oneway": "-1"}))
        assert len(graph.edges) == 1
        assert (graph.edges[0].source, graph.edges[0].target) == (2, 1)

    def test_oneway_reversible_is_bidirectional(self):
        graph = convert_to_graph(_two_node_way({"oneway": "reversible"}))
        assert len(graph.edges) == 2

    def test_tags_copied(self):
        graph = convert_to_graph(_two_node_way({"highway": "tertiary", "name": "Main St"}))
        assert graph.edges[0].highway == "tertiary"
        assert graph.edges[0].name == "Main St"

    def test_missing_tags_default_empty(self):
        graph = convert_to_graph(_two_node_way())
        assert graph.edges[0].highway == ""
        assert graph.edges[0].name == ""

    def test_weight_is_haversine_km(self):
        graph = convert_to_graph(_two_node_way())
        expected = haversine_distance_km(52.52, 13.405, 52.53, 13.406)
        assert graph.edges[0].weight > 0
        assert graph.edges[0].weight == pytest.approx(expected)
        assert isinstance(graph.edges[0].weight, float)

    def test_unresolved_node_skipped(self):
        graph = convert_to_graph(
            {
                "elements": [
                    {"type": "node", "id": 1, "lat": 52.52, "lon": 13.405},
                    {"type": "way", "id": 100, "nodes": [1, 999]},
                ]
            }
        )
        assert graph.edges == []

    def test_way_without_nodes(self):
        graph = convert_to_graph(
            {
                "elements": [
                    {"type": "node", "id": 1, "lat": 52.52, "lon": 13.405},
                    {"type": "way", "id": 100},
                ]
            }
        )
        assert graph.edges == []
        assert len(graph.nodes) == 1

    def test_only_broken_segment_dropped(self):
        data = {
            "elements": [
                {"type": "node", "id": 1, "lat": 0.0, "lon": 0.0},
                {"type": "node", "id": 2, "lat": 0.0, "lon": 0.001},
                {"type": "node", "id": 4, "lat": 0.0, "lon": 0.003},
                {"type": "way", "id": 9, "nodes": [1, 2, 3, 4], "tags": {"oneway": "yes"}},
            ]
        }
        graph = convert_to_graph(data)
        assert [(e.source, e.target) for e in graph.edges] == [(1, 2)]

    @pytest.mark.parametrize("bad_lat", ["n/a", None, True, float("nan")])
    def test_non_numeric_coordinates_skip_segment(self, bad_lat):
        data = {
            "elements": [
                {"type": "node", "id": 1, "lat": 0.0, "lon": 0.0},
                {"type": "node", "id": 2, "lat": 0.0, "lon": 0.001},
                {"type": "node", "id": 3, "lat": bad_lat, "lon": 0.002},
                {"type": "way", "id": 9, "nodes": [1, 2, 3], "tags": {"oneway": "yes"}},
            ]
        }
        graph = convert_to_graph(data)
        assert [(e.source, e.target) for e in graph.edges] == [(1, 2)]
        assert len(graph.nodes) == 3
        assert graph.node_index()[3].lat is bad_lat

    def test_edge_order_follows_traversal(self):
        data = {
            "elements": [
                {"type": "node", "id": 1, "lat": 0.0, "lon": 0.0},
                {"type": "node", "id": 2, "lat": 0.0, "lon": 0.001},
                {"type": "node", "id": 3, "lat": 0.0, "lon": 0.002},
                {"type": "way", "id": 9, "nodes": [1, 2, 3]},
            ]
        }
        graph = convert_to_graph(data)
        assert [(e.source, e.target) for e in graph.edges] == [
            (1, 2),
            (2, 1),
            (2, 3),
            (3, 2),
        ]

    def test_ways_after_nodes_in_stream_order(self):
        # A way listed before its nodes still resolves.
        data = {
            "elements": [
                {"type": "way", "id": 9, "nodes": [1, 2], "tags": {"oneway": "1"}},
                {"type": "node", "id": 1, "lat": 0.0, "lon": 0.0},
                {"type": "node", "id": 2, "lat": 0.0, "lon": 0.001},
            ]
        }
        assert len(convert_to_graph(data).edges) == 1

    def test_overlapping_ways_not_deduplicated(self):
        data = _two_node_way({"highway": "residential"})
        data["elements"].append(
            {"type": "way", "id": 101, "nodes": [1, 2], "tags": {"highway": "residential"}}
        )
        graph = convert_to_graph(data)
        assert len(graph.edges) == 4
        assert [e.way_id for e in graph.edges] == [100, 100, 101, 101]

    def test_ignores_relations_and_garbage(self):
        data = _two_node_way()
        data["elements"].extend([{"type": "relation", "id": 5, "members": []}, None, 7])
        graph = convert_to_graph(data)
        assert len(graph.nodes) == 2
        assert len(graph.edges) == 2

    def test_duplicate_node_keeps_first_position(self):
        data = {
            "elements": [
                {"type": "node", "id": 1, "lat": 0.0, "lon": 0.0},
                {"type": "node", "id": 2, "lat": 1.0, "lon": 1.0},
                {"type": "node", "id": 1, "lat": 0.5, "lon": 0.5},
            ]
        }
        graph = convert_to_graph(data)
        assert [n.id for n in graph.nodes] == [1, 2]
        assert graph.nodes[0].lat == 0.5


class TestGraphModel:
    """Tests for the Graph dataclass."""

    def _make_graph(self):
        return Graph(
            nodes=[GraphNode(1, 52.52, 13.405), GraphNode(2, 52.53, 13.406)],
            edges=[
                GraphEdge(1, 2, 100, 1.234, "residential", "Main St"),
                GraphEdge(2, 1, 100, 1.234, "residential", "Main St"),
                GraphEdge(1, 2, 101, 1.234, "service", ""),
            ],
        )

    def test_key_order(self):
        data = self._make_graph().to_dict()
        assert list(data) == ["directed", "multigraph", "graph", "nodes", "edges"]
        assert list(data["nodes"][0]) == ["id", "lat", "lon"]
        assert list(data["edges"][0]) == [
            "source",
            "target",
            "wayId",
            "weight",
            "highway",
            "name",
        ]

    def test_from_dict_defaults(self):
        graph = Graph.from_dict(
            {
                "nodes": [{"id": 1, "lat": 0, "lon": 0}],
                "edges": [{"source": 1, "target": 2}],
            }
        )
        edge = graph.edges[0]
        assert edge.way_id == 0
        assert edge.weight == 0.0
        assert edge.highway == ""
        assert edge.name == ""
        assert graph.directed is True

    def test_from_dict_inverse(self):
        graph = self._make_graph()
        assert Graph.from_dict(graph.to_dict()) == graph

    def test_extent(self):
        assert self._make_graph().extent() == (52.52, 13.405, 52.53, 13.406)
        assert Graph.empty().extent() is None

    def test_to_networkx_keeps_parallel_edges(self):
        G = self._make_graph().to_networkx()
        assert isinstance(G, nx.MultiDiGraph)
        assert G.number_of_nodes() == 2
        assert G.number_of_edges() == 3
        assert G.number_of_edges(1, 2) == 2
        assert G.nodes[1]["lat"] == 52.52
        way_ids = sorted(d["way_id"] for _, _, d in G.edges(data=True))
        assert way_ids == [100, 100, 101]
