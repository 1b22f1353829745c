"""
Unit tests for graph file loading and saving.
"""

import json

import msgpack
import pytest

from graphsearch.data import dump_graph, graph_from_dict, graph_to_dict, load_graph
from graphsearch.graph import Graph, GraphFormatError, dijkstra, grid_graph


class TestSchema:
    """Test conversion to and from the file schema."""

    def test_undirected_edges_written_once(self, weighted_graph):
        """Mirrored entries are not duplicated in the file."""
        data = graph_to_dict(weighted_graph)
        assert data["directed"] is False
        assert len(data["edges"]) == 7
        assert data["edges"][0] == ["A", "B", 4]

    def test_isolated_vertices_kept(self, disconnected_graph):
        """Vertices without edges are listed explicitly."""
        rebuilt = graph_from_dict(graph_to_dict(disconnected_graph))
        assert "Lonely" in rebuilt
        assert list(rebuilt.neighbors("Lonely")) == []

    def test_weight_optional(self):
        """Edges without a weight get the default."""
        graph = graph_from_dict({"directed": True, "edges": [["A", "B"]]})
        assert graph.weight("A", "B") == 1
        assert graph.directed

    def test_lists_become_tuples(self):
        """List-valued labels are read back as hashable tuples."""
        graph = graph_from_dict({"edges": [[[0, 0], [0, 1], 1]]})
        assert graph.has_edge((0, 0), (0, 1))

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"directed": "yes"},
            {"edges": [["A"]]},
            {"edges": ["A-B"]},
            {"edges": [["A", "B", "heavy"]]},
            {"edges": [["A", "B", float("nan")]]},
            {"vertices": [{"not": "hashable"}]},
            {"vertices": "AB"},
            {"vertices": {"A": 1}},
            {"edges": "AB"},
            {"edges": None},
        ],
    )
    def test_malformed(self, data):
        """Schema violations raise GraphFormatError."""
        with pytest.raises(GraphFormatError):
            graph_from_dict(data)


class TestFiles:
    """Test reading and writing files."""

    @pytest.mark.parametrize("suffix", [".msgpack", ".json"])
    def test_dump_then_load(self, tmp_path, weighted_graph, expected_distances, suffix):
        """A written graph loads back with the same shortest paths."""
        path = tmp_path / f"graph{suffix}"
        dump_graph(weighted_graph, path)
        loaded = load_graph(path)
        assert sorted(loaded.edges()) == sorted(weighted_graph.edges())
        distances, _ = dijkstra(loaded, "A")
        assert distances == expected_distances

    def test_grid_vertices_survive(self, tmp_path):
        """Tuple vertices come back as tuples from msgpack."""
        path = tmp_path / "grid.msgpack"
        dump_graph(grid_graph(3, 2), path)
        loaded = load_graph(path)
        assert (2, 1) in loaded
        assert loaded.weight((0, 0), (1, 0)) == 1

    def test_directed_flag_survives(self, tmp_path, triangle):
        """Directed graphs stay directed."""
        path = tmp_path / "triangle.json"
        dump_graph(triangle, path)
        loaded = load_graph(path)
        assert loaded.directed
        assert not loaded.has_edge("C", "A")

    def test_hand_written_json(self, tmp_path):
        """A JSON file written by hand loads."""
        path = tmp_path / "roads.json"
        path.write_text(json.dumps({"edges": [["X", "Y", 2.5]]}), encoding="utf-8")
        assert load_graph(path).weight("Y", "X") == 2.5

    def test_hand_written_msgpack(self, tmp_path):
        """A msgpack file produced elsewhere loads."""
        path = tmp_path / "links.msgpack"
        path.write_bytes(msgpack.packb({"directed": True, "edges": [[1, 2], [2, 3]]}))
        graph = load_graph(path)
        assert list(graph.neighbors(2)) == [(3, 1)]

    def test_example_file(self, data_dir, expected_distances):
        """The bundled example graph matches the documented scenario."""
        graph = load_graph(data_dir / "example.json")
        distances, _ = dijkstra(graph, "A")
        assert {v: distances[v] for v in expected_distances} == expected_distances
        assert "Z" in graph

    def test_unsupported_extension(self, tmp_path):
        """Unknown extensions are rejected before touching the file."""
        with pytest.raises(GraphFormatError):
            load_graph(tmp_path / "graph.csv")
        with pytest.raises(GraphFormatError):
            dump_graph(Graph(), tmp_path / "graph.csv")

    def test_missing_file(self, tmp_path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_graph(tmp_path / "missing.json")

    def test_corrupt_json(self, tmp_path):
        """Undecodable JSON raises GraphFormatError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(GraphFormatError):
            load_graph(path)

    def test_corrupt_msgpack(self, tmp_path):
        """Truncated msgpack raises GraphFormatError."""
        path = tmp_path / "bad.msgpack"
        path.write_bytes(msgpack.packb({"edges": [["A", "B"]]})[:-3])
        with pytest.raises(GraphFormatError):
            load_graph(path)

    def test_string_vertex_list_in_file(self, tmp_path):
        """A string where the vertex list belongs is not split into characters."""
        path = tmp_path / "letters.json"
        path.write_text(json.dumps({"vertices": "AB", "edges": []}), encoding="utf-8")
        with pytest.raises(GraphFormatError, match="'vertices' must be a list"):
            load_graph(path)
