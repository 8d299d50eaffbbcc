"""
Tests for edge list / label loading and result writers.
"""

import json

import networkx as nx
import pandas as pd
import pytest

from graphenum.io import (
    atomic_write_json,
    load_graph,
    load_labels,
    write_cliques_csv,
    write_core_numbers_csv,
    write_mappings_csv,
)
from graphenum.io.formats import sniff_delimiter


class TestSniffDelimiter:

    def test_whitespace(self, tmp_path):
        path = tmp_path / "edges.txt"
        path.write_text("1 2\n2 3\n")
        assert sniff_delimiter(path) is None

    def test_comma(self, tmp_path):
        path = tmp_path / "edges.csv"
        path.write_text("1,2\n2,3\n3,4\n")
        assert sniff_delimiter(path) == ","

    def test_inline_comment_ignored(self, tmp_path):
        path = tmp_path / "edges.txt"
        path.write_text("1 2  # weights, later\n2 3\n")
        assert sniff_delimiter(path) is None

    def test_comment_only(self, tmp_path):
        path = tmp_path / "edges.txt"
        path.write_text("# nothing here\n")
        assert sniff_delimiter(path) is None


class TestLoadGraph:

    def test_whitespace_edge_list(self, edge_list_file):
        G = load_graph(edge_list_file)
        assert set(G.nodes) == {"1", "2", "3", "4", "5"}
        assert G.number_of_edges() == 4
        assert G.has_edge("1", "3")
        assert G.degree("5") == 0

    def test_comma_edge_list(self, tmp_path):
        path = tmp_path / "edges.csv"
        path.write_text("a,b\nb,c\nc,a\n")
        G = load_graph(path)
        assert nx.is_isomorphic(G, nx.complete_graph(3))
        assert set(G.nodes) == {"a", "b", "c"}

    def test_tab_separated_with_weights(self, tmp_path):
        """Extra columns are ignored."""
        path = tmp_path / "edges.tsv"
        path.write_text("1\t2\t0.5\n2\t3\t0.7\n")
        G = load_graph(path)
        assert G.number_of_edges() == 2
        assert not nx.get_edge_attributes(G, "weight")

    def test_duplicate_edges_collapse(self, tmp_path):
        path = tmp_path / "edges.txt"
        path.write_text("1 2\n2 1\n1 2\n")
        assert load_graph(path).number_of_edges() == 1

    def test_inline_comment_with_comma(self, tmp_path):
        """Punctuation inside a trailing comment does not change the delimiter."""
        path = tmp_path / "edges.txt"
        path.write_text("1 2  # first edge, a note\n2 3\n")
        G = load_graph(path)
        assert set(G.nodes) == {"1", "2", "3"}
        assert {frozenset(e) for e in G.edges} == {frozenset(("1", "2")), frozenset(("2", "3"))}

    def test_mixed_separators_rejected(self, tmp_path):
        """A whitespace separated line in a comma separated file is an error."""
        path = tmp_path / "edges.csv"
        path.write_text("1,2\n3 4\n5,6\n")
        with pytest.raises(ValueError, match="not separated by"):
            load_graph(path)

    def test_self_loop_rejected(self, tmp_path):
        path = tmp_path / "edges.txt"
        path.write_text("1 2\n2 2\n")
        with pytest.raises(ValueError, match="Self-loop"):
            load_graph(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_graph(tmp_path / "missing.txt")


class TestLoadLabels:

    def test_labels(self, tmp_path):
        path = tmp_path / "labels.csv"
        path.write_text("vertex,label\n1,C\n2, N\n3,C\n")
        assert load_labels(path) == {"1": "C", "2": "N", "3": "C"}

    def test_na_like_labels_kept(self, tmp_path):
        """Labels such as NA are ordinary strings, not missing values."""
        path = tmp_path / "labels.csv"
        path.write_text("vertex,label\n1,NA\n2,\n")
        assert load_labels(path) == {"1": "NA", "2": ""}

    def test_duplicate_vertex(self, tmp_path):
        path = tmp_path / "labels.csv"
        path.write_text("vertex,label\n1,C\n1,N\n")
        with pytest.raises(ValueError, match="more than one label"):
            load_labels(path)

    def test_single_column(self, tmp_path):
        path = tmp_path / "labels.csv"
        path.write_text("vertex\n1\n2\n")
        with pytest.raises(ValueError, match="two columns"):
            load_labels(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_labels(tmp_path / "missing.csv")


class TestWriters:

    def test_write_cliques(self, tmp_path):
        path = tmp_path / "out" / "cliques.csv"
        n = write_cliques_csv([{"b", "a", "c"}, {"d", "c"}], path)
        assert n == 2

        df = pd.read_csv(path, dtype=str)
        assert list(df.columns) == ["clique_id", "size", "vertices"]
        assert df["vertices"].tolist() == ["a;b;c", "c;d"]
        assert df["size"].tolist() == ["3", "2"]

    def test_write_no_cliques(self, tmp_path):
        path = tmp_path / "cliques.csv"
        assert write_cliques_csv([], path) == 0
        assert list(pd.read_csv(path).columns) == ["clique_id", "size", "vertices"]

    def test_write_mappings(self, tmp_path):
        path = tmp_path / "mappings.csv"
        n = write_mappings_csv([{"x": 1, "y": 2}, {"x": 3, "y": 4}], path)
        assert n == 2

        df = pd.read_csv(path)
        assert len(df) == 4
        assert df.groupby("mapping_id").size().tolist() == [2, 2]
        assert df[df["mapping_id"] == 1].set_index("pattern_vertex")["data_vertex"].to_dict() == {"x": 3, "y": 4}

    def test_write_core_numbers(self, tmp_path):
        path = tmp_path / "cores.csv"
        write_core_numbers_csv({"a": 1, "b": 3, "c": 2}, path)
        df = pd.read_csv(path)
        assert df["vertex"].tolist() == ["b", "c", "a"]

    def test_atomic_write_json(self, tmp_path):
        path = tmp_path / "nested" / "summary.json"
        atomic_write_json(path, {"n_cliques": 4})
        assert json.loads(path.read_text()) == {"n_cliques": 4}
        assert [p.name for p in path.parent.iterdir()] == ["summary.json"]

    def test_atomic_write_json_failure_leaves_no_file(self, tmp_path):
        path = tmp_path / "summary.json"
        with pytest.raises(TypeError):
            atomic_write_json(path, {"bad": object()})
        assert list(tmp_path.iterdir()) == []
