"""
Tests for edge-list loading.
"""

import pytest

from grapher.core.exceptions import ValidationError
from grapher.core.graph import WeightedGraph
from grapher.core.kinds import Undirected
from grapher.core.loader import load_edge_list, load_graph, parse_edge_list


def test_parse_edge_list_pairs():
    """Test parsing whitespace-separated integer pairs."""
    lines = ["0 1\n", "1\t2\n", "  2   0  \n"]
    assert list(parse_edge_list(lines)) == [(0, 1), (1, 2), (2, 0)]


def test_parse_edge_list_skips_blanks_and_comments():
    """Test that empty lines and comment lines are ignored."""
    lines = ["# header", "", "0 1", "   ", "# trailing"]
    assert list(parse_edge_list(lines)) == [(0, 1)]


def test_parse_edge_list_custom_comment_prefix():
    """Test a different comment marker."""
    assert list(parse_edge_list(["% note", "3 4"], comment_prefix="%")) == [(3, 4)]


def test_parse_edge_list_weighted():
    """Test parsing a weight column."""
    assert list(parse_edge_list(["0 1 2.5"], weighted=True)) == [(0, 1, 2.5)]


def test_parse_edge_list_value_type():
    """Test keeping node columns as strings."""
    assert list(parse_edge_list(["a b"], value_type=str)) == [("a", "b")]


@pytest.mark.parametrize("line", ["0", "0 1 2"])
def test_parse_edge_list_wrong_column_count(line):
    """Test that unweighted lines need exactly two columns."""
    with pytest.raises(ValidationError, match="Line 2: expected 2 columns"):
        list(parse_edge_list(["0 1", line]))


def test_parse_edge_list_bad_token():
    """Test that unparsable values name the line."""
    with pytest.raises(ValidationError, match="Line 1"):
        list(parse_edge_list(["0 x"]))


def test_load_edge_list(tmp_path):
    """Test reading an edge-list file."""
    path = tmp_path / "edges.txt"
    path.write_text("0 1\n1 2\n", encoding="utf-8")
    assert load_edge_list(path) == [(0, 1), (1, 2)]


def test_load_graph_directed(tmp_path):
    """Test building a directed graph from a file."""
    path = tmp_path / "edges.txt"
    path.write_text("1 2\n2 3\n3 0\n1 0\n", encoding="utf-8")
    assert repr(load_graph(path)) == "1[2,0]2[3]3[0]0[]"


def test_load_graph_undirected_weighted(tmp_path):
    """Test building an undirected weighted graph from a file."""
    path = tmp_path / "edges.txt"
    path.write_text("1 2 0.5\n", encoding="utf-8")
    graph = load_graph(path, undirected=True, weighted=True)
    assert isinstance(graph, WeightedGraph)
    assert isinstance(graph.kind, Undirected)
    assert repr(graph) == "1[2(0.5)]2[1(0.5)]"


def test_load_edge_list_missing_file(tmp_path):
    """Test that a missing file surfaces as an OS error."""
    with pytest.raises(FileNotFoundError):
        load_edge_list(tmp_path / "missing.txt")
