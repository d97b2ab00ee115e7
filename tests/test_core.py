"""
Package-level import tests.
"""

import grapher
from grapher import Directed, Graph, PathFinding, Undirected, WeightedGraph
from grapher.core import GraphKind, PathFindable


def test_version():
    """Test the package exposes its version."""
    assert grapher.__version__ == "0.1.0"


def test_top_level_exports():
    """Test the commonly used names are importable from the package root."""
    for name in grapher.__all__:
        assert hasattr(grapher, name)


def test_quick_start():
    """Test the short form of building and searching a graph."""
    graph = Graph.from_pairs([("a", "b"), ("b", "c")])
    a = graph.find_node_with_value("a")
    c = graph.find_node_with_value("c")
    path = PathFinding.find_shortest_path(graph, a, c)
    assert [graph[node] for node in path] == ["a", "b", "c"]


def test_protocol_conformance():
    """Test the shipped kinds and facades satisfy the runtime protocols."""
    assert isinstance(Directed(), GraphKind)
    assert isinstance(Undirected(), GraphKind)
    assert isinstance(Graph.directed(), PathFindable)
    assert isinstance(WeightedGraph.undirected(), PathFindable)
