"""Shared test fixtures."""

import pytest

from grapher.core.graph import Graph, WeightedGraph
from grapher.core.kinds import Undirected


@pytest.fixture
def diamond_graph() -> Graph:
    """
    Fixture providing a directed graph with two routes to node 4:
    0 -> 1 -> 4
    |    |    ^
    v    v    |
    2 -> 3 ---+
    """
    return Graph.from_pairs([(0, 1), (0, 2), (2, 3), (1, 3), (1, 4), (3, 4)])


@pytest.fixture
def disconnected_graph() -> Graph:
    """Fixture providing two separate directed edges 0 -> 1 and 2 -> 3."""
    return Graph.from_pairs([(0, 1), (2, 3)])


@pytest.fixture
def undirected_graph() -> Graph:
    """Fixture providing an undirected triangle with a self-loop on 'a'."""
    return Graph.from_pairs([("a", "b"), ("b", "c"), ("c", "a"), ("a", "a")], Undirected())


@pytest.fixture
def weighted_graph() -> WeightedGraph:
    """
    Fixture providing a weighted directed graph where the fewest hops
    are not the cheapest route:
    A -(10)-> D
    A -(1)-> B -(2)-> C -(3)-> D
    """
    return WeightedGraph.from_triples(
        [("A", "D", 10), ("A", "B", 1), ("B", "C", 2), ("C", "D", 3)]
    )


