"""
Directed and undirected graph kinds.

A graph kind owns the topology of a graph and nothing else: no node values and
no weights. Both kinds here are built on the AdjacencyList storage engine and
differ only in how many connections an edge produces:

- Directed stores one connection per edge, so the degree is the out-degree.
- Undirected stores two mirrored connections sharing the edge id. A self-loop
  is stored twice in the same row and therefore counts 2 towards the degree.

Any other object satisfying the GraphKind protocol can replace these.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from .adjacency_list import AdjacencyList
from .exceptions import NodeNotFoundError
from .models import Edge, Node


class AdjacencyGraphKind(ABC):
    """Base class for graph kinds backed by an adjacency list."""

    def __init__(self) -> None:
        self._adjacency = AdjacencyList()

    def add_node(self) -> Node:
        return Node(self._adjacency.add_node())

    @abstractmethod
    def add_edge(self, source: Node, target: Node, edge_id: int) -> None:
        """Store the connections for one logical edge."""
        pass

    def __len__(self) -> int:
        return len(self._adjacency)

    def get_degree(self, node: Node) -> int:
        return len(self._adjacency.get_neighbours(node.uid))

    def nodes(self) -> Iterator[Node]:
        return (Node(index) for index in self._adjacency.nodes())

    def edges(self) -> Iterator[Edge]:
        return (
            Edge(Node(source), Node(connection.target), connection.edge_id)
            for source, connection in self._adjacency.edges()
        )

    def get_neighbours(self, node: Node) -> Iterator[Edge]:
        return (
            Edge(node, Node(connection.target), connection.edge_id)
            for connection in self._adjacency.get_neighbours(node.uid)
        )

    def _require_nodes(self, *nodes: Node) -> None:
        for node in nodes:
            if not self._adjacency.node_exists(node.uid):
                raise NodeNotFoundError(f"Node {node.uid} not found in {type(self).__name__}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={len(self)}, connections={self._adjacency.edge_count})"


class Directed(AdjacencyGraphKind):
    """Graph kind storing each edge once, from source to target."""

    def add_edge(self, source: Node, target: Node, edge_id: int) -> None:
        self._require_nodes(source, target)
        self._adjacency.add_edge(source.uid, target.uid, edge_id)


class Undirected(AdjacencyGraphKind):
    """Graph kind storing each edge in both directions under one edge id."""

    def add_edge(self, source: Node, target: Node, edge_id: int) -> None:
        self._require_nodes(source, target)
        # Self-loops are stored twice too.
        self._adjacency.add_edge(source.uid, target.uid, edge_id)
        self._adjacency.add_edge(target.uid, source.uid, edge_id)
