"""
Typed graph facades over a graph kind.

This module provides the Graph class, which pairs a topology-only GraphKind
with a value per node, and the WeightedGraph subclass, which also keeps a
weight per edge. Nodes and edges are append-only: a graph is built with
repeated add_node/add_edge calls or with a bulk constructor and then read.

Node values live in a list indexed by node uid and weights in a list indexed
by edge uid, so both lookups are O(1). The edge counter advances once per
logical edge, which means both directions of an undirected edge share one
weight.

Example:
    >>> graph = Graph.from_pairs([(1, 2), (1, 3), (1, 4)])
    >>> len(graph)
    4
    >>> [graph[n] for n in graph.get_neighbours(graph.find_node_with_value(1))]
    [2, 3, 4]
"""

import logging
from typing import (
    Any,
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from .exceptions import EdgeNotFoundError, GraphOperationError, NodeNotFoundError
from .kinds import Directed, Undirected
from .models import Edge, Node
from .rendering import render
from .types import GraphKind, W

logger = logging.getLogger(__name__)

T = TypeVar("T")  # Type of node values


class Graph(Generic[T]):
    """
    Graph carrying a value on every node.

    The facade owns its graph kind exclusively. Any object satisfying the
    GraphKind protocol can be supplied; Directed is used when none is.

    Attributes:
        _kind (GraphKind): Topology of the graph
        _values (List[T]): Node values indexed by node uid
        _edge_count (int): Next edge uid to assign
    """

    weighted = False

    def __init__(self, kind: Optional[GraphKind] = None):
        self._kind: GraphKind = kind if kind is not None else Directed()
        self._values: List[T] = []
        self._edge_count = 0

    @classmethod
    def directed(cls) -> "Graph[T]":
        """Create an empty directed graph."""
        return cls(Directed())

    @classmethod
    def undirected(cls) -> "Graph[T]":
        """Create an empty undirected graph."""
        return cls(Undirected())

    @property
    def kind(self) -> GraphKind:
        """Graph kind holding the topology."""
        return self._kind

    def add_node(self, value: T) -> Node:
        """
        Create an unconnected node holding ``value``.

        The topology is extended first and the value appended afterwards, so a
        failing graph kind leaves the graph untouched.

        Raises:
            GraphOperationError: If the graph kind hands out a uid that does
                not match the next value slot
        """
        node = self._kind.add_node()
        if node.uid != len(self._values):
            raise GraphOperationError(
                f"Graph kind returned node {node.uid}, expected {len(self._values)}"
            )
        self._values.append(value)
        return node

    def add_edge(self, source: Node, target: Node) -> Edge:
        """Add an edge between two existing nodes."""
        return self._add_edge(source, target)

    def _add_edge(self, source: Node, target: Node) -> Edge:
        self._require_node(source)
        self._require_node(target)
        edge_id = self._edge_count
        self._kind.add_edge(source, target, edge_id)
        self._edge_count += 1
        return Edge(source, target, edge_id)

    def nodes(self) -> Iterator[Node]:
        """Iterate over all nodes in creation order."""
        return self._kind.nodes()

    def edges(self) -> Iterator[Edge]:
        """Iterate over all stored connections, grouped by source node."""
        return self._kind.edges()

    def get_neighbours(self, node: Node) -> Iterator[Node]:
        """Iterate over the nodes reachable from ``node`` in one step."""
        self._require_node(node)
        return (edge.target for edge in self._kind.get_neighbours(node))

    def get_neighbour_edges(self, node: Node) -> Iterator[Edge]:
        """Iterate over the connections leaving ``node`` in insertion order."""
        self._require_node(node)
        return self._kind.get_neighbours(node)

    def distance_neighbours(self, node: Node) -> Iterator[Tuple[Node, Any]]:
        """Iterate over ``(neighbour, 1)`` pairs for path finding."""
        return ((neighbour, 1) for neighbour in self.get_neighbours(node))

    def get_degree(self, node: Node) -> int:
        """Get the number of connections stored for ``node``."""
        self._require_node(node)
        return self._kind.get_degree(node)

    def has_node(self, node: Node) -> bool:
        """Check if ``node`` belongs to the graph."""
        return 0 <= node.uid < len(self._values)

    def __len__(self) -> int:
        return len(self._kind)

    @property
    def edge_count(self) -> int:
        """Number of logical edges added so far."""
        return self._edge_count

    def __getitem__(self, node: Node) -> T:
        self._require_node(node)
        return self._values[node.uid]

    def __setitem__(self, node: Node, value: T) -> None:
        self._require_node(node)
        self._values[node.uid] = value

    def get_edge_values(self, edge: Edge) -> Tuple[T, T]:
        """Get the values at both ends of ``edge``."""
        return self[edge.source], self[edge.target]

    def find_node_with_value(self, value: T) -> Optional[Node]:
        """Return the first node, in creation order, whose value equals ``value``."""
        for node in self.nodes():
            if self._values[node.uid] == value:
                return node
        return None

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[Tuple[T, T]], kind: Optional[GraphKind] = None
    ) -> "Graph[T]":
        """
        Build a graph from ``(source_value, target_value)`` pairs.

        Repeated values share one node. Nodes are created the first time their
        value is seen, so iterating the result yields values in first-seen
        order.

        Args:
            pairs: Ordered value pairs, one per edge
            kind: Graph kind to fill; a new Directed kind when omitted

        Returns:
            Graph with one node per distinct value and one edge per pair
        """
        graph = cls(kind)
        node_map: Dict[Hashable, Node] = {}
        for source, target in pairs:
            graph._add_edge(graph._node_for(node_map, source), graph._node_for(node_map, target))
        logger.debug("Built %s with %d nodes and %d edges", cls.__name__, len(graph), graph.edge_count)
        return graph

    def _node_for(self, node_map: Dict[Hashable, Node], value: T) -> Node:
        node = node_map.get(value)
        if node is None:
            node = self.add_node(value)
            node_map[value] = node
        return node

    def _require_node(self, node: Node) -> None:
        if not self.has_node(node):
            raise NodeNotFoundError(f"Node {node!r} not found in graph of size {len(self._values)}")

    def __str__(self) -> str:
        return render(self, pretty=True)

    def __repr__(self) -> str:
        return render(self)


class WeightedGraph(Graph[T], Generic[T, W]):
    """
    Graph carrying a value on every node and a weight on every edge.

    Attributes:
        _weights (List[W]): Edge weights indexed by edge uid
    """

    weighted = True

    def __init__(self, kind: Optional[GraphKind] = None):
        super().__init__(kind)
        self._weights: List[W] = []

    def add_edge(self, source: Node, target: Node, weight: W) -> Edge:  # type: ignore[override]
        """Add an edge of the given weight between two existing nodes."""
        edge = self._add_edge(source, target)
        self._weights.append(weight)
        return edge

    def get_weight(self, edge: Edge) -> W:
        """
        Get the weight of ``edge``.

        Raises:
            EdgeNotFoundError: If no edge with this uid was added
        """
        if not 0 <= edge.uid < len(self._weights):
            raise EdgeNotFoundError(f"Edge {edge.uid} not found in graph")
        return self._weights[edge.uid]

    def distance_neighbours(self, node: Node) -> Iterator[Tuple[Node, W]]:
        """Iterate over ``(neighbour, weight)`` pairs for path finding."""
        return (
            (edge.target, self._weights[edge.uid]) for edge in self.get_neighbour_edges(node)
        )

    @classmethod
    def from_pairs(cls, pairs, kind=None):
        raise TypeError("WeightedGraph is built from (source, target, weight) triples")

    @classmethod
    def from_triples(
        cls, triples: Iterable[Tuple[T, T, W]], kind: Optional[GraphKind] = None
    ) -> "WeightedGraph[T, W]":
        """
        Build a weighted graph from ``(source_value, target_value, weight)`` triples.

        Node creation follows the same first-seen rule as ``Graph.from_pairs``.
        """
        graph = cls(kind)
        node_map: Dict[Hashable, Node] = {}
        for source, target, weight in triples:
            graph.add_edge(
                graph._node_for(node_map, source), graph._node_for(node_map, target), weight
            )
        logger.debug("Built %s with %d nodes and %d edges", cls.__name__, len(graph), graph.edge_count)
        return graph
