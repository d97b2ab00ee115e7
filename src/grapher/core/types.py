"""
Core type definitions and protocols.

This module provides the protocols that decouple the layers of the library:
- GraphKind: topology-only capability set implemented by Directed, Undirected
  and any user-defined kind handed to a graph facade
- PathFindable: the minimal traversal capability the path finders need
- Weight: the arithmetic a distance increment must support
"""

from typing import Any, Iterator, Protocol, Tuple, TypeVar, runtime_checkable

from .models import Edge, Node


class Weight(Protocol):
    """
    Protocol for distance increments.

    Besides ``+`` and ``<`` a weight must accept ``0`` as additive identity and
    compare against ``math.inf``, which the path finders use as "no distance
    yet". int, float, Fraction and Decimal all qualify.
    """

    def __add__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...


W = TypeVar("W", bound=Weight)


@runtime_checkable
class GraphKind(Protocol):
    """Protocol defining the topology operations a graph facade delegates to."""

    def add_node(self) -> Node:
        """Create a node and return its handle; uids are dense and ordered."""
        ...

    def add_edge(self, source: Node, target: Node, edge_id: int) -> None:
        """Connect two existing nodes under the given edge id."""
        ...

    def __len__(self) -> int:
        """Number of nodes."""
        ...

    def get_degree(self, node: Node) -> int:
        """Number of connections stored for a node."""
        ...

    def nodes(self) -> Iterator[Node]:
        """Iterate over all nodes in creation order."""
        ...

    def edges(self) -> Iterator[Edge]:
        """Iterate over all stored connections as Edge records."""
        ...

    def get_neighbours(self, node: Node) -> Iterator[Edge]:
        """Iterate over the connections leaving a node in insertion order."""
        ...


@runtime_checkable
class PathFindable(Protocol):
    """Protocol defining what path finding needs from a graph."""

    def nodes(self) -> Iterator[Node]:
        """Iterate over all nodes."""
        ...

    def has_node(self, node: Node) -> bool:
        """Check if a node belongs to the graph."""
        ...

    def distance_neighbours(self, node: Node) -> Iterator[Tuple[Node, Any]]:
        """Iterate over ``(neighbour, distance increment)`` pairs."""
        ...
