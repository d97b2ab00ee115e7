"""
Adjacency-list storage engine.

This module provides the AdjacencyList class that stores graph topology as one
row of outgoing connections per node. Rows are addressed by plain integer
indices; wrapping them in Node handles is left to the graph kinds built on top.

Rows keep connections in insertion order with no deduplication, so parallel
edges and self-loops are preserved exactly as added. Iterators are lazy and a
new one is created on every call; mutating the engine while an iterator is
alive makes the iterator raise ConcurrentModificationError on its next step.
"""

from typing import Iterable, Iterator, List, Tuple, TypeVar

from .exceptions import ConcurrentModificationError, NodeNotFoundError
from .models import Connection

T = TypeVar("T")


class AdjacencyList:
    """
    Per-node ordered rows of outgoing connections.

    Attributes:
        _rows (List[List[Connection]]): One row per node, indexed by node id
        _edge_count (int): Total number of stored connections
        _modifications (int): Mutation counter checked by live iterators
    """

    def __init__(self) -> None:
        self._rows: List[List[Connection]] = []
        self._edge_count = 0
        self._modifications = 0

    def add_node(self) -> int:
        """Append an empty row and return its index."""
        index = len(self._rows)
        self._rows.append([])
        self._modifications += 1
        return index

    def add_edge(self, source: int, target: int, edge_id: int) -> None:
        """
        Append a connection to ``source``'s row.

        Only the source is checked; callers are responsible for passing a
        target that already exists.

        Raises:
            NodeNotFoundError: If ``source`` is not an existing row
        """
        self._require_node(source)
        self._rows[source].append(Connection(target, edge_id))
        self._edge_count += 1
        self._modifications += 1

    def get_neighbours(self, node: int) -> Tuple[Connection, ...]:
        """Get the connections of ``node`` in insertion order."""
        self._require_node(node)
        return tuple(self._rows[node])

    def node_exists(self, node: int) -> bool:
        """Check if ``node`` is an existing row index."""
        return 0 <= node < len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def edge_count(self) -> int:
        """Number of stored connections."""
        return self._edge_count

    def nodes(self) -> Iterator[int]:
        """Iterate over node indices in creation order."""
        return self._guarded(range(len(self._rows)), self._modifications)

    def edges(self) -> Iterator[Tuple[int, Connection]]:
        """Iterate over ``(source, connection)`` pairs, row by row."""
        flattened = (
            (source, connection)
            for source, row in enumerate(self._rows)
            for connection in row
        )
        return self._guarded(flattened, self._modifications)

    def _guarded(self, items: Iterable[T], expected: int) -> Iterator[T]:
        for item in items:
            if self._modifications != expected:
                raise ConcurrentModificationError(
                    "Adjacency list was modified while being iterated"
                )
            yield item

    def _require_node(self, node: int) -> None:
        if not self.node_exists(node):
            raise NodeNotFoundError(f"Node index {node} not found in adjacency list")
