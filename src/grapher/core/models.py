"""
Core value types for the graph library.

This module defines the small immutable records passed between the storage
engine, the graph kinds, the facades and the path finders:
- Node: opaque handle wrapping a dense creation-order index
- Edge: a logical connection between two nodes with its creation-order uid
- Connection: the storage engine's (target, edge id) record under a source row

The records are frozen dataclasses so they hash and compare structurally and
can be used as dictionary keys by the path finders.
"""

import sys
from dataclasses import dataclass

# uid of the null node, used where a Node is needed before one exists
NULL_UID = sys.maxsize


@dataclass(frozen=True, order=True)
class Node:
    """
    Handle to a vertex of a graph.

    Nodes are created by a graph's ``add_node`` and are only meaningful for
    the graph that created them. ``Node()`` is the null sentinel.

    Attributes:
        uid (int): Dense index assigned in creation order (0, 1, 2, ...)
    """

    uid: int = NULL_UID

    @property
    def is_null(self) -> bool:
        """Whether this is the null sentinel."""
        return self.uid == NULL_UID

    def __repr__(self) -> str:
        return "Node(null)" if self.is_null else f"Node({self.uid})"


@dataclass(frozen=True)
class Edge:
    """
    A connection between two nodes.

    Both directions of an undirected edge share the same ``uid``; the uid also
    indexes the weight list of a weighted graph.

    Attributes:
        source (Node): Node the edge leaves from
        target (Node): Node the edge points to
        uid (int): Dense index assigned once per logical edge
    """

    source: Node
    target: Node
    uid: int


@dataclass(frozen=True)
class Connection:
    """Adjacency record stored under a source row."""

    __slots__ = ("target", "edge_id")

    target: int
    edge_id: int
