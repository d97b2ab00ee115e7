from abc import ABC, abstractmethod
from typing import Generic, Iterator, Optional, TypeVar

from ..exceptions import NodeNotFoundError
from ..models import Node
from ..types import PathFindable

# Type variable for path finding results
T = TypeVar("T")


class PathFinder(ABC, Generic[T]):
    """Abstract base class for path finding algorithms."""

    def __init__(self, graph: PathFindable):
        """Initialize finder with graph."""
        self.graph = graph

    @abstractmethod
    def find_path(self, start_node: Node, end_node: Node, **kwargs) -> Optional[T]:
        """Find path between nodes."""
        pass

    def find_paths(self, start_node: Node, end_node: Node, **kwargs) -> Iterator[T]:
        """Find multiple paths between nodes.

        Default implementation yields single path from find_path.
        Subclasses may override this to provide more efficient implementations.
        """
        path = self.find_path(start_node, end_node, **kwargs)
        if path is not None:
            yield path

    def validate_nodes(self, start_node: Node, end_node: Node) -> None:
        """Validate that nodes exist in graph."""
        if not self.graph.has_node(start_node):
            raise NodeNotFoundError(f"Start node {start_node!r} not found")
        if not self.graph.has_node(end_node):
            raise NodeNotFoundError(f"End node {end_node!r} not found")
