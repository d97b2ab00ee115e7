"""Graph path finding functionality."""

from typing import Iterator, List, Optional, Union

from ..models import Node
from ..types import PathFindable
from .algorithms.all_paths import AllPathsFinder
from .algorithms.shortest_path import ShortestPathFinder
from .base import PathFinder
from .types import NodePath, PathType

__all__ = [
    "AllPathsFinder",
    "NodePath",
    "PathFinder",
    "PathFinding",
    "PathType",
    "ShortestPathFinder",
]


class PathFinding:
    """Static interface for path finding operations."""

    @staticmethod
    def find_shortest_path(
        graph: PathFindable, start_node: Node, end_node: Node
    ) -> Optional[NodePath]:
        """Find a shortest path between nodes, or None if there is none."""
        return ShortestPathFinder(graph).find_path(start_node, end_node)

    @staticmethod
    def find_all_paths(
        graph: PathFindable,
        start_node: Node,
        end_node: Node,
        max_paths: Optional[int] = None,
    ) -> List[NodePath]:
        """Find all simple paths between nodes in depth-first discovery order."""
        return list(AllPathsFinder(graph).find_paths(start_node, end_node, max_paths=max_paths))

    @classmethod
    def find_paths(
        cls,
        graph: PathFindable,
        start_node: Node,
        end_node: Node,
        path_type: PathType = PathType.SHORTEST,
        max_paths: Optional[int] = None,
    ) -> Union[Optional[NodePath], Iterator[NodePath]]:
        """Generic path finding interface.

        SHORTEST returns a single path or None; ALL returns a lazy iterator.
        """
        if path_type == PathType.ALL:
            return AllPathsFinder(graph).find_paths(start_node, end_node, max_paths=max_paths)
        return cls.find_shortest_path(graph, start_node, end_node)
