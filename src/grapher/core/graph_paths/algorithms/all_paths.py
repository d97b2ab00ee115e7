"""All simple paths enumeration."""

from typing import Iterator, List, Optional

from ...models import Node
from ..base import PathFinder
from ..types import NodePath

_EXHAUSTED = object()


class AllPathsFinder(PathFinder[NodePath]):
    """Depth-first backtracking enumeration of simple paths."""

    def find_path(self, start_node: Node, end_node: Node, **kwargs) -> Optional[NodePath]:
        """Find a single path between nodes.

        For AllPathsFinder, this returns the first path found.
        """
        return next(self.find_paths(start_node, end_node, max_paths=1), None)

    def find_paths(
        self, start_node: Node, end_node: Node, max_paths: Optional[int] = None, **kwargs
    ) -> Iterator[NodePath]:
        """
        Yield every simple path from ``start_node`` to ``end_node``.

        Neighbours are explored in the order the graph yields them and a path
        is recorded whenever a neighbour is the target; the search never
        continues past the target. Other neighbours already on the current
        path are skipped. When both ends are the same node only cycles that
        close back onto it are reported.

        Args:
            start_node: Node every path starts at
            end_node: Node every path ends at
            max_paths: Stop after this many paths

        Raises:
            ValueError: If max_paths is not positive
            NodeNotFoundError: If either node is not in the graph
        """
        if max_paths is not None and max_paths <= 0:
            raise ValueError("max_paths must be positive")
        self.validate_nodes(start_node, end_node)
        return self._search(start_node, end_node, max_paths)

    def _search(
        self, start_node: Node, end_node: Node, max_paths: Optional[int]
    ) -> Iterator[NodePath]:
        current_path: List[Node] = [start_node]
        stack = [self._neighbours(start_node)]
        paths_found = 0

        while stack:
            neighbour = next(stack[-1], _EXHAUSTED)
            if neighbour is _EXHAUSTED:
                # Backtrack
                stack.pop()
                current_path.pop()
            elif neighbour == end_node:
                yield current_path + [neighbour]
                paths_found += 1
                if max_paths is not None and paths_found >= max_paths:
                    return
            elif neighbour not in current_path:
                current_path.append(neighbour)
                stack.append(self._neighbours(neighbour))

    def _neighbours(self, node: Node) -> Iterator[Node]:
        return (neighbour for neighbour, _ in self.graph.distance_neighbours(node))
