"""
Dijkstra-style shortest path search.
"""

import logging
from typing import Any, Dict, Optional, Set

from ...exceptions import NegativeWeightError
from ...models import Node
from ..base import PathFinder
from ..types import NodePath
from ..utils import INFINITY, PriorityQueue, reconstruct_path

logger = logging.getLogger(__name__)


class ShortestPathFinder(PathFinder[NodePath]):
    """Single-source, single-target shortest path over non-negative increments."""

    def find_path(self, start_node: Node, end_node: Node, **kwargs) -> Optional[NodePath]:
        """
        Find a shortest path from ``start_node`` to ``end_node``.

        The search relaxes neighbours in the order the graph yields them and
        stops when the target is taken off the queue, at which point its
        distance is final. Only strictly shorter candidates replace a
        predecessor, so among equally short paths the one relaxed first wins.
        The source starts with no recorded distance, so asking for a path from
        a node to itself only succeeds when a cycle leads back to it.

        Args:
            start_node: Node the path starts at
            end_node: Node the path ends at

        Returns:
            Nodes from source to target inclusive, or None if the target is
            unreachable

        Raises:
            NodeNotFoundError: If either node is not in the graph
            NegativeWeightError: If a negative increment is met
        """
        self.validate_nodes(start_node, end_node)
        logger.debug("Starting shortest path search from %r to %r", start_node, end_node)

        distance: Dict[Node, Any] = {node: INFINITY for node in self.graph.nodes()}
        previous: Dict[Node, Optional[Node]] = {node: None for node in distance}
        visited: Set[Node] = set()

        queue = PriorityQueue()
        queue.push(start_node, 0)
        target_reached = False

        while not queue.empty():
            current_dist, current_node = queue.pop()

            # The target is settled once an entry pushed by relaxation pops.
            # The initial source entry has no predecessor and never counts.
            if current_node == end_node and previous[end_node] is not None:
                target_reached = True
                break

            # Stale duplicate left behind by an earlier relaxation
            if current_node in visited:
                continue
            visited.add(current_node)

            for neighbour, increment in self.graph.distance_neighbours(current_node):
                if increment < 0:
                    raise NegativeWeightError(
                        f"Negative weight {increment} on edge {current_node!r} -> {neighbour!r}"
                    )
                candidate = current_dist + increment
                if candidate < distance[neighbour]:
                    distance[neighbour] = candidate
                    previous[neighbour] = current_node
                    queue.push(neighbour, candidate)

        if not target_reached:
            logger.debug("No path from %r to %r after visiting %d nodes", start_node, end_node, len(visited))
            return None

        path = reconstruct_path(previous, start_node, end_node)
        logger.debug("Found path of %d nodes with distance %s", len(path), distance[end_node])
        return path
