"""
Utility functions for path finding operations.
"""

import math
from heapq import heappop, heappush
from typing import Any, Dict, List, Optional, Tuple

from ..exceptions import GraphOperationError
from ..models import Node

# Distance of a node no relaxation has reached yet
INFINITY = math.inf


class PriorityQueue:
    """Min-priority queue of nodes that tolerates duplicate entries.

    Relaxation pushes a node again instead of decreasing its key, so a node can
    sit in the queue several times at different priorities. Consumers skip the
    stale entries themselves. Equal priorities pop in insertion order.
    """

    def __init__(self) -> None:
        self._queue: List[Tuple[Any, int, Node]] = []
        self._counter = 0  # Unique counter to break ties

    def push(self, item: Node, priority: Any) -> None:
        heappush(self._queue, (priority, self._counter, item))
        self._counter += 1

    def pop(self) -> Tuple[Any, Node]:
        """Remove and return ``(priority, item)`` with the lowest priority."""
        priority, _, item = heappop(self._queue)
        return priority, item

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)


def reconstruct_path(
    previous: Dict[Node, Optional[Node]], start_node: Node, end_node: Node
) -> List[Node]:
    """Walk predecessors back from ``end_node`` to ``start_node``.

    At least one step is always taken, so when both ends are the same node the
    cycle that closed back onto it is returned rather than a lone node.
    """
    path = [end_node]
    current = previous[end_node]
    while current != start_node:
        if current is None:
            raise GraphOperationError(
                f"Predecessor chain from {end_node!r} does not reach {start_node!r}"
            )
        path.append(current)
        current = previous[current]
    path.append(start_node)
    path.reverse()
    return path
