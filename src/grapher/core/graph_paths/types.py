"""Type definitions for graph path finding."""

from enum import Enum
from typing import List

from ..models import Node


class PathType(Enum):
    """Enumeration of path finding types."""

    SHORTEST = "shortest"  # Non-negative increments only
    ALL = "all"  # Every simple path, in depth-first discovery order


# Type alias for a path: nodes from source to target inclusive
NodePath = List[Node]
