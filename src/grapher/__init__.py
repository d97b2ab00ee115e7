"""
grapher - Generic graphs and path finding

This package provides graphs over arbitrary node values with optional edge
weights, built on a swappable topology layer:

- Adjacency-list storage with directed and undirected graph kinds
- Typed graph facades carrying node values and edge weights
- Shortest path and all simple paths search over any conforming graph
- Edge-list loading and a small command-line front end
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("grapher requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core.graph import Graph, WeightedGraph
from .core.graph_paths import PathFinding
from .core.kinds import Directed, Undirected
from .core.models import Edge, Node

__all__ = [
    "Directed",
    "Edge",
    "Graph",
    "Node",
    "PathFinding",
    "Undirected",
    "WeightedGraph",
]
