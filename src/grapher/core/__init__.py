"""Core graph functionality."""

from .adjacency_list import AdjacencyList
from .exceptions import (
    ConcurrentModificationError,
    ConfigurationError,
    EdgeNotFoundError,
    GraphOperationError,
    InvalidOperationError,
    NegativeWeightError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from .graph import Graph, WeightedGraph
from .graph_paths import AllPathsFinder, PathFinding, PathType, ShortestPathFinder
from .kinds import AdjacencyGraphKind, Directed, Undirected
from .loader import load_edge_list, load_graph, parse_edge_list
from .models import NULL_UID, Connection, Edge, Node
from .rendering import render
from .types import GraphKind, PathFindable

__all__ = [
    "AdjacencyGraphKind",
    "AdjacencyList",
    "AllPathsFinder",
    "ConcurrentModificationError",
    "ConfigurationError",
    "Connection",
    "Directed",
    "Edge",
    "EdgeNotFoundError",
    "Graph",
    "GraphKind",
    "GraphOperationError",
    "InvalidOperationError",
    "NULL_UID",
    "NegativeWeightError",
    "Node",
    "NodeNotFoundError",
    "PathFindable",
    "PathFinding",
    "PathType",
    "ResourceNotFoundError",
    "ShortestPathFinder",
    "Undirected",
    "ValidationError",
    "WeightedGraph",
    "load_edge_list",
    "load_graph",
    "parse_edge_list",
    "render",
]
