"""Command Line Interface for the graph library.

This module loads plain-text edge lists and runs the library's operations on
them. Node values are read as integers; weights, when ``--weighted`` is given,
as floats.

The CLI supports the following commands:
    - show: Print the rendered graph, one node per line
    - shortest: Print a shortest path between two node values
    - paths: Print every simple path between two node values
    - bench: Time graph construction, inversion and a neighbour scan

Example Usage:
    grapher show data/edges.txt
    grapher shortest --undirected data/edges.txt 0 42
    python -m grapher bench data/facebook_combined.txt
"""

import argparse
import logging
import os
import sys
import time
from typing import List, Optional

import psutil

from .config import Settings, configure_logging
from .core.exceptions import ConfigurationError, ValidationError
from .core.graph import Graph
from .core.graph_paths import PathFinding
from .core.kinds import Directed, Undirected
from .core.loader import load_edge_list, load_graph
from .core.models import Node

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """Raised when a command cannot run on the given input."""


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("file", help="Edge-list file, one 'source target [weight]' per line")
    common.add_argument("--undirected", action="store_true", help="Treat edges as undirected")
    common.add_argument("--weighted", action="store_true", help="Read a third weight column")
    common.add_argument("--log-level", help="Logging level, overrides GRAPHER_LOG_LEVEL")

    parser = argparse.ArgumentParser(prog="grapher", description="Graph path finding CLI")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("show", parents=[common], help="Print the graph")

    shortest = subparsers.add_parser("shortest", parents=[common], help="Find a shortest path")
    shortest.add_argument("source", type=int, help="Value of the start node")
    shortest.add_argument("target", type=int, help="Value of the end node")

    paths = subparsers.add_parser("paths", parents=[common], help="Find all simple paths")
    paths.add_argument("source", type=int, help="Value of the start node")
    paths.add_argument("target", type=int, help="Value of the end node")
    paths.add_argument("--max-paths", type=int, help="Stop after this many paths")

    subparsers.add_parser("bench", parents=[common], help="Benchmark graph operations")

    return parser


def find_node(graph: Graph, value: int) -> Node:
    """Look up the node holding ``value``."""
    node = graph.find_node_with_value(value)
    if node is None:
        raise CommandError(f"No node with value {value}")
    return node


def format_path(graph: Graph, path: List[Node]) -> str:
    """Format a node path as its values joined by arrows."""
    return " -> ".join(str(graph[node]) for node in path)


def run_show(args: argparse.Namespace, settings: Settings) -> None:
    graph = load_graph(
        args.file, args.undirected, args.weighted, comment_prefix=settings.comment_prefix
    )
    print(graph, end="")


def run_shortest(args: argparse.Namespace, settings: Settings) -> None:
    graph = load_graph(
        args.file, args.undirected, args.weighted, comment_prefix=settings.comment_prefix
    )
    path = PathFinding.find_shortest_path(
        graph, find_node(graph, args.source), find_node(graph, args.target)
    )
    if path is None:
        print(f"No path from {args.source} to {args.target}")
    else:
        print(format_path(graph, path))


def run_paths(args: argparse.Namespace, settings: Settings) -> None:
    graph = load_graph(
        args.file, args.undirected, args.weighted, comment_prefix=settings.comment_prefix
    )
    paths = PathFinding.find_all_paths(
        graph,
        find_node(graph, args.source),
        find_node(graph, args.target),
        max_paths=args.max_paths,
    )
    for path in paths:
        print(format_path(graph, path))
    print(f"{len(paths)} path(s) found")


def run_bench(args: argparse.Namespace, settings: Settings) -> None:
    """Reproduce the construction, inversion and neighbour-scan benchmark."""
    start_memory = get_memory_usage()
    edges = load_edge_list(args.file, weighted=False, comment_prefix=settings.comment_prefix)

    start = time.perf_counter()
    graph = Graph.from_pairs(edges, Undirected() if args.undirected else Directed())
    print(f"Graph.from_pairs: {(time.perf_counter() - start) * 1000:.1f}ms")

    start = time.perf_counter()
    inverse: Graph = Graph.directed()
    for node in graph.nodes():
        inverse.add_node(graph[node])
    for edge in graph.edges():
        inverse.add_edge(edge.target, edge.source)
    print(f"Inverting graph: {(time.perf_counter() - start) * 1000:.1f}ms")

    start = time.perf_counter()
    isolated = sum(
        1
        for node in graph.nodes()
        if graph.get_degree(node) == 0 and inverse.get_degree(node) == 0
    )
    print(f"Checking neighbour counts: {(time.perf_counter() - start) * 1000:.1f}ms")

    used_mb = (get_memory_usage() - start_memory) / 1024 / 1024
    print(f"Nodes: {len(graph)}, edges: {graph.edge_count}, isolated nodes: {isolated}")
    print(f"Memory used: {used_mb:.1f}MB")


COMMANDS = {
    "show": run_show,
    "shortest": run_shortest,
    "paths": run_paths,
    "bench": run_bench,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Process exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        settings = Settings.from_env()
        if args.log_level:
            settings = Settings(log_level=args.log_level, comment_prefix=settings.comment_prefix)
        configure_logging(settings)
        logger.debug("Running %s on %s", args.command, args.file)
        COMMANDS[args.command](args, settings)
    except (CommandError, ConfigurationError, ValidationError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
