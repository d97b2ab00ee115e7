"""
Plain-text edge-list loading.

An edge list holds one edge per line as whitespace-separated columns:
``source target`` for unweighted graphs and ``source target weight`` for
weighted ones. Blank lines and lines starting with the comment prefix are
skipped. The loader only produces the ordered tuples; building the graph is
done by the facades' bulk constructors.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Tuple, Union

from .exceptions import ValidationError
from .graph import Graph, WeightedGraph
from .kinds import Directed, Undirected

logger = logging.getLogger(__name__)

DEFAULT_COMMENT_PREFIX = "#"


def parse_edge_list(
    lines: Iterable[str],
    weighted: bool = False,
    value_type: Callable[[str], object] = int,
    weight_type: Callable[[str], object] = float,
    comment_prefix: str = DEFAULT_COMMENT_PREFIX,
) -> Iterator[Tuple]:
    """
    Parse edge-list lines into tuples.

    Args:
        lines: Text lines, with or without trailing newlines
        weighted: Expect a third weight column
        value_type: Converter applied to the node columns
        weight_type: Converter applied to the weight column
        comment_prefix: Lines starting with this are ignored

    Yields:
        ``(source, target)`` or ``(source, target, weight)`` tuples in line order

    Raises:
        ValidationError: If a line has the wrong number of columns or a column
            cannot be converted
    """
    expected = 3 if weighted else 2
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(comment_prefix):
            continue

        columns = stripped.split()
        if len(columns) != expected:
            raise ValidationError(
                f"Line {line_number}: expected {expected} columns, got {len(columns)}"
            )

        try:
            source, target = value_type(columns[0]), value_type(columns[1])
            if weighted:
                yield source, target, weight_type(columns[2])
            else:
                yield source, target
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Line {line_number}: {e}")


def load_edge_list(path: Union[str, Path], weighted: bool = False, **kwargs) -> List[Tuple]:
    """Read an edge-list file into a list of tuples.

    Keyword arguments are passed on to ``parse_edge_list``.
    """
    with open(path, "r", encoding="utf-8") as f:
        edges = list(parse_edge_list(f, weighted=weighted, **kwargs))
    logger.debug("Loaded %d edges from %s", len(edges), path)
    return edges


def load_graph(
    path: Union[str, Path], undirected: bool = False, weighted: bool = False, **kwargs
) -> Graph:
    """Load an edge-list file straight into a graph facade."""
    edges = load_edge_list(path, weighted=weighted, **kwargs)
    kind = Undirected() if undirected else Directed()
    if weighted:
        return WeightedGraph.from_triples(edges, kind)
    return Graph.from_pairs(edges, kind)
