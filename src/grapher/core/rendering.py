"""
Debug rendering of graph facades.

The rendered form lists every node in id order as ``value[n1,n2,...]`` where
the neighbour values follow edge insertion order. Weighted graphs append
``(weight)`` after each neighbour value. With ``pretty`` each node segment is
followed by a newline, otherwise segments are concatenated:

    >>> render(Graph.from_pairs([(1, 2), (2, 3), (3, 0), (1, 0)]))
    '1[2,0]2[3]3[0]0[]'
"""

from typing import Any, List


def render(graph: Any, pretty: bool = False) -> str:
    """
    Render a graph facade as text.

    Args:
        graph: Graph or WeightedGraph to render
        pretty: Put each node on its own line

    Returns:
        The rendered graph
    """
    separator = "\n" if pretty else ""
    segments: List[str] = []
    for node in graph.nodes():
        neighbours = []
        for edge in graph.get_neighbour_edges(node):
            text = str(graph[edge.target])
            if graph.weighted:
                text += f"({graph.get_weight(edge)})"
            neighbours.append(text)
        segments.append(f"{graph[node]}[{','.join(neighbours)}]{separator}")
    return "".join(segments)
