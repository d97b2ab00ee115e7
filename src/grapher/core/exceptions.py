"""
Custom exceptions for the graph library.

This module defines the hierarchy of exceptions raised by the storage engine,
the graph facades, the path finders and the edge-list loader. Each exception
type corresponds to a category of caller error; "not found" results such as a
missing path or an unmatched value are returned as ``None`` and never raised.
"""


class ValidationError(Exception):
    """
    Raised when input data fails validation.

    Examples:
        * Edge-list line with the wrong number of columns
        * Token that cannot be converted to the requested value type
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown log level name in the environment
        * Empty comment prefix for the edge-list loader
    """


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when an operation on a graph cannot complete,
    such as a topology that falls out of lockstep with its values or an
    iteration invalidated by mutation.

    Examples:
        * Graph kind returning an unexpected node id
        * Negative weight met during shortest path search
        * Mutation while an iterator is alive
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ConcurrentModificationError(GraphOperationError):
    """Raised when a graph is mutated while one of its iterators is alive."""


class NegativeWeightError(GraphOperationError):
    """Raised when a negative distance increment is met during a search."""


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node not found
        * Edge not found
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a node reference is invalid.

    A node is invalid when its uid is not below the graph's node count, which
    covers the null sentinel and nodes taken from a larger graph.
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """Raised when an edge uid has no recorded weight or topology entry."""


class InvalidOperationError(Exception):
    """
    Raised when an operation is invalid in the current context.

    Examples:
        * Adding an explicit edge to a graph kind that derives its own edges
    """
