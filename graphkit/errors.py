"""Exception types raised by graphkit structures and algorithms.

Only structural problems are raised. Expected non-results (no path, cyclic
input to a topological sort, a negative cycle) are reported through sentinel
return values instead.
"""


class VertexNotFoundError(KeyError):
    """An operation referenced a vertex that is absent from the structure."""


class InvalidStateError(ValueError):
    """An operation is undefined for the current state of its input.

    Raised when re-adding a vertex to a DisjointSet, when building a spanning
    tree of an empty graph, and when an algorithm receives a graph of the wrong
    kind (directed vs. undirected).
    """
