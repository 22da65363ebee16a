"""Helpers shared by the graph algorithms."""

from __future__ import annotations

from graphkit.errors import InvalidStateError
from graphkit.graph.graph import Graph, GraphKind


def require_kind(graph: Graph, kind: GraphKind, algorithm: str) -> None:
    """Raise if ``graph`` is not of the kind ``algorithm`` is defined for.

    Raises:
        InvalidStateError: On a kind mismatch.
    """
    if graph.kind != kind:
        raise InvalidStateError(
            f"{algorithm} requires a {kind.name.lower()} graph, "
            f"got a {graph.kind.name.lower()} one."
        )
