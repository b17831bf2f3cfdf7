"""Transition graph where every node has exactly two ordered successors."""

from __future__ import annotations

import warnings
from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, TypeVar

from pyrsistent import PMap, pmap

from tapewalk.core.directive import Directive
from tapewalk.core.errors import DuplicateNodeError, MissingNodeError

N = TypeVar("N", bound=Hashable)


class TransitionGraph(Generic[N]):
    """Immutable mapping ``node -> (left, right)``.

    The pair is a fixed two-element tuple, so Left/Right dispatch is a
    constant-time index and no node can carry extra edges.

    Attributes:
        edges: Persistent mapping of node to its ``(left, right)`` pair.
    """

    __slots__ = ("_edges",)

    def __init__(self, edges: PMap | None = None) -> None:
        self._edges: PMap = edges if edges is not None else pmap()

    @classmethod
    def from_triples(cls, triples: Iterable[tuple[N, N, N]]) -> TransitionGraph[N]:
        """Build a graph from ``(node, left, right)`` triples.

        Raises:
            DuplicateNodeError: A node key appears more than once.
        """
        pairs: dict[N, tuple[N, N]] = {}
        for node, left, right in triples:
            if node in pairs:
                raise DuplicateNodeError(node)
            pairs[node] = (left, right)
        edges = pmap(pairs)

        dangling = sorted(
            {repr(succ) for pair in edges.values() for succ in pair if succ not in edges}
        )
        if dangling:
            warnings.warn(
                f"Successors without their own entry: {', '.join(dangling)}. "
                "Walks that reach them will fail.",
                UserWarning,
                stacklevel=2,
            )
        return cls(edges)

    @property
    def edges(self) -> PMap:
        return self._edges

    @property
    def nodes(self) -> frozenset[N]:
        """All nodes with a registered successor pair."""
        return frozenset(self._edges.keys())

    def successors(self, node: N) -> tuple[N, N]:
        """Return the ``(left, right)`` pair for ``node``."""
        try:
            return self._edges[node]
        except KeyError as exc:
            raise MissingNodeError(node) from exc

    def step(self, node: N, directive: Directive) -> N:
        """Return the successor of ``node`` chosen by ``directive``."""
        return directive.select(self.successors(node))

    def __contains__(self, node: object) -> bool:
        return node in self._edges

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[N]:
        return iter(self._edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransitionGraph):
            return NotImplemented
        return self._edges == other._edges

    def __hash__(self) -> int:
        return hash(self._edges)

    def __repr__(self) -> str:
        return f"TransitionGraph({len(self._edges)} nodes)"
