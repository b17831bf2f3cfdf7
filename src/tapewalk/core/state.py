"""Immutable walk state.

One snapshot holds every token's current node and the shared step
counter. Advancing produces a new snapshot; the previous one is
unchanged.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TYPE_CHECKING, cast

from pyrsistent import PRecord, PVector, field, pvector

from tapewalk.core.directive import Directive

if TYPE_CHECKING:
    from tapewalk.core.graph import TransitionGraph


class WalkState(PRecord):
    """Positions of all tokens after ``steps`` directives.

    Attributes:
        steps: Directives applied so far. Never decreases.
        positions: Current node per token, in start order.
    """

    steps = field(type=int, initial=0, invariant=lambda v: (v >= 0, "steps must be >= 0"))
    positions = field(type=PVector, initial=pvector())

    @classmethod
    def start(cls, nodes: Iterable[Hashable]) -> WalkState:
        """Return the state before any directive has been applied."""
        return cls(steps=0, positions=pvector(nodes))

    def advance(self, graph: TransitionGraph, directive: Directive) -> WalkState:
        """Move every token one edge along ``directive``."""
        e = self.evolver()
        e.set("positions", pvector(graph.step(node, directive) for node in self.positions))
        e.set("steps", self.steps + 1)
        return cast(WalkState, e.persistent())

    def as_tuple(self) -> tuple[Hashable, ...]:
        return tuple(self.positions)
