"""Tape-driven walks over a transition graph.

A walk repeatedly tests a predicate and, while it fails, moves every
token one edge using the tape entry at the current absolute step. The
single-token walk is the one-element case of the synchronized walk, so
both share one stepping rule and one counter.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Generic, TypeVar

from tapewalk.core.errors import NonTerminatingError
from tapewalk.core.graph import TransitionGraph
from tapewalk.core.state import WalkState
from tapewalk.core.tape import Tape

N = TypeVar("N", bound=Hashable)


class Walker(Generic[N]):
    """Walks tokens over ``graph`` by replaying ``tape``.

    Args:
        graph: Successor pairs for every reachable node.
        tape: Directives replayed cyclically.
        max_steps: Optional cap per walk. Exceeding it raises
            ``NonTerminatingError``. ``None`` walks until the predicate
            holds, which may never happen on a malformed input.
    """

    def __init__(
        self,
        graph: TransitionGraph[N],
        tape: Tape,
        *,
        max_steps: int | None = None,
    ) -> None:
        if max_steps is not None and max_steps < 0:
            raise ValueError("max_steps must be >= 0 or None")
        self._graph = graph
        self._tape = tape
        self._max_steps = max_steps

    @property
    def graph(self) -> TransitionGraph[N]:
        return self._graph

    @property
    def tape(self) -> Tape:
        return self._tape

    @property
    def max_steps(self) -> int | None:
        return self._max_steps

    def walk_until(
        self,
        start: N,
        accept: Callable[[N], bool],
        *,
        min_steps: int = 0,
        offset: int = 0,
    ) -> tuple[int, N]:
        """Walk one token until ``accept`` holds for its node.

        Args:
            start: Node the token starts on.
            accept: Acceptance predicate for a single node.
            min_steps: Steps taken before the predicate is first tested.
                ``1`` forces the token to leave ``start`` even if it is
                already accepting.
            offset: Absolute tape position of the first step, for
                continuing an earlier trajectory.

        Returns:
            ``(steps, end_node)`` where ``steps`` counts directives
            applied by this call.
        """
        steps, ends = self.walk_until_all(
            (start,),
            lambda positions: accept(positions[0]),
            min_steps=min_steps,
            offset=offset,
        )
        return steps, ends[0]

    def walk_until_all(
        self,
        starts: Sequence[N],
        accept_all: Callable[[tuple[N, ...]], bool],
        *,
        min_steps: int = 0,
        offset: int = 0,
    ) -> tuple[int, tuple[N, ...]]:
        """Walk several tokens in lock-step until ``accept_all`` holds.

        All tokens consume the same tape entry on each step. The
        predicate sees the tuple of current nodes in ``starts`` order.

        Returns:
            ``(steps, end_nodes)``.
        """
        if not starts:
            raise ValueError("At least one start node is required")
        if min_steps < 0:
            raise ValueError("min_steps must be >= 0")
        if offset < 0:
            raise ValueError("offset must be >= 0")

        state = WalkState.start(starts)
        while True:
            if state.steps >= min_steps:
                positions = state.as_tuple()
                if accept_all(positions):
                    return state.steps, positions
            if self._max_steps is not None and state.steps >= self._max_steps:
                raise NonTerminatingError(self._max_steps, state.positions)
            directive = self._tape.directive_at(offset + state.steps)
            state = state.advance(self._graph, directive)

    def count_steps(self, start: N, target: N) -> int:
        """Return the number of steps for ``start`` to first reach ``target``."""
        steps, _ = self.walk_until(start, lambda node: node == target)
        return steps

    def count_simultaneous_steps(self, starts: Sequence[N], targets: Sequence[N]) -> int:
        """Return the first step at which every token sits on its target.

        Token ``i`` must be on ``targets[i]`` at the same step; reaching
        it individually at another step does not count.
        """
        if len(starts) != len(targets):
            raise ValueError(
                f"starts and targets differ in length ({len(starts)} != {len(targets)})"
            )
        wanted = tuple(targets)
        steps, _ = self.walk_until_all(starts, lambda positions: positions == wanted)
        return steps
