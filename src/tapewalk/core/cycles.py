"""Per-token cycle analysis and synchronized answer.

Each token is walked to its first accepting node, then walked again from
that node until it accepts a second time. The token's cycle length is
only trusted when both legs agree and line up with the tape; anything
else is rejected instead of being solved by general cycle detection.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from tapewalk.core.combine import combine
from tapewalk.core.errors import UnsupportedCycleStructureError
from tapewalk.core.walker import Walker

N = TypeVar("N", bound=Hashable)


@dataclass(frozen=True)
class CycleRecord(Generic[N]):
    """Validated cycle of one token."""

    start: N
    steps: int
    node: N


def analyze_token(
    walker: Walker[N], start: N, is_accepting: Callable[[N], bool]
) -> CycleRecord[N]:
    """Return the validated cycle length for the token starting at ``start``.

    Raises:
        UnsupportedCycleStructureError: The second acceptance lands on a
            different node, takes a different number of steps, or the
            cycle is not a whole number of tape passes.
    """
    first_steps, first_node = walker.walk_until(start, is_accepting)
    second_steps, second_node = walker.walk_until(first_node, is_accepting, min_steps=1)

    if second_node != first_node:
        raise UnsupportedCycleStructureError(
            "single_accepting_node",
            f"More than one accepting node on the cycle: found {first_node!r} "
            f"then {second_node!r}",
            start=start,
            observed={"first_node": first_node, "second_node": second_node},
        )
    if second_steps != first_steps:
        raise UnsupportedCycleStructureError(
            "aligned_cycle_length",
            f"Cycle length differs from steps to first acceptance: first after "
            f"{first_steps}, again after {second_steps}",
            start=start,
            observed={"first_steps": first_steps, "second_steps": second_steps},
        )
    tape_length = len(walker.tape)
    if first_steps % tape_length != 0:
        raise UnsupportedCycleStructureError(
            "tape_multiple",
            f"Cycle length {first_steps} is not a multiple of the tape length {tape_length}",
            start=start,
            observed={"first_steps": first_steps, "tape_length": tape_length},
        )

    return CycleRecord(start=start, steps=first_steps, node=first_node)


def analyze_tokens(
    walker: Walker[N], starts: Iterable[N], is_accepting: Callable[[N], bool]
) -> list[CycleRecord[N]]:
    """Analyze every token independently, in ``starts`` order."""
    return [analyze_token(walker, start, is_accepting) for start in starts]


def synchronized_steps(
    walker: Walker[N], starts: Iterable[N], is_accepting: Callable[[N], bool]
) -> int:
    """Return the first step at which every token is on an accepting node.

    Computed from the per-token cycle lengths rather than by walking all
    tokens together, which can take far too many steps.
    """
    records = analyze_tokens(walker, starts, is_accepting)
    return combine([record.steps for record in records])
