"""Exception taxonomy for tape-driven graph walks.

Every error subclasses the builtin that matches its nature, so callers
can catch ``KeyError``/``ValueError``/``RuntimeError`` generically or the
specific type when they need the attached values.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Any


class MissingNodeError(KeyError):
    """Raised when a walk reaches a node with no registered successors."""

    def __init__(self, node: Hashable) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"Node {self.node!r} has no entry in the transition graph"


class EmptyTapeError(ValueError):
    """Raised when a tape is constructed without any directives."""

    def __init__(self) -> None:
        super().__init__("Tape must contain at least one directive")


class DuplicateNodeError(ValueError):
    """Raised when the same node key appears twice during graph construction."""

    def __init__(self, node: Hashable) -> None:
        super().__init__(f"Node {node!r} is defined more than once")
        self.node = node


class EmptyInputError(ValueError):
    """Raised when cycle lengths are combined from an empty sequence."""

    def __init__(self) -> None:
        super().__init__("At least one cycle length is required")


class NonTerminatingError(RuntimeError):
    """Raised when a capped walk exceeds ``max_steps`` without accepting."""

    def __init__(self, max_steps: int, positions: Sequence[Hashable]) -> None:
        super().__init__(
            f"Walk did not accept within {max_steps} steps; "
            f"last positions: {list(positions)!r}"
        )
        self.max_steps = max_steps
        self.positions = tuple(positions)


class UnsupportedCycleStructureError(RuntimeError):
    """Raised when a token's trajectory breaks a periodicity assumption.

    Attributes:
        assumption: Which check failed: ``"single_accepting_node"``,
            ``"aligned_cycle_length"`` or ``"tape_multiple"``.
        start: The token's start node.
        observed: The values that disagreed, keyed by name.
    """

    def __init__(
        self,
        assumption: str,
        message: str,
        *,
        start: Hashable,
        observed: dict[str, Any],
    ) -> None:
        super().__init__(f"{message} (start={start!r})")
        self.assumption = assumption
        self.start = start
        self.observed = dict(observed)
