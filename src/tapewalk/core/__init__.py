"""Tape-driven walks over two-successor graphs.

A tape of Left/Right directives is replayed cyclically to move one or
more tokens through a graph whose nodes each have exactly two ordered
successors. Per-token cycle lengths combine by LCM into the step at
which all tokens accept together.
"""

from tapewalk.core.combine import combine, gcd
from tapewalk.core.cycles import CycleRecord, analyze_token, analyze_tokens, synchronized_steps
from tapewalk.core.directive import Directive
from tapewalk.core.errors import (
    DuplicateNodeError,
    EmptyInputError,
    EmptyTapeError,
    MissingNodeError,
    NonTerminatingError,
    UnsupportedCycleStructureError,
)
from tapewalk.core.graph import TransitionGraph
from tapewalk.core.state import WalkState
from tapewalk.core.tape import Tape
from tapewalk.core.walker import Walker

__all__ = [
    "Directive",
    "Tape",
    "TransitionGraph",
    "WalkState",
    "Walker",
    "CycleRecord",
    "analyze_token",
    "analyze_tokens",
    "synchronized_steps",
    "combine",
    "gcd",
    # Errors
    "DuplicateNodeError",
    "EmptyInputError",
    "EmptyTapeError",
    "MissingNodeError",
    "NonTerminatingError",
    "UnsupportedCycleStructureError",
]
