"""tapewalk - cyclic-tape walks over two-successor graphs."""

from tapewalk.core import (
    CycleRecord,
    Directive,
    DuplicateNodeError,
    EmptyInputError,
    EmptyTapeError,
    MissingNodeError,
    NonTerminatingError,
    Tape,
    TransitionGraph,
    UnsupportedCycleStructureError,
    Walker,
    WalkState,
    analyze_token,
    analyze_tokens,
    combine,
    gcd,
    synchronized_steps,
)
from tapewalk.parse import ParseError, Puzzle, parse_puzzle

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
    # Parsing
    "ParseError",
    "Puzzle",
    "parse_puzzle",
    # Errors
    "DuplicateNodeError",
    "EmptyInputError",
    "EmptyTapeError",
    "MissingNodeError",
    "NonTerminatingError",
    "UnsupportedCycleStructureError",
]
