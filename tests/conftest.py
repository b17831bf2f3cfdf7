"""Pytest configuration and test helpers."""

from collections.abc import Hashable, Mapping

from tapewalk.core import Tape, TransitionGraph, Walker

SIMPLE_MAP = """\
LLR

AAA = (BBB, BBB)
BBB = (AAA, ZZZ)
ZZZ = (ZZZ, ZZZ)
"""

SIMULTANEOUS_MAP = """\
LR

11A = (11B, XXX)
11B = (XXX, 11Z)
11Z = (11B, XXX)
22A = (22B, XXX)
22B = (22C, 22C)
22C = (22Z, 22Z)
22Z = (22B, 22B)
XXX = (XXX, XXX)
"""

ALIGNED_MAP = """\
LR

11A = (11B, XXX)
11B = (XXX, 11Z)
11Z = (11B, XXX)
22A = (22B, 22B)
22B = (22C, 22C)
22C = (22D, 22D)
22D = (22Z, 22Z)
22Z = (22B, 22B)
XXX = (XXX, XXX)
"""


def make_graph(edges: Mapping[Hashable, tuple[Hashable, Hashable]]) -> TransitionGraph:
    """Build a graph from ``{node: (left, right)}``."""
    return TransitionGraph.from_triples(
        (node, left, right) for node, (left, right) in edges.items()
    )


def make_walker(
    edges: Mapping[Hashable, tuple[Hashable, Hashable]],
    tape: str,
    *,
    max_steps: int | None = None,
) -> Walker:
    """Build a walker from ``{node: (left, right)}`` and a tape string like ``"LLR"``.

    Args:
        edges: Successor pair per node.
        tape: Directive characters.
        max_steps: Optional per-walk cap.

    Returns:
        Walker over the graph and tape.
    """
    return Walker(make_graph(edges), Tape.from_str(tape), max_steps=max_steps)
