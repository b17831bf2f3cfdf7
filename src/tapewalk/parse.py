"""Parser for the map text format.

    LLR

    AAA = (BBB, BBB)
    BBB = (AAA, ZZZ)
    ZZZ = (ZZZ, ZZZ)

The first non-empty line is the directive tape; every following
non-empty line defines one node and its Left/Right successors.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from tapewalk.core.directive import Directive
from tapewalk.core.graph import TransitionGraph
from tapewalk.core.tape import Tape

_NODE_LINE = re.compile(
    r"^\s*(?P<node>\w+)\s*=\s*\(\s*(?P<left>\w+)\s*,\s*(?P<right>\w+)\s*\)\s*$"
)


class ParseError(ValueError):
    """Raised when map text is malformed."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"{message} on line {line}")
        self.message = message
        self.line = line


@dataclass(frozen=True)
class Puzzle:
    """Parsed tape and graph."""

    tape: Tape
    graph: TransitionGraph[str]


def parse_node_line(line: str) -> tuple[str, str, str] | None:
    """Return ``(node, left, right)`` for ``"AAA = (BBB, CCC)"``, else ``None``."""
    match = _NODE_LINE.match(line)
    if match is None:
        return None
    return match["node"], match["left"], match["right"]


def parse_tape(line: str, *, line_number: int = 1) -> Tape:
    try:
        return Tape(Directive.from_char(char) for char in line.strip())
    except ValueError as exc:
        raise ParseError(str(exc), line_number) from exc


def parse_puzzle(text: str) -> Puzzle:
    """Parse map text into a ``Puzzle``.

    Raises:
        ParseError: Missing tape line, bad directive character, or a
            malformed node line.
        DuplicateNodeError: A node is defined twice.
    """
    lines = iter(enumerate(text.splitlines(), start=1))

    tape: Tape | None = None
    for line_number, line in lines:
        if line.strip():
            tape = parse_tape(line, line_number=line_number)
            break
    if tape is None:
        raise ParseError("Missing directive line", 1)

    graph = TransitionGraph.from_triples(_node_triples(lines))
    return Puzzle(tape=tape, graph=graph)


def _node_triples(lines: Iterator[tuple[int, str]]) -> Iterator[tuple[str, str, str]]:
    for line_number, line in lines:
        if not line.strip():
            continue
        triple = parse_node_line(line)
        if triple is None:
            raise ParseError(f"Malformed node line {line.strip()!r}", line_number)
        yield triple
