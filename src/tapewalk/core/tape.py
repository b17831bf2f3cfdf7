"""Cyclically replayed directive tape."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from tapewalk.core.directive import Directive
from tapewalk.core.errors import EmptyTapeError


class Tape:
    """Immutable, non-empty sequence of directives indexed modulo its length.

    Walks address the tape with absolute step counts; ``directive_at`` is
    the only place wraparound happens.
    """

    __slots__ = ("_directives",)

    def __init__(self, directives: Iterable[Directive]) -> None:
        items = tuple(directives)
        if not items:
            raise EmptyTapeError()
        for item in items:
            if not isinstance(item, Directive):
                raise TypeError(f"Tape entries must be Directive, got {type(item).__name__}")
        self._directives = items

    @classmethod
    def from_str(cls, text: str) -> Tape:
        """Build a tape from directive characters, e.g. ``"LLR"``."""
        return cls(Directive.from_char(char) for char in text)

    def directive_at(self, step_index: int) -> Directive:
        """Return the directive applied at absolute step ``step_index``."""
        if step_index < 0:
            raise ValueError("step_index must be >= 0")
        return self._directives[step_index % len(self._directives)]

    def __len__(self) -> int:
        return len(self._directives)

    def __iter__(self) -> Iterator[Directive]:
        return iter(self._directives)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tape):
            return NotImplemented
        return self._directives == other._directives

    def __hash__(self) -> int:
        return hash(self._directives)

    def __repr__(self) -> str:
        return f"Tape({''.join(d.value for d in self._directives)!r})"
