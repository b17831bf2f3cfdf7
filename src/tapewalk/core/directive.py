"""Binary directives consumed one per walk step."""

from enum import Enum
from typing import TypeVar

T = TypeVar("T")


class Directive(Enum):
    """One choice on the tape.

    LEFT:  follow the first successor of the current node.
    RIGHT: follow the second successor of the current node.
    """

    LEFT = "L"
    RIGHT = "R"

    @classmethod
    def from_char(cls, char: str) -> "Directive":
        """Return the directive for ``"L"`` or ``"R"``."""
        match char:
            case "L":
                return cls.LEFT
            case "R":
                return cls.RIGHT
            case _:
                raise ValueError(f"Invalid directive character: {char!r}")

    def select(self, pair: tuple[T, T]) -> T:
        """Pick the element of a ``(left, right)`` pair this directive names."""
        return pair[0] if self is Directive.LEFT else pair[1]
