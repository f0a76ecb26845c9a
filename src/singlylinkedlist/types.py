"""Type definitions for singlylinkedlist."""

import enum
from typing import Final, Literal, TypeAlias, TypeVar

# Generic type variable for stored values
V = TypeVar("V")


class NoValue(enum.Enum):
    """Marker returned by get(), pop() and shift() when there is nothing to return."""

    NO_VALUE = "NO_VALUE"

    def __repr__(self) -> str:
        return self.name

    def __bool__(self) -> bool:
        return False


NO_VALUE: Final = NoValue.NO_VALUE

# Lets type checkers narrow ``result is NO_VALUE`` checks
NoValueType: TypeAlias = Literal[NoValue.NO_VALUE]
