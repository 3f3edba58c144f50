"""Operations that label resource and recipe transitions."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class Operation(ABC):
    """Anything that carries an operation name."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The operation's name."""


@dataclass(frozen=True)
class Observable(Operation):
    """An observable operation within a resource, such as engrave or join."""

    name: str = ""


@dataclass(frozen=True)
class Guard(Operation):
    """A guard operation that must hold before a recipe transition fires."""

    name: str = ""


@dataclass(frozen=True)
class Nop(Operation):
    """The no-operation."""

    name: str = field(default="nop", init=False)


class TransferType(enum.Enum):
    """Direction of a transfer between resources."""

    IN = 0
    OUT = 1


@dataclass(frozen=True)
class TransferOperation(Operation):
    """A synchronisation operation of the form ``in:n`` or ``out:n``."""

    type: TransferType
    n: int

    @property
    def name(self) -> str:
        prefix = "in:" if self.type is TransferType.IN else "out:"
        return f"{prefix}{self.n}"

    def inverse(self) -> TransferOperation:
        """Return the matching operation in the other direction."""
        other = TransferType.OUT if self.type is TransferType.IN else TransferType.IN
        return TransferOperation(other, self.n)

    def is_in(self) -> bool:
        return self.type is TransferType.IN

    def is_out(self) -> bool:
        return not self.is_in()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TransferOperation):
            return NotImplemented
        return self.type.value + self.n < other.type.value + other.n

    def __hash__(self) -> int:
        return self.n + self.type.value


@dataclass
class TaskExpression:
    """An operation together with its input part set and output parts."""

    operation: Observable = field(default_factory=Observable)
    input: set[str] = field(default_factory=set)
    output: list[str] = field(default_factory=list)