"""
Eventos de entrada que la capa de presentación envía a la calculadora.
"""

from dataclasses import dataclass
from enum import Enum

from .tokenizer import Operator, TrigFunction


class Slot(Enum):
    """Campos de coeficiente del modo ecuación, en orden de foco."""

    A = "a"
    B = "b"
    C = "c"

    def next(self):
        order = list(Slot)
        return order[(order.index(self) + 1) % len(order)]


@dataclass(frozen=True)
class PressDigit:
    digit: str


@dataclass(frozen=True)
class PressDecimalPoint:
    pass


@dataclass(frozen=True)
class PressOperator:
    operator: Operator


@dataclass(frozen=True)
class PressFunction:
    function: TrigFunction


@dataclass(frozen=True)
class PressOpenParen:
    pass


@dataclass(frozen=True)
class PressCloseParen:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Delete:
    pass


@dataclass(frozen=True)
class ToggleMode:
    pass


@dataclass(frozen=True)
class CycleFocus:
    pass


@dataclass(frozen=True)
class FocusSlot:
    slot: Slot


@dataclass(frozen=True)
class Commit:
    pass
