"""
Tokenizador de expresiones del display.

Convierte el texto mostrado en pantalla (con glifos ×, ÷, −) en una
secuencia de tokens tipados que consume el evaluador.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .errors import TokenizeError

logger = logging.getLogger(__name__)


class Operator(Enum):
    """Operadores binarios con su glifo de display."""

    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def glyph(self):
        return self.value


class TrigFunction(Enum):
    """Funciones trigonométricas disponibles (argumento en radianes)."""

    SIN = "sin"
    COS = "cos"
    TAN = "tan"


# Glifos de display y alias ASCII (teclado, resultados negativos "-5")
GLYPHS = {
    "+": Operator.ADD,
    "−": Operator.SUBTRACT,
    "-": Operator.SUBTRACT,
    "×": Operator.MULTIPLY,
    "*": Operator.MULTIPLY,
    "÷": Operator.DIVIDE,
    "/": Operator.DIVIDE,
}

DIGITS = "0123456789"


# ============================================================================
# TIPOS DE TOKEN
# ============================================================================
@dataclass(frozen=True)
class NumberToken:
    value: float


@dataclass(frozen=True)
class OperatorToken:
    operator: Operator


@dataclass(frozen=True)
class FunctionToken:
    function: TrigFunction


@dataclass(frozen=True)
class LeftParen:
    pass


@dataclass(frozen=True)
class RightParen:
    pass


def tokenize(text):
    """
    Convierte una expresión del display en una lista de tokens.

    Args:
        text (str): Expresión tal como se muestra (ej: "sin(2)×3−1")

    Returns:
        list: Tokens en orden de izquierda a derecha

    Raises:
        TokenizeError: Carácter desconocido, dos puntos decimales en un
            mismo número, número sin dígitos, o función sin "(".

    Nota:
        "sin(" produce FunctionToken seguido de LeftParen; el "(" literal
        no se emite dos veces.
    """
    tokens = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        # Números: secuencia máxima de dígitos con un único punto
        if ch in DIGITS or ch == ".":
            start = i
            seen_point = False
            while i < n and (text[i] in DIGITS or text[i] == "."):
                if text[i] == ".":
                    if seen_point:
                        raise TokenizeError(
                            f"Segundo punto decimal en posición {i}", i)
                    seen_point = True
                i += 1
            literal = text[start:i]
            if literal == ".":
                raise TokenizeError(f"Número sin dígitos en posición {start}", start)
            tokens.append(NumberToken(float(literal)))
            continue

        if ch in GLYPHS:
            tokens.append(OperatorToken(GLYPHS[ch]))
            i += 1
            continue

        if ch == "(":
            tokens.append(LeftParen())
            i += 1
            continue

        if ch == ")":
            tokens.append(RightParen())
            i += 1
            continue

        # Funciones: el nombre debe ir seguido inmediatamente de "("
        for function in TrigFunction:
            name = function.value
            if text.startswith(name, i):
                if not text.startswith("(", i + len(name)):
                    raise TokenizeError(f"Falta '(' tras '{name}'", i)
                tokens.append(FunctionToken(function))
                tokens.append(LeftParen())
                i += len(name) + 1
                break
        else:
            raise TokenizeError(f"Carácter no reconocido {ch!r} en posición {i}", i)

    logger.debug("Tokenizado %r -> %d tokens", text, len(tokens))
    return tokens
