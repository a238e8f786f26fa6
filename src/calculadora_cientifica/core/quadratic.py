"""
Resolución de ecuaciones cuadráticas ax² + bx + c = 0.

Los coeficientes llegan como texto libre desde los campos a, b, c y se
interpretan solo al resolver. La comparación del discriminante con cero es
exacta (sin tolerancia).
"""

import logging
import math
import re
from dataclasses import dataclass

from .errors import SolverError

logger = logging.getLogger(__name__)

DEGENERATE_MESSAGE = "Not a quadratic equation (a = 0)"

# Número al inicio del texto; el resto se ignora ("3abc" → 3)
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


# ============================================================================
# RESULTADOS
# ============================================================================
@dataclass(frozen=True)
class Degenerate:
    """a = 0: no es una ecuación cuadrática."""


@dataclass(frozen=True)
class TwoRealRoots:
    x1: float
    x2: float


@dataclass(frozen=True)
class OneRealRoot:
    x: float


@dataclass(frozen=True)
class ComplexRoots:
    real_part: float
    imaginary_part: float


def parse_coefficient(text):
    """
    Interpreta el texto de un coeficiente.

    Args:
        text (str): Contenido del campo (puede estar vacío o mal formado)

    Returns:
        float: Valor del número inicial, 0.0 si no hay ninguno

    Ejemplos:
        "" → 0.0, "−3" → -3.0, "2.5×" → 2.5, "sin(" → 0.0
    """
    match = _LEADING_NUMBER.match(text.replace("−", "-"))
    if not match:
        return 0.0
    return float(match.group(1))


def solve_quadratic(a, b, c):
    """
    Resuelve ax² + bx + c = 0.

    Args:
        a, b, c (float): Coeficientes

    Returns:
        Degenerate | TwoRealRoots | OneRealRoot | ComplexRoots

    Raises:
        SolverError: Si algún coeficiente o resultado no es finito

    Casos:
        - a == 0: Degenerate
        - discriminante > 0: dos raíces reales, x1 con +√d
        - discriminante == 0: raíz doble
        - discriminante < 0: par de raíces complejas conjugadas
    """
    if not all(math.isfinite(v) for v in (a, b, c)):
        raise SolverError(f"Coeficientes no finitos: a={a}, b={b}, c={c}")

    if a == 0:
        return Degenerate()

    discriminant = b * b - 4 * a * c
    if not math.isfinite(discriminant):
        raise SolverError(f"Discriminante no finito: {discriminant}")

    if discriminant > 0:
        root = math.sqrt(discriminant)
        result = TwoRealRoots((-b + root) / (2 * a), (-b - root) / (2 * a))
        values = (result.x1, result.x2)
    elif discriminant == 0:
        result = OneRealRoot(-b / (2 * a))
        values = (result.x,)
    else:
        result = ComplexRoots(-b / (2 * a), math.sqrt(-discriminant) / (2 * a))
        values = (result.real_part, result.imaginary_part)

    if not all(math.isfinite(v) for v in values):
        raise SolverError(f"Raíces no finitas para a={a}, b={b}, c={c}")

    logger.debug("a=%r b=%r c=%r discriminante=%r -> %r", a, b, c, discriminant, result)
    return result


def solve_coefficients(a_text, b_text, c_text):
    """Interpreta los tres campos de texto y resuelve la ecuación."""
    return solve_quadratic(
        parse_coefficient(a_text),
        parse_coefficient(b_text),
        parse_coefficient(c_text),
    )


def _fixed(value):
    # -0.0 se muestra como 0.0000
    return f"{value + 0.0:.4f}"


def format_quadratic_result(result):
    """
    Texto del display para un resultado del solver (4 decimales).

    Ejemplos:
        TwoRealRoots(2, 1) → "x₁ = 2.0000, x₂ = 1.0000"
        OneRealRoot(-1) → "x = -1.0000"
        ComplexRoots(0, 1) → "x₁ = 0.0000 + 1.0000i, x₂ = 0.0000 - 1.0000i"
    """
    if isinstance(result, Degenerate):
        return DEGENERATE_MESSAGE
    if isinstance(result, TwoRealRoots):
        return f"x₁ = {_fixed(result.x1)}, x₂ = {_fixed(result.x2)}"
    if isinstance(result, OneRealRoot):
        return f"x = {_fixed(result.x)}"
    if isinstance(result, ComplexRoots):
        real = _fixed(result.real_part)
        imaginary = _fixed(result.imaginary_part)
        return f"x₁ = {real} + {imaginary}i, x₂ = {real} - {imaginary}i"
    raise TypeError(f"Resultado desconocido: {result!r}")
