"""
Jerarquía de errores de la calculadora.

Todos los errores se capturan en el límite de Commit y se convierten en un
mensaje visible en el display; ninguno debe llegar a la capa de presentación.
"""


class CalculatorError(Exception):
    """Error base de la lógica de la calculadora."""


class EvaluationError(CalculatorError):
    """Fallo genérico al evaluar una expresión (ej: resultado no finito)."""


class TokenizeError(EvaluationError):
    """Carácter no reconocido o número mal formado en la expresión."""

    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position


class ExpressionSyntaxError(EvaluationError):
    """Secuencia de tokens estructuralmente inválida."""


class DivisionByZeroError(EvaluationError):
    """División exacta entre cero."""


class SolverError(CalculatorError):
    """La ecuación cuadrática no produce valores numéricos finitos."""
