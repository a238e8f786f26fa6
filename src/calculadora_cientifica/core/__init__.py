"""
Módulo core con la lógica principal de la calculadora.
Contiene el tokenizador, el evaluador, el solver cuadrático y la máquina
de estados que los coordina.
"""

from .calculator import Calculator, EquationState, ExpressionState, Mode
from .errors import (
    CalculatorError,
    DivisionByZeroError,
    EvaluationError,
    ExpressionSyntaxError,
    SolverError,
    TokenizeError,
)
from .evaluator import evaluate_expression, format_number
from .events import Slot
from .quadratic import format_quadratic_result, solve_coefficients, solve_quadratic
from .tokenizer import Operator, TrigFunction, tokenize

__all__ = [
    'Calculator', 'EquationState', 'ExpressionState', 'Mode', 'Slot',
    'Operator', 'TrigFunction',
    'CalculatorError', 'EvaluationError', 'TokenizeError',
    'ExpressionSyntaxError', 'DivisionByZeroError', 'SolverError',
    'tokenize', 'evaluate_expression', 'format_number',
    'solve_quadratic', 'solve_coefficients', 'format_quadratic_result',
]
