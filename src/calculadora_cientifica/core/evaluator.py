"""
Evaluador aritmético por descenso recursivo.

Sustituye a eval(): solo acepta la gramática de la calculadora, sin
nombres, llamadas arbitrarias ni atributos.

Gramática (de menor a mayor precedencia):
    expresion := termino (("+" | "−") termino)*
    termino   := unario (("×" | "÷") unario)*
    unario    := ["−"] factor
    factor    := NUMERO | "(" expresion ")" | FUNCION "(" expresion ")"

El menos unario se admite al inicio, tras "(" y tras "+", "×" o "÷";
tras un "−" binario es un error ("5−−3").
"""

import logging
import math

import numpy as np

from .errors import DivisionByZeroError, EvaluationError, ExpressionSyntaxError
from .tokenizer import (
    FunctionToken,
    LeftParen,
    NumberToken,
    Operator,
    OperatorToken,
    RightParen,
    TrigFunction,
    tokenize,
)

logger = logging.getLogger(__name__)

# Niveles de paréntesis anidados; cada nivel consume varios frames de pila
MAX_NESTING = 100

_FUNCTIONS = {
    TrigFunction.SIN: math.sin,
    TrigFunction.COS: math.cos,
    TrigFunction.TAN: math.tan,
}


# ============================================================================
# CLASE: Parser
# Propósito: Recorrer la lista de tokens y calcular el valor
# Responsabilidades:
#   - Respetar precedencia y asociatividad por la izquierda
#   - Aceptar menos unario al inicio, tras "(" y tras + × ÷
#   - Detectar división entre cero, anidamiento excesivo y errores de estructura
# ============================================================================
class Parser:
    """
    Parser/evaluador de una sola pasada sobre una lista de tokens.

    El valor se calcula mientras se analiza; no se construye un árbol.
    """

    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0
        self.depth = 0

    def peek(self):
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self):
        token = self.peek()
        self.pos += 1
        return token

    def parse(self):
        """
        Evalúa la secuencia completa.

        Returns:
            float: Valor de la expresión

        Raises:
            ExpressionSyntaxError: Secuencia vacía o tokens sobrantes
        """
        if not self.tokens:
            raise ExpressionSyntaxError("Expresión vacía")
        value = self.expression()
        if self.peek() is not None:
            raise ExpressionSyntaxError(
                f"Token inesperado en posición {self.pos}: {self.peek()}")
        return value

    def expression(self):
        value = self.term(allow_minus=True)
        while True:
            token = self.peek()
            if not isinstance(token, OperatorToken):
                return value
            if token.operator is Operator.ADD:
                self.advance()
                value = value + self.term(allow_minus=True)
            elif token.operator is Operator.SUBTRACT:
                self.advance()
                # "5−−3": no se admite un segundo menos seguido
                value = value - self.term(allow_minus=False)
            else:
                return value

    def term(self, allow_minus):
        value = self.unary(allow_minus)
        while True:
            token = self.peek()
            if not isinstance(token, OperatorToken):
                return value
            if token.operator is Operator.MULTIPLY:
                self.advance()
                value = value * self.unary(True)
            elif token.operator is Operator.DIVIDE:
                self.advance()
                divisor = self.unary(True)
                if divisor == 0:
                    raise DivisionByZeroError("División entre cero")
                value = value / divisor
            else:
                return value

    def unary(self, allow_minus):
        token = self.peek()
        if (allow_minus and isinstance(token, OperatorToken)
                and token.operator is Operator.SUBTRACT):
            self.advance()
            return -self.factor()
        return self.factor()

    def factor(self):
        token = self.advance()

        if isinstance(token, NumberToken):
            return token.value

        if isinstance(token, LeftParen):
            return self.parenthesized()

        if isinstance(token, FunctionToken):
            # El tokenizador siempre emite "(" tras el nombre de la función
            if not isinstance(self.advance(), LeftParen):
                raise ExpressionSyntaxError(f"Falta '(' tras {token.function.value}")
            argument = self.parenthesized()
            try:
                return _FUNCTIONS[token.function](argument)
            except (ValueError, OverflowError) as e:
                raise EvaluationError(
                    f"{token.function.value}({argument}) no está definido") from e

        if token is None:
            raise ExpressionSyntaxError("Falta un operando al final de la expresión")
        raise ExpressionSyntaxError(f"Se esperaba un operando en posición {self.pos - 1}")

    def parenthesized(self):
        """Evalúa el interior de un paréntesis ya consumido y su cierre."""
        if self.depth >= MAX_NESTING:
            raise ExpressionSyntaxError(
                f"Más de {MAX_NESTING} paréntesis anidados")
        if isinstance(self.peek(), RightParen):
            raise ExpressionSyntaxError("Paréntesis vacío")
        self.depth += 1
        value = self.expression()
        self.depth -= 1
        if not isinstance(self.advance(), RightParen):
            raise ExpressionSyntaxError("Paréntesis sin cerrar")
        return value


def evaluate_tokens(tokens):
    """Evalúa una lista de tokens y comprueba que el resultado sea finito."""
    value = Parser(tokens).parse()
    if not math.isfinite(value):
        raise EvaluationError(f"Resultado no finito: {value}")
    return value


def evaluate_expression(text):
    """
    Tokeniza y evalúa una expresión del display.

    Args:
        text (str): Expresión (ej: "2+3×4")

    Returns:
        float: Resultado (ej: 14.0)

    Raises:
        EvaluationError: O cualquiera de sus subclases
    """
    value = evaluate_tokens(tokenize(text))
    logger.debug("Evaluado %r = %r", text, value)
    return value


def format_number(value):
    """
    Formatea un resultado para el display.

    Usa la representación más corta que reproduce el valor, en notación
    posicional para que el texto se pueda volver a evaluar:
        - 14.0 → "14"
        - 0.1 + 0.2 → "0.30000000000000004"
        - -0.0 → "0"
    """
    return np.format_float_positional(value + 0.0, trim="-")
