"""
Máquina de estados de la calculadora.

Este módulo contiene la clase Calculator, que recibe los eventos de entrada,
los dirige al buffer correcto según el modo y ejecuta el evaluador o el
solver cuadrático al confirmar (Commit).
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from . import events
from .errors import CalculatorError
from .evaluator import evaluate_expression, format_number
from .events import Slot
from .quadratic import format_quadratic_result, solve_coefficients
from .tokenizer import DIGITS, Operator, TrigFunction

logger = logging.getLogger(__name__)

PLACEHOLDER = "0"
EXPRESSION_ERROR = "Error"
SOLVER_ERROR = "Error solving equation"


class Mode(Enum):
    EXPRESSION = "expression"
    EQUATION = "equation"


# ============================================================================
# SNAPSHOTS DE ESTADO (solo lectura para la capa de presentación)
# ============================================================================
@dataclass(frozen=True)
class ExpressionState:
    display_text: str = PLACEHOLDER
    mode = Mode.EXPRESSION


@dataclass(frozen=True)
class EquationState:
    display_text: str
    coefficients: MappingProxyType = field(hash=False)
    active_slot: Slot = Slot.A
    mode = Mode.EQUATION


# ============================================================================
# CLASE: Calculator
# Propósito: Máquina de estados de la calculadora
# Responsabilidades:
#   - Dirigir cada tecla al display (modo expresión) o al coeficiente activo
#     (modo ecuación)
#   - Alternar modo y foco sin perder lo escrito
#   - Evaluar / resolver al confirmar y mostrar resultado o mensaje de error
# ============================================================================
class Calculator:
    """
    Calculadora de expresiones con modo de ecuación cuadrática.

    Modelo de operación:
        1. Modo expresión: las teclas se acumulan en display_text
           (ej: "sin(2)×3") y Commit lo reemplaza por el resultado
        2. Modo ecuación: las teclas van al coeficiente activo (a, b o c)
           y Commit muestra las raíces en display_text
        3. ToggleMode alterna entre ambos conservando los buffers

    Variables de estado:
        - mode: Modo actual
        - display_text: Texto del display principal (compartido por ambos modos)
        - coefficients: Texto libre de a, b, c
        - active_slot: Coeficiente que recibe la entrada en modo ecuación
    """

    def __init__(self):
        """Inicializa la calculadora con los valores por defecto de la sesión."""
        self.mode = Mode.EXPRESSION
        self.display_text = PLACEHOLDER
        self.coefficients = {slot: "" for slot in Slot}
        self.active_slot = Slot.A

        self._handlers = {
            events.PressDigit: lambda e: self.press_digit(e.digit),
            events.PressDecimalPoint: lambda e: self.press_decimal_point(),
            events.PressOperator: lambda e: self.press_operator(e.operator),
            events.PressFunction: lambda e: self.press_function(e.function),
            events.PressOpenParen: lambda e: self.press_open_paren(),
            events.PressCloseParen: lambda e: self.press_close_paren(),
            events.Clear: lambda e: self.clear(),
            events.Delete: lambda e: self.delete(),
            events.ToggleMode: lambda e: self.toggle_mode(),
            events.CycleFocus: lambda e: self.cycle_focus(),
            events.FocusSlot: lambda e: self.focus_slot(e.slot),
            events.Commit: lambda e: self.commit(),
        }

    # ========================================================================
    # BUFFER ACTIVO
    # ========================================================================
    def _target(self):
        if self.mode is Mode.EXPRESSION:
            return self.display_text
        return self.coefficients[self.active_slot]

    def _set_target(self, text):
        if self.mode is Mode.EXPRESSION:
            self.display_text = text
        else:
            self.coefficients[self.active_slot] = text

    def _append(self, text, replace_placeholder=False):
        """
        Añade texto al buffer activo.

        Con replace_placeholder, un display igual a "0" en modo expresión se
        sustituye en lugar de concatenar ("0" + "7" → "7").
        """
        current = self._target()
        if (replace_placeholder and self.mode is Mode.EXPRESSION
                and current == PLACEHOLDER):
            current = ""
        self._set_target(current + text)

    # ========================================================================
    # EVENTOS DE ENTRADA
    # ========================================================================
    def press_digit(self, digit):
        """
        Añade un dígito al buffer activo.

        Args:
            digit (int | str): Dígito 0-9

        Raises:
            ValueError: Si no es un único dígito
        """
        digit = str(digit)
        if len(digit) != 1 or digit not in DIGITS:
            raise ValueError(f"Dígito inválido: {digit!r}")
        self._append(digit, replace_placeholder=True)

    def press_decimal_point(self):
        """Añade "." (el display "0" pasa a "0.")."""
        self._append(".")

    def press_operator(self, operator):
        """
        Añade el glifo del operador; la validación se hace al evaluar.

        Args:
            operator (Operator): Operador (también se acepta su glifo)
        """
        self._append(Operator(operator).glyph)

    def press_function(self, function):
        """Añade "sin(", "cos(" o "tan(" al buffer activo."""
        function = TrigFunction(function)
        self._append(function.value + "(", replace_placeholder=True)

    def press_open_paren(self):
        # Los paréntesis no tienen sentido dentro de un coeficiente
        if self.mode is Mode.EXPRESSION:
            self._append("(", replace_placeholder=True)

    def press_close_paren(self):
        if self.mode is Mode.EXPRESSION:
            self._append(")")

    def clear(self):
        """
        Borra el buffer del modo actual (C = Clear).

        - Modo expresión: display_text vuelve a "0"
        - Modo ecuación: a, b y c vuelven a vacío
        No cambia ni el modo ni el foco.
        """
        if self.mode is Mode.EXPRESSION:
            self.display_text = PLACEHOLDER
        else:
            self.coefficients = {slot: "" for slot in Slot}

    def delete(self):
        """
        Borra el último carácter del buffer activo (← = Backspace).

        En modo expresión el display nunca queda vacío: vuelve a "0".
        """
        remaining = self._target()[:-1]
        if self.mode is Mode.EXPRESSION and not remaining:
            remaining = PLACEHOLDER
        self._set_target(remaining)

    def toggle_mode(self):
        """Alterna entre modo expresión y modo ecuación sin borrar nada."""
        if self.mode is Mode.EXPRESSION:
            self.mode = Mode.EQUATION
        else:
            self.mode = Mode.EXPRESSION
        logger.debug("Modo: %s", self.mode.value)

    def cycle_focus(self):
        """Pasa el foco al siguiente coeficiente (a → b → c → a)."""
        if self.mode is Mode.EQUATION:
            self.active_slot = self.active_slot.next()

    def focus_slot(self, slot):
        if self.mode is Mode.EQUATION:
            self.active_slot = Slot(slot)

    def commit(self):
        """
        Evalúa la expresión o resuelve la ecuación (= Calcular).

        Returns:
            tuple: (éxito: bool, texto mostrado: str)
                - (True, "14"): Expresión evaluada
                - (True, "x = -1.0000"): Ecuación resuelta
                - (False, "Error"): Error al evaluar la expresión
                - (False, "Error solving equation"): Error del solver

        Los errores nunca se propagan: se convierten en el mensaje del
        display. Los coeficientes no se borran tras resolver.
        """
        if self.mode is Mode.EXPRESSION:
            try:
                value = evaluate_expression(self.display_text)
            except CalculatorError as e:
                logger.info("Error al evaluar %r: %s", self.display_text, e)
                self.display_text = EXPRESSION_ERROR
                return False, self.display_text
            self.display_text = format_number(value)
            return True, self.display_text

        a, b, c = (self.coefficients[slot] for slot in Slot)
        try:
            result = solve_coefficients(a, b, c)
        except CalculatorError as e:
            logger.info("Error al resolver a=%r b=%r c=%r: %s", a, b, c, e)
            self.display_text = SOLVER_ERROR
            return False, self.display_text
        self.display_text = format_quadratic_result(result)
        return True, self.display_text

    def handle(self, event):
        """
        Aplica un evento de entrada (ver core.events).

        Returns:
            El valor devuelto por la operación (solo Commit devuelve algo)

        Raises:
            TypeError: Si el evento no es de un tipo conocido
        """
        try:
            handler = self._handlers[type(event)]
        except KeyError:
            raise TypeError(f"Evento desconocido: {event!r}") from None
        return handler(event)

    # ========================================================================
    # LECTURA DE ESTADO
    # ========================================================================
    def snapshot(self):
        """
        Estado de solo lectura para renderizar.

        Returns:
            ExpressionState | EquationState: Según el modo actual; el
            coeficiente activo solo existe en EquationState.
        """
        if self.mode is Mode.EXPRESSION:
            return ExpressionState(self.display_text)
        return EquationState(
            self.display_text,
            MappingProxyType(dict(self.coefficients)),
            self.active_slot,
        )
