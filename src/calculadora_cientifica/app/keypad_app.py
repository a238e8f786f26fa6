"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase KeypadCalculatorApp.
"""

import logging

import cv2

from ..config.accessibility import AccessibilityConfig
from ..core import events
from ..core.calculator import Calculator, Mode
from ..core.events import Slot
from ..core.tokenizer import Operator, TrigFunction
from ..ui.renderer import UIRenderer
from ..voice.feedback import VoiceFeedback

logger = logging.getLogger(__name__)

WINDOW_NAME = 'Calculadora'

KEY_ESC = 27
KEY_ENTER = 13
KEY_TAB = 9
KEY_BACKSPACE = (8, 127)

# Tecla (código de cv2.waitKey) → evento de entrada
KEY_BINDINGS = {ord(d): events.PressDigit(d) for d in "0123456789"}
KEY_BINDINGS.update({
    ord('.'): events.PressDecimalPoint(),
    ord('+'): events.PressOperator(Operator.ADD),
    ord('-'): events.PressOperator(Operator.SUBTRACT),
    ord('*'): events.PressOperator(Operator.MULTIPLY),
    ord('/'): events.PressOperator(Operator.DIVIDE),
    ord('('): events.PressOpenParen(),
    ord(')'): events.PressCloseParen(),
    ord('s'): events.PressFunction(TrigFunction.SIN),
    ord('c'): events.PressFunction(TrigFunction.COS),
    ord('t'): events.PressFunction(TrigFunction.TAN),
    ord('x'): events.Clear(),
    ord('m'): events.ToggleMode(),
    KEY_TAB: events.CycleFocus(),
    ord('A'): events.FocusSlot(Slot.A),
    ord('B'): events.FocusSlot(Slot.B),
    ord('C'): events.FocusSlot(Slot.C),
    KEY_ENTER: events.Commit(),
    ord('\n'): events.Commit(),
    ord('='): events.Commit(),
})
for _code in KEY_BACKSPACE:
    KEY_BINDINGS[_code] = events.Delete()


def key_label(event):
    """Texto que representa la tecla en el feedback (ej: "7", "×", "sin(")."""
    if isinstance(event, events.PressDigit):
        return event.digit
    if isinstance(event, events.PressDecimalPoint):
        return "."
    if isinstance(event, events.PressOperator):
        return event.operator.glyph
    if isinstance(event, events.PressFunction):
        return event.function.value + "("
    if isinstance(event, events.PressOpenParen):
        return "("
    if isinstance(event, events.PressCloseParen):
        return ")"
    return None


# ============================================================================
class KeypadCalculatorApp:
    """
    Aplicación principal de la calculadora.

    Arquitectura:
        - Calculator: Máquina de estados, evaluador y solver
        - UIRenderer: Renderizado de la interfaz con OpenCV
        - VoiceFeedback: Lectura de resultados en voz alta
        - KeypadCalculatorApp: Coordinador y loop principal

    Cada tecla se traduce a un evento (KEY_BINDINGS) y se procesa
    completo antes de leer la siguiente.
    """

    def __init__(self, config=None, voice=None):
        """
        Inicializa la aplicación.

        Args:
            config (AccessibilityConfig): Configuración (opcional)
            voice (VoiceFeedback): Sistema de voz (opcional, se crea si falta)
        """
        self.config = config if config else AccessibilityConfig()
        self.width = self.config.window_width
        self.height = self.config.window_height

        self.calc = Calculator()
        self.ui = UIRenderer(self.width, self.height, self.config)
        self.voice = voice if voice else VoiceFeedback(self.config)

    def process(self, event):
        """
        Aplica un evento a la calculadora y genera feedback visual y de voz.

        Args:
            event: Evento de core.events

        Feedback:
            - Verde: Dígitos y punto
            - Naranja: Operadores, funciones y paréntesis
            - Cian: Resultado de Commit
            - Rojo: Error o borrado
        """
        result = self.calc.handle(event)

        if isinstance(event, events.Commit):
            success, text = result
            if success:
                self.ui.show_feedback(f"= {text}", (255, 255, 0), 60)
            else:
                self.ui.show_feedback(text, (50, 50, 255))
            self.voice.speak_result(text)

        elif isinstance(event, (events.PressDigit, events.PressDecimalPoint)):
            label = key_label(event)
            self.ui.show_feedback(f"OK {label}", (100, 255, 100))
            self.voice.speak_key(label)

        elif key_label(event) is not None:
            label = key_label(event)
            self.ui.show_feedback(label, (0, 165, 255))
            self.voice.speak_key(label)

        elif isinstance(event, events.Clear):
            self.ui.show_feedback("TODO BORRADO", (50, 50, 255))
            self.voice.speak("todo borrado")

        elif isinstance(event, events.Delete):
            self.ui.show_feedback("<- BORRADO", (0, 200, 255), self.config.feedback_frames // 2)

        elif isinstance(event, events.ToggleMode):
            name = "ECUACION" if self.calc.mode is Mode.EQUATION else "EXPRESION"
            self.ui.show_feedback(f"MODO {name}", (255, 200, 0), 60)
            self.voice.speak(f"modo {name.lower()}")

        elif isinstance(event, (events.CycleFocus, events.FocusSlot)):
            slot = self.calc.active_slot.value
            self.ui.show_feedback(f"COEFICIENTE {slot}", (255, 200, 0))

        return result

    def handle_key(self, key):
        """
        Procesa una tecla leída de cv2.waitKey.

        Args:
            key (int): Código de tecla (ya enmascarado con 0xFF)

        Returns:
            bool: False si el usuario pidió salir
        """
        if key == KEY_ESC or key == ord('q'):
            return False

        if key == ord('v'):
            self.config.voice_enabled = not self.config.voice_enabled
            status = "ACTIVADA" if self.config.voice_enabled else "DESACTIVADA"
            print(f"Voz: {status}")
            self.ui.show_feedback(f"VOZ {status}", (255, 255, 0), 60)
            if self.config.voice_enabled:
                self.voice.speak("voz activada")
            return True

        event = KEY_BINDINGS.get(key)
        if event is not None:
            self.process(event)
        return True

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Renderizar el estado actual
            2. Mostrar frame y esperar una tecla (~30 FPS)
            3. Traducir la tecla a evento y procesarla
            4. Repetir hasta ESC o 'q'
        """
        print("\n" + "=" * 70)
        print("CALCULADORA - EXPRESIONES Y ECUACIONES CUADRATICAS")
        print("=" * 70)
        print("\nDigitos 0-9 y '.', operadores + - * /, parentesis ( )")
        print("Funciones: s = sin, c = cos, t = tan")
        print("Enter o '=': calcular | Backspace: borrar | x: borrar todo")
        print("m: modo ecuacion | Tab o A/B/C: coeficiente activo")
        if self.config.voice_enabled:
            print("\nFEEDBACK POR VOZ: Activado ('v' para desactivar)")
        print("\nPresiona ESC o 'q' para salir\n")
        print("=" * 70 + "\n")

        cv2.namedWindow(WINDOW_NAME)
        logger.info("Ventana abierta (%dx%d)", self.width, self.height)
        try:
            while True:
                frame = self.ui.render(self.calc.snapshot())
                cv2.imshow(WINDOW_NAME, frame)

                key = cv2.waitKey(33)
                if key == -1:
                    continue
                if not self.handle_key(key & 0xFF):
                    break
        finally:
            cv2.destroyAllWindows()
        print("\nOK Aplicacion cerrada correctamente")
