"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja el estado de la
calculadora sobre un lienzo de OpenCV.
"""

import time

import cv2
import numpy as np

from ..config.accessibility import AccessibilityConfig
from ..core.calculator import EXPRESSION_ERROR, SOLVER_ERROR, Mode
from ..core.events import Slot
from ..core.quadratic import DEGENERATE_MESSAGE

BACKGROUND = (30, 30, 30)
ERROR_MESSAGES = (EXPRESSION_ERROR, SOLVER_ERROR, DEGENERATE_MESSAGE)

KEY_GUIDE = [
    ("NUMEROS", ""),
    ("  0-9 .", "digitos y punto"),
    ("", ""),
    ("OPERACIONES", ""),
    ("  + - * /", "suma resta mult div"),
    ("  ( )", "parentesis"),
    ("  s c t", "sin cos tan"),
    ("", ""),
    ("CONTROL", ""),
    ("  Enter =", "calcular"),
    ("  Backspace", "borrar ultimo"),
    ("  x", "borrar todo"),
    ("  m", "modo ecuacion"),
    ("  Tab / A B C", "coeficiente"),
    ("  v", "voz on/off"),
    ("  ESC q", "salir"),
]


# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica para la calculadora.

    Componentes visuales:
        1. Display principal: Expresión en construcción o resultado
        2. Campos a, b, c (solo modo ecuación) con el activo resaltado
        3. Guía lateral: Lista de teclas disponibles
        4. Feedback: Mensajes temporales de confirmación/error
    """

    def __init__(self, width, height, config=None):
        """
        Inicializa el renderizador con dimensiones de la ventana.

        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (AccessibilityConfig): Configuración (opcional)
        """
        self.width = width
        self.height = height
        self.config = config if config else AccessibilityConfig()
        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = (0, 255, 0)    # Color del feedback

    def new_canvas(self):
        """Lienzo vacío del tamaño de la ventana (BGR)."""
        img = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        img[:] = BACKGROUND
        return img

    def show_feedback(self, msg, color=(0, 255, 0), duration=None):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames (por defecto la configurada)
        """
        self.feedback_msg = msg
        self.feedback_color = color
        self.feedback_timer = duration if duration is not None else self.config.feedback_frames

    def render(self, state):
        """
        Dibuja un frame completo para el estado dado.

        Args:
            state (ExpressionState | EquationState): Snapshot de la calculadora

        Returns:
            np.ndarray: Imagen BGR lista para cv2.imshow
        """
        img = self.new_canvas()
        self.draw_display(img, state)
        if state.mode is Mode.EQUATION:
            self.draw_slots(img, state)
        if self.config.show_key_guide:
            self.draw_guide(img)
        self.draw_feedback(img)
        return img

    def _panel_width(self):
        if self.config.show_key_guide:
            return self.width - 420
        return self.width - 60

    def draw_display(self, img, state):
        """
        Dibuja el display principal de la calculadora.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            state: Snapshot de la calculadora

        Colores del display:
            - Blanco: Expresión en construcción
            - Rojo: Mensaje de error o ecuación no cuadrática

        Tamaños dinámicos:
            - Textos cortos (<12 caracteres): Fuente grande
            - Textos largos: Se reduce la escala hasta que quepa
        """
        x, y, w, h = 30, 30, self._panel_width(), 200

        cv2.rectangle(img, (x, y), (x + w, y + h), (45, 45, 45), -1)
        cv2.rectangle(img, (x, y), (x + w, y + h), (100, 200, 255), 3)

        title = "CALCULADORA" if state.mode is Mode.EXPRESSION else "ECUACION  ax^2 + bx + c = 0"
        cv2.putText(img, title, (x + 20, y + 40),
                    cv2.FONT_HERSHEY_DUPLEX, 0.9, (200, 200, 200), 2)

        # OpenCV solo dibuja ASCII: se sustituyen glifos y subíndices
        text = to_ascii(state.display_text)
        color = (100, 100, 255) if state.display_text in ERROR_MESSAGES else (255, 255, 255)

        scale = self.config.get_font_scale(2.5 if len(text) < 12 else 1.6)
        while scale > 0.5:
            text_w = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, scale, 3)[0][0]
            if text_w <= w - 40:
                break
            scale -= 0.1
        cv2.putText(img, text, (x + 20, y + 150),
                    cv2.FONT_HERSHEY_DUPLEX, scale, color, 3)

        # Cursor parpadeante mientras se escribe en el display
        if state.mode is Mode.EXPRESSION and int(time.time() * 2) % 2 == 0:
            text_w = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, scale, 3)[0][0]
            cx = min(x + 30 + text_w, x + w - 10)
            cv2.line(img, (cx, y + 110), (cx, y + 160), (0, 255, 0), 3)

    def draw_slots(self, img, state):
        """
        Dibuja los tres campos de coeficiente.

        El campo activo lleva borde naranja; un campo vacío se muestra vacío.
        """
        total_w = self._panel_width()
        gap = 20
        w = (total_w - 2 * gap) // 3
        y, h = 260, 110

        for i, slot in enumerate(Slot):
            x = 30 + i * (w + gap)
            active = slot is state.active_slot
            cv2.rectangle(img, (x, y), (x + w, y + h), (45, 45, 45), -1)
            border = (0, 165, 255) if active else (100, 100, 100)
            cv2.rectangle(img, (x, y), (x + w, y + h), border, 4 if active else 2)
            cv2.putText(img, slot.value, (x + 15, y + 30),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.8, (180, 180, 180), 2)
            cv2.putText(img, to_ascii(state.coefficients[slot]), (x + 15, y + 85),
                        cv2.FONT_HERSHEY_DUPLEX, self.config.get_font_scale(1.2),
                        (255, 255, 255), 2)

    def draw_guide(self, img):
        """Dibuja la guía lateral de teclas."""
        x, y = self.width - 370, 30
        w, h = 340, self.height - 60

        overlay = img.copy()
        cv2.rectangle(overlay, (x, y), (x + w, y + h), (25, 25, 25), -1)
        alpha = self.config.guide_opacity
        cv2.addWeighted(overlay, alpha, img, 1 - alpha, 0, img)
        cv2.rectangle(img, (x, y), (x + w, y + h), (100, 100, 100), 2)

        cv2.putText(img, "TECLAS", (x + 20, y + 40),
                    cv2.FONT_HERSHEY_DUPLEX, 1.0, (255, 255, 255), 2)

        cy = y + 80
        for label, description in KEY_GUIDE:
            # Línea vacía (espaciado)
            if not label:
                cy += 10
                continue

            # Encabezados de sección (mayúsculas, sin espacios iniciales)
            if not label.startswith(" "):
                cv2.putText(img, label, (x + 20, cy),
                            cv2.FONT_HERSHEY_DUPLEX, 0.7, (100, 200, 255), 2)
                cy += 32
            else:
                cv2.putText(img, label, (x + 20, cy),
                            cv2.FONT_HERSHEY_SIMPLEX, 0.55, (200, 200, 200), 1)
                cv2.putText(img, description, (x + 170, cy),
                            cv2.FONT_HERSHEY_SIMPLEX, 0.5, (150, 150, 150), 1)
                cy += 26

    def draw_feedback(self, img):
        """
        Dibuja mensaje de feedback temporal en la parte inferior.

        Efecto:
            - Se desvanece con alpha blending en los últimos 20 frames
            - Duración controlada por feedback_timer
        """
        if self.feedback_timer <= 0:
            return
        self.feedback_timer -= 1
        alpha = min(self.feedback_timer / 20.0, 1.0)

        x, y = 50, self.height - 50

        overlay = img.copy()
        cv2.rectangle(overlay, (x - 20, y - 45), (x + 520, y + 15), (40, 40, 40), -1)
        cv2.addWeighted(overlay, alpha * 0.88, img, 1 - alpha * 0.88, 0, img)

        color = tuple(int(c * alpha) for c in self.feedback_color)
        cv2.putText(img, to_ascii(self.feedback_msg), (x, y),
                    cv2.FONT_HERSHEY_DUPLEX, 1.1, color, 2)


_ASCII_GLYPHS = {"×": "x", "÷": "/", "−": "-", "₁": "1", "₂": "2"}


def to_ascii(text):
    """Sustituye los glifos del display por equivalentes que OpenCV puede dibujar."""
    for glyph, ascii_text in _ASCII_GLYPHS.items():
        text = text.replace(glyph, ascii_text)
    return text
