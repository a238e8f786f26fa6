"""
Sistema de feedback por voz usando pyttsx3.

Este módulo proporciona síntesis de voz para leer teclas y resultados,
ejecutándose de forma asíncrona para no bloquear la interfaz.
"""

import logging
import threading
from collections import deque

import pyttsx3

logger = logging.getLogger(__name__)


# Lectura en español de los símbolos que aparecen en el display
SPOKEN_SYMBOLS_ES = {
    "+": " más ",
    "−": " menos ",
    "-": " menos ",
    "×": " por ",
    "÷": " dividido entre ",
    ".": " coma ",
    "(": " abre paréntesis ",
    ")": " cierra paréntesis ",
    "=": " igual a ",
    "x₁": "equis uno",
    "x₂": "equis dos",
    "x": "equis",
    ",": ", ",
}

NUMBERS_ES = {
    "0": "cero", "1": "uno", "2": "dos", "3": "tres", "4": "cuatro",
    "5": "cinco", "6": "seis", "7": "siete", "8": "ocho", "9": "nueve",
}


def to_spoken_text(text):
    """
    Adapta un texto del display para leerlo en voz alta.

    Args:
        text (str): Texto del display (ej: "x = -1.0000")

    Returns:
        str: Texto legible (ej: "equis igual a menos 1 coma 0000")
    """
    spoken = text
    # Los subíndices primero para que "x" no se reemplace antes que "x₁"
    for symbol in sorted(SPOKEN_SYMBOLS_ES, key=len, reverse=True):
        spoken = spoken.replace(symbol, SPOKEN_SYMBOLS_ES[symbol])
    return " ".join(spoken.split())


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Sintetizar teclas y resultados a voz en español
#   - Ejecutar en hilo separado para no bloquear la UI
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Sistema de feedback por voz usando pyttsx3.

    Características:
        - Ejecución asíncrona (no bloquea la aplicación)
        - Cola de mensajes (un mensaje a la vez, máximo 5 pendientes)
        - Configuración de volumen y velocidad
        - Selección de voz según el idioma configurado
    """

    def __init__(self, config):
        """
        Inicializa el motor de síntesis de voz.

        Args:
            config (AccessibilityConfig): Configuración de accesibilidad

        Si el motor no se puede iniciar, la voz queda desactivada en la
        configuración y la aplicación continúa sin ella.
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)
        self._lock = threading.Lock()

        try:
            self.engine = pyttsx3.init()
            self._configure_engine()
            logger.info("Sistema de voz inicializado correctamente")
        except Exception as e:
            logger.warning("No se pudo inicializar el sistema de voz: %s", e)
            self.engine = None
            self.config.voice_enabled = False

    def _configure_engine(self):
        """Aplica volumen, velocidad y busca una voz en el idioma configurado."""
        self.engine.setProperty('volume', self.config.voice_volume)
        self.engine.setProperty('rate', self.config.voice_rate)

        language = self.config.voice_language.lower()
        for voice in self.engine.getProperty('voices') or []:
            languages = [str(lang).lower() for lang in (getattr(voice, 'languages', None) or [])]
            if (language in voice.id.lower()
                    or any(language in lang for lang in languages)):
                self.engine.setProperty('voice', voice.id)
                logger.info("Voz seleccionada: %s", voice.name)
                return

        logger.warning("No se encontró voz para '%s'. Usando voz predeterminada.", language)

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Args:
            text (str): Texto a sintetizar

        Returns:
            bool: True si el mensaje se encoló
        """
        if not self.config.voice_enabled or not self.engine:
            return False

        with self._lock:
            self.message_queue.append(text)
            if self.is_speaking:
                return True
            self.is_speaking = True

        thread = threading.Thread(target=self._process_queue, daemon=True)
        thread.start()
        return True

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while True:
            with self._lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except RuntimeError as e:
                logger.warning("Error al reproducir voz: %s", e)

    def speak_key(self, label):
        """
        Lee una tecla pulsada (solo si speak_keys está activado).

        Args:
            label (str): Texto añadido al buffer (ej: "7", "×", "sin(")
        """
        if not self.config.speak_keys:
            return False
        if label in NUMBERS_ES:
            return self.speak(NUMBERS_ES[label])
        return self.speak(to_spoken_text(label.rstrip("(")))

    def speak_result(self, result):
        """
        Reproduce el resultado de un cálculo de forma natural.

        Args:
            result (str): Texto del display tras Commit
        """
        return self.speak(f"igual a {to_spoken_text(result)}")
