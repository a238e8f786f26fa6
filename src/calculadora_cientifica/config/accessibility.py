"""
Configuración de la aplicación y opciones de accesibilidad.

Este módulo contiene la configuración centralizada de la ventana, el
feedback visual y el feedback por voz.
"""


# ============================================================================
# CLASE: AccessibilityConfig
# Propósito: Configuración de la ventana y de accesibilidad para usuarios
# Responsabilidades:
#   - Almacenar preferencias de voz (volumen, velocidad, idioma)
#   - Definir el tamaño de la ventana y la duración del feedback
#   - Activar/desactivar ayudas visuales (guía de teclas)
# ============================================================================
class AccessibilityConfig:
    """
    Configuración de la calculadora.

    Opciones disponibles:
        - Feedback por voz configurable (volumen, velocidad, idioma)
        - Tamaño de ventana y escala de fuente
        - Ayudas visuales (guía de teclas, duración de mensajes)
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = True           # Activar/desactivar feedback por voz
        self.voice_volume = 0.8             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad de habla (palabras por minuto)
        self.voice_language = 'es'          # Idioma ('es', 'en', etc.)
        self.speak_keys = False             # Leer también cada tecla, no solo resultados

        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_width = 1000
        self.window_height = 640
        self.large_text = False             # Fuente más grande en el display

        # ====================================================================
        # AYUDAS VISUALES
        # ====================================================================
        self.show_key_guide = True          # Mostrar guía de teclas
        self.feedback_frames = 40           # Duración del feedback (~1.3s @ 30fps)
        self.guide_opacity = 0.9            # Opacidad del panel de guía (0.0-1.0)

    def get_font_scale(self, base_scale):
        """
        Calcula la escala de fuente según el modo de texto grande.

        Args:
            base_scale (float): Escala base de OpenCV

        Returns:
            float: Escala ajustada
        """
        return base_scale * (1.3 if self.large_text else 1.0)
