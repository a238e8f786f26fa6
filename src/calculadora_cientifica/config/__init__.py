"""
Módulo de configuración para la calculadora.
Contiene la clase de configuración de ventana y accesibilidad.
"""

from .accessibility import AccessibilityConfig

__all__ = ['AccessibilityConfig']
