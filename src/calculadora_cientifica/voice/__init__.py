"""
Módulo de feedback por voz.
Contiene el sistema de síntesis de voz para accesibilidad.
"""

from .feedback import VoiceFeedback

__all__ = ['VoiceFeedback']
