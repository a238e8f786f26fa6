"""
Módulo de aplicación principal.
Integra todos los componentes en la aplicación completa.
"""

from .keypad_app import KeypadCalculatorApp

__all__ = ['KeypadCalculatorApp']
