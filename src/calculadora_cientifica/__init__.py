"""
Calculadora de expresiones con funciones trigonométricas y resolución de
ecuaciones cuadráticas.
"""

__version__ = "1.0.0"
