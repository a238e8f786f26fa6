"""
Módulo de interfaz de usuario.
Contiene el renderizador de la interfaz gráfica.
"""

from .renderer import UIRenderer

__all__ = ['UIRenderer']
