# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
import argparse
import logging
import traceback

from . import __version__
from .app.keypad_app import KeypadCalculatorApp
from .config.accessibility import AccessibilityConfig
from .logging_config import setup_logging


def build_parser():
    parser = argparse.ArgumentParser(
        prog="calculadora-cientifica",
        description="Calculadora de expresiones y ecuaciones cuadraticas",
    )
    parser.add_argument("--no-voice", action="store_true",
                        help="desactivar el feedback por voz")
    parser.add_argument("--speak-keys", action="store_true",
                        help="leer en voz alta cada tecla pulsada")
    parser.add_argument("--width", type=int, default=None, help="ancho de la ventana")
    parser.add_argument("--height", type=int, default=None, help="alto de la ventana")
    parser.add_argument("--large-text", action="store_true", help="fuente mas grande")
    parser.add_argument("--no-guide", action="store_true", help="ocultar la guia de teclas")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="guardar logs en un archivo")
    parser.add_argument("-V", "--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args):
    """Construye la configuración a partir de los argumentos de línea de comandos."""
    config = AccessibilityConfig()
    config.voice_enabled = not args.no_voice
    config.speak_keys = args.speak_keys
    config.large_text = args.large_text
    config.show_key_guide = not args.no_guide
    if args.width:
        config.window_width = args.width
    if args.height:
        config.window_height = args.height
    return config


def main(argv=None):
    """
    Punto de entrada de la aplicación.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre por el usuario
        - Exception general: Muestra el error con traceback

    Ejecución:
        python -m calculadora_cientifica
    """
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    try:
        app = KeypadCalculatorApp(config_from_args(args))
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1
    return 0
