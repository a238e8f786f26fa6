"""
Configuración de logging.
Prepara el logger global del paquete.
"""
import logging
import sys

PACKAGE_LOGGER = "calculadora_cientifica"


def setup_logging(level=logging.INFO, log_file=None):
    """
    Configura el logger del paquete 'calculadora_cientifica'.

    Args:
        level (int): Nivel de logging (ej: logging.DEBUG, logging.INFO)
        log_file (str): Ruta opcional para guardar también los logs en archivo
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Evitar handlers duplicados si se llama más de una vez
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging inicializado.")
    return logger
