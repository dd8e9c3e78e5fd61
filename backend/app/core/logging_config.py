"""Configuración mínima del logging estándar de Python."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configura el logger raíz una sola vez por proceso.

    Si ya hay handlers (por ejemplo los de uvicorn o pytest) sólo ajustamos
    el nivel, para no duplicar las líneas de salida.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    else:
        root.setLevel(level.upper())
