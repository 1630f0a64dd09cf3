# trackforge/logging_config.py
"""
Logging del paquete: un único logger raíz `trackforge` del que cuelgan
todos los módulos (`logging.getLogger(__name__)`).
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "trackforge"
_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def _level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    # nivel desconocido -> INFO
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configura el logger `trackforge` para el servicio o la consola.

    `level` admite entero o nombre ("debug", "INFO"...). Con `log_file` se
    añade un segundo handler que escribe a fichero. Llamar de nuevo
    reemplaza los handlers (recarga de uvicorn).
    """
    lvl = _level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(lvl)

    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    fmt = logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for h in handlers:
        h.setLevel(lvl)
        h.setFormatter(fmt)
        logger.addHandler(h)

    logger.debug("logging listo (nivel=%s, fichero=%s)", logging.getLevelName(lvl), log_file or "-")
    return logger


__all__ = ["LOGGER_NAME", "setup_logging"]
