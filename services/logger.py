# === services/logger.py ===
"""
Logging central do projeto.

Os handlers ficam só no logger raiz 'mascaras'; os módulos pedem loggers
filhos com get_logger(__name__) e propagam pra ele.
"""
from __future__ import annotations
import logging

from services import settings

ROOT_NAME = "mascaras"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return

    root = logging.getLogger(ROOT_NAME)
    level = getattr(logging, settings.log_level(), logging.INFO)
    root.setLevel(level)
    # evita duplicar no root do Python
    root.propagate = False

    fmt = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    root.addHandler(console)

    path = settings.log_file()
    if path:
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger filho de 'mascaras' (ex.: services.mask_engine -> mascaras.mask_engine)."""
    _configure_root()
    short = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"{ROOT_NAME}.{short}")
