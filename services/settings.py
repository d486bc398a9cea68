# === services/settings.py ===
# Configuração via ambiente / .env (python-dotenv)
from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Diretório base do projeto (onde fica o main.py)
BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


def _env_str(name: str, default: str = "") -> str:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    return v.strip()


def _env_int(name: str, default: int) -> int:
    try:
        return int(_env_str(name, str(default)))
    except ValueError:
        return default


def log_level() -> str:
    return _env_str("MASK_LOG_LEVEL", "INFO").upper()


def log_file() -> Optional[str]:
    return _env_str("MASK_LOG_FILE") or None


def compile_cache_size() -> int:
    n = _env_int("MASK_COMPILE_CACHE", 256)
    return n if n >= 0 else 256


def demo_web() -> bool:
    return _env_str("MASK_DEMO_WEB", "0").lower() in ("1", "true", "sim", "yes")
