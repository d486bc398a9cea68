"""Garante que os imports locais (components/, services/, tools/) resolvem."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


_ensure_project_root_on_path()


@pytest.fixture(autouse=True)
def _fresh_compile_cache():
    from services.mask_compiler import clear_cache

    clear_cache()
    yield
    clear_cache()
