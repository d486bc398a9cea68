# run_native.py: abre a demo das máscaras (janela nativa ou navegador)
from __future__ import annotations
import flet as ft

from main import main as app_main
from services import settings

if __name__ == "__main__":
    # MASK_DEMO_WEB=1 abre no navegador em vez da janela desktop
    view = ft.AppView.WEB_BROWSER if settings.demo_web() else ft.AppView.FLET_APP
    ft.app(
        target=app_main,
        view=view,
        assets_dir=".",
    )
