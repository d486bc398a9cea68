from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

import flet as ft

from components.inputs import card_input, cep_input, cpf_input, date_input, money_input, phone_input
from services.logger import get_logger

log = get_logger(__name__)


@dataclass
class DemoState:
    completed: List[str] = field(default_factory=list)


# ======================== HELPERS ========================
def FieldRow(label: str, control: ft.Control, width: int | None = None) -> ft.Container:
    return ft.Container(
        width=width,
        content=ft.Column(
            spacing=4,
            controls=[
                ft.Text(label, size=12, color=ft.Colors.ON_SURFACE_VARIANT),
                control,
            ],
        ),
    )

def section(title: str, *controls: ft.Control) -> ft.Container:
    return ft.Container(
        bgcolor=ft.Colors.with_opacity(0.04, ft.Colors.ON_SURFACE),
        border_radius=16,
        padding=16,
        content=ft.Column(
            spacing=12,
            controls=[ft.Text(title, size=14, weight=ft.FontWeight.W_700), *controls],
        ),
    )


# ======================== APP ========================
def main(page: ft.Page):
    page.title = "Máscaras de entrada"
    page.padding = 20
    page.scroll = ft.ScrollMode.AUTO
    page.theme_mode = ft.ThemeMode.LIGHT

    state = DemoState()
    done_list = ft.Column(spacing=4)
    money_preview = ft.Text("", size=13)

    def completed(kind: str):
        def _cb(value: str):
            log.info("%s completo: %s", kind, value)
            state.completed.append(f"{kind}: {value}")
            done_list.controls = [ft.Text(s, size=12) for s in state.completed]
            try: page.update()
            except Exception: pass
        return _cb

    def on_money(value: str):
        money_preview.value = f"Valor formatado: {value}" if value else ""

    def toggle_theme(e=None):
        page.theme_mode = (
            ft.ThemeMode.DARK if page.theme_mode == ft.ThemeMode.LIGHT else ft.ThemeMode.LIGHT
        )
        page.update()

    header = ft.Row(
        alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        controls=[
            ft.Text("Teste de máscaras", size=20, weight=ft.FontWeight.BOLD),
            ft.IconButton(icon=ft.Icons.DARK_MODE, tooltip="Alternar tema", on_click=toggle_theme),
        ],
    )

    page.add(
        header,
        section("Telefone", FieldRow("Telefone:", phone_input(label="", on_complete=completed("Telefone")))),
        section("CPF", FieldRow("CPF:", cpf_input(label="", on_complete=completed("CPF")))),
        section("CEP", FieldRow("CEP:", cep_input(label="", on_complete=completed("CEP")))),
        section(
            "Dinheiro (máscara reversa)",
            FieldRow("Valor (R$):", money_input(label="", on_change=on_money, on_complete=completed("Dinheiro"))),
            money_preview,
            ft.Text('Digite "75" para 0,75 ou "123456" para 1.234,56', size=11, color="#9E9E9E"),
        ),
        section("Cartão de crédito", FieldRow("Cartão:", card_input(label="", on_complete=completed("Cartão")))),
        section("Data", FieldRow("Data:", date_input(label="", on_complete=completed("Data")))),
        section("Completos", done_list),
    )


if __name__ == "__main__":
    ft.app(target=main)
