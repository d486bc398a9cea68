# components/inputs.py
# Adaptador Flet: TextField com máscara (delegando tudo pro MaskBinding)
from __future__ import annotations
from typing import Any, Callable, Mapping, Optional

import flet as ft

from components.masks import preset
from services.mask_options import MaskBinding, MaskOptions


def _safe_update(ctrl: ft.Control) -> None:
    # controle ainda fora da página: update() reclama, ignoramos
    try: ctrl.update()
    except Exception: pass


def masked_input(
    mask: str,
    *,
    label: str = "",
    value: str = "",
    width: int | None = None,
    reverse: bool = False,
    translation: Optional[Mapping[str, Any]] = None,
    clear_if_not_match: bool = False,
    placeholder: Optional[str] = None,
    on_change: Optional[Callable[[str], Any]] = None,
    on_complete: Optional[Callable[[str], Any]] = None,
    on_invalid: Optional[Callable[[str], Any]] = None,
    **kw,
) -> ft.TextField:
    opts = MaskOptions(
        mask=mask, reverse=reverse, translation=translation,
        clear_if_not_match=clear_if_not_match, placeholder=placeholder,
    )
    binding = MaskBinding(opts, on_change=on_change, on_complete=on_complete, on_invalid=on_invalid)

    kw.setdefault("dense", True)
    tf = ft.TextField(
        label=label,
        value=binding.initial_value(value),
        width=width,
        hint_text=placeholder,
        **kw,
    )
    tf.data = binding

    def _mask(e=None):
        res = binding.handle_change(tf.value or "")
        tf.value = res.formatted
        _safe_update(tf)

    tf.on_change = _mask
    return tf


# ----------------- presets -----------------
def _preset_input(name: str, label: str, value: str, width: int | None, **kw) -> ft.TextField:
    mask, reverse = preset(name)
    kw.setdefault("keyboard_type", ft.KeyboardType.NUMBER)
    kw.setdefault("placeholder", mask)
    return masked_input(mask, label=label, value=value, width=width, reverse=reverse, **kw)


def cpf_input(label: str = "CPF", value: str = "", width: int | None = None, **kw) -> ft.TextField:
    return _preset_input("cpf", label, value, width, **kw)

def cnpj_input(label: str = "CNPJ", value: str = "", width: int | None = None, **kw) -> ft.TextField:
    return _preset_input("cnpj", label, value, width, **kw)

def phone_input(label: str = "Telefone", value: str = "", width: int | None = None, **kw) -> ft.TextField:
    return _preset_input("phone", label, value, width, **kw)

def cep_input(label: str = "CEP", value: str = "", width: int | None = None, **kw) -> ft.TextField:
    return _preset_input("cep", label, value, width, **kw)

def date_input(label: str = "Data (dd/mm/aaaa)", value: str = "", width: int | None = None, **kw) -> ft.TextField:
    return _preset_input("date", label, value, width, **kw)

def card_input(label: str = "Cartão", value: str = "", width: int | None = None, **kw) -> ft.TextField:
    return _preset_input("card", label, value, width, **kw)

def money_input(label: str = "Valor", value: str = "", width: int | None = 200, **kw) -> ft.TextField:
    kw.setdefault("prefix_text", "R$ ")
    kw.setdefault("placeholder", "0,00")
    return _preset_input("money", label, value, width, **kw)
