# === components/masks.py ===
# Máscaras prontas (BR) em cima do motor de services.mask_engine
from __future__ import annotations
import re
from typing import Dict, Tuple

from services.mask_engine import apply_mask

_re_digits = re.compile(r"\D+")

# nome -> (máscara, reversa?)
PRESETS: Dict[str, Tuple[str, bool]] = {
    "cpf":      ("000.000.000-00", False),
    "cnpj":     ("00.000.000/0000-00", False),
    "phone":    ("(00) 00000-0000", False),
    "landline": ("(00) 0000-0000", False),
    "cep":      ("00000-000", False),
    "date":     ("00/00/0000", False),
    "time":     ("00:00", False),
    "money":    ("#.##0,00", True),
    "card":     ("0000 0000 0000 0000", False),
    "plate":    ("SSS-0A00", False),
}


def only_digits(s: str) -> str:
    return _re_digits.sub("", s or "")


def preset(name: str) -> Tuple[str, bool]:
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Máscara desconhecida: {name!r} (disponíveis: {', '.join(sorted(PRESETS))})") from None


def mask_with(name: str, s: str) -> str:
    mask, reverse = preset(name)
    return apply_mask(s or "", mask, reverse=reverse).formatted

def mask_cpf(s: str) -> str:      return mask_with("cpf", s)
def mask_cnpj(s: str) -> str:     return mask_with("cnpj", s)
def mask_phone(s: str) -> str:    return mask_with("phone", s)
def mask_landline(s: str) -> str: return mask_with("landline", s)
def mask_cep(s: str) -> str:      return mask_with("cep", s)
def mask_date(s: str) -> str:     return mask_with("date", s)
def mask_time(s: str) -> str:     return mask_with("time", s)
def mask_money(s: str) -> str:    return mask_with("money", s)
def mask_card(s: str) -> str:     return mask_with("card", s)
def mask_plate(s: str) -> str:    return mask_with("plate", s.upper() if s else s)
