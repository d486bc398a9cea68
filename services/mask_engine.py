# === services/mask_engine.py ===
"""
Aplicação de máscara: normaliza a entrada, preenche os tokens compilados
(para frente ou de trás pra frente) e diz se o valor ficou completo.

Nada aqui levanta exceção por causa de máscara ou valor malformado; falha
vira dado (string vazia e/ou complete=False).
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence

from services.logger import get_logger
from services.mask_compiler import ESCAPE, Token, compile_mask
from services.translation import DIGIT, TranslationTable, build_translation

log = get_logger(__name__)

DECIMAL_SEP = ","
GROUP_SEP = "."

_re_not_alnum = re.compile(r"[^0-9A-Za-z]+")


@dataclass(frozen=True)
class MaskResult:
    formatted: str
    complete: bool


EMPTY = MaskResult("", False)


# ----------------- normalização -----------------
def normalize(raw: str, tokens: Sequence[Token]) -> str:
    """Mantém só os caracteres aceitos por alguma classe da máscara (sem olhar posição)."""
    tests = {t.acceptance for t in tokens if not t.is_literal and t.acceptance is not None}
    if not tests or not raw:
        return ""
    return "".join(ch for ch in raw if any(a.accepts(ch) for a in tests))


# ----------------- para frente -----------------
def apply_forward(normalized: str, tokens: Sequence[Token]) -> MaskResult:
    out: List[str] = []
    n = len(normalized)
    cursor = required = filled = 0

    for tok in tokens:
        if tok.is_literal:
            out.append(tok.char)
            continue
        if not tok.optional:
            required += 1

        if tok.recursive:
            while cursor < n and tok.accepts(normalized[cursor]):
                out.append(normalized[cursor])
                cursor += 1
                filled += 1
            continue

        if cursor < n:
            ch = normalized[cursor]
            if tok.accepts(ch):
                out.append(ch)
                cursor += 1
                filled += 1
                continue
            if tok.fallback is not None:
                out.append(tok.fallback)
                continue
        if not tok.optional:
            # padrão violado: para de aceitar
            break

    return MaskResult("".join(out), filled >= required and cursor >= n)


# ----------------- de trás pra frente -----------------
def _decimal_index(tokens: Sequence[Token]) -> int:
    commas = [i for i, t in enumerate(tokens) if t.is_literal and t.char == DECIMAL_SEP]
    if len(commas) > 1:
        log.warning("máscara reversa com %d vírgulas; usando a primeira como decimal", len(commas))
    return commas[0] if commas else -1


def group_thousands(digits: str, sep: str = GROUP_SEP) -> str:
    head = len(digits) % 3 or 3
    parts = [digits[:head]] + [digits[i:i + 3] for i in range(head, len(digits), 3)]
    return sep.join(p for p in parts if p)


def _reverse_currency(normalized: str, tokens: Sequence[Token], dec: int):
    cursor = len(normalized) - 1
    filled = 0

    cents_count = len(tokens) - 1 - dec
    cents = ""
    for _ in range(cents_count):
        if cursor < 0 or not DIGIT.accepts(normalized[cursor]):
            break
        cents = normalized[cursor] + cents
        cursor -= 1
        filled += 1
    cents = cents.rjust(cents_count, "0")

    integer = ""
    for tok in reversed(tokens[:dec]):
        if tok.is_literal:
            # separador de milhar é recalculado, literais não entram
            continue
        if tok.recursive:
            while cursor >= 0 and tok.accepts(normalized[cursor]):
                integer = normalized[cursor] + integer
                cursor -= 1
                filled += 1
        elif cursor >= 0 and tok.accepts(normalized[cursor]):
            integer = normalized[cursor] + integer
            cursor -= 1
            filled += 1

    integer = integer.lstrip("0") or "0"
    formatted = group_thousands(integer) + DECIMAL_SEP + cents
    return formatted, cursor, filled


def _reverse_generic(normalized: str, tokens: Sequence[Token]):
    out: List[str] = []  # montado ao contrário
    cursor = len(normalized) - 1
    filled = 0
    placed = 0  # dígitos desde o último separador
    grouped = any(t.is_literal and t.char == GROUP_SEP for t in tokens)

    def _place(ch: str, auto_group: bool) -> None:
        nonlocal cursor, filled, placed
        if auto_group and placed > 0 and placed % 3 == 0:
            out.append(GROUP_SEP)
        out.append(ch)
        cursor -= 1
        filled += 1
        placed += 1

    for tok in reversed(tokens):
        if tok.is_literal:
            if tok.char != GROUP_SEP:
                out.append(tok.char)
                placed = 0
            elif placed > 0 and placed % 3 == 0:
                out.append(GROUP_SEP)
                placed = 0
            continue

        if tok.recursive:
            while cursor >= 0 and tok.accepts(normalized[cursor]):
                _place(normalized[cursor], grouped)
            continue

        if cursor >= 0 and tok.accepts(normalized[cursor]):
            _place(normalized[cursor], False)
            continue
        if not tok.optional:
            break

    return "".join(reversed(out)), cursor, filled


def apply_reverse(normalized: str, tokens: Sequence[Token]) -> MaskResult:
    if not normalized:
        return EMPTY
    required = sum(1 for t in tokens if not t.is_literal and not t.optional)

    dec = _decimal_index(tokens)
    if dec >= 0:
        formatted, cursor, filled = _reverse_currency(normalized, tokens, dec)
    else:
        formatted, cursor, filled = _reverse_generic(normalized, tokens)

    if formatted.startswith(GROUP_SEP):
        formatted = formatted[1:]
    return MaskResult(formatted, filled >= required and cursor < 0)


# ----------------- API pública -----------------
def _table(translation: Optional[Mapping[str, Any]]) -> TranslationTable:
    return build_translation(translation)


def apply_mask(
    raw: str,
    mask: str,
    reverse: bool = False,
    translation: Optional[Mapping[str, Any]] = None,
) -> MaskResult:
    """
    Entrada principal: raw -> (formatted, complete).
    Máscara ou valor vazio -> ("", False).
    """
    if not mask or not raw:
        return EMPTY
    tokens = compile_mask(mask, _table(translation))
    if not tokens:
        # só "\\" e afins: nada compilado
        return EMPTY
    normalized = normalize(raw, tokens)
    if reverse:
        return apply_reverse(normalized, tokens)
    return apply_forward(normalized, tokens)


def _literal_chars(mask: str, table: TranslationTable) -> set:
    lits = set()
    escaped = False
    for ch in mask:
        if ch == ESCAPE and not escaped:
            escaped = True
            continue
        if escaped or ch not in table:
            lits.add(ch)
        escaped = False
    return lits


def unmask(
    value: str,
    mask: Optional[str] = None,
    translation: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Tira os literais da máscara do valor formatado.
    Sem máscara, remove tudo que não for letra ou dígito.
    """
    if not value:
        return ""
    if not mask:
        return _re_not_alnum.sub("", value)
    return _strip_literals(value, mask, _table(translation))


def _strip_literals(value: str, mask: str, table: TranslationTable) -> str:
    lits = _literal_chars(mask, table)
    return "".join(ch for ch in value if ch not in lits)


def _required(mask: str, table: TranslationTable) -> int:
    return sum(
        1 for t in compile_mask(mask, table)
        if not t.is_literal and not t.optional
    )


def required_slots(mask: str, translation: Optional[Mapping[str, Any]] = None) -> int:
    return _required(mask, _table(translation))


def is_complete(
    value: str,
    mask: str,
    translation: Optional[Mapping[str, Any]] = None,
) -> bool:
    """
    Checagem estrutural: quantidade de caracteres que sobram depois de tirar
    os literais >= quantidade de posições obrigatórias. Não reexecuta o
    preenchimento (ver apply_mask(...).complete para isso).
    """
    if not mask or not value:
        return False
    table = _table(translation)
    return len(_strip_literals(value, mask, table)) >= _required(mask, table)
