# === services/mask_options.py ===
# Opções imutáveis da máscara + binding neutro (sem Flet) que dispara os callbacks
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Mapping, Optional

from services.logger import get_logger
from services.mask_compiler import Tokens, compile_mask
from services.mask_engine import EMPTY, MaskResult, apply_forward, apply_reverse, normalize
from services.translation import MaskConfigError, TranslationTable, build_translation

log = get_logger(__name__)

Callback = Callable[[str], Any]

# nomes aceitos em from_dict (camelCase do front + snake_case)
_ALIASES = {
    "mask": "mask",
    "reverse": "reverse",
    "translation": "translation",
    "clearIfNotMatch": "clear_if_not_match",
    "clear_if_not_match": "clear_if_not_match",
    "selectOnFocus": "select_on_focus",
    "select_on_focus": "select_on_focus",
    "placeholder": "placeholder",
}


@dataclass(frozen=True)
class MaskOptions:
    mask: str
    reverse: bool = False
    translation: Optional[Mapping[str, Any]] = None
    clear_if_not_match: bool = False
    select_on_focus: bool = False  # aceita, mas o TextField do Flet 0.28 não expõe seleção
    placeholder: Optional[str] = None
    table: TranslationTable = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.mask, str) or not self.mask:
            raise MaskConfigError("Opção 'mask' é obrigatória.")
        table = build_translation(self.translation)
        object.__setattr__(self, "table", table)
        if self.reverse:
            commas = sum(1 for t in compile_mask(self.mask, table) if t.is_literal and t.char == ",")
            if commas > 1:
                raise MaskConfigError(
                    f"Máscara reversa {self.mask!r} tem {commas} vírgulas; use só uma como separador decimal."
                )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MaskOptions":
        kw: Dict[str, Any] = {}
        for k, v in (data or {}).items():
            name = _ALIASES.get(k)
            if name is None:
                log.debug("opção de máscara ignorada: %s", k)
                continue
            kw[name] = v
        if "mask" not in kw:
            raise MaskConfigError("Opção 'mask' é obrigatória.")
        return cls(**kw)

    @property
    def tokens(self) -> Tokens:
        return compile_mask(self.mask, self.table)

    def apply(self, raw: str) -> MaskResult:
        if not raw:
            return EMPTY
        tokens = self.tokens
        if not tokens:
            return EMPTY
        normalized = normalize(raw, tokens)
        return apply_reverse(normalized, tokens) if self.reverse else apply_forward(normalized, tokens)


class MaskBinding:
    """
    Liga um MaskOptions aos callbacks de quem usa (widget, página, teste).
    Ordem dos disparos: on_invalid, on_change, on_complete.
    """

    def __init__(
        self,
        options: MaskOptions,
        on_change: Optional[Callback] = None,
        on_complete: Optional[Callback] = None,
        on_invalid: Optional[Callback] = None,
    ):
        self.options = options
        self.on_change = on_change
        self.on_complete = on_complete
        self.on_invalid = on_invalid

    def initial_value(self, raw: str) -> str:
        return self.options.apply(raw or "").formatted

    def handle_change(self, raw: str) -> MaskResult:
        raw = raw or ""
        res = self.options.apply(raw)

        if self.options.clear_if_not_match and not res.complete and raw:
            log.debug("valor não casa com %r: %r", self.options.mask, raw)
            if self.on_invalid:
                self.on_invalid(res.formatted)
        if self.on_change:
            self.on_change(res.formatted)
        if res.complete and self.on_complete:
            self.on_complete(res.formatted)
        return res

    def with_options(self, **changes) -> "MaskBinding":
        return MaskBinding(
            replace(self.options, **changes),
            on_change=self.on_change,
            on_complete=self.on_complete,
            on_invalid=self.on_invalid,
        )
