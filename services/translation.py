# === services/translation.py ===
# Tabela de tradução: caractere da máscara -> regra de aceitação
from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Union


class MaskConfigError(ValueError):
    pass


class CharClass(Enum):
    DIGIT = "digit"
    LETTER = "letter"
    ALNUM = "alnum"
    CUSTOM = "custom"


_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ALNUM = _DIGITS | _LETTERS


@dataclass(frozen=True)
class Acceptance:
    """Teste de um caractere. Classes embutidas são só ASCII; CUSTOM usa regex ou predicate."""
    char_class: CharClass
    predicate: Optional[Callable[[str], bool]] = None
    regex: Optional["re.Pattern[str]"] = None

    def accepts(self, ch: str) -> bool:
        if not ch:
            return False
        if self.char_class is CharClass.DIGIT:
            return ch in _DIGITS
        if self.char_class is CharClass.LETTER:
            return ch in _LETTERS
        if self.char_class is CharClass.ALNUM:
            return ch in _ALNUM
        if self.regex is not None:
            return self.regex.fullmatch(ch) is not None
        return bool(self.predicate and self.predicate(ch))

    @classmethod
    def custom(cls, predicate: Callable[[str], bool]) -> "Acceptance":
        return cls(CharClass.CUSTOM, predicate)

    @classmethod
    def from_regex(cls, pattern: Union[str, "re.Pattern[str]"]) -> "Acceptance":
        # Pattern compara por fonte+flags: mesma regex, mesma chave de cache
        try:
            rx = re.compile(pattern) if isinstance(pattern, str) else pattern
        except re.error as ex:
            raise MaskConfigError(f"Padrão inválido na tradução: {pattern!r} ({ex})") from ex
        return cls(CharClass.CUSTOM, regex=rx)


DIGIT = Acceptance(CharClass.DIGIT)
LETTER = Acceptance(CharClass.LETTER)
ALNUM = Acceptance(CharClass.ALNUM)


@dataclass(frozen=True)
class Translation:
    acceptance: Acceptance
    optional: bool = False
    recursive: bool = False
    fallback: Optional[str] = None


TranslationTable = Mapping[str, Translation]

DEFAULT_TRANSLATION: TranslationTable = MappingProxyType({
    "0": Translation(DIGIT),
    "9": Translation(DIGIT, optional=True),
    "#": Translation(DIGIT, optional=True, recursive=True),
    "A": Translation(ALNUM),
    "S": Translation(LETTER),
    "X": Translation(ALNUM, optional=True),
})


def _coerce_entry(key: str, entry: Any) -> Translation:
    if isinstance(entry, Translation):
        return entry
    if not isinstance(entry, Mapping):
        raise MaskConfigError(f"Tradução de {key!r} deve ser Translation ou dict, veio {type(entry).__name__}.")

    pattern = entry.get("pattern")
    if isinstance(pattern, Acceptance):
        acceptance = pattern
    elif callable(pattern) and not isinstance(pattern, (str, re.Pattern)):
        acceptance = Acceptance.custom(pattern)
    elif pattern:
        acceptance = Acceptance.from_regex(pattern)
    else:
        raise MaskConfigError(f"Tradução de {key!r} sem 'pattern'.")

    fallback = entry.get("fallback")
    if fallback is not None and len(str(fallback)) != 1:
        raise MaskConfigError(f"Fallback de {key!r} deve ter um caractere.")
    return Translation(
        acceptance=acceptance,
        optional=bool(entry.get("optional", False)),
        recursive=bool(entry.get("recursive", False)),
        fallback=None if fallback is None else str(fallback),
    )


def build_translation(overrides: Optional[Mapping[str, Any]] = None) -> TranslationTable:
    """
    Tabela padrão + overrides. Cada override substitui a entrada inteira
    (não mescla campo a campo). Aceita Translation ou dict no formato
    {"pattern": r"[A-Z]", "optional": False, "recursive": False, "fallback": None}.
    """
    if not overrides:
        return DEFAULT_TRANSLATION
    table: Dict[str, Translation] = dict(DEFAULT_TRANSLATION)
    for key, entry in overrides.items():
        if not isinstance(key, str) or len(key) != 1:
            raise MaskConfigError(f"Chave de tradução deve ter um caractere: {key!r}")
        if key == "\\":
            raise MaskConfigError("Barra invertida é reservada para escape.")
        table[key] = _coerce_entry(key, entry)
    return MappingProxyType(table)
