# === services/mask_compiler.py ===
# Compila a string da máscara numa sequência de tokens (literal | padrão)
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Optional, Tuple

from services import settings
from services.logger import get_logger
from services.translation import DEFAULT_TRANSLATION, Acceptance, Translation, TranslationTable

log = get_logger(__name__)

ESCAPE = "\\"


class TokenKind(Enum):
    LITERAL = "literal"
    PATTERN = "pattern"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    char: str
    acceptance: Optional[Acceptance] = None
    optional: bool = False
    recursive: bool = False
    fallback: Optional[str] = None

    @property
    def is_literal(self) -> bool:
        return self.kind is TokenKind.LITERAL

    def accepts(self, ch: str) -> bool:
        return self.acceptance is not None and self.acceptance.accepts(ch)

    @classmethod
    def literal(cls, ch: str) -> "Token":
        return cls(TokenKind.LITERAL, ch)

    @classmethod
    def pattern(cls, ch: str, entry: Translation) -> "Token":
        return cls(
            TokenKind.PATTERN, ch,
            acceptance=entry.acceptance,
            optional=entry.optional or entry.recursive,
            recursive=entry.recursive,
            fallback=entry.fallback,
        )


Tokens = Tuple[Token, ...]


def _scan(mask: str, table: TranslationTable) -> Tokens:
    out = []
    escaped = False
    for ch in mask:
        if ch == ESCAPE and not escaped:
            escaped = True
            continue
        entry = None if escaped else table.get(ch)
        out.append(Token.literal(ch) if entry is None else Token.pattern(ch, entry))
        escaped = False
    # barra final sem alvo: consumida, nada emitido
    return tuple(out)


@lru_cache(maxsize=settings.compile_cache_size())
def _compile_cached(mask: str, items: Tuple[Tuple[str, Translation], ...]) -> Tokens:
    log.debug("compilando máscara %r", mask)
    return _scan(mask, dict(items))


def compile_mask(mask: str, table: TranslationTable = DEFAULT_TRANSLATION) -> Tokens:
    """
    Varre a máscara da esquerda pra direita.
    '\\' não escapado liga o escape; o próximo caractere vira literal.
    Chave da tabela -> token padrão; qualquer outro caractere -> literal.
    Nunca levanta exceção: máscara malformada só vira literais.
    """
    if not mask:
        return ()
    try:
        key = tuple(sorted(table.items()))
        hash(key)
    except TypeError:
        # predicate não-hasheável: compila sem cache
        return _scan(mask, table)
    return _compile_cached(mask, key)


def clear_cache() -> None:
    _compile_cached.cache_clear()
