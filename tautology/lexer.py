"""
Scanner for propositional formulas.

Turns a formula such as ``(¬(p → q) → (p → ¬q))`` into a flat stream of
tokens. Every token is a single character; the ASCII space is skipped.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Deque, Dict, Iterable, List, Optional

from tautology.errors import InvalidCharacterError


class TokenKind(Enum):
    VAR = auto()
    BOTTOM = auto()
    TOP = auto()
    NOT = auto()
    LPAREN = auto()
    RPAREN = auto()
    ARROW = auto()
    LRARROW = auto()
    AND = auto()
    OR = auto()


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    value: str
    pos: int


_SYMBOLS: Dict[str, TokenKind] = {
    "¬": TokenKind.NOT,
    "∧": TokenKind.AND,
    "∨": TokenKind.OR,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "→": TokenKind.ARROW,
    "↔": TokenKind.LRARROW,
    "⊥": TokenKind.BOTTOM,
    "T": TokenKind.TOP,
}

_VARIABLES = frozenset("abcdefghijklmnopqrstuvwxyz")


def tokenize(s: str) -> List[Token]:
    """Tokenize a formula, raising InvalidCharacterError on unknown input."""
    tokens: List[Token] = []
    for pos, c in enumerate(s):
        if c == " ":
            continue
        if c in _VARIABLES:
            tokens.append(Token(TokenKind.VAR, c, pos))
        elif c in _SYMBOLS:
            tokens.append(Token(_SYMBOLS[c], c, pos))
        else:
            raise InvalidCharacterError(c, pos)
    return tokens


class TokenStream:
    """One-token-lookahead stream, consumed front to back."""

    def __init__(self, tokens: Iterable[Token]):
        self._tokens: Deque[Token] = deque(tokens)

    @classmethod
    def from_string(cls, s: str) -> "TokenStream":
        return cls(tokenize(s))

    def lookahead(self) -> Optional[Token]:
        return self._tokens[0] if self._tokens else None

    def take(self) -> Optional[Token]:
        return self._tokens.popleft() if self._tokens else None

    def is_empty(self) -> bool:
        return not self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"TokenStream({''.join(t.value for t in self._tokens)!r})"


__all__ = ["TokenKind", "Token", "tokenize", "TokenStream"]
