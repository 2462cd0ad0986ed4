"""
Error taxonomy for the tautology checker.

Every failure carries a stable code alongside the human-readable message so
callers can render a diagnostic (or branch on the failure kind) without
re-parsing the input:

    LEX-1    unrecognized character in the input
    PARSE-1  token found where the grammar does not allow it
    PARSE-2  input ended while more tokens were required
    PARSE-3  complete formula followed by leftover tokens
    PARSE-4  formula nested deeper than the parser allows
    EVAL-1   formula has more free variables than the configured bound
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:  # pragma: no cover
    from tautology.lexer import Token, TokenKind


class TautologyError(Exception):
    """Base exception for all checker failures."""

    def __init__(self, message: str, code: str):
        super().__init__(f"[{code}] {message}")
        self.code = code
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


# ---------------------------------------------------------------------------
# Lexical
# ---------------------------------------------------------------------------

class InvalidCharacterError(TautologyError):
    """Raised by the scanner on a character outside the formula alphabet."""

    def __init__(self, char: str, position: int):
        super().__init__(f"Unexpected character {char!r} at position {position}", "LEX-1")
        self.char = char
        self.position = position

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "char": self.char, "position": self.position}


# ---------------------------------------------------------------------------
# Syntactic
# ---------------------------------------------------------------------------

class ParseError(TautologyError):
    """Base class for grammar violations."""


class UnexpectedToken(ParseError):
    """A token appeared where the grammar did not permit it."""

    def __init__(self, token: "Token", expected: Optional["TokenKind"] = None):
        if expected is None:
            message = f"Unexpected token {token.value!r} at position {token.pos}"
        else:
            message = (
                f"Unexpected token {token.value!r} at position {token.pos}, "
                f"expected {expected.name}"
            )
        super().__init__(message, "PARSE-1")
        self.token = token
        self.expected = expected

    def to_dict(self) -> Dict[str, Any]:
        return {
            **super().to_dict(),
            "token": self.token.value,
            "position": self.token.pos,
            "expected": self.expected.name if self.expected is not None else None,
        }


class NoTokensLeft(ParseError):
    """The token stream ran out while the grammar still required input."""

    def __init__(self) -> None:
        super().__init__("No tokens left", "PARSE-2")


class RedundantToken(ParseError):
    """A complete formula was parsed but tokens remain."""

    def __init__(self, token: "Token"):
        super().__init__(f"Redundant token {token.value!r} at position {token.pos}", "PARSE-3")
        self.token = token

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "token": self.token.value, "position": self.token.pos}


class NestingTooDeep(ParseError):
    """Negations and groups nest deeper than the parser accepts."""

    def __init__(self, token: "Token", limit: int):
        super().__init__(
            f"Nesting deeper than {limit} levels at position {token.pos}", "PARSE-4"
        )
        self.token = token
        self.limit = limit

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "position": self.token.pos, "limit": self.limit}


# ---------------------------------------------------------------------------
# Evaluation policy
# ---------------------------------------------------------------------------

class VariableLimitExceeded(TautologyError):
    """
    Raised when a formula has more free variables than the caller allows.

    The evaluator itself has no bound; this is applied by the oracle before
    the 2^n enumeration starts.
    """

    def __init__(self, count: int, limit: int):
        super().__init__(
            f"Formula has {count} free variables, limit is {limit}", "EVAL-1"
        )
        self.count = count
        self.limit = limit

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "count": self.count, "limit": self.limit}


__all__ = [
    "TautologyError",
    "InvalidCharacterError",
    "ParseError",
    "UnexpectedToken",
    "NoTokensLeft",
    "RedundantToken",
    "NestingTooDeep",
    "VariableLimitExceeded",
]
