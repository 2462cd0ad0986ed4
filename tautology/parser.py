"""
Recursive descent parser for fully parenthesised propositional formulas.

Grammar (no operator precedence; binary applications must be bracketed):

    Expr     ::= Variable | Constant
               | '¬' Expr
               | '(' Expr BinOp Expr ')'
    BinOp    ::= '∧' | '∨' | '→' | '↔'
    Constant ::= '⊥' | 'T'
    Variable ::= a..z

Usage:
    from tautology.parser import generate

    expr = generate("(¬(p → q) → (p → ¬q))")
"""

from __future__ import annotations

from typing import Dict

from tautology.errors import NestingTooDeep, NoTokensLeft, RedundantToken, UnexpectedToken
from tautology.expr import BinaryOperator, BinOp, Const, Expr, Sole, UnaryOperator, UnOp
from tautology.lexer import Token, TokenKind, TokenStream


# Deepest nesting of ¬ and parenthesised groups. Parsing, rendering and
# evaluation all recurse once per level, so this stays well under the
# interpreter recursion limit.
MAX_DEPTH = 256

_BINARY_OPERATORS: Dict[TokenKind, BinaryOperator] = {
    TokenKind.AND: BinaryOperator.AND,
    TokenKind.OR: BinaryOperator.OR,
    TokenKind.ARROW: BinaryOperator.IMP,
    TokenKind.LRARROW: BinaryOperator.IFF,
}


class Parser:
    """Consumes a TokenStream and builds exactly one Expr."""

    def __init__(self, stream: TokenStream, max_depth: int = MAX_DEPTH):
        self.stream = stream
        self.max_depth = max_depth
        self.depth = 0

    def next_token(self) -> Token:
        tok = self.stream.take()
        if tok is None:
            raise NoTokensLeft()
        return tok

    def expect(self, kind: TokenKind) -> Token:
        tok = self.next_token()
        if tok.kind != kind:
            raise UnexpectedToken(tok, expected=kind)
        return tok

    def parse(self) -> Expr:
        """Parse one expression, leaving any further tokens in the stream."""
        tok = self.next_token()
        if self.depth >= self.max_depth:
            raise NestingTooDeep(tok, self.max_depth)
        self.depth += 1
        try:
            return self.parse_token(tok)
        finally:
            self.depth -= 1

    def parse_token(self, tok: Token) -> Expr:
        if tok.kind == TokenKind.VAR:
            return Sole(tok.value)
        if tok.kind == TokenKind.BOTTOM:
            return Const(False)
        if tok.kind == TokenKind.TOP:
            return Const(True)
        if tok.kind == TokenKind.NOT:
            return UnOp(UnaryOperator.NOT, self.parse())
        if tok.kind == TokenKind.LPAREN:
            lhs = self.parse()
            op = self.parse_binary_operator()
            rhs = self.parse()
            self.expect(TokenKind.RPAREN)
            return BinOp(lhs, op, rhs)

        raise UnexpectedToken(tok)

    def parse_binary_operator(self) -> BinaryOperator:
        tok = self.next_token()
        try:
            return _BINARY_OPERATORS[tok.kind]
        except KeyError:
            raise UnexpectedToken(tok) from None

    def parse_all(self) -> Expr:
        """Parse one expression and require the stream to be exhausted."""
        expr = self.parse()
        if not self.stream.is_empty():
            raise RedundantToken(self.stream.take())
        return expr


def parse(stream: TokenStream) -> Expr:
    """Parse a single expression from the front of ``stream``."""
    return Parser(stream).parse()


def generate(text: str) -> Expr:
    """
    Scan and parse ``text`` into an AST.

    Raises:
        InvalidCharacterError: on a character outside the formula alphabet.
        UnexpectedToken, NoTokensLeft: on a grammar violation.
        RedundantToken: when tokens remain after a complete formula.
        NestingTooDeep: when groups and negations nest deeper than MAX_DEPTH.
    """
    return Parser(TokenStream.from_string(text)).parse_all()


__all__ = ["MAX_DEPTH", "Parser", "parse", "generate"]
