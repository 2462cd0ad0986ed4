"""
Abstract syntax tree for propositional formulas.

Nodes are immutable; each subtree is held by exactly one parent. Binary
nodes always render with their own parentheses, which is the only grouping
the grammar knows, so rendering a parsed tree reproduces an equivalent input:

    >>> e = BinOp(Sole("p"), BinaryOperator.IMP, UnOp(UnaryOperator.NOT, Sole("q")))
    >>> str(e)
    '(p → ¬q)'
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class UnaryOperator(Enum):
    NOT = "¬"


class BinaryOperator(Enum):
    AND = "∧"
    OR = "∨"
    IMP = "→"
    IFF = "↔"


@dataclass(frozen=True, slots=True)
class Expr(ABC):
    """Base class for AST nodes."""

    @abstractmethod
    def render(self) -> str:
        """Serialize back to formula text."""
        ...

    @abstractmethod
    def depth(self) -> int:
        ...

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True)
class Sole(Expr):
    """A single propositional variable."""
    name: str

    def render(self) -> str:
        return self.name

    def depth(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class Const(Expr):
    """The constants ⊥ (False) and T (True)."""
    value: bool

    def render(self) -> str:
        return "T" if self.value else "⊥"

    def depth(self) -> int:
        return 0


@dataclass(frozen=True, slots=True)
class UnOp(Expr):
    op: UnaryOperator
    expr: Expr

    def render(self) -> str:
        return f"{self.op.value}{self.expr.render()}"

    def depth(self) -> int:
        return 1 + self.expr.depth()


@dataclass(frozen=True, slots=True)
class BinOp(Expr):
    lhs: Expr
    op: BinaryOperator
    rhs: Expr

    def render(self) -> str:
        return f"({self.lhs.render()} {self.op.value} {self.rhs.render()})"

    def depth(self) -> int:
        return 1 + max(self.lhs.depth(), self.rhs.depth())


__all__ = [
    "UnaryOperator",
    "BinaryOperator",
    "Expr",
    "Sole",
    "Const",
    "UnOp",
    "BinOp",
]
