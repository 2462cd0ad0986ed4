"""
Exhaustive truth-table evaluator.

Walks every assignment of the formula's free variables in ascending numeric
order and stops at the first one that makes the formula false. There is no
pruning and no memoization: a formula with n variables costs up to 2^n full
tree evaluations.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Tuple

from tautology.expr import BinaryOperator, BinOp, Const, Expr, Sole, UnOp
from tautology.varenv import Assignment, VarEnv

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EvalResult(ABC):
    """Outcome of a tautology check."""

    @property
    @abstractmethod
    def is_tautology(self) -> bool:
        ...

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        ...


@dataclass(frozen=True, slots=True)
class Tautology(EvalResult):

    @property
    def is_tautology(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {"tautology": True}

    def __str__(self) -> str:
        return "tautology"


@dataclass(frozen=True, slots=True)
class NotTautology(EvalResult):
    """
    A counterexample.

    Attributes:
        witness: truth value of every free variable in the falsifying row.
        index: the row's assignment number (bit vector over VarEnv positions).
    """
    witness: Dict[str, bool] = field(hash=False)
    index: int = 0

    @property
    def is_tautology(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"tautology": False, "witness": dict(self.witness), "index": self.index}

    def __str__(self) -> str:
        pairs = ", ".join(f"{name}={value}" for name, value in self.witness.items())
        return f"not a tautology: {pairs}" if pairs else "not a tautology"


def _imp(lhs: bool, rhs: bool) -> bool:
    return not lhs or rhs


def evaluate(expr: Expr, view: Assignment) -> bool:
    """
    Evaluate ``expr`` under one assignment.

    Both operands of a binary node are always evaluated.
    """
    if isinstance(expr, Sole):
        return view.get(expr.name)
    if isinstance(expr, Const):
        return expr.value
    if isinstance(expr, UnOp):
        return not evaluate(expr.expr, view)
    if isinstance(expr, BinOp):
        l = evaluate(expr.lhs, view)
        r = evaluate(expr.rhs, view)
        if expr.op is BinaryOperator.AND:
            return l and r
        if expr.op is BinaryOperator.OR:
            return l or r
        if expr.op is BinaryOperator.IMP:
            return _imp(l, r)
        if expr.op is BinaryOperator.IFF:
            return l == r
        raise ValueError(f"Unknown binary operator: {expr.op}")
    raise TypeError(f"Unknown expression type: {type(expr)}")


def eval_expr(expr: Expr) -> EvalResult:
    """Check ``expr`` against every assignment; return the first counterexample."""
    env = VarEnv.from_expr(expr)
    logger.debug("Checking %d assignments over %s", env.assignment_count, env.variables)
    for view in env.assignments():
        if not evaluate(expr, view):
            logger.debug("Assignment %d falsifies %s", view.bits, expr)
            return NotTautology(view.to_dict(), view.bits)
    return Tautology()


def truth_table(expr: Expr) -> Iterator[Tuple[Dict[str, bool], bool]]:
    """Yield ``(row, value)`` for every assignment in ascending order."""
    env = VarEnv.from_expr(expr)
    for view in env.assignments():
        yield view.to_dict(), evaluate(expr, view)


__all__ = [
    "EvalResult",
    "Tautology",
    "NotTautology",
    "evaluate",
    "eval_expr",
    "truth_table",
]
