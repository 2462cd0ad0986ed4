"""
Top-level tautology check: parse, apply the variable bound, evaluate.

The evaluator has no resource guard of its own; this module rejects formulas
whose 2^n table would exceed the configured bound before enumeration starts.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from tautology.config import TautologyConfig
from tautology.errors import VariableLimitExceeded
from tautology.evaluator import EvalResult, eval_expr
from tautology.expr import Expr
from tautology.parser import generate
from tautology.varenv import free_variables

logger = logging.getLogger(__name__)


# The formulas run by the original demo program.
DEMO_FORMULAS: Tuple[str, ...] = (
    "(¬(p → q) → (p → ¬q))",
    "((p → ¬q) → ¬(p → q))",
    "((p → (q ∧ r)) → ((p → q) ∨ (q → r)))",
    "(((p → q) ∨ (q → r)) → (p → (q ∨ r)))",
    "(p ∨ (p → (q ∧ ¬q)))",
    "((((p → q) → p) → q) → ¬p)",
    "(⊥ → p)",
    "(T → p)",
    "(((p → q) → p) → p)",
)


def enforce_variable_limit(expr: Expr, config: Optional[TautologyConfig] = None) -> None:
    """Raise VariableLimitExceeded if ``expr`` is over the configured bound."""
    config = config or TautologyConfig()
    count = len(free_variables(expr))
    if count > config.max_variables:
        raise VariableLimitExceeded(count, config.max_variables)


def check_expr(expr: Expr, config: Optional[TautologyConfig] = None) -> EvalResult:
    enforce_variable_limit(expr, config)
    return eval_expr(expr)


def check(text: str, config: Optional[TautologyConfig] = None) -> EvalResult:
    """
    Decide whether ``text`` is a tautology.

    Raises:
        TautologyError: lexical or grammar errors from ``generate`` and
            VariableLimitExceeded when the formula is over the bound.
    """
    expr = generate(text)
    logger.debug("Parsed %r as %s", text, expr)
    result = check_expr(expr, config)
    logger.info("%s: %s", expr, result)
    return result


__all__ = ["DEMO_FORMULAS", "check", "check_expr", "enforce_variable_limit"]
