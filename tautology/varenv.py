"""
Variable environment: free variables of a formula mapped to bit positions.

Positions follow ascending letter order, so for ``((p → q) ∨ r)`` the map is
``{p: 0, q: 1, r: 2}`` and assignment index 5 (0b101) reads p=True, q=False,
r=True.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, Mapping, Optional, Tuple

from tautology.expr import BinOp, Const, Expr, Sole, UnOp

# One variable per lowercase letter.
MAX_VARIABLES = 26


def free_variables(expr: Expr) -> FrozenSet[str]:
    """Collect every letter that appears in a Sole leaf of ``expr``."""
    if isinstance(expr, Sole):
        return frozenset({expr.name})
    if isinstance(expr, Const):
        return frozenset()
    if isinstance(expr, UnOp):
        return free_variables(expr.expr)
    if isinstance(expr, BinOp):
        return free_variables(expr.lhs) | free_variables(expr.rhs)
    raise TypeError(f"Unknown expression type: {type(expr)}")


@dataclass(frozen=True, slots=True)
class Assignment:
    """Read-only view of one truth-table row."""
    env: "VarEnv"
    bits: int

    def get(self, name: str) -> bool:
        position = self.env.position(name)
        if position is None:
            raise KeyError(name)
        return (self.bits >> position) & 1 == 1

    def to_dict(self) -> Dict[str, bool]:
        return {name: self.get(name) for name in self.env.variables}


class VarEnv:
    """Bijection between a formula's free variables and ``range(n)``."""

    __slots__ = ("_positions", "_variables")

    def __init__(self, variables: Iterable[str]):
        ordered = tuple(sorted(set(variables)))
        if len(ordered) > MAX_VARIABLES:
            raise ValueError(f"At most {MAX_VARIABLES} variables are supported")
        self._variables: Tuple[str, ...] = ordered
        self._positions: Mapping[str, int] = MappingProxyType(
            {name: i for i, name in enumerate(ordered)}
        )

    @classmethod
    def from_expr(cls, expr: Expr) -> "VarEnv":
        return cls(free_variables(expr))

    @property
    def variables(self) -> Tuple[str, ...]:
        """Variables in position order."""
        return self._variables

    @property
    def positions(self) -> Mapping[str, int]:
        return self._positions

    @property
    def assignment_count(self) -> int:
        return 1 << len(self._variables)

    def position(self, name: str) -> Optional[int]:
        """Bit position of ``name``, or None if it is not free in the formula."""
        return self._positions.get(name)

    def view(self, bits: int) -> Assignment:
        if not 0 <= bits < self.assignment_count:
            raise ValueError(f"Assignment {bits} out of range for {len(self)} variables")
        return Assignment(self, bits)

    def assignments(self) -> Iterator[Assignment]:
        """Every assignment, 0 through 2^n - 1 in ascending order."""
        for bits in range(self.assignment_count):
            yield Assignment(self, bits)

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        return f"VarEnv({dict(self._positions)!r})"


__all__ = ["MAX_VARIABLES", "free_variables", "Assignment", "VarEnv"]
