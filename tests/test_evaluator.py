"""
Tests for tautology/evaluator.py exhaustive evaluation.
"""

from itertools import product

import pytest

from tautology.evaluator import EvalResult, NotTautology, Tautology, eval_expr, evaluate, truth_table
from tautology.expr import BinaryOperator, BinOp, Sole
from tautology.parser import generate
from tautology.varenv import VarEnv


TAUTOLOGIES = [
    "(¬(p → q) → (p → ¬q))",
    "((p → (q ∧ r)) → ((p → q) ∨ (q → r)))",
    "(⊥ → p)",
    "(p ∨ (p → (q ∧ ¬q)))",
    "(((p → q) → p) → p)",
    "(p ∨ ¬p)",
    "((p ↔ q) ↔ (q ↔ p))",
    "T",
    "(⊥ → ⊥)",
]

# formula, witness at the lowest falsifying assignment
NON_TAUTOLOGIES = [
    ("((p → ¬q) → ¬(p → q))", {"p": False, "q": False}),
    ("(((p → q) ∨ (q → r)) → (p → (q ∨ r)))", {"p": True, "q": False, "r": False}),
    ("((((p → q) → p) → q) → ¬p)", {"p": True, "q": True}),
    ("(T → p)", {"p": False}),
    ("p", {"p": False}),
    ("(p ∧ q)", {"p": False, "q": False}),
    ("(p ↔ q)", {"p": True, "q": False}),
]


def _brute_force(expr):
    """Scan every row and return the lowest falsifying index."""
    env = VarEnv.from_expr(expr)
    for bits in range(env.assignment_count):
        view = env.view(bits)
        if not evaluate(expr, view):
            return bits
    return None


class TestEvaluate:
    """Single-assignment semantics."""

    @pytest.mark.parametrize("op, table", [
        (BinaryOperator.AND, {(False, False): False, (False, True): False, (True, False): False, (True, True): True}),
        (BinaryOperator.OR, {(False, False): False, (False, True): True, (True, False): True, (True, True): True}),
        (BinaryOperator.IMP, {(False, False): True, (False, True): True, (True, False): False, (True, True): True}),
        (BinaryOperator.IFF, {(False, False): True, (False, True): False, (True, False): False, (True, True): True}),
    ])
    def test_binary_truth_tables(self, op, table):
        expr = BinOp(Sole("a"), op, Sole("b"))
        env = VarEnv.from_expr(expr)
        for a, b in product([False, True], repeat=2):
            view = env.view(int(a) | (int(b) << 1))
            assert evaluate(expr, view) is table[(a, b)]

    def test_negation(self):
        expr = generate("¬p")
        env = VarEnv.from_expr(expr)
        assert evaluate(expr, env.view(0)) is True
        assert evaluate(expr, env.view(1)) is False

    def test_constants(self):
        env = VarEnv(())
        assert evaluate(generate("T"), env.view(0)) is True
        assert evaluate(generate("⊥"), env.view(0)) is False


class TestEvalExpr:
    """Whole-table tautology decisions."""

    @pytest.mark.parametrize("text", TAUTOLOGIES)
    def test_known_tautologies(self, text):
        result = eval_expr(generate(text))
        assert result == Tautology()
        assert result.is_tautology

    @pytest.mark.parametrize("text, witness", NON_TAUTOLOGIES)
    def test_known_non_tautologies(self, text, witness):
        result = eval_expr(generate(text))
        assert isinstance(result, NotTautology)
        assert not result.is_tautology
        assert result.witness == witness

    @pytest.mark.parametrize("text, witness", NON_TAUTOLOGIES)
    def test_witness_is_lowest_falsifying_index(self, text, witness):
        expr = generate(text)
        assert eval_expr(expr).index == _brute_force(expr)

    def test_witness_actually_falsifies(self):
        expr = generate("((((p → q) → p) → q) → ¬p)")
        result = eval_expr(expr)
        env = VarEnv.from_expr(expr)
        assert env.view(result.index).to_dict() == result.witness
        assert evaluate(expr, env.view(result.index)) is False

    def test_repeated_evaluation_is_deterministic(self):
        expr = generate("(((p → q) ∨ (q → r)) → (p → (q ∨ r)))")
        results = [eval_expr(expr) for _ in range(5)]
        assert all(r == results[0] for r in results)

    def test_last_assignment_is_examined(self):
        # Only p=q=r=s=True falsifies: index 2^4 - 1.
        result = eval_expr(generate("¬((p ∧ q) ∧ (r ∧ s))"))
        assert result.index == 15
        assert result.witness == {"p": True, "q": True, "r": True, "s": True}

    def test_zero_variables_not_tautology(self):
        result = eval_expr(generate("(T → ⊥)"))
        assert result == NotTautology({}, 0)
        assert str(result) == "not a tautology"

    def test_result_to_dict(self):
        assert eval_expr(generate("(p ∨ ¬p)")).to_dict() == {"tautology": True}
        data = eval_expr(generate("(T → p)")).to_dict()
        assert data == {"tautology": False, "witness": {"p": False}, "index": 0}

    def test_result_base_is_abstract(self):
        with pytest.raises(TypeError):
            EvalResult()

    def test_result_str(self):
        assert str(eval_expr(generate("(⊥ → p)"))) == "tautology"
        assert str(eval_expr(generate("(p ∧ q)"))) == "not a tautology: p=False, q=False"


class TestTruthTable:

    def test_rows_ascend(self):
        rows = list(truth_table(generate("(p → q)")))
        assert rows == [
            ({"p": False, "q": False}, True),
            ({"p": True, "q": False}, False),
            ({"p": False, "q": True}, True),
            ({"p": True, "q": True}, True),
        ]

    def test_zero_variable_table(self):
        assert list(truth_table(generate("T"))) == [({}, True)]
