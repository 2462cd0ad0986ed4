"""
Tests for tautology/oracle.py: the parse, bound and evaluate pipeline.
"""

import logging

import pytest

from tautology.config import TautologyConfig
from tautology.errors import InvalidCharacterError, RedundantToken, VariableLimitExceeded
from tautology.evaluator import NotTautology, Tautology
from tautology.oracle import DEMO_FORMULAS, check, enforce_variable_limit
from tautology.parser import generate


class TestCheck:

    def test_tautology(self):
        assert check("(¬(p → q) → (p → ¬q))") == Tautology()

    def test_not_tautology(self):
        assert check("((p → ¬q) → ¬(p → q))") == NotTautology({"p": False, "q": False}, 0)

    def test_errors_propagate(self):
        with pytest.raises(InvalidCharacterError):
            check("(p & q)")
        with pytest.raises(RedundantToken):
            check("p q")

    def test_variable_limit(self):
        config = TautologyConfig(max_variables=2)
        with pytest.raises(VariableLimitExceeded) as excinfo:
            check("((p ∧ q) ∨ r)", config)
        assert excinfo.value.count == 3
        assert excinfo.value.limit == 2
        assert excinfo.value.code == "EVAL-1"

    def test_limit_is_inclusive(self):
        config = TautologyConfig(max_variables=2)
        assert check("(p ∨ ¬q)", config) == NotTautology({"p": False, "q": True}, 2)

    def test_enforce_variable_limit_without_evaluating(self):
        config = TautologyConfig(max_variables=3)
        enforce_variable_limit(generate("((p ∧ q) ∨ r)"), config)
        with pytest.raises(VariableLimitExceeded):
            enforce_variable_limit(generate("((p ∧ q) ∨ (r ∧ s))"), config)

    def test_verdict_is_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="tautology.oracle"):
            check("(⊥ → p)")
        assert "(⊥ → p): tautology" in caplog.text


class TestDemoFormulas:

    def test_demo_results(self):
        verdicts = [check(f).is_tautology for f in DEMO_FORMULAS]
        assert verdicts == [True, False, True, False, True, False, True, False, True]
