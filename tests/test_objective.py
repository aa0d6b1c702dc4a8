"""
Tests for the objective.
"""

import math

import pytest

from mipmodel import Sense


class TestObjectiveSense:
    """Tests for the objective direction."""

    def test_defaults_to_minimize(self, model) -> None:
        assert not model.objective.is_maximize()
        assert model.objective.sense is Sense.MINIMIZE
        assert str(model.objective) == "minimize"

    def test_toggle(self, model) -> None:
        objective = model.objective
        objective.set_maximize()
        assert objective.is_maximize()
        assert objective.sense is Sense.MAXIMIZE
        assert str(objective) == "maximize"
        objective.set_minimize()
        assert not objective.is_maximize()
        assert str(objective) == "minimize"


class TestObjectiveTerms:
    """Tests for linear objective terms."""

    def test_bool_scenario(self, model) -> None:
        x = model.new_bool()
        y = model.new_bool()
        z = model.new_bool()
        objective = model.objective
        assert objective.terms() == []

        t1 = objective.new_term(2.0, x)
        t2 = objective.new_term(1.0, x)
        t3 = objective.new_term(3.0, y)
        assert (t1.coefficient, t2.coefficient, t3.coefficient) == (2.0, 1.0, 3.0)
        assert str(t1) == "2 B0"

        canonical = {t.variable.index: t.coefficient for t in objective.terms()}
        assert canonical == {0: 3.0, 1: 3.0}

        term, definitions = objective.term(x)
        assert (term.coefficient, definitions) == (3.0, 2)
        term, definitions = objective.term(y)
        assert (term.coefficient, definitions) == (3.0, 1)
        term, definitions = objective.term(z)
        assert (term.coefficient, definitions) == (0.0, 0)
        assert not objective.is_maximize()

    def test_rendering_sorted_by_index(self, model) -> None:
        v = [model.new_bool() for _ in range(4)]
        objective = model.objective
        objective.new_term(3, v[2])
        objective.new_term(2, v[1])
        objective.new_term(1, v[0])
        assert str(objective) == "minimize 1 B0 + 2 B1 + 3 B2"

    def test_nan_term(self, model, x) -> None:
        with pytest.raises(ValueError):
            model.objective.new_term(math.nan, x)
        assert model.objective.raw_terms() == []


class TestQuadraticObjective:
    """Tests for quadratic objective terms."""

    def test_linear_until_a_quadratic_term_is_added(self, model, x, y) -> None:
        objective = model.objective
        objective.new_term(1.0, x)
        assert objective.is_linear()
        assert not objective.is_quadratic()

        objective.new_quadratic_term(1.0, x, y)
        assert objective.is_quadratic()
        assert not objective.is_linear()

    def test_cancelled_quadratic_terms_keep_objective_linear(self, model, x, y) -> None:
        objective = model.objective
        objective.new_quadratic_term(1.0, x, y)
        objective.new_quadratic_term(-1.0, y, x)
        assert objective.quadratic_terms() == []
        assert objective.is_linear()
        assert len(objective.raw_quadratic_terms()) == 2

    def test_symmetric_accumulation(self, model, x, y) -> None:
        objective = model.objective
        objective.set_maximize()
        objective.new_quadratic_term(1.0, x, x)
        objective.new_quadratic_term(1.0, x, y)
        objective.new_quadratic_term(1.0, y, x)

        canonical = {(t.var1.index, t.var2.index): t.coefficient
                     for t in objective.quadratic_terms()}
        assert canonical == {(0, 0): 1.0, (0, 1): 2.0}

        term, definitions = objective.quadratic_term(y, x)
        assert (term.coefficient, definitions) == (2.0, 2)

    def test_rendering(self, model, x, y) -> None:
        objective = model.objective
        objective.set_maximize()
        objective.new_quadratic_term(3.0, y, x)
        objective.new_quadratic_term(2.0, y, y)
        objective.new_quadratic_term(0.5, x, x)
        objective.new_term(1.0, y)
        assert str(objective) == "maximize 1 y + 0.5 x^2 + 3 x*y + 2 y^2"

    def test_nan_quadratic_term(self, model, x, y) -> None:
        with pytest.raises(ValueError):
            model.objective.new_quadratic_term(math.nan, x, y)
        assert model.objective.raw_quadratic_terms() == []
