"""
Tests for variables and the variable registry.
"""

import math

import numpy as np
import pytest

from mipmodel import BoolVariable, FloatVariable, IntVariable, Model, Variable, VarKind


class TestVariableCreation:
    """Tests for creating variables through the model."""

    def test_indices_follow_creation_order(self, model) -> None:
        created = [
            model.new_bool(),
            model.new_float(0.0, 1.0),
            model.new_int(-5, 5),
            model.new_bool(),
            model.new_float(-math.inf, math.inf),
        ]
        assert [v.index for v in created] == [0, 1, 2, 3, 4]
        assert model.vars() == created

    def test_float_variable(self, model) -> None:
        v = model.new_float(-1.5, 2.5)
        assert isinstance(v, FloatVariable)
        assert v.kind is VarKind.FLOAT
        assert v.is_float()
        assert not v.is_int()
        assert not v.is_bool()
        assert v.lower_bound == -1.5
        assert v.upper_bound == 2.5

    def test_int_variable(self, model) -> None:
        v = model.new_int(-3, 7)
        assert isinstance(v, IntVariable)
        assert v.is_int()
        assert not v.is_float()
        assert not v.is_bool()
        assert v.lower_bound == -3
        assert v.upper_bound == 7
        assert isinstance(v.lower_bound, int)

    def test_bool_variable_is_an_int(self, model) -> None:
        v = model.new_bool()
        assert isinstance(v, BoolVariable)
        assert v.is_bool()
        assert v.is_int()
        assert not v.is_float()
        assert (v.lower_bound, v.upper_bound) == (0, 1)

    def test_bounds_are_not_ordered_by_the_model(self, model) -> None:
        v = model.new_float(10.0, 1.0)
        assert (v.lower_bound, v.upper_bound) == (10.0, 1.0)

    def test_int_bounds_accept_integral_numbers(self, model) -> None:
        v = model.new_int(np.int64(2), 4.0)
        assert (v.lower_bound, v.upper_bound) == (2, 4)

    def test_bounds_are_read_only(self, model) -> None:
        v = model.new_float(0.0, 1.0)
        with pytest.raises(AttributeError):
            v.lower_bound = 5.0


class TestInvalidBounds:
    """NaN and malformed bounds never register a variable."""

    @pytest.mark.parametrize("lower, upper", [(math.nan, 1.0), (0.0, math.nan)])
    def test_float_nan_bound(self, model, lower, upper) -> None:
        with pytest.raises(ValueError, match="NaN"):
            model.new_float(lower, upper)
        assert model.vars() == []

    @pytest.mark.parametrize("lower, upper", [(math.nan, 1), (0, float("nan"))])
    def test_int_nan_bound(self, model, lower, upper) -> None:
        with pytest.raises(ValueError, match="NaN"):
            model.new_int(lower, upper)
        assert model.vars() == []

    @pytest.mark.parametrize("lower, upper", [(0.5, 1), (0, math.inf)])
    def test_int_non_integral_bound(self, model, lower, upper) -> None:
        with pytest.raises(ValueError, match="integral"):
            model.new_int(lower, upper)
        assert model.vars() == []

    def test_non_numeric_bound(self, model) -> None:
        with pytest.raises(TypeError):
            model.new_float("0", 1.0)
        assert model.vars() == []

    def test_failed_creation_does_not_consume_an_index(self, model) -> None:
        model.new_bool()
        with pytest.raises(ValueError):
            model.new_float(math.nan, 0.0)
        assert model.new_bool().index == 1


class TestVariableNames:
    """Tests for variable names."""

    def test_default_labels(self, model) -> None:
        f = model.new_float(0.0, 1.0)
        i = model.new_int(0, 1)
        b = model.new_bool()
        assert (f.name, i.name, b.name) == ("F0", "I1", "B2")
        assert str(b) == "B2"

    def test_set_name(self, model) -> None:
        v = model.new_bool()
        v.name = "open"
        assert v.name == "open"
        assert str(v) == "open"
        assert model.has_name(v)

    def test_rename(self, model) -> None:
        v = model.new_bool()
        v.name = "a"
        v.name = "b"
        assert v.name == "b"

    def test_unnamed_variable_has_no_explicit_name(self, model) -> None:
        assert not model.has_name(model.new_bool())

    def test_duplicate_names_are_allowed(self, model) -> None:
        a = model.new_bool()
        b = model.new_bool()
        a.name = "same"
        b.name = "same"
        assert a.name == b.name == "same"
        assert a.index != b.index

    def test_name_must_be_a_string(self, model) -> None:
        v = model.new_bool()
        with pytest.raises(TypeError):
            v.name = 3

    def test_names_are_per_model(self) -> None:
        first = Model()
        second = Model()
        a = first.new_bool()
        b = second.new_bool()
        a.name = "a"
        assert b.name == "B0"

    def test_empty_name_falls_back_to_label(self, model) -> None:
        v = model.new_float(0.0, 1.0)
        v.name = ""
        assert v.name == "F0"
        c = model.new_constraint("<=", 1.0)
        c.new_term(1.0, v)
        assert str(c) == "1 F0 <= 1"

    def test_variable_is_abstract(self, model) -> None:
        with pytest.raises(TypeError):
            Variable(model, 0)
