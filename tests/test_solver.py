"""
Tests for the solver seam and solve options.
"""

import pytest

from mipmodel import (
    ConstraintSense, Model, SolveOptions, Solver, available_solvers, new_solver,
    register_solver, unregister_solver
)


class RecordingSolver(Solver):
    """Back-end that returns what it was given"""

    def solve(self, options=None):
        options = options or SolveOptions()
        options.validate()
        form = self.model.to_standard_form()
        return {"n": form.n, "m": form.m, "options": options.to_dict()}


@pytest.fixture
def provider():
    register_solver("recording", RecordingSolver)
    yield "recording"
    unregister_solver("recording")


class TestSolverRegistry:
    """Tests for registering and creating solvers."""

    def test_new_solver(self, provider, model) -> None:
        model.new_bool()
        model.new_constraint(ConstraintSense.LE, 1.0)
        solver = new_solver(provider, model)
        assert isinstance(solver, RecordingSolver)
        assert solver.model is model
        result = solver.solve(SolveOptions.from_dict({"duration": 5.0}))
        assert result["n"] == 1
        assert result["m"] == 1
        assert result["options"]["duration"] == 5.0

    def test_available_solvers(self, provider) -> None:
        assert provider in available_solvers()

    def test_unknown_provider(self, model) -> None:
        with pytest.raises(ValueError, match="Unknown solver provider"):
            new_solver("does-not-exist", model)

    def test_unregister(self, model) -> None:
        register_solver("temporary", RecordingSolver)
        unregister_solver("temporary")
        assert "temporary" not in available_solvers()
        unregister_solver("temporary")

    def test_invalid_registration(self) -> None:
        with pytest.raises(ValueError):
            register_solver("", RecordingSolver)
        with pytest.raises(TypeError):
            register_solver("broken", "not callable")

    def test_solver_requires_a_model(self) -> None:
        with pytest.raises(TypeError):
            RecordingSolver("model")

    def test_abstract_solver(self) -> None:
        with pytest.raises(TypeError):
            Solver(Model())


class TestSolveOptions:
    """Tests for SolveOptions."""

    def test_defaults(self) -> None:
        options = SolveOptions()
        assert options.duration == 30.0
        assert options.verbosity == "off"
        assert options.threads == 0
        options.validate()

    def test_dict_round_trip_ignores_unknown_keys(self) -> None:
        options = SolveOptions.from_dict({"threads": 4, "verbosity": "high",
                                          "unknown": 1, "validate": None})
        assert options.threads == 4
        assert options.verbosity == "high"
        assert not hasattr(options, "unknown")
        assert callable(options.validate)
        assert SolveOptions.from_dict(options.to_dict()).to_dict() == options.to_dict()

    @pytest.mark.parametrize("key, value", [
        ("duration", -1.0),
        ("verbosity", "loud"),
        ("mip_gap_relative", -0.1),
        ("threads", -2),
    ])
    def test_validate(self, key, value) -> None:
        options = SolveOptions.from_dict({key: value})
        with pytest.raises(ValueError):
            options.validate()
