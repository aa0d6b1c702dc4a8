"""
The objective of a model: linear and quadratic terms plus a direction.
"""

from enum import Enum
from typing import List, Tuple

from .terms import LinearTermStore, QuadraticTerm, QuadraticTermStore, Term
from .variables import Variable


class Sense(Enum):
    """Optimization sense"""
    MINIMIZE = 'minimize'
    MAXIMIZE = 'maximize'


class Objective:
    """
    Objective function of a model.

    Every model owns exactly one objective, reachable through
    :attr:`Model.objective`. It starts out empty and minimizing.

    Parameters
    ----------
    model : Model
        Owning model

    Examples
    --------
    >>> objective = model.objective
    >>> objective.set_maximize()
    >>> objective.new_term(1.0, x)                 # maximize x
    >>> objective.new_term(2.0, x)                 # maximize 3 x
    >>> objective.new_quadratic_term(1.0, x, y)    # maximize 3 x + 1 x*y
    >>> objective.new_quadratic_term(1.0, y, x)    # maximize 3 x + 2 x*y
    """

    def __init__(self, model):
        self._model = model
        self._maximize = False
        self._terms = LinearTermStore(model)
        self._quadratic_terms = QuadraticTermStore(model)

    @property
    def sense(self) -> Sense:
        return Sense.MAXIMIZE if self._maximize else Sense.MINIMIZE

    def set_maximize(self):
        self._maximize = True

    def set_minimize(self):
        self._maximize = False

    def is_maximize(self) -> bool:
        return self._maximize

    def is_quadratic(self) -> bool:
        """True if at least one quadratic term has a nonzero aggregated coefficient"""
        return len(self._quadratic_terms.terms()) > 0

    def is_linear(self) -> bool:
        return not self.is_quadratic()

    def new_term(self, coefficient: float, variable: Variable) -> Term:
        """Add ``coefficient * variable``"""
        return self._terms.new_term(coefficient, variable)

    def term(self, variable: Variable) -> Tuple[Term, int]:
        """Summed linear term for ``variable`` and the number of its declarations"""
        return self._terms.term(variable)

    def terms(self) -> List[Term]:
        """
        Canonical linear terms.

        Each variable is reported once with the sum of its coefficients.
        The order is not specified and may differ between calls.
        """
        return self._terms.terms()

    def new_quadratic_term(self, coefficient: float, variable1: Variable,
                           variable2: Variable) -> QuadraticTerm:
        """Add ``coefficient * variable1 * variable2``"""
        return self._quadratic_terms.new_term(coefficient, variable1, variable2)

    def quadratic_term(self, variable1: Variable,
                       variable2: Variable) -> Tuple[QuadraticTerm, int]:
        """Summed quadratic term for the pair, in either order, and its declaration count"""
        return self._quadratic_terms.term(variable1, variable2)

    def quadratic_terms(self) -> List[QuadraticTerm]:
        """Canonical quadratic terms, one per unordered variable pair"""
        return self._quadratic_terms.terms()

    def raw_terms(self) -> List[Term]:
        return self._terms.raw_terms()

    def raw_quadratic_terms(self) -> List[QuadraticTerm]:
        return self._quadratic_terms.raw_terms()

    def __str__(self):
        terms = sorted(self.terms(), key=lambda t: t.variable.index)
        quadratic_terms = sorted(self.quadratic_terms(),
                                 key=lambda t: (t.var1.index, t.var2.index))
        parts = [str(t) for t in terms] + [str(t) for t in quadratic_terms]
        if not parts:
            return self.sense.value
        return f"{self.sense.value} {' + '.join(parts)}"

    def __repr__(self):
        return f"Objective({self})"
