"""
Linear constraints: ``sum(coefficient * variable) <sense> right_hand_side``
"""

from enum import Enum
from typing import List, Tuple, Union

from ._numeric import format_number
from .terms import LinearTermStore, Term
from .variables import Variable


class ConstraintSense(Enum):
    """Constraint sense"""
    LE = '<='  # Less than or equal
    EQ = '='   # Equal
    GE = '>='  # Greater than or equal

    @classmethod
    def parse(cls, sense: Union[str, 'ConstraintSense']) -> 'ConstraintSense':
        """Accept a ConstraintSense or its symbol (``'<='``, ``'='``/``'=='``, ``'>='``)"""
        if isinstance(sense, cls):
            return sense
        if isinstance(sense, str):
            symbol = sense.strip()
            if symbol == '==':
                symbol = '='
            try:
                return cls(symbol)
            except ValueError:
                pass
        raise ValueError(f"Unknown constraint sense: {sense!r}")


class Constraint:
    """
    A linear constraint of a model.

    Created with :meth:`Model.new_constraint`; terms are attached afterwards
    with :meth:`new_term`. Declaring the same variable more than once adds
    the coefficients up.

    Parameters
    ----------
    model : Model
        Owning model
    sense : ConstraintSense
        Relational operator between terms and right-hand side
    right_hand_side : float
        Constant compared against the weighted sum of the terms

    Examples
    --------
    >>> c = model.new_constraint(ConstraintSense.LE, 13.0)
    >>> c.new_term(-8.0, x)
    >>> c.new_term(10.0, y)
    >>> str(c)
    '-8 x + 10 y <= 13'
    """

    def __init__(self, model, sense: ConstraintSense, right_hand_side: float):
        self._model = model
        self._sense = sense
        self._right_hand_side = right_hand_side
        self._terms = LinearTermStore(model)

    @property
    def model(self):
        return self._model

    @property
    def sense(self) -> ConstraintSense:
        return self._sense

    @property
    def right_hand_side(self) -> float:
        return self._right_hand_side

    @property
    def name(self) -> str:
        """Name of the constraint, empty string if never set"""
        return self._model._get_constraint_name(self)

    @name.setter
    def name(self, name: str):
        if not isinstance(name, str):
            raise TypeError("Constraint name must be a string")
        self._model._set_constraint_name(self, name)

    def new_term(self, coefficient: float, variable: Variable) -> Term:
        """Add ``coefficient * variable`` to the left-hand side"""
        return self._terms.new_term(coefficient, variable)

    def term(self, variable: Variable) -> Tuple[Term, int]:
        """Summed term for ``variable`` and the number of its declarations"""
        return self._terms.term(variable)

    def terms(self) -> List[Term]:
        """Canonical terms; the order is not guaranteed"""
        return self._terms.terms()

    def raw_terms(self) -> List[Term]:
        """Terms as declared, including repeats"""
        return self._terms.raw_terms()

    def __str__(self):
        terms = sorted(self.terms(), key=lambda t: t.variable.index)
        lhs = " + ".join(str(t) for t in terms)
        rhs = f"{self._sense.value} {format_number(self._right_hand_side)}"
        return f"{lhs} {rhs}" if lhs else rhs

    def __repr__(self):
        return f"Constraint({self}, name={self.name!r})"
