"""
Linear and quadratic terms, and the stores that collect them.

A store keeps every term exactly as it was declared. Repeated declarations
for the same variable (or the same pair of variables) are merged only when
the canonical term list is read:

>>> store = LinearTermStore(model)
>>> store.new_term(2.0, x)
>>> store.new_term(1.0, x)
>>> store.terms()         # one term, coefficient 3.0
>>> store.term(x)         # (Term(3.0, x), 2)

Aggregates that sum to exactly zero are left out of the canonical list, so
a solver never receives a zero coefficient.
"""

import math
from typing import Dict, List, Tuple

from ._numeric import ensure_float, format_number
from .variables import Variable


class Term:
    """
    Product of a coefficient and a variable.

    Parameters
    ----------
    coefficient : float
        Coefficient of the variable
    variable : Variable
        Referenced variable
    """

    def __init__(self, coefficient: float, variable: Variable):
        self._coefficient = coefficient
        self._variable = variable

    @property
    def coefficient(self) -> float:
        return self._coefficient

    @property
    def variable(self) -> Variable:
        return self._variable

    def __str__(self):
        return f"{format_number(self._coefficient)} {self._variable}"

    def __repr__(self):
        return f"Term({self._coefficient!r}, {self._variable})"


class QuadraticTerm:
    """
    Product of a coefficient and two variables.

    The variables are reordered on construction so that
    ``var1.index <= var2.index``; ``(c, x, y)`` and ``(c, y, x)`` describe
    the same term.

    Parameters
    ----------
    coefficient : float
        Coefficient of the product
    variable1, variable2 : Variable
        Referenced variables, in any order
    """

    def __init__(self, coefficient: float, variable1: Variable, variable2: Variable):
        if variable2.index < variable1.index:
            variable1, variable2 = variable2, variable1
        self._coefficient = coefficient
        self._var1 = variable1
        self._var2 = variable2

    @property
    def coefficient(self) -> float:
        return self._coefficient

    @property
    def var1(self) -> Variable:
        """Variable with the lower index"""
        return self._var1

    @property
    def var2(self) -> Variable:
        """Variable with the higher (or equal) index"""
        return self._var2

    @property
    def key(self) -> Tuple[Variable, Variable]:
        return self._var1, self._var2

    def __str__(self):
        coefficient = format_number(self._coefficient)
        if self._var1 is self._var2:
            return f"{coefficient} {self._var1}^2"
        return f"{coefficient} {self._var1}*{self._var2}"

    def __repr__(self):
        return f"QuadraticTerm({self._coefficient!r}, {self._var1}, {self._var2})"


def _sum_coefficients(coefficients: List[float]) -> float:
    """
    Correctly rounded sum of ``coefficients``.

    ``math.fsum`` refuses sums that overflow or mix ``inf`` with ``-inf``;
    those fall back to plain float addition, giving ``inf``/``-inf`` or NaN.
    A NaN aggregate is not zero and stays in the canonical terms.
    """
    try:
        return math.fsum(coefficients)
    except (OverflowError, ValueError):
        return sum(coefficients, 0.0)


def canonicalize_terms(terms: List[Term]) -> List[Term]:
    """
    Merge linear terms per variable.

    Returns one term per variable holding the sum of its coefficients.
    Variables whose coefficients sum to zero are omitted. The result follows
    the order in which variables first appear in ``terms``.
    """
    grouped: Dict[Variable, List[float]] = {}
    for term in terms:
        grouped.setdefault(term.variable, []).append(term.coefficient)

    canonical = []
    for variable, coefficients in grouped.items():
        coefficient = _sum_coefficients(coefficients)
        if coefficient != 0.0:
            canonical.append(Term(coefficient, variable))
    return canonical


def canonicalize_quadratic_terms(terms: List[QuadraticTerm]) -> List[QuadraticTerm]:
    """Merge quadratic terms per unordered variable pair, see :func:`canonicalize_terms`"""
    grouped: Dict[Tuple[Variable, Variable], List[float]] = {}
    for term in terms:
        grouped.setdefault(term.key, []).append(term.coefficient)

    canonical = []
    for (variable1, variable2), coefficients in grouped.items():
        coefficient = _sum_coefficients(coefficients)
        if coefficient != 0.0:
            canonical.append(QuadraticTerm(coefficient, variable1, variable2))
    return canonical


class _TermStore:
    """Common part of the linear and quadratic stores"""

    def __init__(self, model):
        self._model = model
        self._terms = []

    def _check_variable(self, variable):
        if not isinstance(variable, Variable):
            raise TypeError(f"Expected a Variable, got {type(variable).__name__}")
        if variable.model is not self._model:
            raise ValueError(f"Variable {variable} belongs to another model")

    def raw_terms(self) -> list:
        """Copy of the terms as declared, in declaration order"""
        return list(self._terms)

    def __len__(self):
        return len(self._terms)


class LinearTermStore(_TermStore):
    """
    Append-only collection of linear terms.

    Parameters
    ----------
    model : Model
        Model whose variables the terms may reference
    """

    def new_term(self, coefficient: float, variable: Variable) -> Term:
        """
        Declare a term. Nothing is merged at this point.

        Raises
        ------
        ValueError
            If the coefficient is NaN or the variable belongs to another model
        TypeError
            If the coefficient is not a number or ``variable`` is not a Variable
        """
        coefficient = ensure_float(coefficient, "term coefficient")
        self._check_variable(variable)
        term = Term(coefficient, variable)
        self._terms.append(term)
        return term

    def term(self, variable: Variable) -> Tuple[Term, int]:
        """
        Aggregate of all terms declared for ``variable``.

        Returns
        -------
        tuple of (Term, int)
            Term with the summed coefficient, and the number of declarations
            that contributed to it (zero if the variable was never used)
        """
        self._check_variable(variable)
        coefficients = [t.coefficient for t in self._terms if t.variable is variable]
        return Term(_sum_coefficients(coefficients), variable), len(coefficients)

    def terms(self) -> List[Term]:
        """Canonical terms, one per variable with a nonzero sum, in no guaranteed order"""
        return canonicalize_terms(self._terms)


class QuadraticTermStore(_TermStore):
    """
    Append-only collection of quadratic terms.

    Parameters
    ----------
    model : Model
        Model whose variables the terms may reference
    """

    def new_term(self, coefficient: float, variable1: Variable,
                 variable2: Variable) -> QuadraticTerm:
        """
        Declare a quadratic term. The variables may be given in any order.

        Raises
        ------
        ValueError
            If the coefficient is NaN or a variable belongs to another model
        TypeError
            If the coefficient is not a number or an argument is not a Variable
        """
        coefficient = ensure_float(coefficient, "quadratic term coefficient")
        self._check_variable(variable1)
        self._check_variable(variable2)
        term = QuadraticTerm(coefficient, variable1, variable2)
        self._terms.append(term)
        return term

    def term(self, variable1: Variable, variable2: Variable) -> Tuple[QuadraticTerm, int]:
        """Aggregate of all terms declared for the pair, see :meth:`LinearTermStore.term`"""
        self._check_variable(variable1)
        self._check_variable(variable2)
        key = QuadraticTerm(0.0, variable1, variable2).key
        coefficients = [t.coefficient for t in self._terms if t.key == key]
        return QuadraticTerm(_sum_coefficients(coefficients), *key), len(coefficients)

    def terms(self) -> List[QuadraticTerm]:
        """Canonical quadratic terms, one per variable pair with a nonzero sum"""
        return canonicalize_quadratic_terms(self._terms)
