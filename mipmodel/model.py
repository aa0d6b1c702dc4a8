"""
Model class for mipmodel
"""
import logging
from typing import Dict, List, Optional, Union

from ._numeric import ensure_float, format_number
from .constraints import Constraint, ConstraintSense
from .objective import Objective
from .variables import BoolVariable, FloatVariable, IntVariable, Variable, VariableRegistry

logger = logging.getLogger(__name__)


class Model:
    """
    Mixed-integer model: variables, constraints and one objective.

    The model only grows. Variables and constraints are created through the
    ``new_*`` methods, live as long as the model, and cannot be removed.
    Names of variables and constraints are kept in side tables owned by the
    model and keyed by the object, so renaming never touches the entity.

    The model represents a problem of the form:
        minimize or maximize   sum(c_j * x_j) + sum(q_ij * x_i * x_j)
        subject to             sum(a_ij * x_j) <sense_i> rhs_i
                               l_j <= x_j <= u_j

    Parameters
    ----------
    name : str, optional
        Name of the model

    Examples
    --------
    >>> from mipmodel import Model, ConstraintSense
    >>>
    >>> model = Model()
    >>> x = model.new_float(0.0, 100.0)
    >>> y = model.new_int(0, 100)
    >>>
    >>> c = model.new_constraint(ConstraintSense.LE, 13.0)
    >>> c.new_term(-8.0, x)
    >>> c.new_term(10.0, y)
    >>>
    >>> model.objective.set_maximize()
    >>> model.objective.new_term(1.0, x)
    >>> model.objective.new_term(1.0, y)
    >>>
    >>> print(model)
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or "MIP_Model"
        self._registry = VariableRegistry(self)
        self._constraints: List[Constraint] = []
        self._objective = Objective(self)
        self._var_names: Dict[Variable, str] = {}
        self._constraint_names: Dict[Constraint, str] = {}

    # Name side tables

    def _get_var_name(self, variable: Variable) -> Optional[str]:
        return self._var_names.get(variable)

    def _set_var_name(self, variable: Variable, name: str):
        self._var_names[variable] = name

    def _get_constraint_name(self, constraint: Constraint) -> str:
        return self._constraint_names.get(constraint, "")

    def _set_constraint_name(self, constraint: Constraint, name: str):
        self._constraint_names[constraint] = name

    def has_name(self, entity: Union[Variable, Constraint]) -> bool:
        """True if a name has been set explicitly on the variable or constraint"""
        return entity in self._var_names or entity in self._constraint_names

    # Construction

    def new_float(self, lower_bound: float, upper_bound: float) -> FloatVariable:
        """
        Add a float variable with bounds ``[lower_bound, upper_bound]``.

        Parameters
        ----------
        lower_bound : float
            Lower bound, may be ``-inf``
        upper_bound : float
            Upper bound, may be ``inf``

        Returns
        -------
        FloatVariable
            The new variable; its index is the number of variables created
            before it

        Raises
        ------
        ValueError
            If a bound is NaN
        """
        return self._registry.new_float(lower_bound, upper_bound)

    def new_int(self, lower_bound: int, upper_bound: int) -> IntVariable:
        """
        Add an integer variable with bounds ``[lower_bound, upper_bound]``.

        Raises
        ------
        ValueError
            If a bound is NaN or not integral
        """
        return self._registry.new_int(lower_bound, upper_bound)

    def new_bool(self) -> BoolVariable:
        """Add a bool variable, an integer variable with bounds ``[0, 1]``"""
        return self._registry.new_bool()

    def new_constraint(self, sense: Union[str, ConstraintSense],
                       right_hand_side: float) -> Constraint:
        """
        Add a constraint without terms.

        Terms for existing and future variables are attached with
        :meth:`Constraint.new_term`. A constraint whose terms all cancel out
        has no canonical terms.

        Parameters
        ----------
        sense : ConstraintSense or str
            ``ConstraintSense.LE``/``'<='``, ``ConstraintSense.EQ``/``'='``
            or ``ConstraintSense.GE``/``'>='``
        right_hand_side : float
            Right-hand side value

        Returns
        -------
        Constraint
            The added constraint

        Raises
        ------
        ValueError
            If the right-hand side is NaN or the sense is unknown
        """
        sense = ConstraintSense.parse(sense)
        right_hand_side = ensure_float(right_hand_side, "right-hand side")
        constraint = Constraint(self, sense, right_hand_side)
        self._constraints.append(constraint)
        return constraint

    # Queries

    @property
    def objective(self) -> Objective:
        return self._objective

    def vars(self) -> List[Variable]:
        """Copy of the variables, ordered by index"""
        return self._registry.vars()

    def constraints(self) -> List[Constraint]:
        """Copy of the constraints in creation order"""
        return list(self._constraints)

    @property
    def n(self) -> int:
        """Number of variables"""
        return len(self._registry)

    @property
    def m(self) -> int:
        """Number of constraints"""
        return len(self._constraints)

    # Copy and export

    def copy(self) -> 'Model':
        """
        Create an independent copy of the model.

        Variables are recreated in index order with the same kind, bounds and
        name, so each copied variable has the index of its original. The
        objective sense, the canonical objective terms and every constraint
        (sense, right-hand side, name, canonical terms) are replayed against
        the new variables. Nothing is shared with the source model.

        Returns
        -------
        Model
            The copy
        """
        clone = Model(self.name)

        for variable in self._registry:
            if variable.is_float():
                clone_var = clone.new_float(variable.lower_bound, variable.upper_bound)
            elif variable.is_bool():
                clone_var = clone.new_bool()
            else:
                clone_var = clone.new_int(variable.lower_bound, variable.upper_bound)
            if variable in self._var_names:
                clone_var.name = self._var_names[variable]

        clone_vars = clone.vars()

        if self._objective.is_maximize():
            clone.objective.set_maximize()
        else:
            clone.objective.set_minimize()

        for term in self._objective.terms():
            clone.objective.new_term(term.coefficient, clone_vars[term.variable.index])

        for term in self._objective.quadratic_terms():
            clone.objective.new_quadratic_term(term.coefficient,
                                               clone_vars[term.var1.index],
                                               clone_vars[term.var2.index])

        for constraint in self._constraints:
            clone_constraint = clone.new_constraint(constraint.sense,
                                                    constraint.right_hand_side)
            for term in constraint.terms():
                clone_constraint.new_term(term.coefficient, clone_vars[term.variable.index])
            if constraint in self._constraint_names:
                clone_constraint.name = self._constraint_names[constraint]

        logger.debug("Copied model %r: %d variables, %d constraints",
                     self.name, clone.n, clone.m)
        return clone

    def to_standard_form(self) -> 'StandardForm':
        """
        Export the model as arrays.

        Returns
        -------
        StandardForm
            Sparse constraint matrix, bounds, objective vector and quadratic
            matrix built from the canonical terms
        """
        from .standard_form import StandardForm

        return StandardForm.from_model(self)

    def __str__(self):
        lines = [str(self._objective)]
        for i, constraint in enumerate(self._constraints):
            lines.append(f"{i:7d}: {constraint}")
        for i, variable in enumerate(self._registry):
            lines.append(f"{i:7d}: {variable} [{format_number(variable.lower_bound)}, "
                         f"{format_number(variable.upper_bound)}]")
        return "\n".join(lines) + "\n"

    def __repr__(self):
        return (f"Model(name='{self.name}', sense={self._objective.sense.value}, "
                f"variables={self.n}, constraints={self.m})")
