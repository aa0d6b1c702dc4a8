"""
mipmodel Python Package

Solver-independent modeling layer for mixed-integer linear and quadratic problems.
"""

from .constraints import Constraint, ConstraintSense
from .model import Model
from .objective import Objective, Sense
from .parameters import SolveOptions
from .solver import Solver, available_solvers, new_solver, register_solver, unregister_solver
from .standard_form import StandardForm
from .terms import (
    LinearTermStore, QuadraticTerm, QuadraticTermStore, Term,
    canonicalize_quadratic_terms, canonicalize_terms
)
from .variables import (
    BoolVariable, FloatVariable, IntVariable, Variable, VariableRegistry, VarKind
)

__version__ = "0.1.0"

__all__ = [
    'Model',
    'Objective',
    'Sense',
    'Constraint',
    'ConstraintSense',
    'Variable',
    'FloatVariable',
    'IntVariable',
    'BoolVariable',
    'VariableRegistry',
    'VarKind',
    'Term',
    'QuadraticTerm',
    'LinearTermStore',
    'QuadraticTermStore',
    'canonicalize_terms',
    'canonicalize_quadratic_terms',
    'StandardForm',
    'SolveOptions',
    'Solver',
    'register_solver',
    'unregister_solver',
    'available_solvers',
    'new_solver',
    '__version__',
]
