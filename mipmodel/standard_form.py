"""
Array view of a model for solver back-ends
"""
import logging
from typing import List, Optional, Union

import numpy as np
from scipy import sparse

from .constraints import ConstraintSense

logger = logging.getLogger(__name__)


def _ensure_contiguous_float64(arr):
    """Ensure array is contiguous float64"""
    if not isinstance(arr, np.ndarray):
        arr = np.array(arr, dtype=np.float64)
    if arr.dtype != np.float64:
        arr = arr.astype(np.float64)
    return np.ascontiguousarray(arr)


def _to_csr(matrix, what: str) -> sparse.csr_matrix:
    if sparse.issparse(matrix):
        return sparse.csr_matrix(matrix, dtype=np.float64)
    if isinstance(matrix, np.ndarray):
        return sparse.csr_matrix(matrix.astype(np.float64))
    raise TypeError(f"{what} must be a numpy array or scipy sparse matrix")


class StandardForm:
    """
    Model in array form.

    Represents the problem:
        minimize or maximize   c'*x + x'*Q*x
        subject to             AL <= A*x <= AU
                               l <= x <= u
                               x_j integral where integrality[j]

    The objective is not negated for maximization; ``maximize`` tells the
    direction.

    Attributes
    ----------
    A : scipy.sparse.csr_matrix
        Constraint matrix (m x n)
    AL, AU : np.ndarray
        Lower and upper bounds of the constraint rows (length m)
    l, u : np.ndarray
        Lower and upper bounds of the variables (length n)
    c : np.ndarray
        Linear objective coefficients (length n)
    Q : scipy.sparse.csr_matrix
        Upper-triangular quadratic objective coefficients (n x n)
    integrality : np.ndarray
        Boolean mask of the integer (and bool) variables (length n)
    maximize : bool
        Direction of the objective
    variable_names, constraint_names : list of str
        Display names, ordered by index
    """

    def __init__(self, A, AL, AU, l, u, c, Q, integrality, maximize,
                 variable_names, constraint_names):
        self.A = A
        self.AL = AL
        self.AU = AU
        self.l = l
        self.u = u
        self.c = c
        self.Q = Q
        self.integrality = integrality
        self.maximize = maximize
        self.variable_names = variable_names
        self.constraint_names = constraint_names

    @property
    def m(self) -> int:
        """Number of constraints"""
        return self.A.shape[0]

    @property
    def n(self) -> int:
        """Number of variables"""
        return self.A.shape[1]

    @property
    def nnz(self) -> int:
        """Number of nonzeros in the constraint matrix"""
        return self.A.nnz

    def is_quadratic(self) -> bool:
        return self.Q.nnz > 0

    @staticmethod
    def from_arrays(
        A: Union[np.ndarray, sparse.spmatrix],
        AL: np.ndarray,
        AU: np.ndarray,
        l: np.ndarray,
        u: np.ndarray,
        c: np.ndarray,
        Q: Optional[Union[np.ndarray, sparse.spmatrix]] = None,
        integrality: Optional[np.ndarray] = None,
        maximize: bool = False,
        variable_names: Optional[List[str]] = None,
        constraint_names: Optional[List[str]] = None,
    ) -> 'StandardForm':
        """
        Create a standard form from arrays.

        Parameters
        ----------
        A : np.ndarray or scipy.sparse matrix
            Constraint matrix (m x n)
        AL, AU : np.ndarray
            Lower and upper bounds for constraints (length m)
        l, u : np.ndarray
            Lower and upper bounds for variables (length n)
        c : np.ndarray
            Objective coefficients (length n)
        Q : np.ndarray or scipy.sparse matrix, optional
            Quadratic objective coefficients (n x n), default all zero
        integrality : np.ndarray, optional
            Integer mask (length n), default all continuous
        maximize : bool, optional
            Objective direction (default: minimize)
        variable_names, constraint_names : list of str, optional
            Names, default ``x<j>`` and ``c<i>``

        Returns
        -------
        StandardForm

        Raises
        ------
        ValueError
            If the dimensions are inconsistent
        TypeError
            If a matrix is neither a numpy array nor a scipy sparse matrix
        """
        A = _to_csr(A, "A")
        m, n = A.shape

        AL = _ensure_contiguous_float64(AL)
        AU = _ensure_contiguous_float64(AU)
        l = _ensure_contiguous_float64(l)
        u = _ensure_contiguous_float64(u)
        c = _ensure_contiguous_float64(c)

        if len(AL) != m or len(AU) != m:
            raise ValueError(f"AL and AU must have length {m} (number of constraints)")
        if len(l) != n or len(u) != n or len(c) != n:
            raise ValueError(f"l, u, and c must have length {n} (number of variables)")

        if Q is None:
            Q = sparse.csr_matrix((n, n), dtype=np.float64)
        else:
            Q = _to_csr(Q, "Q")
            if Q.shape != (n, n):
                raise ValueError(f"Q must have shape ({n}, {n})")

        if integrality is None:
            integrality = np.zeros(n, dtype=bool)
        else:
            integrality = np.ascontiguousarray(integrality, dtype=bool)
            if len(integrality) != n:
                raise ValueError(f"integrality must have length {n} (number of variables)")

        if variable_names is None:
            variable_names = [f"x{j}" for j in range(n)]
        elif len(variable_names) != n:
            raise ValueError(f"variable_names must have length {n}")

        if constraint_names is None:
            constraint_names = [f"c{i}" for i in range(m)]
        elif len(constraint_names) != m:
            raise ValueError(f"constraint_names must have length {m}")

        return StandardForm(A, AL, AU, l, u, c, Q, integrality, bool(maximize),
                            list(variable_names), list(constraint_names))

    @staticmethod
    def from_model(model) -> 'StandardForm':
        """
        Build the standard form of a model from its canonical terms.

        Parameters
        ----------
        model : Model
            Source model

        Returns
        -------
        StandardForm
        """
        variables = model.vars()
        constraints = model.constraints()
        objective = model.objective
        n = len(variables)
        m = len(constraints)

        l = np.array([var.lower_bound for var in variables], dtype=np.float64)
        u = np.array([var.upper_bound for var in variables], dtype=np.float64)
        integrality = np.array([var.is_int() for var in variables], dtype=bool)

        c = np.zeros(n)
        for term in objective.terms():
            c[term.variable.index] = term.coefficient

        q_rows, q_cols, q_data = [], [], []
        for term in objective.quadratic_terms():
            q_rows.append(term.var1.index)
            q_cols.append(term.var2.index)
            q_data.append(term.coefficient)
        Q = sparse.coo_matrix(
            (np.array(q_data, dtype=np.float64),
             (np.array(q_rows, dtype=np.int64), np.array(q_cols, dtype=np.int64))),
            shape=(n, n)).tocsr()

        rows, cols, data = [], [], []
        AL = np.empty(m)
        AU = np.empty(m)
        for i, constraint in enumerate(constraints):
            for term in constraint.terms():
                rows.append(i)
                cols.append(term.variable.index)
                data.append(term.coefficient)

            rhs = constraint.right_hand_side
            if constraint.sense == ConstraintSense.LE:
                AL[i], AU[i] = -np.inf, rhs
            elif constraint.sense == ConstraintSense.GE:
                AL[i], AU[i] = rhs, np.inf
            else:
                AL[i], AU[i] = rhs, rhs

        A = sparse.coo_matrix(
            (np.array(data, dtype=np.float64),
             (np.array(rows, dtype=np.int64), np.array(cols, dtype=np.int64))),
            shape=(m, n)).tocsr()

        logger.debug("Built standard form of %r: m=%d n=%d nnz=%d quadratic=%s",
                     model.name, m, n, A.nnz, Q.nnz > 0)

        return StandardForm(
            A, AL, AU, l, u, c, Q, integrality, objective.is_maximize(),
            [var.name for var in variables],
            [constraint.name for constraint in constraints],
        )

    def __repr__(self):
        return (f"<StandardForm m={self.m} n={self.n} nnz={self.nnz} "
                f"quadratic={self.is_quadratic()}>")
