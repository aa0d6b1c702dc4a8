"""
Decision variables and the registry that owns them.

Variables are created through a :class:`~mipmodel.model.Model`, which hands
the work to its :class:`VariableRegistry`. The registry assigns each
variable an index equal to its creation order; indices are dense, start at
zero and are never reused.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterator, List, Union

from ._numeric import ensure_float, ensure_integral


class VarKind(Enum):
    """Variable kind"""
    FLOAT = 'float'
    INT = 'int'
    BOOL = 'bool'


# Prefix of the auto-generated label of an unnamed variable
_LABEL_PREFIX = {
    VarKind.FLOAT: 'F',
    VarKind.INT: 'I',
    VarKind.BOOL: 'B',
}


class Variable(ABC):
    """
    A decision variable of a model.

    Instances are created by the model, never directly. The index and bounds
    are fixed at creation; the name is stored by the owning model and may be
    changed at any time.

    Parameters
    ----------
    model : Model
        Owning model
    index : int
        Position of the variable in the model's variable list
    """

    kind: VarKind

    def __init__(self, model, index: int):
        self._model = model
        self._index = index

    @property
    def index(self) -> int:
        """Creation-order index, unique within the owning model"""
        return self._index

    @property
    def model(self):
        """Owning model"""
        return self._model

    @property
    @abstractmethod
    def lower_bound(self) -> Union[int, float]:
        """Lower bound, fixed at creation"""

    @property
    @abstractmethod
    def upper_bound(self) -> Union[int, float]:
        """Upper bound, fixed at creation"""

    @property
    def name(self) -> str:
        """
        Display name of the variable.

        Falls back to a label built from the kind and the index
        (``F0``, ``I1``, ``B2``, ...) when no name or an empty name is set.
        """
        name = self._model._get_var_name(self)
        if not name:
            return self.default_name()
        return name

    @name.setter
    def name(self, name: str):
        if not isinstance(name, str):
            raise TypeError("Variable name must be a string")
        self._model._set_var_name(self, name)

    def default_name(self) -> str:
        """Auto-generated label used while no name is set"""
        return f"{_LABEL_PREFIX[self.kind]}{self._index}"

    def is_float(self) -> bool:
        return self.kind is VarKind.FLOAT

    def is_int(self) -> bool:
        """True for int variables, including bool variables"""
        return self.kind in (VarKind.INT, VarKind.BOOL)

    def is_bool(self) -> bool:
        return self.kind is VarKind.BOOL

    def __str__(self):
        return self.name

    def __repr__(self):
        return (f"{type(self).__name__}(index={self._index}, name={self.name!r}, "
                f"bounds=[{self.lower_bound}, {self.upper_bound}])")


class FloatVariable(Variable):
    """Variable taking any real value within ``[lower_bound, upper_bound]``"""

    kind = VarKind.FLOAT

    def __init__(self, model, index: int, lower_bound: float, upper_bound: float):
        super().__init__(model, index)
        self._lower_bound = lower_bound
        self._upper_bound = upper_bound

    @property
    def lower_bound(self) -> float:
        return self._lower_bound

    @property
    def upper_bound(self) -> float:
        return self._upper_bound


class IntVariable(Variable):
    """Variable taking integer values within ``[lower_bound, upper_bound]``"""

    kind = VarKind.INT

    def __init__(self, model, index: int, lower_bound: int, upper_bound: int):
        super().__init__(model, index)
        self._lower_bound = lower_bound
        self._upper_bound = upper_bound

    @property
    def lower_bound(self) -> int:
        return self._lower_bound

    @property
    def upper_bound(self) -> int:
        return self._upper_bound


class BoolVariable(IntVariable):
    """Int variable restricted to zero or one"""

    kind = VarKind.BOOL

    def __init__(self, model, index: int):
        super().__init__(model, index, 0, 1)


class VariableRegistry:
    """
    Append-only, ordered collection of the variables of one model.

    Parameters
    ----------
    model : Model
        Model the created variables belong to
    """

    def __init__(self, model):
        self._model = model
        self._variables: List[Variable] = []

    def new_float(self, lower_bound: float, upper_bound: float) -> FloatVariable:
        """
        Append a float variable.

        Bounds are taken as given; ``lower_bound <= upper_bound`` is not
        checked here.

        Raises
        ------
        ValueError
            If a bound is NaN
        TypeError
            If a bound is not a number
        """
        lower_bound = ensure_float(lower_bound, "lower bound")
        upper_bound = ensure_float(upper_bound, "upper bound")
        return self._append(FloatVariable(self._model, len(self._variables),
                                          lower_bound, upper_bound))

    def new_int(self, lower_bound: int, upper_bound: int) -> IntVariable:
        """
        Append an int variable.

        Raises
        ------
        ValueError
            If a bound is NaN or not integral
        TypeError
            If a bound is not a number
        """
        lower_bound = ensure_integral(lower_bound, "lower bound")
        upper_bound = ensure_integral(upper_bound, "upper bound")
        return self._append(IntVariable(self._model, len(self._variables),
                                        lower_bound, upper_bound))

    def new_bool(self) -> BoolVariable:
        """Append a bool variable"""
        return self._append(BoolVariable(self._model, len(self._variables)))

    def _append(self, variable):
        self._variables.append(variable)
        return variable

    def vars(self) -> List[Variable]:
        """Copy of the variables in creation order"""
        return list(self._variables)

    def __getitem__(self, index: int) -> Variable:
        return self._variables[index]

    def __len__(self):
        return len(self._variables)

    def __iter__(self) -> Iterator[Variable]:
        return iter(list(self._variables))

    def __repr__(self):
        return f"VariableRegistry(n={len(self._variables)})"
