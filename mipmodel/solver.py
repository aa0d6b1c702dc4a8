"""
Solver seam: the interface back-ends implement and a registry to look them up.

No back-end ships with this package. A back-end subclasses :class:`Solver`,
reads the model (directly or via :meth:`Model.to_standard_form`) and
registers a factory under a provider name:

>>> class MySolver(Solver):
...     def solve(self, options=None):
...         form = self.model.to_standard_form()
...         ...
>>> register_solver('my_backend', MySolver)
>>> solver = new_solver('my_backend', model)
>>> solution = solver.solve(SolveOptions())
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from .model import Model
from .parameters import SolveOptions

logger = logging.getLogger(__name__)


class Solver(ABC):
    """
    Base class of solver back-ends.

    Parameters
    ----------
    model : Model
        Model the solver works on
    """

    def __init__(self, model: Model):
        if not isinstance(model, Model):
            raise TypeError("Solver requires a Model")
        self.model = model

    @abstractmethod
    def solve(self, options: Optional[SolveOptions] = None) -> Any:
        """
        Solve the model.

        Parameters
        ----------
        options : SolveOptions, optional
            Back-end options. If None, default options are used.

        Returns
        -------
        Any
            Whatever solution object the back-end produces
        """

    def __repr__(self):
        return f"<{type(self).__name__} model={self.model!r}>"


SolverFactory = Callable[[Model], Solver]

_registry: Dict[str, SolverFactory] = {}


def register_solver(provider: str, factory: SolverFactory):
    """
    Register a back-end under ``provider``.

    Registering the same provider again replaces the previous factory.
    """
    if not isinstance(provider, str) or not provider:
        raise ValueError("Solver provider must be a non-empty string")
    if not callable(factory):
        raise TypeError("Solver factory must be callable")
    if provider in _registry:
        logger.debug("Replacing solver provider %r", provider)
    _registry[provider] = factory


def unregister_solver(provider: str):
    """Remove a provider; unknown providers are ignored"""
    _registry.pop(provider, None)


def available_solvers() -> List[str]:
    """Names of the registered providers, sorted"""
    return sorted(_registry)


def new_solver(provider: str, model: Model) -> Solver:
    """
    Create a solver for ``model`` using a registered back-end.

    Raises
    ------
    ValueError
        If no back-end is registered under ``provider``
    """
    try:
        factory = _registry[provider]
    except KeyError:
        raise ValueError(
            f"Unknown solver provider {provider!r}; "
            f"available: {', '.join(available_solvers()) or 'none'}"
        ) from None
    solver = factory(model)
    logger.debug("Created solver %r for model %r", provider, model.name)
    return solver
