"""
Types for the closest-parameter module.

The iteration state is owned by the driver and handed to the step on every
call; the step never keeps it between calls.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, List, Optional, Union

import numpy as np

#: Parameter value: a float for ordinary curves or a 1-D array when the
#: parameterisation is multi-dimensional.
Param = Union[float, np.ndarray]

#: Type alias for gradient function signatures.
#:
#: Returns the gradient of the squared-distance objective at a parameter,
#: shaped like the parameter.
GradientFn = Callable[[Param], np.ndarray]

#: Type alias for Hessian function signatures.
#:
#: Returns the (n, n) Hessian of the squared-distance objective at a
#: parameter with n components. A scalar is accepted for n = 1.
HessianFn = Callable[[Param], np.ndarray]


class TerminationStatus(Enum):
    """Reason an iteration stopped, as decided by the driver."""

    NOT_TERMINATED = "not_terminated"
    CONVERGED = "converged"
    MAX_ITERATIONS = "max_iterations"

    @property
    def terminated(self) -> bool:
        return self is not TerminationStatus.NOT_TERMINATED


@dataclass
class NewtonState:
    """Iteration state passed by the driver into each step.

    Attributes
    ----------
    param : float, ndarray or None
        Current parameter. ``None`` until the driver seeds an initial guess.
    iterations : int
        Number of steps taken so far.
    termination : :class:`TerminationStatus`
        Termination flag, set by the driver.
    store_history : bool
        Record every replaced parameter in ``param_history``.
    param_history : list
        Previous parameters, oldest first.
    """
    param: Optional[Param] = None
    iterations: int = 0
    termination: TerminationStatus = TerminationStatus.NOT_TERMINATED
    store_history: bool = False
    param_history: List[Param] = field(default_factory=list)

    def with_param(self, new_param: Param) -> "NewtonState":
        """Return a copy holding ``new_param`` with the iteration count bumped."""
        history = list(self.param_history)
        if self.store_history and self.param is not None:
            history.append(self.param)
        return replace(
            self,
            param=new_param,
            iterations=self.iterations + 1,
            param_history=history,
        )
