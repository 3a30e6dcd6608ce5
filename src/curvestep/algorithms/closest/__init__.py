"""Domain-constrained Newton step for closest-parameter search on curves.

The :mod:`~curvestep.algorithms.closest` package provides the single
iteration step used to find the curve parameter closest to a query point.
Driving the iteration (initial guess, stopping rule) is left to the caller.

Examples
-------------
>>> import numpy as np
>>> from curvestep.algorithms.closest import (ClosestParameterNewton,
...                                           NewtonState)
>>> from curvestep.algorithms.closest.operators import _SquaredDistanceOperator
>>> def circle(t):
...     c, s = np.cos(t), np.sin(t)
...     return np.array([c, s]), np.array([-s, c]), np.array([-c, -s])
>>> problem = _SquaredDistanceOperator(circle, [0.0, 2.0])
>>> newton = ClosestParameterNewton((0.0, 2 * np.pi), closed=True)
>>> state = NewtonState(param=1.2)
>>> for _ in range(10):
...     state, _ = newton.next_iter(problem, state)
"""

from .base import ClosestParameterNewton
from .config import ClosestParameterConfig
from .protocols import ClosestParameterProblemProtocol
from .types import GradientFn, HessianFn, NewtonState, TerminationStatus

__all__ = [
    "ClosestParameterNewton",
    "ClosestParameterConfig",
    "ClosestParameterProblemProtocol",
    "GradientFn",
    "HessianFn",
    "NewtonState",
    "TerminationStatus",
]
