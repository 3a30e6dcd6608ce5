"""Closest-parameter projection onto parametric curves."""

from curvestep.algorithms.closest import (ClosestParameterConfig,
                                          ClosestParameterNewton,
                                          NewtonState, TerminationStatus)
from curvestep.algorithms.utils.exceptions import (BackendError,
                                                   CurvestepError,
                                                   InvalidParameterError,
                                                   NotInitializedError,
                                                   SingularMatrixError)

__version__ = "0.1.0"

__all__ = [
    "ClosestParameterConfig",
    "ClosestParameterNewton",
    "NewtonState",
    "TerminationStatus",
    "CurvestepError",
    "InvalidParameterError",
    "NotInitializedError",
    "BackendError",
    "SingularMatrixError",
]
