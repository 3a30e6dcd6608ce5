from typing import Protocol, runtime_checkable

import numpy as np

from curvestep.algorithms.closest.types import Param


@runtime_checkable
class ClosestParameterProblemProtocol(Protocol):
    """Protocol for the problem evaluated at each Newton step.

    Implementations supply first and second derivatives of the squared
    distance between a curve and a query point with respect to the curve
    parameter. Curve evaluation itself stays with the implementation.
    """

    def gradient(self, param: Param) -> np.ndarray:
        """Gradient of the objective at *param*.
        
        Parameters
        ----------
        param : float or np.ndarray
            Curve parameter.
            
        Returns
        -------
        np.ndarray
            Gradient, shaped like *param*.
        """
        ...

    def hessian(self, param: Param) -> np.ndarray:
        """Hessian of the objective at *param*.
        
        Parameters
        ----------
        param : float or np.ndarray
            Curve parameter.
            
        Returns
        -------
        np.ndarray
            Hessian matrix, shape (n, n).
        """
        ...
