"""Squared-distance problem adapter for closest-parameter search.

The adapter turns a curve's derivatives into the gradient and Hessian the
Newton step consumes. It is representation-agnostic: the caller provides
``derivatives(t) -> (C, C', C'')`` for whatever curve type it holds
(NURBS, B-spline, analytic), so curve evaluation stays with the caller.
"""

from typing import Callable, Tuple

import numpy as np

from curvestep.algorithms.closest.types import Param

#: Curve derivative callable: ``t -> (C(t), C'(t), C''(t))``, each of shape (dim,).
DerivativesFn = Callable[[float], Tuple[np.ndarray, np.ndarray, np.ndarray]]


class _SquaredDistanceOperator:
    """Objective ``f(t) = |C(t) - P|^2`` for a point *P* and a curve *C*.

    Parameters
    ----------
    derivatives : callable
        ``derivatives(t)`` returning the point, first and second derivative
        of the curve at parameter ``t``.
    point : array_like
        Query point, same dimension as the curve.

    Notes
    -----
    With ``r = C(t) - P``:

    - ``f'(t) = 2 r . C'(t)``
    - ``f''(t) = 2 (C'(t) . C'(t) + r . C''(t))``
    """

    def __init__(self, derivatives: DerivativesFn, point) -> None:
        self._derivatives = derivatives
        self._point = np.asarray(point, dtype=np.float64)

    @property
    def point(self) -> np.ndarray:
        return self._point

    def _evaluate(self, param: Param) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        t = float(np.asarray(param, dtype=np.float64).reshape(-1)[0])
        c, dc, ddc = self._derivatives(t)
        c = np.asarray(c, dtype=np.float64)
        if c.shape != self._point.shape:
            raise ValueError(
                f"Curve dimension {c.shape} does not match query point {self._point.shape}"
            )
        return c - self._point, np.asarray(dc, dtype=np.float64), np.asarray(ddc, dtype=np.float64)

    def gradient(self, param: Param) -> np.ndarray:
        r, dc, _ = self._evaluate(param)
        return np.array([2.0 * np.dot(r, dc)])

    def hessian(self, param: Param) -> np.ndarray:
        r, dc, ddc = self._evaluate(param)
        return np.array([[2.0 * (np.dot(dc, dc) + np.dot(r, ddc))]])

    def distance(self, param: Param) -> float:
        """Euclidean distance between the curve at *param* and the query point."""
        r, _, _ = self._evaluate(param)
        return float(np.linalg.norm(r))
