"""Provide the Newton direction and damped update for closest-parameter search.

The backend is pure numerics on arrays: it knows nothing about curves or
domains. Ill-conditioned Hessians are reported as errors instead of being
regularised, since a wrong direction silently corrupts the projection.
"""

from typing import Tuple

import numpy as np

from curvestep.algorithms.closest.types import Param
from curvestep.algorithms.types.core import _CurvestepBaseBackend
from curvestep.algorithms.utils.config import MAX_HESSIAN_COND
from curvestep.algorithms.utils.exceptions import (BackendError,
                                                   SingularMatrixError)


class _NewtonStepBackend(_CurvestepBaseBackend):
    """Compute undamped Newton directions and damped parameter updates.

    Parameters
    ----------
    max_cond : float, default=MAX_HESSIAN_COND
        Largest Hessian condition number accepted as invertible.
    """

    def __init__(self, max_cond: float = MAX_HESSIAN_COND) -> None:
        self._max_cond = float(max_cond)

    @property
    def max_cond(self) -> float:
        return self._max_cond

    @staticmethod
    def _coerce(gradient, hessian) -> Tuple[np.ndarray, np.ndarray]:
        g = np.atleast_1d(np.asarray(gradient, dtype=np.float64))
        H = np.atleast_2d(np.asarray(hessian, dtype=np.float64))
        if g.ndim != 1:
            raise ValueError(f"gradient must be scalar or 1-D, got shape {g.shape}")
        n = g.shape[0]
        if H.shape != (n, n):
            raise ValueError(
                f"Hessian shape {H.shape} does not match gradient length {n}"
            )
        return g, H

    def newton_direction(self, gradient, hessian) -> np.ndarray:
        """Solve ``H d = g`` for the raw Newton direction.

        Parameters
        ----------
        gradient : float or ndarray
            Gradient at the current parameter, shape (n,).
        hessian : float or ndarray
            Hessian at the current parameter, shape (n, n).

        Returns
        -------
        ndarray
            Direction *d*, shape (n,).

        Raises
        ------
        ValueError
            If the shapes of *gradient* and *hessian* disagree.
        :class:`~curvestep.algorithms.utils.exceptions.SingularMatrixError`
            If the Hessian is non-finite, too ill-conditioned, or singular.
        """
        g, H = self._coerce(gradient, hessian)

        if not np.all(np.isfinite(H)):
            raise SingularMatrixError("Hessian contains non-finite entries; cannot invert.")

        with np.errstate(divide="ignore", invalid="ignore"):
            cond = float(np.linalg.cond(H))
        if not np.isfinite(cond) or cond > self._max_cond:
            raise SingularMatrixError(
                f"Hessian is singular or ill-conditioned (cond={cond:.2e} > {self._max_cond:.2e})."
            )

        try:
            direction = np.linalg.solve(H, g)
        except np.linalg.LinAlgError as exc:
            raise SingularMatrixError(f"Hessian inversion failed: {exc}") from exc

        return direction

    def damped_update(self, param: Param, direction: np.ndarray, gamma: float) -> np.ndarray:
        """Return ``param - gamma * direction``.

        Raises
        ------
        ValueError
            If *param* and *direction* have different sizes.
        :class:`~curvestep.algorithms.utils.exceptions.BackendError`
            If the update is not finite.
        """
        x = np.atleast_1d(np.asarray(param, dtype=np.float64))
        if x.shape != direction.shape:
            raise ValueError(
                f"Parameter shape {x.shape} does not match direction shape {direction.shape}"
            )
        candidate = x - gamma * direction
        if not np.all(np.isfinite(candidate)):
            raise BackendError(
                f"Newton update produced a non-finite parameter from {x} (gamma={gamma})."
            )
        return candidate
