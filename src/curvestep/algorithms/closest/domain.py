"""Map unconstrained parameter updates back into a curve's domain.

Open curves clamp to the nearest end of ``[low, high]``. Closed curves
treat the interval as circular: an overshoot past one end re-enters from
the other end by the same amount.

Notes
-----
The wrap is applied once. Components that are still out of range
afterwards (overshoot larger than a full span) are reduced modulo the span,
which agrees with the single wrap wherever the latter lands inside.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numba import njit

from curvestep.algorithms.closest.config import Bound
from curvestep.algorithms.closest.types import Param
from curvestep.algorithms.utils.config import FASTMATH
from curvestep.utils.log_config import logger


@njit(fastmath=FASTMATH, cache=False)
def _constrain_kernel(values: np.ndarray, low: np.ndarray, high: np.ndarray, closed: bool) -> np.ndarray:
    """Apply the single wrap/clamp rule componentwise.

    Parameters
    ----------
    values : numpy.ndarray
        Candidate parameter components, shape (n,).
    low, high : numpy.ndarray
        Domain bounds per component, shape (n,).
    closed : bool
        Wrap when True, clamp when False.

    Returns
    -------
    numpy.ndarray
        Constrained components, shape (n,).
    """
    out = np.empty_like(values)
    for i in range(values.shape[0]):
        c = values[i]
        if c < low[i]:
            if closed:
                out[i] = high[i] - (low[i] - c)
            else:
                out[i] = low[i]
        elif c > high[i]:
            if closed:
                out[i] = low[i] + (c - high[i])
            else:
                out[i] = high[i]
        else:
            out[i] = c
    return out


@dataclass(frozen=True)
class _ParameterDomain:
    """Parameter interval of a curve together with its topology.

    Parameters
    ----------
    low, high : float or numpy.ndarray
        Interval bounds, ``low <= high`` componentwise.
    closed : bool
        Whether the interval wraps.
    """
    low: Bound
    high: Bound
    closed: bool

    @property
    def span(self) -> Bound:
        return self.high - self.low

    def _bounds_like(self, values: np.ndarray):
        low = np.array(np.broadcast_to(self.low, values.shape), dtype=np.float64)
        high = np.array(np.broadcast_to(self.high, values.shape), dtype=np.float64)
        return low, high

    def contains(self, value: Param) -> bool:
        """Return True if every component of *value* lies in ``[low, high]``."""
        values = np.atleast_1d(np.asarray(value, dtype=np.float64))
        low, high = self._bounds_like(values)
        return bool(np.all((values >= low) & (values <= high)))

    def constrain(self, candidate: Param) -> Param:
        """Bring *candidate* back into ``[low, high]``.

        Parameters
        ----------
        candidate : float or numpy.ndarray
            Unconstrained parameter, scalar or 1-D.

        Returns
        -------
        float or numpy.ndarray
            Constrained parameter; a float for scalar input, otherwise an
            array of the same shape.
        """
        arr = np.asarray(candidate, dtype=np.float64)
        values = np.array(np.atleast_1d(arr), dtype=np.float64)
        low, high = self._bounds_like(values)

        out = _constrain_kernel(values, low, high, self.closed)

        if self.closed:
            outside = (out < low) | (out > high)
            if np.any(outside):
                logger.warning(
                    "Parameter overshoot exceeds one domain span; reducing modulo span for %d component(s)",
                    int(np.count_nonzero(outside)),
                )
                span = high - low
                with np.errstate(divide="ignore", invalid="ignore"):
                    reduced = np.where(span > 0.0, low + np.mod(values - low, np.where(span > 0.0, span, 1.0)), low)
                out = np.where(outside, reduced, out)

        moved = out != values
        if np.any(moved):
            logger.debug(
                "%s parameter %s -> %s",
                "Wrapped" if self.closed else "Clamped",
                values,
                out,
            )

        if arr.ndim == 0:
            return float(out[0])
        return out.reshape(arr.shape)
