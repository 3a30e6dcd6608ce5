"""Provide the configuration class for the closest-parameter Newton step.

The configuration fixes WHAT is being solved for a single projection: the
parameter interval of the curve, whether that interval wraps, and how much
of each raw Newton step is applied.
"""

import math
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

from curvestep.algorithms.types.core import _CurvestepBaseConfig
from curvestep.algorithms.utils.exceptions import InvalidParameterError

Bound = Union[float, np.ndarray]


def _as_bound(value) -> Bound:
    arr = np.asarray(value, dtype=np.float64)
    if arr.ndim == 0:
        return float(arr)
    return arr.copy()


@dataclass(frozen=True)
class ClosestParameterConfig(_CurvestepBaseConfig):
    """Configuration for the domain-constrained Newton step.

    Parameters
    ----------
    domain : tuple
        ``(low, high)`` bounds of the curve parameter. Scalars for ordinary
        curves, equally shaped 1-D arrays for multi-dimensional parameters.
        Ordering is taken from the curve metadata and is not re-checked.
    closed : bool
        Whether ``low`` and ``high`` are the same point on the curve.
    gamma : float, default=1.0
        Damping factor in ``(0, 1]``. ``1.0`` applies the full Newton step.

    Raises
    ------
    :class:`~curvestep.algorithms.utils.exceptions.InvalidParameterError`
        If ``gamma`` lies outside ``(0, 1]``.

    Examples
    --------
    >>> cfg = ClosestParameterConfig(domain=(0.0, 1.0), closed=False)
    >>> cfg.gamma
    1.0
    """
    domain: Tuple[Bound, Bound]
    closed: bool
    gamma: float = 1.0

    def _validate(self) -> None:
        """Validate the configuration."""
        low, high = self.domain
        object.__setattr__(self, "domain", (_as_bound(low), _as_bound(high)))
        object.__setattr__(self, "closed", bool(self.closed))

        gamma = float(self.gamma)
        if not math.isfinite(gamma) or gamma <= 0.0 or gamma > 1.0:
            raise InvalidParameterError("gamma must be in (0, 1]")
        object.__setattr__(self, "gamma", gamma)
