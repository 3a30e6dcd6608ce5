"""Public facade for the domain-constrained Newton step.

:class:`ClosestParameterNewton` plugs into an external iteration driver:
the driver seeds a :class:`~curvestep.algorithms.closest.types.NewtonState`,
calls :meth:`ClosestParameterNewton.next_iter` until it decides to stop, and
reads the final parameter from the state.
"""

from dataclasses import replace
from typing import Optional, Tuple

import numpy as np

from curvestep.algorithms.closest.backends.newton import _NewtonStepBackend
from curvestep.algorithms.closest.config import Bound, ClosestParameterConfig
from curvestep.algorithms.closest.domain import _ParameterDomain
from curvestep.algorithms.closest.protocols import \
    ClosestParameterProblemProtocol
from curvestep.algorithms.closest.types import (NewtonState, Param,
                                                TerminationStatus)
from curvestep.algorithms.utils.exceptions import NotInitializedError


class ClosestParameterNewton:
    """Damped Newton step that keeps the curve parameter inside its domain.

    Each step solves ``H d = g`` for the Newton direction, moves to
    ``param - gamma * d`` and maps the result back into ``[low, high]``:
    wrapping around for closed curves, clamping for open ones.

    Parameters
    ----------
    domain : tuple
        ``(low, high)`` parameter interval of the curve.
    closed : bool
        Whether the curve is closed (the interval wraps).
    backend : :class:`~curvestep.algorithms.closest.backends.newton._NewtonStepBackend`, optional
        Numerical backend. A default instance is used if None.

    Examples
    --------
    >>> newton = ClosestParameterNewton((0.0, 10.0), closed=True)
    >>> newton.compute_next_parameter(1.0, 6.0, 2.0)
    8.0
    >>> ClosestParameterNewton((0.0, 10.0), closed=False).compute_next_parameter(1.0, 6.0, 2.0)
    0.0
    """

    NAME = "Newton method"

    def __init__(
        self,
        domain: Tuple[Bound, Bound],
        closed: bool,
        *,
        backend: Optional[_NewtonStepBackend] = None,
    ) -> None:
        self._init_from_config(
            ClosestParameterConfig(domain=domain, closed=closed),
            backend or _NewtonStepBackend(),
        )

    def _init_from_config(self, config: ClosestParameterConfig, backend: _NewtonStepBackend) -> None:
        self._config = config
        self._backend = backend
        low, high = config.domain
        self._domain = _ParameterDomain(low=low, high=high, closed=config.closed)

    @classmethod
    def from_config(
        cls,
        config: ClosestParameterConfig,
        *,
        backend: Optional[_NewtonStepBackend] = None,
    ) -> "ClosestParameterNewton":
        obj = cls.__new__(cls)
        obj._init_from_config(config, backend or _NewtonStepBackend())
        return obj

    @property
    def config(self) -> ClosestParameterConfig:
        return self._config

    @property
    def gamma(self) -> float:
        return self._config.gamma

    @property
    def domain(self) -> Tuple[Bound, Bound]:
        return self._config.domain

    @property
    def closed(self) -> bool:
        return self._config.closed

    def with_gamma(self, gamma: float) -> "ClosestParameterNewton":
        """Return a copy using damping factor *gamma*.

        Gamma must be in ``(0, 1]`` and defaults to ``1``. The instance this
        is called on is left untouched, also when validation fails.

        Raises
        ------
        :class:`~curvestep.algorithms.utils.exceptions.InvalidParameterError`
            If *gamma* is outside ``(0, 1]``.
        """
        return self.from_config(replace(self._config, gamma=gamma), backend=self._backend)

    def compute_next_parameter(self, param: Optional[Param], gradient, hessian) -> Param:
        """Take one damped Newton step and constrain it to the domain.

        Parameters
        ----------
        param : float or ndarray
            Current parameter. It does not need to lie inside the domain.
        gradient : float or ndarray
            Gradient of the objective at *param*.
        hessian : float or ndarray
            Hessian of the objective at *param*.

        Returns
        -------
        float or ndarray
            Next parameter, inside ``[low, high]``; same shape as *param*.

        Raises
        ------
        :class:`~curvestep.algorithms.utils.exceptions.NotInitializedError`
            If *param* is None.
        :class:`~curvestep.algorithms.utils.exceptions.SingularMatrixError`
            If the Hessian cannot be inverted.
        """
        if param is None:
            raise NotInitializedError(
                "Newton requires an initial parameter. "
                "Seed the iteration state with an initial guess."
            )

        direction = self._backend.newton_direction(gradient, hessian)
        candidate = self._backend.damped_update(param, direction, self.gamma)
        return self._domain.constrain(candidate.reshape(np.shape(param)))

    def next_iter(
        self,
        problem: ClosestParameterProblemProtocol,
        state: NewtonState,
    ) -> Tuple[NewtonState, Optional[dict]]:
        """Advance *state* by one step using derivatives from *problem*.

        Returns
        -------
        tuple
            ``(new_state, kv)`` where ``kv`` is a slot for per-iteration
            diagnostics and is always None.
        """
        if state.param is None:
            raise NotInitializedError(
                "Newton requires an initial parameter. "
                "Seed the iteration state with an initial guess."
            )

        grad = problem.gradient(state.param)
        hessian = problem.hessian(state.param)
        new_param = self.compute_next_parameter(state.param, grad, hessian)
        return state.with_param(new_param), None

    def terminate(self, state: NewtonState) -> TerminationStatus:
        """Never stops on its own; termination belongs to the driver."""
        return TerminationStatus.NOT_TERMINATED

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(domain={self.domain!r}, "
            f"closed={self.closed}, gamma={self.gamma})"
        )
