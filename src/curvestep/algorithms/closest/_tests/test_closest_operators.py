import numpy as np
import pytest

from curvestep.algorithms.closest import (ClosestParameterNewton,
                                          ClosestParameterProblemProtocol,
                                          NewtonState)
from curvestep.algorithms.closest.operators import _SquaredDistanceOperator

TWO_PI = 2.0 * np.pi


def _unit_circle(t):
    c, s = np.cos(t), np.sin(t)
    return np.array([c, s]), np.array([-s, c]), np.array([-c, -s])


def _drive(newton, problem, param, n_iter=20):
    state = NewtonState(param=param)
    for _ in range(n_iter):
        state, _ = newton.next_iter(problem, state)
    return state


def test_operator_satisfies_protocol():
    problem = _SquaredDistanceOperator(_unit_circle, [0.0, 2.0])
    assert isinstance(problem, ClosestParameterProblemProtocol)


def test_operator_derivatives_match_closed_form():
    # |C(t) - (0, 2)|^2 = 5 - 4 sin t
    problem = _SquaredDistanceOperator(_unit_circle, [0.0, 2.0])
    t = 0.7
    np.testing.assert_allclose(problem.gradient(t), [-4.0 * np.cos(t)])
    np.testing.assert_allclose(problem.hessian(t), [[4.0 * np.sin(t)]])
    assert problem.distance(np.pi / 2) == pytest.approx(1.0)


def test_operator_rejects_dimension_mismatch():
    problem = _SquaredDistanceOperator(_unit_circle, [0.0, 2.0, 1.0])
    with pytest.raises(ValueError):
        problem.gradient(0.0)


def test_projection_onto_closed_circle():
    problem = _SquaredDistanceOperator(_unit_circle, [0.0, 2.0])
    newton = ClosestParameterNewton((0.0, TWO_PI), closed=True)
    state = _drive(newton, problem, 1.2)
    assert state.param == pytest.approx(np.pi / 2, abs=1e-10)
    assert state.iterations == 20


def test_closed_circle_step_wraps_through_seam():
    # Closest point to (2, 0) is t = 0 == 2*pi; the Newton step t - tan t
    # from t = 0.3 undershoots zero and must re-enter near 2*pi.
    problem = _SquaredDistanceOperator(_unit_circle, [2.0, 0.0])
    newton = ClosestParameterNewton((0.0, TWO_PI), closed=True)

    state, _ = newton.next_iter(problem, NewtonState(param=0.3))
    assert np.pi < state.param < TWO_PI
    assert state.param == pytest.approx(TWO_PI + (0.3 - np.tan(0.3)))

    state = _drive(newton, problem, 0.3)
    assert 0.0 <= state.param <= TWO_PI
    assert np.cos(state.param) == pytest.approx(1.0)
    assert problem.distance(state.param) == pytest.approx(1.0)


def test_open_arc_clamps_at_end():
    problem = _SquaredDistanceOperator(_unit_circle, [2.0, 0.0])
    newton = ClosestParameterNewton((0.5, 1.0), closed=False)
    state = _drive(newton, problem, 0.6, n_iter=5)
    assert state.param == 0.5


def test_damped_projection_converges():
    problem = _SquaredDistanceOperator(_unit_circle, [0.0, 2.0])
    newton = ClosestParameterNewton((0.0, TWO_PI), closed=True).with_gamma(0.5)
    state = _drive(newton, problem, 1.2, n_iter=60)
    assert state.param == pytest.approx(np.pi / 2, abs=1e-8)
