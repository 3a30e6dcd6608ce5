import logging

import numpy as np
import pytest

from curvestep.algorithms.closest.domain import (_constrain_kernel,
                                                 _ParameterDomain)

LOW, HIGH = 0.0, 10.0
SPAN = HIGH - LOW


@pytest.fixture
def open_domain():
    return _ParameterDomain(low=LOW, high=HIGH, closed=False)


@pytest.fixture
def closed_domain():
    return _ParameterDomain(low=LOW, high=HIGH, closed=True)


@pytest.mark.parametrize("closed", [False, True])
@pytest.mark.parametrize("candidate", [0.0, 1e-9, 2.5, 5.0, 9.75, 10.0])
def test_inside_values_unchanged(candidate, closed):
    domain = _ParameterDomain(low=LOW, high=HIGH, closed=closed)
    assert domain.constrain(candidate) == candidate


@pytest.mark.parametrize("candidate", [-1e-6, -2.0, -50.0])
def test_open_clamps_below(open_domain, candidate):
    assert open_domain.constrain(candidate) == LOW


@pytest.mark.parametrize("candidate", [10.000001, 12.0, 1e6])
def test_open_clamps_above(open_domain, candidate):
    assert open_domain.constrain(candidate) == HIGH


@pytest.mark.parametrize("candidate", [-3.0, 13.0, 4.0])
def test_open_clamp_idempotent(open_domain, candidate):
    once = open_domain.constrain(candidate)
    assert open_domain.constrain(once) == once


@pytest.mark.parametrize("candidate", np.linspace(LOW - SPAN, LOW, 7, endpoint=False))
def test_closed_wraps_below(closed_domain, candidate):
    result = closed_domain.constrain(candidate)
    assert result == pytest.approx(HIGH - (LOW - candidate))
    assert LOW <= result < HIGH


@pytest.mark.parametrize("candidate", np.linspace(HIGH, HIGH + SPAN, 7)[1:-1])
def test_closed_wraps_above(closed_domain, candidate):
    result = closed_domain.constrain(candidate)
    assert result == pytest.approx(LOW + (candidate - HIGH))
    assert LOW < result <= HIGH


@pytest.mark.parametrize("delta", [0.25, 1.0, 3.0, 9.5])
def test_closed_round_trip(closed_domain, delta):
    assert closed_domain.constrain(LOW - delta) == pytest.approx(HIGH - delta)
    assert closed_domain.constrain(HIGH + delta) == pytest.approx(LOW + delta)


def test_closed_wrap_on_shifted_domain():
    domain = _ParameterDomain(low=2.0, high=5.0, closed=True)
    assert domain.constrain(1.5) == pytest.approx(4.5)
    assert domain.constrain(5.25) == pytest.approx(2.25)


def test_closed_multi_span_overshoot_lands_inside(closed_domain, caplog):
    with caplog.at_level(logging.WARNING, logger="curvestep"):
        result = closed_domain.constrain(-25.0)
    assert result == pytest.approx(5.0)
    assert closed_domain.contains(result)
    assert "overshoot" in caplog.text

    assert closed_domain.constrain(33.0) == pytest.approx(3.0)


def test_closed_zero_span_collapses_to_low():
    domain = _ParameterDomain(low=1.0, high=1.0, closed=True)
    assert domain.constrain(-4.0) == 1.0
    assert domain.constrain(7.0) == 1.0


def test_scalar_input_returns_float(closed_domain):
    result = closed_domain.constrain(np.float64(-2.0))
    assert isinstance(result, float)
    assert result == 8.0


def test_vector_domain_componentwise():
    low = np.array([0.0, -1.0])
    high = np.array([10.0, 1.0])
    closed = _ParameterDomain(low=low, high=high, closed=True)
    opened = _ParameterDomain(low=low, high=high, closed=False)

    candidate = np.array([-2.0, 1.5])
    np.testing.assert_allclose(closed.constrain(candidate), [8.0, -0.5])
    np.testing.assert_allclose(opened.constrain(candidate), [0.0, 1.0])
    np.testing.assert_allclose(opened.constrain(np.array([3.0, 0.0])), [3.0, 0.0])


def test_contains(open_domain):
    assert open_domain.contains(0.0)
    assert open_domain.contains(10.0)
    assert not open_domain.contains(-0.1)
    assert not open_domain.contains(np.array([1.0, 11.0]))


def test_span():
    assert _ParameterDomain(low=2.0, high=5.0, closed=False).span == 3.0


def test_kernel_matches_rule():
    values = np.array([-2.0, 5.0, 12.0])
    low = np.zeros(3)
    high = np.full(3, 10.0)
    np.testing.assert_allclose(_constrain_kernel(values, low, high, True), [8.0, 5.0, 2.0])
    np.testing.assert_allclose(_constrain_kernel(values, low, high, False), [0.0, 5.0, 10.0])
