"""Example script: project query points onto a closed unit circle and onto an
open arc, driving the domain-constrained Newton step with a small loop that
owns the stopping rule.

Run with
    python examples/closest_parameter.py
"""

import os
import sys

import numpy as np

sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from curvestep.algorithms.closest import ClosestParameterNewton, NewtonState
from curvestep.algorithms.closest.operators import _SquaredDistanceOperator
from curvestep.utils.log_config import logger

TOL = 1e-12
MAX_ITER = 50


def unit_circle(t):
    c, s = np.cos(t), np.sin(t)
    return np.array([c, s]), np.array([-s, c]), np.array([-c, -s])


def project(newton, problem, t0):
    state = NewtonState(param=t0)
    for _ in range(MAX_ITER):
        previous = state.param
        state, _ = newton.next_iter(problem, state)
        if abs(state.param - previous) < TOL:
            break
    return state


def main() -> None:
    cases = [
        {"name": "closed circle", "domain": (0.0, 2.0 * np.pi), "closed": True,
         "point": [2.0, -0.1], "t0": 0.3},
        {"name": "open arc", "domain": (0.5, 1.0), "closed": False,
         "point": [2.0, 0.0], "t0": 0.6},
        {"name": "damped circle", "domain": (0.0, 2.0 * np.pi), "closed": True,
         "point": [0.0, 2.0], "t0": 1.2, "gamma": 0.5},
    ]

    for case in cases:
        newton = ClosestParameterNewton(case["domain"], case["closed"])
        if "gamma" in case:
            newton = newton.with_gamma(case["gamma"])
        problem = _SquaredDistanceOperator(unit_circle, case["point"])

        state = project(newton, problem, case["t0"])
        logger.info(
            "%-14s t=%.12f after %d iterations (distance %.6f)",
            case["name"], state.param, state.iterations, problem.distance(state.param),
        )


if __name__ == "__main__":
    main()
