"""Numerical constants shared by the algorithms package."""

FASTMATH = False  # Global flag for Numba's fastmath option

# Hessians with a 2-norm condition number above this are treated as singular
MAX_HESSIAN_COND = 1e12
