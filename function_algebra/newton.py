"""
Newton's method root finding over the Function interface.

Only evaluate() and derivative() are used, so any variant or composite
tree works. The search is best-effort: it stops when |f(x)| <= eps or
after max_iter steps, and always takes at least one step. A zero
derivative along the way yields inf/NaN, which is returned as-is.

Two entry points:
  - newton_method(f, x0, max_iter, eps) -> float
  - newton_solve(f, x0, max_iter, eps)  -> NewtonResult (with diagnostics)

RootFinder bundles the tolerances for repeated use.
"""

import logging
import math
import numpy as np
from typing import Optional

from .function import Function
from .operators import ensure_function
from .types import NewtonResult, is_integer

log = logging.getLogger(__name__)

DEFAULT_MAX_ITER = 100
DEFAULT_EPS = 1e-4


def _check_limits(max_iter, eps) -> None:
    if not is_integer(max_iter) or max_iter < 1:
        raise ValueError(f"max_iter must be a positive integer, got {max_iter!r}")
    real = (int, float, np.integer, np.floating)
    if isinstance(eps, (bool, np.bool_)) or not isinstance(eps, real):
        raise ValueError(f"eps must be a real number, got {eps!r}")
    if not eps > 0:
        raise ValueError(f"eps must be positive, got {eps!r}")


def newton_solve(
    f: Function,
    x0: float,
    max_iter: int = DEFAULT_MAX_ITER,
    eps: float = DEFAULT_EPS,
) -> NewtonResult:
    """Run Newton's method and report how it ended.

    Returns:
        NewtonResult with the final iterate, the number of steps taken,
        the final residual |f(x)| and whether residual <= eps.
    """
    ensure_function(f, "find a root of")
    _check_limits(max_iter, eps)

    x = np.float64(x0)
    step = 0
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        while True:
            x = x - np.float64(f.evaluate(x)) / np.float64(f.derivative(x))
            step += 1
            residual = abs(f.evaluate(x))
            log.debug("newton step %d: x=%r residual=%r", step, float(x), residual)
            # NaN compares False, so a NaN residual also ends the loop
            if not (residual > eps and step < max_iter):
                break

    converged = bool(residual <= eps)
    if not math.isfinite(x):
        log.warning("newton diverged for %s: x=%r after %d steps", f.render(), float(x), step)
    elif not converged:
        log.warning(
            "newton stopped for %s after %d steps without converging (residual=%r)",
            f.render(), step, residual,
        )
    return NewtonResult(x=float(x), iterations=step, residual=float(residual), converged=converged)


def newton_method(
    f: Function,
    x0: float,
    max_iter: int = DEFAULT_MAX_ITER,
    eps: float = DEFAULT_EPS,
) -> float:
    """Return Newton's-method estimate of a root of f, starting at x0.

    Callers judge convergence themselves, e.g. by checking abs(f(x)).
    """
    return newton_solve(f, x0, max_iter=max_iter, eps=eps).x


class RootFinder:
    """Newton root finder with fixed limits.

    Usage:
        finder = RootFinder(max_iter=50, eps=1e-8)
        x = finder.solve(f, x0=1.0)
        finder.last_result.converged
    """

    def __init__(self, max_iter: int = DEFAULT_MAX_ITER, eps: float = DEFAULT_EPS):
        _check_limits(max_iter, eps)
        self.max_iter = max_iter
        self.eps = eps
        self.last_result: Optional[NewtonResult] = None

    def solve(self, f: Function, x0: float) -> float:
        self.last_result = newton_solve(f, x0, max_iter=self.max_iter, eps=self.eps)
        return self.last_result.x

    def __repr__(self):
        return f"RootFinder(max_iter={self.max_iter}, eps={self.eps})"
