"""Newton-Raphson root finder"""

import math
from typing import Callable, Optional

EPSILON = 1e-6
DERIVATIVE_STEP = 1e-6
MAX_ITERATIONS = 100


def optimize(
    f: Callable[[float], float],
    x0: float = 0.0,
    epsilon: float = EPSILON,
    step: float = DERIVATIVE_STEP,
    max_iterations: int = MAX_ITERATIONS,
) -> Optional[float]:
    """
    Find x such that f(x) == 0.

    The derivative is estimated with a symmetric finite difference of width
    ``2 * step``. Returns the current estimate as soon as ``|f(x)| < epsilon``.

    Returns None when:
    - the derivative estimate is zero
    - f (or its derivative estimate) is not finite
    - ``max_iterations`` is exhausted without convergence
    """
    x = x0
    for _ in range(max_iterations):
        fx = f(x)
        if not math.isfinite(fx):
            return None
        if abs(fx) < epsilon:
            return x

        derivative = (f(x + step) - f(x - step)) / (2 * step)
        if derivative == 0 or not math.isfinite(derivative):
            return None

        x = x - fx / derivative

    return None
