"""
Bounded bisection for monotonic scalar functions.

Finds x in [x_min, x_max] such that f(x) reaches a target value, for f
monotonically non-decreasing or non-increasing over the interval.
"""

import logging
from dataclasses import dataclass

from queue_analyzer.core.interfaces import EvalFunction

MAX_ITERATIONS = 100
TOLERANCE = 1e-6  # relative error on the function value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a bisection search.

    Attributes:
        x: Located point (a bound of the interval if the target is outside
            the function's range)
        indicator: 0 if a root was found inside the interval, -1 if the
            target is below the function range, +1 if above
        iterations: Number of bisection steps performed
    """

    x: float
    indicator: int
    iterations: int = 0

    @property
    def is_below_range(self) -> bool:
        return self.indicator < 0

    @property
    def is_above_range(self) -> bool:
        return self.indicator > 0


def binary_search(
    x_min: float,
    x_max: float,
    y_target: float,
    eval_fn: EvalFunction,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = TOLERANCE,
) -> SearchResult:
    """
    Locate the point where a monotonic function reaches a target value.

    Exceptions raised by eval_fn propagate to the caller unchanged.

    Args:
        x_min: Lower end of the search interval
        x_max: Upper end of the search interval
        y_target: Target function value
        eval_fn: Monotonic function to evaluate
        max_iterations: Bound on the number of bisection steps
        tolerance: Relative tolerance on the function value

    Returns:
        SearchResult with the located point and boundary indicator

    Raises:
        ValueError: If x_min > x_max
    """
    if x_min > x_max:
        raise ValueError(f"invalid search interval [{x_min}, {x_max}]")
    if x_min == x_max:
        return SearchResult(x=x_min, indicator=0)

    y_begin = eval_fn(x_min)
    y_end = eval_fn(x_max)
    increasing = y_begin <= y_end

    # Target outside the function's range over the interval
    y_low, y_high = (y_begin, y_end) if increasing else (y_end, y_begin)
    if y_target < y_low:
        return SearchResult(x=x_min if increasing else x_max, indicator=-1)
    if y_target > y_high:
        return SearchResult(x=x_max if increasing else x_min, indicator=1)

    low, high = x_min, x_max
    x_star = 0.5 * (low + high)
    iterations = 0
    for iterations in range(1, max_iterations + 1):
        x_star = 0.5 * (low + high)
        y_star = eval_fn(x_star)

        if abs(y_star - y_target) <= tolerance * abs(y_target):
            break
        if (y_star < y_target) == increasing:
            low = x_star
        else:
            high = x_star

    logger.debug(
        f"Bisection converged to x={x_star:.6g} for target={y_target:.6g} "
        f"after {iterations} iterations"
    )
    return SearchResult(x=x_star, indicator=0, iterations=iterations)
