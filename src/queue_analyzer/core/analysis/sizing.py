"""
Target-driven sizing.

Each latency objective (TTFT, ITL) increases monotonically with the request
rate, so the maximum rate meeting a target is located by bisection over the
stable rate range. The throughput objective is not inverted: it is a fixed
safety margin below the maximum stable rate.
"""

from dataclasses import dataclass

from queue_analyzer.core.analysis.constants import STABILITY_SAFETY_FRACTION
from queue_analyzer.core.interfaces import EvalFunction
from queue_analyzer.core.search import binary_search
from queue_analyzer.domain import (
    AnalysisMetrics,
    RateRange,
    TargetPerf,
    TargetRate,
    TargetUnreachableError,
)


@dataclass(frozen=True)
class SizingResult:
    """
    Result of sizing a queue for performance targets.

    Attributes:
        target_rate: Max request rate per individual target (requests/sec)
        metrics: Performance metrics at the most restrictive rate
        achieved: Values of the targets realized at that rate
    """

    target_rate: TargetRate
    metrics: AnalysisMetrics
    achieved: TargetPerf

    @property
    def request_rate(self) -> float:
        """Request rate the metrics were evaluated at (requests/sec)."""
        return self.target_rate.binding_rate

    def __str__(self) -> str:
        return f"{{rates={self.target_rate}, metrics={self.metrics}, achieved={self.achieved}}}"


def search_max_rate(
    objective: str,
    target: float,
    eval_fn: EvalFunction,
    rate_min: float,
    rate_max: float,
    rate_range: RateRange,
) -> float:
    """
    Find the maximum rate at which a latency objective meets its target.

    Args:
        objective: Objective name, used in error messages
        target: Target value; 0 means unconstrained
        eval_fn: Objective as a monotonically increasing function of rate
        rate_min: Lowest searchable rate (per msec)
        rate_max: Highest searchable rate (per msec)
        rate_range: External rate range, used in error messages

    Returns:
        Maximum rate (per msec); rate_max if unconstrained or the target is
        above the objective over the whole range

    Raises:
        TargetUnreachableError: If the target is below the objective even at
            the lowest rate
        ModelDivergenceError: If evaluation fails at a probed rate
    """
    if target <= 0:
        return rate_max

    result = binary_search(rate_min, rate_max, target, eval_fn)
    if result.is_below_range:
        raise TargetUnreachableError(
            f"target {objective}={target} is below the bounded region, "
            f"range={rate_range}, ind={result.indicator}"
        )
    return result.x


def throughput_rate_ceiling(rate_max: float) -> float:
    """Throughput-oriented operating rate: a safety margin below rate_max."""
    return rate_max * (1 - STABILITY_SAFETY_FRACTION)
