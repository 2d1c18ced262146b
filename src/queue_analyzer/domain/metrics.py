"""Analysis results: stable rate range and steady-state metrics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RateRange:
    """
    Range of request rates for which the queue is stable (requests/sec).

    Attributes:
        min: Lowest rate (slightly larger than zero)
        max: Highest rate (slightly less than the maximum service rate)
    """

    min: float
    max: float

    def __contains__(self, rate: float) -> bool:
        return self.min <= rate <= self.max

    def __str__(self) -> str:
        return f"[{self.min:.3f}, {self.max:.3f}]"


@dataclass(frozen=True)
class AnalysisMetrics:
    """
    Steady-state performance metrics at a given request rate.

    Attributes:
        throughput: Effective throughput (requests/sec)
        avg_response_time_ms: Average request response time, aka latency (msec)
        avg_wait_time_ms: Average request queueing time (msec)
        avg_num_in_service: Average number of requests in service
        avg_prefill_time_ms: Average request prefill time (msec)
        avg_token_time_ms: Average token decode time (msec)
        max_rate: Maximum stable request rate (requests/sec)
        rho: Utilization of the batch slots (0-1)
    """

    throughput: float
    avg_response_time_ms: float
    avg_wait_time_ms: float
    avg_num_in_service: float
    avg_prefill_time_ms: float
    avg_token_time_ms: float
    max_rate: float
    rho: float

    @property
    def ttft_ms(self) -> float:
        """Time to first token: queueing wait + prefill (msec)."""
        return self.avg_wait_time_ms + self.avg_prefill_time_ms

    def __str__(self) -> str:
        return (
            f"{{tput={self.throughput:.3f}, lat={self.avg_response_time_ms:.3f}, "
            f"wait={self.avg_wait_time_ms:.3f}, conc={self.avg_num_in_service:.3f}, "
            f"prefill={self.avg_prefill_time_ms:.3f}, itl={self.avg_token_time_ms:.3f}, "
            f"maxRate={self.max_rate:.3f}, rho={self.rho:.3f}}}"
        )
