"""Performance targets and the request rates that achieve them."""

from dataclasses import dataclass

from queue_analyzer.domain.exceptions import InvalidTargetError


@dataclass(frozen=True)
class TargetPerf:
    """
    Queue performance targets.

    A value of 0 means the corresponding objective is unconstrained.

    Attributes:
        target_ttft_ms: Target time to first token, queueing + prefill (msec)
        target_itl_ms: Target inter-token latency (msec)
        target_tps: Target token generation throughput (tokens/sec)
    """

    target_ttft_ms: float = 0.0
    target_itl_ms: float = 0.0
    target_tps: float = 0.0

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.check()

    def check(self) -> None:
        """
        Validate target values.

        Raises:
            InvalidTargetError: If any target is negative
        """
        if self.target_ttft_ms < 0 or self.target_itl_ms < 0 or self.target_tps < 0:
            raise InvalidTargetError(f"invalid target data values {self}")

    def __str__(self) -> str:
        return (
            f"{{TTFT={self.target_ttft_ms:.3f}, ITL={self.target_itl_ms:.3f}, "
            f"TPS={self.target_tps:.3f}}}"
        )


@dataclass(frozen=True)
class TargetRate:
    """
    Maximum request rates that achieve each performance target.

    Attributes:
        rate_for_ttft: Max request rate for target TTFT (requests/sec)
        rate_for_itl: Max request rate for target ITL (requests/sec)
        rate_for_tps: Max request rate for target TPS (requests/sec)
    """

    rate_for_ttft: float
    rate_for_itl: float
    rate_for_tps: float

    @property
    def binding_rate(self) -> float:
        """The most restrictive of the three rates."""
        return min(self.rate_for_ttft, self.rate_for_itl, self.rate_for_tps)

    def __str__(self) -> str:
        return (
            f"{{rateTTFT={self.rate_for_ttft:.3f}, rateITL={self.rate_for_itl:.3f}, "
            f"rateTPS={self.rate_for_tps:.3f}}}"
        )
