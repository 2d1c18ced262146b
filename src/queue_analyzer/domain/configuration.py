"""Inference server queue configuration."""

from dataclasses import dataclass
from typing import Optional

from queue_analyzer.domain.exceptions import InvalidConfigError
from queue_analyzer.domain.service import ServiceParams


@dataclass(frozen=True)
class Configuration:
    """
    Queue configuration parameters.

    Attributes:
        max_batch_size: Limit on requests concurrently receiving service (> 0)
        max_queue_size: Limit on requests waiting for service (>= 0)
        service_params: Request processing parameters
    """

    max_batch_size: int
    max_queue_size: int
    service_params: Optional[ServiceParams]

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.check()

    def check(self) -> None:
        """
        Validate configuration.

        Raises:
            InvalidConfigError: If limits are out of range or service
                parameters are missing
        """
        if (
            self.max_batch_size <= 0
            or self.max_queue_size < 0
            or self.service_params is None
            or self.service_params.prefill is None
            or self.service_params.decode is None
        ):
            raise InvalidConfigError(f"invalid configuration {self}")

    @property
    def occupancy_upper_bound(self) -> int:
        """Maximum number of requests in the system (in service + queued)."""
        return self.max_queue_size + self.max_batch_size

    def __str__(self) -> str:
        return (
            f"{{maxBatch={self.max_batch_size}, maxQueue={self.max_queue_size}, "
            f"servParams:{self.service_params}}}"
        )
