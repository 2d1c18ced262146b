"""
Service-rate model builder.

Converts the prefill/decode cost formulas and a workload profile into a
state-dependent service rate per batch occupancy, the stable range of
request rates, and the queueing model of the server.

For batch occupancy n = 1..B:
    service_time(n) = prefill_time(in_tokens, n) + (out_tokens - 1) * decode_time(n)
    service_rate(n) = n / service_time(n)          (requests/msec)
"""

import logging

from queue_analyzer.core.analysis.analyzer import QueueAnalyzer
from queue_analyzer.core.analysis.constants import EPSILON, RATE_SCALE
from queue_analyzer.core.queueing import StateDependentQueue
from queue_analyzer.domain import (
    Configuration,
    InvalidConfigError,
    RateRange,
    RequestSize,
    ServiceParams,
)


class QueueModelBuilder:
    """
    Builds QueueAnalyzer instances from configuration and workload.

    Usage:
        builder = QueueModelBuilder()
        analyzer = builder.create(config, RequestSize(500, 100))
        print(analyzer.rate_range)
    """

    def __init__(self, epsilon: float = EPSILON):
        """
        Initialize QueueModelBuilder.

        Args:
            epsilon: Fraction kept away from zero and saturating rates

        Raises:
            ValueError: If epsilon is not in (0, 1)
        """
        if not 0.0 < epsilon < 1.0:
            raise ValueError(f"epsilon must be in (0, 1), got {epsilon}")

        self.epsilon = epsilon
        self._logger = logging.getLogger(__name__)

    def service_rates(
        self,
        service_params: ServiceParams,
        request_size: RequestSize,
        max_batch_size: int,
    ) -> list[float]:
        """
        Calculate the state-dependent service rate.

        Args:
            service_params: Prefill and decode parameters
            request_size: Average request token counts
            max_batch_size: Maximum batch size

        Returns:
            Service rate (requests/msec) for batch occupancy 1..max_batch_size

        Raises:
            InvalidConfigError: If a service time is not positive
        """
        rates = []
        for n in range(1, max_batch_size + 1):
            prefill_time = service_params.prefill.prefill_time(request_size.avg_input_tokens, n)
            decode_time = request_size.decode_steps * service_params.decode.decode_time(n)
            service_time = prefill_time + decode_time
            if service_time <= 0:
                raise InvalidConfigError(
                    f"service time must be positive, got {service_time} at batch size {n} "
                    f"for {service_params} and {request_size}"
                )
            rates.append(n / service_time)
        return rates

    def rate_range(self, service_rates: list[float]) -> RateRange:
        """Stable range of request rates (requests/sec) for a service rate profile."""
        rate_min = service_rates[0] * self.epsilon
        rate_max = service_rates[-1] * (1 - self.epsilon)
        return RateRange(min=rate_min * RATE_SCALE, max=rate_max * RATE_SCALE)

    def build(self, config: Configuration, request_size: RequestSize) -> QueueAnalyzer:
        """
        Build the queueing model, leaving the arrival rate as a parameter.

        Inputs are assumed valid; use create() to validate first.

        Args:
            config: Queue configuration
            request_size: Average request token counts

        Returns:
            QueueAnalyzer ready for analysis and sizing
        """
        params = config.service_params
        rates = self.service_rates(params, request_size, config.max_batch_size)
        rate_range = self.rate_range(rates)

        model = StateDependentQueue(config.occupancy_upper_bound, rates)

        self._logger.info(
            f"Built queue model: maxBatch={config.max_batch_size}, "
            f"maxQueue={config.max_queue_size}, reqSize={request_size}, "
            f"rates={rate_range} req/s"
        )

        return QueueAnalyzer(
            max_batch_size=config.max_batch_size,
            max_queue_size=config.max_queue_size,
            service_params=params,
            request_size=request_size,
            model=model,
            rate_range=rate_range,
        )

    def create(self, config: Configuration, request_size: RequestSize) -> QueueAnalyzer:
        """
        Validate inputs and build a QueueAnalyzer.

        Raises:
            InvalidConfigError: If the configuration is invalid
            InvalidWorkloadError: If the request size is invalid
        """
        config.check()
        request_size.check()
        return self.build(config, request_size)


def build_model(config: Configuration, request_size: RequestSize) -> QueueAnalyzer:
    """Build a QueueAnalyzer from already validated inputs."""
    return QueueModelBuilder().build(config, request_size)


def create_analyzer(config: Configuration, request_size: RequestSize) -> QueueAnalyzer:
    """Create a QueueAnalyzer from configuration, validating inputs first."""
    return QueueModelBuilder().create(config, request_size)
