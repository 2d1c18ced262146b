"""
Performance functions of the request arrival rate.

A PerformanceEvaluator captures the queueing model and token cost
parameters explicitly, so its bound methods can be handed to the root finder
without any shared module state.
"""

import logging

from queue_analyzer.core.analysis.concurrency import effective_concurrency
from queue_analyzer.core.interfaces import QueueModel, QueueSolution
from queue_analyzer.domain import ModelDivergenceError, RequestSize, ServiceParams


class PerformanceEvaluator:
    """
    Evaluates solved-model performance at an arrival rate (per msec).

    Attributes:
        model: Queueing model to solve
        service_params: Prefill and decode parameters
        request_size: Average request token counts
        max_batch_size: Maximum batch size
    """

    def __init__(
        self,
        model: QueueModel,
        service_params: ServiceParams,
        request_size: RequestSize,
        max_batch_size: int,
    ):
        self.model = model
        self.service_params = service_params
        self.request_size = request_size
        self.max_batch_size = max_batch_size
        self._logger = logging.getLogger(__name__)

    def solve(self, arrival_rate: float) -> QueueSolution:
        """
        Solve the model and check the solution.

        Args:
            arrival_rate: Request arrival rate (per msec)

        Returns:
            Valid queue solution

        Raises:
            ModelDivergenceError: If the model has no valid solution
        """
        solution = self.model.solve(arrival_rate, 1)
        if not solution.is_valid:
            raise ModelDivergenceError(f"invalid model {self.model} at rate={arrival_rate}")
        return solution

    def concurrency(self, solution: QueueSolution) -> float:
        """Effective concurrency implied by a solution's average service time."""
        return effective_concurrency(
            solution.avg_service_time,
            self.service_params,
            self.request_size,
            self.max_batch_size,
        )

    def prefill_time(self, concurrency: float) -> float:
        return self.service_params.prefill.prefill_time(
            self.request_size.avg_input_tokens, concurrency
        )

    def token_time(self, concurrency: float) -> float:
        return self.service_params.decode.decode_time(concurrency)

    def ttft(self, arrival_rate: float) -> float:
        """Time to first token (msec): queueing wait + prefill."""
        solution = self.solve(arrival_rate)
        ttft = solution.avg_wait_time + self.prefill_time(self.concurrency(solution))
        self._logger.debug(f"TTFT at rate={arrival_rate:.6g}/ms: {ttft:.3f} ms")
        return ttft

    def itl(self, arrival_rate: float) -> float:
        """Inter-token latency (msec) at the effective concurrency."""
        solution = self.solve(arrival_rate)
        itl = self.token_time(self.concurrency(solution))
        self._logger.debug(f"ITL at rate={arrival_rate:.6g}/ms: {itl:.3f} ms")
        return itl
