"""
Inference server queue analyzer.

Evaluates steady-state performance of a batching inference server at a
request rate, and sizes the maximum request rate that meets latency and
throughput targets.

Units: request rates and throughput are requests/sec at this boundary and
requests/msec inside the queueing model. Times are always milliseconds.
"""

import logging

from queue_analyzer.core.analysis.constants import RATE_SCALE
from queue_analyzer.core.analysis.evaluation import PerformanceEvaluator
from queue_analyzer.core.analysis.sizing import (
    SizingResult,
    search_max_rate,
    throughput_rate_ceiling,
)
from queue_analyzer.core.interfaces import QueueModel
from queue_analyzer.domain import (
    AnalysisMetrics,
    InvalidRateError,
    RateOutOfRangeError,
    RateRange,
    RequestSize,
    ServiceParams,
    TargetPerf,
    TargetRate,
)


class QueueAnalyzer:
    """
    Analyzer of an inference server request queue.

    Built once by QueueModelBuilder and queried many times. Queries never
    modify the analyzer: every solve of the model returns its own snapshot,
    so an instance can be shared between threads.

    Attributes:
        max_batch_size: Maximum batch size
        max_queue_size: Maximum queue size
        service_params: Request processing parameters
        request_size: Average request token counts
        model: Queueing model
        rate_range: Range of request rates for model stability (requests/sec)

    Example:
        >>> analyzer = create_analyzer(config, RequestSize(500, 100))
        >>> metrics = analyzer.analyze(request_rate=1.0)
        >>> print(f"Wait: {metrics.avg_wait_time_ms:.1f}ms")
        >>> result = analyzer.size(TargetPerf(target_ttft_ms=2000, target_itl_ms=25))
        >>> print(f"Max rate: {result.request_rate:.3f} req/s")
    """

    def __init__(
        self,
        max_batch_size: int,
        max_queue_size: int,
        service_params: ServiceParams,
        request_size: RequestSize,
        model: QueueModel,
        rate_range: RateRange,
    ):
        self._max_batch_size = max_batch_size
        self._max_queue_size = max_queue_size
        self._service_params = service_params
        self._request_size = request_size
        self._model = model
        self._rate_range = rate_range
        self._evaluator = PerformanceEvaluator(
            model, service_params, request_size, max_batch_size
        )
        self._logger = logging.getLogger(__name__)

    @property
    def max_batch_size(self) -> int:
        return self._max_batch_size

    @property
    def max_queue_size(self) -> int:
        return self._max_queue_size

    @property
    def service_params(self) -> ServiceParams:
        return self._service_params

    @property
    def request_size(self) -> RequestSize:
        return self._request_size

    @property
    def model(self) -> QueueModel:
        return self._model

    @property
    def rate_range(self) -> RateRange:
        return self._rate_range

    def analyze(self, request_rate: float) -> AnalysisMetrics:
        """
        Evaluate performance metrics at a request rate.

        Args:
            request_rate: Request arrival rate (requests/sec)

        Returns:
            AnalysisMetrics at the given rate

        Raises:
            InvalidRateError: If request_rate is not positive
            RateOutOfRangeError: If request_rate exceeds the max stable rate
            ModelDivergenceError: If the model has no valid solution
        """
        if request_rate <= 0:
            raise InvalidRateError(f"invalid request rate {request_rate}")
        if request_rate > self._rate_range.max:
            raise RateOutOfRangeError(
                f"rate={request_rate}, max allowed rate={self._rate_range.max}"
            )

        evaluator = self._evaluator
        solution = evaluator.solve(request_rate / RATE_SCALE)

        avg_num_in_service = solution.avg_num_in_service
        concurrency = evaluator.concurrency(solution)

        rho = avg_num_in_service / self._max_batch_size
        rho = min(max(rho, 0.0), 1.0)

        metrics = AnalysisMetrics(
            throughput=solution.throughput * RATE_SCALE,
            avg_response_time_ms=solution.avg_response_time,
            avg_wait_time_ms=solution.avg_wait_time,
            avg_num_in_service=avg_num_in_service,
            avg_prefill_time_ms=evaluator.prefill_time(concurrency),
            avg_token_time_ms=evaluator.token_time(concurrency),
            max_rate=self._rate_range.max,
            rho=rho,
        )
        self._logger.debug(f"Analyzed rate={request_rate:.4f} req/s: {metrics}")
        return metrics

    def size(self, target_perf: TargetPerf) -> SizingResult:
        """
        Evaluate the max request rates that achieve given performance targets.

        Args:
            target_perf: Performance targets (0 = unconstrained)

        Returns:
            SizingResult with:
            - max request rate per target
            - performance metrics at the smallest of those rates
            - achieved values of the targets

        Raises:
            InvalidTargetError: If a target value is negative
            TargetUnreachableError: If a latency target cannot be met at any
                rate in range
            ModelDivergenceError: If the model has no valid solution
        """
        target_perf.check()

        rate_min = self._rate_range.min / RATE_SCALE
        rate_max = self._rate_range.max / RATE_SCALE
        evaluator = self._evaluator

        # max rate to achieve target TTFT
        rate_ttft = search_max_rate(
            "TTFT",
            target_perf.target_ttft_ms,
            evaluator.ttft,
            rate_min,
            rate_max,
            self._rate_range,
        )

        # max rate to achieve target ITL
        rate_itl = search_max_rate(
            "ITL",
            target_perf.target_itl_ms,
            evaluator.itl,
            rate_min,
            rate_max,
            self._rate_range,
        )

        rate_tps = throughput_rate_ceiling(rate_max)

        # analyze queue at the most restrictive rate
        target_rate = TargetRate(
            rate_for_ttft=rate_ttft * RATE_SCALE,
            rate_for_itl=rate_itl * RATE_SCALE,
            rate_for_tps=rate_tps * RATE_SCALE,
        )
        metrics = self.analyze(target_rate.binding_rate)

        achieved = TargetPerf(
            target_ttft_ms=metrics.ttft_ms,
            target_itl_ms=metrics.avg_token_time_ms,
            target_tps=metrics.throughput * self._request_size.avg_output_tokens,
        )

        self._logger.info(
            f"Sized queue for targets {target_perf}: rates={target_rate}, "
            f"achieved={achieved}"
        )
        return SizingResult(target_rate=target_rate, metrics=metrics, achieved=achieved)

    def __str__(self) -> str:
        return (
            f"{{maxBatch={self._max_batch_size}, maxQueue={self._max_queue_size}, "
            f"servParams:{self._service_params}, reqSize:{self._request_size}, "
            f"model:{self._model}, rates:{self._rate_range}}}"
        )
