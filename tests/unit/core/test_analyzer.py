"""Unit tests for QueueAnalyzer.analyze and effective concurrency."""

from concurrent.futures import ThreadPoolExecutor
from types import SimpleNamespace

import pytest

from queue_analyzer.core.analysis import QueueAnalyzer, effective_concurrency
from queue_analyzer.domain import (
    AnalysisMetrics,
    DecodeParams,
    InvalidRateError,
    ModelDivergenceError,
    PrefillParams,
    RateOutOfRangeError,
    RateRange,
    RequestSize,
    ServiceParams,
)


class DivergentModel:
    """Queue model that never converges."""

    def solve(self, arrival_rate: float, service_scale: float = 1.0) -> SimpleNamespace:
        return SimpleNamespace(is_valid=False)

    def __str__(self) -> str:
        return "{divergent}"


class TestEffectiveConcurrency:
    """Test suite for the service time inversion."""

    def test_recovers_batch_size(
        self, service_params: ServiceParams, chat_request: RequestSize
    ) -> None:
        """Test that service time at batch size n maps back to n."""
        # S(1) = 2233 ms, S(3) = 50 + 15 + 99 * 26 = 2639 ms
        assert effective_concurrency(2233.0, service_params, chat_request, 4) == pytest.approx(1.0)
        assert effective_concurrency(2639.0, service_params, chat_request, 4) == pytest.approx(3.0)

    def test_clamped_to_max_batch(
        self, service_params: ServiceParams, chat_request: RequestSize
    ) -> None:
        assert effective_concurrency(1e6, service_params, chat_request, 4) == 4.0

    def test_clamped_to_zero(self, service_params: ServiceParams, chat_request: RequestSize) -> None:
        assert effective_concurrency(0.0, service_params, chat_request, 4) == 0.0

    def test_concurrency_independent_cost(self, chat_request: RequestSize) -> None:
        """Test that flat costs (no batch slope) give zero concurrency."""
        flat = ServiceParams(
            prefill=PrefillParams(gamma=50.0, delta=0.0),
            decode=DecodeParams(alpha=20.0, beta=0.0),
        )
        assert effective_concurrency(2030.0, flat, chat_request, 4) == 0.0


class TestAnalyze:
    """Test suite for metric evaluation."""

    def test_analyze_near_max_rate(self, analyzer: QueueAnalyzer) -> None:
        """Test that the top of the stable range can be analyzed."""
        rate = analyzer.rate_range.max * (1 - 1e-6)
        metrics = analyzer.analyze(rate)

        assert isinstance(metrics, AnalysisMetrics)
        assert metrics.max_rate == analyzer.rate_range.max
        assert 0 < metrics.throughput <= rate

    def test_analyze_at_max_rate(self, analyzer: QueueAnalyzer) -> None:
        metrics = analyzer.analyze(analyzer.rate_range.max)
        assert metrics.rho <= 1.0

    def test_rate_above_range(self, analyzer: QueueAnalyzer) -> None:
        with pytest.raises(RateOutOfRangeError, match="max allowed rate"):
            analyzer.analyze(analyzer.rate_range.max * 1.01)

    @pytest.mark.parametrize("rate", [0.0, -1.0])
    def test_non_positive_rate(self, analyzer: QueueAnalyzer, rate: float) -> None:
        with pytest.raises(InvalidRateError, match="invalid request rate"):
            analyzer.analyze(rate)

    def test_light_load(self, analyzer: QueueAnalyzer) -> None:
        """Test that at the lowest rate requests are served alone, without waiting."""
        rate = analyzer.rate_range.min
        metrics = analyzer.analyze(rate)

        assert metrics.avg_wait_time_ms == pytest.approx(0.0, abs=1e-6)
        assert metrics.throughput == pytest.approx(rate, rel=1e-6)
        # effective concurrency ~1: prefill 50 + 5 ms, decode 20 + 2 ms
        assert metrics.avg_prefill_time_ms == pytest.approx(55.0, rel=1e-2)
        assert metrics.avg_token_time_ms == pytest.approx(22.0, rel=1e-2)
        assert metrics.avg_response_time_ms == pytest.approx(2233.0, rel=1e-2)
        assert metrics.rho < 0.01

    @pytest.mark.parametrize("fraction", [0.001, 0.1, 0.5, 0.9, 0.999, 1.0])
    def test_metrics_bounded(self, analyzer: QueueAnalyzer, fraction: float) -> None:
        """Test utilization and effective concurrency bounds across the range."""
        metrics = analyzer.analyze(analyzer.rate_range.max * fraction)
        decode = analyzer.service_params.decode

        assert 0.0 <= metrics.rho <= 1.0
        # token time is decode_time(n) with n in [0, max_batch_size]
        assert decode.alpha <= metrics.avg_token_time_ms
        assert metrics.avg_token_time_ms <= decode.decode_time(analyzer.max_batch_size)
        assert metrics.avg_response_time_ms >= metrics.avg_wait_time_ms >= 0.0

    def test_metrics_grow_with_load(self, analyzer: QueueAnalyzer) -> None:
        low = analyzer.analyze(analyzer.rate_range.max * 0.2)
        high = analyzer.analyze(analyzer.rate_range.max * 0.9)

        assert high.throughput > low.throughput
        assert high.avg_wait_time_ms > low.avg_wait_time_ms
        assert high.avg_token_time_ms > low.avg_token_time_ms
        assert high.rho > low.rho

    def test_idempotent(self, analyzer: QueueAnalyzer) -> None:
        """Test that repeated analysis is deterministic."""
        rate = analyzer.rate_range.max * 0.7
        first = analyzer.analyze(rate)
        analyzer.analyze(rate * 0.5)
        assert analyzer.analyze(rate) == first

    def test_concurrent_queries(self, analyzer: QueueAnalyzer) -> None:
        """Test that one analyzer can serve overlapping queries."""
        rates = [analyzer.rate_range.max * f for f in (0.1, 0.3, 0.5, 0.7, 0.9)] * 8
        expected = [analyzer.analyze(rate) for rate in rates]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(analyzer.analyze, rates))

        assert results == expected

    def test_model_divergence(
        self, service_params: ServiceParams, chat_request: RequestSize
    ) -> None:
        analyzer = QueueAnalyzer(
            max_batch_size=4,
            max_queue_size=10,
            service_params=service_params,
            request_size=chat_request,
            model=DivergentModel(),
            rate_range=RateRange(min=0.001, max=1.0),
        )
        with pytest.raises(ModelDivergenceError, match="invalid model"):
            analyzer.analyze(0.5)
