"""Unit tests for domain value object validation."""

import pytest

from queue_analyzer.domain import (
    Configuration,
    DecodeParams,
    InvalidConfigError,
    InvalidTargetError,
    InvalidWorkloadError,
    PrefillParams,
    RequestSize,
    ServiceParams,
    TargetPerf,
)


class TestConfiguration:
    """Test suite for Configuration value object."""

    def test_create_valid_configuration(self, small_config: Configuration) -> None:
        """Test creating a valid configuration."""
        assert small_config.max_batch_size == 4
        assert small_config.max_queue_size == 10
        assert small_config.occupancy_upper_bound == 14

    def test_zero_queue_size_allowed(self, service_params: ServiceParams) -> None:
        """Test that a configuration without a queue is valid."""
        config = Configuration(max_batch_size=8, max_queue_size=0, service_params=service_params)
        assert config.occupancy_upper_bound == 8

    @pytest.mark.parametrize("max_batch_size", [0, -1])
    def test_invalid_max_batch_size(
        self, service_params: ServiceParams, max_batch_size: int
    ) -> None:
        """Test that a non-positive batch size is rejected."""
        with pytest.raises(InvalidConfigError, match="invalid configuration"):
            Configuration(
                max_batch_size=max_batch_size, max_queue_size=10, service_params=service_params
            )

    def test_invalid_max_queue_size(self, service_params: ServiceParams) -> None:
        """Test that a negative queue size is rejected."""
        with pytest.raises(InvalidConfigError, match="invalid configuration"):
            Configuration(max_batch_size=4, max_queue_size=-1, service_params=service_params)

    def test_missing_service_params(self) -> None:
        """Test that missing service parameters are rejected."""
        with pytest.raises(InvalidConfigError):
            Configuration(max_batch_size=4, max_queue_size=10, service_params=None)

    def test_missing_prefill_params(self) -> None:
        """Test that missing prefill parameters are rejected."""
        params = ServiceParams(prefill=None, decode=DecodeParams(alpha=20.0, beta=2.0))
        with pytest.raises(InvalidConfigError):
            Configuration(max_batch_size=4, max_queue_size=10, service_params=params)

    def test_missing_decode_params(self) -> None:
        """Test that missing decode parameters are rejected."""
        params = ServiceParams(prefill=PrefillParams(gamma=50.0, delta=0.01), decode=None)
        with pytest.raises(InvalidConfigError):
            Configuration(max_batch_size=4, max_queue_size=10, service_params=params)

    def test_string_representation(self, small_config: Configuration) -> None:
        """Test diagnostic rendering."""
        text = str(small_config)
        assert "maxBatch=4" in text
        assert "maxQueue=10" in text
        assert "gamma=50.000" in text


class TestServiceParams:
    """Test suite for ServiceParams."""

    def test_check_valid(self, service_params: ServiceParams) -> None:
        service_params.check()

    def test_check_missing_stage(self) -> None:
        with pytest.raises(InvalidConfigError, match="invalid service parameters"):
            ServiceParams(prefill=None, decode=None).check()


class TestRequestSize:
    """Test suite for RequestSize value object."""

    def test_create_valid_request_size(self, chat_request: RequestSize) -> None:
        assert chat_request.avg_input_tokens == 500
        assert chat_request.avg_output_tokens == 100
        assert chat_request.decode_steps == 99

    def test_zero_input_tokens_allowed(self) -> None:
        """Test that a request without a prompt is valid."""
        request = RequestSize(avg_input_tokens=0, avg_output_tokens=10)
        assert request.avg_input_tokens == 0

    def test_single_output_token_allowed(self) -> None:
        request = RequestSize(avg_input_tokens=100, avg_output_tokens=1)
        assert request.decode_steps == 0

    def test_negative_input_tokens(self) -> None:
        with pytest.raises(InvalidWorkloadError, match="invalid request size"):
            RequestSize(avg_input_tokens=-1, avg_output_tokens=10)

    def test_no_output_tokens(self) -> None:
        """Test that a request must generate at least one token."""
        with pytest.raises(InvalidWorkloadError, match="invalid request size"):
            RequestSize(avg_input_tokens=100, avg_output_tokens=0)


class TestTargetPerf:
    """Test suite for TargetPerf value object."""

    def test_defaults_are_unconstrained(self) -> None:
        targets = TargetPerf()
        assert targets.target_ttft_ms == 0
        assert targets.target_itl_ms == 0
        assert targets.target_tps == 0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"target_ttft_ms": -1.0},
            {"target_itl_ms": -0.5},
            {"target_tps": -100.0},
        ],
    )
    def test_negative_target_rejected(self, kwargs: dict) -> None:
        with pytest.raises(InvalidTargetError, match="invalid target data values"):
            TargetPerf(**kwargs)

    def test_string_representation(self) -> None:
        text = str(TargetPerf(target_ttft_ms=200.0, target_itl_ms=25.0, target_tps=1000.0))
        assert text == "{TTFT=200.000, ITL=25.000, TPS=1000.000}"
