"""Unit tests for prefill and decode cost models."""

import pytest

from queue_analyzer.domain import DecodeParams, PrefillParams, TargetRate


class TestPrefillParams:
    """Test suite for PrefillParams."""

    def test_prefill_time(self) -> None:
        """Test prefill time = gamma + delta * input_tokens * batch_size."""
        prefill = PrefillParams(gamma=50.0, delta=0.01)
        assert prefill.prefill_time(500, 1) == pytest.approx(55.0)
        assert prefill.prefill_time(500, 4) == pytest.approx(70.0)

    def test_prefill_time_fractional_batch(self) -> None:
        prefill = PrefillParams(gamma=50.0, delta=0.01)
        assert prefill.prefill_time(500, 2.5) == pytest.approx(62.5)

    def test_no_input_tokens_means_no_prefill(self) -> None:
        """Test that prefill time is zero without input tokens."""
        prefill = PrefillParams(gamma=50.0, delta=0.01)
        assert prefill.prefill_time(0, 8) == 0.0


class TestDecodeParams:
    """Test suite for DecodeParams."""

    def test_decode_time(self) -> None:
        """Test decode time = alpha + beta * batch_size."""
        decode = DecodeParams(alpha=20.0, beta=2.0)
        assert decode.decode_time(1) == pytest.approx(22.0)
        assert decode.decode_time(4) == pytest.approx(28.0)
        assert decode.decode_time(0) == pytest.approx(20.0)

    def test_decode_time_increases_with_batch(self) -> None:
        decode = DecodeParams(alpha=8.0, beta=0.5)
        times = [decode.decode_time(n) for n in range(1, 33)]
        assert times == sorted(times)


class TestTargetRate:
    """Test suite for TargetRate."""

    def test_binding_rate_is_minimum(self) -> None:
        rates = TargetRate(rate_for_ttft=1.2, rate_for_itl=0.8, rate_for_tps=1.0)
        assert rates.binding_rate == 0.8
