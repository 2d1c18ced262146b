"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest
import yaml

from queue_analyzer.core.analysis import QueueAnalyzer, create_analyzer
from queue_analyzer.domain import (
    Configuration,
    DecodeParams,
    PrefillParams,
    RequestSize,
    ServiceParams,
)


@pytest.fixture
def service_params() -> ServiceParams:
    """Prefill/decode cost parameters of a mid-size model."""
    return ServiceParams(
        prefill=PrefillParams(gamma=50.0, delta=0.01),
        decode=DecodeParams(alpha=20.0, beta=2.0),
    )


@pytest.fixture
def small_config(service_params: ServiceParams) -> Configuration:
    """Batch of 4 with a queue of 10."""
    return Configuration(max_batch_size=4, max_queue_size=10, service_params=service_params)


@pytest.fixture
def large_config(service_params: ServiceParams) -> Configuration:
    """Batch of 64 with a queue of 128."""
    return Configuration(max_batch_size=64, max_queue_size=128, service_params=service_params)


@pytest.fixture
def chat_request() -> RequestSize:
    """Chat workload: 500 input tokens, 100 output tokens."""
    return RequestSize(avg_input_tokens=500, avg_output_tokens=100)


@pytest.fixture
def analyzer(small_config: Configuration, chat_request: RequestSize) -> QueueAnalyzer:
    """Analyzer for the small configuration and chat workload."""
    return create_analyzer(small_config, chat_request)


@pytest.fixture
def scenario_data() -> dict:
    """Scenario document matching small_config and chat_request."""
    return {
        "name": "chat-small",
        "configuration": {
            "max_batch_size": 4,
            "max_queue_size": 10,
            "service_params": {
                "prefill": {"gamma": 50.0, "delta": 0.01},
                "decode": {"alpha": 20.0, "beta": 2.0},
            },
        },
        "request_size": {"avg_input_tokens": 500, "avg_output_tokens": 100},
        "targets": {"ttft": 1000.0, "itl": 0.0, "tps": 0.0},
    }


@pytest.fixture
def scenario_file(tmp_path: Path, scenario_data: dict) -> Path:
    """Scenario written to a YAML file."""
    path = tmp_path / "chat-small.yaml"
    path.write_text(yaml.safe_dump(scenario_data))
    return path
