"""Unit tests for scenario loading."""

import json
from pathlib import Path

import pytest

from queue_analyzer.application import Scenario, load_scenario, scenario_from_dict
from queue_analyzer.domain import InvalidConfigError, InvalidWorkloadError, TargetPerf


class TestScenario:
    """Test suite for scenario files."""

    def test_load_yaml(self, scenario_file: Path) -> None:
        scenario = load_scenario(scenario_file)

        assert isinstance(scenario, Scenario)
        assert scenario.name == "chat-small"
        assert scenario.configuration.max_batch_size == 4
        assert scenario.configuration.max_queue_size == 10
        assert scenario.configuration.service_params.decode.beta == 2.0
        assert scenario.request_size.avg_input_tokens == 500
        assert scenario.targets == TargetPerf(target_ttft_ms=1000.0)

    def test_load_json(self, tmp_path: Path, scenario_data: dict) -> None:
        del scenario_data["name"]
        path = tmp_path / "chat.json"
        path.write_text(json.dumps(scenario_data))

        scenario = load_scenario(path)

        # falls back to the file name
        assert scenario.name == "chat"
        assert scenario.request_size.avg_output_tokens == 100

    def test_targets_optional(self, scenario_data: dict) -> None:
        del scenario_data["targets"]
        scenario = scenario_from_dict(scenario_data)
        assert scenario.targets == TargetPerf()

    def test_missing_section(self, scenario_data: dict) -> None:
        del scenario_data["request_size"]
        with pytest.raises(InvalidConfigError, match="'request_size'"):
            scenario_from_dict(scenario_data)

    def test_missing_field(self, scenario_data: dict) -> None:
        del scenario_data["configuration"]["service_params"]["decode"]["alpha"]
        with pytest.raises(InvalidConfigError, match="missing scenario field"):
            scenario_from_dict(scenario_data)

    def test_not_a_mapping(self) -> None:
        with pytest.raises(InvalidConfigError, match="mapping"):
            scenario_from_dict(["configuration"])  # type: ignore[arg-type]

    def test_invalid_batch_size(self, scenario_data: dict) -> None:
        scenario_data["configuration"]["max_batch_size"] = 0
        with pytest.raises(InvalidConfigError, match="invalid configuration"):
            scenario_from_dict(scenario_data)

    def test_invalid_request_size(self, scenario_data: dict) -> None:
        scenario_data["request_size"]["avg_output_tokens"] = 0
        with pytest.raises(InvalidWorkloadError):
            scenario_from_dict(scenario_data)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Scenario file not found"):
            load_scenario(tmp_path / "missing.yaml")

    def test_unsupported_format(self, tmp_path: Path) -> None:
        path = tmp_path / "scenario.toml"
        path.write_text("")
        with pytest.raises(ValueError, match="Unsupported scenario file format"):
            load_scenario(path)
