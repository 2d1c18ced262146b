"""
Scenario files.

A scenario describes a server configuration, a workload profile and optional
performance targets, as YAML or JSON:

    configuration:
      max_batch_size: 4
      max_queue_size: 10
      service_params:
        prefill: {gamma: 50.0, delta: 0.01}
        decode: {alpha: 20.0, beta: 2.0}
    request_size:
      avg_input_tokens: 500
      avg_output_tokens: 100
    targets:
      ttft: 2000
      itl: 25
      tps: 0
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

import yaml

from queue_analyzer.domain import (
    Configuration,
    DecodeParams,
    InvalidConfigError,
    PrefillParams,
    RequestSize,
    ServiceParams,
    TargetPerf,
)


@dataclass(frozen=True)
class Scenario:
    """
    Inputs of one analysis.

    Attributes:
        configuration: Queue configuration
        request_size: Workload profile
        targets: Performance targets (all unconstrained if not given)
        name: Scenario name
    """

    configuration: Configuration
    request_size: RequestSize
    targets: TargetPerf = field(default_factory=TargetPerf)
    name: str = "scenario"


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if not isinstance(value, dict):
        raise InvalidConfigError(f"missing or invalid '{key}' section")
    return value


def scenario_from_dict(data: dict[str, Any], name: str = "scenario") -> Scenario:
    """
    Build a Scenario from parsed YAML/JSON data.

    Args:
        data: Parsed scenario document
        name: Fallback scenario name

    Returns:
        Validated Scenario

    Raises:
        InvalidConfigError: If a section or field is missing
        InvalidWorkloadError: If the request size is invalid
        InvalidTargetError: If a target is negative
    """
    if not isinstance(data, dict):
        raise InvalidConfigError("scenario must be a mapping")

    config_data = _section(data, "configuration")
    params_data = _section(config_data, "service_params")
    prefill_data = _section(params_data, "prefill")
    decode_data = _section(params_data, "decode")
    size_data = _section(data, "request_size")
    targets_data = data.get("targets") or {}

    try:
        service_params = ServiceParams(
            prefill=PrefillParams(
                gamma=float(prefill_data["gamma"]),
                delta=float(prefill_data["delta"]),
            ),
            decode=DecodeParams(
                alpha=float(decode_data["alpha"]),
                beta=float(decode_data["beta"]),
            ),
        )
        configuration = Configuration(
            max_batch_size=int(config_data["max_batch_size"]),
            max_queue_size=int(config_data.get("max_queue_size", 0)),
            service_params=service_params,
        )
        request_size = RequestSize(
            avg_input_tokens=int(size_data["avg_input_tokens"]),
            avg_output_tokens=int(size_data["avg_output_tokens"]),
        )
    except KeyError as e:
        raise InvalidConfigError(f"missing scenario field {e}") from e

    targets = TargetPerf(
        target_ttft_ms=float(targets_data.get("ttft", 0.0)),
        target_itl_ms=float(targets_data.get("itl", 0.0)),
        target_tps=float(targets_data.get("tps", 0.0)),
    )

    return Scenario(
        configuration=configuration,
        request_size=request_size,
        targets=targets,
        name=str(data.get("name", name)),
    )


def load_scenario(path: Union[str, Path]) -> Scenario:
    """
    Load a scenario from a YAML or JSON file.

    Args:
        path: Scenario file (.yaml, .yml or .json)

    Returns:
        Validated Scenario

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file format is not supported
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Scenario file not found: {path}")

    with open(path, "r") as f:
        if path.suffix == ".json":
            data = json.load(f)
        elif path.suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported scenario file format: {path.suffix}")

    return scenario_from_dict(data, name=path.stem)
