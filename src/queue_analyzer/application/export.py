"""
Export utilities for analysis and sizing reports.

Supports JSON, YAML, and Markdown output.
"""

import json
from typing import Any, Union

import yaml

from queue_analyzer.application.planner import AnalysisReport, SizingReport, SweepReport
from queue_analyzer.application.scenario import Scenario
from queue_analyzer.domain import AnalysisMetrics, TargetPerf

Report = Union[AnalysisReport, SizingReport, SweepReport]


def _check_report(report: Report) -> None:
    if not isinstance(report, (AnalysisReport, SizingReport, SweepReport)):
        raise TypeError(f"Unsupported report type: {type(report).__name__}")


def _scenario_dict(scenario: Scenario) -> dict[str, Any]:
    config = scenario.configuration
    params = config.service_params
    return {
        "name": scenario.name,
        "configuration": {
            "max_batch_size": config.max_batch_size,
            "max_queue_size": config.max_queue_size,
            "service_params": {
                "prefill": {"gamma": params.prefill.gamma, "delta": params.prefill.delta},
                "decode": {"alpha": params.decode.alpha, "beta": params.decode.beta},
            },
        },
        "request_size": {
            "avg_input_tokens": scenario.request_size.avg_input_tokens,
            "avg_output_tokens": scenario.request_size.avg_output_tokens,
        },
    }


def _metrics_dict(metrics: AnalysisMetrics) -> dict[str, float]:
    return {
        "throughput": metrics.throughput,
        "avg_response_time_ms": metrics.avg_response_time_ms,
        "avg_wait_time_ms": metrics.avg_wait_time_ms,
        "avg_num_in_service": metrics.avg_num_in_service,
        "avg_prefill_time_ms": metrics.avg_prefill_time_ms,
        "avg_token_time_ms": metrics.avg_token_time_ms,
        "max_rate": metrics.max_rate,
        "rho": metrics.rho,
    }


def _targets_dict(targets: TargetPerf) -> dict[str, float]:
    return {
        "ttft": targets.target_ttft_ms,
        "itl": targets.target_itl_ms,
        "tps": targets.target_tps,
    }


def to_dict(report: Report) -> dict[str, Any]:
    """
    Convert a report to a dictionary.

    Args:
        report: Analysis, sizing or sweep report

    Returns:
        Dictionary representation
    """
    _check_report(report)
    data: dict[str, Any] = {
        "scenario": _scenario_dict(report.scenario),
        "rate_range": {"min": report.rate_range.min, "max": report.rate_range.max},
    }

    if isinstance(report, AnalysisReport):
        data["request_rate"] = report.request_rate
        data["metrics"] = _metrics_dict(report.metrics)
    elif isinstance(report, SizingReport):
        result = report.result
        data["targets"] = _targets_dict(report.targets)
        data["target_rate"] = {
            "ttft": result.target_rate.rate_for_ttft,
            "itl": result.target_rate.rate_for_itl,
            "tps": result.target_rate.rate_for_tps,
        }
        data["request_rate"] = result.request_rate
        data["metrics"] = _metrics_dict(result.metrics)
        data["achieved"] = _targets_dict(result.achieved)
    else:
        data["points"] = [
            {"request_rate": rate, **_metrics_dict(metrics)} for rate, metrics in report.points
        ]

    return data


def to_json(report: Report, indent: int = 2) -> str:
    """Export a report to JSON."""
    return json.dumps(to_dict(report), indent=indent)


def to_yaml(report: Report) -> str:
    """Export a report to YAML."""
    return yaml.dump(to_dict(report), default_flow_style=False, sort_keys=False)


def _metrics_lines(metrics: AnalysisMetrics) -> list[str]:
    return [
        f"- **Throughput**: {metrics.throughput:.3f} req/s",
        f"- **Response time**: {metrics.avg_response_time_ms:.1f} ms",
        f"  - Wait: {metrics.avg_wait_time_ms:.1f} ms",
        f"  - Prefill: {metrics.avg_prefill_time_ms:.1f} ms",
        f"- **TTFT**: {metrics.ttft_ms:.1f} ms",
        f"- **ITL**: {metrics.avg_token_time_ms:.2f} ms",
        f"- **Requests in service**: {metrics.avg_num_in_service:.2f}",
        f"- **Utilization**: {metrics.rho * 100:.1f}%",
    ]


def to_markdown(report: Report) -> str:
    """
    Export a report to Markdown.

    Args:
        report: Analysis, sizing or sweep report

    Returns:
        Markdown string
    """
    _check_report(report)
    scenario = report.scenario
    config = scenario.configuration
    lines = [
        f"# Queue Analysis: {scenario.name}",
        "",
        f"**Batch / queue**: {config.max_batch_size} / {config.max_queue_size}",
        f"**Service params**: {config.service_params}",
        f"**Request size**: {scenario.request_size}",
        f"**Stable rates**: {report.rate_range} req/s",
        "",
    ]

    if isinstance(report, AnalysisReport):
        lines.extend([f"## Metrics at {report.request_rate:.3f} req/s", ""])
        lines.extend(_metrics_lines(report.metrics))
    elif isinstance(report, SizingReport):
        result = report.result
        lines.extend([
            "## Max Request Rates",
            "",
            "| Target | Requested | Max rate (req/s) | Achieved |",
            "|---|---|---|---|",
            f"| TTFT (ms) | {report.targets.target_ttft_ms:.1f} "
            f"| {result.target_rate.rate_for_ttft:.3f} | {result.achieved.target_ttft_ms:.1f} |",
            f"| ITL (ms) | {report.targets.target_itl_ms:.2f} "
            f"| {result.target_rate.rate_for_itl:.3f} | {result.achieved.target_itl_ms:.2f} |",
            f"| TPS (tokens/s) | {report.targets.target_tps:.1f} "
            f"| {result.target_rate.rate_for_tps:.3f} | {result.achieved.target_tps:.1f} |",
            "",
            f"## Metrics at {result.request_rate:.3f} req/s",
            "",
        ])
        lines.extend(_metrics_lines(result.metrics))
    else:
        lines.extend([
            "## Rate Sweep",
            "",
            "| Rate (req/s) | Throughput | Wait (ms) | TTFT (ms) | ITL (ms) | Utilization |",
            "|---|---|---|---|---|---|",
        ])
        for rate, metrics in report.points:
            lines.append(
                f"| {rate:.3f} | {metrics.throughput:.3f} | {metrics.avg_wait_time_ms:.1f} "
                f"| {metrics.ttft_ms:.1f} | {metrics.avg_token_time_ms:.2f} "
                f"| {metrics.rho * 100:.1f}% |"
            )

    lines.append("")
    return "\n".join(lines)


def save(report: Report, filepath: str, format: str = "auto") -> None:
    """
    Save a report to file.

    Args:
        report: Report to save
        filepath: Output file path
        format: Format ('json', 'yaml', 'md', or 'auto' to detect from extension)
    """
    if format == "auto":
        if filepath.endswith(".json"):
            format = "json"
        elif filepath.endswith(".yaml") or filepath.endswith(".yml"):
            format = "yaml"
        elif filepath.endswith(".md"):
            format = "md"
        else:
            format = "json"  # Default

    if format == "json":
        content = to_json(report)
    elif format == "yaml":
        content = to_yaml(report)
    elif format == "md":
        content = to_markdown(report)
    else:
        raise ValueError(f"Unknown format: {format}")

    with open(filepath, "w") as f:
        f.write(content)
