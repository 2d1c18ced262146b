#!/usr/bin/env python3
"""
queue-analyzer CLI - Command-line interface for inference queue capacity planning.

Usage:
    queue-analyzer analyze --config SCENARIO --rate RATE [OPTIONS]
    queue-analyzer size --config SCENARIO [--ttft MS] [--itl MS] [--tps TPS] [OPTIONS]
    queue-analyzer sweep --config SCENARIO [--points N] [OPTIONS]
"""

import argparse
import logging
import sys
from typing import Optional

from queue_analyzer.application import CapacityPlanner, export, load_scenario
from queue_analyzer.domain import AnalysisMetrics, QueueAnalyzerError, TargetPerf


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="queue-analyzer",
        description="Queue capacity planner for LLM inference servers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Analyze command
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Evaluate metrics at a request rate",
        description="Evaluate steady-state queue metrics at a given request rate",
    )
    analyze_parser.add_argument(
        "--config",
        required=True,
        help="Scenario file (.yaml, .yml or .json)",
    )
    analyze_parser.add_argument(
        "--rate",
        type=float,
        required=True,
        help="Request rate in requests/sec",
    )
    analyze_parser.add_argument(
        "--output",
        "-o",
        help="Output file (supports .json, .yaml, .md)",
    )
    analyze_parser.add_argument(
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (default: text)",
    )

    # Size command
    size_parser = subparsers.add_parser(
        "size",
        help="Find max request rates for targets",
        description="Find the maximum request rate meeting TTFT, ITL and TPS targets",
    )
    size_parser.add_argument(
        "--config",
        required=True,
        help="Scenario file (.yaml, .yml or .json)",
    )
    size_parser.add_argument(
        "--ttft",
        type=float,
        help="Target time to first token in msec (overrides scenario, 0 = none)",
    )
    size_parser.add_argument(
        "--itl",
        type=float,
        help="Target inter-token latency in msec (overrides scenario, 0 = none)",
    )
    size_parser.add_argument(
        "--tps",
        type=float,
        help="Target throughput in tokens/sec (overrides scenario, 0 = none)",
    )
    size_parser.add_argument(
        "--output",
        "-o",
        help="Output file (supports .json, .yaml, .md)",
    )
    size_parser.add_argument(
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (default: text)",
    )

    # Sweep command
    sweep_parser = subparsers.add_parser(
        "sweep",
        help="Evaluate metrics across the stable rate range",
        description="Evaluate metrics at evenly spaced rates across the stable range",
    )
    sweep_parser.add_argument(
        "--config",
        required=True,
        help="Scenario file (.yaml, .yml or .json)",
    )
    sweep_parser.add_argument(
        "--points",
        type=int,
        default=10,
        help="Number of rates to evaluate (default: 10)",
    )
    sweep_parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format (default: table)",
    )

    return parser


def _print_metrics(metrics: AnalysisMetrics) -> None:
    print(f"  • Throughput: {metrics.throughput:.3f} req/s")
    print(f"  • Response time: {metrics.avg_response_time_ms:,.1f} ms")
    print(f"  • Wait time: {metrics.avg_wait_time_ms:,.1f} ms")
    print(f"  • Prefill time: {metrics.avg_prefill_time_ms:,.1f} ms")
    print(f"  • TTFT: {metrics.ttft_ms:,.1f} ms")
    print(f"  • ITL: {metrics.avg_token_time_ms:.2f} ms")
    print(f"  • Requests in service: {metrics.avg_num_in_service:.2f}")
    print(f"  • Utilization: {metrics.rho * 100:.1f}%")


def cmd_analyze(args: argparse.Namespace) -> int:
    """Execute analyze command."""
    try:
        scenario = load_scenario(args.config)
        report = CapacityPlanner().analyze(scenario, args.rate)

        if args.format == "json":
            print(export.to_json(report))
        elif args.format == "yaml":
            print(export.to_yaml(report))
        else:  # text
            print(f"Scenario: {scenario.name}")
            print(f"Stable rates: {report.rate_range} req/s")
            print(f"\nMetrics at {report.request_rate:.3f} req/s:")
            _print_metrics(report.metrics)

        if args.output:
            export.save(report, args.output)
            print(f"\n✓ Saved to {args.output}")

        return 0

    except (QueueAnalyzerError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_size(args: argparse.Namespace) -> int:
    """Execute size command."""
    try:
        scenario = load_scenario(args.config)
        defaults = scenario.targets
        targets = TargetPerf(
            target_ttft_ms=args.ttft if args.ttft is not None else defaults.target_ttft_ms,
            target_itl_ms=args.itl if args.itl is not None else defaults.target_itl_ms,
            target_tps=args.tps if args.tps is not None else defaults.target_tps,
        )
        report = CapacityPlanner().size(scenario, targets)
        result = report.result

        if args.format == "json":
            print(export.to_json(report))
        elif args.format == "yaml":
            print(export.to_yaml(report))
        else:  # text
            print(f"Scenario: {scenario.name}")
            print(f"Stable rates: {report.rate_range} req/s")
            print(f"Targets: {targets}")
            print("\nMax request rates:")
            print(f"  • TTFT: {result.target_rate.rate_for_ttft:.3f} req/s")
            print(f"  • ITL: {result.target_rate.rate_for_itl:.3f} req/s")
            print(f"  • TPS: {result.target_rate.rate_for_tps:.3f} req/s")
            print(f"\nMetrics at {result.request_rate:.3f} req/s:")
            _print_metrics(result.metrics)
            print("\nAchieved:")
            print(f"  • TTFT: {result.achieved.target_ttft_ms:,.1f} ms")
            print(f"  • ITL: {result.achieved.target_itl_ms:.2f} ms")
            print(f"  • TPS: {result.achieved.target_tps:,.1f} tokens/sec")

        if args.output:
            export.save(report, args.output)
            print(f"\n✓ Saved to {args.output}")

        return 0

    except (QueueAnalyzerError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_sweep(args: argparse.Namespace) -> int:
    """Execute sweep command."""
    try:
        scenario = load_scenario(args.config)
        report = CapacityPlanner().sweep(scenario, args.points)

        if args.format == "json":
            print(export.to_json(report))
        else:
            print(
                f"\n{'Rate':<10} {'Tput':<10} {'Wait (ms)':<12} {'TTFT (ms)':<12} "
                f"{'ITL (ms)':<10} {'Util':<8}"
            )
            print("-" * 66)
            for rate, metrics in report.points:
                print(
                    f"{rate:<10.3f} {metrics.throughput:<10.3f} "
                    f"{metrics.avg_wait_time_ms:<12.1f} {metrics.ttft_ms:<12.1f} "
                    f"{metrics.avg_token_time_ms:<10.2f} {metrics.rho * 100:<7.1f}%"
                )
            print(f"\nStable rates: {report.rate_range} req/s")

        return 0

    except (QueueAnalyzerError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "analyze":
        return cmd_analyze(args)
    elif args.command == "size":
        return cmd_size(args)
    elif args.command == "sweep":
        return cmd_sweep(args)
    else:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
