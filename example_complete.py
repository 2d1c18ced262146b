#!/usr/bin/env python3
"""
Complete end-to-end example of queue-analyzer.

Builds a queue model for an inference server, evaluates it across load
levels, and sizes it for latency targets.
"""

from queue_analyzer.application import CapacityPlanner, Scenario, export
from queue_analyzer.domain import (
    Configuration,
    DecodeParams,
    PrefillParams,
    RequestSize,
    ServiceParams,
    TargetPerf,
)


def main():
    """Run complete analysis workflow."""
    print("=" * 80)
    print("queue-analyzer: Complete End-to-End Example")
    print("=" * 80)

    # Step 1: Describe the server and workload
    print("\n📋 Step 1: Define Scenario")
    scenario = Scenario(
        configuration=Configuration(
            max_batch_size=8,
            max_queue_size=32,
            service_params=ServiceParams(
                prefill=PrefillParams(gamma=40.0, delta=0.02),
                decode=DecodeParams(alpha=15.0, beta=0.8),
            ),
        ),
        request_size=RequestSize(avg_input_tokens=1024, avg_output_tokens=256),
        targets=TargetPerf(target_ttft_ms=2000.0, target_itl_ms=20.0),
        name="chat-8x32",
    )
    print(f"  Configuration: {scenario.configuration}")
    print(f"  Request size: {scenario.request_size}")
    print(f"  Targets: {scenario.targets}")

    planner = CapacityPlanner()

    # Step 2: Sweep the stable range
    print("\n📋 Step 2: Sweep Request Rates")
    sweep = planner.sweep(scenario, points=6)
    print(f"\n{'Rate':<10} {'TTFT (ms)':<12} {'ITL (ms)':<10} {'Util':<8}")
    print("-" * 42)
    for rate, metrics in sweep.points:
        print(
            f"{rate:<10.3f} {metrics.ttft_ms:<12.1f} "
            f"{metrics.avg_token_time_ms:<10.2f} {metrics.rho * 100:<7.1f}%"
        )

    # Step 3: Size for targets
    print("\n📋 Step 3: Size for Targets")
    report = planner.size(scenario)
    result = report.result
    print(f"  • Max rate for TTFT: {result.target_rate.rate_for_ttft:.3f} req/s")
    print(f"  • Max rate for ITL: {result.target_rate.rate_for_itl:.3f} req/s")
    print(f"  • Max rate for TPS: {result.target_rate.rate_for_tps:.3f} req/s")
    print(f"  → Operating rate: {result.request_rate:.3f} req/s")
    print(f"  → Achieved: {result.achieved}")

    # Step 4: Export
    print("\n📋 Step 4: Export Report")
    export.save(report, "/tmp/queue_sizing.json")
    export.save(report, "/tmp/queue_sizing.md")
    print("✓ Saved /tmp/queue_sizing.json and /tmp/queue_sizing.md")

    print("\n" + "=" * 80)
    print("✅ COMPLETE!")
    print("=" * 80)


if __name__ == "__main__":
    main()
