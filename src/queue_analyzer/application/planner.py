"""
Capacity planner.

Orchestrates model building, analysis and sizing for a scenario, producing
reports that the export module and CLI render.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from queue_analyzer.application.scenario import Scenario
from queue_analyzer.core.analysis import QueueAnalyzer, QueueModelBuilder, SizingResult
from queue_analyzer.domain import AnalysisMetrics, RateRange, TargetPerf


@dataclass(frozen=True)
class AnalysisReport:
    """
    Metrics of a scenario at one request rate.

    Attributes:
        scenario: Analyzed scenario
        request_rate: Request rate (requests/sec)
        rate_range: Stable range of request rates
        metrics: Performance metrics at request_rate
    """

    scenario: Scenario
    request_rate: float
    rate_range: RateRange
    metrics: AnalysisMetrics


@dataclass(frozen=True)
class SizingReport:
    """
    Sizing of a scenario for its performance targets.

    Attributes:
        scenario: Sized scenario
        targets: Requested targets
        rate_range: Stable range of request rates
        result: Max rates, metrics and achieved values
    """

    scenario: Scenario
    targets: TargetPerf
    rate_range: RateRange
    result: SizingResult


@dataclass(frozen=True)
class SweepReport:
    """
    Metrics of a scenario across its stable rate range.

    Attributes:
        scenario: Analyzed scenario
        rate_range: Stable range of request rates
        points: (request rate, metrics) pairs in increasing rate order
    """

    scenario: Scenario
    rate_range: RateRange
    points: list[tuple[float, AnalysisMetrics]] = field(default_factory=list)


class CapacityPlanner:
    """
    Capacity planner for inference server queues.

    Usage:
        planner = CapacityPlanner()
        scenario = load_scenario("server.yaml")
        report = planner.size(scenario)
        print(report.result.target_rate)
    """

    def __init__(self, builder: Optional[QueueModelBuilder] = None):
        """
        Initialize CapacityPlanner.

        Args:
            builder: Model builder (creates default if None)
        """
        self._builder = builder or QueueModelBuilder()
        self._logger = logging.getLogger(__name__)

    def build(self, scenario: Scenario) -> QueueAnalyzer:
        """Create a validated analyzer for a scenario."""
        return self._builder.create(scenario.configuration, scenario.request_size)

    def analyze(self, scenario: Scenario, request_rate: float) -> AnalysisReport:
        """
        Analyze a scenario at a request rate.

        Args:
            scenario: Scenario to analyze
            request_rate: Request rate (requests/sec)

        Returns:
            AnalysisReport
        """
        analyzer = self.build(scenario)
        metrics = analyzer.analyze(request_rate)
        return AnalysisReport(
            scenario=scenario,
            request_rate=request_rate,
            rate_range=analyzer.rate_range,
            metrics=metrics,
        )

    def size(self, scenario: Scenario, targets: Optional[TargetPerf] = None) -> SizingReport:
        """
        Size a scenario for performance targets.

        Args:
            scenario: Scenario to size
            targets: Targets overriding the scenario's own

        Returns:
            SizingReport
        """
        targets = targets if targets is not None else scenario.targets
        analyzer = self.build(scenario)

        self._logger.info(f"Sizing {scenario.name} for targets {targets}")
        result = analyzer.size(targets)

        return SizingReport(
            scenario=scenario,
            targets=targets,
            rate_range=analyzer.rate_range,
            result=result,
        )

    def sweep(self, scenario: Scenario, points: int = 10) -> SweepReport:
        """
        Analyze a scenario at evenly spaced rates across its stable range.

        Args:
            scenario: Scenario to analyze
            points: Number of rates, including both ends of the range

        Returns:
            SweepReport

        Raises:
            ValueError: If points < 2
        """
        if points < 2:
            raise ValueError(f"points must be >= 2, got {points}")

        analyzer = self.build(scenario)
        rate_range = analyzer.rate_range
        step = (rate_range.max - rate_range.min) / (points - 1)

        results = []
        for i in range(points):
            # last point is exactly the max rate, never above it
            rate = rate_range.max if i == points - 1 else rate_range.min + i * step
            results.append((rate, analyzer.analyze(rate)))

        self._logger.info(f"Swept {scenario.name} over {points} rates in {rate_range} req/s")
        return SweepReport(scenario=scenario, rate_range=rate_range, points=results)
