"""
Application layer - Capacity planning interface.

Provides high-level API for scenario-based analysis:
- Scenario - Configuration, workload and targets loaded from YAML/JSON
- CapacityPlanner - Analyze, size and sweep scenarios
- Export utilities - JSON, YAML, Markdown
"""

from queue_analyzer.application.scenario import Scenario, load_scenario, scenario_from_dict
from queue_analyzer.application.planner import (
    AnalysisReport,
    CapacityPlanner,
    SizingReport,
    SweepReport,
)
from queue_analyzer.application import export

__all__ = [
    "Scenario",
    "load_scenario",
    "scenario_from_dict",
    "CapacityPlanner",
    "AnalysisReport",
    "SizingReport",
    "SweepReport",
    "export",
]
