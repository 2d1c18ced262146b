"""
Queue analysis for LLM inference servers.

Provides:
- Service-rate model building from prefill/decode cost formulas
- Steady-state metric evaluation at a request rate
- Target-driven sizing of the maximum request rate
"""

from queue_analyzer.core.analysis.analyzer import QueueAnalyzer
from queue_analyzer.core.analysis.builder import (
    QueueModelBuilder,
    build_model,
    create_analyzer,
)
from queue_analyzer.core.analysis.concurrency import effective_concurrency
from queue_analyzer.core.analysis.constants import (
    EPSILON,
    RATE_SCALE,
    STABILITY_SAFETY_FRACTION,
)
from queue_analyzer.core.analysis.evaluation import PerformanceEvaluator
from queue_analyzer.core.analysis.sizing import SizingResult

__all__ = [
    "QueueAnalyzer",
    "QueueModelBuilder",
    "build_model",
    "create_analyzer",
    "effective_concurrency",
    "PerformanceEvaluator",
    "SizingResult",
    "EPSILON",
    "RATE_SCALE",
    "STABILITY_SAFETY_FRACTION",
]
