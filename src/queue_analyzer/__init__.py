"""
queue-analyzer: Queue capacity planner for LLM inference servers.

This package builds a state-dependent queueing model of a batching
inference server from prefill/decode cost parameters, evaluates its
steady-state performance, and sizes the maximum request rate that meets
latency and throughput targets.
"""

from queue_analyzer.version import __version__
from queue_analyzer.core.analysis import (
    QueueAnalyzer,
    QueueModelBuilder,
    SizingResult,
    build_model,
    create_analyzer,
)
from queue_analyzer.domain import (
    AnalysisMetrics,
    Configuration,
    DecodeParams,
    PrefillParams,
    RateRange,
    RequestSize,
    ServiceParams,
    TargetPerf,
    TargetRate,
)

__all__ = [
    "__version__",
    "QueueAnalyzer",
    "QueueModelBuilder",
    "SizingResult",
    "build_model",
    "create_analyzer",
    "AnalysisMetrics",
    "Configuration",
    "DecodeParams",
    "PrefillParams",
    "RateRange",
    "RequestSize",
    "ServiceParams",
    "TargetPerf",
    "TargetRate",
]
