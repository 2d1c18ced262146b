"""Domain models following Domain-Driven Design principles."""

from queue_analyzer.domain.exceptions import (
    InvalidConfigError,
    InvalidRateError,
    InvalidTargetError,
    InvalidWorkloadError,
    ModelDivergenceError,
    QueueAnalyzerError,
    RateOutOfRangeError,
    TargetUnreachableError,
)
from queue_analyzer.domain.service import DecodeParams, PrefillParams, ServiceParams
from queue_analyzer.domain.workload import RequestSize
from queue_analyzer.domain.configuration import Configuration
from queue_analyzer.domain.targets import TargetPerf, TargetRate
from queue_analyzer.domain.metrics import AnalysisMetrics, RateRange

__all__ = [
    "QueueAnalyzerError",
    "InvalidConfigError",
    "InvalidWorkloadError",
    "InvalidTargetError",
    "InvalidRateError",
    "RateOutOfRangeError",
    "ModelDivergenceError",
    "TargetUnreachableError",
    "PrefillParams",
    "DecodeParams",
    "ServiceParams",
    "RequestSize",
    "Configuration",
    "TargetPerf",
    "TargetRate",
    "AnalysisMetrics",
    "RateRange",
]
