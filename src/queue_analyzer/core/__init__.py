"""Core business logic and interfaces."""

from queue_analyzer.core.interfaces import QueueModel, QueueSolution
from queue_analyzer.core.queueing import StateDependentQueue, StateDependentSolution
from queue_analyzer.core.search import SearchResult, binary_search
from queue_analyzer.core.analysis import (
    QueueAnalyzer,
    QueueModelBuilder,
    SizingResult,
    build_model,
    create_analyzer,
)

__all__ = [
    "QueueModel",
    "QueueSolution",
    "StateDependentQueue",
    "StateDependentSolution",
    "SearchResult",
    "binary_search",
    "QueueAnalyzer",
    "QueueModelBuilder",
    "SizingResult",
    "build_model",
    "create_analyzer",
]
