"""Root finding for monotonic performance functions."""

from queue_analyzer.core.search.bisection import (
    MAX_ITERATIONS,
    TOLERANCE,
    SearchResult,
    binary_search,
)

__all__ = ["MAX_ITERATIONS", "TOLERANCE", "SearchResult", "binary_search"]
