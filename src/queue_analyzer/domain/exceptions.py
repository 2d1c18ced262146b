"""Domain-specific exceptions."""


class QueueAnalyzerError(Exception):
    """Base exception for queue-analyzer."""

    pass


class InvalidConfigError(QueueAnalyzerError):
    """Raised when the server queue configuration is invalid."""

    pass


class InvalidWorkloadError(QueueAnalyzerError):
    """Raised when the request size (workload profile) is invalid."""

    pass


class InvalidTargetError(QueueAnalyzerError):
    """Raised when performance target values are invalid."""

    pass


class InvalidRateError(QueueAnalyzerError):
    """Raised when a request rate is not positive."""

    pass


class RateOutOfRangeError(QueueAnalyzerError):
    """Raised when a request rate exceeds the stable operating range."""

    pass


class ModelDivergenceError(QueueAnalyzerError):
    """Raised when the queueing model does not yield a valid solution."""

    pass


class TargetUnreachableError(QueueAnalyzerError):
    """Raised when a target cannot be met even at the lowest request rate."""

    pass
