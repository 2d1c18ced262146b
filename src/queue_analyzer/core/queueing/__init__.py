"""Queueing models for inference server request queues."""

from queue_analyzer.core.queueing.state_dependent import (
    StateDependentQueue,
    StateDependentSolution,
)

__all__ = ["StateDependentQueue", "StateDependentSolution"]
