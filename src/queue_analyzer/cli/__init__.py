"""
Command-line interface for queue-analyzer.

Provides commands to analyze, size and sweep inference server queues.
"""

from queue_analyzer.cli.main import main

__all__ = ["main"]
