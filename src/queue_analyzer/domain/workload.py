"""Workload profile: average request size in tokens."""

from dataclasses import dataclass

from queue_analyzer.domain.exceptions import InvalidWorkloadError


@dataclass(frozen=True)
class RequestSize:
    """
    Average number of input and output tokens per request.

    Attributes:
        avg_input_tokens: Average input (prompt) tokens per request (>= 0)
        avg_output_tokens: Average generated tokens per request (>= 1)
    """

    avg_input_tokens: int
    avg_output_tokens: int

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.check()

    def check(self) -> None:
        """
        Validate request size.

        Raises:
            InvalidWorkloadError: If input tokens are negative or no output
                token is generated
        """
        if self.avg_input_tokens < 0 or self.avg_output_tokens < 1:
            raise InvalidWorkloadError(f"invalid request size {self}")

    @property
    def decode_steps(self) -> int:
        """Number of decode steps after the first token (output tokens - 1)."""
        return self.avg_output_tokens - 1

    def __str__(self) -> str:
        return f"{{inTokens={self.avg_input_tokens}, outTokens={self.avg_output_tokens}}}"
