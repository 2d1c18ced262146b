"""Request processing (service time) parameters."""

from dataclasses import dataclass
from typing import Optional

from queue_analyzer.domain.exceptions import InvalidConfigError


@dataclass(frozen=True)
class PrefillParams:
    """
    Prefill stage cost model.

    prefill time = gamma + delta * input_tokens * batch_size (msec)

    Attributes:
        gamma: Base prefill time (msec)
        delta: Slope per input token per concurrent request (msec)
    """

    gamma: float
    delta: float

    def prefill_time(self, input_tokens: int, batch_size: float) -> float:
        """
        Prefill time of a request at a given batch occupancy.

        Args:
            input_tokens: Number of input tokens
            batch_size: Number of requests concurrently in service

        Returns:
            Prefill time in milliseconds (0 if there are no input tokens)
        """
        if input_tokens == 0:
            return 0.0
        return self.gamma + self.delta * input_tokens * batch_size

    def __str__(self) -> str:
        return f"{{gamma={self.gamma:.3f}, delta={self.delta:.5f}}}"


@dataclass(frozen=True)
class DecodeParams:
    """
    Decode stage cost model.

    decode time = alpha + beta * batch_size (msec per generated token)

    Attributes:
        alpha: Base decode step time (msec)
        beta: Slope per concurrent request (msec)
    """

    alpha: float
    beta: float

    def decode_time(self, batch_size: float) -> float:
        """Time to generate one token at a given batch occupancy (msec)."""
        return self.alpha + self.beta * batch_size

    def __str__(self) -> str:
        return f"{{alpha={self.alpha:.3f}, beta={self.beta:.5f}}}"


@dataclass(frozen=True)
class ServiceParams:
    """
    Request processing parameters for the prefill and decode stages.

    Attributes:
        prefill: Parameters to calculate prefill time
        decode: Parameters to calculate decode time
    """

    prefill: Optional[PrefillParams]
    decode: Optional[DecodeParams]

    def check(self) -> None:
        """
        Validate that both stages are present.

        Raises:
            InvalidConfigError: If prefill or decode parameters are missing
        """
        if self.prefill is None or self.decode is None:
            raise InvalidConfigError(f"invalid service parameters {self}")

    def __str__(self) -> str:
        return f"{{prefillParams={self.prefill}, decodeParams={self.decode}}}"
