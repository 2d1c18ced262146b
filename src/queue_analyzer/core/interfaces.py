"""
Protocol interfaces for core components.

Using Protocol (PEP 544) for structural subtyping, allowing flexible
implementations without forcing inheritance.
"""

from typing import Callable, Protocol, runtime_checkable

# Scalar function evaluated by the root finder; may raise to abort the search
EvalFunction = Callable[[float], float]


@runtime_checkable
class QueueSolution(Protocol):
    """
    Protocol for the steady-state solution of a queueing model.

    All values use the model's internal unit system: rates per millisecond,
    times in milliseconds.
    """

    @property
    def is_valid(self) -> bool:
        """Whether the solve produced a finite, usable solution."""
        ...

    @property
    def avg_num_in_service(self) -> float:
        """Average number of requests in service."""
        ...

    @property
    def avg_service_time(self) -> float:
        """Average service time of a completed request."""
        ...

    @property
    def throughput(self) -> float:
        """Rate of completed (admitted) requests."""
        ...

    @property
    def avg_response_time(self) -> float:
        """Average time in system (wait + service)."""
        ...

    @property
    def avg_wait_time(self) -> float:
        """Average time spent queued before service."""
        ...


@runtime_checkable
class QueueModel(Protocol):
    """
    Protocol for a queueing model parameterized by arrival rate.

    Implementations must not mutate shared state in solve(); every call
    returns an independent solution snapshot.
    """

    def solve(self, arrival_rate: float, service_scale: float = 1.0) -> QueueSolution:
        """
        Solve the model at a given arrival rate.

        Args:
            arrival_rate: Request arrival rate (per msec)
            service_scale: Multiplier applied to every service rate

        Returns:
            Steady-state solution
        """
        ...
