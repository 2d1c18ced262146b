"""
State-dependent M/M/1/K queueing model.

A finite birth-death process where the departure rate depends on the
number of requests in the system. Used to model a batching inference server:
with n requests in the system, min(n, B) of them are in service and the
server completes requests at rate mu(n), the batch-level throughput at that
occupancy.

Balance equations (arrival rate lambda, blocked when the system is full):
    p[n] = p[n-1] * lambda / mu(n),  n = 1..K
    sum(p) = 1
"""

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from queue_analyzer.domain.exceptions import InvalidConfigError

# Unnormalized probabilities are rescaled past this magnitude
_RESCALE_THRESHOLD = 1e150


@dataclass(frozen=True)
class StateDependentSolution:
    """
    Steady-state solution of a StateDependentQueue at one arrival rate.

    Attributes:
        arrival_rate: Offered arrival rate (per msec)
        probabilities: Probability of each occupancy state 0..K
        is_valid: Whether the solution is finite and usable
        throughput: Rate of admitted (completed) requests (per msec)
        avg_num_in_system: Average number of requests in the system
        avg_num_in_service: Average number of requests in service
        avg_queue_length: Average number of requests waiting
        avg_response_time: Average time in system (msec)
        avg_wait_time: Average waiting time (msec)
        avg_service_time: Average service time (msec)
    """

    arrival_rate: float
    probabilities: tuple[float, ...]
    is_valid: bool
    throughput: float
    avg_num_in_system: float
    avg_num_in_service: float
    avg_queue_length: float
    avg_response_time: float
    avg_wait_time: float
    avg_service_time: float

    @property
    def blocking_probability(self) -> float:
        """Probability that an arriving request finds the system full."""
        return self.probabilities[-1] if self.probabilities else 0.0

    def __str__(self) -> str:
        return (
            f"{{lambda={self.arrival_rate:.6f}, valid={self.is_valid}, "
            f"tput={self.throughput:.6f}, L={self.avg_num_in_system:.3f}, "
            f"Ls={self.avg_num_in_service:.3f}, Lq={self.avg_queue_length:.3f}, "
            f"T={self.avg_response_time:.3f}, W={self.avg_wait_time:.3f}, "
            f"S={self.avg_service_time:.3f}}}"
        )


class StateDependentQueue:
    """
    Finite-capacity queue with occupancy-dependent service rate.

    Attributes:
        occupancy_upper_bound: Maximum number of requests in the system (K)
        service_rates: Service rate at occupancy 1..B (per msec); occupancies
            above B reuse the rate at B
    """

    def __init__(self, occupancy_upper_bound: int, service_rates: Sequence[float]):
        """
        Initialize StateDependentQueue.

        Args:
            occupancy_upper_bound: Maximum number of requests in the system
            service_rates: Service rate per occupancy 1..B, B <= K

        Raises:
            InvalidConfigError: If the profile is empty, has non-positive
                rates, or exceeds the occupancy bound
        """
        rates = tuple(float(rate) for rate in service_rates)
        if not rates:
            raise InvalidConfigError("service rate profile must not be empty")
        if occupancy_upper_bound < len(rates):
            raise InvalidConfigError(
                f"occupancy_upper_bound ({occupancy_upper_bound}) must be >= "
                f"number of service rates ({len(rates)})"
            )
        if any(not rate > 0 or not math.isfinite(rate) for rate in rates):
            raise InvalidConfigError(f"service rates must be positive and finite, got {rates}")

        self._occupancy_upper_bound = occupancy_upper_bound
        self._service_rates = rates
        self._logger = logging.getLogger(__name__)

    @property
    def occupancy_upper_bound(self) -> int:
        """Maximum number of requests in the system."""
        return self._occupancy_upper_bound

    @property
    def service_rates(self) -> tuple[float, ...]:
        """Service rate profile for occupancy 1..B."""
        return self._service_rates

    @property
    def num_servers(self) -> int:
        """Maximum number of requests concurrently in service (B)."""
        return len(self._service_rates)

    def service_rate(self, occupancy: int) -> float:
        """
        Departure rate with a given number of requests in the system.

        Args:
            occupancy: Number of requests in the system (>= 1)

        Returns:
            Service rate (per msec)
        """
        if occupancy < 1:
            raise ValueError(f"occupancy must be >= 1, got {occupancy}")
        return self._service_rates[min(occupancy, self.num_servers) - 1]

    def solve(self, arrival_rate: float, service_scale: float = 1.0) -> StateDependentSolution:
        """
        Solve the balance equations at a given arrival rate.

        Each call returns a fresh solution; the model itself is never
        modified, so one instance may be shared between threads.

        Args:
            arrival_rate: Request arrival rate (per msec)
            service_scale: Multiplier applied to every service rate

        Returns:
            StateDependentSolution (check is_valid before use)
        """
        if not arrival_rate > 0 or not service_scale > 0:
            return self._invalid(arrival_rate)

        k = self._occupancy_upper_bound
        weights = [1.0]
        for n in range(1, k + 1):
            weight = weights[-1] * arrival_rate / (self.service_rate(n) * service_scale)
            if weight > _RESCALE_THRESHOLD:
                weights = [w / weight for w in weights]
                weight = 1.0
            weights.append(weight)

        total = math.fsum(weights)
        if not math.isfinite(total) or total <= 0:
            return self._invalid(arrival_rate)
        probabilities = tuple(w / total for w in weights)

        servers = self.num_servers
        avg_num_in_system = math.fsum(n * p for n, p in enumerate(probabilities))
        avg_num_in_service = math.fsum(min(n, servers) * p for n, p in enumerate(probabilities))
        avg_queue_length = max(avg_num_in_system - avg_num_in_service, 0.0)
        throughput = arrival_rate * (1.0 - probabilities[-1])

        if not throughput > 0:
            return self._invalid(arrival_rate)

        # Little's law on the system, the queue and the servers
        solution = StateDependentSolution(
            arrival_rate=arrival_rate,
            probabilities=probabilities,
            is_valid=True,
            throughput=throughput,
            avg_num_in_system=avg_num_in_system,
            avg_num_in_service=avg_num_in_service,
            avg_queue_length=avg_queue_length,
            avg_response_time=avg_num_in_system / throughput,
            avg_wait_time=avg_queue_length / throughput,
            avg_service_time=avg_num_in_service / throughput,
        )

        values = (
            solution.avg_num_in_system,
            solution.avg_response_time,
            solution.avg_wait_time,
            solution.avg_service_time,
        )
        if not all(math.isfinite(v) for v in values):
            return self._invalid(arrival_rate)

        self._logger.debug(f"Solved queue at lambda={arrival_rate:.6f}/ms: {solution}")
        return solution

    def _invalid(self, arrival_rate: float) -> StateDependentSolution:
        nan = float("nan")
        self._logger.debug(f"No valid solution at lambda={arrival_rate}")
        return StateDependentSolution(
            arrival_rate=arrival_rate,
            probabilities=(),
            is_valid=False,
            throughput=nan,
            avg_num_in_system=nan,
            avg_num_in_service=nan,
            avg_queue_length=nan,
            avg_response_time=nan,
            avg_wait_time=nan,
            avg_service_time=nan,
        )

    def __str__(self) -> str:
        rates = ", ".join(f"{rate:.6f}" for rate in self._service_rates)
        return f"{{K={self._occupancy_upper_bound}, mu=[{rates}]}}"

    def __repr__(self) -> str:
        return (
            f"StateDependentQueue(occupancy_upper_bound={self._occupancy_upper_bound}, "
            f"servers={self.num_servers})"
        )
