"""Effective concurrency: inverting the token cost model."""

from queue_analyzer.domain import RequestSize, ServiceParams


def effective_concurrency(
    avg_service_time: float,
    service_params: ServiceParams,
    request_size: RequestSize,
    max_batch_size: int,
) -> float:
    """
    Calculate the effective number of requests in service.

    Finds the constant batch occupancy n that reproduces an observed average
    request service time under the token cost model:

        prefill_time(n) + total_decode_time(n) = avg_service_time
        prefill_time(n) = gamma + delta * in_tokens * n
        total_decode_time(n) = (alpha + beta * n) * (out_tokens - 1)

    Args:
        avg_service_time: Average request service time (msec)
        service_params: Prefill and decode parameters
        request_size: Average request token counts
        max_batch_size: Upper bound for the result

    Returns:
        Effective concurrency clamped to [0, max_batch_size]
    """
    prefill = service_params.prefill
    decode = service_params.decode
    tokens = request_size.decode_steps

    numerator = avg_service_time - (prefill.gamma + decode.alpha * tokens)
    denominator = prefill.delta * request_size.avg_input_tokens + decode.beta * tokens
    if denominator == 0:
        # Service time does not depend on concurrency
        return 0.0

    n = numerator / denominator
    return min(max(n, 0.0), float(max_batch_size))
