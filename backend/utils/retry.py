import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar, Any

logger = logging.getLogger(__name__)

T = TypeVar('T')

Sleep = Callable[[float], Awaitable[Any]]


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 3
    base_delay: float = 1.0

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay < 0:
            raise ValueError("base_delay cannot be negative")

    def delay_for(self, attempt: int) -> float:
        """Linear backoff: the wait after the n-th attempt is base_delay * n."""
        return self.base_delay * attempt


def _is_transient(result: Any) -> bool:
    return not getattr(result, "ok", True) and getattr(result, "retryable", False)


async def run_with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    sleep: Sleep = asyncio.sleep,
    name: str = "request",
) -> T:
    """
    Invoke `operation` until it yields a non-transient envelope or the
    policy's attempts are used up. The last envelope is returned as-is.
    """
    result = await operation()
    attempt = 1

    while _is_transient(result) and attempt < policy.max_attempts:
        delay = policy.delay_for(attempt)
        logger.warning(
            f"{name} failed with {result.kind.value} (attempt {attempt}/{policy.max_attempts}), "
            f"retrying in {delay:.2f}s: {result.message}"
        )
        await sleep(delay)
        result = await operation()
        attempt += 1

    if _is_transient(result):
        logger.error(
            f"{name} failed after {attempt} attempts: {result.message}"
        )

    return result

