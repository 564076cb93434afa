"""
Bounded-attempt retry with a fixed delay between attempts.

No backoff growth, no jitter, no classification of retryable errors:
every exception raised by the operation is retried until attempts run out.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[None]]


class RetryPolicy(BaseModel):
    """Attempt budget and constant inter-attempt delay."""

    model_config = ConfigDict(frozen=True)

    max_attempts: int = Field(default=3, ge=1, description="Total attempts, 1 = no retry")
    delay_ms: int = Field(default=1000, ge=0, description="Wait between attempts")


class RetryExecutor:
    """
    Re-invokes an async operation until it succeeds or attempts run out.

    The sleep function is injectable so tests can simulate elapsed time.

    Usage:
        executor = RetryExecutor()
        data = await executor.execute(lambda: client.get("/users"), 3, 1000)
    """

    def __init__(self, sleep: Optional[Sleep] = None) -> None:
        self._sleep = sleep or asyncio.sleep

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        max_attempts: int,
        delay_ms: int,
    ) -> T:
        """
        Run operation up to max_attempts times.

        Args:
            operation: Zero-argument callable returning an awaitable
            max_attempts: Total attempts (>= 1)
            delay_ms: Delay between a failed attempt and the next one

        Returns:
            Result of the first successful attempt

        Raises:
            The exception from the final attempt once all attempts fail
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")

        attempt = 1
        while True:
            try:
                return await operation()
            except Exception as e:
                if attempt >= max_attempts:
                    logger.error(f"All {max_attempts} retry attempts failed. error={e}")
                    raise
                logger.warning(
                    f"Retry attempt {attempt}/{max_attempts} failed. "
                    f"Retrying in {delay_ms}ms... error={e}"
                )
            await self._sleep(delay_ms / 1000)
            attempt += 1

    async def run(self, operation: Callable[[], Awaitable[T]], policy: RetryPolicy) -> T:
        """Execute operation with the attempts and delay from policy."""
        return await self.execute(operation, policy.max_attempts, policy.delay_ms)
