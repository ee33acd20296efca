"""
Pacing for external embedding calls.

A fixed-delay rate limiter over an injectable clock. The clock abstraction
lets tests drive pacing and backoff without real sleeps.

Dependencies: asyncio, time
System role: Rate-limit compliance for the embedding batch manager
"""

import asyncio
import logging
import time
from typing import Protocol

logger = logging.getLogger(__name__)


class Clock(Protocol):
    """Time source with an awaitable sleep."""

    def monotonic(self) -> float: ...

    async def sleep(self, seconds: float) -> None: ...


class SystemClock:
    """Wall clock backed by time.monotonic and asyncio.sleep."""

    def monotonic(self) -> float:
        return time.monotonic()

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)


class FixedDelayRateLimiter:
    """
    Static pacing policy: a fixed pause after every item and after every batch.

    Not adaptive. Explicit rate-limit errors are handled separately by
    backoff in the batch manager, which sleeps through the same clock.
    """

    def __init__(
        self,
        item_delay: float = 2.0,
        batch_delay: float = 5.0,
        clock: Clock | None = None,
    ) -> None:
        """
        Initialize rate limiter.

        Args:
            item_delay: Seconds to pause after each embedding call
            batch_delay: Seconds to pause after each batch
            clock: Time source (SystemClock if None)

        Raises:
            ValueError: When a delay is negative
        """
        if item_delay < 0 or batch_delay < 0:
            raise ValueError("Delays must be non-negative")
        self._item_delay = item_delay
        self._batch_delay = batch_delay
        self._clock = clock or SystemClock()

    @property
    def clock(self) -> Clock:
        return self._clock

    async def after_item(self) -> None:
        """Pause after a chunk-level embedding call."""
        if self._item_delay > 0:
            await self._clock.sleep(self._item_delay)

    async def after_batch(self) -> None:
        """Pause after a batch of documents."""
        if self._batch_delay > 0:
            logger.debug(f"{__name__}:after_batch - Sleeping {self._batch_delay}s")
            await self._clock.sleep(self._batch_delay)
