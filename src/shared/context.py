"""Suite context: cancellation signal, deadline and outstanding-teardown group.

A :class:`SuiteContext` lives for one test-suite run. The runner creates it
before bootstrapping, cancels it once every test case has finished, and then
awaits :meth:`SuiteContext.wait_outstanding` so background teardowns can
complete before the event loop closes::

    ctx = SuiteContext(timeout=300)
    injector = await bootstrap(ctx)
    ...
    ctx.cancel()
    await ctx.wait_outstanding()

All methods must be called from the event loop that owns the context.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from collections.abc import Coroutine
from typing import Any

logger = logging.getLogger(__name__)


class SuiteContext:
    """Cancellable context shared by a suite's bootstrap and teardown."""

    def __init__(self, suite_id: str | None = None, timeout: float | None = None) -> None:
        self.suite_id = suite_id or uuid.uuid4().hex[:12]
        self._deadline = time.monotonic() + timeout if timeout is not None else None
        self._cancelled = asyncio.Event()
        self._idle = asyncio.Event()
        self._idle.set()
        self._outstanding = 0
        self._tasks: set[asyncio.Task[Any]] = set()
        self._errors: list[BaseException] = []

    @property
    def cancelled(self) -> bool:
        """Whether :meth:`cancel` has been called."""
        return self._cancelled.is_set()

    @property
    def outstanding(self) -> int:
        """Number of background teardowns not yet finished."""
        return self._outstanding

    @property
    def errors(self) -> list[BaseException]:
        """Failures recorded by background teardowns."""
        return list(self._errors)

    def record_error(self, exc: BaseException) -> None:
        self._errors.append(exc)

    def cancel(self) -> None:
        """Signal cancellation. Never blocks."""
        if not self._cancelled.is_set():
            logger.debug("Suite %s cancelled", self.suite_id)
        self._cancelled.set()

    async def done(self) -> None:
        """Wait until the context is cancelled."""
        await self._cancelled.wait()

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None when there is none."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def increment(self) -> None:
        self._outstanding += 1
        self._idle.clear()

    def release(self) -> None:
        if self._outstanding == 0:
            raise RuntimeError(
                f"Suite {self.suite_id}: release without a matching increment"
            )
        self._outstanding -= 1
        if self._outstanding == 0:
            self._idle.set()

    async def wait_outstanding(self, timeout: float | None = None) -> None:
        """Wait until every incremented teardown has been released.

        Raises:
            TimeoutError: If *timeout* elapses first.
        """
        async with asyncio.timeout(timeout):
            await self._idle.wait()

    def spawn(self, coro: Coroutine[Any, Any, Any], name: str | None = None) -> asyncio.Task[Any]:
        """Start *coro* as a background task owned by this context."""
        task = asyncio.get_running_loop().create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task


def increment_outstanding(ctx: SuiteContext) -> None:
    """Record one more background teardown the runner has to wait for."""
    ctx.increment()
