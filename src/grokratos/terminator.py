"""Background teardown tied to a suite's cancellation."""

from __future__ import annotations

import asyncio
import logging

from src.grokratos.protocols import TerminateFunc
from src.shared.context import SuiteContext, increment_outstanding
from src.shared.logging import suite_id_var

logger = logging.getLogger(__name__)


async def terminator(ctx: SuiteContext, terminate: TerminateFunc) -> None:
    """Wait for *ctx* to be cancelled, then call *terminate*.

    A failed terminate is logged and kept in ``ctx.errors`` since nobody
    awaits this task's result.
    """
    suite_id_var.set(ctx.suite_id)
    await ctx.done()
    logger.info("Suite %s finished; terminating kratos container", ctx.suite_id)
    try:
        await terminate()
    except Exception as exc:
        logger.exception("Kratos teardown failed for suite %s", ctx.suite_id)
        ctx.record_error(exc)


def spawn_terminator(ctx: SuiteContext, terminate: TerminateFunc) -> asyncio.Task[None]:
    """Count one outstanding teardown on *ctx* and run :func:`terminator`.

    The count is released from the task's done callback, so it drops even
    when the task is cancelled before it first runs.
    """
    increment_outstanding(ctx)
    task = ctx.spawn(terminator(ctx, terminate), name=f"kratos-terminator-{ctx.suite_id}")
    task.add_done_callback(lambda _: ctx.release())
    return task
