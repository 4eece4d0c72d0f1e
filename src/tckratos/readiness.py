"""HTTP readiness polling for a freshly started container."""

from __future__ import annotations

import asyncio
import logging
import time

import httpx

from src.shared.errors import ReadinessTimeoutError
from src.tckratos.models import ReadinessProbe

logger = logging.getLogger(__name__)


async def wait_until_ready(base_url: str, probe: ReadinessProbe) -> None:
    """Poll ``base_url + probe.path`` until it answers with ``probe.status``.

    Connection errors count as "not ready yet" until the deadline passes.

    Args:
        base_url: Scheme, host and mapped port, e.g. ``http://localhost:32768``.
        probe: Path, expected status, timeout and poll interval.

    Raises:
        ReadinessTimeoutError: If the probe does not succeed within
            ``probe.timeout_s``.
    """
    url = f"{base_url.rstrip('/')}{probe.path}"
    deadline = time.monotonic() + probe.timeout_s
    logger.info(
        "Waiting for %s (timeout=%ss, interval=%ss)",
        url,
        probe.timeout_s,
        probe.interval_s,
    )

    async with httpx.AsyncClient(timeout=5.0) as client:
        while time.monotonic() < deadline:
            try:
                resp = await client.get(url)
                if resp.status_code == probe.status:
                    logger.info("%s is ready", url)
                    return
                logger.debug("%s answered %d", url, resp.status_code)
            except httpx.HTTPError as exc:
                logger.debug("%s not reachable yet: %s", url, exc)

            await asyncio.sleep(probe.interval_s)

    raise ReadinessTimeoutError(url, probe.timeout_s)
