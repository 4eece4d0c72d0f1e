"""Default container constructor backed by testcontainers.

testcontainers talks to Docker synchronously, so every call is pushed onto
the loop's default executor and awaited.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from testcontainers.core.container import DockerContainer

from src.tckratos.models import ContainerRequest, port_number
from src.tckratos.ports import join_host_port
from src.tckratos.readiness import wait_until_ready

logger = logging.getLogger(__name__)

R = TypeVar("R")


class DockerRuntimeContainer:
    """Async adapter over a testcontainers ``DockerContainer``."""

    def __init__(self, container: DockerContainer) -> None:
        self.container = container

    async def _call(self, fn: Callable[..., R], *args: Any) -> R:
        """Run *fn* in the default executor.

        A worker thread cannot be interrupted, so when the caller is
        cancelled the call is still awaited to completion before
        ``CancelledError`` propagates. Cleanup that follows then sees the
        container in its final state.
        """
        loop = asyncio.get_running_loop()
        fut = loop.run_in_executor(None, functools.partial(fn, *args))
        try:
            return await asyncio.shield(fut)
        except asyncio.CancelledError:
            await asyncio.gather(fut, return_exceptions=True)
            raise

    async def start(self) -> None:
        await self._call(self.container.start)

    async def terminate(self) -> None:
        await self._call(self.container.stop)

    async def mapped_port(self, port: str) -> int:
        mapped = await self._call(self.container.get_exposed_port, port_number(port))
        return int(mapped)

    async def host(self) -> str:
        return await self._call(self.container.get_container_host_ip)


def build_docker_container(request: ContainerRequest) -> DockerContainer:
    """Translate a launch request into an unstarted ``DockerContainer``."""
    container = DockerContainer(request.image)
    for key, value in request.env.items():
        container.with_env(key, value)
    if request.command:
        container.with_command(request.command)
    container.with_exposed_ports(*(port_number(p) for p in request.exposed_ports))
    for port, binding in request.port_bindings.items():
        container.with_bind_ports(port_number(port), (binding.host_ip, binding.host_port))
    for f in request.files:
        # Docker bind mounts need absolute host paths
        container.with_volume_mapping(
            str(Path(f.host_path).resolve()), f.container_path, mode="ro"
        )
    return container


async def _stop_quietly(runtime: DockerRuntimeContainer) -> None:
    try:
        await runtime.terminate()
    except Exception:
        logger.exception("Failed to stop container that never became ready")


async def generic_container(request: ContainerRequest) -> DockerRuntimeContainer:
    """Create the container and, when ``request.started``, start it and wait
    for its readiness probe.

    A container that fails to start, fails its probe or is cancelled while
    starting is stopped before the error propagates, so callers never
    receive a half-ready container.
    """
    runtime = DockerRuntimeContainer(build_docker_container(request))
    if not request.started:
        return runtime

    logger.info("Starting container from %s", request.image)
    try:
        await runtime.start()
        host = await runtime.host()
        port = await runtime.mapped_port(request.readiness.port)
        await wait_until_ready(f"http://{join_host_port(host, port)}", request.readiness)
    except BaseException:
        await _stop_quietly(runtime)
        raise
    return runtime
