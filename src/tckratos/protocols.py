"""Runtime-checkable protocols for the container runtime seam."""

from __future__ import annotations

import socket
from collections.abc import Awaitable, Callable
from typing import Protocol, runtime_checkable

from src.tckratos.models import ContainerRequest


@runtime_checkable
class RuntimeContainer(Protocol):
    """A started container as seen by the lifecycle manager."""

    async def terminate(self) -> None:
        """Stop and remove the container."""
        ...

    async def mapped_port(self, port: str) -> int:
        """Return the host port mapped to a ``"4433/tcp"`` style container port."""
        ...

    async def host(self) -> str:
        """Return the host on which mapped ports are reachable."""
        ...


ContainerConstructor = Callable[[ContainerRequest], Awaitable[RuntimeContainer]]

ListenerConstructor = Callable[[tuple[str, int]], socket.socket]
