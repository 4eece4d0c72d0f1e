"""Protocols the suite bootstrap depends on."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class KratosContainerLike(Protocol):
    """What the bootstrap needs from a running Kratos container."""

    def public_connection_string(self) -> str:
        ...

    def admin_connection_string(self) -> str:
        ...

    @property
    def public_url(self) -> str:
        ...

    @property
    def admin_url(self) -> str:
        ...

    async def terminate(self) -> None:
        ...


# Called with ``kratos_config``, ``user_schema_path`` and ``image`` keywords.
ContainerRunner = Callable[..., Awaitable[KratosContainerLike]]

TerminateFunc = Callable[[], Awaitable[Any]]
