"""Kratos container lifecycle.

:func:`run` reserves host ports up front so Kratos can advertise the URLs it
is reachable on; :func:`run_dynamic` lets the runtime choose the host ports
and reads them back once the container is up. Both return a
:class:`KratosContainer` or raise a :class:`~src.shared.errors.HarnessError`.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Any, TypeVar

from src.shared.constants import ADVERTISED_HOST, KRATOS_ADMIN_PORT, KRATOS_PUBLIC_PORT
from src.shared.errors import ContainerQueryError, ContainerStartError, ContainerTerminateError
from src.tckratos.config import KratosConfig
from src.tckratos.models import ContainerRequest
from src.tckratos.ports import join_host_port, reserve_ports
from src.tckratos.protocols import RuntimeContainer
from src.tckratos.request import container_request

logger = logging.getLogger(__name__)

R = TypeVar("R")


@dataclass
class KratosContainer:
    """Handle on a running Kratos container.

    ``public_address`` and ``admin_address`` are ``host:port`` strings.
    """

    runtime: RuntimeContainer
    public_address: str
    admin_address: str

    def public_connection_string(self) -> str:
        return self.public_address

    def admin_connection_string(self) -> str:
        return self.admin_address

    @property
    def public_url(self) -> str:
        return f"http://{self.public_address}"

    @property
    def admin_url(self) -> str:
        return f"http://{self.admin_address}"

    async def terminate(self) -> None:
        """Stop the container.

        Raises:
            ContainerTerminateError: Wrapping whatever the runtime raised.
        """
        try:
            await self.runtime.terminate()
        except Exception as exc:
            raise ContainerTerminateError("failed to terminate kratos container") from exc
        logger.info("Kratos container at %s terminated", self.public_address)


def _configure(config: KratosConfig | None, options: dict[str, Any]) -> KratosConfig:
    cfg = dataclasses.replace(config or KratosConfig(), **options)
    cfg.validate()
    return cfg


async def _launch(cfg: KratosConfig, request: ContainerRequest) -> RuntimeContainer:
    logger.info("Launching %s", request.image)
    try:
        return await cfg.container_constructor(request)
    except Exception as exc:
        raise ContainerStartError("failed to start kratos") from exc


async def run(config: KratosConfig | None = None, **options: Any) -> KratosContainer:
    """Start Kratos on two pre-reserved loopback ports.

    Args:
        config: Base configuration; defaults to ``KratosConfig()``.
        **options: Field overrides applied on top of *config*
            (``kratos_config``, ``user_schema_path``, ``image``,
            ``container_constructor``, ``admin_listener_constructor``,
            ``front_listener_constructor``).

    Returns:
        Handle whose connection strings point at the reserved ports.

    Raises:
        ConfigNotFoundError: No Kratos config path.
        UserSchemaNotFoundError: No identity schema path.
        PortReservationError: A port could not be reserved.
        ContainerStartError: The constructor failed, including readiness timeouts.
    """
    cfg = _configure(config, options)

    admin_port, public_port = reserve_ports(
        cfg.admin_listener_constructor, cfg.front_listener_constructor
    )
    request = container_request(cfg, public_port=public_port, admin_port=admin_port)
    runtime = await _launch(cfg, request)

    container = KratosContainer(
        runtime=runtime,
        public_address=join_host_port(ADVERTISED_HOST, public_port),
        admin_address=join_host_port(ADVERTISED_HOST, admin_port),
    )
    logger.info(
        "Kratos ready: public=%s admin=%s",
        container.public_address,
        container.admin_address,
    )
    return container


async def _query(awaitable: Awaitable[R], what: str) -> R:
    try:
        return await awaitable
    except Exception as exc:
        raise ContainerQueryError(what) from exc


async def run_dynamic(config: KratosConfig | None = None, **options: Any) -> KratosContainer:
    """Start Kratos on runtime-assigned ports and read them back.

    Takes the same options as :func:`run`; the listener constructors are
    ignored. Kratos is not told its external base URLs in this mode.

    Raises:
        ConfigNotFoundError: No Kratos config path.
        UserSchemaNotFoundError: No identity schema path.
        ContainerStartError: The constructor failed.
        ContainerQueryError: A mapped port or the host could not be read;
            the container is stopped before this propagates.
    """
    cfg = _configure(config, options)
    runtime = await _launch(cfg, container_request(cfg))

    try:
        public_port = await _query(runtime.mapped_port(KRATOS_PUBLIC_PORT), "public port")
        admin_port = await _query(runtime.mapped_port(KRATOS_ADMIN_PORT), "admin port")
        host = await _query(runtime.host(), "host")
    except ContainerQueryError:
        try:
            await runtime.terminate()
        except Exception:
            logger.exception("Failed to stop kratos container after query failure")
        raise

    container = KratosContainer(
        runtime=runtime,
        public_address=join_host_port(host, public_port),
        admin_address=join_host_port(host, admin_port),
    )
    logger.info(
        "Kratos ready: public=%s admin=%s",
        container.public_address,
        container.admin_address,
    )
    return container
