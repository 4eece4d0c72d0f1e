"""Local port reservation for explicit host-port bindings."""

from __future__ import annotations

import logging
import socket

from src.shared.constants import LOOPBACK_HOST
from src.shared.errors import PortReservationError
from src.tckratos.protocols import ListenerConstructor

logger = logging.getLogger(__name__)


def join_host_port(host: str, port: int) -> str:
    """Combine *host* and *port* into ``host:port``, bracketing IPv6 hosts."""
    if ":" in host and not host.startswith("["):
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def _listen(listener: ListenerConstructor, role: str, host: str) -> socket.socket:
    try:
        return listener((host, 0))
    except Exception as exc:
        raise PortReservationError(role) from exc


def reserve_ports(
    admin_listener: ListenerConstructor = socket.create_server,
    front_listener: ListenerConstructor = socket.create_server,
    host: str = LOOPBACK_HOST,
) -> tuple[int, int]:
    """Reserve an admin and a public port on *host* and release them again.

    Both listeners are open at the same time, so the two ports differ. They
    are closed before returning; another process may grab either port before
    the container binds it, and callers retry the whole launch if it does.

    Args:
        admin_listener: Opens the admin listener for an ``(host, port)`` pair.
        front_listener: Opens the public listener.
        host: Interface to bind.

    Returns:
        ``(admin_port, public_port)``.

    Raises:
        PortReservationError: If either listener cannot be opened.
    """
    admin_ln = _listen(admin_listener, "admin", host)
    try:
        front_ln = _listen(front_listener, "public", host)
        try:
            admin_port = admin_ln.getsockname()[1]
            public_port = front_ln.getsockname()[1]
        finally:
            front_ln.close()
    finally:
        admin_ln.close()

    logger.debug("Reserved admin port %d and public port %d", admin_port, public_port)
    return admin_port, public_port
