"""Builds the launch request for a Kratos container."""

from __future__ import annotations

from src.shared.constants import (
    ADVERTISED_HOST,
    KRATOS_ADMIN_PORT,
    KRATOS_CONFIG_CONTAINER_PATH,
    KRATOS_DSN,
    KRATOS_LOG_FORMAT,
    KRATOS_LOG_LEVEL,
    KRATOS_PUBLIC_PORT,
    LOOPBACK_HOST,
    USER_SCHEMA_CONTAINER_PATH,
)
from src.tckratos.config import KratosConfig
from src.tckratos.models import ContainerFile, ContainerRequest, PortBinding, ReadinessProbe


def container_request(
    cfg: KratosConfig,
    public_port: int | None = None,
    admin_port: int | None = None,
) -> ContainerRequest:
    """Map *cfg* and the reserved host ports onto a launch request.

    With both ports given, Kratos is told its externally reachable base URLs
    and the ports are bound explicitly on the loopback interface. Without
    them the runtime picks the host ports and Kratos keeps its defaults.
    """
    env = {
        "LOG_LEVEL": KRATOS_LOG_LEVEL,
        "LOG_FORMAT": KRATOS_LOG_FORMAT,
        "DSN": KRATOS_DSN,
    }
    bindings: dict[str, PortBinding] = {}
    if public_port is not None and admin_port is not None:
        env["SERVE_PUBLIC_BASE_URL"] = f"http://{ADVERTISED_HOST}:{public_port}/"
        env["SERVE_ADMIN_BASE_URL"] = f"http://{ADVERTISED_HOST}:{admin_port}/"
        bindings = {
            KRATOS_PUBLIC_PORT: PortBinding(host_ip=LOOPBACK_HOST, host_port=public_port),
            KRATOS_ADMIN_PORT: PortBinding(host_ip=LOOPBACK_HOST, host_port=admin_port),
        }

    return ContainerRequest(
        image=cfg.image,
        exposed_ports=[KRATOS_PUBLIC_PORT, KRATOS_ADMIN_PORT],
        command=["serve", "-c", KRATOS_CONFIG_CONTAINER_PATH, "--dev"],
        env=env,
        files=[
            ContainerFile(
                host_path=str(cfg.kratos_config),
                container_path=KRATOS_CONFIG_CONTAINER_PATH,
            ),
            ContainerFile(
                host_path=str(cfg.user_schema_path),
                container_path=USER_SCHEMA_CONTAINER_PATH,
            ),
        ],
        port_bindings=bindings,
        readiness=ReadinessProbe(port=KRATOS_PUBLIC_PORT),
        started=True,
    )
