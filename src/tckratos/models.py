"""Pydantic v2 models describing a Kratos container launch."""
from __future__ import annotations

from pydantic import BaseModel, Field

from src.shared.constants import (
    KRATOS_PUBLIC_PORT,
    LOOPBACK_HOST,
    READ_ONLY_FILE_MODE,
    READINESS_PATH,
    READINESS_POLL_INTERVAL_S,
    READINESS_STATUS,
    READINESS_TIMEOUT_S,
)


def port_number(port: str) -> int:
    """Return the numeric part of a ``"4433/tcp"`` style port string."""
    return int(port.split("/", 1)[0])


class ContainerFile(BaseModel):
    """A host file mounted into the container."""
    host_path: str = Field(min_length=1)
    container_path: str = Field(min_length=1)
    mode: int = READ_ONLY_FILE_MODE

    model_config = {"frozen": True}


class PortBinding(BaseModel):
    """Explicit host side of a container port mapping."""
    host_ip: str = LOOPBACK_HOST
    host_port: int = Field(gt=0, lt=65536)

    model_config = {"frozen": True}


class ReadinessProbe(BaseModel):
    """HTTP probe polled until the container is usable."""
    path: str = READINESS_PATH
    port: str = KRATOS_PUBLIC_PORT
    status: int = READINESS_STATUS
    timeout_s: float = Field(default=READINESS_TIMEOUT_S, gt=0)
    interval_s: float = Field(default=READINESS_POLL_INTERVAL_S, gt=0)

    model_config = {"frozen": True}


class ContainerRequest(BaseModel):
    """Everything a container constructor needs to launch Kratos."""
    image: str = Field(min_length=1)
    exposed_ports: list[str] = Field(default_factory=list)
    command: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)
    files: list[ContainerFile] = Field(default_factory=list)
    port_bindings: dict[str, PortBinding] = Field(default_factory=dict)
    readiness: ReadinessProbe = Field(default_factory=ReadinessProbe)
    started: bool = True
