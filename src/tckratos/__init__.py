"""Ory Kratos container for integration tests, on top of testcontainers."""
from src.tckratos.config import KratosConfig
from src.tckratos.container import KratosContainer, run, run_dynamic
from src.tckratos.models import ContainerFile, ContainerRequest, PortBinding, ReadinessProbe
from src.tckratos.ports import reserve_ports
from src.tckratos.request import container_request
from src.tckratos.runtime import DockerRuntimeContainer, generic_container

__all__ = [
    "KratosConfig",
    "KratosContainer",
    "run",
    "run_dynamic",
    "ContainerFile",
    "ContainerRequest",
    "PortBinding",
    "ReadinessProbe",
    "reserve_ports",
    "container_request",
    "DockerRuntimeContainer",
    "generic_container",
]
