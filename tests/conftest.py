"""Shared test fixtures for the grokratos test suite."""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from unittest.mock import AsyncMock

import pytest

from src.shared.constants import KRATOS_ADMIN_PORT, KRATOS_PUBLIC_PORT
from src.shared.context import SuiteContext
from src.shared.inject import inject_field


class FakeRuntime:
    """In-memory stand-in for a started container."""

    def __init__(
        self,
        ports: dict[str, int] | None = None,
        host: str = "localhost",
        terminate_error: Exception | None = None,
        port_error: Exception | None = None,
        host_error: Exception | None = None,
    ) -> None:
        self.ports = ports or {KRATOS_PUBLIC_PORT: 32768, KRATOS_ADMIN_PORT: 32769}
        self._host = host
        self.terminate_error = terminate_error
        self.port_error = port_error
        self.host_error = host_error
        self.terminate_calls = 0

    async def terminate(self) -> None:
        self.terminate_calls += 1
        if self.terminate_error is not None:
            raise self.terminate_error

    async def mapped_port(self, port: str) -> int:
        if self.port_error is not None:
            raise self.port_error
        return self.ports[port]

    async def host(self) -> str:
        if self.host_error is not None:
            raise self.host_error
        return self._host


class SlowStartContainer:
    """``DockerContainer`` stand-in whose ``start`` blocks its worker thread."""

    def __init__(self, delay: float) -> None:
        self.delay = delay
        self.started = False
        self.stopped = False

    def start(self) -> None:
        time.sleep(self.delay)
        self.started = True

    def stop(self) -> None:
        self.stopped = True

    def get_container_host_ip(self) -> str:
        return "localhost"

    def get_exposed_port(self, port: int) -> str:
        return "32768"

@dataclass
class Deps:
    """Dependency object with one admin and one public client field."""
    admin: object = inject_field("grokratos")
    front: object = inject_field("grokratos.front")
    name: str = "untouched"
    extra: list[str] = field(default_factory=list)


@pytest.fixture
def fake_runtime() -> FakeRuntime:
    return FakeRuntime()


@pytest.fixture
def stub_constructor(fake_runtime: FakeRuntime) -> AsyncMock:
    """Container constructor that returns ``fake_runtime`` without Docker."""
    return AsyncMock(return_value=fake_runtime)


@pytest.fixture
def suite_ctx() -> SuiteContext:
    return SuiteContext(suite_id="test-suite")
