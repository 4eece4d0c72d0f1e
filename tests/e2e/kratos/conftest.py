"""Session fixtures for end-to-end tests against a real Kratos container.

Everything here is skipped unless the ``docker`` CLI is on PATH and the
daemon answers ``docker info``.
"""

from __future__ import annotations

import asyncio
import shutil
import subprocess
from collections.abc import Iterator
from dataclasses import dataclass

import ory_kratos_client
import pytest

from src.grokratos import Injector, SuiteContext, inject_field, new
from tests.fixtures import kratos_config_path, user_schema_path

SUITE_TIMEOUT_S = 180.0


def _docker_is_available() -> bool:
    """Return True if the ``docker`` CLI is on PATH and the daemon responds."""
    if shutil.which("docker") is None:
        return False
    try:
        result = subprocess.run(
            ["docker", "info"],
            capture_output=True,
            timeout=10,
        )
        return result.returncode == 0
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError):
        return False


skip_no_docker = pytest.mark.skipif(
    not _docker_is_available(),
    reason="Docker is not available or the daemon is not running",
)


@dataclass
class KratosDeps:
    """What each end-to-end test case gets."""
    admin: ory_kratos_client.ApiClient | None = inject_field("grokratos")
    front: ory_kratos_client.ApiClient | None = inject_field("grokratos.front")


@pytest.fixture(scope="session")
def kratos_suite() -> Iterator[tuple[SuiteContext, Injector[KratosDeps]]]:
    """Boot one Kratos container for the whole session.

    The container is stopped by the background terminator once the context
    is cancelled; teardown waits for it on the same event loop.
    """
    bootstrap = new(
        KratosDeps,
        kratos_config=str(kratos_config_path()),
        user_schema_path=str(user_schema_path()),
    )
    ctx = SuiteContext(suite_id="kratos-e2e", timeout=SUITE_TIMEOUT_S)

    with asyncio.Runner() as runner:
        injector = runner.run(bootstrap(ctx))
        try:
            yield ctx, injector
        finally:
            ctx.cancel()
            runner.run(ctx.wait_outstanding(timeout=60))
        assert ctx.errors == []


@pytest.fixture
def deps(kratos_suite) -> KratosDeps:
    _, injector = kratos_suite
    return injector(KratosDeps())
