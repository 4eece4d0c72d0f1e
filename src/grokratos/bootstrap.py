"""Suite bootstrap: one Kratos container per suite, clients per test case.

Usage in a ``conftest.py``::

    @dataclass
    class Deps:
        admin: ApiClient | None = inject_field("grokratos")
        front: ApiClient | None = inject_field("grokratos.front")

    bootstrap = new(
        Deps,
        kratos_config="tests/fixtures/kratos/kratos.yaml",
        user_schema_path="tests/fixtures/kratos/user.schema.json",
    )

    injector = await bootstrap(ctx)   # once per suite
    deps = injector(Deps())           # once per test case
    ...
    ctx.cancel()                      # container is stopped in the background
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from src.grokratos.config import BootstrapConfig
from src.grokratos.injection import InjectionContainer
from src.grokratos.terminator import spawn_terminator
from src.shared.context import SuiteContext
from src.shared.errors import BootstrapError
from src.shared.inject import labelled_fields
from src.shared.logging import suite_id_var

logger = logging.getLogger(__name__)

T = TypeVar("T")

Injector = Callable[[T], T]
Bootstrap = Callable[[SuiteContext], Awaitable[Injector[T]]]


def new(deps_type: type[T], **options: Any) -> Bootstrap[T]:
    """Create the bootstrap for a suite whose dependencies are *deps_type*.

    Args:
        deps_type: Dataclass whose fields are tagged with the inject labels.
        **options: :class:`BootstrapConfig` fields (``inject_label``,
            ``front_inject_label``, ``container_image``, ``image_env_var``,
            ``user_schema_path``, ``kratos_config``, ``runner``,
            ``client_factory``).

    Returns:
        Async callable that starts Kratos for a :class:`SuiteContext` and
        returns the per-test injector.

    Raises:
        TypeError: If *deps_type* is not a dataclass or an option is unknown.
    """
    if not (isinstance(deps_type, type) and dataclasses.is_dataclass(deps_type)):
        raise TypeError(f"{deps_type!r} is not a dataclass type")

    cfg = BootstrapConfig(**options).with_env_override()

    for label in (cfg.inject_label, cfg.front_inject_label):
        if not labelled_fields(deps_type, label):
            logger.warning("%s has no field tagged %r", deps_type.__name__, label)

    return bootstrapper(cfg)


def bootstrapper(cfg: BootstrapConfig) -> Bootstrap[Any]:
    """Return the bootstrap callable for an already resolved *cfg*."""

    async def bootstrap(ctx: SuiteContext) -> Injector[Any]:
        token = suite_id_var.set(ctx.suite_id)
        try:
            try:
                async with asyncio.timeout(ctx.remaining()):
                    kratos_container = await cfg.runner(
                        kratos_config=cfg.kratos_config,
                        user_schema_path=cfg.user_schema_path,
                        image=cfg.container_image,
                    )
            except Exception as exc:
                raise BootstrapError("kratos container failed to run") from exc

            spawn_terminator(ctx, kratos_container.terminate)

            container: InjectionContainer[Any] = InjectionContainer(
                ctx,
                kratos_container,
                inject_label=cfg.inject_label,
                front_inject_label=cfg.front_inject_label,
                client_factory=cfg.client_factory,
            )
            logger.info("Suite %s bootstrapped", ctx.suite_id)
            return container.injector
        finally:
            suite_id_var.reset(token)

    return bootstrap
