"""Per-test injection of Kratos clients into dependency objects."""

from __future__ import annotations

import logging
import threading
from typing import Generic, TypeVar

from src.grokratos.clients import ClientFactory, new_api_client
from src.grokratos.protocols import KratosContainerLike
from src.shared.context import SuiteContext
from src.shared.inject import inject

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InjectionContainer(Generic[T]):
    """Holds the suite's Kratos container and hands clients to test cases.

    :meth:`injector` only reads the container and builds new clients, so it
    may be called from many test cases at once. ``forks`` counts calls and is
    informational only.
    """

    def __init__(
        self,
        ctx: SuiteContext,
        kratos_container: KratosContainerLike,
        inject_label: str,
        front_inject_label: str,
        client_factory: ClientFactory = new_api_client,
    ) -> None:
        self.ctx = ctx
        self.kratos_container = kratos_container
        self.inject_label = inject_label
        self.front_inject_label = front_inject_label
        self._client_factory = client_factory
        self._forks = 0
        self._lock = threading.Lock()

    @property
    def forks(self) -> int:
        return self._forks

    def injector(self, to: T) -> T:
        """Return a copy of *to* with admin and public clients in their fields.

        Raises:
            InjectionError: If *to* is not a dataclass instance.
        """
        with self._lock:
            self._forks += 1
            fork = self._forks

        admin_client = self._client_factory(self.kratos_container.admin_url)
        res = inject(to, admin_client, self.inject_label)

        front_client = self._client_factory(self.kratos_container.public_url)
        res = inject(res, front_client, self.front_inject_label)

        logger.debug("Injected kratos clients into %s (fork %d)", type(to).__name__, fork)
        return res
