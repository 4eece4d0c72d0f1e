"""KratosConfig: launch options for a single Kratos container."""

from __future__ import annotations

import socket
from dataclasses import dataclass
from pathlib import Path

from src.shared.constants import DEFAULT_KRATOS_IMAGE
from src.shared.errors import ConfigNotFoundError, UserSchemaNotFoundError
from src.tckratos.protocols import ContainerConstructor, ListenerConstructor
from src.tckratos.runtime import generic_container


def _is_set(path: str | Path | None) -> bool:
    # Path("") renders as "."
    return path is not None and str(path) not in ("", ".")


@dataclass(frozen=True)
class KratosConfig:
    """Options for :func:`src.tckratos.container.run`.

    The constructor fields are seams for tests: ``container_constructor``
    receives the launch request, the listener constructors open the sockets
    used to reserve host ports.
    """

    kratos_config: str | Path | None = ""
    user_schema_path: str | Path | None = ""
    image: str = DEFAULT_KRATOS_IMAGE
    container_constructor: ContainerConstructor = generic_container
    admin_listener_constructor: ListenerConstructor = socket.create_server
    front_listener_constructor: ListenerConstructor = socket.create_server

    def validate(self) -> None:
        """Check the mandatory file paths.

        ``None``, ``""`` and ``Path("")`` all count as unset.

        Raises:
            ConfigNotFoundError: If no Kratos config path is set.
            UserSchemaNotFoundError: If no identity schema path is set.
        """
        if not _is_set(self.kratos_config):
            raise ConfigNotFoundError()
        if not _is_set(self.user_schema_path):
            raise UserSchemaNotFoundError()
