"""BootstrapConfig: suite bootstrap options with environment and YAML loading."""

from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from src.grokratos.clients import ClientFactory, new_api_client
from src.grokratos.protocols import ContainerRunner
from src.shared.constants import (
    DEFAULT_FRONT_INJECT_LABEL,
    DEFAULT_IMAGE_ENV_VAR,
    DEFAULT_INJECT_LABEL,
    DEFAULT_KRATOS_IMAGE,
)
from src.tckratos.container import run

logger = logging.getLogger(__name__)

# Keys accepted from a YAML file; callables can only be passed in code.
_YAML_KEYS = (
    "container_image",
    "image_env_var",
    "inject_label",
    "front_inject_label",
    "user_schema_path",
    "kratos_config",
)


@dataclass(frozen=True)
class BootstrapConfig:
    """Options for :func:`src.grokratos.bootstrap.new`.

    Precedence is fixed: field defaults, then caller options, then the
    environment variable named by ``image_env_var`` for the image.
    """

    container_image: str = DEFAULT_KRATOS_IMAGE
    image_env_var: str = DEFAULT_IMAGE_ENV_VAR
    inject_label: str = DEFAULT_INJECT_LABEL
    front_inject_label: str = DEFAULT_FRONT_INJECT_LABEL
    runner: ContainerRunner = run
    user_schema_path: str | Path = ""
    kratos_config: str | Path = ""
    client_factory: ClientFactory = new_api_client

    def with_env_override(self, environ: Mapping[str, str] | None = None) -> BootstrapConfig:
        """Return a copy whose image comes from ``image_env_var`` when it is set.

        An empty value is treated as unset.
        """
        environ = os.environ if environ is None else environ
        image = environ.get(self.image_env_var, "")
        if not image:
            return self
        logger.info(
            "Using kratos image %s from $%s instead of %s",
            image,
            self.image_env_var,
            self.container_image,
        )
        return dataclasses.replace(self, container_image=image)

    @classmethod
    def from_yaml(cls, path: str | Path, **overrides: Any) -> BootstrapConfig:
        """Build a config from the ``grokratos:`` section of a YAML file.

        Unknown keys are ignored and blank values keep their defaults. Paths
        are used as written, relative to the working directory. *overrides*
        win over the file.

        Raises:
            FileNotFoundError: If *path* does not exist.
            ValueError: If the ``grokratos:`` section is missing.
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(config_path, "r", encoding="utf-8") as fh:
            raw: dict[str, Any] = yaml.safe_load(fh) or {}

        section = raw.get("grokratos", {})
        if not section:
            raise ValueError(f"No 'grokratos:' section found in {path}")

        filtered = {
            k: v for k, v in section.items() if k in _YAML_KEYS and v is not None
        }
        logger.info("Loaded BootstrapConfig from %s (%d keys)", path, len(filtered))
        return cls(**{**filtered, **overrides})
