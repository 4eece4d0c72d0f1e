"""Shared constants used across the harness packages."""
from __future__ import annotations

# Kratos image
DEFAULT_KRATOS_IMAGE: str = "oryd/kratos:v1.3.1"
DEFAULT_IMAGE_ENV_VAR: str = "GROAT_I9N_KR_IMAGE"

# Struct-tag style labels used to match dependency fields
INJECT_TAG: str = "groat"
DEFAULT_INJECT_LABEL: str = "grokratos"
DEFAULT_FRONT_INJECT_LABEL: str = "grokratos.front"

# Container ports
KRATOS_PUBLIC_PORT: str = "4433/tcp"
KRATOS_ADMIN_PORT: str = "4434/tcp"

# Host side
LOOPBACK_HOST: str = "127.0.0.1"
ADVERTISED_HOST: str = "localhost"

# Files mounted into the container
KRATOS_CONFIG_CONTAINER_PATH: str = "/etc/config/kratos/kratos.yaml"
USER_SCHEMA_CONTAINER_PATH: str = "/etc/config/kratos/user.schema.json"
READ_ONLY_FILE_MODE: int = 0o644

# Readiness probe
READINESS_PATH: str = "/health/ready"
READINESS_STATUS: int = 200
READINESS_TIMEOUT_S: float = 60.0
READINESS_POLL_INTERVAL_S: float = 0.5

# Environment handed to the Kratos process
KRATOS_LOG_LEVEL: str = "trace"
KRATOS_LOG_FORMAT: str = "text"
KRATOS_DSN: str = "memory"
