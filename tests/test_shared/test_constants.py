"""Tests for shared constants values."""
from __future__ import annotations

from src.shared.constants import (
    DEFAULT_FRONT_INJECT_LABEL,
    DEFAULT_IMAGE_ENV_VAR,
    DEFAULT_INJECT_LABEL,
    DEFAULT_KRATOS_IMAGE,
    KRATOS_ADMIN_PORT,
    KRATOS_CONFIG_CONTAINER_PATH,
    KRATOS_PUBLIC_PORT,
    READINESS_PATH,
    READINESS_STATUS,
    READINESS_TIMEOUT_S,
    USER_SCHEMA_CONTAINER_PATH,
)


class TestPortConstants:
    """Verify the well-known Kratos ports."""

    def test_public_port(self):
        assert KRATOS_PUBLIC_PORT == "4433/tcp"

    def test_admin_port(self):
        assert KRATOS_ADMIN_PORT == "4434/tcp"

    def test_ports_are_unique(self):
        assert KRATOS_PUBLIC_PORT != KRATOS_ADMIN_PORT


class TestContainerContract:
    def test_mount_paths(self):
        assert KRATOS_CONFIG_CONTAINER_PATH == "/etc/config/kratos/kratos.yaml"
        assert USER_SCHEMA_CONTAINER_PATH == "/etc/config/kratos/user.schema.json"

    def test_readiness_probe(self):
        assert READINESS_PATH == "/health/ready"
        assert READINESS_STATUS == 200
        assert READINESS_TIMEOUT_S == 60


class TestDefaults:
    def test_image_is_pinned(self):
        assert DEFAULT_KRATOS_IMAGE == "oryd/kratos:v1.3.1"

    def test_image_env_var(self):
        assert DEFAULT_IMAGE_ENV_VAR == "GROAT_I9N_KR_IMAGE"

    def test_labels_differ(self):
        assert DEFAULT_INJECT_LABEL == "grokratos"
        assert DEFAULT_FRONT_INJECT_LABEL == "grokratos.front"
