"""Tests for shared error classes."""
from __future__ import annotations

import pytest

from src.shared.errors import (
    BootstrapError,
    ConfigNotFoundError,
    ConfigurationError,
    ContainerError,
    ContainerQueryError,
    ContainerStartError,
    ContainerTerminateError,
    HarnessError,
    InjectionError,
    PortReservationError,
    ReadinessTimeoutError,
    UserSchemaNotFoundError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [
            ConfigurationError,
            PortReservationError,
            ContainerError,
            BootstrapError,
            InjectionError,
        ],
    )
    def test_inherits_from_harness_error(self, cls):
        assert issubclass(cls, HarnessError)

    def test_path_errors_are_configuration_errors(self):
        assert issubclass(ConfigNotFoundError, ConfigurationError)
        assert issubclass(UserSchemaNotFoundError, ConfigurationError)

    def test_readiness_timeout_is_start_error(self):
        assert issubclass(ReadinessTimeoutError, ContainerStartError)

    def test_container_errors(self):
        for cls in (ContainerStartError, ContainerQueryError, ContainerTerminateError):
            assert issubclass(cls, ContainerError)


class TestMessages:
    def test_config_not_found_default(self):
        assert str(ConfigNotFoundError()) == "kratos config not found"

    def test_user_schema_not_found_default(self):
        assert str(UserSchemaNotFoundError()) == "user schema not found"

    def test_port_reservation_role(self):
        err = PortReservationError("admin")
        assert err.role == "admin"
        assert str(err) == "failed to listen on admin port"

    def test_readiness_timeout_fields(self):
        err = ReadinessTimeoutError("http://localhost:1/health/ready", 60.0)
        assert err.url == "http://localhost:1/health/ready"
        assert err.timeout == 60.0
        assert "60.0s" in str(err)

    def test_query_error_names_target(self):
        err = ContainerQueryError("admin port")
        assert err.what == "admin port"
        assert str(err) == "failed to get kratos admin port"


class TestCauseChaining:
    def test_cause_identity_preserved(self):
        cause = RuntimeError("boom")
        with pytest.raises(ContainerStartError) as excinfo:
            try:
                raise cause
            except RuntimeError as exc:
                raise ContainerStartError("failed to start kratos") from exc
        assert excinfo.value.__cause__ is cause
