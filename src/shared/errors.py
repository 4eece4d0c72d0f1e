"""Custom exception classes for the Kratos test harness.

Errors are wrapped with ``raise ... from cause`` so the original failure stays
reachable through ``__cause__``.
"""
from __future__ import annotations


class HarnessError(Exception):
    """Base exception for all harness errors."""

    pass


class ConfigurationError(HarnessError):
    """Raised for configuration issues detected before any resource is allocated."""

    pass


class ConfigNotFoundError(ConfigurationError):
    """Kratos service configuration path was not supplied."""

    def __init__(self, detail: str = "kratos config not found") -> None:
        super().__init__(detail)


class UserSchemaNotFoundError(ConfigurationError):
    """Identity schema path was not supplied."""

    def __init__(self, detail: str = "user schema not found") -> None:
        super().__init__(detail)


class PortReservationError(HarnessError):
    """Raised when a local port cannot be reserved for the container."""

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(f"failed to listen on {role} port")


class ContainerError(HarnessError):
    """Base exception for container runtime failures."""

    pass


class ContainerStartError(ContainerError):
    """Raised when the container cannot be started."""

    pass


class ReadinessTimeoutError(ContainerStartError):
    """Raised when the readiness probe does not succeed within its bound."""

    def __init__(self, url: str, timeout: float) -> None:
        self.url = url
        self.timeout = timeout
        super().__init__(f"'{url}' not ready after {timeout}s")


class ContainerQueryError(ContainerError):
    """Raised when a mapped port or host cannot be read back from the runtime."""

    def __init__(self, what: str) -> None:
        self.what = what
        super().__init__(f"failed to get kratos {what}")


class ContainerTerminateError(ContainerError):
    """Raised when the runtime fails to stop the container."""

    pass


class BootstrapError(HarnessError):
    """Raised when a suite cannot bring up its Kratos container."""

    pass


class InjectionError(HarnessError):
    """Raised when clients cannot be injected into a dependency object."""

    pass
