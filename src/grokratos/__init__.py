"""Kratos-backed dependency bootstrap for integration test suites."""
from src.grokratos.bootstrap import Bootstrap, Injector, bootstrapper, new
from src.grokratos.clients import new_api_client
from src.grokratos.config import BootstrapConfig
from src.grokratos.injection import InjectionContainer
from src.shared.context import SuiteContext
from src.shared.inject import inject_field

__all__ = [
    "Bootstrap",
    "Injector",
    "bootstrapper",
    "new",
    "new_api_client",
    "BootstrapConfig",
    "InjectionContainer",
    "SuiteContext",
    "inject_field",
]
