"""Test fixtures for Kratos integration testing.

Provides the files mounted into the Kratos container:
- kratos/kratos.yaml: Kratos service config (in-memory DSN, password login)
- kratos/user.schema.json: identity schema with an email identifier
"""

from __future__ import annotations

from pathlib import Path

FIXTURES_DIR = Path(__file__).parent


def fixture_path(name: str) -> Path:
    """Return the absolute path to a named fixture file."""
    path = FIXTURES_DIR / name
    if not path.exists():
        raise FileNotFoundError(f"Fixture not found: {path}")
    return path


def kratos_config_path() -> Path:
    return fixture_path("kratos/kratos.yaml")


def user_schema_path() -> Path:
    return fixture_path("kratos/user.schema.json")
