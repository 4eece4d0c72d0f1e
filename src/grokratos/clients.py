"""Kratos API client construction."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import ory_kratos_client

ClientFactory = Callable[[str], Any]


def new_api_client(base_url: str) -> ory_kratos_client.ApiClient:
    """Return a fresh ``ApiClient`` talking to *base_url*.

    Wrap it in ``ory_kratos_client.IdentityApi`` / ``FrontendApi`` to call
    the admin or public endpoints.
    """
    configuration = ory_kratos_client.Configuration(host=base_url)
    return ory_kratos_client.ApiClient(configuration)
