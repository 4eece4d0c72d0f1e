"""Label-based field injection for dataclass dependency objects.

Fields opt in through metadata, the dataclass counterpart of a struct tag::

    @dataclass
    class Deps:
        admin: ApiClient | None = inject_field("grokratos")
        front: ApiClient | None = inject_field("grokratos.front")
"""
from __future__ import annotations

import dataclasses
from typing import Any, TypeVar

from src.shared.constants import INJECT_TAG
from src.shared.errors import InjectionError

T = TypeVar("T")


def inject_field(label: str, default: Any = None) -> Any:
    """Declare a dataclass field that receives the client injected for *label*."""
    return dataclasses.field(default=default, metadata={INJECT_TAG: label})


def labelled_fields(target: Any, label: str) -> list[str]:
    """Names of the dataclass fields of *target* tagged with *label*."""
    if not dataclasses.is_dataclass(target):
        raise InjectionError(
            f"cannot inject into {type(target).__name__!r}: not a dataclass"
        )
    return [
        f.name
        for f in dataclasses.fields(target)
        if f.metadata.get(INJECT_TAG) == label
    ]


def inject(target: T, value: Any, label: str) -> T:
    """Return a copy of *target* with every field tagged *label* set to *value*.

    Args:
        target: Dataclass instance to populate.
        value: Object to place in the matching fields.
        label: Tag value to match.

    Returns:
        A new instance; *target* itself is left untouched.

    Raises:
        InjectionError: If *target* is not a dataclass instance or a field
            cannot be set (e.g. ``init=False``).
    """
    if isinstance(target, type):
        raise InjectionError(f"cannot inject into class {target.__name__!r}")
    names = labelled_fields(target, label)
    if not names:
        return target
    try:
        return dataclasses.replace(target, **{name: value for name in names})
    except (TypeError, ValueError) as exc:
        raise InjectionError(
            f"cannot inject {label!r} into {type(target).__name__!r}: {exc}"
        ) from exc
