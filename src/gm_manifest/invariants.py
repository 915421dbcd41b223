"""Invariant markers for manifest generation."""

from __future__ import annotations

from typing import NoReturn, TypeVar

from gm_manifest.exceptions import NeverThrown

T = TypeVar("T")


def never(
    reason: str = "",
    *,
    error: type[NeverThrown] = NeverThrown,
    **env: object,
) -> NoReturn:
    """Mark a code path as unreachable for a well-formed taxonomy.

    The keyword payload is attached to the raised exception as diagnostics;
    it is not evaluated otherwise.
    """
    raise error(reason or "never() marker reached", env=env)


def require_not_none(
    value: T | None,
    *,
    reason: str = "",
    error: type[NeverThrown] = NeverThrown,
    **env: object,
) -> T:
    if value is None:
        never(reason or "required value is None", error=error, **env)
    return value
