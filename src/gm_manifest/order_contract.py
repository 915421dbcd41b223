from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterable, TypeVar

from gm_manifest.exceptions import OrderViolationError
from gm_manifest.invariants import never


T = TypeVar("T")


class OrderPolicy(str, Enum):
    SORT = "sort"
    ENFORCE = "enforce"


def ordered_or_sorted(
    values: Iterable[T],
    *,
    source: str,
    key: Callable[[T], Any] | None = None,
    reverse: bool = False,
    policy: OrderPolicy = OrderPolicy.SORT,
) -> list[T]:
    """Return values in deterministic order.

    - `OrderPolicy.SORT`: always apply sorting.
    - `OrderPolicy.ENFORCE`: require caller-monotonic order, fail via `never()` on regression.
    """
    items = list(values)
    if policy is OrderPolicy.SORT:
        return sorted(items, key=key, reverse=reverse)
    violation = _first_order_violation(items, key=key, reverse=reverse)
    if violation is None:
        return items
    message = (
        "caller-ordered invariant requires comparable keys"
        if violation[4] == "incomparable"
        else "caller-ordered invariant violated"
    )
    never(
        message,
        error=OrderViolationError,
        source=source,
        previous_index=violation[0],
        current_index=violation[1],
        previous_key=repr(violation[2]),
        current_key=repr(violation[3]),
        violation_kind=violation[4],
        reverse=reverse,
        policy=policy.value,
    )


def enforce_ordered(
    values: Iterable[T],
    *,
    source: str,
    key: Callable[[T], Any] | None = None,
) -> list[T]:
    return ordered_or_sorted(values, source=source, key=key, policy=OrderPolicy.ENFORCE)


def _first_order_violation(
    values: Iterable[T],
    *,
    key: Callable[[T], Any] | None = None,
    reverse: bool = False,
) -> tuple[int, int, Any, Any, str] | None:
    previous_marker: Any | None = None
    previous_index = -1
    has_previous = False
    for index, value in enumerate(values):
        marker = key(value) if key is not None else value
        if has_previous:
            try:
                out_of_order = (
                    bool(previous_marker < marker)
                    if reverse
                    else bool(previous_marker > marker)
                )
            except TypeError:
                return (previous_index, index, previous_marker, marker, "incomparable")
            if out_of_order:
                return (previous_index, index, previous_marker, marker, "out_of_order")
        previous_marker = marker
        previous_index = index
        has_previous = True
    return None
