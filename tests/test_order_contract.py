from __future__ import annotations

import pytest

from gm_manifest.exceptions import OrderViolationError
from gm_manifest.order_contract import OrderPolicy, enforce_ordered, ordered_or_sorted


def test_ordered_or_sorted_sorts_by_default() -> None:
    values = ["b", "a", "c"]
    assert ordered_or_sorted(values, source="test") == ["a", "b", "c"]


def test_ordered_or_sorted_reverse_and_key() -> None:
    values = [("a", 1), ("b", 3), ("c", 2)]
    ordered = ordered_or_sorted(values, source="test", key=lambda item: item[1], reverse=True)
    assert ordered == [("b", 3), ("c", 2), ("a", 1)]


def test_enforce_ordered_accepts_sorted() -> None:
    values = ["a", "b", "c"]
    assert enforce_ordered(values, source="test") == values


def test_enforce_ordered_rejects_unsorted() -> None:
    with pytest.raises(OrderViolationError) as info:
        enforce_ordered(["b", "a"], source="test")
    assert info.value.env["source"] == "test"
    assert info.value.env["violation_kind"] == "out_of_order"
    assert info.value.env["policy"] == OrderPolicy.ENFORCE.value


def test_enforce_ordered_rejects_incomparable() -> None:
    with pytest.raises(OrderViolationError) as info:
        enforce_ordered([1, "a"], source="test")
    assert info.value.env["violation_kind"] == "incomparable"
