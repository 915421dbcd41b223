from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT, ROOT / "src"):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))


import pytest

from gm_manifest.events import EventCategory, EventDescriptor
from gm_manifest.menus.tree import MenuTree
from gm_manifest.synthesis.commands import command_for_event
from gm_manifest.synthesis.model import Command


class FakeEvents:
    """Enumerator serving a fixed table of `(category, index) -> descriptor`."""

    def __init__(self, table: dict[tuple[str, int], EventDescriptor]) -> None:
        self.table = dict(table)
        self.calls: list[tuple[str, int]] = []

    @classmethod
    def named(cls, category: EventCategory, names: list[str], **extra) -> "FakeEvents":
        return cls(
            {
                (category.value, index): EventDescriptor(category, index, name, **extra)
                for index, name in enumerate(names)
            }
        )

    def try_event(self, category, index):
        name = category.value if isinstance(category, EventCategory) else category
        self.calls.append((name, index))
        return self.table.get((name, index))


@pytest.fixture
def fake_events():
    return FakeEvents


@pytest.fixture
def make_command():
    def _make(category: EventCategory, index: int, name: str, **extra) -> Command:
        return command_for_event(EventDescriptor(category, index, name, **extra))

    return _make


@pytest.fixture
def empty_tree() -> MenuTree:
    return MenuTree(navigation=[], item_context=[])

