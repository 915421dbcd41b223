from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, Union

from gm_manifest.order_contract import OrderPolicy, ordered_or_sorted

OBJECT_ITEM_WHEN = "view == gmVfs && viewItem =~ /objectItem/"


class LocationKind(int, Enum):
    NAVIGATION = 0
    ITEM_CONTEXT = 1
    SUBMENU = 2


@dataclass(frozen=True, order=True)
class MenuLocationKey:
    """Handle to one menu location.

    Submenu keys are handed out by `MenuTree.declare_submenu_at`; callers
    insert through the returned key instead of rebuilding the id string.
    """

    kind: LocationKind
    submenu_id: str = ""

    def __str__(self) -> str:
        if self.kind is LocationKind.NAVIGATION:
            return "view/title"
        if self.kind is LocationKind.ITEM_CONTEXT:
            return "view/title/context"
        return self.submenu_id


NAVIGATION = MenuLocationKey(LocationKind.NAVIGATION)
ITEM_CONTEXT = MenuLocationKey(LocationKind.ITEM_CONTEXT)


def group_token(group: str, index: int) -> str:
    return f"{group}@{index}"


def _token_sort_key(token: str) -> tuple[str, int]:
    name, sep, index = token.rpartition("@")
    if sep and index.isdigit():
        return (name, int(index))
    return (token, -1)


@dataclass(frozen=True)
class CommandPlacement:
    command: str
    group: str
    when: str = OBJECT_ITEM_WHEN

    @property
    def identifier(self) -> str:
        return self.command

    def to_payload(self) -> dict[str, str]:
        return {"command": self.command, "group": self.group, "when": self.when}


@dataclass(frozen=True)
class SubmenuPlacement:
    submenu: str
    group: str
    when: str = OBJECT_ITEM_WHEN

    @property
    def identifier(self) -> str:
        return self.submenu

    def to_payload(self) -> dict[str, str]:
        return {"group": self.group, "submenu": self.submenu, "when": self.when}


Placement = Union[CommandPlacement, SubmenuPlacement]


def placement_sort_key(entry: Placement) -> tuple[str, int, str, str]:
    name, index = _token_sort_key(entry.group)
    return (name, index, entry.identifier, entry.when)


@dataclass(frozen=True)
class SubmenuDeclaration:
    id: str
    label: str
    icon: str | None = None

    def to_payload(self) -> dict[str, str]:
        payload = {"id": self.id, "label": self.label}
        if self.icon is not None:
            payload["icon"] = self.icon
        return payload


class PlacementSet:
    """Deduplicated placements, iterated by group name, group index, then id.

    Group indices compare numerically so `create@10` follows `create@9`.
    """

    def __init__(self, entries: Iterable[Placement] = ()) -> None:
        self._entries: Dict[Placement, None] = {}
        for entry in entries:
            self.add(entry)

    def add(self, entry: Placement) -> bool:
        if entry in self._entries:
            return False
        self._entries[entry] = None
        return True

    def __contains__(self, entry: object) -> bool:
        return entry in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Placement]:
        return iter(
            ordered_or_sorted(
                self._entries,
                source="PlacementSet.__iter__",
                key=placement_sort_key,
                policy=OrderPolicy.SORT,
            )
        )

    def __repr__(self) -> str:
        return f"PlacementSet({list(self)!r})"
