from __future__ import annotations

import logging
from typing import Dict, List

from gm_manifest.exceptions import (
    DuplicateIdentifierError,
    FrozenTreeError,
    MissingLocationError,
)
from gm_manifest.invariants import never, require_not_none
from gm_manifest.json_types import JSONObject
from gm_manifest.menus.model import (
    ITEM_CONTEXT,
    NAVIGATION,
    CommandPlacement,
    LocationKind,
    MenuLocationKey,
    Placement,
    PlacementSet,
    SubmenuDeclaration,
    SubmenuPlacement,
)
from gm_manifest.order_contract import OrderPolicy, ordered_or_sorted
from gm_manifest.synthesis.model import Command
from gm_manifest.synthesis.naming import submenu_id

logger = logging.getLogger(__name__)


class MenuTree:
    """Owns every menu location and the submenu declarations.

    The two fixed locations are seeded from the baseline documents. Submenu
    locations only come into existence through `declare_submenu_at`, which
    returns the key later insertions must use.
    """

    def __init__(
        self,
        navigation: List[Placement] | None = None,
        item_context: List[Placement] | None = None,
    ) -> None:
        if navigation is None or item_context is None:
            from gm_manifest.baseline import default_menu_baseline

            baseline = default_menu_baseline()
            navigation = baseline.navigation if navigation is None else navigation
            item_context = baseline.item_context if item_context is None else item_context
        self._locations: Dict[MenuLocationKey, PlacementSet] = {
            NAVIGATION: PlacementSet(navigation),
            ITEM_CONTEXT: PlacementSet(item_context),
        }
        self._submenus: List[SubmenuDeclaration] = []
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def submenus(self) -> tuple[SubmenuDeclaration, ...]:
        return tuple(self._submenus)

    def locations(self) -> List[MenuLocationKey]:
        return ordered_or_sorted(
            self._locations,
            source="MenuTree.locations",
            policy=OrderPolicy.SORT,
        )

    def has_location(self, key: MenuLocationKey) -> bool:
        return key in self._locations

    def entries(self, key: MenuLocationKey) -> List[Placement]:
        return list(self._entry_set(key))

    def add_command_at(
        self, key: MenuLocationKey, command: Command, group: str
    ) -> None:
        self._check_mutable("add_command_at")
        self._entry_set(key).add(CommandPlacement(command=command.command, group=group))

    def declare_submenu_at(
        self,
        parent: MenuLocationKey,
        label: str,
        group: str,
        icon: str | None = None,
    ) -> MenuLocationKey:
        self._check_mutable("declare_submenu_at")
        parent_entries = self._entry_set(parent)
        new_id = submenu_id(label)
        if any(declared.id == new_id for declared in self._submenus):
            never(
                "submenu declared twice",
                error=DuplicateIdentifierError,
                submenu=new_id,
                label=label,
            )
        self._submenus.append(SubmenuDeclaration(id=new_id, label=label, icon=icon))
        parent_entries.add(SubmenuPlacement(submenu=new_id, group=group))
        key = MenuLocationKey(LocationKind.SUBMENU, new_id)
        self._locations[key] = PlacementSet()
        logger.debug("declared submenu %s under %s at %s", new_id, parent, group)
        return key

    def freeze(self) -> "MenuTree":
        self.validate()
        self._frozen = True
        return self

    def validate(self) -> None:
        """Every submenu placement must have one declaration and one location."""
        declared: Dict[str, int] = {}
        for declaration in self._submenus:
            declared[declaration.id] = declared.get(declaration.id, 0) + 1
        for key, entries in self._locations.items():
            for entry in entries:
                if not isinstance(entry, SubmenuPlacement):
                    continue
                count = declared.get(entry.submenu, 0)
                if count != 1:
                    never(
                        "submenu placement without exactly one declaration",
                        error=DuplicateIdentifierError if count else MissingLocationError,
                        submenu=entry.submenu,
                        location=str(key),
                        declarations=count,
                    )
                if MenuLocationKey(LocationKind.SUBMENU, entry.submenu) not in self._locations:
                    never(
                        "submenu placement without a location",
                        error=MissingLocationError,
                        submenu=entry.submenu,
                        location=str(key),
                    )

    def to_payload(self) -> JSONObject:
        menus: JSONObject = {
            str(key): [entry.to_payload() for entry in self._locations[key]]
            for key in self.locations()
        }
        return {
            "menus": menus,
            "submenus": [declaration.to_payload() for declaration in self._submenus],
        }

    def _entry_set(self, key: MenuLocationKey) -> PlacementSet:
        return require_not_none(
            self._locations.get(key),
            reason="menu location was never declared",
            error=MissingLocationError,
            location=str(key),
        )

    def _check_mutable(self, operation: str) -> None:
        if self._frozen:
            never("menu tree is frozen", error=FrozenTreeError, operation=operation)
