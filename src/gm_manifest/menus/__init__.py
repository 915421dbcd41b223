"""Menu tree: placement entries keyed by menu location."""

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
    group_token,
)
from gm_manifest.menus.tree import MenuTree

__all__ = [
    "ITEM_CONTEXT",
    "NAVIGATION",
    "CommandPlacement",
    "LocationKind",
    "MenuLocationKey",
    "MenuTree",
    "Placement",
    "PlacementSet",
    "SubmenuDeclaration",
    "SubmenuPlacement",
    "group_token",
]
