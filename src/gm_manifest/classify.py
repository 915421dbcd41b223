"""Route synthesized commands into the menu tree.

The category list is closed. Each category has exactly one layout:

- singleton (Create, Destroy, CleanUp): one command placed straight into the
  item context menu at a fixed slot;
- flat fanout (Step, Alarm, and Draw when configured flat): one submenu with
  every command in sequence order;
- classified fanout (Draw, Other): one submenu whose commands are routed by a
  secondary attribute of their event (draw stage, other-event subtype).

Anything outside the taxonomy aborts the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Sequence

from gm_manifest.events import DrawStage, EventCategory, EventDescriptor, OtherSubtype
from gm_manifest.exceptions import CardinalityError, ClassificationError
from gm_manifest.invariants import never
from gm_manifest.menus.model import ITEM_CONTEXT, MenuLocationKey, group_token
from gm_manifest.menus.tree import MenuTree
from gm_manifest.order_contract import enforce_ordered
from gm_manifest.synthesis.model import Command

logger = logging.getLogger(__name__)

ITEM_CONTEXT_GROUP = "create"
FLAT_GROUP = "create"
OTHER_GROUP = "other"
NESTED_SUBMENU_GROUP = "submenus"

# Slot 10 of the generic Other group is left free for an entry injected
# outside the classifier.
RESERVED_OTHER_SLOTS: frozenset[int] = frozenset({10})

_SINGLETON_SLOTS: Mapping[EventCategory, int] = {
    EventCategory.CREATE: 0,
    EventCategory.DESTROY: 1,
    EventCategory.CLEAN_UP: 2,
}

_SUBMENU_SLOTS: Mapping[EventCategory, int] = {
    EventCategory.STEP: 3,
    EventCategory.ALARM: 4,
    EventCategory.DRAW: 5,
    EventCategory.OTHER: 6,
}

_DRAW_GROUPS: Mapping[DrawStage, str] = {
    DrawStage.MAIN: "1_main",
    DrawStage.BEGIN: "2_begin",
    DrawStage.END: "3_end",
    DrawStage.PRE: "4_pre",
    DrawStage.POST: "5_post",
    DrawStage.RESIZE: "6_resize",
}

# (subtype, submenu label, group name), in nested-submenu slot order.
_OTHER_SUBMENUS: tuple[tuple[OtherSubtype, str, str], ...] = (
    (OtherSubtype.VIEW, "Views", "view"),
    (OtherSubtype.USER, "User Events", "user"),
    (OtherSubtype.ASYNC, "Async", "async"),
)


class DrawLayout(str, Enum):
    STAGED = "staged"
    FLAT = "flat"


@dataclass(frozen=True)
class ClassifierConfig:
    draw_layout: DrawLayout = DrawLayout.STAGED


@dataclass
class TaxonomyClassifier:
    tree: MenuTree
    config: ClassifierConfig = field(default_factory=ClassifierConfig)
    commands: List[Command] = field(default_factory=list)

    def classify(
        self, grouped: Mapping[EventCategory | str, Sequence[Command]]
    ) -> List[Command]:
        """Classify every category and return the commands in push order."""
        by_category = normalize_grouping(grouped)
        for category in EventCategory:
            self.classify_category(category, by_category[category])
        return list(self.commands)

    def classify_category(
        self, category: EventCategory | str, commands: Sequence[Command]
    ) -> None:
        category = EventCategory.parse(category)
        ordered = enforce_ordered(
            commands,
            source=f"TaxonomyClassifier.classify_category.{category.value}",
            key=Command.sort_key,
        )
        for command in ordered:
            _require_event(command, category)

        if category in _SINGLETON_SLOTS:
            self._place_singleton(category, ordered)
        elif category is EventCategory.STEP or category is EventCategory.ALARM:
            self._place_flat(category, ordered)
        elif category is EventCategory.DRAW:
            if self.config.draw_layout is DrawLayout.FLAT:
                self._place_flat(category, ordered)
            else:
                self._place_draw_stages(ordered)
        elif category is EventCategory.OTHER:
            self._place_other(ordered)
        else:
            never("unhandled event category", error=ClassificationError, category=category)

    def _place_singleton(self, category: EventCategory, commands: List[Command]) -> None:
        if len(commands) != 1:
            never(
                "singleton category requires exactly one command",
                error=CardinalityError,
                category=category.value,
                count=len(commands),
            )
        command = commands[0]
        self.tree.add_command_at(
            ITEM_CONTEXT,
            command,
            group_token(ITEM_CONTEXT_GROUP, _SINGLETON_SLOTS[category]),
        )
        self.commands.append(command)

    def _declare_category_submenu(self, category: EventCategory) -> MenuLocationKey:
        return self.tree.declare_submenu_at(
            ITEM_CONTEXT,
            category.value,
            group_token(ITEM_CONTEXT_GROUP, _SUBMENU_SLOTS[category]),
        )

    def _place_flat(self, category: EventCategory, commands: List[Command]) -> None:
        key = self._declare_category_submenu(category)
        for index, command in enumerate(commands):
            self.tree.add_command_at(key, command, group_token(FLAT_GROUP, index))
            self.commands.append(command)

    def _place_draw_stages(self, commands: List[Command]) -> None:
        key = self._declare_category_submenu(EventCategory.DRAW)
        counters: Dict[DrawStage, int] = {}
        for command in commands:
            stage = _event_of(command).stage
            if stage is None or stage not in _DRAW_GROUPS:
                never(
                    "draw event without a known stage",
                    error=ClassificationError,
                    command=command.command,
                    stage=stage,
                )
            index = counters.get(stage, 0)
            self.tree.add_command_at(key, command, group_token(_DRAW_GROUPS[stage], index))
            counters[stage] = index + 1
            self.commands.append(command)

    def _place_other(self, commands: List[Command]) -> None:
        key = self._declare_category_submenu(EventCategory.OTHER)
        buckets: Dict[OtherSubtype, List[Command]] = {subtype: [] for subtype in OtherSubtype}
        for command in commands:
            subtype = _event_of(command).subtype
            if subtype is None or subtype not in buckets:
                never(
                    "other event without a known subtype",
                    error=ClassificationError,
                    command=command.command,
                    subtype=subtype,
                )
            buckets[subtype].append(command)

        index = 0
        for command in buckets[OtherSubtype.PLAIN]:
            while index in RESERVED_OTHER_SLOTS:
                logger.debug("skipping reserved slot %s@%d", OTHER_GROUP, index)
                index += 1
            self.tree.add_command_at(key, command, group_token(OTHER_GROUP, index))
            self.commands.append(command)
            index += 1

        for slot, (subtype, label, group) in enumerate(_OTHER_SUBMENUS):
            bucket = buckets[subtype]
            if not bucket:
                continue
            nested = self.tree.declare_submenu_at(
                key, label, group_token(NESTED_SUBMENU_GROUP, slot)
            )
            for position, command in enumerate(bucket):
                self.tree.add_command_at(nested, command, group_token(group, position))
                self.commands.append(command)


def normalize_grouping(
    grouped: Mapping[EventCategory | str, Sequence[Command]],
) -> Dict[EventCategory, List[Command]]:
    by_category: Dict[EventCategory, List[Command]] = {}
    for raw_category, commands in grouped.items():
        category = EventCategory.parse(raw_category)
        if category in by_category:
            never(
                "category supplied twice",
                error=ClassificationError,
                category=category.value,
            )
        by_category[category] = list(commands)
    missing = [category.value for category in EventCategory if category not in by_category]
    if missing:
        never("categories missing from input", error=ClassificationError, missing=missing)
    return by_category


def _event_of(command: Command) -> EventDescriptor:
    if command.event is None:
        never(
            "command has no source event",
            error=ClassificationError,
            command=command.command,
        )
    return command.event


def _require_event(command: Command, category: EventCategory) -> None:
    event = _event_of(command)
    if event.category is not category:
        never(
            "command filed under the wrong category",
            error=ClassificationError,
            command=command.command,
            expected=category.value,
            actual=event.category.value,
        )
