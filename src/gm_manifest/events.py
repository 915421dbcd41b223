"""GameMaker object event taxonomy.

Events are addressed the way object event files are named on disk,
`<Category>_<index>.gml`. `GameMakerEvents.try_event` answers whether a given
`(category, index)` slot holds an event, which is how the command synthesizer
discovers the taxonomy without hard-coding its size.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Protocol

from gm_manifest.exceptions import ClassificationError
from gm_manifest.invariants import never


class EventCategory(str, Enum):
    CREATE = "Create"
    DESTROY = "Destroy"
    CLEAN_UP = "CleanUp"
    STEP = "Step"
    ALARM = "Alarm"
    DRAW = "Draw"
    OTHER = "Other"

    @property
    def rank(self) -> int:
        return _CATEGORY_RANKS[self]

    @classmethod
    def parse(cls, value: "EventCategory | str") -> "EventCategory":
        if isinstance(value, EventCategory):
            return value
        for candidate in cls:
            if candidate.value == value:
                return candidate
        never(
            "unknown event category",
            error=ClassificationError,
            category=value,
            allowed=[candidate.value for candidate in cls],
        )


_CATEGORY_RANKS: Mapping[EventCategory, int] = {
    category: rank for rank, category in enumerate(EventCategory)
}


class DrawStage(str, Enum):
    MAIN = "main"
    BEGIN = "begin"
    END = "end"
    PRE = "pre"
    POST = "post"
    RESIZE = "resize"


class OtherSubtype(str, Enum):
    PLAIN = "plain"
    VIEW = "view"
    USER = "user"
    ASYNC = "async"


@functools.total_ordering
@dataclass(frozen=True)
class EventDescriptor:
    category: EventCategory
    index: int
    name: str
    stage: DrawStage | None = None
    subtype: OtherSubtype | None = None

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.category.rank, self.index)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EventDescriptor):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return self.name


class EventEnumerator(Protocol):
    def try_event(
        self, category: EventCategory | str, index: int
    ) -> EventDescriptor | None:
        """Return the event in slot `index` of `category`, or None if empty."""
        ...


def _numbered(prefix: str, start: int, count: int) -> dict[int, str]:
    return {start + offset: f"{prefix} {offset}" for offset in range(count)}


_SINGLETON_NAMES: Mapping[EventCategory, str] = {
    EventCategory.CREATE: "Create",
    EventCategory.DESTROY: "Destroy",
    EventCategory.CLEAN_UP: "Clean Up",
}

_STEP_EVENTS: Mapping[int, str] = {0: "Step", 1: "Begin Step", 2: "End Step"}

_DRAW_EVENTS: Mapping[int, tuple[str, DrawStage]] = {
    0: ("Draw", DrawStage.MAIN),
    64: ("Draw GUI", DrawStage.MAIN),
    65: ("Window Resize", DrawStage.RESIZE),
    72: ("Draw Begin", DrawStage.BEGIN),
    73: ("Draw End", DrawStage.END),
    74: ("Draw GUI Begin", DrawStage.BEGIN),
    75: ("Draw GUI End", DrawStage.END),
    76: ("Pre-Draw", DrawStage.PRE),
    77: ("Post-Draw", DrawStage.POST),
}

_ASYNC_EVENTS: Mapping[int, str] = {
    60: "Image Loaded",
    62: "HTTP",
    63: "Dialog",
    66: "In-App Purchase",
    67: "Cloud",
    68: "Networking",
    69: "Steam",
    70: "Social",
    71: "Push Notification",
    72: "Save/Load",
    73: "Audio Recording",
    74: "Audio Playback",
    75: "System",
}


def _other_events() -> dict[int, tuple[str, OtherSubtype]]:
    events: dict[int, tuple[str, OtherSubtype]] = {
        0: ("Outside Room", OtherSubtype.PLAIN),
        1: ("Intersect Boundary", OtherSubtype.PLAIN),
        2: ("Game Start", OtherSubtype.PLAIN),
        3: ("Game End", OtherSubtype.PLAIN),
        4: ("Room Start", OtherSubtype.PLAIN),
        5: ("Room End", OtherSubtype.PLAIN),
        7: ("Animation End", OtherSubtype.PLAIN),
        8: ("Path Ended", OtherSubtype.PLAIN),
        58: ("Animation Update", OtherSubtype.PLAIN),
        59: ("Animation Event", OtherSubtype.PLAIN),
        76: ("Broadcast Message", OtherSubtype.PLAIN),
    }
    for index, name in _numbered("User Event", 10, 16).items():
        events[index] = (name, OtherSubtype.USER)
    for index, name in _numbered("Outside View", 40, 8).items():
        events[index] = (name, OtherSubtype.VIEW)
    for index, name in _numbered("Intersect View", 50, 8).items():
        events[index] = (name, OtherSubtype.VIEW)
    for index, name in _ASYNC_EVENTS.items():
        events[index] = (f"Async - {name}", OtherSubtype.ASYNC)
    return events


_OTHER_EVENTS: Mapping[int, tuple[str, OtherSubtype]] = _other_events()

MAX_EVENT_INDEX = max(
    max(_STEP_EVENTS),
    max(_DRAW_EVENTS),
    max(_OTHER_EVENTS),
    11,
)


class GameMakerEvents:
    """Default enumerator over the GameMaker object event taxonomy."""

    max_index = MAX_EVENT_INDEX

    def try_event(
        self, category: EventCategory | str, index: int
    ) -> EventDescriptor | None:
        category = EventCategory.parse(category)
        if category in (EventCategory.CREATE, EventCategory.DESTROY, EventCategory.CLEAN_UP):
            if index != 0:
                return None
            return EventDescriptor(category, 0, _SINGLETON_NAMES[category])
        if category is EventCategory.STEP:
            name = _STEP_EVENTS.get(index)
            return None if name is None else EventDescriptor(category, index, name)
        if category is EventCategory.ALARM:
            if not 0 <= index < 12:
                return None
            return EventDescriptor(category, index, f"Alarm {index}")
        if category is EventCategory.DRAW:
            draw = _DRAW_EVENTS.get(index)
            if draw is None:
                return None
            return EventDescriptor(category, index, draw[0], stage=draw[1])
        if category is EventCategory.OTHER:
            other = _OTHER_EVENTS.get(index)
            if other is None:
                return None
            return EventDescriptor(category, index, other[0], subtype=other[1])
        never("unhandled event category", error=ClassificationError, category=category)
