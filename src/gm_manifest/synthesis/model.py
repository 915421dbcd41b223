from __future__ import annotations

from dataclasses import dataclass, field

from gm_manifest.events import EventDescriptor

DEFAULT_PROBE_BOUND = 200


@dataclass(frozen=True)
class Command:
    """A command contribution.

    Ordering is delegated to the source event, so a sorted list of commands
    follows the taxonomy rather than enumeration order. Baseline commands
    have no source event and are never sorted.
    """

    command: str
    title: str
    category: str | None = None
    enablement: str | None = None
    icon: str | None = None
    event: EventDescriptor | None = field(default=None, compare=False, repr=False)

    def sort_key(self) -> tuple[int, int]:
        if self.event is None:
            return (-1, -1)
        return self.event.sort_key

    def to_payload(self) -> dict[str, str]:
        payload = {"command": self.command, "title": self.title}
        if self.category is not None:
            payload["category"] = self.category
        if self.enablement is not None:
            payload["enablement"] = self.enablement
        if self.icon is not None:
            payload["icon"] = self.icon
        return payload


@dataclass(frozen=True)
class SynthesisConfig:
    probe_bound: int = DEFAULT_PROBE_BOUND
    command_category: str = "Create"
