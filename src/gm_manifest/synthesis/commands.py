from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from gm_manifest.events import EventCategory, EventDescriptor, EventEnumerator, GameMakerEvents
from gm_manifest.exceptions import ProbeBoundError
from gm_manifest.invariants import never
from gm_manifest.order_contract import OrderPolicy, ordered_or_sorted
from gm_manifest.synthesis.model import Command, SynthesisConfig
from gm_manifest.synthesis.naming import add_event_command_id, event_enablement

logger = logging.getLogger(__name__)


def command_for_event(event: EventDescriptor, *, category: str = "Create") -> Command:
    return Command(
        command=add_event_command_id(event.name),
        title=event.name,
        category=category,
        enablement=event_enablement(event.name),
        event=event,
    )


@dataclass
class CommandSynthesizer:
    enumerator: EventEnumerator = field(default_factory=GameMakerEvents)
    config: SynthesisConfig = field(default_factory=SynthesisConfig)

    def check_probe_bound(self) -> None:
        # Enumerators that publish `max_index` must be probed past it.
        max_index = getattr(self.enumerator, "max_index", None)
        if max_index is None or self.config.probe_bound > max_index:
            return
        never(
            "probe bound does not cover the event taxonomy",
            error=ProbeBoundError,
            probe_bound=self.config.probe_bound,
            max_index=max_index,
        )

    def synthesize(self, category: EventCategory | str) -> List[Command]:
        """Probe every slot below the bound and wrap each event found.

        An empty slot is not an error; the enumerator decides which indices
        exist. The result is sorted by source event.
        """
        category = EventCategory.parse(category)
        self.check_probe_bound()
        commands: List[Command] = []
        for index in range(self.config.probe_bound):
            event = self.enumerator.try_event(category, index)
            if event is None:
                continue
            commands.append(
                command_for_event(event, category=self.config.command_category)
            )
        logger.debug(
            "synthesized %d command(s) for %s within probe bound %d",
            len(commands),
            category.value,
            self.config.probe_bound,
        )
        return ordered_or_sorted(
            commands,
            source=f"CommandSynthesizer.synthesize.{category.value}",
            key=Command.sort_key,
            policy=OrderPolicy.SORT,
        )

    def synthesize_all(self) -> Dict[EventCategory, List[Command]]:
        self.check_probe_bound()
        return {category: self.synthesize(category) for category in EventCategory}
