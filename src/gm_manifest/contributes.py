from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from gm_manifest.baseline import StaticDocuments, default_commands, default_static_documents
from gm_manifest.classify import ClassifierConfig, TaxonomyClassifier
from gm_manifest.events import EventEnumerator, GameMakerEvents
from gm_manifest.exceptions import DuplicateIdentifierError
from gm_manifest.invariants import never
from gm_manifest.json_types import JSONObject
from gm_manifest.menus.tree import MenuTree
from gm_manifest.runtime.json_io import dump_json_pretty
from gm_manifest.schema import ManifestDTO
from gm_manifest.synthesis.commands import CommandSynthesizer
from gm_manifest.synthesis.model import Command, SynthesisConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Manifest:
    commands: tuple[Command, ...]
    menus: MenuTree
    static_documents: StaticDocuments = field(repr=False)

    def to_payload(self) -> JSONObject:
        menus = self.menus.to_payload()
        payload: JSONObject = {
            "commands": [command.to_payload() for command in self.commands],
            "menus": menus["menus"],
            "submenus": menus["submenus"],
            "taskDefinitions": self.static_documents.task_definitions,
            "configuration": self.static_documents.configuration,
            "views": self.static_documents.views,
        }
        ManifestDTO.model_validate(payload)
        return payload

    def to_json(self, *, indent: int = 4) -> str:
        return dump_json_pretty(self.to_payload(), indent=indent)


def _check_unique(identifiers: Iterable[str], *, kind: str) -> None:
    seen: set[str] = set()
    for identifier in identifiers:
        if identifier in seen:
            never(
                f"duplicate {kind} identifier",
                error=DuplicateIdentifierError,
                identifier=identifier,
            )
        seen.add(identifier)


def assemble(
    menu_tree: MenuTree,
    synthesized_commands: Sequence[Command],
    *,
    baseline_commands: Sequence[Command] | None = None,
    static_documents: StaticDocuments | None = None,
) -> Manifest:
    baseline = list(default_commands() if baseline_commands is None else baseline_commands)
    commands: List[Command] = baseline + list(synthesized_commands)
    _check_unique((command.command for command in commands), kind="command")
    _check_unique((submenu.id for submenu in menu_tree.submenus), kind="submenu")
    menu_tree.freeze()
    logger.debug(
        "assembled %d baseline + %d synthesized command(s), %d submenu(s)",
        len(baseline),
        len(synthesized_commands),
        len(menu_tree.submenus),
    )
    return Manifest(
        commands=tuple(commands),
        menus=menu_tree,
        static_documents=static_documents or default_static_documents(),
    )


def build_manifest(
    enumerator: EventEnumerator | None = None,
    *,
    synthesis_config: SynthesisConfig | None = None,
    classifier_config: ClassifierConfig | None = None,
) -> Manifest:
    """Run enumeration, synthesis, classification and assembly."""
    synthesizer = CommandSynthesizer(
        enumerator=enumerator or GameMakerEvents(),
        config=synthesis_config or SynthesisConfig(),
    )
    grouped = synthesizer.synthesize_all()
    classifier = TaxonomyClassifier(
        tree=MenuTree(),
        config=classifier_config or ClassifierConfig(),
    )
    pushed = classifier.classify(grouped)
    return assemble(classifier.tree, pushed)
