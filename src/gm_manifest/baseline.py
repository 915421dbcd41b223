"""Hand-authored baseline manifest fragments shipped under `defaults/`."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import List

from pydantic import ValidationError

from gm_manifest.exceptions import BaselineDocumentError
from gm_manifest.invariants import never
from gm_manifest.json_types import JSONArray, JSONObject, JSONValue
from gm_manifest.menus.model import CommandPlacement, Placement, SubmenuPlacement
from gm_manifest.schema import CommandDTO, CommandPlacementDTO, SubmenuPlacementDTO
from gm_manifest.synthesis.model import Command

DEFAULTS_DIR = Path(__file__).resolve().parent / "defaults"


@dataclass(frozen=True)
class MenuBaseline:
    navigation: List[Placement]
    item_context: List[Placement]


@dataclass(frozen=True)
class StaticDocuments:
    task_definitions: JSONArray
    configuration: JSONObject
    views: JSONObject


def _read_document(name: str) -> JSONValue:
    path = DEFAULTS_DIR / name
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        never(
            "unreadable baseline document",
            error=BaselineDocumentError,
            path=str(path),
            detail=str(exc),
        )


def _require_array(value: JSONValue, *, document: str) -> JSONArray:
    if not isinstance(value, list):
        never("baseline document must be an array", error=BaselineDocumentError, document=document)
    return value


def _require_object(value: JSONValue, *, document: str) -> JSONObject:
    if not isinstance(value, dict):
        never("baseline document must be an object", error=BaselineDocumentError, document=document)
    return value


def parse_commands(value: JSONValue, *, document: str = "commands") -> List[Command]:
    commands: List[Command] = []
    for item in _require_array(value, document=document):
        try:
            dto = CommandDTO.model_validate(item)
        except ValidationError as exc:
            raise BaselineDocumentError(
                "invalid baseline command", env={"document": document, "detail": str(exc)}
            ) from exc
        commands.append(
            Command(
                command=dto.command,
                title=dto.title,
                category=dto.category,
                enablement=dto.enablement,
                icon=dto.icon,
            )
        )
    return commands


def parse_placements(value: JSONValue, *, document: str) -> List[Placement]:
    placements: List[Placement] = []
    for item in _require_array(value, document=document):
        try:
            if isinstance(item, dict) and "submenu" in item:
                submenu = SubmenuPlacementDTO.model_validate(item)
                placements.append(
                    SubmenuPlacement(submenu=submenu.submenu, group=submenu.group, when=submenu.when)
                )
            else:
                command = CommandPlacementDTO.model_validate(item)
                placements.append(
                    CommandPlacement(command=command.command, group=command.group, when=command.when)
                )
        except ValidationError as exc:
            raise BaselineDocumentError(
                "invalid baseline placement", env={"document": document, "detail": str(exc)}
            ) from exc
    return placements


def default_commands() -> List[Command]:
    return parse_commands(_read_document("commands.json"), document="commands.json")


def default_menu_baseline() -> MenuBaseline:
    return MenuBaseline(
        navigation=parse_placements(
            _read_document("navigation_menu.json"), document="navigation_menu.json"
        ),
        item_context=parse_placements(
            _read_document("view_item_context.json"), document="view_item_context.json"
        ),
    )


def default_static_documents() -> StaticDocuments:
    return StaticDocuments(
        task_definitions=_require_array(
            _read_document("task_definitions.json"), document="task_definitions.json"
        ),
        configuration=_require_object(
            _read_document("configuration.json"), document="configuration.json"
        ),
        views=_require_object(_read_document("views.json"), document="views.json"),
    )
