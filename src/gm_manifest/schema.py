from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict


class CommandDTO(BaseModel):
    model_config = ConfigDict(extra="forbid")

    command: str
    title: str
    category: Optional[str] = None
    enablement: Optional[str] = None
    icon: Optional[str] = None


class CommandPlacementDTO(BaseModel):
    model_config = ConfigDict(extra="forbid")

    command: str
    when: str
    group: str


class SubmenuPlacementDTO(BaseModel):
    model_config = ConfigDict(extra="forbid")

    submenu: str
    when: str
    group: str


PlacementDTO = Union[CommandPlacementDTO, SubmenuPlacementDTO]


class SubmenuDTO(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    label: str
    icon: Optional[str] = None


class ManifestDTO(BaseModel):
    model_config = ConfigDict(extra="forbid")

    commands: List[CommandDTO]
    menus: Dict[str, List[PlacementDTO]]
    submenus: List[SubmenuDTO]
    taskDefinitions: List[Any]
    configuration: Dict[str, Any]
    views: Dict[str, Any]
