from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from gm_manifest.order_contract import OrderPolicy, ordered_or_sorted


def canonicalize_json(value: object) -> object:
    """Recursively order mapping keys; sequences keep their order."""
    if isinstance(value, Mapping):
        ordered_items = ordered_or_sorted(
            ((str(key), canonicalize_json(item_value)) for key, item_value in value.items()),
            source="json_io.canonicalize_json.mapping_items",
            key=lambda item: item[0],
            policy=OrderPolicy.SORT,
        )
        return {key: item_value for key, item_value in ordered_items}
    if isinstance(value, (list, tuple)):
        return [canonicalize_json(item) for item in value]
    return value


def dump_json_pretty(payload: object, *, indent: int = 4) -> str:
    return json.dumps(canonicalize_json(payload), indent=indent, sort_keys=False) + "\n"


def write_text_if_changed(path: Path, text: str) -> bool:
    try:
        if path.read_text(encoding="utf-8") == text:
            return False
    except FileNotFoundError:
        pass
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return True
