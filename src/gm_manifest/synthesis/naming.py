from __future__ import annotations

import re
from typing import List

COMMAND_NAMESPACE = "gmVfs"

# Acronym runs stay one word ("GUIBegin" -> "GUI", "Begin"), digits split off.
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def _words(value: str) -> List[str]:
    return _WORD_RE.findall(value)


def to_upper_camel_case(value: str) -> str:
    return "".join(word[:1].upper() + word[1:].lower() for word in _words(value))


def to_lower_camel_case(value: str) -> str:
    camel = to_upper_camel_case(value)
    return camel[:1].lower() + camel[1:]


def submenu_id(label: str) -> str:
    return f"{COMMAND_NAMESPACE}.{to_lower_camel_case(label)}"


def add_event_command_id(event_name: str) -> str:
    return f"{COMMAND_NAMESPACE}.add{to_upper_camel_case(event_name)}"


def event_enablement(event_name: str) -> str:
    return (
        f"view == {COMMAND_NAMESPACE} && viewItem =~ "
        f"/can{to_upper_camel_case(event_name)}Event/"
    )


def strip_namespace(identifier: str) -> str:
    prefix = f"{COMMAND_NAMESPACE}."
    if identifier.startswith(prefix):
        return identifier[len(prefix):]
    return identifier
