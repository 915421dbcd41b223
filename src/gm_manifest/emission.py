from __future__ import annotations

from typing import Iterable, List

from gm_manifest.synthesis.model import Command
from gm_manifest.synthesis.naming import strip_namespace, to_upper_camel_case


def render_command_ids(commands: Iterable[Command], *, enum_name: str = "Command") -> str:
    """Render a TypeScript const enum listing every command identifier."""
    lines: List[str] = [
        "// Auto-generated by gm-manifest. Do not edit.",
        "",
        f"export const enum {enum_name} {{",
    ]
    for command in commands:
        member = to_upper_camel_case(strip_namespace(command.command))
        lines.append(f'    {member} = "{command.command}",')
    lines.append("}")
    return "\n".join(lines) + "\n"
