from __future__ import annotations

from gm_manifest.contributes import build_manifest
from gm_manifest.emission import render_command_ids
from gm_manifest.synthesis.model import Command


def test_render_command_ids() -> None:
    text = render_command_ids(
        [
            Command(command="gmVfs.reloadWorkspace", title="Reload"),
            Command(command="gmVfs.addAsyncHttp", title="Async - HTTP"),
        ]
    )
    assert text == (
        "// Auto-generated by gm-manifest. Do not edit.\n"
        "\n"
        "export const enum Command {\n"
        '    ReloadWorkspace = "gmVfs.reloadWorkspace",\n'
        '    AddAsyncHttp = "gmVfs.addAsyncHttp",\n'
        "}\n"
    )


def test_render_command_ids_covers_every_manifest_command() -> None:
    manifest = build_manifest()
    text = render_command_ids(manifest.commands, enum_name="GmCommand")
    assert "export const enum GmCommand {" in text
    for command in manifest.commands:
        assert f'"{command.command}"' in text
