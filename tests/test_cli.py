from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from gm_manifest import cli
from gm_manifest.contributes import build_manifest


def test_cli_help_lists_commands() -> None:
    result = CliRunner().invoke(cli.app, ["--help"])
    assert result.exit_code == 0
    assert "build" in result.output
    assert "check" in result.output


def test_build_prints_manifest_to_stdout() -> None:
    result = CliRunner().invoke(cli.app, ["build"])
    assert result.exit_code == 0, result.output
    assert result.stdout == build_manifest().to_json()


def test_build_writes_output_and_command_ids(tmp_path: Path) -> None:
    output = tmp_path / "out" / "contributes.json"
    command_ids = tmp_path / "commands.ts"
    result = CliRunner().invoke(
        cli.app,
        ["build", "--output", str(output), "--command-ids", str(command_ids), "--indent", "2"],
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["commands"][0]["command"] == "gmVfs.reloadWorkspace"
    assert output.read_text(encoding="utf-8").startswith('{\n  "commands"')
    assert "export const enum Command" in command_ids.read_text(encoding="utf-8")


def test_build_honours_config_file(tmp_path: Path) -> None:
    config = tmp_path / "gm-manifest.toml"
    config.write_text('[manifest]\ndraw_layout = "flat"\n')
    result = CliRunner().invoke(cli.app, ["build", "--config", str(config)])
    assert result.exit_code == 0, result.output
    draw = json.loads(result.stdout)["menus"]["gmVfs.draw"]
    assert {entry["group"].split("@")[0] for entry in draw} == {"create"}


def test_probe_bound_below_taxonomy_maximum_fails() -> None:
    result = CliRunner().invoke(cli.app, ["build", "--probe-bound", "1"])
    assert result.exit_code == 1
    assert "probe bound does not cover the event taxonomy" in result.output
    assert "gmVfs.addAlarm0" not in result.output


def test_probe_bound_from_config_below_maximum_writes_nothing(tmp_path: Path) -> None:
    config = tmp_path / "gm-manifest.toml"
    config.write_text("[manifest]\nprobe_bound = 20\n")
    output = tmp_path / "contributes.json"
    result = CliRunner().invoke(
        cli.app, ["build", "--config", str(config), "--output", str(output)]
    )
    assert result.exit_code == 1
    assert not output.exists()


def test_check_detects_stale_manifest(tmp_path: Path) -> None:
    path = tmp_path / "contributes.json"
    path.write_text(build_manifest().to_json(), encoding="utf-8")
    result = CliRunner().invoke(cli.app, ["check", str(path)])
    assert result.exit_code == 0, result.output
    assert "up to date" in result.stdout

    path.write_text("{}\n", encoding="utf-8")
    result = CliRunner().invoke(cli.app, ["check", str(path)])
    assert result.exit_code == 1


def test_check_missing_file(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli.app, ["check", str(tmp_path / "absent.json")])
    assert result.exit_code == 1


def test_check_accepts_build_overrides(tmp_path: Path) -> None:
    path = tmp_path / "contributes.json"
    built = CliRunner().invoke(
        cli.app, ["build", "--output", str(path), "--indent", "2", "--draw-layout", "flat"]
    )
    assert built.exit_code == 0, built.output

    result = CliRunner().invoke(
        cli.app, ["check", str(path), "--indent", "2", "--draw-layout", "flat"]
    )
    assert result.exit_code == 0, result.output
    assert "up to date" in result.stdout

    result = CliRunner().invoke(cli.app, ["check", str(path)])
    assert result.exit_code == 1
