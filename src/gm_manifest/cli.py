from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from gm_manifest.classify import ClassifierConfig, DrawLayout
from gm_manifest.config import as_choice, as_int, manifest_defaults, merge_payload, TomlTable
from gm_manifest.contributes import Manifest, build_manifest
from gm_manifest.emission import render_command_ids
from gm_manifest.exceptions import ManifestError
from gm_manifest.runtime.json_io import write_text_if_changed
from gm_manifest.synthesis.model import DEFAULT_PROBE_BOUND, SynthesisConfig

app = typer.Typer(add_completion=False, help="Generate the gm-code extension contributes manifest.")

_DEFAULT_INDENT = 4
_DRAW_LAYOUTS = tuple(layout.value for layout in DrawLayout)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_options(
    config: Optional[Path],
    *,
    probe_bound: Optional[int],
    draw_layout: Optional[str],
    indent: Optional[int],
) -> TomlTable:
    defaults = manifest_defaults(config_path=config)
    return merge_payload(
        {"probe_bound": probe_bound, "draw_layout": draw_layout, "indent": indent},
        defaults,
    )


def _build(options: TomlTable) -> Manifest:
    return build_manifest(
        synthesis_config=SynthesisConfig(
            probe_bound=as_int(options.get("probe_bound"), DEFAULT_PROBE_BOUND)
        ),
        classifier_config=ClassifierConfig(
            draw_layout=DrawLayout(
                as_choice(options.get("draw_layout"), _DRAW_LAYOUTS, DrawLayout.STAGED.value)
            )
        ),
    )


def _render(options: TomlTable) -> tuple[Manifest, str]:
    manifest = _build(options)
    return manifest, manifest.to_json(indent=as_int(options.get("indent"), _DEFAULT_INDENT))


@app.command()
def build(
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the manifest here instead of stdout."
    ),
    command_ids: Optional[Path] = typer.Option(
        None, "--command-ids", help="Also write the TypeScript command id enum."
    ),
    config: Optional[Path] = typer.Option(None, "--config"),
    probe_bound: Optional[int] = typer.Option(None, "--probe-bound", min=1),
    draw_layout: Optional[str] = typer.Option(None, "--draw-layout", help="staged or flat"),
    indent: Optional[int] = typer.Option(None, "--indent", min=0),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Build the contributes manifest."""
    _configure_logging(verbose)
    options = _resolve_options(
        config, probe_bound=probe_bound, draw_layout=draw_layout, indent=indent
    )
    try:
        manifest, text = _render(options)
    except ManifestError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1)
    if output is None:
        typer.echo(text, nl=False)
    else:
        changed = write_text_if_changed(output, text)
        typer.echo(f"{'Wrote' if changed else 'Unchanged'} manifest: {output}", err=True)
    if command_ids is not None:
        changed = write_text_if_changed(command_ids, render_command_ids(manifest.commands))
        typer.echo(f"{'Wrote' if changed else 'Unchanged'} command ids: {command_ids}", err=True)


@app.command()
def check(
    path: Path = typer.Argument(..., help="Previously generated manifest."),
    config: Optional[Path] = typer.Option(None, "--config"),
    probe_bound: Optional[int] = typer.Option(None, "--probe-bound", min=1),
    draw_layout: Optional[str] = typer.Option(None, "--draw-layout", help="staged or flat"),
    indent: Optional[int] = typer.Option(None, "--indent", min=0),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Fail when PATH differs from a fresh build with the same options."""
    _configure_logging(verbose)
    options = _resolve_options(
        config, probe_bound=probe_bound, draw_layout=draw_layout, indent=indent
    )
    try:
        _manifest, text = _render(options)
    except ManifestError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1)
    try:
        current = path.read_text(encoding="utf-8")
    except OSError as exc:
        typer.echo(f"error: cannot read {path}: {exc}", err=True)
        raise typer.Exit(code=1)
    if current != text:
        typer.echo(f"{path} is stale; run `gm-manifest build --output {path}`.", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{path} is up to date.")


def main() -> None:  # pragma: no cover
    app()
