"""Alternate resolution calculator CLI.

This module provides the command-line interface for aspectfit: fitting
an alternate resolution to a target ratio, listing preset fits, writing
HTML/PNG previews, and configuration utilities.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Final

import typer
import yaml
from pydantic import ValidationError

from aspectfit.constants import PREVIEW_DIR, PREVIEW_HTML_NAME, PREVIEW_PNG_NAME
from aspectfit.controller import CalculatorView, ResolutionCalculator
from aspectfit.display.render import PreviewImageRenderer, TemplateRenderer
from aspectfit.ratio.presets import parse_ratio_label
from aspectfit.settings.user import UserSettings
from aspectfit.utils.formatting import format_number

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Alternate resolution calculator", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "aspectfit.cli"

CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
WIDTH_OPTION = typer.Option(None, "--width", "-W", help="Base width (default from config)")
HEIGHT_OPTION = typer.Option(None, "--height", "-H", help="Base height (default from config)")
RATIO_OPTION = typer.Option(None, "--ratio", "-r", help="Target width/height as a decimal")
PRESET_OPTION = typer.Option(None, "--preset", "-p", help="Target ratio label, e.g. 16:9")
STEP_OPTION = typer.Option(None, "--step", "-s", min=1, help="Override the dimension grid size")
LEGACY_OPTION = typer.Option(False, "--legacy", help="Use the unquantized legacy fitter")
JSON_OPTION = typer.Option(False, "--json", help="Print results as JSON")
OUTPUT_OPTION = typer.Option(Path(PREVIEW_DIR), "--output", "-o", file_okay=False)
DST_ARGUMENT = typer.Argument(..., help="Output config.yaml")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _load_settings(config: Path | None, step: int | None, legacy: bool) -> UserSettings:
    try:
        settings = UserSettings.load_or_default(config)
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    overrides: dict[str, Any] = {}
    if step is not None:
        overrides["step"] = step
    if legacy:
        overrides["legacy_fit"] = True
    return settings.model_copy(update=overrides) if overrides else settings


def _build_calculator(
    settings: UserSettings,
    width: str | None,
    height: str | None,
    ratio: float | None = None,
    preset: str | None = None,
) -> ResolutionCalculator:
    calc = ResolutionCalculator(settings)
    calc.update_base(
        width if width is not None else settings.default_width,
        height if height is not None else settings.default_height,
    )

    if preset is not None:
        preset_ratio = parse_ratio_label(preset)
        if preset_ratio <= 0:
            typer.secho(f"Not a W:H ratio: {preset}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        if settings.find_preset(preset) is not None:
            calc.apply_preset(preset)
        else:
            calc.update_ratio(preset_ratio)
    elif ratio is not None:
        calc.update_ratio(ratio)
    return calc


def _echo_view(view: CalculatorView) -> None:
    fields = view.display_fields()
    typer.echo(
        f"Base        {fields['base_width']} x {fields['base_height']} "
        f"({fields['base_pixels']} px)"
    )
    typer.echo(f"Base ratio  {fields['base_ratio']}")
    if view.ratio_range.enabled:
        typer.echo(
            f"Range       {fields['range_min']} - {fields['range_max']} "
            f"(step {fields['range_step']})"
        )
    else:
        typer.echo("Range       disabled")
    typer.echo(f"Ratio       {fields['ratio']}")
    typer.echo(
        f"Result      {fields['new_width']} x {fields['new_height']} "
        f"({fields['new_pixels']} px)"
    )
    typer.echo(f"Preview     {view.preview.width} x {view.preview.height}")


@app.command()
def compute(
    width: str | None = WIDTH_OPTION,
    height: str | None = HEIGHT_OPTION,
    ratio: float | None = RATIO_OPTION,
    preset: str | None = PRESET_OPTION,
    step: int | None = STEP_OPTION,
    legacy: bool = LEGACY_OPTION,
    config: Path | None = CONFIG_OPTION,
    as_json: bool = JSON_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Fit an alternate resolution to a target ratio within the base pixel budget."""
    _configure_logging(debug)
    settings = _load_settings(config, step, legacy)
    view = _build_calculator(settings, width, height, ratio, preset).render()

    if as_json:
        typer.echo(json.dumps(view.to_dict(), indent=2))
    else:
        _echo_view(view)


@app.command()
def presets(
    width: str | None = WIDTH_OPTION,
    height: str | None = HEIGHT_OPTION,
    step: int | None = STEP_OPTION,
    legacy: bool = LEGACY_OPTION,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """List the fitted resolution for every configured preset."""
    _configure_logging(debug)
    settings = _load_settings(config, step, legacy)
    calc = _build_calculator(settings, width, height)
    base = calc.render().base

    if not base.is_valid:
        typer.secho("Base resolution is invalid", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for preset in settings.ratio_presets():
        fitted = calc.fit(base.pixels, preset.ratio)
        typer.echo(
            f"{preset.label:>6}  {format_number(fitted.width)} x {format_number(fitted.height)} "
            f"({format_number(fitted.pixels)} px)"
        )


@app.command()
def preview(
    width: str | None = WIDTH_OPTION,
    height: str | None = HEIGHT_OPTION,
    ratio: float | None = RATIO_OPTION,
    preset: str | None = PRESET_OPTION,
    step: int | None = STEP_OPTION,
    legacy: bool = LEGACY_OPTION,
    config: Path | None = CONFIG_OPTION,
    output: Path = OUTPUT_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Write an HTML page and a PNG preview of the fitted resolution."""
    _configure_logging(debug)
    settings = _load_settings(config, step, legacy)
    view = _build_calculator(settings, width, height, ratio, preset).render()

    output.mkdir(parents=True, exist_ok=True)
    html_path = output / PREVIEW_HTML_NAME
    png_path = output / PREVIEW_PNG_NAME

    html_path.write_text(TemplateRenderer(settings).render_calculator(view), encoding="utf-8")
    PreviewImageRenderer(settings).render_to_image(view, png_path)
    logger.debug("Preview written to %s", output)

    typer.echo(f"HTML preview: {html_path}")
    typer.echo(f"PNG preview:  {png_path}")


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("wizard")
def wizard(dst: Path = DST_ARGUMENT):
    """Interactive prompt to create a config file."""
    typer.echo("Interactive config builder - press Enter for defaults.")

    while True:
        data: dict[str, Any] = {
            "default_width": typer.prompt("Base width", default=1216, type=int),
            "default_height": typer.prompt("Base height", default=896, type=int),
            "step": typer.prompt("Dimension step", default=16, type=int),
            "legacy_fit": typer.confirm("Use the unquantized legacy fitter?", default=False),
            "presets": [
                label.strip()
                for label in typer.prompt(
                    "Presets (comma separated)", default="1:1,4:3,3:2,16:9,21:9"
                ).split(",")
                if label.strip()
            ],
        }
        try:
            cfg = UserSettings(**data)
            break  # valid → exit loop
        except ValidationError as err:
            typer.secho("\nConfig error(s):", fg=typer.colors.RED, err=True)
            for e in err.errors():
                loc = e["loc"][0] if e["loc"] else "config"
                typer.secho(f"  • {loc} - {e['msg']}", fg=typer.colors.RED, err=True)
            typer.echo("Please re-enter the values.\n")

    dst.write_text(yaml.safe_dump(cfg.model_dump(), sort_keys=False), encoding="utf-8")
    typer.secho(f"Config written to {dst}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
