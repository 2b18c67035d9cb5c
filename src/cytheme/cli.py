"""Entry point: click CLI, logging setup, config resolution."""

import asyncio
import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from cytheme.ai import LOADING_MESSAGES, ThemeGenerationError, ThemeGenerator
from cytheme.clipboard import copy_to_clipboard
from cytheme.config import DEFAULTS, load_config, resolve
from cytheme.generator import OUTPUT_KINDS, generate_theme, write_outputs
from cytheme.model import (
    ThemeConfig,
    ThemeFieldError,
    add_user_style,
    default_theme,
    set_field,
    theme_from_dict,
    theme_to_dict,
)
from cytheme.render import (
    GeneratingStatus,
    render_effects_table,
    render_error,
    render_notice,
    render_outputs,
    render_summary,
    render_warning,
)
from cytheme.themes import PALETTE_NAMES, PALETTES, set_palette

log = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Route the package's log records to stderr through Rich."""
    logger = logging.getLogger("cytheme")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)


def load_theme_file(path: Path) -> ThemeConfig:
    """Read a theme JSON file, filling anything missing from the defaults."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.BadParameter(
            f"{path} is not valid JSON ({e.msg} at line {e.lineno})", param_hint="THEME_FILE"
        ) from e
    if not isinstance(data, dict):
        raise click.BadParameter(f"{path} must contain a JSON object", param_hint="THEME_FILE")
    log.debug("Loaded theme from %s", path)
    return theme_from_dict(data)


def save_theme_file(path: Path, theme: ThemeConfig) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(theme_to_dict(theme), indent=2) + "\n", encoding="utf-8")


def apply_assignment(theme: ThemeConfig, assignment: str) -> None:
    """Apply one ``PATH=VALUE`` edit, e.g. ``cssEffects.videowrapTvScanlines=true``."""
    path, sep, value = assignment.partition("=")
    if not sep or not path.strip():
        raise click.BadParameter(f"expected PATH=VALUE, got {assignment!r}", param_hint="--set")
    try:
        set_field(theme, path.strip(), value)
    except ThemeFieldError as e:
        raise click.BadParameter(str(e), param_hint="--set") from e


USER_ENTRY_FIELDS = ("username", "custom_name", "color", "font_family", "hide_original")


def apply_user_entry(theme: ThemeConfig, entry: str) -> None:
    """Add a user style from ``username[:customName[:color[:font[:hide]]]]``; empty parts keep defaults."""
    parts = entry.split(":")
    if len(parts) > len(USER_ENTRY_FIELDS) or not parts[0].strip():
        raise click.BadParameter(
            f"expected username[:customName[:color[:font[:hide]]]], got {entry!r}", param_hint="--user"
        )
    values = {name: part.strip() for name, part in zip(USER_ENTRY_FIELDS, parts) if part.strip()}
    try:
        add_user_style(theme, **values)
    except ThemeFieldError as e:
        raise click.BadParameter(str(e), param_hint="--user") from e


def _write_dir(generated, out_dir: Path, err: bool = False) -> None:
    for path in write_outputs(generated, out_dir):
        render_notice(f"Wrote {path}", err=err)


def _copy(generated, kind: str, err: bool = False) -> None:
    if copy_to_clipboard(generated.get(kind)):
        render_notice(f"Copied {kind} to clipboard.", err=err)
    else:
        render_warning("No clipboard command found (tried pbcopy, wl-copy, xclip, xsel, clip).", err=err)


@click.group()
@click.version_option(package_name="cytheme")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Path to config file (default: ~/.config/cytheme/config.toml).")
@click.option("--palette", default=None, type=click.Choice(PALETTE_NAMES, case_sensitive=False), help="Console color palette (default, light, dracula).")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, palette: str | None, verbose: bool) -> None:
    """Build Cytube channel themes: CSS, JavaScript and MOTD HTML."""
    setup_logging(verbose)
    cfg = load_config(config_path)

    palette_name = resolve(palette, cfg.get("palette"), DEFAULTS["palette"]).lower()
    if palette_name not in PALETTES:
        render_error(f"Unknown palette '{palette_name}'. Options: {', '.join(PALETTE_NAMES)}")
        raise SystemExit(1)
    set_palette(palette_name)
    ctx.obj = cfg


@main.command()
@click.argument("theme_file", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--set", "assignments", multiple=True, metavar="PATH=VALUE", help="Set a field, e.g. foundation.bodyBgColor=#000000 (repeatable).")
@click.option("--user", "users", multiple=True, metavar="ENTRY", help="Add a user style: username[:customName[:color[:font[:hide]]]] (repeatable).")
@click.option("--only", default=None, type=click.Choice(OUTPUT_KINDS), help="Print just this output, undecorated.")
@click.option("--out", "out_dir", default=None, type=click.Path(file_okay=False, path_type=Path), help="Write theme.css, theme.js and motd.html into this directory.")
@click.option("--copy", "copy_kind", default=None, type=click.Choice(OUTPUT_KINDS), help="Copy this output to the clipboard.")
@click.option("--save", "save_path", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Save the resulting theme JSON to this file.")
@click.pass_obj
def render(
    cfg: dict,
    theme_file: Path | None,
    assignments: tuple[str, ...],
    users: tuple[str, ...],
    only: str | None,
    out_dir: Path | None,
    copy_kind: str | None,
    save_path: Path | None,
) -> None:
    """Render a theme file (or the defaults) into CSS, JavaScript and MOTD HTML."""
    theme = load_theme_file(theme_file) if theme_file else default_theme()
    for assignment in assignments:
        apply_assignment(theme, assignment)
    for entry in users:
        apply_user_entry(theme, entry)

    generated = generate_theme(theme)

    # With --only, stdout carries nothing but the raw output.
    to_stderr = only is not None
    if only:
        click.echo(generated.get(only))
    elif out_dir is None:
        render_outputs(generated)

    out_dir = resolve(out_dir, cfg.get("output_dir"), DEFAULTS["output_dir"])
    if out_dir is not None:
        _write_dir(generated, Path(out_dir), err=to_stderr)
    if save_path is not None:
        save_theme_file(save_path, theme)
        render_notice(f"Saved theme to {save_path}", err=to_stderr)
    if copy_kind:
        _copy(generated, copy_kind, err=to_stderr)


@main.command()
@click.argument("prompt")
@click.option("--model", default=None, help="Gemini model name.")
@click.option("--base-url", default=None, help="Base URL of the Gemini REST API.")
@click.option("--api-key-env", default=None, help="Environment variable holding the API key (default: API_KEY, then GEMINI_API_KEY).")
@click.option("--save", "save_path", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Save the generated theme JSON to this file.")
@click.option("--out", "out_dir", default=None, type=click.Path(file_okay=False, path_type=Path), help="Write theme.css, theme.js and motd.html into this directory.")
@click.option("--show/--no-show", default=True, help="Print the generated outputs.")
@click.pass_obj
def generate(
    cfg: dict,
    prompt: str,
    model: str | None,
    base_url: str | None,
    api_key_env: str | None,
    save_path: Path | None,
    out_dir: Path | None,
    show: bool,
) -> None:
    """Generate a whole theme from a free-text description with Gemini."""
    generator = ThemeGenerator(
        model=resolve(model, cfg.get("model"), DEFAULTS["model"]),
        base_url=resolve(base_url, cfg.get("base_url"), DEFAULTS["base_url"]),
        api_key_env=resolve(api_key_env, cfg.get("api_key_env"), DEFAULTS["api_key_env"]),
    )
    interval = float(resolve(None, cfg.get("status_interval"), DEFAULTS["status_interval"]))

    try:
        with GeneratingStatus(LOADING_MESSAGES, interval=interval):
            theme = asyncio.run(generator.generate(prompt))
    except ThemeGenerationError as e:
        render_error(str(e))
        raise SystemExit(1)

    generated = generate_theme(theme)
    render_summary(theme, generated)
    if show:
        render_outputs(generated)

    out_dir = resolve(out_dir, cfg.get("output_dir"), DEFAULTS["output_dir"])
    if out_dir is not None:
        _write_dir(generated, Path(out_dir))
    if save_path is not None:
        save_theme_file(save_path, theme)
        render_notice(f"Saved theme to {save_path}")


@main.command()
def defaults() -> None:
    """Print the default theme as JSON, a starting point for a theme file."""
    click.echo(json.dumps(theme_to_dict(default_theme()), indent=2))


@main.command()
@click.argument("theme_file", required=False, type=click.Path(exists=True, dir_okay=False, path_type=Path))
def effects(theme_file: Path | None) -> None:
    """List every effect and feature flag, optionally with a theme's on/off state."""
    theme = load_theme_file(theme_file) if theme_file else None
    render_effects_table(theme)


if __name__ == "__main__":
    main()
