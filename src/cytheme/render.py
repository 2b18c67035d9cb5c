"""Rich-based rendering for generated outputs, the flag catalogue, and errors."""

import itertools
import threading

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from cytheme.effects import EFFECTS, GROUPS, MOTD_FLAGS
from cytheme.features import FEATURES
from cytheme.generator import OUTPUT_FILES, OUTPUT_KINDS, GeneratedTheme
from cytheme.model import CssEffects, JavascriptConfig, ThemeConfig, camel, json_names
from cytheme.themes import get_palette

console = Console()
err_console = Console(stderr=True)

SPINNER = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"

_LEXERS = {"css": "css", "js": "javascript", "motd": "html"}
_TITLES = {"css": "CSS", "js": "JavaScript", "motd": "MOTD HTML"}


class GeneratingStatus:
    """Cycles status messages via Rich Live while a generation request is pending."""

    def __init__(self, messages: tuple[str, ...] | list[str], interval: float = 2.0) -> None:
        self._messages = list(messages)
        self._interval = interval
        self._live = Live(Text(""), console=console, refresh_per_second=10, transient=True)
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def __enter__(self) -> "GeneratingStatus":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def start(self) -> None:
        self._live.start()
        self._stop.clear()
        self._thread = threading.Thread(target=self._animate, daemon=True)
        self._thread.start()

    def _animate(self) -> None:
        """Advance the spinner every tick and the message every ``interval`` seconds."""
        accent = get_palette().accent
        tick = 0.1
        per_message = max(1, round(self._interval / tick))
        for step in itertools.count():
            if self._stop.is_set():
                return
            message = self._messages[(step // per_message) % len(self._messages)]
            frame = SPINNER[step % len(SPINNER)]
            self._live.update(Text.assemble((f"{frame} ", accent), (message, "dim")))
            self._stop.wait(tick)

    def stop(self) -> None:
        if self._thread and self._thread.is_alive():
            self._stop.set()
            self._thread.join(timeout=0.5)
            self._thread = None
        self._live.stop()


def _border(kind: str) -> str:
    palette = get_palette()
    return {"css": palette.css_border, "js": palette.js_border, "motd": palette.motd_border}[kind]


def render_output(kind: str, text: str) -> None:
    """Render one output in a titled panel with syntax highlighting."""
    syntax = Syntax(text, _LEXERS[kind], theme=get_palette().syntax, word_wrap=True)
    console.print(
        Panel(
            syntax,
            border_style=_border(kind),
            title=f"{_TITLES[kind]} [dim]({OUTPUT_FILES[kind]})[/dim]",
            title_align="left",
        )
    )


def render_outputs(generated: GeneratedTheme, only: str | None = None) -> None:
    for kind in OUTPUT_KINDS:
        if only is None or only == kind:
            render_output(kind, generated.get(kind))


def _mark(enabled: bool | None) -> str:
    if enabled is None:
        return ""
    return "[green]on[/green]" if enabled else "[dim]off[/dim]"


def render_effects_table(theme: ThemeConfig | None = None) -> None:
    """List every effect and feature flag by group, with its --set path.

    When ``theme`` is given, an extra column shows whether each flag is on.
    """
    palette = get_palette()
    css_names = json_names(CssEffects)
    js_names = json_names(JavascriptConfig)

    table = Table(title="Effects & Features", border_style="dim", title_style=palette.accent)
    table.add_column("Group", style="dim")
    table.add_column("Flag", style=palette.flag_name)
    table.add_column("Name")
    if theme is not None:
        table.add_column("State", justify="center")

    def add(group: str, path: str, label: str, on: bool | None) -> None:
        row = [group, path, label]
        if theme is not None:
            row.append(_mark(on))
        table.add_row(*row)

    for group in GROUPS:
        for block in EFFECTS:
            if block.group != group.key:
                continue
            on = getattr(theme.css_effects, block.flag) if theme is not None else None
            add(group.title, f"cssEffects.{css_names[block.flag]}", block.label, on)

    for flag in MOTD_FLAGS:
        on = getattr(theme.css_effects, flag) if theme is not None else None
        add("MOTD", f"cssEffects.{css_names[flag]}", flag.replace("_", " ").title(), on)

    for feature in FEATURES:
        names = js_names if feature.section == "javascript" else css_names
        on = feature.enabled(theme) if theme is not None else None
        add("JavaScript", f"{camel(feature.section)}.{names[feature.flag]}", feature.label, on)

    console.print(table)
    console.print("\n[dim]Toggle a flag with: cytheme render --set <Flag>=true[/dim]")


def render_notice(msg: str, err: bool = False) -> None:
    palette = get_palette()
    (err_console if err else console).print(f"[{palette.success}]{msg}[/{palette.success}]")


def render_warning(msg: str, err: bool = False) -> None:
    palette = get_palette()
    (err_console if err else console).print(f"[{palette.warning}]Warning:[/{palette.warning}] {msg}")


def render_error(msg: str) -> None:
    """Render an error message in red."""
    palette = get_palette()
    console.print(f"[{palette.error}]Error:[/{palette.error}] {msg}")


def render_summary(theme: ThemeConfig, generated: GeneratedTheme) -> None:
    """One-panel overview of a generated theme: MOTD text and what got enabled."""
    palette = get_palette()
    css_names = json_names(CssEffects)
    enabled = [css_names[block.flag] for block in EFFECTS if getattr(theme.css_effects, block.flag)]
    features = [feature.label for feature in FEATURES if feature.enabled(theme)]
    lines = [
        Text.assemble(("Title: ", "bold"), theme.motd.title or "-"),
        Text.assemble(("Subtitle: ", "bold"), theme.motd.subtitle or "-"),
        Text.assemble(("Font: ", "bold"), theme.font_family_name or "-"),
        Text.assemble(("Effects: ", "bold"), ", ".join(enabled) or "-"),
        Text.assemble(("Features: ", "bold"), ", ".join(features) or "-"),
        Text(f"{len(generated.css.splitlines())} lines of CSS", style="dim"),
    ]
    console.print(Panel(Group(*lines), border_style=palette.accent, title="Theme", title_align="left"))
