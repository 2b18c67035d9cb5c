"""Terminal palettes: colors cytheme uses for its own console output."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    """Semantic color roles for cytheme's console UI."""

    name: str
    accent: str  # table titles, status spinner
    css_border: str  # theme.css panel
    js_border: str  # theme.js panel
    motd_border: str  # motd.html panel
    flag_name: str  # flag names in the effects table
    success: str  # "Copied" / "Wrote" notices
    error: str  # error text
    warning: str  # warnings
    syntax: str  # pygments style for code panels


PALETTES: dict[str, Palette] = {
    "default": Palette(
        name="default",
        accent="magenta",
        css_border="cyan",
        js_border="yellow",
        motd_border="green",
        flag_name="bold white",
        success="green",
        error="bold red",
        warning="yellow",
        syntax="monokai",
    ),
    "light": Palette(
        name="light",
        accent="blue",
        css_border="rgb(0,100,150)",
        js_border="rgb(180,120,0)",
        motd_border="rgb(0,130,60)",
        flag_name="bold black",
        success="rgb(0,130,60)",
        error="bold red",
        warning="rgb(180,120,0)",
        syntax="friendly",
    ),
    "dracula": Palette(
        name="dracula",
        accent="rgb(189,147,249)",  # dracula purple
        css_border="rgb(139,233,253)",  # dracula cyan
        js_border="rgb(241,250,140)",  # dracula yellow
        motd_border="rgb(80,250,123)",  # dracula green
        flag_name="bold rgb(248,248,242)",  # dracula foreground
        success="rgb(80,250,123)",
        error="bold rgb(255,85,85)",  # dracula red
        warning="rgb(255,184,108)",  # dracula orange
        syntax="dracula",
    ),
}

PALETTE_NAMES = sorted(PALETTES.keys())

# Module-level active palette, set at startup
_active_palette: Palette = PALETTES["default"]


def set_palette(name: str) -> None:
    """Set the active palette by name."""
    global _active_palette
    _active_palette = PALETTES[name]


def get_palette() -> Palette:
    return _active_palette
