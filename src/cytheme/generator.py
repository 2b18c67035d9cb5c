"""Theme generation: the three copy-paste outputs for one ThemeConfig."""

from dataclasses import dataclass
from pathlib import Path

from cytheme.model import ThemeConfig
from cytheme.motd import render_motd_html
from cytheme.script import render_js
from cytheme.stylesheet import render_css


@dataclass(frozen=True)
class GeneratedTheme:
    css: str
    js: str
    motd_html: str

    def get(self, kind: str) -> str:
        return {"css": self.css, "js": self.js, "motd": self.motd_html}[kind]


OUTPUT_KINDS = ("css", "motd", "js")

OUTPUT_FILES = {"css": "theme.css", "js": "theme.js", "motd": "motd.html"}


def generate_theme(theme: ThemeConfig) -> GeneratedTheme:
    """Render CSS, JS and MOTD HTML. Pure: same config, same text."""
    return GeneratedTheme(
        css=render_css(theme),
        js=render_js(theme),
        motd_html=render_motd_html(theme.motd),
    )


def write_outputs(generated: GeneratedTheme, out_dir: Path) -> list[Path]:
    """Write every output into ``out_dir`` (created if missing). Returns the paths written."""
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for kind in OUTPUT_KINDS:
        path = out_dir / OUTPUT_FILES[kind]
        path.write_text(generated.get(kind) + "\n", encoding="utf-8")
        written.append(path)
    return written
