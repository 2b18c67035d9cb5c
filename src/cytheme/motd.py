"""MOTD banner HTML."""

from cytheme.model import Motd

EMPTY_MOTD = "<!-- No MOTD content configured. -->"


def escape_tags(text: str) -> str:
    return text.replace("<", "&lt;").replace(">", "&gt;")


def render_motd_html(motd: Motd) -> str:
    if not (motd.title or motd.subtitle):
        return EMPTY_MOTD
    return (
        "<center>\n"
        "    <br />\n"
        '    <div id="motd-container">\n'
        f'        <h2 id="motd-subtitle">{escape_tags(motd.subtitle)}</h2>\n'
        f'        <h1 id="motd-title">{escape_tags(motd.title)}</h1>\n'
        "    </div>\n"
        "</center>"
    )
