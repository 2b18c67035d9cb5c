"""CSS rendering: foundation rules, user styles, effect blocks and advanced CSS."""

import re

from cytheme.effects import GROUPS, enabled_effects
from cytheme.features import enabled_features
from cytheme.model import Foundation, Motd, ThemeConfig, UserStyle

INDENT = "  "


def format_advanced_css(css: str) -> str:
    """Reflow raw (often minified) CSS into one statement per line, indented by brace depth.

    Whitespace-only: selectors, declarations and values are left untouched.
    """
    if not css:
        return ""
    formatted = re.sub(r"\s*([{;])\s*", r"\1\n", css)
    formatted = re.sub(r"\s*}\s*", "\n}\n", formatted)

    depth = 0
    out: list[str] = []
    for line in formatted.split("\n"):
        line = line.strip()
        if not line:
            continue
        if line.startswith("}"):
            depth = max(0, depth - 1)
        out.append(INDENT * depth + line)
        if line.endswith("{"):
            depth += 1
    return "\n".join(out) + "\n\n"


def has_motd_content(motd: Motd) -> bool:
    return bool(motd.title or motd.subtitle)


def _css_string(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")


def _motd_css(motd: Motd, pulsate: bool) -> str:
    css = "/* --- MOTD Banner --- */\n\n"
    if pulsate:
        css += (
            "@keyframes pulsate-motd-glow {\n"
            "    0% { box-shadow: 0 0 15px 0px rgba(167, 139, 250, 0.4); }\n"
            "    50% { box-shadow: 0 0 25px 8px rgba(167, 139, 250, 0.7); }\n"
            "    100% { box-shadow: 0 0 15px 0px rgba(167, 139, 250, 0.4); }\n"
            "}\n\n"
        )

    css += (
        "#motd-container {\n"
        "    position: relative;\n"
        "    text-align: center;\n"
        "    color: white;\n"
        "    max-width: 1500px;\n"
        "    margin: 0 auto;\n"
    )
    if motd.background_image_url:
        url = _css_string(motd.background_image_url)
        css += (
            "    background-image: linear-gradient(rgba(0, 0, 0, 0.5), rgba(0, 0, 0, 0.5)), "
            f"url('{url}');\n"
        )
    css += (
        "    background-size: cover;\n"
        "    background-position: center;\n"
        "    min-height: 300px;\n"
        "    display: flex;\n"
        "    flex-direction: column;\n"
        "    justify-content: center;\n"
        "    align-items: center;\n"
        "    border-radius: 12px;\n"
        "    overflow: hidden;\n"
    )
    if pulsate:
        css += "    animation: pulsate-motd-glow 4s infinite ease-in-out;\n"
    css += "}\n\n"

    css += (
        "#motd-subtitle {\n"
        "    margin: 0;\n"
        f"    color: {motd.subtitle_color};\n"
        f"    font-size: {motd.subtitle_font_size};\n"
        f"    text-shadow: {motd.subtitle_text_shadow};\n"
        "    order: 2;\n"
        "}\n\n"
        "#motd-title {\n"
        "    margin: 0;\n"
        f"    color: {motd.title_color};\n"
        f"    font-size: {motd.title_font_size};\n"
        f"    text-shadow: {motd.title_text_shadow};\n"
        "    order: 1;\n"
        "}\n\n"
    )
    return css


def _foundation_css(f: Foundation, font_family_name: str) -> str:
    css = "/* --- Foundation --- */\n\n"
    css += "body {\n"
    css += f"    background-color: {f.body_bg_color};\n"
    if font_family_name:
        css += f"    font-family: '{_css_string(font_family_name)}', sans-serif;\n"
    css += "}\n\n"
    css += f"#messagebuffer {{\n    background-color: {f.message_buffer_bg_color};\n    color: {f.chat_text_color};\n}}\n\n"
    css += f"#messagebuffer a {{\n    color: {f.link_color};\n}}\n\n"
    css += f".timestamp {{\n    color: {f.timestamp_color};\n}}\n\n"
    css += (
        "#userlist {\n"
        f"    background-color: {f.userlist_bg_color};\n"
        f"    color: {f.userlist_text_color} !important;\n"
        "}\n\n"
    )
    css += f".userlist_owner {{\n    color: {f.owner_color} !important;\n}}\n\n"

    poll_bg = "none" if f.poll_well_bg_color == "transparent" else f.poll_well_bg_color
    css += (
        "#pollwrap .well {\n"
        f"    background: {poll_bg} !important;\n"
        f"    color: {f.poll_well_color};\n"
        f"    border: solid 1px {f.poll_well_color};\n"
        "    border-radius: 10px;\n"
        "}\n\n"
    )
    css += "#queue>li {\n    background: none;\n    border-style: none;\n"
    if f.queue_item_border:
        css += "    border-bottom: solid 0.5px !important;\n"
    css += "}\n\n"
    css += (
        "#queue li.queue_active {\n"
        f"    background-color: {f.queue_active_bg_color} !important;\n"
        f"    color: {f.queue_active_text_color} !important;\n"
        "}\n\n"
    )
    css += f".navbar {{\n    background: {f.navbar_bg_color} !important;\n}}\n\n"
    return css


def user_selector(username: str) -> str:
    """Selector for a user's name in chat messages."""
    clean = re.sub(r"[^a-z0-9-]", "-", username.lower())
    return f".chat-msg-{clean} .username"


def _user_style_css(style: UserStyle) -> str:
    selector = user_selector(style.username)
    font = ""
    if style.color:
        font += f"    color: {style.color} !important;\n"
    if style.font_family:
        font += f"    font-family: '{_css_string(style.font_family)}', sans-serif !important;\n"

    if style.hide_original and style.custom_name:
        return (
            f"{selector} {{\n"
            "    font-size: 0 !important;\n"
            "}\n\n"
            f"{selector}::before {{\n"
            f"    content: '{_css_string(style.custom_name)}';\n"
            "    font-size: 1rem;\n"
            f"{font}"
            "}\n\n"
        )

    css = ""
    if font:
        css += f"{selector} {{\n{font}}}\n\n"
    if style.custom_name:
        css += f"{selector}::before {{\n    content: '{_css_string(style.custom_name)}';\n}}\n\n"
    return css


def _user_styles_css(styles: list[UserStyle]) -> str:
    if not styles:
        return ""
    css = "/* --- Custom User Styles --- */\n\n"
    for style in styles:
        if style.username:
            css += _user_style_css(style)
    return css


LAYOUT_CSS = (
    "/* --- Permanent Layout: Chat Hidden --- */\n"
    "/* This permanently hides the chat and expands the video area. */\n\n"
    "#rightpane, #chatwrap, #chatline {\n    display: none !important;\n}\n\n"
    "#leftpane {\n    width: 100% !important;\n}\n\n"
)

MISC_CSS = (
    "/* --- Miscellaneous --- */\n\n"
    "#footer {\n    background-color: rgba(0, 0, 0, 0.5) !important;\n    color: #FFFFFF !important;\n}\n\n"
    ".btn {\n    background: rgba(0, 0, 0, 0.6);\n}\n\n"
)


def _effects_css(theme: ThemeConfig) -> str:
    css = ""
    visual_header = False
    for group in GROUPS:
        blocks = enabled_effects(theme, group.key)
        if not blocks:
            continue
        if group.visual and not visual_header:
            css += "/* --- Visual Effects --- */\n\n"
            visual_header = True
        css += f"/* --- {group.title} --- */\n"
        css += "".join(block.css + "\n\n" for block in blocks)
    return css


def _feature_css(theme: ThemeConfig) -> str:
    blocks = [feature.css for feature in enabled_features(theme) if feature.css]
    if not blocks:
        return ""
    return "/* --- CSS for JS Features --- */\n\n" + "".join(b + "\n\n" for b in blocks)


def render_css(theme: ThemeConfig) -> str:
    """Render the channel stylesheet for ``theme``."""
    css = ""
    if theme.font_import_url:
        css += f"@import url('{_css_string(theme.font_import_url)}');\n\n"
    if has_motd_content(theme.motd):
        css += _motd_css(theme.motd, theme.css_effects.pulsating_motd_background)
    css += _foundation_css(theme.foundation, theme.font_family_name)
    css += _user_styles_css(theme.user_styles)
    css += LAYOUT_CSS
    css += _effects_css(theme)
    css += MISC_CSS
    css += _feature_css(theme)

    advanced = theme.advanced_css.strip()
    if advanced:
        css += "/* --- Advanced AI Generated CSS --- */\n\n"
        css += format_advanced_css(advanced)
    return css.strip()
