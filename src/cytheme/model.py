"""Theme configuration model: typed records, defaults, merge and field edits."""

import copy
import logging
import uuid
from dataclasses import dataclass, field, fields
from typing import Any

log = logging.getLogger(__name__)


class ThemeFieldError(ValueError):
    """Raised for an unknown field path, bad value or unknown user-style id."""


@dataclass
class Motd:
    """MOTD banner text and styling."""

    title: str = ""
    subtitle: str = ""
    background_image_url: str = ""
    title_color: str = "#ffffff"
    title_font_size: str = "100px"
    title_text_shadow: str = "2px 2px 8px #000000"
    subtitle_color: str = "#e5e7eb"
    subtitle_font_size: str = "50px"
    subtitle_text_shadow: str = "2px 2px 4px #000000"


@dataclass
class Foundation:
    """Base colors and layout rules applied regardless of effects."""

    body_bg_color: str = "#111827"
    message_buffer_bg_color: str = "#1f2937"
    chat_text_color: str = "#e5e7eb"
    link_color: str = "#818cf8"
    timestamp_color: str = "#9ca3af"
    owner_color: str = "#f59e0b"
    userlist_bg_color: str = "#1f2937"
    userlist_text_color: str = "#d1d5db"
    queue_active_bg_color: str = "#4f46e5"
    queue_active_text_color: str = "#ffffff"
    poll_well_bg_color: str = "transparent"
    poll_well_color: str = "#e5e7eb"
    queue_item_border: bool = False
    navbar_bg_color: str = "rgba(17, 24, 39, 0.8)"


@dataclass
class UserStyle:
    """Per-username override. ``id`` only identifies the entry for edits."""

    id: str = ""
    username: str = ""
    custom_name: str = ""
    font_family: str = ""
    color: str = "#ffffff"
    hide_original: bool = False


@dataclass
class JavascriptConfig:
    welcome_message: str = ""
    enable_cinematic_mode: bool = False
    enable_mouse_follower: bool = False
    enable_random_theme_button: bool = False
    enable_simpsons_game: bool = False
    enable_floating_images: bool = False
    floating_image_urls: str = ""
    enable_christmas_snow: bool = False
    enable_christmas_cursor: bool = False
    enable_matrix_rain: bool = False
    enable_videowrap_shake: bool = False
    enable_glowy_grid: bool = False
    enable_video_follow_cursor: bool = False


@dataclass
class CssEffects:
    """One flag per fixed CSS block (see ``cytheme.effects``)."""

    # Videowrap & frame
    pulsating_videowrap_border: bool = False
    videowrap_tv_scanlines: bool = False
    videowrap_vhs_glitch: bool = False
    videowrap_floating_frame: bool = False
    videowrap_film_border: bool = False
    videowrap_sepia_film: bool = False
    videowrap_night_vision: bool = False
    videowrap_security_camera: bool = False
    videowrap_holographic: bool = False
    videowrap_static_noise: bool = False
    videowrap_glitch_effect: bool = False
    videowrap_film_grain: bool = False
    videowrap_crt_effect: bool = False
    videowrap_signal_interference: bool = False
    videowrap_pulsating_glow: bool = False
    videowrap_old_tv_startup: bool = field(
        default=False, metadata={"json": "videowrapOldTVStartup"}
    )
    # Background
    animated_background: bool = False
    animated_background_nebula: bool = False
    animated_background_pulsating_grid: bool = False
    static_noise_background: bool = False
    animated_background_floating_blobs: bool = False
    # Playlist
    animated_queue: bool = False
    animated_queue_now_playing: bool = False
    playlist_hover_glitch_text: bool = False
    playlist_slide_in_on_load: bool = False
    playlist_item_spotlight: bool = False
    # Layout & utility
    cinematic_black_bars: bool = False
    custom_scrollbars: bool = False
    # MOTD
    pulsating_motd_background: bool = False
    # Themed gimmicks
    simpsons_cloud_background: bool = False
    simpsons_tv_frame: bool = False
    # Weird & spooky
    invert_colors: bool = False
    creepy_text_shadow: bool = False
    dramatic_lighting: bool = False
    spooky_fog_overlay: bool = False
    # Christmas
    christmas_lights_header: bool = False
    let_it_snow: bool = False


@dataclass
class ThemeConfig:
    """Root record describing the whole theme."""

    font_import_url: str = ""
    font_family_name: str = ""
    motd: Motd = field(default_factory=Motd)
    foundation: Foundation = field(default_factory=Foundation)
    user_styles: list[UserStyle] = field(default_factory=list)
    advanced_css: str = ""
    javascript: JavascriptConfig = field(default_factory=JavascriptConfig)
    css_effects: CssEffects = field(default_factory=CssEffects)


GROUPS = ("motd", "foundation", "javascript", "css_effects")
SCALARS = ("font_import_url", "font_family_name", "advanced_css")

# Canonical default record; never handed out directly.
_DEFAULT_THEME = ThemeConfig()


def default_theme() -> ThemeConfig:
    """Return a fresh copy of the default theme."""
    return copy.deepcopy(_DEFAULT_THEME)


# -- JSON names ---------------------------------------------------------------


def camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def json_name(f) -> str:
    """camelCase key used in theme files and the AI schema for a dataclass field."""
    return f.metadata.get("json") or camel(f.name)


def _field_index(record_type) -> dict[str, Any]:
    """Map both snake_case and JSON names to dataclass fields."""
    index = {}
    for f in fields(record_type):
        index[f.name] = f
        index[json_name(f)] = f
    return index


def json_names(record_type) -> dict[str, str]:
    return {f.name: json_name(f) for f in fields(record_type)}


def flag_names(record_type) -> list[str]:
    """Attribute names of the boolean fields of a record type, in declaration order."""
    return [f.name for f in fields(record_type) if f.type in (bool, "bool")]


# -- Serialization ------------------------------------------------------------


def _record_to_dict(record) -> dict[str, Any]:
    return {json_name(f): getattr(record, f.name) for f in fields(record)}


def theme_to_dict(theme: ThemeConfig) -> dict[str, Any]:
    """Serialize a theme to the camelCase JSON layout."""
    return {
        "fontImportUrl": theme.font_import_url,
        "fontFamilyName": theme.font_family_name,
        "motd": _record_to_dict(theme.motd),
        "foundation": _record_to_dict(theme.foundation),
        "userStyles": [_record_to_dict(s) for s in theme.user_styles],
        "advancedCss": theme.advanced_css,
        "javascript": _record_to_dict(theme.javascript),
        "cssEffects": _record_to_dict(theme.css_effects),
    }


def _coalesce(record_type, data: Any, where: str):
    """Build ``record_type`` from ``data``, keeping defaults for missing or bad fields."""
    record = record_type()
    if data is None:
        return record
    if not isinstance(data, dict):
        log.warning("Ignoring %s: expected an object, got %s", where, type(data).__name__)
        return record

    by_json = {json_name(f): f for f in fields(record_type)}
    for key, value in data.items():
        f = by_json.get(key)
        if f is None:
            log.warning("Ignoring unknown field %s.%s", where, key)
            continue
        default = getattr(record, f.name)
        if value is None:
            continue
        if type(value) is not type(default):
            log.warning(
                "Ignoring %s.%s: expected %s, got %s",
                where, key, type(default).__name__, type(value).__name__,
            )
            continue
        setattr(record, f.name, value)
    return record


def merge_over_defaults(data: dict[str, Any]) -> ThemeConfig:
    """Merge a (possibly partial) camelCase mapping over the default theme.

    Every field missing from ``data`` takes its default value, never a value
    from some earlier theme. Unknown keys and wrongly typed values are dropped
    with a warning.
    """
    theme = default_theme()
    top = {json_name(f): f for f in fields(ThemeConfig)}
    for key, value in data.items():
        f = top.get(key)
        if f is None:
            log.warning("Ignoring unknown field %s", key)
            continue
        if value is None:
            continue
        if f.name in SCALARS:
            if isinstance(value, str):
                setattr(theme, f.name, value)
            else:
                log.warning("Ignoring %s: expected str, got %s", key, type(value).__name__)
        elif f.name == "user_styles":
            theme.user_styles = _user_styles_from(value)
        else:
            setattr(theme, f.name, _coalesce(type(getattr(theme, f.name)), value, key))
    return theme


def theme_from_dict(data: dict[str, Any]) -> ThemeConfig:
    return merge_over_defaults(data)


def _user_styles_from(value: Any) -> list[UserStyle]:
    if not isinstance(value, list):
        log.warning("Ignoring userStyles: expected a list")
        return []
    styles: list[UserStyle] = []
    seen: set[str] = set()
    for i, item in enumerate(value):
        style = _coalesce(UserStyle, item, f"userStyles[{i}]")
        if not style.id or style.id in seen:
            style.id = new_user_style_id()
        seen.add(style.id)
        styles.append(style)
    return styles


# -- Edits --------------------------------------------------------------------

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


def parse_bool(value: str | bool) -> bool:
    if isinstance(value, bool):
        return value
    text = value.strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ThemeFieldError(f"not a boolean: {value!r}")


def set_field(theme: ThemeConfig, path: str, value: str | bool) -> None:
    """Set a field addressed by a dotted path, e.g. ``foundation.bodyBgColor``.

    Both camelCase and snake_case segments are accepted. String values for
    boolean fields are parsed (``true/false``, ``yes/no``, ``on/off``, ``1/0``).
    """
    parts = path.split(".")
    if len(parts) == 1:
        target, key = theme, parts[0]
        index = {k: f for k, f in _field_index(ThemeConfig).items() if f.name in SCALARS}
    elif len(parts) == 2:
        group = _field_index(ThemeConfig).get(parts[0])
        if group is None or group.name not in GROUPS:
            raise ThemeFieldError(f"unknown field group: {parts[0]!r}")
        target, key = getattr(theme, group.name), parts[1]
        index = _field_index(type(target))
    else:
        raise ThemeFieldError(f"unknown field: {path!r}")

    f = index.get(key)
    if f is None:
        raise ThemeFieldError(f"unknown field: {path!r}")
    if isinstance(getattr(target, f.name), bool):
        value = parse_bool(value)
    elif not isinstance(value, str):
        raise ThemeFieldError(f"{path} expects text, got {value!r}")
    setattr(target, f.name, value)
    log.debug("Set %s = %r", path, value)


def new_user_style_id() -> str:
    return f"user-style-{uuid.uuid4().hex[:12]}"


def add_user_style(theme: ThemeConfig, **values: Any) -> UserStyle:
    """Append a new user style with a fresh unique id and return it."""
    style = UserStyle(id=new_user_style_id())
    _apply_user_style(style, values)
    theme.user_styles.append(style)
    return style


def update_user_style(theme: ThemeConfig, style_id: str, **values: Any) -> UserStyle:
    style = _find_user_style(theme, style_id)
    _apply_user_style(style, values)
    return style


def remove_user_style(theme: ThemeConfig, style_id: str) -> None:
    style = _find_user_style(theme, style_id)
    theme.user_styles.remove(style)


def _find_user_style(theme: ThemeConfig, style_id: str) -> UserStyle:
    for style in theme.user_styles:
        if style.id == style_id:
            return style
    raise ThemeFieldError(f"no user style with id {style_id!r}")


def _apply_user_style(style: UserStyle, values: dict[str, Any]) -> None:
    index = _field_index(UserStyle)
    for key, value in values.items():
        f = index.get(key)
        if f is None or f.name == "id":
            raise ThemeFieldError(f"unknown user style field: {key!r}")
        if f.name == "hide_original":
            value = parse_bool(value)
        setattr(style, f.name, value)
