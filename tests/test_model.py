"""Tests for the theme model: defaults, merge, serialization and edits."""

import logging

import pytest

from cytheme.model import (
    CssEffects,
    JavascriptConfig,
    ThemeFieldError,
    add_user_style,
    camel,
    default_theme,
    flag_names,
    merge_over_defaults,
    parse_bool,
    remove_user_style,
    set_field,
    theme_from_dict,
    theme_to_dict,
    update_user_style,
)


class TestDefaults:
    def test_dark_palette(self, theme):
        assert theme.foundation.body_bg_color == "#111827"
        assert theme.foundation.poll_well_bg_color == "transparent"
        assert theme.foundation.navbar_bg_color == "rgba(17, 24, 39, 0.8)"

    def test_everything_off(self, theme):
        assert not any(getattr(theme.css_effects, f) for f in flag_names(CssEffects))
        assert not any(getattr(theme.javascript, f) for f in flag_names(JavascriptConfig))
        assert theme.user_styles == []
        assert theme.motd.title == "" and theme.motd.subtitle == ""

    def test_fresh_copy_each_call(self):
        a = default_theme()
        a.foundation.body_bg_color = "#000000"
        a.user_styles.append(object())
        b = default_theme()
        assert b.foundation.body_bg_color == "#111827"
        assert b.user_styles == []


class TestSerialization:
    def test_camel(self):
        assert camel("body_bg_color") == "bodyBgColor"
        assert camel("title") == "title"

    def test_json_layout(self, theme):
        data = theme_to_dict(theme)
        assert set(data) == {
            "fontImportUrl", "fontFamilyName", "motd", "foundation",
            "userStyles", "advancedCss", "javascript", "cssEffects",
        }
        assert data["foundation"]["bodyBgColor"] == "#111827"
        assert data["cssEffects"]["videowrapOldTVStartup"] is False
        assert "pulsatingMotdBackground" in data["cssEffects"]

    def test_round_trip(self, bob_theme):
        bob_theme.css_effects.let_it_snow = True
        bob_theme.motd.title = "Hi"
        assert theme_from_dict(theme_to_dict(bob_theme)) == bob_theme


class TestMerge:
    def test_empty_mapping_is_defaults(self):
        assert merge_over_defaults({}) == default_theme()

    def test_idempotent_over_defaults(self):
        once = merge_over_defaults({"foundation": {"linkColor": "#ff0000"}})
        twice = merge_over_defaults(theme_to_dict(once))
        assert once == twice

    def test_partial_group_keeps_defaults(self):
        theme = merge_over_defaults({"foundation": {"bodyBgColor": "#000000"}})
        assert theme.foundation.body_bg_color == "#000000"
        assert theme.foundation.link_color == default_theme().foundation.link_color
        assert theme.motd == default_theme().motd

    def test_never_inherits_previous_values(self):
        first = merge_over_defaults({"cssEffects": {"letItSnow": True}})
        second = merge_over_defaults({"motd": {"title": "New"}})
        assert first.css_effects.let_it_snow is True
        assert second.css_effects.let_it_snow is False

    def test_unknown_fields_dropped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="cytheme"):
            theme = merge_over_defaults({"bogus": 1, "foundation": {"nope": "x"}})
        assert theme == default_theme()
        assert "bogus" in caplog.text
        assert "foundation.nope" in caplog.text

    def test_wrong_types_fall_back(self, caplog):
        with caplog.at_level(logging.WARNING, logger="cytheme"):
            theme = merge_over_defaults({
                "fontFamilyName": 12,
                "foundation": {"queueItemBorder": "yes", "bodyBgColor": "#123456"},
                "javascript": "not an object",
            })
        assert theme.font_family_name == ""
        assert theme.foundation.queue_item_border is False
        assert theme.foundation.body_bg_color == "#123456"
        assert theme.javascript == JavascriptConfig()
        assert "queueItemBorder" in caplog.text

    def test_null_keeps_default(self):
        theme = merge_over_defaults({"motd": None, "foundation": {"linkColor": None}})
        assert theme == default_theme()

    def test_user_styles_get_unique_ids(self):
        theme = merge_over_defaults({
            "userStyles": [
                {"username": "a"},
                {"id": "same", "username": "b"},
                {"id": "same", "username": "c"},
            ]
        })
        ids = [s.id for s in theme.user_styles]
        assert len(set(ids)) == 3
        assert all(ids)
        assert ids[1] == "same"
        assert [s.username for s in theme.user_styles] == ["a", "b", "c"]

    def test_old_tv_startup_key(self):
        theme = merge_over_defaults({"cssEffects": {"videowrapOldTVStartup": True}})
        assert theme.css_effects.videowrap_old_tv_startup is True


class TestSetField:
    def test_camel_and_snake_paths(self, theme):
        set_field(theme, "foundation.bodyBgColor", "#000000")
        set_field(theme, "motd.title_color", "#ff0000")
        assert theme.foundation.body_bg_color == "#000000"
        assert theme.motd.title_color == "#ff0000"

    def test_top_level_scalar(self, theme):
        set_field(theme, "fontFamilyName", "Simpsonfont")
        assert theme.font_family_name == "Simpsonfont"

    @pytest.mark.parametrize("text,expected", [("true", True), ("off", False), ("1", True), ("No", False)])
    def test_boolean_parsing(self, theme, text, expected):
        set_field(theme, "cssEffects.letItSnow", text)
        assert theme.css_effects.let_it_snow is expected

    def test_bad_boolean(self, theme):
        with pytest.raises(ThemeFieldError):
            set_field(theme, "cssEffects.letItSnow", "maybe")

    @pytest.mark.parametrize("path", ["nope", "foundation.nope", "nope.title", "motd.title.extra", "userStyles.x", "motd"])
    def test_unknown_paths(self, theme, path):
        with pytest.raises(ThemeFieldError):
            set_field(theme, path, "x")

    def test_parse_bool_passthrough(self):
        assert parse_bool(True) is True


class TestUserStyles:
    def test_add_assigns_unique_ids(self, theme):
        a = add_user_style(theme, username="a")
        b = add_user_style(theme, username="b")
        assert a.id != b.id
        assert a.id.startswith("user-style-")
        assert theme.user_styles == [a, b]

    def test_add_accepts_json_names(self, theme):
        style = add_user_style(theme, username="Bob", customName="B.", hideOriginal="true")
        assert style.custom_name == "B."
        assert style.hide_original is True
        assert style.color == "#ffffff"

    def test_update(self, theme):
        style = add_user_style(theme, username="a")
        update_user_style(theme, style.id, color="#00ff00")
        assert theme.user_styles[0].color == "#00ff00"

    def test_update_rejects_unknown_field_and_id(self, theme):
        style = add_user_style(theme, username="a")
        with pytest.raises(ThemeFieldError):
            update_user_style(theme, style.id, size="big")
        with pytest.raises(ThemeFieldError):
            update_user_style(theme, style.id, id="other")
        with pytest.raises(ThemeFieldError):
            update_user_style(theme, "missing", color="#000000")

    def test_remove(self, theme):
        a = add_user_style(theme, username="a")
        b = add_user_style(theme, username="b")
        remove_user_style(theme, a.id)
        assert theme.user_styles == [b]
        with pytest.raises(ThemeFieldError):
            remove_user_style(theme, a.id)
