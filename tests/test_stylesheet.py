"""Tests for CSS rendering."""

from cytheme.model import add_user_style, merge_over_defaults
from cytheme.stylesheet import format_advanced_css, render_css, user_selector


def _order(css: str, *markers: str) -> list[int]:
    return [css.index(m) for m in markers]


class TestSections:
    def test_default_sections(self, theme):
        css = render_css(theme)
        assert css.startswith("/* --- Foundation --- */")
        assert "/* --- MOTD Banner --- */" not in css
        assert "/* --- Custom User Styles --- */" not in css
        assert "/* --- Visual Effects --- */" not in css
        assert "/* --- CSS for JS Features --- */" not in css
        assert "/* --- Advanced AI Generated CSS --- */" not in css
        assert css.endswith("}")

    def test_chat_always_hidden(self, theme):
        css = render_css(theme)
        assert "#rightpane, #chatwrap, #chatline {\n    display: none !important;\n}" in css
        assert "#leftpane {\n    width: 100% !important;\n}" in css

    def test_section_order(self, bob_theme):
        bob_theme.font_import_url = "https://fonts.example/css"
        bob_theme.motd.title = "Hi"
        bob_theme.css_effects.custom_scrollbars = True
        bob_theme.css_effects.let_it_snow = True
        bob_theme.javascript.enable_cinematic_mode = True
        bob_theme.advanced_css = "a{color:red}"
        css = render_css(bob_theme)
        positions = _order(
            css,
            "@import url('https://fonts.example/css');",
            "/* --- MOTD Banner --- */",
            "/* --- Foundation --- */",
            "/* --- Custom User Styles --- */",
            "/* --- Permanent Layout: Chat Hidden --- */",
            "/* --- Visual Effects --- */",
            "/* --- Layout & Utility Effects --- */",
            "/* --- Christmas & Festive Gimmicks --- */",
            "/* --- Miscellaneous --- */",
            "/* --- CSS for JS Features --- */",
            "/* --- Advanced AI Generated CSS --- */",
        )
        assert positions == sorted(positions)

    def test_deterministic(self, bob_theme):
        bob_theme.css_effects.videowrap_crt_effect = True
        assert render_css(bob_theme) == render_css(merge_over_defaults({
            "userStyles": [{"id": bob_theme.user_styles[0].id, "username": "Bob",
                            "customName": "B.", "hideOriginal": True}],
            "cssEffects": {"videowrapCrtEffect": True},
        }))


class TestFoundation:
    def test_transparent_poll_background(self, theme):
        css = render_css(theme)
        assert "background: none !important;" in css
        assert "transparent !important" not in css

    def test_solid_poll_background(self, theme):
        theme.foundation.poll_well_bg_color = "#222222"
        assert "background: #222222 !important;" in render_css(theme)

    def test_font_family(self, theme):
        assert "font-family" not in render_css(theme).split("#messagebuffer")[0]
        theme.font_family_name = "Simpsonfont"
        assert "font-family: 'Simpsonfont', sans-serif;" in render_css(theme)

    def test_queue_item_border(self, theme):
        assert "border-bottom: solid 0.5px" not in render_css(theme)
        theme.foundation.queue_item_border = True
        assert "border-bottom: solid 0.5px !important;" in render_css(theme)


class TestMotdCss:
    def test_only_with_content(self, theme):
        theme.motd.background_image_url = "https://img.example/bg.png"
        assert "#motd-container" not in render_css(theme)
        theme.motd.subtitle = "sub"
        assert "#motd-container" in render_css(theme)

    def test_background_image(self, theme):
        theme.motd.title = "Hi"
        theme.motd.background_image_url = "https://img.example/bg.png"
        assert "url('https://img.example/bg.png');" in render_css(theme)

    def test_pulsating_background(self, theme):
        theme.motd.title = "Hi"
        assert "pulsate-motd-glow" not in render_css(theme)
        theme.css_effects.pulsating_motd_background = True
        css = render_css(theme)
        assert "@keyframes pulsate-motd-glow" in css
        assert "animation: pulsate-motd-glow 4s infinite ease-in-out;" in css

    def test_title_styles(self, theme):
        theme.motd.title = "Hi"
        theme.motd.title_color = "#abcdef"
        theme.motd.title_font_size = "80px"
        css = render_css(theme)
        assert "color: #abcdef;" in css
        assert "font-size: 80px;" in css


class TestUserStyles:
    def test_bob_hidden_behind_custom_name(self, bob_theme):
        css = render_css(bob_theme)
        assert ".chat-msg-bob .username {\n    font-size: 0 !important;\n}" in css
        assert ".chat-msg-bob .username::before {" in css
        assert "content: 'B.';" in css

    def test_selector_sanitizes(self):
        assert user_selector("Mr Bob_99") == ".chat-msg-mr-bob-99 .username"

    def test_color_and_font_without_hiding(self, theme):
        add_user_style(theme, username="alice", color="#ff00ff", font_family="Comic Sans MS")
        css = render_css(theme)
        assert ".chat-msg-alice .username {" in css
        assert "color: #ff00ff !important;" in css
        assert "font-family: 'Comic Sans MS', sans-serif !important;" in css
        assert "::before" not in css

    def test_prefix_name_when_not_hiding(self, theme):
        add_user_style(theme, username="alice", custom_name="[VIP] ")
        assert "content: '[VIP] ';" in render_css(theme)

    def test_blank_username_skipped(self, theme):
        add_user_style(theme, username="")
        css = render_css(theme)
        assert "/* --- Custom User Styles --- */" in css
        assert ".chat-msg-" not in css

    def test_quotes_escaped(self, theme):
        add_user_style(theme, username="x", custom_name="it's")
        assert "content: 'it\\'s';" in render_css(theme)

    def test_backslash_escaped(self, theme):
        add_user_style(theme, username="x", custom_name="B\\")
        css = render_css(theme)
        assert "content: 'B\\\\';" in css
        assert "content: 'B\\';" not in css

    def test_font_family_backslash_escaped(self, theme):
        theme.font_family_name = "Odd\\'Font"
        assert "'Odd\\\\\\'Font'" in render_css(theme)


class TestAdvancedCss:
    def test_formatter_indents_by_depth(self):
        out = format_advanced_css("@media (max-width:600px){a{color:red;top:0}}")
        assert out == (
            "@media (max-width:600px){\n"
            "  a{\n"
            "    color:red;\n"
            "    top:0\n"
            "  }\n"
            "}\n\n"
        )

    def test_formatter_empty(self):
        assert format_advanced_css("") == ""

    def test_formatter_unbalanced_braces_do_not_go_negative(self):
        assert format_advanced_css("}}a{b:c}") == "}\n}\na{\n  b:c\n}\n\n"

    def test_advanced_section_is_last(self, theme):
        theme.advanced_css = "  .x{color:red}  "
        css = render_css(theme)
        assert css.endswith("/* --- Advanced AI Generated CSS --- */\n\n.x{\n  color:red\n}")

    def test_whitespace_only_advanced_css_ignored(self, theme):
        theme.advanced_css = "   \n "
        assert "Advanced AI Generated CSS" not in render_css(theme)
