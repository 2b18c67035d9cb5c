"""Tests for the channel JavaScript output."""

import pytest

from cytheme.features import FEATURES, split_image_urls
from cytheme.model import JavascriptConfig, flag_names
from cytheme.script import FOOTER, HEADER, NO_JS, js_string, render_js
from cytheme.stylesheet import render_css


def _enable(theme, feature) -> None:
    setattr(getattr(theme, feature.section), feature.flag, True)


class TestScript:
    def test_nothing_enabled(self, theme):
        assert render_js(theme) == NO_JS

    def test_image_urls_alone_do_not_emit(self, theme):
        theme.javascript.floating_image_urls = "https://img.example/a.png"
        assert render_js(theme) == NO_JS

    def test_welcome_message_alone(self, theme):
        theme.javascript.welcome_message = "Hello"
        js = render_js(theme)
        assert js.startswith(HEADER)
        assert js.endswith(FOOTER)
        assert "alert('Hello');" in js
        assert "Initializing UI Features" not in js
        assert "Feature Functions" not in js

    def test_welcome_message_escaped(self, theme):
        theme.javascript.welcome_message = "It's a\nnew \\ day"
        assert "alert('It\\'s a\\nnew \\\\ day');" in render_js(theme)

    def test_js_string(self):
        assert js_string("a'b") == "a\\'b"
        assert js_string("x\r\ny") == "x\\r\\ny"

    def test_every_feature_flag_exists(self):
        js_flags = set(flag_names(JavascriptConfig))
        for feature in FEATURES:
            if feature.section == "javascript":
                assert feature.flag in js_flags
        assert {f.flag for f in FEATURES if f.section == "javascript"} == js_flags


class TestFeatureIndependence:
    @pytest.mark.parametrize("feature", FEATURES, ids=lambda f: f.flag)
    def test_toggle_adds_its_pieces(self, theme, feature):
        _enable(theme, feature)
        js = render_js(theme)
        assert js.startswith(HEADER)
        assert js.endswith(FOOTER)
        if feature.call:
            assert f"    {feature.call}\n" in js
        if feature.helper:
            assert feature.helper in js
            assert "Feature Functions" in js
        assert feature.code_for(theme) in js

        setattr(getattr(theme, feature.section), feature.flag, False)
        assert render_js(theme) == NO_JS

    @pytest.mark.parametrize("feature", [f for f in FEATURES if f.css], ids=lambda f: f.flag)
    def test_feature_css(self, theme, feature):
        before = render_css(theme)
        _enable(theme, feature)
        css = render_css(theme)
        assert "/* --- CSS for JS Features --- */" in css
        assert feature.css in css
        assert feature.css not in before

    def test_features_in_table_order(self, theme):
        for feature in FEATURES:
            _enable(theme, feature)
        js = render_js(theme)
        calls = [js.index(f.call) for f in FEATURES if f.call]
        assert calls == sorted(calls)
        assert js.count("function init() {") == 1
        assert js.count("} // End of init()") == 1

    def test_helpers_defined_after_init(self, theme):
        theme.javascript.enable_mouse_follower = True
        js = render_js(theme)
        assert js.index("} // End of init()") < js.index("function createMouseFollower()")
        assert js.index("createMouseFollower();") < js.index("} // End of init()")


class TestFloatingImages:
    def test_split_urls(self):
        assert split_image_urls("a.png, b.png\n\n c.png,,") == ["a.png", "b.png", "c.png"]
        assert split_image_urls("") == []

    def test_urls_embedded_as_json(self, theme):
        theme.javascript.enable_floating_images = True
        theme.javascript.floating_image_urls = "https://img.example/a.png,\nhttps://img.example/b.png"
        js = render_js(theme)
        assert '["https://img.example/a.png", "https://img.example/b.png"]' in js
        assert "__IMAGE_URLS__" not in js

    def test_no_urls(self, theme):
        theme.javascript.enable_floating_images = True
        js = render_js(theme)
        assert "[]" in js
        assert "__IMAGE_URLS__" not in js
