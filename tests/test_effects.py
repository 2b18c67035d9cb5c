"""Tests for the effect table and flag independence in the stylesheet."""

import pytest

from cytheme.effects import EFFECTS, GROUPS, MOTD_FLAGS, SLIDE_IN_ITEMS, enabled_effects, get_effect
from cytheme.model import CssEffects, flag_names
from cytheme.stylesheet import render_css

EFFECT_FLAGS = [block.flag for block in EFFECTS]
VISUAL_HEADER = "/* --- Visual Effects --- */\n\n"


def _remove_addition(after: str, before: str, flag: str) -> str:
    """Strip the block for ``flag`` from ``after``, plus any header it newly introduced."""
    block = get_effect(flag)
    group = next(g for g in GROUPS if g.key == block.group)
    stripped = after.replace(block.css + "\n\n", "", 1)
    header = f"/* --- {group.title} --- */\n"
    if header not in before:
        stripped = stripped.replace(header, "", 1)
    if group.visual and VISUAL_HEADER not in before:
        stripped = stripped.replace(VISUAL_HEADER, "", 1)
    return stripped


class TestTable:
    def test_every_flag_is_covered_once(self):
        covered = EFFECT_FLAGS + list(MOTD_FLAGS)
        assert sorted(covered) == sorted(flag_names(CssEffects))
        assert len(set(EFFECT_FLAGS)) == len(EFFECT_FLAGS)

    def test_groups_known(self):
        keys = {group.key for group in GROUPS}
        assert {block.group for block in EFFECTS} <= keys

    def test_blocks_in_group_order(self):
        order = [group.key for group in GROUPS]
        indices = [order.index(block.group) for block in EFFECTS]
        assert indices == sorted(indices)

    def test_labels(self):
        assert get_effect("videowrap_crt_effect").label == "Videowrap Crt Effect"

    def test_slide_in_delays(self):
        css = get_effect("playlist_slide_in_on_load").css
        assert f"#queue > li:nth-child({SLIDE_IN_ITEMS}) {{ animation-delay: 1.00s; }}" in css
        assert "#queue > li:nth-child(3) { animation-delay: 0.15s; }" in css

    def test_enabled_effects_by_group(self, theme):
        theme.css_effects.videowrap_crt_effect = True
        theme.css_effects.let_it_snow = True
        assert [b.flag for b in enabled_effects(theme, "videowrap")] == ["videowrap_crt_effect"]
        assert [b.flag for b in enabled_effects(theme, "christmas")] == ["let_it_snow"]
        assert enabled_effects(theme, "playlist") == []


class TestIndependence:
    @pytest.mark.parametrize("flag", EFFECT_FLAGS)
    def test_toggle_adds_exactly_its_block(self, theme, flag):
        before = render_css(theme)
        block = get_effect(flag).css
        assert block not in before

        setattr(theme.css_effects, flag, True)
        after = render_css(theme)
        assert block in after
        assert _remove_addition(after, before, flag) == before

        setattr(theme.css_effects, flag, False)
        assert render_css(theme) == before

    @pytest.mark.parametrize("flag", [f for f in EFFECT_FLAGS if f != "let_it_snow"])
    def test_toggle_leaves_other_enabled_block_alone(self, theme, flag):
        theme.css_effects.let_it_snow = True
        snow = get_effect("let_it_snow").css
        before = render_css(theme)

        setattr(theme.css_effects, flag, True)
        after = render_css(theme)
        assert snow in after
        assert after.count(snow) == 1
        assert _remove_addition(after, before, flag) == before

        setattr(theme.css_effects, flag, False)
        assert render_css(theme) == before

    def test_blocks_stack_in_table_order(self, theme):
        theme.css_effects.let_it_snow = True
        theme.css_effects.pulsating_videowrap_border = True
        theme.css_effects.invert_colors = True
        css = render_css(theme)
        positions = [css.index(get_effect(f).css) for f in
                     ("pulsating_videowrap_border", "invert_colors", "let_it_snow")]
        assert positions == sorted(positions)

    def test_one_header_per_enabled_group(self, theme):
        theme.css_effects.videowrap_crt_effect = True
        theme.css_effects.videowrap_film_grain = True
        theme.css_effects.animated_queue = True
        css = render_css(theme)
        assert css.count("/* --- Visual Effects --- */") == 1
        assert css.count("/* --- Videowrap & Frame Effects --- */") == 1
        assert "/* --- Playlist Effects --- */" in css
        assert "/* --- Background Effects --- */" not in css

    def test_gimmicks_skip_visual_header(self, theme):
        theme.css_effects.spooky_fog_overlay = True
        css = render_css(theme)
        assert "/* --- Weird & Spooky Gimmicks --- */" in css
        assert "/* --- Visual Effects --- */" not in css

    def test_all_enabled_renders(self, theme):
        for flag in flag_names(CssEffects):
            setattr(theme.css_effects, flag, True)
        css = render_css(theme)
        for block in EFFECTS:
            assert block.css in css
        for group in GROUPS:
            assert f"/* --- {group.title} --- */" in css
