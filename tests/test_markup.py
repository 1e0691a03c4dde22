"""Tests for rendering/markup.py: the fragment inserted for a replaced word."""
from __future__ import annotations

import os
import re
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models import (
    LayoutMode,
    LayoutSpecificConfig,
    LayoutWrappers,
    OriginalTextConfig,
    StyleConfig,
    WrapperPair,
)
from rendering.markup import build_replacement_html
from settings import RenderSettings


def _text(fragment: str) -> str:
    """Visible text of a fragment."""
    return re.sub(r"<[^>]+>", "", fragment)


def _horizontal_known() -> dict:
    return {
        "known": StyleConfig(
            layout_mode=LayoutMode.HORIZONTAL,
            horizontal=LayoutSpecificConfig(
                translation_first=False,
                wrappers=LayoutWrappers(
                    translation=WrapperPair("", ""),
                    original=WrapperPair("(", ")"),
                ),
            ),
        ),
    }


def _vertical_known() -> dict:
    return {
        "known": StyleConfig(
            layout_mode=LayoutMode.VERTICAL,
            vertical=LayoutSpecificConfig(
                translation_first=True,
                wrappers=LayoutWrappers(),
                baseline_target="translation",
            ),
        ),
    }


# ─────────────────────────────────────────────────────────
# Horizontal
# ─────────────────────────────────────────────────────────


class TestHorizontalMarkup:
    def test_original_then_translation(self):
        html = build_replacement_html(
            "记住", "remember", "known", _horizontal_known(), OriginalTextConfig(show=True), "e1",
        )
        assert _text(html) == "(记住)remember"

    def test_neutral_container(self):
        html = build_replacement_html(
            "记住", "remember", "known", _horizontal_known(), OriginalTextConfig(), "e1",
        )
        assert html.startswith('<span class="reword-wrapper" style="margin: 0; padding: 0; display: inline;">')
        assert html.endswith("</span>")
        assert "<ruby" not in html

    def test_translation_element_attributes(self):
        html = build_replacement_html(
            "记住", "remember", "known", _horizontal_known(), OriginalTextConfig(), "entry-42",
        )
        assert 'class="reword-target"' in html
        assert 'data-entry-id="entry-42"' in html
        assert 'data-original-text="记住"' in html
        assert "border-bottom: 2px solid transparent;" in html
        assert "onmouseover=" in html
        assert "onmouseout=" in html

    def test_translation_first(self):
        styles = {"known": StyleConfig(horizontal=LayoutSpecificConfig(translation_first=True))}
        html = build_replacement_html("a", "b", "known", styles, OriginalTextConfig(), "e1")
        assert _text(html) == "ba"

    def test_original_element_does_not_wrap(self):
        html = build_replacement_html(
            "记住", "remember", "known", _horizontal_known(), OriginalTextConfig(), "e1",
        )
        assert "white-space: nowrap;" in html

    def test_accepts_document_dicts(self):
        styles = {"known": {"color": "#ff0000"}}
        html = build_replacement_html("a", "b", "known", styles, {"show": True}, "e1")
        assert "color: #ff0000;" in html
        assert _text(html) == "(a)b"


# ─────────────────────────────────────────────────────────
# Vertical
# ─────────────────────────────────────────────────────────


class TestVerticalMarkup:
    def test_ruby_container(self):
        html = build_replacement_html(
            "记住", "remember", "known", _vertical_known(), OriginalTextConfig(), "e1",
        )
        assert html.startswith('<ruby class="reword-wrapper" style="ruby-position: under;')
        assert html.endswith("</rt></ruby>")

    def test_translation_is_base_original_is_annotation(self):
        html = build_replacement_html(
            "记住", "remember", "known", _vertical_known(), OriginalTextConfig(), "e1",
        )
        base, annotation = html.split("<rt", 1)
        assert 'class="reword-target"' in base
        assert ">remember<" in base
        assert ">记住<" in annotation

    def test_role_overrides(self):
        html = build_replacement_html(
            "记住", "remember", "known", _vertical_known(), OriginalTextConfig(), "e1",
        )
        base, annotation = html.split("<rt", 1)
        assert "line-height: normal; vertical-align: baseline; font-size: 1em;" in base
        assert "line-height: 1;" in annotation
        assert "vertical-align" not in annotation

    def test_original_base(self):
        styles = {
            "known": StyleConfig(
                layout_mode=LayoutMode.VERTICAL,
                vertical=LayoutSpecificConfig(translation_first=False, baseline_target="original"),
            ),
        }
        html = build_replacement_html("记住", "remember", "known", styles, OriginalTextConfig(), "e1")
        assert "ruby-position: under;" in html
        base, annotation = html.split("<rt", 1)
        assert ">记住<" in base
        assert 'class="reword-target"' in annotation


# ─────────────────────────────────────────────────────────
# Original text hidden
# ─────────────────────────────────────────────────────────


class TestOriginalHidden:
    @pytest.mark.parametrize("styles", [_horizontal_known(), _vertical_known()])
    def test_only_translation_element(self, styles):
        html = build_replacement_html(
            "记住", "remember", "known", styles, OriginalTextConfig(show=False), "e1",
        )
        assert _text(html) == "remember"
        assert "white-space: nowrap;" not in html
        assert "<ruby" not in html
        assert html.count("记住") == 1
        assert 'data-original-text="记住"' in html


# ─────────────────────────────────────────────────────────
# Escaping, options and errors
# ─────────────────────────────────────────────────────────


class TestMarkupEdges:
    def test_text_is_escaped(self):
        html = build_replacement_html(
            'a<b>"c"', "<script>x</script>", "known", _horizontal_known(), OriginalTextConfig(), 'id"1',
        )
        assert "<script>" not in html
        assert "&lt;script&gt;x&lt;/script&gt;" in html
        assert 'data-original-text="a&lt;b&gt;&quot;c&quot;"' in html
        assert 'data-entry-id="id&quot;1"' in html

    def test_null_wrapper_is_not_rendered(self):
        styles = {"known": {"horizontal": {"wrappers": {"original": {"prefix": None, "suffix": None}}}}}
        html = build_replacement_html("a", "b", "known", styles, OriginalTextConfig(), "e1")
        assert "None" not in html
        assert _text(html) == "(a)b"

    def test_custom_class_names(self):
        options = RenderSettings(wrapper_class="w", target_class="t", hover_border_color="red")
        html = build_replacement_html(
            "a", "b", "known", _horizontal_known(), OriginalTextConfig(), "e1", options=options,
        )
        assert html.startswith('<span class="w"')
        assert 'class="t"' in html
        assert "borderColor=&#x27;red&#x27;" in html

    def test_missing_category_raises(self):
        with pytest.raises(KeyError):
            build_replacement_html("a", "b", "learning", _horizontal_known(), OriginalTextConfig(), "e1")
