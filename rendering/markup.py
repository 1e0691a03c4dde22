"""
rendering/markup.py

Builds the markup fragment inserted in place of one replaced word.

Horizontal mode emits the two elements inline in reading order; vertical
mode emits a ruby container with the base element as content and the
annotation element as its reading. With original text hidden, only the
translation element is emitted, still carrying the original text in
``data-original-text``.
"""

from __future__ import annotations

import html
from typing import Any, Mapping, Optional

import debug_trace
from models import OriginalTextConfig, StyleConfig, TextRole
from rendering.layout import ResolvedLayout, resolve_layout, role_override
from rendering.style_formatter import format_style, original_text_style
from settings import RenderSettings

_CONTAINER_STYLE = "margin: 0; padding: 0; display: inline;"
_RUBY_STYLE = "margin: 0; padding: 0; ruby-align: start; -webkit-ruby-align: start; text-align: left;"
_RT_STYLE = "font-size: 100%; font-family: inherit;"


def _attr(value: Any) -> str:
    return html.escape(str(value), quote=True)


def _join_style(*chunks: str) -> str:
    return " ".join(c for c in chunks if c)


def _lookup_style(styles: Mapping[str, Any], category: str) -> StyleConfig:
    # Missing category is a caller bug; let the KeyError surface.
    return StyleConfig.from_dict(styles[category])


def _translation_element(
    text: str,
    original_text: str,
    entry_id: str,
    style: str,
    options: RenderSettings,
) -> str:
    hover = _attr(f"this.style.borderColor='{options.hover_border_color}'")
    out = _attr("this.style.borderColor='transparent'")
    return (
        f'<span class="{_attr(options.target_class)}"'
        f' style="{_attr(style)}"'
        f' data-entry-id="{_attr(entry_id)}"'
        f' data-original-text="{_attr(original_text)}"'
        f' onmouseover="{hover}" onmouseout="{out}">'
        f"{html.escape(text)}</span>"
    )


def _original_element(text: str, style: str) -> str:
    return f'<span style="{_attr(style)}">{html.escape(text)}</span>'


def build_replacement_html(
    original_text: str,
    replacement_text: str,
    category: str,
    styles: Mapping[str, Any],
    original_text_config: Any,
    entry_id: str,
    options: Optional[RenderSettings] = None,
) -> str:
    """Build the markup for one replaced word occurrence.

    Args:
        original_text: The page text being replaced.
        replacement_text: The translation shown in its place.
        category: WordCategory key into *styles*.
        styles: Category -> StyleConfig (or its document dict).
        original_text_config: ``OriginalTextConfig`` or its document dict.
        entry_id: Stable per-occurrence identifier.
        options: Class names and fallbacks; defaults to ``RenderSettings()``.

    Returns:
        A single-line markup fragment.

    Raises:
        KeyError: If *category* has no entry in *styles*.
    """
    options = options or RenderSettings()
    style = _lookup_style(styles, category)
    show_original = OriginalTextConfig.from_dict(original_text_config).show
    resolved = resolve_layout(style)
    debug_trace.trace(f"{category} {resolved.mode} show_original={show_original}", "RENDER")

    orig_style = original_text_style(style, options.original_text_color, options.original_text_font_size)

    trans_css = _join_style(
        format_style(style),
        "border-bottom: 2px solid transparent;",
        role_override(resolved, TextRole.TRANSLATION, style.font_size),
    )
    trans_text = resolved.wrappers.for_role(TextRole.TRANSLATION).wrap(replacement_text)
    trans_el = _translation_element(trans_text, original_text, entry_id, trans_css, options)

    container_open = f'<span class="{_attr(options.wrapper_class)}" style="{_CONTAINER_STYLE}">'
    if not show_original:
        return f"{container_open}{trans_el}</span>"

    orig_css = _join_style(
        format_style(orig_style),
        "white-space: nowrap;",
        role_override(resolved, TextRole.ORIGINAL, orig_style.font_size),
    )
    orig_text = resolved.wrappers.for_role(TextRole.ORIGINAL).wrap(original_text)
    orig_el = _original_element(orig_text, orig_css)
    elements = {TextRole.TRANSLATION: trans_el, TextRole.ORIGINAL: orig_el}

    if not resolved.is_vertical:
        first, second = resolved.order
        return f"{container_open}{elements[first]}{elements[second]}</span>"

    return _ruby(resolved, elements[resolved.base_role], elements[resolved.annotation_role], options)


def _ruby(resolved: ResolvedLayout, base: str, annotation: str, options: RenderSettings) -> str:
    return (
        f'<ruby class="{_attr(options.wrapper_class)}"'
        f' style="ruby-position: {resolved.ruby_position}; {_RUBY_STYLE}">'
        f'{base}<rt style="{_RT_STYLE}">{annotation}</rt></ruby>'
    )
