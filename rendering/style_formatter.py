"""
rendering/style_formatter.py

Converts a category's StyleConfig into an inline CSS declaration string.

Values are passed through verbatim; color and size syntax is not checked.
When the underline style is ``none`` no decoration declarations are
emitted at all.
"""

from __future__ import annotations

from typing import List

from models import StyleConfig, UnderlineStyle


def _decl(parts: List[str], prop: str, value) -> None:
    if value is None or value == "":
        return
    parts.append(f"{prop}: {value};")


def format_style(style: StyleConfig) -> str:
    """Format *style* as ``"prop: value; prop: value;"``.

    Args:
        style: A normalized style config.

    Returns:
        Declarations separated by single spaces, each ending in ``;``.
    """
    parts: List[str] = []
    _decl(parts, "color", style.color)
    _decl(parts, "background-color", style.background_color)
    _decl(parts, "font-weight", "bold" if style.is_bold else "normal")
    _decl(parts, "font-style", "italic" if style.is_italic else "normal")
    if style.underline_style and style.underline_style != UnderlineStyle.NONE:
        _decl(parts, "text-decoration-line", "underline")
        _decl(parts, "text-decoration-style", style.underline_style)
        _decl(parts, "text-decoration-color", style.underline_color)
        _decl(parts, "text-underline-offset", style.underline_offset)
    _decl(parts, "font-size", style.font_size)
    return " ".join(parts)


def original_text_style(
    style: StyleConfig,
    fallback_color: str = "#94a3b8",
    fallback_font_size: str = "0.85em",
) -> StyleConfig:
    """Synthesize the style used for the original-text element.

    Only the original-text color and size carry over; bold, italic and
    underline are always off.
    """
    return StyleConfig(
        color=style.original_text_color or fallback_color,
        background_color="transparent",
        is_bold=False,
        is_italic=False,
        font_size=style.original_text_font_size or fallback_font_size,
        underline_style=UnderlineStyle.NONE,
        underline_color="transparent",
        underline_offset="0px",
    )

