"""
rendering package

Builds the markup fragment for one replaced word from its category style.
"""

from rendering.style_formatter import format_style, original_text_style
from rendering.layout import ResolvedLayout, resolve_layout, ruby_position_for, role_override
from rendering.markup import build_replacement_html

__all__ = [
    "format_style",
    "original_text_style",
    "ResolvedLayout",
    "resolve_layout",
    "ruby_position_for",
    "role_override",
    "build_replacement_html",
]
