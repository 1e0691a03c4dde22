"""
rendering/layout.py

Resolves a category's layout mode into element order, wrappers and, for
vertical mode, the base/annotation roles and ruby position.

Ruby position truth table (base role x translation_first):

    ===========  =================  ========
    base role    translation_first  position
    ===========  =================  ========
    translation  True               under
    translation  False              over
    original     True               over
    original     False              under
    ===========  =================  ========
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from models import LayoutMode, LayoutWrappers, StyleConfig, TextRole


@dataclass(frozen=True)
class ResolvedLayout:
    """Layout decisions for one category.

    Attributes:
        mode: ``"horizontal"`` or ``"vertical"``.
        order: Roles in reading order.
        wrappers: Prefix/suffix per role.
        translation_first: The sub-config's reading-order flag.
        base_role: Vertical only; the baseline-aligned role.
        annotation_role: Vertical only; the compact ruby reading.
        ruby_position: Vertical only; ``"over"`` or ``"under"``.
    """
    mode: str
    order: Tuple[str, str]
    wrappers: LayoutWrappers
    translation_first: bool
    base_role: Optional[str] = None
    annotation_role: Optional[str] = None
    ruby_position: Optional[str] = None

    @property
    def is_vertical(self) -> bool:
        return self.mode == LayoutMode.VERTICAL


def _other(role: str) -> str:
    return TextRole.ORIGINAL if role == TextRole.TRANSLATION else TextRole.TRANSLATION


def ruby_position_for(base_role: str, translation_first: bool) -> str:
    """Where the annotation sits relative to the base."""
    if base_role == TextRole.TRANSLATION:
        return "under" if translation_first else "over"
    return "over" if translation_first else "under"


def resolve_layout(style: StyleConfig, mode: Optional[str] = None) -> ResolvedLayout:
    """Resolve the layout of *style* for *mode* (default: its ``layout_mode``).

    Args:
        style: A normalized StyleConfig (both sub-configs populated).
        mode: Layout mode to resolve; anything but ``"vertical"`` is
            treated as horizontal.

    Returns:
        The resolved layout.
    """
    if mode is None:
        layout = style.active_layout
        mode = LayoutMode.VERTICAL if style.layout_mode == LayoutMode.VERTICAL else LayoutMode.HORIZONTAL
    else:
        mode = LayoutMode.VERTICAL if mode == LayoutMode.VERTICAL else LayoutMode.HORIZONTAL
        layout = style.layout_for(mode)

    if layout.translation_first:
        order = (TextRole.TRANSLATION, TextRole.ORIGINAL)
    else:
        order = (TextRole.ORIGINAL, TextRole.TRANSLATION)

    if mode == LayoutMode.HORIZONTAL:
        return ResolvedLayout(
            mode=mode,
            order=order,
            wrappers=layout.wrappers,
            translation_first=layout.translation_first,
        )

    base = TextRole.TRANSLATION if layout.effective_baseline_target == TextRole.TRANSLATION else TextRole.ORIGINAL
    return ResolvedLayout(
        mode=mode,
        order=order,
        wrappers=layout.wrappers,
        translation_first=layout.translation_first,
        base_role=base,
        annotation_role=_other(base),
        ruby_position=ruby_position_for(base, layout.translation_first),
    )


def role_override(resolved: ResolvedLayout, role: str, font_size: str) -> str:
    """Extra declarations for *role* in vertical mode.

    The base keeps a normal line height on the baseline at its own font
    size; the annotation collapses its line height. Horizontal layouts
    get no override.
    """
    if not resolved.is_vertical:
        return ""
    if role == resolved.base_role:
        return f"line-height: normal; vertical-align: baseline; font-size: {font_size};"
    return "line-height: 1;"
