"""
settings_io/checker.py

Advisory checks on an imported settings document.

Compares each ``visual_styles`` entry against a fully populated style to
find missing and unknown fields, and validates present sections against
``schemas/settings_schema.json``. Nothing here blocks an import; the
messages are reported next to the import result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Set

from models import StyleConfig
from schemas import validate_document

# Paths never reported: baselineTarget is optional in both layout modes
_IGNORED_KEYS = {"baselineTarget"}


# -------------------------------------------------------------------------
# Field diff
# -------------------------------------------------------------------------

@dataclass
class FieldDiff:
    """Result of comparing a style dict against a complete style."""

    missing_paths: Set[str] = field(default_factory=set)
    """Dot-paths present in the complete style but absent in the entry."""

    extra_paths: Set[str] = field(default_factory=set)
    """Dot-paths present in the entry but unknown to the style model."""


def compute_field_diff(
    actual: Dict[str, Any],
    expected: Dict[str, Any],
    prefix: str = "",
) -> FieldDiff:
    """Recursively compare *actual* vs *expected* dicts.

    - Keys in expected but not actual -> missing
    - Keys in actual but not expected -> extra
    - Both present and both dicts -> recurse with dot-path prefix
    """
    diff = FieldDiff()

    for key in expected:
        if key in _IGNORED_KEYS:
            continue
        path = f"{prefix}.{key}" if prefix else key
        if key not in actual:
            diff.missing_paths.add(path)
        elif isinstance(expected[key], dict) and isinstance(actual[key], dict):
            sub = compute_field_diff(actual[key], expected[key], path)
            diff.missing_paths |= sub.missing_paths
            diff.extra_paths |= sub.extra_paths

    for key in actual:
        if key in _IGNORED_KEYS:
            continue
        path = f"{prefix}.{key}" if prefix else key
        if key not in expected:
            diff.extra_paths.add(path)

    return diff


def check_visual_styles(styles: Any) -> List[str]:
    """Missing/unknown field messages for every style entry."""
    if not isinstance(styles, dict):
        return []
    expected = StyleConfig().to_dict()
    messages: List[str] = []
    for category, style in styles.items():
        if not isinstance(style, dict):
            continue
        diff = compute_field_diff(style, expected)
        for path in sorted(diff.missing_paths):
            messages.append(f"visual_styles.{category}.{path}: missing, a fallback value is used")
        for path in sorted(diff.extra_paths):
            messages.append(f"visual_styles.{category}.{path}: unknown field, kept as-is")
    return messages


def check_sections(sections: Dict[str, Any]) -> List[str]:
    """Advisory messages for the recognized sections of a document.

    Args:
        sections: ``{document_key: value}`` for present sections only.

    Returns:
        ``"path: message"`` strings; empty when nothing looks wrong.
    """
    _, messages = validate_document(sections)
    if "visual_styles" in sections:
        messages.extend(check_visual_styles(sections["visual_styles"]))
    return messages
