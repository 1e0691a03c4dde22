"""
settings_io/serializer.py

Writes the full settings tree as a commented YAML document.

Fixed-field sections get a comment block per field from
``field_docs.SECTION_FIELD_DOCS``. ``visual_styles`` is keyed by category
and gets a label comment per category plus a trailing comment per style
field. The list sections get a banner only.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

import debug_trace
from models import AllSettings, WordCategory
from settings_io.field_docs import SECTION_BANNERS, STYLE_FIELD_DOCS, field_doc
from settings_io.formatter import (
    MAPPING,
    check_tree,
    classify,
    comment_text,
    entry_lines,
    format_key,
    indent,
    mapping_lines,
)

PRODUCT_NAME = "Reword"

SEPARATOR = "# " + "-" * 66

# Sections written from the per-field comment table
SCHEMA_SECTIONS = ("auto_translate", "interaction", "page_widget", "anki", "layout_style")
LIST_SECTIONS = ("scenarios", "engines", "dictionaries")


def _header(now: datetime) -> List[str]:
    return [
        f"# {PRODUCT_NAME} settings backup",
        f"# Exported at: {now.strftime('%Y-%m-%d %H:%M:%S')}",
        "#",
        "# This file holds all of your personal settings (word lists are not included).",
        "# You may edit it and import it again. Keep the YAML indentation intact:",
        "# two spaces per level, strings in double quotes.",
        "#",
        SEPARATOR,
        "",
    ]


def _banner(title: str) -> List[str]:
    return [SEPARATOR, f"# {title}", SEPARATOR]


def _field_comment(section: str):
    def lookup(key: Any) -> Optional[str]:
        doc = field_doc(section, key)
        if doc is None:
            return None
        if doc.options:
            return f"{doc.comment}\nOptions: {doc.options}"
        return doc.comment
    return lookup


def _schema_section(key: str, value: Any) -> List[str]:
    if classify(value) != MAPPING or not value:
        return entry_lines(key, value, 0) + [""]
    return [f"{format_key(key)}:"] + mapping_lines(value, 1, leading=_field_comment(key), spaced=True)


def _visual_styles(value: Any) -> List[str]:
    lines = _banner(SECTION_BANNERS["visual_styles"])
    if classify(value) != MAPPING or not value:
        return lines + entry_lines("visual_styles", value, 0) + [""]
    lines.append("visual_styles:")
    for category, style in value.items():
        lines.append(f"{indent(1)}# Category: {comment_text(WordCategory.label(category))}")
        if classify(style) == MAPPING and style:
            lines.append(f"{indent(1)}{format_key(str(category))}:")
            lines.extend(mapping_lines(style, 2, trailing=STYLE_FIELD_DOCS.get))
        else:
            lines.extend(entry_lines(str(category), style, 1))
        lines.append("")
    return lines


def _list_section(key: str, value: Any) -> List[str]:
    return _banner(SECTION_BANNERS[key]) + entry_lines(key, value, 0) + [""]


@debug_trace.trace_call("EXPORT")
def generate_settings_yaml(settings: AllSettings, now: Optional[datetime] = None) -> str:
    """Serialize *settings* to the commented settings document.

    Args:
        settings: The full settings tree.
        now: Export timestamp written to the header (default: current time).

    Returns:
        The document text, re-readable by ``importer.import_settings``.

    Raises:
        FormatError: If a section holds a value that is not a scalar,
            sequence or mapping, or a container that contains
            itself.
    """
    document = settings.to_document()
    check_tree(document)
    lines = _header(now or datetime.now())
    for key in SCHEMA_SECTIONS:
        lines.extend(_schema_section(key, document[key]))
    lines.extend(_visual_styles(document["visual_styles"]))
    for key in LIST_SECTIONS:
        lines.extend(_list_section(key, document[key]))

    text = "\n".join(lines)
    if not text.endswith("\n"):
        text += "\n"
    debug_trace.trace(f"Generated settings document ({len(lines)} lines)", "EXPORT")
    return text
