"""
settings_io/importer.py

Reads a settings document and applies its recognized sections.

Each of the nine known top-level keys is an optional slot. A present
slot (key exists, value not null) replaces the matching live section
wholesale; fields are never merged and the incoming shape is applied
as-is. Unknown top-level keys are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

import yaml

import debug_trace
from models import SECTION_KEYS
from settings_io.checker import check_sections
from settings_io.errors import FormatError, ParseError
from settings_io.formatter import check_tree
from store import SettingsStore

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class SettingsLoader(yaml.SafeLoader):
    """Safe loader that leaves unquoted dates as strings."""


SettingsLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


@dataclass
class ImportResult:
    """Outcome of an import.

    Attributes:
        applied_sections: Number of sections written to the live store.
        applied_keys: Their document keys, in document order.
        ignored_keys: Top-level keys that are not settings sections.
        errors: Advisory messages about the applied sections' shape.
    """
    applied_sections: int = 0
    applied_keys: List[str] = field(default_factory=list)
    ignored_keys: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def recognized(self) -> bool:
        """False when the document matched none of the known sections."""
        return self.applied_sections > 0


def parse_settings_document(text: str) -> Any:
    """Parse *text* with the YAML loader.

    Unquoted dates stay strings. Values the settings document cannot
    hold (explicit binary, set or timestamp tags) and aliases that make a
    container contain itself are rejected so they never reach the store.

    Returns:
        The parsed top level: a mapping, a sequence, or ``None`` for an
        empty or comment-only document.

    Raises:
        ParseError: On YAML syntax errors, a scalar top level, or an
            unsupported or cyclic value.
    """
    try:
        data = yaml.load(text, Loader=SettingsLoader)
    except yaml.YAMLError as e:
        raise ParseError(str(e)) from e

    try:
        check_tree(data)
    except FormatError as e:
        raise ParseError(e.args[0]) from e

    if data is not None and not isinstance(data, (dict, list)):
        raise ParseError(f"Expected a mapping at the top level, got {type(data).__name__}")
    return data


def extract_sections(data: Any) -> Dict[str, Any]:
    """Return ``{document_key: value}`` for every present known section."""
    if not isinstance(data, dict):
        return {}
    return {key: data[key] for key in SECTION_KEYS if data.get(key) is not None}


@debug_trace.trace_call("IMPORT")
def import_settings(text: str, store: SettingsStore) -> ImportResult:
    """Apply the sections found in *text* to *store*.

    An empty document or one with no known section leaves *store*
    untouched and returns ``applied_sections == 0``.

    Args:
        text: Settings document text.
        store: The live configuration.

    Returns:
        An ``ImportResult``.

    Raises:
        ParseError: If *text* cannot be parsed or has a scalar top level.
    """
    data = parse_settings_document(text)
    sections = extract_sections(data)

    result = ImportResult()
    if isinstance(data, dict):
        result.ignored_keys = [str(k) for k in data if k not in SECTION_KEYS]

    if not sections:
        debug_trace.trace("No recognized settings sections", "IMPORT")
        return result

    store.apply_sections(sections)
    result.applied_keys = list(sections)
    result.applied_sections = len(sections)
    result.errors = check_sections(sections)
    debug_trace.trace(
        f"Applied {result.applied_sections} sections: {', '.join(result.applied_keys)}",
        "IMPORT",
    )
    return result
