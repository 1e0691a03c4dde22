"""
schemas/__init__.py

JSON Schema definition and validation utilities for the settings document.
Validation is advisory: imports never fail because of it.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Optional, Tuple

from jsonschema import Draft202012Validator

# Schema file paths
SCHEMA_DIR = os.path.dirname(os.path.abspath(__file__))
SETTINGS_SCHEMA_PATH = os.path.join(SCHEMA_DIR, "settings_schema.json")

# Cached schema
_settings_schema: Optional[Dict] = None


def get_settings_schema() -> Dict:
    """Load and return the settings document schema."""
    global _settings_schema
    if _settings_schema is None:
        with open(SETTINGS_SCHEMA_PATH, "r", encoding="utf-8") as f:
            _settings_schema = json.load(f)
    return _settings_schema


def validate_document(data: Any) -> Tuple[bool, List[str]]:
    """
    Validate a parsed settings document against the schema.

    Args:
        data: The parsed document (or any subset of its sections)

    Returns:
        Tuple of (is_valid, list_of_error_messages)
    """
    validator = Draft202012Validator(get_settings_schema())
    errors = sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))

    if not errors:
        return True, []

    error_messages = []
    for error in errors:
        path = ".".join(str(p) for p in error.absolute_path) if error.absolute_path else "root"
        error_messages.append(f"{path}: {error.message}")

    return False, error_messages
