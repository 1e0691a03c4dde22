"""
store.py

Live configuration holder.

Keeps the one ``AllSettings`` instance that rendering reads and imports
write into. Optionally persisted as JSON (the tool settings decide where,
see ``settings.SettingsManager.get_store_path``).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import debug_trace
from models import AllSettings, SECTION_KEYS, default_settings


class SettingsStore:
    """The live extension settings.

    Args:
        path: JSON file backing the store, or ``None`` for memory only.
        settings: Initial settings (default: first-run defaults, or the
            file's contents when *path* exists).
    """

    def __init__(self, path: Optional[Path] = None, settings: Optional[AllSettings] = None):
        self.path = Path(path) if path else None
        self.settings = settings if settings is not None else self.load()

    def load(self) -> AllSettings:
        """Read the backing file.

        Returns:
            The stored settings, or defaults when there is no file or it
            cannot be read.
        """
        if self.path is None or not self.path.exists():
            return default_settings()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            debug_trace.trace(f"Ignoring unreadable store {self.path}: {e}", "STORE")
            return default_settings()
        if not isinstance(data, dict):
            debug_trace.trace(f"Ignoring store {self.path}: top level is not an object", "STORE")
            return default_settings()
        return AllSettings.from_document(data)

    def save(self) -> None:
        """Write the settings to the backing file (no-op without a path)."""
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.settings.to_document(), f, ensure_ascii=False, indent=2, default=str)
        debug_trace.trace(f"Saved store to {self.path}", "STORE")

    def apply_sections(self, sections: Dict[str, Any]) -> None:
        """Replace each given section wholesale.

        Raises:
            KeyError: If a key is not a known section.
        """
        for key in sections:
            if key not in SECTION_KEYS:
                raise KeyError(key)
        for key, value in sections.items():
            self.settings.replace_section(key, value)
