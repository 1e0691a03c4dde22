"""
settings.py

Persistent tool settings for Reword.

Handles cross-platform settings storage using TOML format with platformdirs
for proper user config directory detection. These are the settings of the
rendering/backup tooling itself, not the extension settings tree that is
exported and imported (see ``models.AllSettings``).

Settings file location:
    - Windows: %APPDATA%/reword/settings.toml
    - macOS: ~/Library/Application Support/reword/settings.toml
    - Linux: ~/.config/reword/settings.toml

Default values are documented in comments throughout this file.
If settings.toml is corrupted, these defaults will be used.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

# TOML reading - use tomllib for Python 3.11+, tomli for earlier versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

import debug_trace

APP_NAME = "reword"

# Global settings manager instance (singleton)
_settings_manager: Optional["SettingsManager"] = None


def get_settings() -> "SettingsManager":
    """Get the global settings manager instance.

    Returns:
        The singleton SettingsManager instance.
    """
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager


# =============================================================================
# Render Settings
# =============================================================================

@dataclass
class RenderSettings:
    """Markup produced for each replaced word.

    Defaults:
        wrapper_class: "reword-wrapper"
        target_class: "reword-target"
        hover_border_color: "rgba(59, 130, 246, 0.5)"
        original_text_color: "#94a3b8"
        original_text_font_size: "0.85em"
    """
    wrapper_class: str = "reword-wrapper"                   # Default: "reword-wrapper"
    target_class: str = "reword-target"                     # Default: "reword-target"
    hover_border_color: str = "rgba(59, 130, 246, 0.5)"     # Default: translucent blue
    original_text_color: str = "#94a3b8"                    # Default: slate gray
    original_text_font_size: str = "0.85em"                 # Default: 0.85em


# =============================================================================
# Export Settings
# =============================================================================

@dataclass
class ExportSettings:
    """Settings backup export.

    Defaults:
        directory: "" (~/Downloads)
        extension: "yaml"
    """
    directory: str = ""       # Default: "" (use ~/Downloads)
    extension: str = "yaml"   # Default: "yaml"


# =============================================================================
# Debug Settings
# =============================================================================

@dataclass
class DebugSettings:
    """Trace output.

    Defaults:
        trace: False
        trace_render: False
        log_file: ""
    """
    trace: bool = False          # Default: False
    trace_render: bool = False   # Default: False (one line per rendered word)
    log_file: str = ""           # Default: "" (stderr only)


# =============================================================================
# Main App Settings
# =============================================================================

@dataclass
class AppSettings:
    """Tool settings with default values.

    Attributes:
        render: Markup class names and fallback colors.
        export: Backup export location and extension.
        debug: Trace output switches.
    """
    render: RenderSettings = field(default_factory=RenderSettings)
    export: ExportSettings = field(default_factory=ExportSettings)
    debug: DebugSettings = field(default_factory=DebugSettings)


# =============================================================================
# Settings Manager
# =============================================================================

class SettingsManager:
    """Manages loading, saving, and accessing tool settings.

    Settings are stored in a TOML file at the platform-appropriate location.
    If the settings file doesn't exist, defaults are used and the file is
    created on first save.

    Args:
        app_name: Application name used for the config directory.
        config_dir: Override for the config directory (used by tests).
        data_dir: Override for the data directory holding the live store.
    """

    def __init__(
        self,
        app_name: str = APP_NAME,
        config_dir: Optional[Path] = None,
        data_dir: Optional[Path] = None,
    ):
        self.settings_dir = Path(config_dir) if config_dir else Path(platformdirs.user_config_dir(app_name))
        self.data_dir = Path(data_dir) if data_dir else Path(platformdirs.user_data_dir(app_name))
        self.settings_file = self.settings_dir / "settings.toml"
        self.settings = self.load()
        self._needs_save = not self.settings_file.exists()  # Save if file didn't exist

    def ensure_file_complete(self) -> None:
        """Ensure settings file exists with all sections. Call once at startup."""
        if self._needs_save or not self.settings_file.exists():
            self.save()
            self._needs_save = False

    def load(self) -> AppSettings:
        """Load settings from the TOML file.

        Returns:
            AppSettings instance with values from file or defaults if file
            doesn't exist or is invalid.
        """
        if not self.settings_file.exists():
            return AppSettings()

        try:
            with open(self.settings_file, "rb") as f:
                data = tomllib.load(f)

            return self._parse_toml(data)
        except (OSError, tomllib.TOMLDecodeError, AttributeError) as e:
            # If file is corrupted or invalid, return defaults
            debug_trace.trace(f"Ignoring unreadable {self.settings_file}: {e}", "ERROR")
            return AppSettings()

    def _parse_toml(self, data: Dict[str, Any]) -> AppSettings:
        """Parse TOML data into AppSettings.

        Args:
            data: Parsed TOML dictionary.

        Returns:
            AppSettings instance populated from TOML data.
        """
        settings = AppSettings()

        render = data.get("render", {})
        settings.render.wrapper_class = render.get("wrapper_class", settings.render.wrapper_class)
        settings.render.target_class = render.get("target_class", settings.render.target_class)
        settings.render.hover_border_color = render.get("hover_border_color", settings.render.hover_border_color)
        settings.render.original_text_color = render.get("original_text_color", settings.render.original_text_color)
        settings.render.original_text_font_size = render.get("original_text_font_size", settings.render.original_text_font_size)

        export = data.get("export", {})
        settings.export.directory = export.get("directory", settings.export.directory)
        settings.export.extension = export.get("extension", settings.export.extension)

        debug = data.get("debug", {})
        settings.debug.trace = debug.get("trace", settings.debug.trace)
        settings.debug.trace_render = debug.get("trace_render", settings.debug.trace_render)
        settings.debug.log_file = debug.get("log_file", settings.debug.log_file)

        return settings

    def save(self) -> None:
        """Save current settings to the TOML file.

        Creates the settings directory if it doesn't exist.
        """
        self.settings_dir.mkdir(parents=True, exist_ok=True)

        data = self._to_toml_dict()

        with open(self.settings_file, "wb") as f:
            tomli_w.dump(data, f)

    def _to_toml_dict(self) -> Dict[str, Any]:
        """Convert settings to a TOML-compatible dictionary structure.

        Returns:
            Dictionary organized by TOML sections.
        """
        s = self.settings
        return {
            "render": {
                "wrapper_class": s.render.wrapper_class,
                "target_class": s.render.target_class,
                "hover_border_color": s.render.hover_border_color,
                "original_text_color": s.render.original_text_color,
                "original_text_font_size": s.render.original_text_font_size,
            },
            "export": {
                "directory": s.export.directory,
                "extension": s.export.extension,
            },
            "debug": {
                "trace": s.debug.trace,
                "trace_render": s.debug.trace_render,
                "log_file": s.debug.log_file,
            },
        }

    def apply_debug(self) -> None:
        """Push the debug section into the trace module."""
        d = self.settings.debug
        debug_trace.configure(d.trace, d.trace_render, d.log_file or None)

    def get_export_dir(self) -> Path:
        """Get the resolved export directory path.

        Returns:
            Path to export directory. Falls back to ~/Downloads if the
            directory setting is empty.
        """
        if self.settings.export.directory:
            return Path(self.settings.export.directory)
        return Path.home() / "Downloads"

    def get_settings_path(self) -> Path:
        """Get the path to the settings file.

        Returns:
            Path object pointing to the settings file location.
        """
        return self.settings_file

    def get_store_path(self) -> Path:
        """Get the path to the live extension settings (JSON)."""
        return self.data_dir / "live_settings.json"
