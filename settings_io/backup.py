"""
settings_io/backup.py

Export and import actions behind the backup/restore screen.

Every action returns a ``Notice`` instead of raising, so the caller only
has to show it. Typed failures (``FormatError``, ``ParseError``, I/O
errors) become error notices; a document with no recognized section is a
warning.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Optional, Tuple

import debug_trace
from models import AllSettings
from settings_io.errors import FormatError, ParseError
from settings_io.importer import ImportResult, import_settings
from settings_io.serializer import generate_settings_yaml
from store import SettingsStore

BACKUP_FILENAME_PREFIX = "reword_settings_backup_"
IMPORT_EXTENSIONS = (".yaml", ".yml", ".txt")


class NoticeLevel:
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Notice:
    """User-facing outcome of a backup action."""
    level: str
    message: str

    @property
    def is_error(self) -> bool:
        return self.level == NoticeLevel.ERROR


def backup_filename(day: Optional[date] = None, extension: str = "yaml") -> str:
    """``reword_settings_backup_<YYYY-MM-DD>.<extension>``"""
    day = day or date.today()
    return f"{BACKUP_FILENAME_PREFIX}{day.isoformat()}.{extension.lstrip('.')}"


def is_importable(path: Path) -> bool:
    """Whether *path* has one of the extensions offered for import."""
    return Path(path).suffix.lower() in IMPORT_EXTENSIONS


def export_to_text(settings: AllSettings, now: Optional[datetime] = None) -> Tuple[Optional[str], Notice]:
    """Serialize for copying to the clipboard."""
    try:
        text = generate_settings_yaml(settings, now=now)
    except FormatError as e:
        debug_trace.trace_exception("Export failed")
        return None, Notice(NoticeLevel.ERROR, f"Export failed: {e}")
    return text, Notice(NoticeLevel.SUCCESS, "Settings copied")


def export_to_file(
    settings: AllSettings,
    directory: Path,
    day: Optional[date] = None,
    now: Optional[datetime] = None,
    extension: str = "yaml",
) -> Tuple[Optional[Path], Notice]:
    """Write a dated backup file into *directory*.

    Returns:
        ``(path, notice)``; *path* is ``None`` when the export failed.
    """
    text, notice = export_to_text(settings, now=now)
    if text is None:
        return None, notice

    path = Path(directory) / backup_filename(day, extension)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        debug_trace.trace_exception("Writing backup failed")
        return None, Notice(NoticeLevel.ERROR, f"Export failed: {e}")

    debug_trace.trace(f"Exported settings to {path}", "EXPORT")
    return path, Notice(NoticeLevel.SUCCESS, "Settings exported")


def import_from_text(text: str, store: SettingsStore) -> Tuple[Optional[ImportResult], Notice]:
    """Apply a pasted or loaded document to *store*.

    Returns:
        ``(result, notice)``; *result* is ``None`` when nothing was parsed.
    """
    if not text or not text.strip():
        return None, Notice(NoticeLevel.WARNING, "Nothing to import")

    try:
        result = import_settings(text, store)
    except ParseError as e:
        return None, Notice(NoticeLevel.ERROR, f"Could not parse settings: {e.message}")

    if not result.recognized:
        return result, Notice(
            NoticeLevel.WARNING,
            "No settings sections recognized; check the YAML structure",
        )
    return result, Notice(
        NoticeLevel.SUCCESS,
        f"Restored {result.applied_sections} settings sections",
    )


def import_from_file(path: Path, store: SettingsStore) -> Tuple[Optional[ImportResult], Notice]:
    """Read *path* (any extension) and import it."""
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        return None, Notice(NoticeLevel.ERROR, f"Could not read {path}: {e}")
    if not is_importable(path):
        debug_trace.trace(f"Importing {path} despite unexpected extension", "IMPORT")
    return import_from_text(text, store)
