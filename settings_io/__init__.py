"""
settings_io package

Export of the settings tree to a commented YAML document and tolerant
import of such documents back into the live configuration.
"""

from settings_io.errors import FormatError, ParseError, SettingsIOError
from settings_io.serializer import generate_settings_yaml
from settings_io.importer import ImportResult, import_settings, parse_settings_document

__all__ = [
    "FormatError",
    "ParseError",
    "SettingsIOError",
    "generate_settings_yaml",
    "ImportResult",
    "import_settings",
    "parse_settings_document",
]
