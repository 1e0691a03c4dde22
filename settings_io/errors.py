"""
settings_io/errors.py

Error kinds raised by the settings serializer and importer.
"""

from __future__ import annotations


class SettingsIOError(Exception):
    """Base class for settings export/import failures."""


class FormatError(SettingsIOError):
    """The settings tree could not be written as a settings document."""


class ParseError(SettingsIOError):
    """The settings document is not valid or its top level is not a mapping.

    Attributes:
        message: The parser's message, shown to the user as-is.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
