"""
settings_io/field_docs.py

Comment table for the settings document, keyed by section and field.

The serializer looks fields up here; it never hard-codes comment text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class FieldDoc:
    """Description of one field and a hint of its allowed values."""
    comment: str
    options: Optional[str] = None


BOOL = "true, false"

SECTION_FIELD_DOCS: Dict[str, Dict[str, FieldDoc]] = {
    "auto_translate": {
        "enabled": FieldDoc("Master switch: enable the extension", "true (on), false (off)"),
        "bilingualMode": FieldDoc("Bilingual mode: append the translation after each paragraph", BOOL),
        "translateWholePage": FieldDoc("Scan the whole page, including sidebars and footers", BOOL),
        "matchInflections": FieldDoc("Match inflected forms (plurals, tenses)", BOOL),
        "aggressiveMode": FieldDoc("Aggressive mode: fetch all meanings for fuzzy matching (uses more traffic)", BOOL),
        "blacklist": FieldDoc("Domains that are never translated", 'Array of strings (e.g. ["example.com"])'),
        "whitelist": FieldDoc("Domains that are always translated", "Array of strings"),
        "ttsSpeed": FieldDoc("Text-to-speech rate", "0.25 - 3.0"),
    },
    "interaction": {
        "mainTrigger": FieldDoc("How the lookup bubble is triggered", "Object { modifier, action, delay }"),
        "quickAddTrigger": FieldDoc("How a word is quick-added to Learning", "Object { modifier, action, delay }"),
        "bubblePosition": FieldDoc("Where the bubble appears", '"top", "bottom", "left", "right"'),
        "showPhonetic": FieldDoc("Show phonetics in the bubble", BOOL),
        "showOriginalText": FieldDoc("Show the original text in the bubble", BOOL),
        "showDictExample": FieldDoc("Show dictionary examples in the bubble", BOOL),
        "showDictTranslation": FieldDoc("Show dictionary meanings in the bubble", BOOL),
        "autoPronounce": FieldDoc("Pronounce the word when the bubble opens", BOOL),
        "autoPronounceAccent": FieldDoc("Accent used for automatic pronunciation", '"US", "UK"'),
        "autoPronounceCount": FieldDoc("How many times to pronounce", "Integer (0-5)"),
        "dismissDelay": FieldDoc("Bubble dismiss delay (milliseconds)", "Integer"),
        "allowMultipleBubbles": FieldDoc("Allow several bubbles at once", BOOL),
        "onlineDictUrl": FieldDoc("Online dictionary link template", "String ({word} is replaced)"),
    },
    "page_widget": {
        "enabled": FieldDoc("Show the floating page widget", BOOL),
        "x": FieldDoc("Widget X position (saved automatically)", "Number"),
        "y": FieldDoc("Widget Y position (saved automatically)", "Number"),
        "showPhonetic": FieldDoc("Show phonetics in the word list", BOOL),
        "showMeaning": FieldDoc("Show meanings in the word list", BOOL),
        "showMultiExamples": FieldDoc("Show several examples per word", BOOL),
        "showExampleTranslation": FieldDoc("Show example translations", BOOL),
        "showContextTranslation": FieldDoc("Show the translation of the source sentence", BOOL),
        "showInflections": FieldDoc("Show inflected forms", BOOL),
        "showPartOfSpeech": FieldDoc("Show part of speech", BOOL),
        "showTags": FieldDoc("Show level tags", BOOL),
        "showImportance": FieldDoc("Show importance stars", BOOL),
        "showCocaRank": FieldDoc("Show COCA frequency rank", BOOL),
        "showSections": FieldDoc("Word categories listed in the widget", "{ known: bool, want: bool, learning: bool }"),
        "cardDisplay": FieldDoc("Card content order and switches", "Array of objects"),
    },
    "anki": {
        "enabled": FieldDoc("Enable Anki integration", BOOL),
        "url": FieldDoc("AnkiConnect address", "URL string"),
        "deckNameWant": FieldDoc('Deck receiving "Want to learn" words', "String"),
        "deckNameLearning": FieldDoc('Deck receiving "Learning" words', "String"),
        "modelName": FieldDoc("Note type name", "String"),
        "syncInterval": FieldDoc("Days before a word counts as mastered", "Integer"),
        "autoSync": FieldDoc("Synchronize automatically", BOOL),
        "templates": FieldDoc("Card templates (HTML)", "{ frontTemplate, backTemplate }"),
    },
    "layout_style": {
        "show": FieldDoc("Show the original text next to the translation", BOOL),
        "activeMode": FieldDoc("Layout mode", '"horizontal", "vertical"'),
        "horizontal": FieldDoc("Horizontal layout details", "Object"),
        "vertical": FieldDoc("Vertical layout details", "Object"),
        "style": FieldDoc("Original text style", "Object (color, fontSize, etc.)"),
    },
}

# Trailing comments on each field of a visual_styles entry.
STYLE_FIELD_DOCS: Dict[str, str] = {
    "color": "text color",
    "backgroundColor": "background color",
    "isBold": "bold",
    "isItalic": "italic",
    "fontSize": "font size",
    "underlineStyle": "underline (none, solid, dashed, dotted, wavy)",
    "underlineColor": "underline color",
    "underlineOffset": "underline offset",
    "originalTextColor": "original text color",
    "originalTextFontSize": "original text font size",
    "layoutMode": "layout (horizontal, vertical)",
    "horizontal": "horizontal layout",
    "vertical": "vertical layout",
    "densityMode": "density mode (count, percent)",
    "densityValue": "density value",
}

# Banner comments for keyed collections and lists.
SECTION_BANNERS: Dict[str, str] = {
    "visual_styles": "Visual styles (one block per word category)",
    "scenarios": "Scenarios",
    "engines": "Translation engines (includes API keys, keep this file private)",
    "dictionaries": "Dictionary sources",
}


def field_doc(section: str, key: str) -> Optional[FieldDoc]:
    """Look up the doc entry for *key* in *section*."""
    return SECTION_FIELD_DOCS.get(section, {}).get(key)
