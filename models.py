"""
models.py

Data models and defaults for the Reword replacement-rendering engine.

The settings tree is held as plain document data (mappings, lists and
scalars) so that an imported section can be stored exactly as parsed.
Typed views (``StyleConfig``, ``OriginalTextConfig``) are built from that
data on read and fill in anything missing from older settings formats.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# ----------------------------
# Enumerated tags
# ----------------------------

class WordCategory:
    """Learning-state tags keying the per-category style table."""
    KNOWN = "known"
    WANT = "want"
    LEARNING = "learning"

    ALL = (KNOWN, WANT, LEARNING)

    LABELS = {
        KNOWN: "Known",
        WANT: "Want to learn",
        LEARNING: "Learning",
    }

    @classmethod
    def label(cls, category: str) -> str:
        """Human-readable label, falling back to the raw tag."""
        return cls.LABELS.get(category, str(category))


class LayoutMode:
    """Layout mode constants."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class TextRole:
    """The two text payloads of a replaced word."""
    TRANSLATION = "translation"
    ORIGINAL = "original"


class UnderlineStyle:
    NONE = "none"
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    WAVY = "wavy"


class DensityMode:
    COUNT = "count"
    PERCENT = "percent"


# ----------------------------
# Layout configuration
# ----------------------------

def _or_default(value: Any, default: Any) -> Any:
    return default if value is None else value


@dataclass
class WrapperPair:
    """Literal prefix/suffix decorating one role's text."""
    prefix: str = ""
    suffix: str = ""

    @classmethod
    def from_dict(cls, d: Any, fallback: Optional["WrapperPair"] = None) -> "WrapperPair":
        base = fallback or cls()
        if not isinstance(d, dict):
            return cls(base.prefix, base.suffix)
        return cls(
            prefix=str(_or_default(d.get("prefix"), base.prefix)),
            suffix=str(_or_default(d.get("suffix"), base.suffix)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"prefix": self.prefix, "suffix": self.suffix}

    def wrap(self, text: str) -> str:
        return f"{self.prefix}{text}{self.suffix}"


@dataclass
class LayoutWrappers:
    translation: WrapperPair = field(default_factory=WrapperPair)
    original: WrapperPair = field(default_factory=WrapperPair)

    def for_role(self, role: str) -> WrapperPair:
        return self.translation if role == TextRole.TRANSLATION else self.original

    def to_dict(self) -> Dict[str, Any]:
        return {
            "translation": self.translation.to_dict(),
            "original": self.original.to_dict(),
        }


@dataclass
class LayoutSpecificConfig:
    """Per-mode layout settings.

    ``baseline_target`` only matters in vertical mode. ``None`` means the
    key was absent and is read as ``"original"``.
    """
    translation_first: bool = False
    wrappers: LayoutWrappers = field(default_factory=LayoutWrappers)
    baseline_target: Optional[str] = None

    @property
    def effective_baseline_target(self) -> str:
        return self.baseline_target or TextRole.ORIGINAL

    @classmethod
    def from_dict(cls, d: Any, fallback: "LayoutSpecificConfig") -> "LayoutSpecificConfig":
        """Build a fully populated config, using *fallback* when *d* is absent.

        Args:
            d: The stored sub-config (may be missing or partial).
            fallback: The mode's default config.

        Returns:
            A new ``LayoutSpecificConfig``; *fallback* is never shared.
        """
        if not isinstance(d, dict):
            return copy.deepcopy(fallback)
        raw_wrappers = d.get("wrappers")
        if not isinstance(raw_wrappers, dict):
            raw_wrappers = {}
        wrappers = LayoutWrappers(
            translation=WrapperPair.from_dict(raw_wrappers.get("translation"), fallback.wrappers.translation),
            original=WrapperPair.from_dict(raw_wrappers.get("original"), fallback.wrappers.original),
        )
        return cls(
            translation_first=bool(_or_default(d.get("translationFirst"), fallback.translation_first)),
            wrappers=wrappers,
            baseline_target=d.get("baselineTarget"),
        )

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "translationFirst": self.translation_first,
            "wrappers": self.wrappers.to_dict(),
        }
        if self.baseline_target is not None:
            d["baselineTarget"] = self.baseline_target
        return d


def default_horizontal_layout() -> LayoutSpecificConfig:
    """Horizontal fallback: original first, original parenthesized."""
    return LayoutSpecificConfig(
        translation_first=False,
        wrappers=LayoutWrappers(
            translation=WrapperPair("", ""),
            original=WrapperPair("(", ")"),
        ),
    )


def default_vertical_layout() -> LayoutSpecificConfig:
    """Vertical fallback: translation first and used as the baseline."""
    return LayoutSpecificConfig(
        translation_first=True,
        wrappers=LayoutWrappers(),
        baseline_target=TextRole.TRANSLATION,
    )


# ----------------------------
# Per-category style
# ----------------------------

# Attribute name -> document key. Order is the document's field order.
_STYLE_KEYS = {
    "color": "color",
    "background_color": "backgroundColor",
    "is_bold": "isBold",
    "is_italic": "isItalic",
    "font_size": "fontSize",
    "underline_style": "underlineStyle",
    "underline_color": "underlineColor",
    "underline_offset": "underlineOffset",
    "original_text_color": "originalTextColor",
    "original_text_font_size": "originalTextFontSize",
    "layout_mode": "layoutMode",
    "horizontal": "horizontal",
    "vertical": "vertical",
    "density_mode": "densityMode",
    "density_value": "densityValue",
}


@dataclass
class StyleConfig:
    """Visual style and layout of one word category.

    Both layout sub-configs are always populated; only the one named by
    ``layout_mode`` is active, the other is kept so switching modes does
    not lose it. Unknown document keys are preserved in ``extras``.
    """
    color: str = "#2563eb"
    background_color: str = "transparent"
    is_bold: bool = False
    is_italic: bool = False
    font_size: str = "1em"
    underline_style: str = UnderlineStyle.NONE   # none | solid | dashed | dotted | wavy
    underline_color: str = "#2563eb"
    underline_offset: str = "2px"
    original_text_color: str = "#94a3b8"
    original_text_font_size: str = "0.85em"
    layout_mode: str = LayoutMode.HORIZONTAL     # horizontal | vertical
    horizontal: LayoutSpecificConfig = field(default_factory=default_horizontal_layout)
    vertical: LayoutSpecificConfig = field(default_factory=default_vertical_layout)
    density_mode: str = DensityMode.PERCENT      # count | percent
    density_value: float = 100
    extras: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def active_layout(self) -> LayoutSpecificConfig:
        if self.layout_mode == LayoutMode.VERTICAL:
            return self.vertical
        return self.horizontal

    def layout_for(self, mode: str) -> LayoutSpecificConfig:
        return self.vertical if mode == LayoutMode.VERTICAL else self.horizontal

    @classmethod
    def from_dict(cls, d: Any) -> "StyleConfig":
        """Normalize stored style data into a fully populated ``StyleConfig``.

        Missing or null fields take the dataclass defaults. A missing or malformed
        ``horizontal``/``vertical`` sub-config is replaced by the legacy
        fallback layout for that mode, and a missing ``layoutMode`` reads
        as horizontal.

        Args:
            d: Style dict as stored in ``visual_styles``.

        Returns:
            A ``StyleConfig`` with extras populated.
        """
        if isinstance(d, StyleConfig):
            return d
        if not isinstance(d, dict):
            return cls()
        known: Dict[str, Any] = {}
        by_doc_key = {v: k for k, v in _STYLE_KEYS.items()}
        extras: Dict[str, Any] = {}
        for key, value in d.items():
            attr = by_doc_key.get(key)
            if attr is None:
                extras[key] = value
            elif value is not None and attr not in ("horizontal", "vertical"):
                known[attr] = value
        known["horizontal"] = LayoutSpecificConfig.from_dict(d.get("horizontal"), default_horizontal_layout())
        known["vertical"] = LayoutSpecificConfig.from_dict(d.get("vertical"), default_vertical_layout())
        if not known.get("layout_mode"):
            known["layout_mode"] = LayoutMode.HORIZONTAL
        return cls(**known, extras=extras)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to document data, merging extras back in."""
        d: Dict[str, Any] = {}
        for attr, key in _STYLE_KEYS.items():
            value = getattr(self, attr)
            if isinstance(value, LayoutSpecificConfig):
                value = value.to_dict()
            d[key] = value
        d.update(self.extras)
        return d


@dataclass
class OriginalTextConfig:
    """Global original-text toggle (document section ``layout_style``)."""
    show: bool = True
    extras: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, d: Any) -> "OriginalTextConfig":
        if isinstance(d, OriginalTextConfig):
            return d
        if not isinstance(d, dict):
            return cls()
        extras = {k: v for k, v in d.items() if k != "show"}
        return cls(show=bool(d.get("show", True)), extras=extras)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"show": self.show}
        d.update(self.extras)
        return d


def default_style(category: str) -> StyleConfig:
    """First-run style for a category."""
    if category == WordCategory.KNOWN:
        return StyleConfig(
            color="#64748b",
            underline_color="#64748b",
            density_mode=DensityMode.PERCENT,
            density_value=0,
        )
    if category == WordCategory.WANT:
        return StyleConfig(
            color="#2563eb",
            is_bold=True,
            underline_style=UnderlineStyle.DASHED,
            underline_color="#93c5fd",
            density_mode=DensityMode.COUNT,
            density_value=10,
        )
    if category == WordCategory.LEARNING:
        return StyleConfig(
            color="#d97706",
            is_bold=True,
            underline_style=UnderlineStyle.WAVY,
            underline_color="#fbbf24",
            density_mode=DensityMode.PERCENT,
            density_value=100,
        )
    return StyleConfig()


# ----------------------------
# Settings aggregate
# ----------------------------

# Document key -> AllSettings attribute, in document order.
SECTION_KEYS: Dict[str, str] = {
    "auto_translate": "auto_translate",
    "interaction": "interaction",
    "page_widget": "page_widget",
    "anki": "anki",
    "layout_style": "original_text",
    "visual_styles": "styles",
    "scenarios": "scenarios",
    "engines": "engines",
    "dictionaries": "dictionaries",
}


def _default_auto_translate() -> Dict[str, Any]:
    return {
        "enabled": True,
        "bilingualMode": False,
        "translateWholePage": False,
        "matchInflections": True,
        "aggressiveMode": False,
        "blacklist": [],
        "whitelist": [],
        "ttsSpeed": 1.0,
    }


def _default_interaction() -> Dict[str, Any]:
    return {
        "mainTrigger": {"modifier": "none", "action": "hover", "delay": 300},
        "quickAddTrigger": {"modifier": "alt", "action": "click", "delay": 0},
        "bubblePosition": "top",
        "showPhonetic": True,
        "showOriginalText": True,
        "showDictExample": True,
        "showDictTranslation": True,
        "autoPronounce": False,
        "autoPronounceAccent": "US",
        "autoPronounceCount": 1,
        "dismissDelay": 300,
        "allowMultipleBubbles": False,
        "onlineDictUrl": "https://dictionary.cambridge.org/dictionary/english/{word}",
    }


def _default_page_widget() -> Dict[str, Any]:
    return {
        "enabled": True,
        "x": 20,
        "y": 200,
        "showPhonetic": True,
        "showMeaning": True,
        "showMultiExamples": False,
        "showExampleTranslation": True,
        "showContextTranslation": True,
        "showInflections": False,
        "showPartOfSpeech": True,
        "showTags": True,
        "showImportance": True,
        "showCocaRank": False,
        "showSections": {"known": False, "want": True, "learning": True},
        "cardDisplay": [
            {"id": "meaning", "enabled": True},
            {"id": "context", "enabled": True},
            {"id": "examples", "enabled": True},
        ],
    }


def _default_anki() -> Dict[str, Any]:
    return {
        "enabled": False,
        "url": "http://127.0.0.1:8765",
        "deckNameWant": "Reword::Want",
        "deckNameLearning": "Reword::Learning",
        "modelName": "Basic",
        "syncInterval": 90,
        "autoSync": False,
        "templates": {
            "frontTemplate": "<div class=\"word\">{{word}}</div>",
            "backTemplate": "<div class=\"meaning\">{{meaning}}</div>\n<div class=\"context\">{{context}}</div>",
        },
    }


def _default_scenarios() -> List[Dict[str, Any]]:
    return [{"id": "general", "name": "General", "isActive": True}]


def _default_engines() -> List[Dict[str, Any]]:
    return [
        {
            "id": "google",
            "name": "Google Translate",
            "type": "standard",
            "apiKey": "",
            "isEnabled": True,
        },
    ]


def _default_dictionaries() -> List[Dict[str, Any]]:
    return [
        {
            "id": "youdao",
            "name": "Youdao",
            "endpoint": "https://dict.youdao.com/jsonapi",
            "isEnabled": True,
            "priority": 1,
        },
    ]


@dataclass
class AllSettings:
    """The nine independently addressable settings sections.

    Each attribute holds plain document data. Sections are replaced
    wholesale; there is no field-level merge.
    """
    auto_translate: Any = field(default_factory=_default_auto_translate)
    interaction: Any = field(default_factory=_default_interaction)
    page_widget: Any = field(default_factory=_default_page_widget)
    anki: Any = field(default_factory=_default_anki)
    original_text: Any = field(default_factory=lambda: OriginalTextConfig().to_dict())
    styles: Any = field(default_factory=lambda: {
        c: default_style(c).to_dict() for c in WordCategory.ALL
    })
    scenarios: Any = field(default_factory=_default_scenarios)
    engines: Any = field(default_factory=_default_engines)
    dictionaries: Any = field(default_factory=_default_dictionaries)

    def get_section(self, key: str) -> Any:
        """Return a section by its document key."""
        return getattr(self, SECTION_KEYS[key])

    def replace_section(self, key: str, value: Any) -> None:
        """Overwrite a section by its document key.

        Raises:
            KeyError: If *key* is not one of ``SECTION_KEYS``.
        """
        setattr(self, SECTION_KEYS[key], value)

    def to_document(self) -> Dict[str, Any]:
        """Return ``{document_key: section}`` in document order."""
        return {key: self.get_section(key) for key in SECTION_KEYS}

    @classmethod
    def from_document(cls, data: Dict[str, Any]) -> "AllSettings":
        """Build settings from a document dict; absent sections keep defaults."""
        settings = cls()
        for key in SECTION_KEYS:
            if data.get(key) is not None:
                settings.replace_section(key, data[key])
        return settings

    def style_configs(self) -> Dict[str, StyleConfig]:
        """Normalized ``StyleConfig`` per category key."""
        styles = self.styles if isinstance(self.styles, dict) else {}
        return {str(cat): StyleConfig.from_dict(value) for cat, value in styles.items()}

    def original_text_config(self) -> OriginalTextConfig:
        return OriginalTextConfig.from_dict(self.original_text)


def default_settings() -> AllSettings:
    """First-run settings."""
    return AllSettings()

