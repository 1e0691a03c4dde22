"""Tests for settings_io/checker.py and schema validation."""
from __future__ import annotations

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models import StyleConfig, default_settings
from schemas import get_settings_schema, validate_document
from settings_io.checker import check_sections, check_visual_styles, compute_field_diff


# ─────────────────────────────────────────────────────────
# Field diff
# ─────────────────────────────────────────────────────────


class TestFieldDiff:
    def test_identical(self):
        d = StyleConfig().to_dict()
        diff = compute_field_diff(d, d)
        assert diff.missing_paths == set()
        assert diff.extra_paths == set()

    def test_nested_paths(self):
        expected = {"a": 1, "b": {"c": 1, "d": 2}}
        actual = {"b": {"c": 1, "e": 3}, "f": 4}
        diff = compute_field_diff(actual, expected)
        assert diff.missing_paths == {"a", "b.d"}
        assert diff.extra_paths == {"b.e", "f"}

    def test_baseline_target_never_reported(self):
        expected = StyleConfig().to_dict()
        actual = StyleConfig().to_dict()
        del actual["vertical"]["baselineTarget"]
        actual["horizontal"]["baselineTarget"] = "original"
        diff = compute_field_diff(actual, expected)
        assert diff.missing_paths == set()
        assert diff.extra_paths == set()


# ─────────────────────────────────────────────────────────
# Style messages
# ─────────────────────────────────────────────────────────


class TestVisualStyles:
    def test_legacy_style_messages(self):
        messages = check_visual_styles({"known": {"color": "#fff", "shadow": "none"}})
        assert "visual_styles.known.layoutMode: missing, a fallback value is used" in messages
        assert "visual_styles.known.shadow: unknown field, kept as-is" in messages

    def test_non_dict_input(self):
        assert check_visual_styles(["known"]) == []
        assert check_visual_styles({"known": "blue"}) == []


# ─────────────────────────────────────────────────────────
# Schema
# ─────────────────────────────────────────────────────────


class TestSchema:
    def test_schema_loads(self):
        schema = get_settings_schema()
        assert "visual_styles" in schema["properties"]
        assert "styleConfig" in schema["$defs"]

    def test_defaults_valid(self):
        valid, errors = validate_document(default_settings().to_document())
        assert valid, errors

    def test_percent_density_above_100(self):
        style = StyleConfig(density_mode="percent", density_value=150).to_dict()
        valid, errors = validate_document({"visual_styles": {"known": style}})
        assert not valid
        assert any(e.startswith("visual_styles.known.densityValue:") for e in errors)

    def test_count_density_above_100(self):
        style = StyleConfig(density_mode="count", density_value=150).to_dict()
        valid, _ = validate_document({"visual_styles": {"known": style}})
        assert valid

    def test_tts_speed_range(self):
        valid, errors = validate_document({"auto_translate": {"ttsSpeed": 5}})
        assert not valid
        assert errors[0].startswith("auto_translate.ttsSpeed:")

    def test_root_error_path(self):
        valid, errors = validate_document(["not", "a", "mapping"])
        assert not valid
        assert errors[0].startswith("root:")

    def test_check_sections_combines(self):
        sections = {
            "engines": [{"id": 7}],
            "visual_styles": {"known": {"color": "#fff"}},
        }
        messages = check_sections(sections)
        assert any(m.startswith("engines.0.id:") for m in messages)
        assert any(m.startswith("visual_styles.known.fontSize: missing") for m in messages)
