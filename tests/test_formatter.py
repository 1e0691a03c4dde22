"""Tests for settings_io/formatter.py: tree -> YAML text."""
from __future__ import annotations

import os
import sys

import pytest
import yaml

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from settings_io.errors import FormatError
from settings_io.formatter import (
    MAPPING,
    SCALAR,
    SEQUENCE,
    classify,
    format_key,
    format_scalar,
    check_tree,
    comment_text,
    entry_lines,
    quote,
)


def _entry_text(key, value, level=0):
    return "\n".join(entry_lines(key, value, level)) + "\n"


def _reparse(key, value):
    return yaml.safe_load(_entry_text(key, value))


# ─────────────────────────────────────────────────────────
# Classification and scalars
# ─────────────────────────────────────────────────────────


class TestScalars:
    def test_classify(self):
        assert classify("x") == SCALAR
        assert classify(None) == SCALAR
        assert classify(1.5) == SCALAR
        assert classify([1]) == SEQUENCE
        assert classify({"a": 1}) == MAPPING

    @pytest.mark.parametrize("value", [object(), {1, 2}, b"bytes"])
    def test_unsupported_type(self, value):
        with pytest.raises(FormatError):
            classify(value)

    def test_literals(self):
        assert format_scalar(True) == "true"
        assert format_scalar(False) == "false"
        assert format_scalar(None) == "null"
        assert format_scalar(90) == "90"
        assert format_scalar(1.0) == "1.0"

    def test_strings_always_quoted(self):
        assert format_scalar("hover") == '"hover"'
        assert format_scalar("") == '""'

    def test_float_exponent_has_dot(self):
        assert format_scalar(1e16) == "1.0e+16"
        assert yaml.safe_load(format_scalar(1e16)) == 1e16

    def test_special_floats(self):
        assert format_scalar(float("inf")) == ".inf"
        assert format_scalar(float("-inf")) == "-.inf"
        assert format_scalar(float("nan")) == ".nan"

    @pytest.mark.parametrize("text", [
        'say "hi"',
        "back\\slash",
        "line\nbreak\ttab",
        "#not a comment",
        "key: value",
        "yes",
        "null",
        "123",
        "记住",
        " para ",
        "\x85\x7f",
        "<div class=\"word\">{{word}}</div>",
    ])
    def test_string_reads_back(self, text):
        assert yaml.safe_load(quote(text)) == text


# ─────────────────────────────────────────────────────────
# Keys
# ─────────────────────────────────────────────────────────


class TestKeys:
    def test_plain_keys_bare(self):
        assert format_key("ttsSpeed") == "ttsSpeed"
        assert format_key("deck-name") == "deck-name"
        assert format_key("_x") == "_x"

    @pytest.mark.parametrize("key", ["yes", "No", "null", "with space", "1abc", "", "a:b"])
    def test_ambiguous_keys_quoted(self, key):
        assert format_key(key).startswith('"')
        assert _reparse(key, 1) == {key: 1}


# ─────────────────────────────────────────────────────────
# Containers
# ─────────────────────────────────────────────────────────


class TestContainers:
    def test_scalar_sequence_flow(self):
        assert _entry_text("blacklist", ["a.com", "b.com"]) == 'blacklist: ["a.com", "b.com"]\n'

    def test_empty_containers(self):
        assert _entry_text("whitelist", []) == "whitelist: []\n"
        assert _entry_text("templates", {}) == "templates: {}\n"

    def test_mapping_block(self):
        text = _entry_text("mainTrigger", {"modifier": "none", "delay": 300})
        assert text == 'mainTrigger:\n  modifier: "none"\n  delay: 300\n'

    def test_sequence_of_mappings(self):
        text = _entry_text("cardDisplay", [{"id": "meaning", "enabled": True}], 1)
        assert text == '  cardDisplay:\n  - id: "meaning"\n    enabled: true\n'

    def test_nested_sequences(self):
        value = [[{"a": 1, "b": 2}], [1, 2], []]
        text = _entry_text("x", value)
        assert text.splitlines()[1] == "- - a: 1"
        assert yaml.safe_load(text) == {"x": value}

    def test_deep_tree_reads_back(self):
        value = {
            "a": [1, 2.5, None, True, "s"],
            "b": {"c": "x", "d": {}, "e": []},
            "f": [{"g": 1, "h": [{"i": False}]}, {"j": {"k": [1e-7]}}],
            "yes": "quoted key",
            "m": None,
        }
        assert _reparse("root", value) == {"root": value}

    def test_unsupported_nested_value(self):
        with pytest.raises(FormatError):
            _entry_text("engines", [{"id": object()}])


# ─────────────────────────────────────────────────────────
# Tree check and comments
# ─────────────────────────────────────────────────────────


class TestCheckTree:
    def test_plain_tree_passes(self):
        shared = {"id": "x"}
        check_tree({"a": [shared, shared], "b": {"c": None}})

    def test_self_containing_list(self):
        value = []
        value.append(value)
        with pytest.raises(FormatError, match="cyclic"):
            check_tree({"scenarios": value})

    def test_self_containing_mapping(self):
        value = {"id": "x"}
        value["self"] = value
        with pytest.raises(FormatError, match="root.self: cyclic"):
            check_tree(value)

    def test_unsupported_value_path(self):
        with pytest.raises(FormatError, match=r"root\.engines\.0\.key"):
            check_tree({"engines": [{"key": b"raw"}]})


class TestCommentText:
    @pytest.mark.parametrize("text", [
        "line\nbreak: x",
        "cr\rlf",
        "next\x85line",
        "sep\u2028para\u2029end",
        "nul\x00tab\t",
    ])
    def test_single_line(self, text):
        line = "# " + comment_text(text)
        assert yaml.safe_load(f"{line}\nkey: 1\n") == {"key": 1}

    def test_collapses_whitespace(self):
        assert comment_text("a\n\n  b") == "a b"

    def test_trailing_comment_sanitized(self):
        lines = entry_lines("color", "#fff", 0, trailing="text\ncolor: 1")
        assert lines == ['color: "#fff" # text color: 1']
