"""
settings_io/formatter.py

Small tree-to-text formatter for the settings document.

Values are classified as scalar, sequence or mapping and written as the
block-style YAML subset the settings document uses:

- sequences of scalars -> flow form ``["a", "b"]``
- sequences holding mappings or sequences -> one ``- `` item per element,
  item fields indented one level deeper than the dash
- mappings -> one ``key: value`` line per entry, in insertion order
- strings are always double-quoted; booleans, numbers and null are literals

Indentation is two spaces per level. Comments are not part of the tree;
callers pass them in per key.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any, Callable, List, Mapping, Optional, Set

from settings_io.errors import FormatError

INDENT = "  "

SCALAR = "scalar"
SEQUENCE = "sequence"
MAPPING = "mapping"

# Characters YAML will not accept raw inside a double-quoted scalar
_YAML_UNSAFE = re.compile("[\x7f-\x9f\u2028\u2029\ufeff\ufffe\uffff\ud800-\udfff]")
_PLAIN_KEY = re.compile(r"^[A-Za-z_][A-Za-z0-9_\-]*$")
_RESERVED_WORDS = {"y", "n", "yes", "no", "on", "off", "true", "false", "null"}
# Line breaks YAML recognizes inside a comment, plus characters it rejects
_COMMENT_UNSAFE = re.compile("[\x00-\x1f\x7f-\x9f\u2028\u2029\ufeff\ufffe\uffff\ud800-\udfff]+")

CommentLookup = Callable[[Any], Optional[str]]


def indent(level: int) -> str:
    return INDENT * level


def classify(value: Any) -> str:
    """Tag *value* as scalar, sequence or mapping.

    Raises:
        FormatError: For values outside those three shapes.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return SCALAR
    if isinstance(value, Mapping):
        return MAPPING
    if isinstance(value, (list, tuple)):
        return SEQUENCE
    raise FormatError(f"Unsupported value of type {type(value).__name__}")


def check_tree(value: Any, path: str = "root", _active: Optional[Set[int]] = None) -> None:
    """Walk *value* and reject anything the document cannot hold.

    Raises:
        FormatError: For a value outside the three shapes, or a container
            that contains itself (e.g. a YAML alias pointing at its anchor).
    """
    try:
        kind = classify(value)
    except FormatError as e:
        raise FormatError(f"{path}: {e}") from e
    if kind == SCALAR:
        return
    active = set() if _active is None else _active
    if id(value) in active:
        raise FormatError(f"{path}: cyclic value")
    active.add(id(value))
    if kind == MAPPING:
        for key, item in value.items():
            check_tree(key, f"{path}.<key>", active)
            check_tree(item, f"{path}.{key}", active)
    else:
        for index, item in enumerate(value):
            check_tree(item, f"{path}.{index}", active)
    active.discard(id(value))


def comment_text(text: Any) -> str:
    """*text* flattened to a single comment-safe line."""
    return " ".join(_COMMENT_UNSAFE.sub(" ", str(text)).split())


def quote(text: str) -> str:
    """Double-quote *text* with escapes YAML understands."""
    out = json.dumps(text, ensure_ascii=False)
    return _YAML_UNSAFE.sub(lambda m: "\\u%04x" % ord(m.group()), out)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return ".nan"
    if math.isinf(value):
        return ".inf" if value > 0 else "-.inf"
    text = repr(value)
    mantissa, sep, exponent = text.partition("e")
    if sep and "." not in mantissa:
        # YAML 1.1 floats need a dot in the mantissa
        text = f"{mantissa}.0e{exponent}"
    return text


def format_scalar(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return quote(value)
    raise FormatError(f"Not a scalar: {value!r}")


def format_key(key: Any) -> str:
    """Bare key when it reads back as the same string, quoted otherwise."""
    if isinstance(key, str):
        if _PLAIN_KEY.match(key) and key.lower() not in _RESERVED_WORDS:
            return key
        return quote(key)
    return format_scalar(key)


def _is_block_sequence(value: Any) -> bool:
    return any(classify(item) != SCALAR for item in value)


def format_inline(value: Any) -> str:
    """Single-line form of a scalar, empty container or scalar sequence."""
    kind = classify(value)
    if kind == SCALAR:
        return format_scalar(value)
    if kind == MAPPING:
        if value:
            raise FormatError("Non-empty mapping has no inline form")
        return "{}"
    if _is_block_sequence(value):
        raise FormatError("Sequence of composite values has no inline form")
    return "[" + ", ".join(format_scalar(item) for item in value) + "]"


def _needs_block(value: Any) -> bool:
    kind = classify(value)
    if kind == MAPPING:
        return bool(value)
    if kind == SEQUENCE:
        return bool(value) and _is_block_sequence(value)
    return False


def entry_lines(key: Any, value: Any, level: int, trailing: Optional[str] = None) -> List[str]:
    """Lines for one ``key: value`` entry at *level*."""
    suffix = f" # {comment_text(trailing)}" if trailing else ""
    head = f"{indent(level)}{format_key(key)}:"
    if not _needs_block(value):
        return [f"{head} {format_inline(value)}{suffix}"]
    if classify(value) == MAPPING:
        return [head + suffix] + mapping_lines(value, level + 1)
    return [head + suffix] + sequence_lines(value, level)


def mapping_lines(
    mapping: Mapping[Any, Any],
    level: int,
    leading: Optional[CommentLookup] = None,
    trailing: Optional[CommentLookup] = None,
    spaced: bool = False,
) -> List[str]:
    """Lines for every entry of *mapping* at *level*.

    Args:
        mapping: Entries in output order.
        level: Indentation level of the keys.
        leading: Key -> comment block written above the entry (may
            contain several lines separated by ``\\n``).
        trailing: Key -> comment appended to the entry's first line.
        spaced: Put a blank line after every entry.
    """
    lines: List[str] = []
    for key, value in mapping.items():
        if leading is not None:
            block = leading(key)
            if block:
                lines.extend(f"{indent(level)}# {comment_text(text)}" for text in block.split("\n"))
        lines.extend(entry_lines(key, value, level, trailing(key) if trailing else None))
        if spaced:
            lines.append("")
    return lines


def _item_lines(item: Any, level: int) -> List[str]:
    dash = f"{indent(level)}- "
    if not _needs_block(item):
        return [dash + format_inline(item)]
    if classify(item) == MAPPING:
        nested = mapping_lines(item, level + 1)
    else:
        nested = sequence_lines(item, level + 1)
    return [dash + nested[0].lstrip(" ")] + nested[1:]


def sequence_lines(sequence: Any, level: int) -> List[str]:
    """Block lines for a sequence whose dashes sit at *level*."""
    lines: List[str] = []
    for item in sequence:
        lines.extend(_item_lines(item, level))
    return lines

