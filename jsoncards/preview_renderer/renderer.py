"""Preview renderer.

Produces a short, human-friendly summary of a JSON value for display inside
a card: counts, element types, a few sample values and friendly field names
rather than a raw dump. The caller's line budget picks the mode: budgets above
``EXPANDED_THRESHOLD`` get the expanded view, anything else the compact one.
Output never exceeds the budget.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from jsoncards.card_extractor.values import JsonKind, format_number, json_kind
from jsoncards.config import runtime_config
from jsoncards.preview_renderer.friendly_names import friendly_name

logger = logging.getLogger(__name__)

EXPANDED_THRESHOLD = 10

# compact mode
COMPACT_FIELDS = 4
COMPACT_FIELD_CHARS = 25
# expanded mode
EXPANDED_ITEMS = 20
EXPANDED_OBJECT_ITEMS = 10
INLINE_NESTED_KEYS = 3

PRIMITIVE_CHARS = 30
SAMPLE_KEYS = 3
INDENT = "   "


def render_preview(content: Any, max_lines: Optional[int] = None) -> str:
    """Render a bounded preview of ``content``; never raises."""
    budget = runtime_config.get_preview_lines() if max_lines is None else max_lines
    budget = max(0, budget)
    try:
        lines = _preview_lines(content, budget)
    except Exception as exc:
        logger.debug("Preview fallback for %s value: %s", type(content).__name__, exc)
        lines = [str(content)]
    # entries may carry embedded newlines from keys or string values
    text = "\n".join(lines)
    return "\n".join(text.split("\n")[:budget])


def is_expanded(max_lines: int) -> bool:
    return max_lines > EXPANDED_THRESHOLD


def _preview_lines(content: Any, max_lines: int) -> List[str]:
    kind = json_kind(content)
    if kind is JsonKind.array:
        return _array_lines(content, max_lines)
    if kind is JsonKind.object:
        return _object_lines(content, max_lines)
    return [f"📄 Simple value: {format_primitive(content)}"]


def format_primitive(value: Any) -> str:
    """Format a value on one short line; long strings are cut with an ellipsis."""
    kind = json_kind(value)
    if kind is JsonKind.string:
        if len(value) > PRIMITIVE_CHARS:
            return f'"{value[:PRIMITIVE_CHARS - 3]}..."'
        return f'"{value}"'
    if kind is JsonKind.number:
        return format_number(value)
    if kind is JsonKind.boolean:
        return "true" if value else "false"
    if kind is JsonKind.null:
        return "null"
    if kind is JsonKind.array:
        return f"List with {len(value)} items"
    return "More detailed information"


def _array_lines(items: List[Any], max_lines: int) -> List[str]:
    if not items:
        return ["📦 Empty list"]

    lines = ["📦 Contains 1 item" if len(items) == 1 else f"📦 Contains {len(items)} items"]
    expanded = is_expanded(max_lines)
    shown = min(len(items), EXPANDED_ITEMS) if expanded else 1

    first_kind = json_kind(items[0])
    if first_kind is JsonKind.string:
        lines.append("📝 List of text values")
        for index, item in enumerate(items[:shown]):
            if json_kind(item) is JsonKind.string:
                text = item if expanded or len(item) <= PRIMITIVE_CHARS else item[:PRIMITIVE_CHARS] + "..."
                lines.append(f'{INDENT}Item {index + 1}: "{text}"')
    elif first_kind is JsonKind.number:
        lines.append("🔢 List of numbers")
        for index, item in enumerate(items[:shown]):
            if json_kind(item) is JsonKind.number:
                lines.append(f"{INDENT}Number {index + 1}: {format_number(item)}")
    elif first_kind is JsonKind.object:
        lines.append("📋 List of information cards")
        keys = list(items[0].keys())
        if keys:
            more = "..." if len(keys) > SAMPLE_KEYS else ""
            lines.append(f"{INDENT}Each card has: {', '.join(keys[:SAMPLE_KEYS])}{more}")
        limit = min(shown, EXPANDED_OBJECT_ITEMS) if expanded else shown
        for index, item in enumerate(items[:limit]):
            if json_kind(item) is JsonKind.object and item:
                main_key, main_value = next(iter(item.items()))
                lines.append(f"{INDENT}Card {index + 1}: {friendly_name(main_key)} = {format_primitive(main_value)}")
    else:
        lines.append("📊 List of various items")
        for index, item in enumerate(items[:shown]):
            lines.append(f"{INDENT}Item {index + 1}: {format_primitive(item)}")

    if not expanded and len(items) > 1:
        lines.append(f"{INDENT}(and {len(items) - 1} more similar items)")
    elif expanded and len(items) > shown:
        lines.append(f"{INDENT}(and {len(items) - shown} more items...)")
    return lines


def _object_lines(obj: Dict[str, Any], max_lines: int) -> List[str]:
    if not obj:
        return ["📂 Empty information card"]

    count = len(obj)
    lines = [
        "📂 Information card with 1 piece of data"
        if count == 1
        else f"📂 Information card with {count} pieces of data"
    ]
    expanded = is_expanded(max_lines)
    shown = count if expanded else max(0, min(COMPACT_FIELDS, count, max_lines - 2))

    for key, value in list(obj.items())[:shown]:
        lines.append(f"{INDENT}{friendly_name(key)}: {_field_value(value, expanded)}")

    if count > shown:
        lines.append(f"{INDENT}... and {count - shown} more pieces of information")
    return lines


def _field_value(value: Any, expanded: bool) -> str:
    kind = json_kind(value)
    if kind is JsonKind.string:
        if expanded or len(value) <= COMPACT_FIELD_CHARS:
            return f'"{value}"'
        return f'"{value[:COMPACT_FIELD_CHARS]}..."'
    if kind is JsonKind.number:
        return format_number(value)
    if kind is JsonKind.boolean:
        return "Yes" if value else "No"
    if kind is JsonKind.array:
        return f"List with {len(value)} items"
    if kind is JsonKind.object:
        if expanded and len(value) <= INLINE_NESTED_KEYS:
            inner = ", ".join(f"{friendly_name(k)}: {format_primitive(v)}" for k, v in value.items())
            return f"{{{inner}}}"
        return "More detailed information"
    return "(empty)"
