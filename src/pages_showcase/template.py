"""Flat ``{{ key }}`` substitution for repository templates."""

import re
from typing import Any, Mapping

TEMPLATE_PATTERN = re.compile(r"\{\{\s*(\w+)\s*\}\}", re.ASCII)


def to_text(value: Any) -> str:
    """String form of a JSON value as a browser would insert it.

    Booleans are lowercase, lists are comma-joined (``None`` items empty),
    integral floats drop their ``.0`` and objects become ``[object Object]``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(to_text(item) for item in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


def _is_falsy(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0 or value != value  # NaN
    return value == ""


def render(template: str, record: Mapping[str, Any]) -> str:
    """Replace each ``{{ key }}`` in *template* with ``record[key]``.

    Missing values, ``None``, ``False``, zero, NaN and ``""`` render as an
    empty string; empty lists and dicts are still converted. There is
    no escaping, nesting, looping or conditional logic.
    """

    def _substitute(match: re.Match) -> str:
        value = record.get(match.group(1))
        return "" if _is_falsy(value) else to_text(value)

    return TEMPLATE_PATTERN.sub(_substitute, template)


def template_keys(template: str) -> list[str]:
    """Keys referenced by *template*, in order of first appearance."""
    seen: list[str] = []
    for match in TEMPLATE_PATTERN.finditer(template):
        if match.group(1) not in seen:
            seen.append(match.group(1))
    return seen
