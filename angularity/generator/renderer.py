"""Placeholder substitution for config templates.

Config templates use a single placeholder form::

    <%= key %>
    <%= nested.key %>

Whitespace inside the delimiters is optional. A key is one or more
identifier segments (``[A-Za-z_$][A-Za-z0-9_$]*``) joined by dots; each dot
steps into a nested mapping of the context. Nothing else is evaluated, so
templates can only read values, never compute them.

Values are written as follows: strings verbatim, booleans as ``true`` /
``false``, ``None`` as an empty string, lists and mappings as compact JSON,
anything else through ``str()``.

Strings are not escaped for the surrounding format. A value containing ``"``
or ``\\`` placed inside a quoted JSON string yields invalid JSON; callers that
need such characters must escape them before rendering.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from .errors import TemplateRenderError

_SEGMENT = r"[A-Za-z_$][A-Za-z0-9_$]*"

PLACEHOLDER_PATTERN = re.compile(rf"<%=\s*({_SEGMENT}(?:\.{_SEGMENT})*)\s*%>")
_DELIMITER_PATTERN = re.compile(r"<%|%>")


def placeholders(template_text: str) -> list[str]:
    """Return the keys referenced by *template_text*, in order of appearance."""
    return PLACEHOLDER_PATTERN.findall(template_text)


def render(template_text: str, context: Mapping[str, Any]) -> str:
    """Substitute every placeholder in *template_text* from *context*.

    Args:
        template_text: Template source.
        context: Mapping of option names to values; nested mappings are
            reachable through dotted keys.

    Returns:
        The rendered text.

    Raises:
        TemplateRenderError: If a placeholder names a missing key, or the
            template contains a ``<%`` / ``%>`` delimiter that is not part of a
            well-formed placeholder.
    """
    _check_delimiters(template_text)

    def _substitute(match: re.Match[str]) -> str:
        return _format_value(_lookup(context, match.group(1)))

    return PLACEHOLDER_PATTERN.sub(_substitute, template_text)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _check_delimiters(template_text: str) -> None:
    spans = [match.span() for match in PLACEHOLDER_PATTERN.finditer(template_text)]
    for stray in _DELIMITER_PATTERN.finditer(template_text):
        if any(start <= stray.start() < end for start, end in spans):
            continue
        line = template_text.count("\n", 0, stray.start()) + 1
        raise TemplateRenderError(
            f"Malformed template delimiter {stray.group(0)!r} on line {line}"
        )


def _lookup(context: Mapping[str, Any], key: str) -> Any:
    value: Any = context
    for segment in key.split("."):
        if not isinstance(value, Mapping) or segment not in value:
            raise TemplateRenderError(f"{key} is not defined", key=key)
        value = value[segment]
    return value


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)
