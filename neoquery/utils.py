"""Utility functions for statement construction.

This module centralizes the textual transforms applied while building
statements: label and property escaping, parameter placeholder rendering and
parameter name sanitization.
"""

import re
from enum import Enum

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class ParamStyle(str, Enum):
    """Placeholder syntax used to reference bound parameters."""

    BRACES = "braces"  # {name}
    DOLLAR = "dollar"  # $name, Neo4j 4.0+


def get_label(label: str) -> str:
    """Surround a label with backticks so it may contain spaces.

    Backticks inside the label are not escaped; labels are caller input.

    Args:
        label: The node or relationship label.

    Returns:
        The escaped label, ready to be interpolated into a statement.
    """
    return f"`{label}`"


def get_property(name: str) -> str:
    """Render a property name for use after an alias, e.g. ``r.<name>``.

    Plain identifiers are kept as-is; anything else is wrapped in backticks
    so names with spaces or symbols stay valid.
    """
    if IDENTIFIER_PATTERN.fullmatch(name):
        return name
    return get_label(name)


def sanitize_identifier(value: str) -> str:
    """Sanitize a string for use as a Cypher identifier.

    Removes or replaces characters that are invalid in Neo4j identifiers.

    Args:
        value: The identifier to sanitize.

    Returns:
        Sanitized identifier string.
    """
    # Replace invalid characters with underscores
    sanitized = re.sub(r"[^a-zA-Z0-9_]", "_", value)
    # Ensure it doesn't start with a number
    if sanitized and sanitized[0].isdigit():
        sanitized = "_" + sanitized
    return sanitized or "_"


def format_param(name: str, style: ParamStyle | str = ParamStyle.BRACES) -> str:
    """Render the placeholder referencing a bound parameter.

    Args:
        name: The parameter name, as stored in a BindParam.
        style: The placeholder syntax.

    Returns:
        The placeholder text.
    """
    if ParamStyle(style) is ParamStyle.DOLLAR:
        return f"${name}"
    return "{" + name + "}"

