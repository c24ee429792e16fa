"""Coercions shared by the document schemas."""

from __future__ import annotations

from typing import Any


def scalar_to_str(value: Any) -> Any:
    """Render booleans and numbers as text; leave anything else for pydantic."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, (int, float)):
        return str(value)
    return value
