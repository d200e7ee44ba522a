"""Utility helpers shared by the site descriptor loader."""

from __future__ import annotations


def _string_list(value: str | list[object] | None) -> list[str]:
    """Normalize a scalar or list value into a list of stripped strings.

    Empty or null entries inside a list become empty strings so validation
    can report their position.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value.strip()]
    return [_text(segment) for segment in value]


def _text(value: object | None) -> str:
    """Return ``value`` as a stripped string, treating None as empty."""
    if value is None:
        return ""
    return str(value).strip()


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    return _text(value) or None


__all__ = ["_optional_str", "_string_list", "_text"]
