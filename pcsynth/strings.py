"""Conversions between comma-separated state strings and lists of names."""

from __future__ import annotations

from collections.abc import Iterable


def vector_to_string(vec: Iterable[str]) -> str:
    """Join names into a single comma-separated state string."""
    return ",".join(vec)


def string_to_vector(text: str, delimiter: str = ",") -> list[str]:
    """Split a delimited state string into its parts.

    A trailing delimiter does not produce a trailing empty part, and an
    empty string yields an empty list.
    """
    if not text:
        return []
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts