"""UTF-16 helpers for the position model.

Editing surfaces address text in UTF-16 code units, so a character outside
the Basic Multilingual Plane occupies two positions.

Example:
    >>> from gentree.utils.text import utf16_len
    >>> utf16_len("Hello")
    5
    >>> utf16_len("🎉")
    2
"""

from __future__ import annotations


def utf16_len(text: str) -> int:
    """Length of text in UTF-16 code units."""
    if text.isascii():
        return len(text)
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def utf16_units(text: str) -> list[str]:
    """Split text into UTF-16 code units.

    Astral characters come back as their two surrogate halves, so the result
    always has ``utf16_len(text)`` items.

    Examples:
        >>> utf16_units("ab")
        ['a', 'b']
        >>> len(utf16_units("🎉"))
        2
    """
    if text.isascii():
        return list(text)
    raw = text.encode("utf-16-le", "surrogatepass")
    return [
        raw[i : i + 2].decode("utf-16-le", "surrogatepass") for i in range(0, len(raw), 2)
    ]


def join_utf16_units(units: list[str]) -> str:
    """Inverse of :func:`utf16_units`; pairs surrogate halves back up."""
    return "".join(units).encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def quote_text(text: str) -> str:
    """Double-quote text for diagnostics, escaping quotes and newlines."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'
