"""Utility modules for gentree.

Provides:
- logger: get_logger for logging
- text: UTF-16 length and unit helpers for the position model
"""

from gentree.utils.logger import get_logger
from gentree.utils.text import join_utf16_units, quote_text, utf16_len, utf16_units

__all__ = [
    "get_logger",
    "join_utf16_units",
    "quote_text",
    "utf16_len",
    "utf16_units",
]
