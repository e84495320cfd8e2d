"""
Input Sanitization - Infrastructure layer for cleaning and sanitizing input.

This module provides the value and identifier sanitizers the clause builder
maps its shorthand tokens to. None of them raise: every input, however hostile,
is reduced to something safe to embed in SQL text.
"""

import html
import logging
import math
import re
from typing import Any

logger = logging.getLogger(__name__)


class InputSanitizer:
    """
    Input sanitization for security purposes.

    This class only handles security-related sanitization.
    Whether a field or value makes sense for a query is the caller's concern.
    """

    # Either a complete tag, or a "<" that never closes before the next "<" or end of input
    LESS_THAN_PATTERN = re.compile(r"<[^>]*?((?=<)|>|$)")
    SCRIPT_STYLE_PATTERN = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
    TAG_PATTERN = re.compile(r"<[^>]*>")
    OCTET_PATTERN = re.compile(r"%[a-fA-F0-9]{2}")
    WHITESPACE_PATTERN = re.compile(r"[\r\n\t ]+")
    KEY_PATTERN = re.compile(r"[^a-z0-9_\-]")

    INT_PREFIX_PATTERN = re.compile(r"^\s*([+-]?\d+)")
    FLOAT_PREFIX_PATTERN = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")

    @classmethod
    def sanitize_key(cls, key: Any) -> str:
        """
        Sanitize a key used as a field name or identifier-like value.

        Lowercases the input and drops everything but letters, digits,
        underscores and dashes.

        Args:
            key: Raw key (converted to string)

        Returns:
            Sanitized key, possibly empty
        """
        if key is None or isinstance(key, (list, tuple, dict, set)):
            return ""
        return cls.KEY_PATTERN.sub("", str(key).lower())

    @classmethod
    def sanitize_text_field(cls, value: Any) -> str:
        """
        Basic free-text sanitization for security - no business logic.

        Args:
            value: Value to sanitize (will be converted to string)

        Returns:
            Text with tags, line breaks, percent-encoded octets and surrounding
            whitespace removed
        """
        if value is None:
            return ""

        str_value = str(value) if not isinstance(value, str) else value

        if "<" in str_value:
            str_value = cls.LESS_THAN_PATTERN.sub(cls._escape_unclosed_tag, str_value)
            str_value = cls.SCRIPT_STYLE_PATTERN.sub("", str_value)
            str_value = cls.TAG_PATTERN.sub("", str_value)

        str_value = cls.WHITESPACE_PATTERN.sub(" ", str_value).strip()

        found_octets = False
        while cls.OCTET_PATTERN.search(str_value):
            str_value = cls.OCTET_PATTERN.sub("", str_value)
            found_octets = True

        if found_octets:
            # Removing octets can leave doubled spaces behind
            str_value = re.sub(r" +", " ", str_value).strip()

        return str_value

    @staticmethod
    def _escape_unclosed_tag(match: re.Match) -> str:
        text = match.group(0)
        if text.endswith(">"):
            return text
        return html.escape(text)

    @classmethod
    def sanitize_sql_value(cls, value: Any) -> str:
        """
        Sanitize a value for SQL queries.

        Note: This is the fallback for values with no more specific sanitizer.

        Args:
            value: Value to sanitize

        Returns:
            Sanitized value as a quoted SQL string literal, or NULL
        """
        if value is None:
            return "NULL"

        # Convert to string and escape quotes
        str_value = str(value)
        str_value = str_value.replace("'", "''")
        str_value = str_value.replace("\\", "\\\\")

        return f"'{str_value}'"

    @classmethod
    def to_int(cls, value: Any) -> int:
        """
        Lenient integer cast.

        Booleans become 0/1, floats are truncated, strings contribute their
        leading integer digits. Anything else becomes 0.
        """
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if math.isfinite(value) else 0
        if value is None or isinstance(value, (list, tuple, dict, set)):
            return 0

        match = cls.INT_PREFIX_PATTERN.match(str(value))
        if not match:
            logger.debug(f"No integer prefix in {str(value)[:50]!r}, using 0")
            return 0
        return int(match.group(1))

    @classmethod
    def to_float(cls, value: Any) -> float:
        """Lenient float cast; non-numeric and non-finite input becomes 0.0."""
        if isinstance(value, bool):
            return float(value)
        if isinstance(value, (int, float)):
            result = float(value)
            return result if math.isfinite(result) else 0.0
        if value is None or isinstance(value, (list, tuple, dict, set)):
            return 0.0

        match = cls.FLOAT_PREFIX_PATTERN.match(str(value))
        if not match:
            logger.debug(f"No numeric prefix in {str(value)[:50]!r}, using 0.0")
            return 0.0

        result = float(match.group(1))
        return result if math.isfinite(result) else 0.0
