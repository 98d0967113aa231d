"""
Common utilities for SiteSpark
Shared functions used across multiple modules
"""

import re
from datetime import datetime
from typing import Any, Iterable, List

from markupsafe import escape

from .exceptions import ValidationError


def escape_html(value: Any) -> str:
    """
    Escape a value for safe interpolation into HTML text or attributes

    None renders as an empty string. Ampersands, angle brackets and both
    quote characters are escaped.

    Examples:
        >>> escape_html('<b>"Fast" & light</b>')
        '&lt;b&gt;&#34;Fast&#34; &amp; light&lt;/b&gt;'
    """
    if value is None:
        return ""
    return str(escape(value))


def render_list_items(items: Iterable[Any], limit: int = None) -> str:
    """
    Render strings as escaped <li> elements, preserving order

    Args:
        items: Items to render
        limit: Maximum number of items to include (optional)

    Returns:
        Concatenated <li> markup (empty string for no items)
    """
    items = list(items or [])
    if limit is not None:
        items = items[:limit]
    return "".join(f"<li>{escape_html(item)}</li>" for item in items)


def normalise_text(text: str) -> str:
    """
    Normalise text to snake_case format

    Examples:
        >>> normalise_text("Best Laptops of 2025")
        'best_laptops_of_2025'
    """
    if not text:
        return ""

    normalised = str(text).strip().lower()
    normalised = re.sub(r'[^a-z0-9]+', '_', normalised)
    normalised = re.sub(r'_+', '_', normalised).strip('_')

    return normalised


def slugify(text: str, default: str = "site") -> str:
    """
    Convert text to a hyphenated, filesystem-safe slug

    Examples:
        >>> slugify("Best Widgets!")
        'best-widgets'
        >>> slugify("   ")
        'site'
    """
    slug = normalise_text(text).replace('_', '-')
    return slug or default


def generate_timestamp() -> str:
    """
    Generate ISO format timestamp for metadata

    Returns:
        Current timestamp in ISO format
    """
    return datetime.now().isoformat()


def ensure_list(value: Any) -> List[Any]:
    """Coerce None to an empty list and other iterables (except strings) to lists"""
    if value is None:
        return []
    if isinstance(value, (str, bytes)):
        return [value]
    return list(value)


_FLAG_WORDS = {
    'true': True, 'yes': True, 'on': True, '1': True,
    'false': False, 'no': False, 'off': False, '0': False,
}


def parse_flag(value: Any, field_name: str, default: bool = True) -> bool:
    """
    Read a boolean flag from content data

    None gives the default. Booleans, 0/1 and the words true/false,
    yes/no, on/off (any case) are accepted.

    Raises:
        ValidationError: For any other value

    Examples:
        >>> parse_flag("False", "include")
        False
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in _FLAG_WORDS:
        return _FLAG_WORDS[value.strip().lower()]

    raise ValidationError(f"'{field_name}' must be true or false, got {value!r}",
                          field=field_name, value=value)


def text_or_empty(value: Any) -> str:
    """Stringify a value, treating only None as missing"""
    return "" if value is None else str(value)
