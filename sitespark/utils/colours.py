"""
Colour derivation for brand colours
Derives hover shades and light tints from a base hex colour
"""

import re
from decimal import Decimal, ROUND_FLOOR

from .exceptions import ColorFormatError

HOVER_SHADE_PERCENT = -20
LIGHT_TINT_PERCENT = 40

_CHANNEL_STEP = Decimal('2.55')
_HALF = Decimal('0.5')

_HEX_COLOR_PATTERN = re.compile(r'^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$')


def is_valid_hex_color(color: str) -> bool:
    """Check whether a string is a 6-digit hex colour (leading '#' optional)"""
    return isinstance(color, str) and _HEX_COLOR_PATTERN.match(color.strip()) is not None


def _parse_channels(color: str) -> tuple:
    if not isinstance(color, str):
        raise ColorFormatError(f"Colour must be a string, got {type(color).__name__}", color)

    match = _HEX_COLOR_PATTERN.match(color.strip())
    if not match:
        raise ColorFormatError(f"Invalid hex colour: {color!r} (expected #rrggbb)", color)

    return tuple(int(pair, 16) for pair in match.groups())


def _shift_amount(percent: float) -> int:
    scaled = _CHANNEL_STEP * Decimal(str(percent)) + _HALF
    return int(scaled.to_integral_value(rounding=ROUND_FLOOR))


def normalise_hex_color(color: str) -> str:
    """
    Normalise a hex colour to lowercase '#rrggbb'

    Examples:
        >>> normalise_hex_color("4F46E5")
        '#4f46e5'
    """
    red, green, blue = _parse_channels(color)
    return f"#{red:02x}{green:02x}{blue:02x}"


def derive_shade(hex_color: str, percent: float) -> str:
    """
    Shift every channel of a hex colour by a percentage of the full range

    Each channel moves by round(2.55 * percent), half rounding up, and is
    clamped to [0, 255]. The product is computed in decimal so that
    exact halves such as 2.55 * 50 = 127.5 round consistently.

    Args:
        hex_color: Colour as 'rrggbb' with or without a leading '#'
        percent: Negative to darken, positive to lighten (roughly -100..100)

    Returns:
        Lowercase '#rrggbb' colour

    Raises:
        ColorFormatError: If the colour is not three hex byte pairs

    Examples:
        >>> derive_shade("#4f46e5", 0)
        '#4f46e5'
        >>> derive_shade("#ffffff", 50)
        '#ffffff'
    """
    channels = _parse_channels(hex_color)
    amount = _shift_amount(percent)

    shifted = [min(255, max(0, channel + amount)) for channel in channels]
    return "#{:02x}{:02x}{:02x}".format(*shifted)


def derive_hover_color(hex_color: str) -> str:
    """Darker variant used for button hover states"""
    return derive_shade(hex_color, HOVER_SHADE_PERCENT)


def derive_light_color(hex_color: str) -> str:
    """Lighter tint used for panel backgrounds"""
    return derive_shade(hex_color, LIGHT_TINT_PERCENT)
