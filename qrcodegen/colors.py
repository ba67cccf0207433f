# -*- coding: utf-8 -*-
"""
Colour parsing for the renderer.

Functions:
    parse_hex_color: Convert '#rgb' / '#rrggbb' strings to an RGBA tuple
"""

import string
from typing import Tuple

from .exceptions import InvalidColorError


# Opaque black, used as the canvas background
BACKGROUND = (0, 0, 0, 255)

_HEX_DIGITS = frozenset(string.hexdigits)


def parse_hex_color(value: str) -> Tuple[int, int, int, int]:
    """
    Parse a hex colour string into an opaque RGBA tuple.

    Accepts 6 digits (RRGGBB) or 3 digits (RGB, each nibble expanded by 17),
    with or without a leading '#'. Parsing is case-insensitive.

    Args:
        value (str): Colour string such as '#f54b37' or 'fff'

    Returns:
        Tuple[int, int, int, int]: (r, g, b, 255)

    Raises:
        InvalidColorError: If the string has the wrong length or non-hex characters

    Example:
        >>> parse_hex_color('#f54b37')
        (245, 75, 55, 255)
        >>> parse_hex_color('#fff')
        (255, 255, 255, 255)
    """
    if not isinstance(value, str):
        raise InvalidColorError(f"invalid hex color: {value!r}")

    digits = value[1:] if value.startswith('#') else value

    if not digits or not set(digits) <= _HEX_DIGITS:
        raise InvalidColorError(f"invalid hex color: {value!r}")

    if len(digits) == 6:
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    elif len(digits) == 3:
        r, g, b = (int(d, 16) * 17 for d in digits)
    else:
        raise InvalidColorError(f"invalid hex color length: {value!r}")

    return r, g, b, 255
