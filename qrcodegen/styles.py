# -*- coding: utf-8 -*-
"""
Module styles accepted by the renderer.
"""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Style(Enum):
    SQUARE = 'square'
    ROUNDED = 'rounded'
    TRIANGLE = 'triangle'

    @classmethod
    def parse(cls, value) -> 'Style':
        """
        Map a style tag to a Style.

        Tags must match exactly. Unknown, differently cased or empty tags
        fall back to Style.SQUARE instead of failing.

        Example:
            >>> Style.parse('rounded'), Style.parse('hexagon')
            (<Style.ROUNDED: 'rounded'>, <Style.SQUARE: 'square'>)
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.debug(f"Unknown style {value!r}, using {cls.SQUARE.value}")
            return cls.SQUARE
