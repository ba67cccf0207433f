# -*- coding: utf-8 -*-
"""
QR Code Generator Module

Wraps the segno encoder. The renderer only needs the module matrix, so this
module turns content into a square list of booleans and maps segno's errors
onto EncodingError.

Functions:
    make_qr: Encode content with the highest error correction level
    make_matrix: Encode content and return its module matrix
"""

import logging
from typing import List

import segno

from .exceptions import EncodingError

logger = logging.getLogger(__name__)

# Highest recovery level (~30%), stylized modules eat into the error budget
ERROR_LEVEL = 'H'


def make_qr(content: str) -> segno.QRCode:
    """
    Generate a QR code symbol for the given content.

    The smallest version that fits is selected and the error correction
    level is fixed at H.

    Args:
        content (str): The data to encode, usually a URL

    Returns:
        segno.QRCode: Generated QR code object

    Raises:
        EncodingError: If the content is empty or exceeds the symbol capacity

    Example:
        >>> qr = make_qr("https://example.com")
        >>> qr.error
        'H'
    """
    if not content:
        raise EncodingError("failed to create QR code: no content to encode")
    try:
        qr = segno.make(content, error=ERROR_LEVEL, boost_error=False, micro=False)
    except ValueError as ex:
        # segno.DataOverflowError is a ValueError subclass
        raise EncodingError(f"failed to create QR code: {ex}") from ex

    logger.debug(f"Encoded {len(content)} characters as version {qr.version}")
    return qr


def make_matrix(content: str, border: int = 0) -> List[List[bool]]:
    """
    Encode content and return the module matrix.

    Args:
        content (str): The data to encode
        border (int): Quiet zone width in modules added around the symbol

    Returns:
        List[List[bool]]: matrix[y][x] = True for dark modules

    Raises:
        EncodingError: If the content cannot be encoded
        ValueError: If border is negative
    """
    if border < 0:
        raise ValueError(f"border must be >= 0, got {border}")
    qr = make_qr(content)
    return [[bool(module) for module in row]
            for row in qr.matrix_iter(scale=1, border=border)]
