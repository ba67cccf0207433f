# -*- coding: utf-8 -*-
"""
QR Code Renderer Module

Turns a module matrix into a stylized raster image. Dark modules are painted
in the requested colour over a black background using the selected shape,
except finder and timing modules which are always painted as oversized plain
squares so the symbol stays scannable.

Functions:
    render_matrix: Paint a module matrix into a new RGBA image
    render: Encode content and paint it
    to_png_bytes: Encode an image as PNG
"""

import logging
from io import BytesIO
from typing import Callable, Dict, List, Sequence, Union

from PIL import Image

from .colors import BACKGROUND, parse_hex_color
from .functional_areas import build_structural_mask
from .qr_generator import make_matrix
from .shapes import (Color, draw_centered_square, draw_rounded_square, draw_square,
                     draw_triangle)
from .styles import Style

logger = logging.getLogger(__name__)


# Pixel sizes per matrix unit, multiplied by the scale
MODULE_CELL = 8
STRUCTURAL_CELL = 10
CORNER_RADIUS = 3

DEFAULT_SCALE = 10

Painter = Callable[[Image.Image, int, int, int, int, Color], None]


def _painters(scale: int) -> Dict[Style, Painter]:
    radius = CORNER_RADIUS * scale

    def rounded(image, x, y, width, height, color):
        draw_rounded_square(image, x, y, width, height, color, radius)

    return {
        Style.SQUARE: draw_square,
        Style.ROUNDED: rounded,
        Style.TRIANGLE: draw_triangle,
    }


def _check_matrix(matrix: Sequence[Sequence[bool]]) -> List[List[bool]]:
    rows = [list(row) for row in matrix]
    size = len(rows)
    if size == 0:
        raise ValueError("module matrix is empty")
    if any(len(row) != size for row in rows):
        raise ValueError(f"module matrix must be square ({size} rows)")
    return rows


def render_matrix(
    matrix: Sequence[Sequence[bool]],
    color: Color,
    style: Union[str, Style] = 'square',
    scale: int = DEFAULT_SCALE,
    border: int = 0
) -> Image.Image:
    """
    Render a module matrix as a stylized RGBA image.

    The image side is len(matrix) * 8 * scale pixels. Modules are visited in
    row-major order: light modules are skipped, structural modules get a
    centered square of 10 * scale pixels, everything else is painted with the
    style's shape (rounded corners use a radius of 3 * scale).

    Args:
        matrix (Sequence[Sequence[bool]]): Square module matrix (True=dark)
        color (Color): RGBA colour for dark modules
        style (Union[str, Style]): 'square', 'rounded' or 'triangle'.
            Unknown values render as 'square'.
        scale (int): Pixel multiplier per matrix unit
        border (int): Quiet zone width already present in the matrix

    Returns:
        Image.Image: Newly allocated RGBA image

    Raises:
        ValueError: If the matrix is empty or not square, or scale < 1

    Example:
        >>> img = render_matrix([[True] * 21] * 21, (255, 255, 255, 255), scale=1)
        >>> img.size
        (168, 168)
    """
    rows = _check_matrix(matrix)
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")

    size = len(rows)
    cell = MODULE_CELL * scale
    structural_cell = STRUCTURAL_CELL * scale
    paint = _painters(scale)[Style.parse(style)]
    structural = build_structural_mask(size, border)

    img_px = size * cell
    img = Image.new('RGBA', (img_px, img_px), BACKGROUND)

    for y in range(size):
        for x in range(size):
            if not rows[y][x]:
                continue
            x0 = x * cell
            y0 = y * cell
            if structural[y][x]:
                draw_centered_square(img, x0, y0, cell, structural_cell, color)
            else:
                paint(img, x0, y0, cell, cell, color)

    return img


def render(
    content: str,
    color_hex: str,
    style: Union[str, Style] = 'square',
    scale: int = DEFAULT_SCALE,
    border: int = 0
) -> Image.Image:
    """
    Encode content as a QR code and render it.

    The colour is parsed before anything is encoded, so a bad colour never
    produces a partial image.

    Args:
        content (str): Data to encode, usually a URL
        color_hex (str): Module colour such as '#ffffff' or '#fff'
        style (Union[str, Style]): 'square', 'rounded' or 'triangle'
        scale (int): Pixel multiplier per matrix unit
        border (int): Quiet zone width in modules

    Returns:
        Image.Image: The rendered QR code

    Raises:
        InvalidColorError: If color_hex is malformed
        EncodingError: If the content cannot be encoded
    """
    color = parse_hex_color(color_hex)
    style = Style.parse(style)
    matrix = make_matrix(content, border=border)
    logger.info(f"Rendering {len(matrix)}x{len(matrix)} matrix, style={style.value}, scale={scale}")
    return render_matrix(matrix, color, style=style, scale=scale, border=border)


def to_png_bytes(image: Image.Image) -> bytes:
    """Encode an image as PNG bytes."""
    buf = BytesIO()
    image.save(buf, format='PNG')
    return buf.getvalue()
