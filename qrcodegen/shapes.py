# -*- coding: utf-8 -*-
"""
Shape painters for QR modules.

Every painter fills one module cell of a Pillow image in place. Painters are
stateless; anything falling outside the image is clipped.

Functions:
    draw_square: Fill the whole cell
    draw_rounded_square: Fill the cell with rounded corners
    draw_triangle: Fill an upward pointing triangle inscribed in the cell
    draw_centered_square: Fill a square centered on the cell, possibly larger
"""

from functools import lru_cache
from typing import List, Tuple

from PIL import Image, ImageDraw


Color = Tuple[int, int, int, int]


def _fill_rect(draw: ImageDraw.ImageDraw, x0: int, y0: int, x1: int, y1: int,
               color: Color) -> None:
    # Half-open [x0, x1) x [y0, y1); Pillow rectangles are inclusive
    if x1 <= x0 or y1 <= y0:
        return
    draw.rectangle([x0, y0, x1 - 1, y1 - 1], fill=color)


@lru_cache(maxsize=None)
def _quarter_disc(radius: int) -> List[Tuple[int, int]]:
    """Offsets (i, j) in [0, radius) covered by a quarter disc of the given radius."""
    r2 = radius * radius
    return [(i, j) for i in range(radius) for j in range(radius)
            if (i - radius) ** 2 + (j - radius) ** 2 <= r2]


def draw_square(image: Image.Image, x: int, y: int, width: int, height: int,
                color: Color) -> None:
    """Fill the width x height rectangle anchored at (x, y)."""
    _fill_rect(ImageDraw.Draw(image), x, y, x + width, y + height, color)


def draw_rounded_square(image: Image.Image, x: int, y: int, width: int, height: int,
                        color: Color, radius: int) -> None:
    """
    Fill a rectangle whose four corners are rounded with the given radius.

    The body is drawn as two overlapping bars (full width minus the corner
    rows, full height minus the corner columns). Each corner is then filled
    with the pixels (i, j) satisfying (i - r)^2 + (j - r)^2 <= r^2, mirrored
    into all four corners.

    Args:
        image (Image.Image): Target image, modified in place
        x (int): Left pixel of the cell
        y (int): Top pixel of the cell
        width (int): Cell width in pixels
        height (int): Cell height in pixels
        color (Color): RGBA fill colour
        radius (int): Corner radius in pixels
    """
    if radius <= 0:
        draw_square(image, x, y, width, height, color)
        return

    draw = ImageDraw.Draw(image)
    _fill_rect(draw, x + radius, y, x + width - radius, y + height, color)
    _fill_rect(draw, x, y + radius, x + width, y + height - radius, color)

    img_w, img_h = image.size
    pixels = image.load()
    for i, j in _quarter_disc(radius):
        for px, py in ((x + i, y + j),
                       (x + width - 1 - i, y + j),
                       (x + i, y + height - 1 - j),
                       (x + width - 1 - i, y + height - 1 - j)):
            if 0 <= px < img_w and 0 <= py < img_h:
                pixels[px, py] = color


def draw_triangle(image: Image.Image, x: int, y: int, width: int, height: int,
                  color: Color) -> None:
    """
    Fill an upward pointing isosceles triangle inscribed in the cell.

    Scanline dy covers [width/2 - width*dy/(2*height), width/2 + width*dy/(2*height)),
    so the apex is at the top edge and the base spans the full width at the
    bottom.
    """
    if height <= 0:
        return
    draw = ImageDraw.Draw(image)
    half = width // 2
    for dy in range(height):
        spread = width * dy // (2 * height)
        _fill_rect(draw, x + half - spread, y + dy, x + half + spread, y + dy + 1, color)


def draw_centered_square(image: Image.Image, x: int, y: int, cell_size: int,
                         square_size: int, color: Color) -> None:
    """
    Fill a square of square_size centered on the cell at (x, y).

    A square larger than the cell gets a negative offset and spills into the
    neighbouring cells, which thickens finder and timing patterns.
    """
    offset = (cell_size - square_size) // 2
    draw_square(image, x + offset, y + offset, square_size, square_size, color)
