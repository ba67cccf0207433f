# -*- coding: utf-8 -*-
"""
qrcodegen - Stylized QR code rendering

Renders QR codes as PNG images with square, rounded or triangular modules in
any colour, keeping finder and timing patterns as plain squares.

Modules:
    renderer: Compositor turning a module matrix into an image
    shapes: Per-module shape painters
    functional_areas: Finder and timing pattern classifier
    colors: Hex colour parsing
    qr_generator: segno-backed encoder
    app: Flask web front end
    cli: Command line interface
"""

__version__ = "1.0.0"

from .exceptions import QRCodeGenError, InvalidColorError, EncodingError, OutputError
from .colors import parse_hex_color
from .styles import Style
from .renderer import render, render_matrix, to_png_bytes

__all__ = [
    'QRCodeGenError', 'InvalidColorError', 'EncodingError', 'OutputError',
    'parse_hex_color', 'Style', 'render', 'render_matrix', 'to_png_bytes',
]
