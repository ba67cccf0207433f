# -*- coding: utf-8 -*-
"""
Error types raised by qrcodegen.

The rendering core only raises InvalidColorError or propagates EncodingError.
OutputError belongs to the command line layer that writes files and starts the server.
"""


class QRCodeGenError(Exception):
    """Base class for all qrcodegen errors."""


class InvalidColorError(QRCodeGenError, ValueError):
    """Hex colour string has the wrong length or non-hex characters."""


class EncodingError(QRCodeGenError):
    """The QR encoder rejected the content (empty, too long, ...)."""


class OutputError(QRCodeGenError):
    """The output file, directory or listening socket could not be created."""
