# -*- coding: utf-8 -*-
"""
Command line interface.

    qrcodegen generate --url https://example.com -o out/qr.png -c '#ffffff' -s rounded
    qrcodegen server --addr :8080
"""

import argparse
import logging
import os
import socket
import sys
from typing import List, Optional, Tuple

from .exceptions import OutputError, QRCodeGenError
from .renderer import DEFAULT_SCALE, render

logger = logging.getLogger(__name__)


def _write_png(img, output_path: str) -> None:
    output_dir = os.path.dirname(output_path)
    try:
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        img.save(output_path, format='PNG')
    except OSError as ex:
        raise OutputError(f"failed to save QR code to {output_path}: {ex}") from ex


def parse_addr(addr: str) -> Tuple[str, int]:
    """
    Split a listen address into (host, port).

    Accepts 'host:port', ':port' and 'port'. An empty host listens on all
    interfaces.

    Example:
        >>> parse_addr(':8080')
        ('0.0.0.0', 8080)
    """
    host, _, port = addr.rpartition(':')
    try:
        port_num = int(port)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid address: {addr!r}") from None
    if not 0 < port_num < 65536:
        raise argparse.ArgumentTypeError(f"invalid port in address: {addr!r}")
    return host or '0.0.0.0', port_num


def cmd_generate(args) -> int:
    img = render(args.url, args.color, args.style, scale=args.scale, border=args.border)
    _write_png(img, args.output)
    logger.info(f"Wrote {img.size[0]}x{img.size[1]} image to {args.output}")
    print(f"QR code generated successfully: {args.output}")
    return 0


def _check_listen(host: str, port: int) -> None:
    try:
        with socket.create_server((host, port)):
            pass
    except OSError as ex:
        raise OutputError(f"cannot listen on {host}:{port}: {ex}") from ex


def cmd_server(args) -> int:
    from .app import app

    host, port = args.addr
    if args.scale is not None:
        app.config['QRCODEGEN_SCALE'] = args.scale
    if args.border is not None:
        app.config['QRCODEGEN_BORDER'] = args.border
    _check_listen(host, port)
    print(f"Server running at http://{host}:{port}")
    app.run(host=host, port=port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='qrcodegen', description="Generate QR codes from URLs")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a stylized QR code PNG from a URL")
    gen.add_argument("--url", required=True, help="URL to generate QR code for")
    gen.add_argument("-o", "--output", default="qrcode.png",
                     help="Output file path (default: qrcode.png)")
    gen.add_argument("-c", "--color", default="#ffffff",
                     help="Hex color for QR code modules (default: #ffffff)")
    gen.add_argument("-s", "--style", default="square",
                     help="Module style: square, rounded or triangle (default: square)")
    gen.add_argument("--scale", type=int, default=DEFAULT_SCALE,
                     help=f"Pixel multiplier per module unit (default: {DEFAULT_SCALE})")
    gen.add_argument("--border", type=int, default=0,
                     help="Quiet zone width in modules (default: 0)")
    gen.set_defaults(func=cmd_generate)

    srv = sub.add_parser("server", help="Start a web server with a QR code form")
    srv.add_argument("--addr", type=parse_addr, default=":8080",
                     help="Address to listen on (default: :8080)")
    srv.add_argument("--scale", type=int,
                     help=f"Pixel multiplier per module unit (default: QRCODEGEN_SCALE, {DEFAULT_SCALE})")
    srv.add_argument("--border", type=int,
                     help="Quiet zone width in modules (default: QRCODEGEN_BORDER, 0)")
    srv.set_defaults(func=cmd_server)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
    )

    try:
        return args.func(args)
    except (QRCodeGenError, ValueError) as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
