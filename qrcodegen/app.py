# -*- coding: utf-8 -*-
"""
qrcodegen - Flask Web Application

GET /         HTML form asking for url, color and style
GET /qrcode   Renders the QR code and streams it back as image/png
"""

import logging
from io import BytesIO
from typing import Tuple

from flask import Flask, render_template, request, send_file

from .exceptions import QRCodeGenError
from .renderer import DEFAULT_SCALE, render, to_png_bytes
from .styles import Style

logger = logging.getLogger(__name__)

app = Flask(__name__, template_folder='templates')
app.config.from_mapping(
    QRCODEGEN_DEFAULT_COLOR='#f54b37',
    QRCODEGEN_DEFAULT_STYLE=Style.SQUARE.value,
    QRCODEGEN_SCALE=DEFAULT_SCALE,
    QRCODEGEN_BORDER=0,
)
# e.g. FLASK_QRCODEGEN_SCALE=4
app.config.from_prefixed_env()


def _read_params(req) -> Tuple[str, str, str]:
    """Extract url, color and style from the query string, applying defaults."""
    url = (req.args.get('url') or "").strip()
    color = (req.args.get('color') or "").strip() or app.config['QRCODEGEN_DEFAULT_COLOR']
    style = (req.args.get('style') or "").strip() or app.config['QRCODEGEN_DEFAULT_STYLE']
    return url, color, style


@app.route('/', methods=['GET'])
def index():
    return render_template(
        'index.html',
        color=app.config['QRCODEGEN_DEFAULT_COLOR'],
        default_style=Style.parse(app.config['QRCODEGEN_DEFAULT_STYLE']).value,
        styles=[s.value for s in Style],
    )


@app.route('/qrcode', methods=['GET'])
def qrcode_image():
    url, color, style = _read_params(request)
    if not url:
        return "Missing url parameter", 400

    try:
        img = render(url, color, style,
                     scale=int(app.config['QRCODEGEN_SCALE']),
                     border=int(app.config['QRCODEGEN_BORDER']))
    except (QRCodeGenError, ValueError) as ex:
        logger.error(f"QR generation failed for {url!r}: {ex}")
        return f"Failed to generate QR code: {ex}", 500

    logger.info(f"Generated QR code {img.size[0]}px for {url!r} (color={color}, style={style})")
    return send_file(BytesIO(to_png_bytes(img)), mimetype='image/png')


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True)
