import pytest
from PIL import Image

from qrcodegen.app import app as flask_app
from qrcodegen.colors import BACKGROUND


@pytest.fixture
def canvas():
    return Image.new('RGBA', (16, 16), BACKGROUND)


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setitem(flask_app.config, 'TESTING', True)
    monkeypatch.setitem(flask_app.config, 'QRCODEGEN_SCALE', 1)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
