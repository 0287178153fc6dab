import pytest
from fastapi.testclient import TestClient
from PIL import Image

from magicquill_client.client import MagicQuillClient
from tests.fake_backend import create_fake_backend


@pytest.fixture
def backend():
    return create_fake_backend()


@pytest.fixture
def client(backend):
    return MagicQuillClient("http://testserver/", session=TestClient(backend))


@pytest.fixture
def drawing():
    img = Image.new("RGB", (300, 200), (240, 240, 240))
    for x in range(100, 200):
        for y in range(50, 150):
            img.putpixel((x, y), (30, 30, 30))
    return img
