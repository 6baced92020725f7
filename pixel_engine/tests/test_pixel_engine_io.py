#!/usr/bin/env python3
"""
Tests for image decode/encode helpers
"""

import base64
import io

import numpy as np
import pytest
from PIL import Image

from pixel_engine.core.pixel_engine_exceptions import FileOperationError, ImageFormatError
from pixel_engine.core.pixel_engine_io import (
    buffer_from_image,
    buffer_to_image,
    decode_bytes,
    decode_data_url,
    encode_data_url,
    encode_png,
    load_buffer,
    save_buffer,
)
from pixel_engine.core.pixel_engine_models import Color


@pytest.fixture
def sprite(make_buffer):
    """3x2 sprite with a few distinct translucent pixels"""
    buffer = make_buffer(3, 2, (0, 0, 0, 0))
    buffer.set(0, 0, (255, 0, 0, 255))
    buffer.set(2, 1, (10, 20, 30, 77))
    return buffer


@pytest.mark.unit
class TestPilConversion:
    """Conversion between PIL images and buffers"""

    def test_rgba_image(self):
        image = Image.new("RGBA", (5, 3), (1, 2, 3, 4))

        buffer = buffer_from_image(image)

        assert buffer.size == (5, 3)
        assert buffer.get(4, 2) == Color(1, 2, 3, 4)

    def test_rgb_image_becomes_opaque(self):
        image = Image.new("RGB", (2, 2), (9, 8, 7))

        buffer = buffer_from_image(image)

        assert buffer.get(1, 1) == Color(9, 8, 7, 255)

    def test_indexed_image(self):
        image = Image.new("P", (2, 1))
        image.putpalette([0, 0, 0, 200, 100, 50] + [0] * 762)
        image.putpixel((1, 0), 1)

        buffer = buffer_from_image(image)

        assert buffer.get(1, 0) == Color(200, 100, 50, 255)

    def test_to_image(self, sprite):
        image = buffer_to_image(sprite)

        assert image.mode == "RGBA"
        assert image.size == (3, 2)
        assert image.getpixel((2, 1)) == (10, 20, 30, 77)


@pytest.mark.unit
class TestBytesAndDataUrls:
    """Encoded payloads"""

    def test_png_preserves_alpha(self, sprite):
        assert decode_bytes(encode_png(sprite)) == sprite

    def test_decode_garbage(self):
        with pytest.raises(ImageFormatError):
            decode_bytes(b"not an image")

    def test_data_url(self, sprite):
        url = encode_data_url(sprite)

        assert url.startswith("data:image/png;base64,")
        assert decode_data_url(url) == sprite

    def test_bare_base64(self, sprite):
        payload = base64.b64encode(encode_png(sprite)).decode("ascii")
        assert decode_data_url(payload) == sprite

    def test_jpeg_data_url(self):
        output = io.BytesIO()
        Image.new("RGB", (4, 4), (255, 255, 255)).save(output, format="JPEG")
        url = "data:image/jpeg;base64," + base64.b64encode(output.getvalue()).decode()

        buffer = decode_data_url(url)

        assert buffer.size == (4, 4)
        assert np.all(buffer.as_array()[:, :, 3] == 255)

    @pytest.mark.parametrize(
        "url",
        ["data:image/png,rawdata", "data:image/png;base64,@@@@", "data:image/png;base64"],
    )
    def test_malformed_data_url(self, url):
        with pytest.raises(ImageFormatError):
            decode_data_url(url)


@pytest.mark.integration
class TestFiles:
    """Loading and saving files"""

    def test_save_and_load(self, sprite, tmp_path):
        path = save_buffer(sprite, tmp_path / "nested" / "sprite.png")

        assert path.exists()
        assert load_buffer(path) == sprite

    def test_load_missing(self, tmp_path):
        with pytest.raises(FileOperationError, match="File not found"):
            load_buffer(tmp_path / "missing.png")

    def test_load_not_an_image(self, tmp_path):
        path = tmp_path / "notes.png"
        path.write_text("hello")

        with pytest.raises(ImageFormatError):
            load_buffer(path)

    def test_load_keeps_pixel_dimensions(self, tmp_path):
        Image.new("RGBA", (17, 5)).save(tmp_path / "odd.png")

        assert load_buffer(tmp_path / "odd.png").size == (17, 5)
