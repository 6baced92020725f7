"""
Shared fixtures for pixel engine tests
"""

import logging

import numpy as np
import pytest

from pixel_engine.core.pixel_engine_models import PixelBuffer


@pytest.fixture
def make_buffer():
    """Factory for solid-color buffers"""

    def _make(width, height, color=(255, 255, 255, 255)):
        data = np.zeros((height, width, 4), dtype=np.uint8)
        data[:, :] = color
        return PixelBuffer.from_array(data)

    return _make


@pytest.fixture
def white_buffer(make_buffer):
    """8x8 opaque white buffer"""
    return make_buffer(8, 8)


@pytest.fixture(autouse=True)
def reset_engine_logger():
    """Drop handlers installed by setup_logging so streams do not leak between tests"""
    yield
    logger = logging.getLogger("pixel_engine")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
