#!/usr/bin/env python3
"""
Image decode/encode helpers for the pixel engine.

These sit at the engine boundary: they turn encoded images (files, PNG
bytes, base64 data URLs) into PixelBuffers and back. Decoding never
resamples, so buffer dimensions always equal the image's pixel dimensions.
"""

# Standard library imports
import base64
import binascii
import io
from pathlib import Path
from typing import Union

# Third-party imports
import numpy as np
from PIL import Image, UnidentifiedImageError

from ..logging_config import get_logger
from .pixel_engine_constants import PNG_DATA_URL_PREFIX, PNG_FORMAT
from .pixel_engine_exceptions import FileOperationError, ImageFormatError
from .pixel_engine_models import PixelBuffer

logger = get_logger("core.io")


# ================================================================================
# PIL Conversion
# ================================================================================


def buffer_from_image(image: Image.Image) -> PixelBuffer:
    """Convert a PIL image of any mode to an RGBA PixelBuffer"""
    if image.mode != "RGBA":
        logger.debug(f"Converting {image.mode} image to RGBA")
        image = image.convert("RGBA")
    return PixelBuffer.from_array(np.array(image, dtype=np.uint8))


def buffer_to_image(buffer: PixelBuffer) -> Image.Image:
    """Convert a PixelBuffer to an RGBA PIL image, alpha preserved"""
    # (H, W, 4) uint8 is always inferred as RGBA
    return Image.fromarray(np.array(buffer.as_array()))


# ================================================================================
# Bytes
# ================================================================================


def decode_bytes(data: bytes) -> PixelBuffer:
    """Decode an encoded image (PNG, JPEG, ...) into a PixelBuffer"""
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.load()
            return buffer_from_image(image)
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ImageFormatError(f"Could not decode image data: {e}") from e


def encode_png(buffer: PixelBuffer) -> bytes:
    """Encode a PixelBuffer as PNG bytes"""
    output = io.BytesIO()
    buffer_to_image(buffer).save(output, format=PNG_FORMAT)
    return output.getvalue()


# ================================================================================
# Data URLs
# ================================================================================


def decode_data_url(text: str) -> PixelBuffer:
    """
    Decode a 'data:image/...;base64,' payload into a PixelBuffer
    Bare base64 without the header is accepted too
    """
    payload = text.strip()
    if payload.startswith("data:"):
        header, sep, payload = payload.partition(",")
        if not sep or ";base64" not in header:
            raise ImageFormatError("Data URL is not base64 encoded")

    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageFormatError(f"Invalid base64 image payload: {e}") from e

    return decode_bytes(data)


def encode_data_url(buffer: PixelBuffer) -> str:
    """Encode a PixelBuffer as a PNG data URL"""
    return PNG_DATA_URL_PREFIX + base64.b64encode(encode_png(buffer)).decode("ascii")


# ================================================================================
# Files
# ================================================================================


def load_buffer(file_path: Union[str, Path]) -> PixelBuffer:
    """
    Load an image file into a PixelBuffer

    Raises:
        FileOperationError: if the file does not exist or cannot be read
        ImageFormatError: if the file is not a decodable image
    """
    path = Path(file_path)
    if not path.exists():
        raise FileOperationError(f"File not found: {path}")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileOperationError(f"Could not read {path}: {e}") from e

    buffer = decode_bytes(data)
    logger.debug(f"Loaded {path.name}: {buffer.width}x{buffer.height}")
    return buffer


def save_buffer(buffer: PixelBuffer, file_path: Union[str, Path]) -> Path:
    """
    Save a PixelBuffer as PNG

    Returns:
        The path written to

    Raises:
        FileOperationError: if the file cannot be written
    """
    path = Path(file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        buffer_to_image(buffer).save(path, format=PNG_FORMAT)
    except OSError as e:
        raise FileOperationError(f"Could not save {path}: {e}") from e

    logger.debug(f"Saved {buffer.width}x{buffer.height} image to {path}")
    return path
