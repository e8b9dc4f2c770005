import base64
import io
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add src to sys.path so we can import sticker_studio
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


def encode_image(
    size=(64, 64),
    color="red",
    fmt="PNG",
    mode="RGB",
) -> bytes:
    """Encode a solid-colour image to bytes."""
    img = Image.new(mode, size, color=color)
    buf = io.BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


def to_data_url(data: bytes, subtype: str = "png") -> str:
    """Wrap image bytes in a data URL."""
    return f"data:image/{subtype};base64,{base64.b64encode(data).decode('ascii')}"


# Common test fixtures
@pytest.fixture
def make_image():
    """Factory for encoded test images."""
    return encode_image


@pytest.fixture
def make_data_url():
    """Factory for image data URLs."""
    return to_data_url


@pytest.fixture
def png_bytes():
    """Square PNG sticker."""
    return encode_image((64, 64), "red")


@pytest.fixture
def wide_png_bytes():
    """2:1 landscape PNG sticker."""
    return encode_image((200, 100), "blue")


@pytest.fixture
def jpeg_bytes():
    """Square JPEG sticker."""
    return encode_image((80, 80), "green", fmt="JPEG")


@pytest.fixture
def transparent_png_bytes():
    """RGBA PNG with a transparent background."""
    return encode_image((50, 50), (255, 0, 0, 0), mode="RGBA")


@pytest.fixture
def three_designs(png_bytes, wide_png_bytes, jpeg_bytes):
    """Three unique designs in mixed formats."""
    return [png_bytes, wide_png_bytes, jpeg_bytes]


@pytest.fixture
def png_data_url(png_bytes):
    """PNG sticker as a data URL."""
    return to_data_url(png_bytes)


@pytest.fixture
def jpeg_data_url(jpeg_bytes):
    """JPEG sticker as a data URL."""
    return to_data_url(jpeg_bytes, "jpeg")
