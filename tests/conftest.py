import io

import pytest
from PIL import Image

from helpers import rgba_buffer


@pytest.fixture
def red_pair():
    return rgba_buffer([[(255, 0, 0, 255), (255, 0, 0, 255)]])


@pytest.fixture
def png_bytes():
    img = Image.new("RGBA", (8, 4), (10, 200, 30, 255))
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()
