import io
from pathlib import Path

from PIL import Image

from ansipic.charsets import DEFAULT
from ansipic.emitter import ENCODING
from ansipic.engine import ImageEngine


def image_to_ascii(
    image: Image.Image | str | Path | bytes,
    width: int | None = None,
    height: int | None = None,
    alpha_threshold: int = 0,
    ramp: str = DEFAULT,
    colour: bool = True,
    corrected: bool = False,
) -> str:
    if isinstance(image, Image.Image):
        engine = ImageEngine.from_image(image)
    elif isinstance(image, bytes):
        engine = ImageEngine.from_bytes(image)
    else:
        engine = ImageEngine.from_path(image)

    buffer = io.BytesIO()
    engine.render(
        buffer,
        alpha_threshold,
        width,
        height,
        ramp=ramp,
        colour=colour,
        corrected=corrected,
    )
    return buffer.getvalue().decode(ENCODING)
