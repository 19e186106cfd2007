from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO

import numpy as np
from PIL import Image, UnidentifiedImageError

from ansipic.charsets import DEFAULT
from ansipic.config import RenderOptions
from ansipic.dimensions import resolve
from ansipic.emitter import StreamEmitter
from ansipic.encoder import EncodeStats, encode
from ansipic.errors import DecodeError
from ansipic.luminance import map_glyphs
from ansipic.sampling import resample, to_rgba_array

logger = logging.getLogger(__name__)


def _decode(fp: BinaryIO) -> np.ndarray:
    try:
        with Image.open(fp) as image:
            return to_rgba_array(image)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise DecodeError(f"Could not decode image: {exc}") from exc


class ImageEngine:
    """Renders one decoded image as coloured text.

    The engine only holds the source pixels; each :meth:`render` call builds
    its own resampled buffer and encoder state, so calls never share state.
    """

    def __init__(self, pixels: np.ndarray):
        """Wrap an (H, W, 4) uint8 RGBA buffer."""
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Expected an (H, W, 4) RGBA buffer, got shape {pixels.shape}")
        self.pixels = np.ascontiguousarray(pixels, dtype=np.uint8)

    @classmethod
    def from_image(cls, image: Image.Image) -> ImageEngine:
        return cls(to_rgba_array(image))

    @classmethod
    def from_bytes(cls, data: bytes) -> ImageEngine:
        return cls(_decode(io.BytesIO(data)))

    @classmethod
    def from_path(cls, path: str | Path) -> ImageEngine:
        try:
            fp = Path(path).open("rb")
        except OSError as exc:
            raise DecodeError(f"Could not open image: {exc}") from exc
        with fp:
            return cls(_decode(fp))

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def render(
        self,
        sink: BinaryIO,
        alpha_threshold: int = 0,
        width: int | None = None,
        height: int | None = None,
        *,
        ramp: str = DEFAULT,
        colour: bool = True,
        corrected: bool = False,
    ) -> EncodeStats:
        """Write the text rendering of the image to ``sink`` and flush it.

        At least one of ``width``/``height`` must be given.

        Raises:
            InvalidDimensions: neither size given, or a size resolves to zero.
            RenderIOError: the sink failed to accept or flush output.
        """
        out_width, out_height = resolve(width, height, self.width, self.height)
        sampled = resample(self.pixels, out_width, out_height)
        grid = map_glyphs(sampled, alpha_threshold, ramp=ramp, corrected=corrected)

        emitter = StreamEmitter(sink)
        stats = encode(grid, emitter, colour=colour)
        emitter.flush()
        logger.debug("Rendered %d bytes", emitter.bytes_written)
        return stats

    def render_options(self, sink: BinaryIO, options: RenderOptions) -> EncodeStats:
        return self.render(
            sink,
            options.alpha_threshold,
            options.width,
            options.height,
            ramp=options.ramp,
            colour=options.colour,
            corrected=options.corrected,
        )
