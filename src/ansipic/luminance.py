import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ansipic.charsets import DEFAULT

logger = logging.getLogger(__name__)

RED_WEIGHT = 0.2989
GREEN_WEIGHT = 0.5870
BLUE_WEIGHT = 0.1140


@dataclass
class GlyphGrid:
    chars: list[str]  # one string per row
    colours: np.ndarray  # (rows, cols, 3) uint8
    visible: np.ndarray  # (rows, cols) bool, False where alpha blanked the cell

    @property
    def width(self) -> int:
        return self.colours.shape[1]

    @property
    def height(self) -> int:
        return self.colours.shape[0]


def intensity(pixel: Sequence[int], corrected: bool = False) -> float:
    """Grayscale intensity of an (R, G, B[, A]) pixel.

    The default keeps the historical formula, where only the blue term is
    divided by 255. ``corrected`` divides the whole weighted sum instead.
    """
    r, g, b = float(pixel[0]), float(pixel[1]), float(pixel[2])
    if corrected:
        return (r * RED_WEIGHT + g * GREEN_WEIGHT + b * BLUE_WEIGHT) / 255.0
    return r * RED_WEIGHT + g * GREEN_WEIGHT + (b * BLUE_WEIGHT) / 255.0


def intensity_map(buffer: np.ndarray, corrected: bool = False) -> np.ndarray:
    """Vectorised :func:`intensity` over an (H, W, 3|4) buffer, same operation order."""
    rgb = buffer[..., :3].astype(np.float64)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    if corrected:
        return (r * RED_WEIGHT + g * GREEN_WEIGHT + b * BLUE_WEIGHT) / 255.0
    return r * RED_WEIGHT + g * GREEN_WEIGHT + (b * BLUE_WEIGHT) / 255.0


def max_intensity(buffer: np.ndarray, corrected: bool = False) -> float:
    if buffer.size == 0:
        return 0.0
    return float(intensity_map(buffer, corrected).max())


def _ramp_index(level: float, ramp_length: int) -> int:
    return min(max(math.floor(level * (ramp_length - 1)), 0), ramp_length - 1)


def glyph_for(
    pixel: Sequence[int],
    alpha_threshold: int,
    max_intensity_in_frame: float,
    ramp: str = DEFAULT,
    corrected: bool = False,
) -> str:
    """Pick the ramp character for one pixel, or a space if it is transparent enough."""
    if pixel[3] <= alpha_threshold:
        return " "
    if max_intensity_in_frame == 0:
        level = 0.0
    else:
        level = intensity(pixel, corrected) / max_intensity_in_frame
    return ramp[_ramp_index(level, len(ramp))]


def map_glyphs(
    buffer: np.ndarray,
    alpha_threshold: int,
    ramp: str = DEFAULT,
    corrected: bool = False,
) -> GlyphGrid:
    """Map every pixel of an (H, W, 4) buffer to a glyph.

    The frame maximum is found in a full pass first, then each intensity is
    normalised against it. Produces the same characters as calling
    :func:`glyph_for` on every pixel.
    """
    if not ramp:
        raise ValueError("Glyph ramp must not be empty")

    levels = intensity_map(buffer, corrected)
    maximum = float(levels.max()) if levels.size else 0.0
    logger.debug("Frame maximum intensity %.6f over %d pixels", maximum, levels.size)

    if maximum == 0:
        normalised = np.zeros_like(levels)
    else:
        normalised = levels / maximum
    indices = np.clip(np.floor(normalised * (len(ramp) - 1)), 0, len(ramp) - 1).astype(np.intp)

    visible = buffer[..., 3] > alpha_threshold
    glyphs = np.array(list(ramp), dtype=object)[indices]
    glyphs[~visible] = " "

    chars = ["".join(row) for row in glyphs]
    colours = np.ascontiguousarray(buffer[..., :3], dtype=np.uint8)
    return GlyphGrid(chars=chars, colours=colours, visible=visible)
