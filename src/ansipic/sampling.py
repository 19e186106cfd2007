import numpy as np
from PIL import Image


def to_rgba_array(image: Image.Image) -> np.ndarray:
    """Convert a Pillow image of any mode to an (H, W, 4) uint8 buffer."""
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return np.asarray(image, dtype=np.uint8)


def resample(source: np.ndarray, target_width: int, target_height: int) -> np.ndarray:
    """Nearest-neighbour resize of an (H, W, 4) buffer to (target_height, target_width, 4).

    No blending: every output pixel is a copy of exactly one source pixel, so
    flat regions keep a single colour after resizing.
    """
    if target_width <= 0 or target_height <= 0:
        raise ValueError(f"Target size must be positive, got {target_width}x{target_height}")
    if source.ndim != 3 or source.shape[2] != 4:
        raise ValueError(f"Expected an (H, W, 4) RGBA buffer, got shape {source.shape}")
    source_height, source_width = source.shape[:2]
    if source_width == 0 or source_height == 0:
        raise ValueError("Cannot resample an empty buffer")

    image = Image.fromarray(np.ascontiguousarray(source, dtype=np.uint8))
    resized = image.resize((target_width, target_height), Image.Resampling.NEAREST)
    return np.asarray(resized, dtype=np.uint8)
