from ansipic.converter import image_to_ascii
from ansipic.engine import ImageEngine
from ansipic.errors import AnsipicError, DecodeError, InvalidDimensions, RenderIOError

__all__ = [
    "AnsipicError",
    "DecodeError",
    "ImageEngine",
    "InvalidDimensions",
    "RenderIOError",
    "image_to_ascii",
]
