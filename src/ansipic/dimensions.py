import logging
import math

from ansipic.errors import InvalidDimensions

logger = logging.getLogger(__name__)

# Terminal cells are roughly twice as tall as they are wide.
CELL_ASPECT = 2.0


def _scaled(known: int, opposite_source: int, known_source: int) -> int:
    if known_source <= 0:
        raise InvalidDimensions(f"Source dimension must be positive, got {known_source}")
    return math.ceil(known * opposite_source / known_source / CELL_ASPECT)


def resolve(
    requested_width: int | None,
    requested_height: int | None,
    source_width: int,
    source_height: int,
) -> tuple[int, int]:
    """Work out the output grid size in character cells.

    When only one of width/height is given the other is derived from the
    source aspect ratio, halved to compensate for tall terminal cells. When
    both are given they are used as-is.
    """
    if requested_width is None and requested_height is None:
        raise InvalidDimensions("Either width or height must be specified")
    for name, value in (("width", requested_width), ("height", requested_height)):
        if value is not None and value <= 0:
            raise InvalidDimensions(f"Requested {name} must be positive, got {value}")

    if requested_width is not None and requested_height is not None:
        width, height = requested_width, requested_height
    elif requested_width is not None:
        width = requested_width
        height = _scaled(requested_width, source_height, source_width)
    else:
        height = requested_height
        width = _scaled(requested_height, source_width, source_height)

    if width < 1 or height < 1:
        raise InvalidDimensions(f"Resolved output size {width}x{height} is empty")

    logger.debug("Resolved %sx%s source to %dx%d cells", source_width, source_height, width, height)
    return width, height
