import logging
from dataclasses import dataclass

from ansipic.emitter import StreamEmitter
from ansipic.luminance import GlyphGrid

logger = logging.getLogger(__name__)

Color = tuple[int, int, int]

RESET = "\033[0m"


def set_foreground(color: Color) -> str:
    """24-bit foreground colour escape."""
    r, g, b = color
    return f"\033[38;2;{r};{g};{b}m"


@dataclass
class RenderState:
    previous_color: Color | None = None
    current_row: int = 0


@dataclass
class EncodeStats:
    rows: int = 0
    cells: int = 0
    colour_escapes: int = 0
    resets: int = 0


def _close(state: RenderState, parts: list[str], stats: EncodeStats) -> None:
    if state.previous_color is not None:
        parts.append(RESET)
        state.previous_color = None
        stats.resets += 1


def encode(grid: GlyphGrid, emitter: StreamEmitter, colour: bool = True) -> EncodeStats:
    """Write a glyph grid row by row, only emitting a colour escape when the colour changes.

    An open colour is reset before every line break and at the end of the
    stream. Cells blanked by the alpha test are written as bare spaces and do
    not touch the colour state. Each row is handed to the emitter in a single
    write.
    """
    state = RenderState()
    stats = EncodeStats(rows=grid.height)
    colours = grid.colours.tolist()
    visible = grid.visible.tolist()
    parts: list[str] = []

    for row, line in enumerate(grid.chars):
        if row > state.current_row:
            state.current_row = row
            _close(state, parts, stats)
            parts.append("\n")
            emitter.write("".join(parts))
            parts.clear()

        for col, char in enumerate(line):
            if colour and visible[row][col]:
                color = tuple(colours[row][col])
                if color != state.previous_color:
                    parts.append(set_foreground(color))
                    state.previous_color = color
                    stats.colour_escapes += 1
            parts.append(char)
            stats.cells += 1

    _close(state, parts, stats)
    emitter.write("".join(parts))
    logger.debug(
        "Encoded %d cells in %d rows with %d colour escapes and %d resets",
        stats.cells,
        stats.rows,
        stats.colour_escapes,
        stats.resets,
    )
    return stats
