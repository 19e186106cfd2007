import re

import numpy as np

SET_FOREGROUND = re.compile(r"\033\[38;2;(\d+);(\d+);(\d+)m")
RESET = "\033[0m"


def rgba_buffer(rows):
    """Build an (H, W, 4) uint8 buffer from nested lists of RGBA tuples."""
    return np.array(rows, dtype=np.uint8)


def strip_escapes(text):
    return SET_FOREGROUND.sub("", text).replace(RESET, "")


class BrokenSink:
    """Binary sink that fails on write or on flush."""

    def __init__(self, fail_on="write"):
        self.fail_on = fail_on

    def write(self, data):
        if self.fail_on == "write":
            raise BrokenPipeError("pipe closed")
        return len(data)

    def flush(self):
        if self.fail_on == "flush":
            raise OSError("disk full")


class RecordingSink:
    """Binary sink that keeps every chunk passed to write."""

    def __init__(self):
        self.chunks = []

    def write(self, data):
        self.chunks.append(bytes(data))
        return len(data)

    def flush(self):
        pass
