from typing import BinaryIO

from ansipic.errors import RenderIOError

ENCODING = "utf-8"


class StreamEmitter:
    """Writes text fragments to a binary sink as UTF-8.

    Failures from the sink are re-raised as :class:`RenderIOError` so callers
    deal with one error type whatever the stream is.
    """

    def __init__(self, sink: BinaryIO):
        self.sink = sink
        self.bytes_written = 0

    def write(self, fragment: str) -> None:
        data = fragment.encode(ENCODING)
        try:
            self.sink.write(data)
        except (OSError, ValueError) as exc:
            raise RenderIOError(f"Failed to write to output: {exc}") from exc
        self.bytes_written += len(data)

    def newline(self) -> None:
        self.write("\n")

    def flush(self) -> None:
        try:
            self.sink.flush()
        except (OSError, ValueError) as exc:
            raise RenderIOError(f"Failed to flush output: {exc}") from exc
