class AnsipicError(Exception):
    """Base class for every error raised while rendering."""


class InvalidDimensions(AnsipicError, ValueError):
    """Output size could not be resolved to a positive width and height."""


class DecodeError(AnsipicError):
    """The image decoder rejected the input."""


class RenderIOError(AnsipicError, OSError):
    """Writing to or flushing the output sink failed."""
