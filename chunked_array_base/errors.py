class InvalidShape(ValueError):
    """Raised when the shape or chunk shape of a ChunkGrid is malformed:
    mismatched lengths, zero dimensions, or a non-positive component.
    """


class ShapeMismatch(ValueError):
    """Raised when the source and destination of a chunked copy don't have the
    same shape.
    """


class RegionAccessFailure(OSError):
    """Raised by array backends when reading or writing a region fails.

    chunked_array_base never catches, retries or wraps these; they are propagated
    to the caller as they are raised by the backend.
    """
