from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import numpy as np
from ndindex import Tuple, ndindex
from numpy.testing import assert_array_equal

from chunked_array_base.chunks import eachchunk
from chunked_array_base.config import validate_copy_enabled
from chunked_array_base.errors import ShapeMismatch
from chunked_array_base.tools import format_ndindex
from chunked_array_base.typing_ import ArrayProtocol, MutableArrayProtocol

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=MutableArrayProtocol)


def copy_chunked_into(
    destination: M, source: ArrayProtocol, *, validate: bool | None = None
) -> M:
    """Copy source into destination, one chunk of source at a time.

    For every region yielded by ``eachchunk(source)``, read the region from source
    and write it to the same region of destination. This lets each backend
    perform a single batched read for each of its native chunks, instead of
    accessing individual elements.

    Errors raised by source or destination while reading or writing a region
    are propagated as-is and abort the copy. In that case, destination will hold
    the chunks that were copied before the failure and nothing is rolled back.

    Parameters
    ----------
    destination:
        Writeable array-like with the same shape as source. It is modified in
        place.
    source:
        Array-like to copy from. It is not modified.
    validate: optional
        True
            After writing each chunk, read it back from destination and raise
            ValueError if it doesn't match what was read from source.
        False
            Don't validate.
        None (default)
            Validate if the CHUNKED_ARRAY_BASE_VALIDATE_COPY environment variable
            is set to 1 or true.

    Returns
    -------
    The destination parameter.

    Raises
    ------
    ShapeMismatch
        If source and destination have different shapes. This is checked before
        any data is copied.
    """
    src_shape = tuple(source.shape)
    dst_shape = tuple(destination.shape)
    if src_shape != dst_shape:
        raise ShapeMismatch(
            f"Cannot copy an array of shape {src_shape} into one of shape {dst_shape}"
        )

    if validate is None:
        validate = validate_copy_enabled()

    chunks = eachchunk(source)
    logger.debug(
        "Chunked copy of shape %s: %s (validate=%s)", src_shape, chunks, validate
    )

    n = 0
    debug = logger.isEnabledFor(logging.DEBUG)
    for region in chunks:
        # Backends may describe their chunks with plain tuples of slices
        region = ndindex(region)
        if debug:
            logger.debug("  copying chunk %s", format_ndindex(region))
        data = source[region.raw]
        destination[region.raw] = data
        if validate:
            _verify_chunk(destination, region, data)
        n += 1

    logger.debug("Chunked copy of shape %s: %d chunks copied", src_shape, n)
    return destination


def _verify_chunk(destination: Any, region: Tuple, expect: Any) -> None:
    """Check that the data written to a chunk of destination matches the data that
    was read from source.

    Raises a ValueError if it doesn't.
    """
    actual = destination[region.raw]
    try:
        assert_array_equal(np.asarray(actual), np.asarray(expect))
    except AssertionError as e:
        raise ValueError(
            f"Chunk {format_ndindex(region)} of the destination does not match "
            "the source after copying"
        ) from e


def copy_chunked(
    source: ArrayProtocol,
    *,
    out_factory: Callable[[tuple[int, ...], np.dtype], Any] | None = None,
    validate: bool | None = None,
) -> Any:
    """Allocate a new array with the same shape and dtype as source and copy
    source into it, one chunk at a time.

    Parameters
    ----------
    source:
        Array-like to copy from.
    out_factory: optional
        Callable ``(shape, dtype) -> array`` that allocates the destination.
        Defaults to :func:`numpy.empty`, so the destination starts uninitialized.
    validate: optional
        See :func:`copy_chunked_into`.

    Returns
    -------
    The newly allocated and populated array.
    """
    shape = tuple(source.shape)
    dtype = np.dtype(source.dtype)
    if out_factory is None:
        destination = np.empty(shape, dtype=dtype)
    else:
        destination = out_factory(shape, dtype)
    return copy_chunked_into(destination, source, validate=validate)
