from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import h5py
from ndindex import Tuple

from chunked_array_base.chunk_grid import ChunkGrid
from chunked_array_base.h5py_compat import h5py_eachchunk
from chunked_array_base.typing_ import ArrayProtocol, ChunkedArrayProtocol


def eachchunk(a: Any) -> Iterable[Tuple | tuple[slice, ...]]:
    """Return the regions of all chunks of an array-like, typically as a
    :class:`~chunked_array_base.ChunkGrid`.

    The chunking is discovered as follows:

    1. Objects implementing :class:`~chunked_array_base.typing_.ChunkedArrayProtocol`
       (that is, an ``eachchunk()`` method) describe their own chunking. This is
       how storage backends plug in.
    2. :class:`h5py.Dataset` objects use their ``chunks`` attribute. Contiguous
       datasets are a single chunk.
    3. Any other :class:`~chunked_array_base.typing_.ArrayProtocol`, e.g. a
       :class:`numpy.ndarray`, is a single chunk spanning the whole array.

    Raises
    ------
    TypeError
        If a is not an array-like.
    InvalidShape
        If a has zero dimensions or a zero-sized axis.
    """
    if isinstance(a, ChunkedArrayProtocol):
        return a.eachchunk()
    if isinstance(a, h5py.Dataset):
        return h5py_eachchunk(a)
    if isinstance(a, ArrayProtocol):
        return ChunkGrid(a.shape, a.shape)
    raise TypeError(f"Don't know how to get the chunks of {type(a).__name__!r}")
