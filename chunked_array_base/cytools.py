from __future__ import annotations

import cython
from cython import ssize_t


@cython.ccall
@cython.nogil
@cython.exceptval(check=False)
def ceil_a_over_b(a: ssize_t, b: ssize_t) -> ssize_t:
    """Returns ceil(a/b). Assumes a >= 0 and b > 0."""
    return a // b + (a % b > 0)


@cython.ccall
@cython.nogil
@cython.exceptval(check=False)
def chunk_stop(chunk_idx: ssize_t, chunk_size: ssize_t, dset_size: ssize_t) -> ssize_t:
    """Return the exclusive end of the chunk_idx-th chunk along an axis of size
    dset_size, clipped so that the last chunk never overruns the axis.

    This is functionally identical to::

        min((chunk_idx + 1) * chunk_size, dset_size)

    Assumes 0 <= chunk_idx < ceil_a_over_b(dset_size, chunk_size).
    """
    stop = (chunk_idx + 1) * chunk_size
    if stop > dset_size:
        return dset_size
    return stop
