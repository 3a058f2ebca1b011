from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np
from ndindex import Tuple


def format_ndindex(idx: Any) -> str:
    """Format a numpy or ndindex index for pretty-printing.

    >>> format_ndindex(slice(None))
    ':'
    >>> format_ndindex(slice(None, 10, 2))
    ':10:2'
    >>> format_ndindex(())
    '()'
    >>> format_ndindex((1, slice(2, 3, 1), np.array([4, 5, 6])))
    '1, 2:3, [4, 5, 6]'
    >>> format_ndindex(Tuple(slice(0, 5, 1), slice(10, 12, 1)))
    '0:5, 10:12'
    """
    if isinstance(idx, Tuple):
        idx = idx.raw

    if isinstance(idx, tuple):
        if idx == ():
            return "()"
    else:
        idx = (idx,)

    idx_s = []
    for i in idx:
        if isinstance(i, slice):
            start = "" if i.start is None else i.start
            stop = "" if i.stop is None else i.stop
            step = "" if i.step in (1, None) else f":{i.step}"
            idx_s.append(f"{start}:{stop}{step}")
        elif isinstance(i, np.ndarray):
            idx_s.append(str(i.tolist()))
        else:
            idx_s.append(str(i))
    return ", ".join(idx_s)


def format_shape(shape: Iterable[int]) -> str:
    """Format a shape the way it is conventionally written in prose.

    >>> format_shape((100, 50))
    '100x50'
    >>> format_shape((12,))
    '12'
    """
    return "x".join(str(int(i)) for i in shape)
