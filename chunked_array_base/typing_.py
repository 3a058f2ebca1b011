"""Type annotations.

Note: This module cannot be called 'typing' or 'types' as it will cause a
collision in Cython with the standard library 'typing' and 'types' modules.
(In Python, this issue was fixed in 3.0).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

import numpy as np
from ndindex import Tuple
from numpy.typing import ArrayLike, DTypeLike, NDArray


@runtime_checkable
class ArrayProtocol(Protocol):
    """Minimal read-only NumPy array-like interface.

    Not to be confused with numpy.typing.ArrayLike, which is any object that
    can be coerced into a numpy array, including a nested list.

    This is what a chunked copy needs from its source: a shape, a dtype to
    allocate a destination with, and __getitem__ over a tuple of slices.
    numpy.ndarray and h5py.Dataset both qualify.
    """

    @property
    def shape(self) -> tuple[int, ...]: ...

    @property
    def size(self) -> int: ...

    @property
    def ndim(self) -> int: ...

    @property
    def dtype(self) -> np.dtype: ...

    def __getitem__(self, index: Any) -> ArrayProtocol: ...

    def __array__(
        self, dtype: DTypeLike | None = None, copy: bool | None = None
    ) -> NDArray: ...


@runtime_checkable  # Does not support inheritance
class MutableArrayProtocol(Protocol):
    """ArrayProtocol which can also be the destination of a chunked copy."""

    @property
    def shape(self) -> tuple[int, ...]: ...

    @property
    def size(self) -> int: ...

    @property
    def ndim(self) -> int: ...

    @property
    def dtype(self) -> np.dtype: ...

    def __getitem__(self, index: Any) -> MutableArrayProtocol: ...

    def __array__(
        self, dtype: DTypeLike | None = None, copy: bool | None = None
    ) -> NDArray: ...

    def __setitem__(self, index: Any, value: ArrayLike) -> None: ...


@runtime_checkable
class ChunkedArrayProtocol(Protocol):
    """Array-like that knows its own chunking.

    Backends plug into :func:`chunked_array_base.eachchunk` by implementing an
    ``eachchunk()`` method, which must return the regions of all chunks of the
    array; typically a :class:`chunked_array_base.ChunkGrid`, but plain tuples of
    slices are accepted too.
    """

    @property
    def shape(self) -> tuple[int, ...]: ...

    def eachchunk(self) -> Iterable[Tuple | tuple[slice, ...]]: ...
