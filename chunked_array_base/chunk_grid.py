from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

import numpy as np
from ndindex import Slice, Tuple

from chunked_array_base.cytools import ceil_a_over_b, chunk_stop
from chunked_array_base.errors import InvalidShape
from chunked_array_base.tools import format_shape


def _as_shape(shape: Iterable[int], name: str) -> tuple[int, ...]:
    """Sanitize input (e.g. convert np.int64 to int, reject floats)"""
    try:
        return tuple(operator.index(i) for i in shape)
    except TypeError as e:
        raise InvalidShape(
            f"{name} must be a sequence of integers; got {shape!r}"
        ) from e


class ChunkGrid:
    """Regular partition of an N-dimensional array into rectangular chunks.

    Iterating over a ChunkGrid lazily yields the index of every chunk as an
    :class:`ndindex.Tuple` of step-1 :class:`ndindex.Slice` objects, one per axis,
    in C order over the grid of chunks (last axis varying fastest). Chunks at the
    end of an axis whose size is not a multiple of the chunk size are clipped to
    the array, so that the chunks tile the array with no gaps and no overlaps::

        >>> grid = ChunkGrid((12,), (5,))
        >>> grid.grid_shape
        (3,)
        >>> [region.raw for region in grid]  # doctest: +NORMALIZE_WHITESPACE
        [(slice(0, 5, 1),), (slice(5, 10, 1),), (slice(10, 12, 1),)]

    Use ``region.raw`` to index numpy arrays, h5py datasets or any other
    :class:`~chunked_array_base.typing_.ArrayProtocol`.

    ChunkGrid is immutable and carries no iteration state, so it can be iterated
    any number of times, also concurrently, always yielding the same sequence.

    Parameters
    ----------
    parent_shape:
        Shape of the whole array. All elements must be strictly positive.
    chunk_shape:
        Nominal shape of each chunk. Must have the same length as parent_shape and
        all elements must be strictly positive.
    """

    #: Shape of the whole array
    parent_shape: tuple[int, ...]

    #: Shape of every chunk that is not clipped by the edge of the array
    chunk_shape: tuple[int, ...]

    #: Number of chunks along each axis, including partial trailing chunks
    grid_shape: tuple[int, ...]

    __slots__ = ("parent_shape", "chunk_shape", "grid_shape")

    def __init__(self, parent_shape: Iterable[int], chunk_shape: Iterable[int]):
        parent_shape = _as_shape(parent_shape, "parent_shape")
        chunk_shape = _as_shape(chunk_shape, "chunk_shape")

        if len(parent_shape) != len(chunk_shape):
            raise InvalidShape(
                "parent_shape and chunk_shape must have the same length; got "
                f"{parent_shape} and {chunk_shape}"
            )
        if not parent_shape:
            raise InvalidShape("ChunkGrid must have at least one dimension")
        if any(s <= 0 for s in parent_shape):
            raise InvalidShape(
                f"parent_shape must be strictly positive; got {parent_shape}"
            )
        if any(c <= 0 for c in chunk_shape):
            raise InvalidShape(
                f"chunk_shape must be strictly positive; got {chunk_shape}"
            )

        object.__setattr__(self, "parent_shape", parent_shape)
        object.__setattr__(self, "chunk_shape", chunk_shape)
        object.__setattr__(
            self,
            "grid_shape",
            tuple(ceil_a_over_b(s, c) for s, c in zip(parent_shape, chunk_shape)),
        )

    @classmethod
    def from_array(cls, a: Any, chunk_shape: Iterable[int]) -> ChunkGrid:
        """Build the grid of an array-like, given the desired chunk shape."""
        return cls(a.shape, chunk_shape)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def ndim(self) -> int:
        return len(self.parent_shape)

    @property
    def shape(self) -> tuple[int, ...]:
        """Number of chunks along each axis. Alias of grid_shape."""
        return self.grid_shape

    @property
    def size(self) -> int:
        """Total number of chunks"""
        return len(self)

    @property
    def is_regular(self) -> bool:
        """True if all chunks have exactly chunk_shape, i.e. none is clipped by the
        edge of the array; False otherwise.
        """
        return all(s % c == 0 for s, c in zip(self.parent_shape, self.chunk_shape))

    def __len__(self) -> int:
        n = 1
        for i in self.grid_shape:
            n *= i
        return n

    def coords(self) -> Iterator[tuple[int, ...]]:
        """Iterate over the coordinates of all chunks in the grid, in the same order
        as the regions yielded by __iter__.
        """
        grid_shape = self.grid_shape
        coord = [0] * len(grid_shape)
        while True:
            yield tuple(coord)
            # Odometer increment, last axis fastest
            axis = len(grid_shape) - 1
            while axis >= 0:
                coord[axis] += 1
                if coord[axis] < grid_shape[axis]:
                    break
                coord[axis] = 0
                axis -= 1
            else:
                return

    def __iter__(self) -> Iterator[Tuple]:
        for coord in self.coords():
            yield self._region(coord)

    def _region(self, coord: tuple[int, ...]) -> Tuple:
        """Region of the chunk at coord. Assumes coord is within the grid."""
        return Tuple(
            *(
                Slice(i * c, chunk_stop(i, c, s), 1)
                for i, c, s in zip(coord, self.chunk_shape, self.parent_shape)
            )
        )

    def _normalize_coord(self, coord: int | Sequence[int]) -> tuple[int, ...]:
        if not isinstance(coord, tuple):
            coord = (coord,) if np.ndim(coord) == 0 else tuple(coord)
        if len(coord) != self.ndim:
            raise IndexError(
                f"Chunk coordinate {coord} has {len(coord)} dimensions; "
                f"expected {self.ndim}"
            )

        out = []
        for axis, (i, n) in enumerate(zip(coord, self.grid_shape)):
            i = operator.index(i)
            if i < 0:
                i += n
            if not 0 <= i < n:
                raise IndexError(
                    f"Chunk coordinate {coord[axis]} is out of bounds for axis {axis} "
                    f"with {n} chunks"
                )
            out.append(i)
        return tuple(out)

    def chunk_region(self, coord: int | Sequence[int]) -> Tuple:
        """Return the region of the array covered by the chunk at the given
        coordinate of the grid. Negative coordinates count from the end.
        """
        return self._region(self._normalize_coord(coord))

    __getitem__ = chunk_region

    def chunk_size_at(self, coord: int | Sequence[int]) -> tuple[int, ...]:
        """Return the actual shape of the chunk at the given coordinate, which is
        smaller than chunk_shape for chunks clipped by the edge of the array.
        """
        coord = self._normalize_coord(coord)
        return tuple(
            chunk_stop(i, c, s) - i * c
            for i, c, s in zip(coord, self.chunk_shape, self.parent_shape)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChunkGrid):
            return NotImplemented
        return (
            self.parent_shape == other.parent_shape
            and self.chunk_shape == other.chunk_shape
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.parent_shape, self.chunk_shape))

    def __reduce__(self):
        return type(self), (self.parent_shape, self.chunk_shape)

    def __repr__(self) -> str:
        return (
            f"ChunkGrid(parent_shape={self.parent_shape}, "
            f"chunk_shape={self.chunk_shape})"
        )

    def __str__(self) -> str:
        return (
            f"Regular {format_shape(self.chunk_shape)} chunks over a "
            f"{format_shape(self.parent_shape)} array."
        )
