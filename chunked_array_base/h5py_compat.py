from __future__ import annotations

import h5py

from chunked_array_base.chunk_grid import ChunkGrid


def h5py_eachchunk(ds: h5py.Dataset) -> ChunkGrid:
    """Return the chunk grid of an h5py Dataset.

    Only the metadata of the dataset is accessed. Contiguous datasets, which have
    chunks=None, are treated as a single chunk spanning the whole dataset; this is
    also the layout that h5py uses for datasets with compact storage.
    """
    chunks = ds.chunks
    if chunks is None:
        chunks = ds.shape
    return ChunkGrid(ds.shape, chunks)
