import importlib.metadata

from chunked_array_base.chunk_grid import ChunkGrid
from chunked_array_base.chunked_copy import copy_chunked, copy_chunked_into
from chunked_array_base.chunks import eachchunk
from chunked_array_base.errors import InvalidShape, RegionAccessFailure, ShapeMismatch

__version__ = importlib.metadata.version(__package__)

__all__ = [
    "ChunkGrid",
    "InvalidShape",
    "RegionAccessFailure",
    "ShapeMismatch",
    "copy_chunked",
    "copy_chunked_into",
    "eachchunk",
]
