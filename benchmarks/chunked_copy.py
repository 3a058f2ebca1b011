import numpy as np

from chunked_array_base import ChunkGrid, copy_chunked, copy_chunked_into

from .common import Benchmark


class IterChunkGrid:
    params = [(10, 100, 1000)]
    param_names = ["chunk_size"]

    def setup(self, chunk_size):
        self.grid = ChunkGrid((10_000, 10_000), (chunk_size, chunk_size))

    def time_iter(self, chunk_size):
        for _ in self.grid:
            pass

    def time_coords(self, chunk_size):
        for _ in self.grid.coords():
            pass


class CopyHDF5(Benchmark):
    params = [((100, 100), (10, 1000), (1000, 1000))]
    param_names = ["chunks"]

    def setup(self, chunks):
        super().setup()
        data = self.rng.random((1000, 1000))
        self.file.create_dataset("src", data=data, chunks=chunks)
        self.file.create_dataset(
            "dst", shape=data.shape, chunks=chunks, dtype=data.dtype
        )
        self.reopen()
        self.src = self.file["src"]
        self.dst = self.file["dst"]

    def time_copy_chunked(self, chunks):
        copy_chunked(self.src)

    def time_copy_chunked_into(self, chunks):
        copy_chunked_into(self.dst, self.src)


class CopyNumpy:
    def setup(self):
        self.src = np.ones((4000, 4000))

    def time_copy_chunked(self):
        copy_chunked(self.src)
