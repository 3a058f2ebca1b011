import os

import h5py
import numpy as np


class Benchmark:
    """Common setup and teardown for all chunked-array-base benchmarks."""

    def setup(self, *args, **kwargs):
        self.rng = np.random.default_rng(42)
        # cwd is a temporary directory created by asv
        self.file = h5py.File("bench.hdf5", "w")

    def reopen(self):
        """Close the file, thus ensuring everything has been
        flushed to disk, and reopen it.
        """
        self.file.close()
        self.file = h5py.File("bench.hdf5", "r+")

    def teardown(self, *args, **kwargs):
        self.file.close()
        os.remove("bench.hdf5")
