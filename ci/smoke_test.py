"""Import h5py and chunked-array-base.
Print out HDF5, h5py, and chunked-array-base versions.
Finally, create an HDF5 file on disk, write some chunked data to it, and copy it
back chunk by chunk.
"""

import tempfile

import h5py
import h5py.h5
import numpy as np

try:
    # Print h5py and hdf5 versions even if chunked-array-base is broken
    import chunked_array_base  # noqa: E402

    exc = None
except Exception as e:
    exc = e


def main():
    print("libhdf5           ", ".".join(map(str, h5py.h5.get_libversion())))
    print("h5py              ", h5py.__version__)
    if exc is None:
        print("chunked-array-base", chunked_array_base.__version__)
    else:
        raise exc

    with tempfile.TemporaryFile() as fh, h5py.File(fh, "w") as f:
        ds = f.create_dataset("data", data=[1, 2, 3, 4, 5], chunks=(2,))
        grid = chunked_array_base.eachchunk(ds)
        print(grid)
        assert len(grid) == 3
        out = chunked_array_base.copy_chunked(ds)
        assert isinstance(out, np.ndarray)
        assert out.tolist() == [1, 2, 3, 4, 5]
    print("Smoke test successful!")


if __name__ == "__main__":
    main()
