import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()


setuptools.setup(
    name="chunked-array-base",
    version="0.1.0",
    description="Chunk grids and chunked copies for N-dimensional array backends",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=["chunked_array_base"],
    license="BSD",
    install_requires=[
        "cython",
        "h5py",
        "ndindex>=1.5",
        "numpy",
    ],
    extras_require={
        "test": [
            "hypothesis",
            "pytest",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
