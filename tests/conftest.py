from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import h5py
import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running property-based tests")


# Run tests marked with @pytest.mark.slow last. See
# https://stackoverflow.com/questions/61533694/run-slow-pytest-commands-at-the-end-of-the-test-suite
def by_slow_marker(item):
    return bool(item.get_closest_marker("slow"))


def pytest_collection_modifyitems(items):
    items.sort(key=by_slow_marker)


@pytest.fixture
def h5file(tmp_path: Path) -> Generator[h5py.File]:
    f = h5py.File(tmp_path / "file.h5", "w")
    yield f
    f.close()
