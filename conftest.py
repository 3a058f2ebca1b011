def pytest_report_header(config):  # noqa: ARG001
    import h5py
    import ndindex
    import numpy

    return (
        f"project deps: numpy-{numpy.__version__}, h5py-{h5py.__version__}, "
        f"ndindex-{ndindex.__version__}"
    )
