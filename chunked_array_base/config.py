from __future__ import annotations

import os

VALIDATE_COPY_ENV = "CHUNKED_ARRAY_BASE_VALIDATE_COPY"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() in ("1", "true")


def validate_copy_enabled() -> bool:
    """Return True if copy_chunked_into() should read back and verify every chunk
    after writing it, as requested by the CHUNKED_ARRAY_BASE_VALIDATE_COPY
    environment variable; False otherwise.

    The environment is read on every call, so that the setting can be changed at
    runtime (e.g. with monkeypatch.setenv in tests).
    """
    return _env_flag(VALIDATE_COPY_ENV)
