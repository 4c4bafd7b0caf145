"""Shared test utilities."""
import hashlib
import hmac

import pytest


@pytest.fixture
def compute_signature():
    """HMAC-MD5 hex digest, as the Google Code webhook sender computes it."""

    def _sign(payload: bytes, key: bytes) -> str:
        return hmac.new(key, payload, hashlib.md5).hexdigest()

    return _sign


@pytest.fixture
def key_file(tmp_path):
    """Write raw bytes to a secret key file and return its path."""

    def _write(content: bytes | str, name: str = "secret.key"):
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return path

    return _write
