"""Test configuration for pytest."""

from __future__ import annotations

import base64
import json
from typing import Any, Callable, Dict

import jwt as pyjwt
import pytest


@pytest.fixture
def make_jwt() -> Callable[[Dict[str, Any]], str]:
    """Build an HS256 JWT carrying the given claims.

    The signature is real but irrelevant; the code under test never verifies it.
    """

    def _make(claims: Dict[str, Any]) -> str:
        return pyjwt.encode(claims, "test-secret-for-jwt-generation", algorithm="HS256")

    return _make


@pytest.fixture
def make_raw_jwt() -> Callable[[bytes], str]:
    """Build a three-segment token around an arbitrary raw payload."""

    def _encode(data: bytes) -> str:
        return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")

    def _make(payload: bytes) -> str:
        header = _encode(json.dumps({"alg": "RS256", "typ": "JWT"}).encode("utf-8"))
        return f"{header}.{_encode(payload)}.{_encode(b'fake-signature')}"

    return _make


@pytest.fixture
def clean_token_env(monkeypatch):
    """Remove token cache environment variables for the duration of a test."""
    for key in ("KIRO_TOKEN_DIR", "KIRO_TOKEN_FILE_PREFIX"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
