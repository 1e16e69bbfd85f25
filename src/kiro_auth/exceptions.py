"""Shared exception types for Kiro token identity helpers."""

from __future__ import annotations


class KiroAuthError(RuntimeError):
    """Base exception for Kiro auth helper errors."""

    def __init__(self, message: str, *, error_code: str = "kiro_auth_error") -> None:
        super().__init__(message)
        self.error_code = error_code


class TokenPathError(KiroAuthError):
    """Resolved token file path falls outside the token cache directory."""

    def __init__(self, message: str) -> None:
        super().__init__(message, error_code="TOKEN_PATH_ESCAPE")


class TokenCacheConfigError(KiroAuthError):
    """Token cache directory or filename prefix settings are unusable."""

    def __init__(self, message: str) -> None:
        super().__init__(message, error_code="INVALID_TOKEN_CACHE_CONFIG")
