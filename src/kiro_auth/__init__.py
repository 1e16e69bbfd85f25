"""Kiro token identity - filesystem-safe names for cached Kiro auth tokens.

This package extracts the account email from an unverified JWT, the tenant
identifier from an IAM Identity Center start URL, and turns them into
deterministic token cache filenames that are safe against path traversal.
"""

from __future__ import annotations

from .domain import KiroTokenData
from .exceptions import KiroAuthError, TokenCacheConfigError, TokenPathError
from .jwt_claims import decode_jwt_payload, extract_email_from_claims, extract_email_from_jwt
from .sanitize import sanitize_email_for_filename
from .start_url import extract_idc_identifier
from .token_filename import generate_token_file_name, resolve_token_path

__all__ = [
    "KiroTokenData",
    "KiroAuthError",
    "TokenCacheConfigError",
    "TokenPathError",
    "decode_jwt_payload",
    "extract_email_from_claims",
    "extract_email_from_jwt",
    "sanitize_email_for_filename",
    "extract_idc_identifier",
    "generate_token_file_name",
    "resolve_token_path",
]
