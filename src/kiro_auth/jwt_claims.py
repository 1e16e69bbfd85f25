"""Utilities for pulling identity claims out of unverified JWTs.

Tokens handed to us by the OIDC token exchange are trusted only for display
and file naming, never for authorization, so the signature is not checked.
Every failure path degrades to an empty result.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
import re
from typing import Any, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)


def _accept_any(value: str) -> bool:
    return True


def _looks_like_email(value: str) -> bool:
    return "@" in value


# Claims checked in order; the first non-empty string value passing its rule wins.
_EMAIL_CLAIM_RULES: Tuple[Tuple[str, Callable[[str], bool]], ...] = (
    ("email", _accept_any),
    ("preferred_username", _looks_like_email),
    ("sub", _looks_like_email),
    ("username", _looks_like_email),
)


# Unpadded base64url, as used by compact JWT segments
_BASE64URL_SEGMENT_PATTERN = re.compile(r"[A-Za-z0-9_-]*")


def _decode_base64(data: str) -> bytes:
    if _BASE64URL_SEGMENT_PATTERN.fullmatch(data) is None:
        raise ValueError("segment contains characters outside the unpadded base64url alphabet")
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def decode_jwt_payload(token: str) -> Optional[Dict[str, Any]]:
    """Decode a JWT payload without verifying the signature.

    Returns None when the token does not have exactly three segments, the
    payload is not valid base64url, or it does not decode to a JSON object.
    """
    if not token:
        return None

    parts = token.split(".")
    if len(parts) != 3:
        logger.debug("Invalid JWT format - expected 3 parts, got %d", len(parts))
        return None

    try:
        payload_bytes = _decode_base64(parts[1])
    except (binascii.Error, ValueError) as exc:
        logger.debug("JWT payload is not valid base64url: %s", exc)
        return None

    try:
        payload = json.loads(payload_bytes.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        logger.debug("JWT payload is not valid JSON: %s", exc)
        return None

    if not isinstance(payload, dict):
        logger.debug("Decoded JWT payload is not an object")
        return None
    return payload


def extract_email_from_claims(claims: Dict[str, Any]) -> str:
    """Return the best-effort email address from a decoded claim set."""
    for key, rule in _EMAIL_CLAIM_RULES:
        value = claims.get(key)
        if isinstance(value, str) and value and rule(value):
            logger.debug("Using JWT claim '%s' as email", key)
            return value
    return ""


def extract_email_from_jwt(token: str) -> str:
    """Extract an email address from an unverified JWT.

    Looks at ``email`` first, then ``preferred_username``, ``sub`` and
    ``username``. The fallback claims only count when they contain ``@``.

    Args:
        token: Compact JWT string (header.payload.signature)

    Returns:
        The email address, or an empty string if none can be found
    """
    claims = decode_jwt_payload(token)
    if claims is None:
        return ""
    return extract_email_from_claims(claims)
