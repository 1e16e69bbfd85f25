"""Token cache filename generation.

Filenames follow ``kiro-<method>[-<identity>].json`` where the identity is the
account email or, for IAM Identity Center logins without one, the tenant
identifier from the start URL.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from .config import TokenCacheConfig, is_valid_file_prefix
from .constants import AUTH_METHOD_IDC, TOKEN_FILE_EXTENSION, TOKEN_FILE_PREFIX, UNKNOWN_AUTH_METHOD
from .domain import KiroTokenData
from .exceptions import TokenPathError
from .sanitize import sanitize_email_for_filename
from .start_url import extract_idc_identifier

logger = logging.getLogger(__name__)

TokenDataLike = Union[KiroTokenData, Mapping[str, Any], None]

_DASH_TRANSLATION = str.maketrans({".": "-", "@": "-"})


def _to_filename_component(value: str) -> str:
    return sanitize_email_for_filename(value).translate(_DASH_TRANSLATION)


def _coerce_token_data(token_data: TokenDataLike) -> KiroTokenData:
    if isinstance(token_data, KiroTokenData):
        return token_data
    if token_data is None:
        return KiroTokenData()
    try:
        return KiroTokenData.model_validate(dict(token_data))
    except (ValidationError, TypeError, ValueError) as exc:
        logger.warning("Ignoring malformed token data when naming token file: %s", type(exc).__name__)
        return KiroTokenData()


def generate_token_file_name(token_data: TokenDataLike, *, prefix: str = TOKEN_FILE_PREFIX) -> str:
    """Build the cache filename for a token.

    Args:
        token_data: KiroTokenData or a mapping with authMethod/email/startUrl
        prefix: Filename prefix; invalid prefixes fall back to ``kiro``

    Returns:
        Filename such as ``kiro-idc-user-example-com.json``
    """
    if not is_valid_file_prefix(prefix):
        logger.warning("Invalid token file prefix %r, using '%s'", prefix, TOKEN_FILE_PREFIX)
        prefix = TOKEN_FILE_PREFIX

    data = _coerce_token_data(token_data)
    method = _to_filename_component(data.auth_method.lower())
    if not method:
        return f"{prefix}-{UNKNOWN_AUTH_METHOD}{TOKEN_FILE_EXTENSION}"

    identity = ""
    if data.email:
        identity = _to_filename_component(data.email)
    elif data.auth_method.lower() == AUTH_METHOD_IDC and data.start_url:
        identity = _to_filename_component(extract_idc_identifier(data.start_url))

    if identity:
        return f"{prefix}-{method}-{identity}{TOKEN_FILE_EXTENSION}"
    return f"{prefix}-{method}{TOKEN_FILE_EXTENSION}"


def resolve_token_path(token_data: TokenDataLike, cache_dir: Optional[Union[str, Path]] = None) -> Path:
    """Return the full path of a token's cache file without touching the disk.

    Args:
        token_data: KiroTokenData or a mapping with authMethod/email/startUrl
        cache_dir: Token cache directory; defaults to the configured one

    Raises:
        TokenPathError: If the resulting path is not directly inside cache_dir
        TokenCacheConfigError: If cache_dir is omitted and the configured settings are invalid
    """
    if cache_dir is None:
        config = TokenCacheConfig.from_environment()
        config.validate_or_raise()
        directory = config.cache_dir
        file_name = generate_token_file_name(token_data, prefix=config.file_prefix)
    else:
        directory = Path(cache_dir).expanduser()
        file_name = generate_token_file_name(token_data)

    path = directory / file_name
    if path.parent != directory or path.name != file_name:
        raise TokenPathError(f"Token file name '{file_name}' escapes cache directory '{directory}'")
    return path
