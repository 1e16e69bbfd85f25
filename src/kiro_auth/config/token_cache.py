"""Token cache configuration.

This module provides TokenCacheConfig, which describes where Kiro token files
live and how they are named:

- Cache directory (KIRO_TOKEN_DIR, default ``~/.cli-proxy-api``)
- Filename prefix (KIRO_TOKEN_FILE_PREFIX, default ``kiro``)

Explicit parameters take precedence over environment variables, which take
precedence over defaults.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..constants import (
    DEFAULT_TOKEN_DIR,
    TOKEN_DIR_ENV_VAR,
    TOKEN_FILE_PREFIX,
    TOKEN_FILE_PREFIX_ENV_VAR,
)
from ..exceptions import TokenCacheConfigError

FILE_PREFIX_PATTERN = re.compile(r"[a-z0-9-]+")


def is_valid_file_prefix(prefix: Any) -> bool:
    """Return True if ``prefix`` is a lowercase alphanumeric/hyphen string."""
    return isinstance(prefix, str) and FILE_PREFIX_PATTERN.fullmatch(prefix) is not None


class TokenCacheConfig:
    """Where token files are stored and how their names start.

    Example usage:
        config = TokenCacheConfig.from_environment()
        for error in config.validate():
            print(f"Configuration error: {error}")
    """

    def __init__(self, cache_dir: Optional[str] = None, file_prefix: Optional[str] = None):
        self.cache_dir = Path(cache_dir or DEFAULT_TOKEN_DIR).expanduser()
        self.file_prefix = file_prefix if file_prefix is not None else TOKEN_FILE_PREFIX

    def validate(self) -> List[str]:
        """Return a list of problems with this configuration (empty if valid).

        The directory does not need to exist yet, but an existing path
        must be a directory. The prefix must consist of lowercase letters,
        digits and hyphens.
        """
        errors: List[str] = []

        if self.cache_dir.exists() and not self.cache_dir.is_dir():
            errors.append(f"Token cache path '{self.cache_dir}' exists but is not a directory")

        if not is_valid_file_prefix(self.file_prefix):
            errors.append(
                f"Token file prefix {self.file_prefix!r} is invalid. "
                "Use lowercase letters, digits and hyphens only (e.g., 'kiro')."
            )

        return errors

    def validate_or_raise(self) -> None:
        """Raise TokenCacheConfigError listing every problem found by validate()."""
        errors = self.validate()
        if errors:
            raise TokenCacheConfigError(
                "Token cache configuration is invalid:\n" + "\n".join(f"  - {error}" for error in errors)
            )

    def to_dict(self) -> Dict[str, Any]:
        return {"cache_dir": str(self.cache_dir), "file_prefix": self.file_prefix}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TokenCacheConfig:
        """Create TokenCacheConfig from dictionary data.

        Raises:
            TokenCacheConfigError: If a provided value is not a string
        """
        cache_dir = data.get("cache_dir")
        file_prefix = data.get("file_prefix")
        for key, value in (("cache_dir", cache_dir), ("file_prefix", file_prefix)):
            if value is not None and not isinstance(value, str):
                raise TokenCacheConfigError(f"'{key}' must be a string, got {type(value).__name__}")
        return cls(cache_dir=cache_dir, file_prefix=file_prefix)

    @classmethod
    def from_environment(cls) -> TokenCacheConfig:
        """Create TokenCacheConfig from KIRO_TOKEN_DIR and KIRO_TOKEN_FILE_PREFIX."""
        return cls(
            cache_dir=os.environ.get(TOKEN_DIR_ENV_VAR),
            file_prefix=os.environ.get(TOKEN_FILE_PREFIX_ENV_VAR),
        )

    @classmethod
    def with_defaults(cls, **kwargs) -> TokenCacheConfig:
        """Create TokenCacheConfig with explicit parameters overriding the environment."""
        env_config = cls.from_environment()
        return cls(
            cache_dir=kwargs.get("cache_dir", str(env_config.cache_dir)),
            file_prefix=kwargs.get("file_prefix", env_config.file_prefix),
        )
