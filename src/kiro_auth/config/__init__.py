"""Configuration helpers for Kiro token identity."""

from .token_cache import TokenCacheConfig, is_valid_file_prefix

__all__ = ["TokenCacheConfig", "is_valid_file_prefix"]
