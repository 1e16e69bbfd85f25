"""Domain objects for Kiro token identity."""

from .token_data import KiroTokenData

__all__ = ["KiroTokenData"]
