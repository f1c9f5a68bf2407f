"""
token.
=====

Does: Expose name normalization helpers.
"""

from .normalize import normalize_token

__all__ = ["normalize_token"]
