"""
general.
=======

Shared general-purpose modules (config loading, debug logging, token
normalization) used across the naming stack.
"""

__all__: list[str] = []
