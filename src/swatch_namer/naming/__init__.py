"""
naming.
======

Does: Group the color-naming stack (`color`) and its shared helpers (`general`).
"""

__all__: list[str] = []
__docformat__ = "google"
