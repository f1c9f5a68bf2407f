# swatch_namer/naming/general/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for the naming stack.
Returns: Public API via load_config/clear_config_cache and debug/reload_topics.
Used by: Palette loaders, the matcher, the CLI and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    DATA_DIR_ENV,
    clear_config_cache,
    load_config,
)
from .log import (
    debug,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "DATA_DIR_ENV",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "reload_topics",
]
