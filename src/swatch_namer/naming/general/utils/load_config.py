# src/swatch_namer/naming/general/utils/load_config.py

"""Read a JSON object table from the package <data/> directory.

Resolution: explicit `base_dir` > $SWATCH_NAMER_DATA_DIR > nearest `data/`
walking up from this file. Validated tables are cached per
(path, mtime, validator), so an edited file is re-read on the next call.

Used by the palette loader (bundled hex → name table).
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

__all__ = [
    "DATA_DIR_ENV",
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV = "SWATCH_NAMER_DATA_DIR"

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested table cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing or validation fails."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON is not an object."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.Lock()
_CACHE: dict[tuple[Path, float, Validator | None], dict[str, Any]] = {}


def clear_config_cache() -> None:
    with _CACHE_LOCK:
        _CACHE.clear()


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    start = (start or Path(__file__)).resolve()
    return [p / "data" for p in [start, *start.parents]]


def _resolve_data_dir(start: Path | None = None) -> Path:
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(os.path.expanduser(env)).resolve()
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand.resolve()
    raise DataDirNotFound(
        f"No 'data' directory found (set {DATA_DIR_ENV}); tried:\n  "
        + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    validator: Validator | None = None,
) -> dict[str, Any]:
    """Load <data>/<file>.json as a dict, optionally validated, with caching.

    Raises:
        DataDirNotFound, ConfigFileNotFound, ConfigParseError, ConfigTypeError.
    """
    data_dir = (base_dir or _resolve_data_dir()).resolve()
    name = os.fspath(file)
    path = (data_dir / (name if name.endswith(".json") else f"{name}.json")).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"Refusing to read outside data dir: {path} (base={data_dir})")

    try:
        key = (path, path.stat().st_mtime, validator)
    except OSError as e:
        raise ConfigFileNotFound(f"Config file not found: {path}") from e

    with _CACHE_LOCK:
        if key in _CACHE:
            return _CACHE[key]

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    if validator is not None:
        try:
            data = validator(data)
        except Exception as e:
            raise ConfigParseError(f"{path.name}: validator failed: {e}") from e

    with _CACHE_LOCK:
        _CACHE[key] = data
    log.debug("Loaded %s (%d keys)", path.name, len(data))
    return data
