"""Helpers for loading mvsgraph configuration from TOML/JSON sources.

``load_config`` accepts:

* None -> default MVSGraphConfig
* dict -> MVSGraphConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union
import json
import logging

from mvsgraph.config.schema import MVSGraphConfig

logger = logging.getLogger("mvsgraph.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _parse_toml(text: str) -> Dict[str, Any]:
    """Parse TOML text into a dict.

    Uses stdlib tomllib on Python 3.11+ and `tomli` on older interpreters.
    """
    try:
        import tomllib  # type: ignore[attr-defined]
    except ImportError:  # pragma: no cover - Python <3.11 path
        import tomli as tomllib  # type: ignore[import-not-found,no-redef]
    return tomllib.loads(text)


def load_config(source: ConfigSource) -> MVSGraphConfig:
    """Load MVSGraphConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns MVSGraphConfig.default()
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        MVSGraphConfig instance.

    Raises:
        ValueError: If the parsed document is not a mapping.
        TypeError: If ``source`` has an unsupported type.
        ValidationError: If the configuration values are invalid.
    """
    if source is None:
        logger.debug("No config source provided; using defaults")
        return MVSGraphConfig.default()

    if isinstance(source, dict):
        logger.debug("Loading MVSGraphConfig from provided dict")
        return MVSGraphConfig.from_dict(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        text: Optional[str] = None
        fmt: Optional[str] = None

        if path.is_file():
            text = path.read_text(encoding="utf-8")
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                stripped = text.lstrip()
                fmt = "json" if stripped.startswith(("{", "[")) else "toml"
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            stripped = text.lstrip()
            fmt = "json" if stripped.startswith(("{", "[")) else "toml"
            logger.info("Loading configuration from inline %s string", fmt)

        if fmt == "json":
            data = json.loads(text)
        else:
            data = _parse_toml(text)

        if not isinstance(data, dict):
            raise ValueError("Top-level configuration must be a mapping/dict")

        return MVSGraphConfig.from_dict(data)

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["ConfigSource", "load_config"]
