"""Configuration schema and loading for mvsgraph."""

from .loader import load_config
from .schema import EXPORT_FORMATS, ExportConfig, GoConfig, MVSGraphConfig

__all__ = [
    "EXPORT_FORMATS",
    "ExportConfig",
    "GoConfig",
    "MVSGraphConfig",
    "load_config",
]
