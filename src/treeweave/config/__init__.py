"""Configuration loading utilities."""
from .loader import deep_update, load_config
from .schema import ColourConfig, LoggingConfig, TreeMapConfig, VizConfig

__all__ = [
    "load_config",
    "deep_update",
    "TreeMapConfig",
    "ColourConfig",
    "LoggingConfig",
    "VizConfig",
]
