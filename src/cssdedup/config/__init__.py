"""Configuration: defaults, YAML/env hierarchy and the settings model."""

from cssdedup.config.hierarchy import load_config_hierarchy, load_settings
from cssdedup.config.schema import DedupSettings

__all__ = [
    "DedupSettings",
    "load_config_hierarchy",
    "load_settings",
]
