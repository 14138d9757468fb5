"""
pgscript.config - Configuration loading and defaults
"""

from pgscript.config.defaults import CONFIG_FILE_NAMES, DEFAULT_CONFIG
from pgscript.config.loader import (
    ConfigError,
    ConfigLoader,
    DirectoryPair,
    find_config_file,
    get_directory_pairs,
    load_config,
    merge_configs,
)

__all__ = [
    "CONFIG_FILE_NAMES",
    "DEFAULT_CONFIG",
    "ConfigError",
    "ConfigLoader",
    "DirectoryPair",
    "find_config_file",
    "get_directory_pairs",
    "load_config",
    "merge_configs",
]
