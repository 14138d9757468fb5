"""
pgscript.config.defaults - Default configuration values
"""

DEFAULT_CONFIG = {
    "input": [],
    "output": "output",
    "parser": {
        "entity_type": "core:text_node",
        "default_name": "untitled",
        "default_version": "0.0.0",
        "strict": False,
    },
}

CONFIG_FILE_NAMES = ["pgscript.toml", "options.json"]
