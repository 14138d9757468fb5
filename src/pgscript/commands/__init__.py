"""
pgscript.commands - CLI command implementations
"""

__all__ = [
    "check",
    "convert",
    "kinds",
]
