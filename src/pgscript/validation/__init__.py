"""
pgscript.validation - Structural validation of converted scripts
"""

from pgscript.validation.tree import TreeViolation, check_tree, validate_tree

__all__ = [
    "TreeViolation",
    "check_tree",
    "validate_tree",
]
