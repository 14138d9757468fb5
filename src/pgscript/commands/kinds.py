"""
pgscript.commands.kinds - List the label keywords the classifier accepts.
"""

import argparse

from pgscript.graph.kinds import is_process, is_result, is_root, keywords


def run(args: argparse.Namespace) -> int:
    """Print each keyword with its kind and categories."""
    print(f"{'KEYWORD':<10} {'KIND':<8} CATEGORIES")
    for keyword, kind in keywords().items():
        categories = [
            name
            for name, member in (
                ("process", is_process(kind)),
                ("root", is_root(kind)),
                ("result", is_result(kind)),
            )
            if member
        ]
        print(f"{keyword:<10} {kind.value:<8} {', '.join(categories) or '-'}")
    return 0
