"""
pgscript.commands.check - Convert graph files in memory without writing.

Prints a short summary per file, or the converted script as JSON with -j.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pgscript.config import ConfigError, ConfigLoader, find_config_file, load_config
from pgscript.graph.errors import ConversionError
from pgscript.graph.factory import ConversionOptions, convert_graph, load_graph_file
from pgscript.graph.serialize import serialize_document


def run(args: argparse.Namespace) -> int:
    """
    Run the check command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 if every file converts, 1 otherwise)
    """
    config = load_check_configuration(args)
    if config is None:
        return 1

    options = ConversionOptions.from_dict(config.get("parser", {}))
    if args.strict:
        options.strict = True
    if args.entity_type:
        options.entity_type = args.entity_type

    failures = 0
    results = {}
    for path in args.files:
        try:
            result = convert_graph(load_graph_file(path), options)
        except (ConversionError, OSError) as e:
            print(f"❌ {path}: {e}", file=sys.stderr)
            failures += 1
            continue

        document = result.document
        if args.json:
            results[str(path)] = serialize_document(document)
        elif not args.quiet:
            print(
                f"✓ {path}: '{document.name}' v{document.version}, "
                f"{len(document.entities)} entities, {len(document.roles)} roles"
            )
            for ref in result.dangling:
                print(f"   ⚠️  dangling child {ref}")

    if args.json:
        print(json.dumps(results, indent=2, ensure_ascii=False))

    return 1 if failures else 0


def load_check_configuration(args: argparse.Namespace) -> ConfigLoader | None:
    """Load the options file given with --options or found nearby.

    Without any options file the defaults are used.
    """
    config_path = args.options or find_config_file(Path.cwd())
    if config_path is None:
        return ConfigLoader.from_dict({})

    try:
        return load_config(Path(config_path))
    except ConfigError as e:
        print(f"❌ Failed to read options: {e}", file=sys.stderr)
        return None
