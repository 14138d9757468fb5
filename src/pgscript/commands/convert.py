"""
pgscript.commands.convert - Convert every graph listed in an options file.

For each configured input directory, every ``*.json`` graph is converted
and written under the output directory with the same file name. A failed
file is reported and skipped; the remaining files are still processed.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path

from pgscript.config import (
    ConfigError,
    ConfigLoader,
    DirectoryPair,
    find_config_file,
    get_directory_pairs,
    load_config,
)
from pgscript.graph.errors import ConversionError
from pgscript.graph.factory import ConversionOptions, convert_graph, load_graph_file
from pgscript.graph.serialize import to_json


@dataclass
class ConvertSummary:
    """Counts collected over one convert run."""

    converted: list[Path] = field(default_factory=list)
    failed: list[Path] = field(default_factory=list)
    dangling: int = 0

    @property
    def ok(self) -> bool:
        return not self.failed


def run(args: argparse.Namespace) -> int:
    """
    Run the convert command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, 1 if any file failed)
    """
    config = load_configuration(args)
    if config is None:
        return 1

    options = ConversionOptions.from_dict(config.get("parser", {}))
    if getattr(args, "strict", False):
        options.strict = True

    summary = ConvertSummary()
    for pair in get_directory_pairs(config):
        process_directory(pair, options, summary, args)

    if not args.quiet:
        if summary.ok:
            print("✅ All files processed")
        else:
            print(f"✓ {len(summary.converted)} converted, ❌ {len(summary.failed)} failed")
    return 0 if summary.ok else 1


def load_configuration(args: argparse.Namespace) -> ConfigLoader | None:
    """Load the options file given on the command line or found nearby."""
    if args.options:
        config_path = args.options
    else:
        config_path = find_config_file(Path.cwd())
        if config_path is None:
            print("Error: No options file found (pgscript.toml or options.json)", file=sys.stderr)
            return None

    try:
        return load_config(Path(config_path))
    except ConfigError as e:
        print(f"❌ Failed to read options: {e}", file=sys.stderr)
        return None


def list_graph_files(directory: Path) -> list[Path]:
    """Return the ``*.json`` files of a directory (case-insensitive suffix), sorted."""
    return sorted(
        p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == ".json"
    )


def process_directory(
    pair: DirectoryPair,
    options: ConversionOptions,
    summary: ConvertSummary,
    args: argparse.Namespace,
) -> None:
    """Convert every graph file of one input directory."""
    try:
        pair.output.mkdir(parents=True, exist_ok=True)
        graph_files = list_graph_files(pair.input)
    except OSError as e:
        print(f"❌ Failed to process directory {pair.input}:", file=sys.stderr)
        print(e, file=sys.stderr)
        summary.failed.append(pair.input)
        return

    for graph_file in graph_files:
        process_file(graph_file, pair.output / graph_file.name, options, summary, args)

    if not args.quiet:
        print(f"📁 Directory {pair.input.name} done")


def process_file(
    input_path: Path,
    output_path: Path,
    options: ConversionOptions,
    summary: ConvertSummary,
    args: argparse.Namespace,
) -> None:
    """Convert one graph file; failures are reported, never raised."""
    try:
        result = convert_graph(load_graph_file(input_path), options)
        output_path.write_text(to_json(result.document), encoding="utf-8")
    except (ConversionError, OSError) as e:
        print(f"❌ Failed to process file {input_path}:", file=sys.stderr)
        print(e, file=sys.stderr)
        summary.failed.append(input_path)
        return

    summary.converted.append(input_path)
    summary.dangling += len(result.dangling)
    if not args.quiet:
        print(f"🔄 File {input_path.name} done")
    if args.verbose:
        for ref in result.dangling:
            print(f"⚠️  {input_path.name}: dangling child {ref}")
