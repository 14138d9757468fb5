"""
pgscript.cli - Command-line interface.

Main entry point for the pgscript CLI tool.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pgscript import __version__
from pgscript.commands import check, convert, kinds


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pgscript",
        description="Convert project graph documents into dialogue scripts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pgscript convert options.json     # Convert every directory listed in options.json
  pgscript convert                  # Use pgscript.toml / options.json found upward
  pgscript convert --strict         # Also reject children pointing at missing nodes
  pgscript check graph.json         # Convert in memory and print a summary
  pgscript check graph.json -j      # Print the converted script as JSON
  pgscript kinds                    # List label keywords

Options file (options.json):
  {"input": ["chapter1", "chapter2"], "output": "dist"}

Options file (pgscript.toml):
  input = ["chapter1", "chapter2"]
  output = "dist"

  [parser]
  strict = true

For detailed command help: pgscript <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"pgscript {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # convert command
    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert all graphs listed in an options file",
    )
    convert_parser.add_argument(
        "options",
        nargs="?",
        type=Path,
        help="Path to options.json or pgscript.toml (default: search upward)",
        metavar="OPTIONS_PATH",
    )
    convert_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when an association targets a node that was not converted",
    )

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="Convert graph files without writing output",
    )
    check_parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Graph JSON files",
        metavar="FILE",
    )
    check_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when an association targets a node that was not converted",
    )
    check_parser.add_argument(
        "--options",
        type=Path,
        help="Options file to read [parser] settings from (default: search upward)",
        metavar="OPTIONS_PATH",
    )
    check_parser.add_argument(
        "--entity-type",
        help="Editor entity type of text nodes (default: core:text_node)",
        metavar="TYPE",
    )
    check_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Print converted scripts as JSON",
    )

    # kinds command
    subparsers.add_parser(
        "kinds",
        help="List label keywords and node kinds",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install pgscript[completion]
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    # Handle no command
    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "convert":
            return convert.run(args)
        elif args.command == "check":
            return check.run(args)
        elif args.command == "kinds":
            return kinds.run(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
