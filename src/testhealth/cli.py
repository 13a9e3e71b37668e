"""
testhealth.cli - Command-line interface.

Main entry point for the testhealth CLI tool.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from testhealth import __version__
from testhealth.commands import config_cmd, orphans_cmd, summary, tree


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="testhealth",
        description="Hierarchical pass-rate aggregation for test results",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  testhealth tree results.json              # Sunburst tree as JSON
  testhealth tree results.json --annotate   # Include percentage, color, label
  testhealth summary results.json           # Labelled outline
  testhealth summary results.json --depth 2 # Teams and applications only
  testhealth orphans results.json --strict  # Fail if records would be dropped

Configuration:
  testhealth config path                    # Show config file location
  testhealth config show                    # View effective settings

For detailed command help: testhealth <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"testhealth {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output (show tracebacks on error)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # tree command
    tree_parser = subparsers.add_parser(
        "tree",
        help="Emit the sunburst tree as JSON",
    )
    tree_parser.add_argument(
        "snapshot",
        type=Path,
        help="JSON snapshot with teams, applications, testSuites, "
        "testExecutions, testCases, testResults",
    )
    tree_parser.add_argument(
        "--annotate",
        action="store_true",
        help="Add percentage, color and label to every node",
    )
    tree_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation (0 for compact; default from config)",
    )
    tree_parser.add_argument(
        "--root-name",
        help="Display name of the root node",
        metavar="NAME",
    )
    tree_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write JSON to file instead of stdout",
        metavar="FILE",
    )

    # summary command
    summary_parser = subparsers.add_parser(
        "summary",
        help="Print a labelled outline of pass rates",
    )
    summary_parser.add_argument("snapshot", type=Path, help="JSON snapshot file")
    summary_parser.add_argument(
        "--depth",
        type=int,
        default=None,
        help="Deepest level to show (0 for unlimited)",
    )

    # orphans command
    orphans_parser = subparsers.add_parser(
        "orphans",
        help="List records whose parent chain does not reach a team",
    )
    orphans_parser.add_argument("snapshot", type=Path, help="JSON snapshot file")
    orphans_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when orphans are found",
    )

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Inspect configuration",
    )
    config_subparsers = config_parser.add_subparsers(dest="config_action")
    config_show = config_subparsers.add_parser(
        "show",
        help="Show the effective configuration",
    )
    config_show.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    config_subparsers.add_parser(
        "path",
        help="Show the config file location",
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
    # Install with: pip install testhealth[completion]
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "tree":
            return tree.run(args)
        elif args.command == "summary":
            return summary.run(args)
        elif args.command == "orphans":
            return orphans_cmd.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
