"""Main CLI entry point for lugat."""

import argparse
import sys

from lugat import __version__
from lugat.cli.commands import import_data, lookup, render
from lugat.utils import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="lugat",
        description="Bilingual dictionary lookup",
        epilog="Use 'lugat <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--db", help="Path to the SQLite dictionary database")
    parser.add_argument(
        "--api-url",
        help="GraphQL endpoint of the hosted dictionary API (selects the remote store)",
    )
    parser.add_argument("--api-key", help="API key for the hosted dictionary API")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # lugat lookup <word>
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Look up a word",
        description="List headwords starting with WORD and show the articles for WORD itself",
    )
    lookup_parser.add_argument("word", help="Word or prefix to look up")

    # lugat render <text>
    render_parser = subparsers.add_parser(
        "render",
        help="Render raw article text",
        description="Run annotated article text through the renderer and print the markup",
    )
    render_parser.add_argument("text", help="Raw article text")
    render_parser.add_argument("--headword", default="", help="Headword substituted for '~'")
    render_parser.add_argument(
        "--shortening-pos",
        type=int,
        default=None,
        help="Number of headword characters substituted for '~'",
    )
    render_parser.add_argument("--dict", dest="dict_id", default="", help="Dictionary id")
    render_parser.add_argument(
        "--plain", action="store_true", help="Print plain text instead of markup"
    )

    # lugat import <file>
    import_parser = subparsers.add_parser(
        "import",
        help="Import a JSON export into the local database",
        description="Load translations and articles from a JSON export into the SQLite index",
    )
    import_parser.add_argument("file", help="Path to the JSON export")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else "WARNING")

    if args.command == "lookup":
        return lookup.lookup_command(args)
    elif args.command == "render":
        return render.render_command(args)
    elif args.command == "import":
        return import_data.import_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
