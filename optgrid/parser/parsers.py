# Optgrid Option Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the argparse parsers for the `optgrid` command-line front end.

Key Components:
- `OptgridParsers`: Container for the root parser and its subcommand parsers.
- `get_arg_parsers()`: Factory for generating the full parser suite.
- `get_root_parser()`: Creates the root-level parser with global options.
- `get_subparsers()`: Helper to attach subcommand parsers to the root parser.
"""

from argparse import REMAINDER, ArgumentParser, Namespace, _SubParsersAction
from dataclasses import dataclass
from typing import Sequence


@dataclass
class OptgridParsers:
    """Defines the argument parsers for the optgrid CLI."""

    root: ArgumentParser
    subparsers: _SubParsersAction
    help: ArgumentParser
    classify: ArgumentParser
    shell: ArgumentParser
    init: ArgumentParser
    version: ArgumentParser

    def parse_args(self, args: Sequence[str] | None = None) -> Namespace:
        """Parse the command line arguments."""
        return self.root.parse_args(args)


def get_root_parser(
    prog: str | None = "optgrid",
    description: str | None = "optgrid - Validate option tables, classify arguments "
    "and render help.",
    epilog: str | None = "Tip: Use 'optgrid init' to write a sample option table.",
) -> ArgumentParser:
    """
    Construct the root-level ArgumentParser for the optgrid CLI.

    Notes:
        ```
        Includes the following arguments:
            -v / --verbose       : Enable debug logging.
            --table PATH         : Option table file (YAML or TOML).
            --width N            : Display width for help output.
            --log-mode MODE      : Console log format, 'cli' or 'json'.
        ```
    """
    parser = ArgumentParser(prog=prog, description=description, epilog=epilog)
    parser.add_argument(
        "-v", "--verbose", action="store_true", help=f"Enable debug logging for {prog}."
    )
    parser.add_argument(
        "--table",
        metavar="PATH",
        default=None,
        help="Option table file (YAML or TOML). Searched for when omitted.",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Display width for help output (default: terminal width).",
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        default=None,
        help="Console log format (default: $OPTGRID_LOG_MODE or auto-detected).",
    )
    return parser


def get_subparsers(
    parser: ArgumentParser,
    title: str = "optgrid commands",
    description: str | None = "Available commands for the optgrid CLI.",
) -> _SubParsersAction:
    """
    Create and return a subparsers object for registering optgrid subcommands.

    Raises:
        TypeError: If `parser` is not an instance of `ArgumentParser`.
    """
    if not isinstance(parser, ArgumentParser):
        raise TypeError("parser must be an instance of ArgumentParser")
    return parser.add_subparsers(title=title, description=description, dest="command")


def get_arg_parsers(prog: str | None = "optgrid") -> OptgridParsers:
    """
    Create and return the full suite of argument parsers used by the optgrid CLI.

    Subcommands: `help`, `classify`, `shell`, `init` and `version`.
    """
    parser = get_root_parser(prog=prog)
    subparsers = get_subparsers(parser)

    help_parser = subparsers.add_parser(
        "help",
        help="Show help for the option table",
        description="Render the grouped help listing, or the help of one option.",
    )
    help_parser.add_argument(
        "option",
        nargs="?",
        default=None,
        metavar="OPTION",
        help="Short character, long name or keyword of a single option",
    )

    classify_parser = subparsers.add_parser(
        "classify",
        help="Classify arguments against the option table",
        description="Sort ARGS into value flags, boolean flags and positionals.",
        add_help=False,
    )
    classify_parser.add_argument(
        "args",
        nargs=REMAINDER,
        metavar="ARGS",
        help="Arguments to classify, as the declaring program would receive them",
    )

    shell_parser = subparsers.add_parser(
        "shell",
        help="Classify arguments interactively, with completion",
    )

    init_parser = subparsers.add_parser(
        "init",
        help="Write a sample option table",
        description="Create optgrid.yaml with a sample option table.",
        epilog="If no directory is provided, the current directory will be used.",
    )
    init_parser.add_argument(
        "name",
        type=str,
        help="Directory to create the option table in",
        default=".",
        nargs="?",
    )

    version_parser = subparsers.add_parser("version", help=f"Show {prog} version")

    return OptgridParsers(
        root=parser,
        subparsers=subparsers,
        help=help_parser,
        classify=classify_parser,
        shell=shell_parser,
        init=init_parser,
        version=version_parser,
    )
