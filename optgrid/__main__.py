"""
Optgrid Option Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import shlex
import sys
from pathlib import Path
from typing import Sequence

from prompt_toolkit import PromptSession
from rich.markup import escape
from rich.table import Table

from optgrid.completer import OptionCompleter
from optgrid.config import find_table, load_table
from optgrid.console import console, err_console
from optgrid.exceptions import OptgridError, UsageError
from optgrid.logger import logger
from optgrid.parser import Classification, Registry, classify, get_arg_parsers
from optgrid.parser.help import print_help
from optgrid.utils import setup_logging
from optgrid.version import __version__


def report_error(error: Exception) -> None:
    err_console.print(f"[bold red]error:[/] {escape(str(error))}")


def render_classification(registry: Registry, classification: Classification) -> None:
    table = Table(title="Classification", show_lines=False)
    table.add_column("Kind", style="bold")
    table.add_column("Index", justify="right")
    table.add_column("Value")
    for index in classification.value_flags:
        signature = registry.entry_for(index).signature
        table.add_row("value", str(index), escape(signature))
    for index in classification.bool_flags:
        signature = registry.entry_for(index).signature
        table.add_row("bool", str(index), escape(signature))
    for token in classification.positionals:
        table.add_row("positional", "", escape(token))
    console.print(table)
    console.print(
        f"value: {len(classification.value_flags)} "
        f"bool: {len(classification.bool_flags)} "
        f"positional: {len(classification.positionals)}"
    )


def run_shell(registry: Registry, program: str) -> None:
    session: PromptSession = PromptSession(completer=OptionCompleter(registry))
    while True:
        try:
            line = session.prompt(f"{program} > ")
        except (EOFError, KeyboardInterrupt):
            break
        if not line.strip():
            continue
        try:
            tokens = shlex.split(line)
            render_classification(registry, classify(registry, [program, *tokens]))
        except (ValueError, UsageError) as error:
            report_error(error)


def resolve_table(table: str | None) -> Path | None:
    if table:
        return Path(table)
    return find_table()


def main(argv: Sequence[str] | None = None) -> int:
    parsers = get_arg_parsers()
    args, extras = parsers.root.parse_known_args(argv)
    if extras and args.command != "classify":
        parsers.root.error(f"unrecognized arguments: {' '.join(extras)}")

    setup_logging(
        mode=args.log_mode,
        log_filename=None,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    if args.command == "version":
        console.print(f"optgrid version {__version__}")
        return 0

    if args.command == "init":
        from optgrid.init import init_project

        init_project(args.name)
        return 0

    table_path = resolve_table(args.table)
    if table_path is None:
        err_console.print(
            "[bold red]error:[/] No option table found. "
            "Use --table PATH or run 'optgrid init' to create one."
        )
        return 1

    try:
        registry = load_table(table_path).to_registry()
        program = parsers.root.prog
        if args.command == "classify":
            tokens = [*extras, *args.args]
            render_classification(registry, classify(registry, [program, *tokens]))
        elif args.command == "shell":
            run_shell(registry, program)
        else:
            option = getattr(args, "option", None)
            if not print_help(registry, width=args.width, identifier=option):
                err_console.print(f"[bold red]error:[/] Unknown option '{escape(option)}'")
                return 1
    except (OptgridError, ValueError) as error:
        logger.debug("Failed with %s", type(error).__name__)
        report_error(error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
