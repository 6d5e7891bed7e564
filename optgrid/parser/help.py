# Optgrid Option Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders help text for a validated option registry.

Each option is laid out in two columns: its flag signature on the left and its
description on the right, both word-wrapped with `optgrid.layout`. The left
column is as wide as the longest signature of the whole table plus decoration,
capped at half the display width, so every group lines up the same way.

Functions:
- render_all: Help for every group, in first-seen order.
- render_one: Help for a single option, or None if it is not declared.
- print_help: Write either of the above through a rich console.
"""
from __future__ import annotations

import re

from rich.console import Console
from rich.text import Text

from optgrid.console import console as default_console
from optgrid.layout import join, wrap
from optgrid.parser.registry import OptionEntry, Registry

SIGNATURE_PREFIX = "  "
SIGNATURE_SUFFIX = "  "
SIGNATURE_PADDING = 6
MIN_WIDTH = 10

_HEADER_PATTERN = re.compile(r"^\S[^\n]*:$", re.MULTILINE)


def signature_column(registry: Registry, width: int) -> int:
    """Return the column at which descriptions start for `width`."""
    if width < MIN_WIDTH:
        raise ValueError(f"Display width must be at least {MIN_WIDTH}, got {width}")
    return min(width // 2, registry.indent + SIGNATURE_PADDING)


def format_entry(entry: OptionEntry, column: int, width: int) -> str:
    """Lay out one option as signature and description columns."""
    left = wrap(entry.signature, column, SIGNATURE_PREFIX, SIGNATURE_SUFFIX)
    right = wrap(entry.description, width - column)
    return join(left, right, column)


def render_all(registry: Registry, width: int) -> str:
    """
    Render help for every option, grouped by label.

    Args:
        registry (Registry): The validated option table.
        width (int): Display width in columns.

    Returns:
        str: Each group label followed by its options and a blank line.
    """
    column = signature_column(registry, width)
    blocks: list[str] = []
    for group in registry.groups:
        blocks.append(f"{group.label}:\n")
        for entry in group.entries:
            blocks.append(format_entry(entry, column, width))
        blocks.append("\n")
    return "".join(blocks)


def render_one(registry: Registry, identifier: str, width: int) -> str | None:
    """
    Render help for the option matching `identifier`.

    The identifier may be a short character, a long name or a keyword, with or
    without its leading dashes.

    Returns:
        str | None: The formatted option, or None if no option matches.
    """
    index = registry.find(identifier)
    if index is None:
        return None
    column = signature_column(registry, width)
    return format_entry(registry.entry_for(index), column, width)


def print_help(
    registry: Registry,
    width: int | None = None,
    identifier: str | None = None,
    console: Console | None = None,
) -> bool:
    """
    Print help through a rich console without re-wrapping it.

    Args:
        registry (Registry): The validated option table.
        width (int | None): Display width; defaults to the console width.
        identifier (str | None): Print only this option when given.
        console (Console | None): Target console; defaults to the package console.

    Returns:
        bool: False if `identifier` matched no option, True otherwise.
    """
    console = console or default_console
    width = width or console.width
    if identifier is None:
        rendered: str | None = render_all(registry, width)
    else:
        rendered = render_one(registry, identifier, width)
    if rendered is None:
        return False

    text = Text(rendered, end="")
    text.highlight_regex(_HEADER_PATTERN, "bold")
    console.print(text, soft_wrap=True)
    return True
