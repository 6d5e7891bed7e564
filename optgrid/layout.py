# Optgrid Option Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Plain-text layout helpers used by the help renderer.

Functions:
- wrap: Split a string into decorated lines no wider than a given width.
- join: Merge two multi-line strings side by side into two columns.

Both functions only insert line breaks, decoration and padding; they never
reorder or rewrite the characters of their input.
"""
import re

OPEN_CHARS = "<'\"[{("

_LINE_PATTERN = re.compile(r"[^\n]*\n|[^\n]+$")


def is_delimiter(char: str) -> bool:
    """Return True if a line may be broken right after `char`."""
    if char.isascii() and char.isalnum():
        return False
    return char not in OPEN_CHARS


def _index_of_delimiter(text: str, begin: int, end: int) -> int:
    for index in range(end, begin, -1):
        if is_delimiter(text[index]):
            return index
    return -1


def _index_of_content(text: str, begin: int) -> int:
    for index in range(begin, len(text)):
        if text[index] != " ":
            return index
    return -1


def wrap(text: str, width: int, prefix: str | None = "", suffix: str | None = "") -> str:
    """
    Wrap `text` so that every line, decoration included, fits in `width` columns.

    Each line is broken after the last delimiter that fits (any character that
    is not alphanumeric and not an opening bracket or quote). When a line holds
    no delimiter it is hard-wrapped at exactly the available width. Spaces
    between two lines are dropped; everything else is kept.

    Args:
        text (str): The text to wrap.
        width (int): Maximum visible characters per line, excluding the newline.
        prefix (str | None): Decoration prepended to every line.
        suffix (str | None): Decoration appended to every line.

    Returns:
        str: The wrapped text, every line terminated by a newline.

    Raises:
        ValueError: If `width` leaves no room for text after the decoration.
    """
    prefix = prefix or ""
    suffix = suffix or ""
    usable = width - len(prefix) - len(suffix)
    if usable <= 0:
        raise ValueError(
            f"width {width} must be greater than the decoration length "
            f"{len(prefix) + len(suffix)}"
        )

    lines: list[str] = []
    begin = 0
    while len(text) - begin > usable:
        end = begin + usable - 1
        delimiter = _index_of_delimiter(text, begin, end)
        stop = end if delimiter == -1 else delimiter
        lines.append(f"{prefix}{text[begin:stop + 1]}{suffix}\n")
        begin = _index_of_content(text, stop + 1)
        if begin == -1:
            return "".join(lines)

    if begin < len(text):
        lines.append(f"{prefix}{text[begin:]}{suffix}\n")
    return "".join(lines)


def _split_lines(text: str) -> list[str]:
    return _LINE_PATTERN.findall(text)


def join(left: str, right: str, indent: int) -> str:
    """
    Join two multi-line strings column-wise.

    Every line of `right` is emitted after the matching line of `left`, padded
    with spaces to `indent` columns, or after `indent` blank columns once `left`
    runs out. Lines of `left` left over after `right` is exhausted are appended
    unchanged.

    Args:
        left (str): Text for the left column.
        right (str): Text for the right column.
        indent (int): Column at which the right column starts.

    Returns:
        str: The two-column text.
    """
    left_lines = _split_lines(left)
    right_lines = _split_lines(right)

    output: list[str] = []
    for position, right_line in enumerate(right_lines):
        if position < len(left_lines):
            output.append(left_lines[position].rstrip("\n").ljust(indent))
        else:
            output.append(" " * indent)
        output.append(right_line)

    output.extend(left_lines[len(right_lines) :])
    return "".join(output)
