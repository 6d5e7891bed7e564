# Optgrid Option Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `OptionDescriptor` dataclass, the unit of an option table.

Each descriptor declares one option: how it is spelled on the command line
(short flag, long flag, bare keyword), how many values it expects, what those
values look like in help output, and which help group it belongs to.

Descriptors are plain immutable records. They are validated as a whole table
by `build_registry()`, which reports the index and field of the first problem.

Key Attributes:
- `short`: Single character used as `-x`
- `long`: Name used as `--name`
- `keyword`: Bare-word alias
- `arity`: `0`, a positive int, or `VARIADIC`
- `hints`: Placeholder text per expected value
- `description`: Help text
- `group`: Help group label (defaults to "Options")
"""
from dataclasses import dataclass, field

from optgrid.parser.option_kind import VARIADIC, OptionKind

DEFAULT_GROUP = "Options"
MAX_NAME_LENGTH = 19


@dataclass(frozen=True)
class OptionDescriptor:
    """
    Represents a declared command-line option.

    Attributes:
        short (str): Single alphanumeric character for `-x`, or "".
        long (str): Alphanumeric name for `--name`, or "".
        keyword (str): Alphanumeric bare-word alias, or "".
        arity (int | str): 0 for boolean options, `N` for exactly `N` values,
            or `VARIADIC` for one or more values.
        hints (tuple[str, ...]): One placeholder per expected value; a single
            placeholder for variadic options. A plain string is accepted.
        description (str): Help text for the option.
        group (str): Help group label; empty means `DEFAULT_GROUP`.
    """

    short: str = ""
    long: str = ""
    keyword: str = ""
    arity: int | str = 0
    hints: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""
    group: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.hints, str):
            object.__setattr__(self, "hints", (self.hints,))
        elif self.hints is None:
            object.__setattr__(self, "hints", ())
        elif isinstance(self.hints, list):
            object.__setattr__(self, "hints", tuple(self.hints))

    @property
    def kind(self) -> OptionKind:
        return OptionKind.of(self.arity)

    @property
    def takes_value(self) -> bool:
        return self.kind.takes_value

    @property
    def group_label(self) -> str:
        return self.group or DEFAULT_GROUP

    @property
    def identifiers(self) -> tuple[str, ...]:
        """Return the flag forms of this option, in short, long, keyword order."""
        identifiers = []
        if self.short:
            identifiers.append(f"-{self.short}")
        if self.long:
            identifiers.append(f"--{self.long}")
        if self.keyword:
            identifiers.append(self.keyword)
        return tuple(identifiers)

    def is_end(self) -> bool:
        """Return True if this is the all-empty end-of-table sentinel."""
        return (
            not self.short
            and not self.long
            and not self.keyword
            and self.arity == 0
            and not self.hints
            and not self.description
            and not self.group
        )

    def get_hint_text(self) -> str:
        """Get the value placeholder text for the option."""
        if not self.hints:
            return ""
        if self.arity == VARIADIC:
            hint = self.hints[0]
            return f"{hint} [{hint} ...]"
        return " ".join(self.hints)

    def get_signature_text(self) -> str:
        """Get the flag signature shown in the left help column."""
        signature = ", ".join(self.identifiers)
        hint_text = self.get_hint_text()
        if hint_text:
            return f"{signature} {hint_text}"
        return signature


OPTION_END = OptionDescriptor()
