# Optgrid Option Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements the option registry: the validated, grouped form of an
option table that the classifier and the help renderer work from.

`build_registry()` checks every descriptor, rejects duplicate identifiers and
partitions the table into help groups. The result is an immutable `Registry`
value that can be shared freely and used any number of times.

Validation is fail-fast: the first problem found raises a `DeclarationError`
naming the table index and the field at fault.

Example Usage:
    registry = build_registry(
        [
            OptionDescriptor(short="v", long="verbose", description="Be chatty"),
            OptionDescriptor(long="add", arity=1, hints="<item>", description="Add"),
        ],
        version="1.0.0",
    )
    registry.find("--verbose")  # 0
"""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Sequence

from optgrid.exceptions import (
    DeclarationError,
    DuplicateIdentifierError,
    InvalidDescriptorError,
)
from optgrid.logger import logger
from optgrid.parser.descriptor import MAX_NAME_LENGTH, OptionDescriptor
from optgrid.parser.option_kind import VARIADIC, OptionKind

IDENTIFIER_FIELDS = ("short", "long", "keyword")


@dataclass(frozen=True)
class OptionEntry:
    """Precomputed help text for one option of a group."""

    index: int
    signature: str
    description: str


@dataclass(frozen=True)
class OptionGroup:
    """Options sharing a group label, in table order."""

    label: str
    entries: tuple[OptionEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class Registry:
    """
    A validated option table.

    Attributes:
        descriptors (tuple[OptionDescriptor, ...]): The declared options, sentinel removed.
        version (str): Version string of the declaring program.
        groups (tuple[OptionGroup, ...]): Help groups in first-seen order.
        indent (int): Length of the longest flag signature across all options.
    """

    descriptors: tuple[OptionDescriptor, ...]
    version: str
    groups: tuple[OptionGroup, ...]
    indent: int
    _shorts: dict[str, int] = field(repr=False, compare=False)
    _longs: dict[str, int] = field(repr=False, compare=False)
    _keywords: dict[str, int] = field(repr=False, compare=False)

    @property
    def size(self) -> int:
        return len(self.descriptors)

    def __len__(self) -> int:
        return len(self.descriptors)

    def __getitem__(self, index: int) -> OptionDescriptor:
        return self.descriptors[index]

    def find_short(self, char: str) -> int | None:
        return self._shorts.get(char) if char else None

    def find_long(self, name: str) -> int | None:
        return self._longs.get(name) if name else None

    def find_keyword(self, word: str) -> int | None:
        return self._keywords.get(word) if word else None

    def find(self, identifier: str) -> int | None:
        """
        Find an option by any of its identifiers.

        Accepts `-x`, `--name`, or a bare short character, long name or keyword,
        tried in that order.

        Returns:
            int | None: The descriptor index, or None if nothing matches.
        """
        if identifier.startswith("--"):
            return self.find_long(identifier[2:])
        if identifier.startswith("-") and len(identifier) == 2:
            return self.find_short(identifier[1])
        if len(identifier) == 1:
            index = self.find_short(identifier)
            if index is not None:
                return index
        index = self.find_long(identifier)
        if index is not None:
            return index
        return self.find_keyword(identifier)

    def entry_for(self, index: int) -> OptionEntry:
        """Return the precomputed help entry of the option at `index`."""
        for group in self.groups:
            for entry in group.entries:
                if entry.index == index:
                    return entry
        raise IndexError(f"No option at index {index}")


def _has_text(value: object) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _is_alnum(value: str) -> bool:
    return value.isascii() and value.isalnum()


def table_size(descriptors: Sequence[OptionDescriptor]) -> int:
    """Return the number of options before the first end sentinel, if any."""
    for index, descriptor in enumerate(descriptors):
        if isinstance(descriptor, OptionDescriptor) and descriptor.is_end():
            return index
    return len(descriptors)


def _validate_name(index: int, field_name: str, value: object) -> None:
    if not isinstance(value, str):
        raise InvalidDescriptorError(index, field_name, "must be a string")
    if not value:
        return
    if not _is_alnum(value):
        raise InvalidDescriptorError(index, field_name, "must be alphanumeric")
    if len(value) > MAX_NAME_LENGTH:
        raise InvalidDescriptorError(
            index, field_name, f"must be shorter than {MAX_NAME_LENGTH + 1} chars"
        )


def _validate_hints(index: int, descriptor: OptionDescriptor) -> None:
    hints = descriptor.hints
    if not isinstance(hints, tuple):
        raise InvalidDescriptorError(
            index, "hints", "must be a string, list or tuple of strings"
        )
    kind = descriptor.kind
    if kind is OptionKind.BOOLEAN:
        if hints:
            raise InvalidDescriptorError(
                index, "hints", f"expected no hint but received {len(hints)}"
            )
        return

    expected = 1 if kind is OptionKind.VARIADIC else descriptor.arity
    if len(hints) != expected:
        suffix = " for variable length" if kind is OptionKind.VARIADIC else ""
        raise InvalidDescriptorError(
            index,
            "hints",
            f"expected {expected} hint(s) but received {len(hints)}{suffix}",
        )
    for position, hint in enumerate(hints):
        if not _has_text(hint):
            raise InvalidDescriptorError(
                index, f"hints[{position}]", "should contain valid help text"
            )


def validate_descriptor(index: int, descriptor: OptionDescriptor) -> None:
    """
    Validate a single descriptor.

    Raises:
        InvalidDescriptorError: On the first field found at fault.
    """
    if not isinstance(descriptor, OptionDescriptor):
        raise InvalidDescriptorError(
            index,
            "descriptor",
            f"must be an OptionDescriptor, not {type(descriptor).__name__}",
        )

    short = descriptor.short
    if not isinstance(short, str):
        raise InvalidDescriptorError(index, "short", "must be a string")
    if short and (len(short) != 1 or not _is_alnum(short)):
        raise InvalidDescriptorError(
            index, "short", "must be a single alphanumeric character"
        )
    _validate_name(index, "long", descriptor.long)
    _validate_name(index, "keyword", descriptor.keyword)

    if not (short or descriptor.long or descriptor.keyword):
        raise InvalidDescriptorError(
            index, "identifier", "must have at least one identifier"
        )

    try:
        OptionKind.of(descriptor.arity)
    except ValueError:
        raise InvalidDescriptorError(
            index,
            "arity",
            f"should be a non-negative integer or '{VARIADIC}' "
            f"(not {descriptor.arity!r})",
        ) from None

    _validate_hints(index, descriptor)

    if not _has_text(descriptor.description):
        raise InvalidDescriptorError(index, "description", "should contain valid text")

    if not isinstance(descriptor.group, str):
        raise InvalidDescriptorError(index, "group", "must be a string")


def check_duplicates(descriptors: Sequence[OptionDescriptor]) -> None:
    """
    Reject any identifier declared by more than one option.

    Raises:
        DuplicateIdentifierError: For the first option reusing an earlier identifier.
    """
    seen: dict[str, dict[str, int]] = {name: {} for name in IDENTIFIER_FIELDS}
    for index, descriptor in enumerate(descriptors):
        for field_name in IDENTIFIER_FIELDS:
            value = getattr(descriptor, field_name)
            if not value:
                continue
            if value in seen[field_name]:
                raise DuplicateIdentifierError(
                    index, field_name, seen[field_name][value], value
                )
        for field_name in IDENTIFIER_FIELDS:
            value = getattr(descriptor, field_name)
            if value:
                seen[field_name][value] = index


def build_groups(descriptors: Sequence[OptionDescriptor]) -> tuple[OptionGroup, ...]:
    """Partition options by group label, ordered by each label's first appearance."""
    grouped: dict[str, list[OptionEntry]] = defaultdict(list)
    for index, descriptor in enumerate(descriptors):
        grouped[descriptor.group_label].append(
            OptionEntry(
                index=index,
                signature=descriptor.get_signature_text(),
                description=descriptor.description,
            )
        )
    return tuple(
        OptionGroup(label=label, entries=tuple(entries))
        for label, entries in grouped.items()
    )


def build_registry(
    descriptors: Sequence[OptionDescriptor] | None, version: str
) -> Registry:
    """
    Validate an option table and build its registry.

    Args:
        descriptors (Sequence[OptionDescriptor] | None): The option table. It ends
            at its last element or at the first `OPTION_END` sentinel.
        version (str): Version string of the declaring program.

    Returns:
        Registry: The validated, grouped table.

    Raises:
        DeclarationError: If the table or version is missing or any option is
            malformed or ambiguous.
    """
    if descriptors is None:
        raise DeclarationError("Option table must not be None")
    if not _has_text(version):
        raise DeclarationError("Version must be a non-empty string")

    size = table_size(descriptors)
    if size == 0:
        raise DeclarationError("Option table must declare at least one option")
    table = tuple(descriptors[:size])

    for index, descriptor in enumerate(table):
        validate_descriptor(index, descriptor)
    check_duplicates(table)

    groups = build_groups(table)
    indent = max(len(entry.signature) for group in groups for entry in group.entries)

    registry = Registry(
        descriptors=table,
        version=version,
        groups=groups,
        indent=indent,
        _shorts={d.short: i for i, d in enumerate(table) if d.short},
        _longs={d.long: i for i, d in enumerate(table) if d.long},
        _keywords={d.keyword: i for i, d in enumerate(table) if d.keyword},
    )
    logger.debug(
        "Registry built: %d option(s) in %d group(s), indent=%d",
        registry.size,
        len(groups),
        indent,
    )
    return registry
