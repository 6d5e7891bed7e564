# Optgrid Option Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Classifies a process argument vector against a validated option registry.

Every token after the program name is resolved to a declared option or kept
as a positional parameter:

- `--name` is matched against long names.
- `-abc` is a cluster of short flags, each character matched on its own.
- any other token is matched against keywords, or kept as a positional.

Matched options are recorded once each, in first-seen order, in either the
boolean or the value-taking set. Positionals are recorded as given, repeats
included. Values following a value-taking flag are not bound to it; they are
positionals like any other bare token.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from optgrid.exceptions import InvalidArgumentError, UnknownFlagError
from optgrid.logger import logger
from optgrid.parser.registry import Registry


@dataclass(frozen=True)
class Classification:
    """
    The result of classifying one argument vector.

    Attributes:
        value_flags (tuple[int, ...]): Indices of value-taking options encountered.
        bool_flags (tuple[int, ...]): Indices of boolean options encountered.
        positionals (tuple[str, ...]): Tokens not matched to any option.
    """

    value_flags: tuple[int, ...] = ()
    bool_flags: tuple[int, ...] = ()
    positionals: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        return not (self.value_flags or self.bool_flags or self.positionals)

    def has(self, index: int) -> bool:
        """Return True if the option at `index` was encountered."""
        return index in self.value_flags or index in self.bool_flags


class _Accumulator:
    """Growable result sets with idempotent flag membership."""

    def __init__(self, registry: Registry) -> None:
        self.registry = registry
        self.value_flags: dict[int, None] = {}
        self.bool_flags: dict[int, None] = {}
        self.positionals: list[str] = []

    def record(self, index: int, token: str) -> None:
        descriptor = self.registry[index]
        target = self.value_flags if descriptor.takes_value else self.bool_flags
        if index in target:
            logger.debug("Option[%d] repeated by '%s', already recorded", index, token)
            return
        target[index] = None
        logger.debug("Token '%s' resolved to Option[%d]", token, index)

    def freeze(self) -> Classification:
        return Classification(
            value_flags=tuple(self.value_flags),
            bool_flags=tuple(self.bool_flags),
            positionals=tuple(self.positionals),
        )


def _classify_long(registry: Registry, token: str, result: _Accumulator) -> None:
    index = registry.find_long(token[2:])
    if index is None:
        raise UnknownFlagError(token)
    result.record(index, token)


def _classify_cluster(registry: Registry, token: str, result: _Accumulator) -> None:
    for char in token[1:]:
        index = registry.find_short(char)
        if index is None:
            raise UnknownFlagError(f"-{char}")
        result.record(index, f"-{char}")


def classify(registry: Registry, argv: Sequence[str]) -> Classification:
    """
    Classify an argument vector.

    Args:
        registry (Registry): The validated option table.
        argv (Sequence[str]): The argument vector; `argv[0]` is the program name
            and is not classified.

    Returns:
        Classification: Value flags, boolean flags and positionals, in order.

    Raises:
        UnknownFlagError: If a long flag or a clustered short flag is not declared.
        InvalidArgumentError: If a token is a bare '-' or '--'.
    """
    result = _Accumulator(registry)
    for token in argv[1:]:
        if token in ("-", "--"):
            raise InvalidArgumentError(token)
        if token.startswith("--"):
            _classify_long(registry, token, result)
        elif token.startswith("-"):
            _classify_cluster(registry, token, result)
        else:
            index = registry.find_keyword(token)
            if index is None:
                result.positionals.append(token)
            else:
                result.record(index, token)

    classification = result.freeze()
    logger.debug(
        "Classified %d token(s): %d value flag(s), %d bool flag(s), %d positional(s)",
        max(len(argv) - 1, 0),
        len(classification.value_flags),
        len(classification.bool_flags),
        len(classification.positionals),
    )
    return classification
