# Optgrid Option Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionKind`, an enum describing how many values an option expects.

Every declared option is one of three kinds, derived from its arity:
boolean options take no value, fixed options take exactly `N` values and
variadic options take one or more values collected as a single parameter.

Supports alias coercion for config-friendly values.

Exports:
    - VARIADIC: The arity marker for variadic options.
    - OptionKind: Enum of option kinds.

Example:
    OptionKind("flag")     → OptionKind.BOOLEAN
    OptionKind("+")        → OptionKind.VARIADIC
    OptionKind.of(2)       → OptionKind.FIXED
"""
from __future__ import annotations

from enum import Enum

VARIADIC = "+"


class OptionKind(Enum):
    """
    Defines the kind of an option, as derived from its arity.

    Members:
        BOOLEAN: Takes no value, its presence is the signal (arity 0).
        FIXED: Takes exactly `N` values (positive integer arity).
        VARIADIC: Takes one or more values (arity `VARIADIC`).

    Aliases:
        - "bool", "flag" → "boolean"
        - "+", "many" → "variadic"
    """

    BOOLEAN = "boolean"
    FIXED = "fixed"
    VARIADIC = "variadic"

    @classmethod
    def choices(cls) -> list[OptionKind]:
        """Return a list of all option kinds."""
        return list(cls)

    @classmethod
    def of(cls, arity: int | str) -> OptionKind:
        """
        Return the kind matching an arity value.

        Raises:
            ValueError: If `arity` is neither a non-negative int nor `VARIADIC`.
        """
        if arity == VARIADIC:
            return cls.VARIADIC
        if isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
            raise ValueError(
                f"Invalid arity {arity!r}: must be a non-negative integer or '{VARIADIC}'"
            )
        return cls.BOOLEAN if arity == 0 else cls.FIXED

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "bool": "boolean",
            "flag": "boolean",
            VARIADIC: "variadic",
            "many": "variadic",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def takes_value(self) -> bool:
        return self is not OptionKind.BOOLEAN

    def __str__(self) -> str:
        """Return the string representation of the option kind."""
        return self.value
