# Optgrid Option Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by the Optgrid option engine.

Declaration problems are raised while an option table is validated, usage
problems while an argument vector is classified. Each exception carries enough
context (table index, field, offending token) to localize the problem without
re-running anything.

All exceptions inherit from `OptgridError`, the base exception for the package.

Exception Hierarchy:
- OptgridError
    ├── DeclarationError
    │     ├── InvalidDescriptorError
    │     └── DuplicateIdentifierError
    ├── UsageError
    │     ├── UnknownFlagError
    │     ├── InvalidArgumentError
    │     └── LifecycleError
    └── ConfigError

A help lookup for an unknown option is not an error: the help renderer returns
`None` for it instead.
"""


class OptgridError(Exception):
    """Base exception for the Optgrid option engine."""


class DeclarationError(OptgridError):
    """Raised when an option table is malformed or ambiguous."""

    def __init__(
        self, message: str, index: int | None = None, field: str | None = None
    ) -> None:
        super().__init__(message)
        self.index = index
        self.field = field


class InvalidDescriptorError(DeclarationError):
    """Raised when a single option descriptor fails validation."""

    def __init__(self, index: int, field: str, reason: str) -> None:
        super().__init__(f"Option[{index}].{field} {reason}", index=index, field=field)
        self.reason = reason


class DuplicateIdentifierError(DeclarationError):
    """Raised when two descriptors share a short, long or keyword identifier."""

    def __init__(self, index: int, field: str, other_index: int, value: str) -> None:
        super().__init__(
            f"Option[{index}].{field} '{value}' is already used by Option[{other_index}]",
            index=index,
            field=field,
        )
        self.other_index = other_index
        self.value = value


class UsageError(OptgridError):
    """Raised when an argument vector cannot be classified."""


class UnknownFlagError(UsageError):
    """Raised when a flag does not match any declared option."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown flag '{token}'")
        self.token = token


class InvalidArgumentError(UsageError):
    """Raised for tokens that can never be valid, such as a bare '-' or '--'."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid argument '{token}'")
        self.token = token


class LifecycleError(UsageError):
    """Raised when a single-shot operation is repeated or called out of order."""


class ConfigError(OptgridError):
    """Raised when an option table file cannot be loaded."""
