# Optgrid Option Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loader for option tables declared in YAML or TOML files.

File shape is checked with pydantic models; the option semantics (identifiers,
arity and hints, duplicates) are left to `build_registry()`, which reports the
table index of the first problem.

Example (optgrid.yaml):
    version: "1.0.0"
    options:
      - short: v
        long: verbose
        description: Prints verbose messages
      - long: add
        arity: 2
        hints: ["<money>", "<item>"]
        description: Adds a record
        group: Records
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from optgrid.exceptions import ConfigError
from optgrid.logger import logger
from optgrid.parser.descriptor import OptionDescriptor
from optgrid.parser.option_kind import VARIADIC, OptionKind
from optgrid.parser.registry import Registry, build_registry


def find_table() -> Path | None:
    """Return the first option table found in the usual places, if any."""
    candidates = [
        Path.cwd() / "optgrid.yaml",
        Path.cwd() / "optgrid.toml",
        Path.cwd() / ".optgrid.yaml",
        Path.cwd() / ".optgrid.toml",
        Path(os.environ.get("OPTGRID_TABLE", "optgrid.yaml")),
        Path.home() / ".config" / "optgrid" / "optgrid.yaml",
        Path.home() / ".config" / "optgrid" / "optgrid.toml",
    ]
    return next((path for path in candidates if path.is_file()), None)


class RawOption(BaseModel):
    """Raw option model for an optgrid table file."""

    short: str = ""
    long: str = ""
    keyword: str = ""
    arity: int | str = 0
    hints: list[str] = Field(default_factory=list)
    description: str
    group: str = ""

    @field_validator("short", "long", "keyword", mode="before")
    @classmethod
    def normalize_identifier(cls, value: Any) -> str:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        if value is None:
            return ""
        return value

    @field_validator("arity", mode="before")
    @classmethod
    def normalize_arity(cls, value: Any) -> int | str:
        if isinstance(value, bool):
            raise ValueError("arity must be an integer or 'variadic'")
        if isinstance(value, str):
            stripped = value.strip()
            if stripped.isdigit():
                return int(stripped)
            try:
                kind = OptionKind(stripped)
            except ValueError:
                raise ValueError(
                    f"arity must be an integer or 'variadic', not {value!r}"
                ) from None
            if kind is OptionKind.VARIADIC:
                return VARIADIC
            if kind is OptionKind.BOOLEAN:
                return 0
            raise ValueError("a fixed arity must be given as an integer")
        return value

    @field_validator("hints", mode="before")
    @classmethod
    def validate_hints(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    def to_descriptor(self) -> OptionDescriptor:
        return OptionDescriptor(
            short=self.short,
            long=self.long,
            keyword=self.keyword,
            arity=self.arity,
            hints=tuple(self.hints),
            description=self.description,
            group=self.group,
        )


class OptionTable(BaseModel):
    """A whole option table file."""

    version: str
    options: list[RawOption]

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, value: Any) -> str:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def to_descriptors(self) -> list[OptionDescriptor]:
        return [option.to_descriptor() for option in self.options]

    def to_registry(self) -> Registry:
        return build_registry(self.to_descriptors(), self.version)


def load_table(file_path: Path | str) -> OptionTable:
    """
    Load an option table from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the table file.

    Returns:
        OptionTable: The parsed table, not yet validated by the registry.

    Raises:
        ConfigError: If the file is missing, unsupported, unreadable or malformed.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise ConfigError(f"No such option table: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as table_file:
            if suffix in (".yaml", ".yml"):
                raw_table = yaml.safe_load(table_file)
            elif suffix == ".toml":
                raw_table = toml.load(table_file)
            else:
                raise ConfigError(f"Unsupported option table format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_table, dict):
        raise ConfigError(
            "Option table file must contain a mapping with a version and options.\n"
            "Example:\n"
            "version: '1.0.0'\n"
            "options:\n"
            "  - short: 'v'\n"
            "    long: 'verbose'\n"
            "    description: 'Prints verbose messages'"
        )

    try:
        table = OptionTable.model_validate(raw_table)
    except ValidationError as error:
        raise ConfigError(f"Invalid option table {path}:\n{error}") from error

    logger.debug("Loaded %d option(s) from %s", len(table.options), path)
    return table
