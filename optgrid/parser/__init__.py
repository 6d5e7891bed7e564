"""
Optgrid Option Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .classifier import Classification, classify
from .descriptor import DEFAULT_GROUP, OPTION_END, OptionDescriptor
from .engine import OptionEngine
from .help import print_help, render_all, render_one
from .option_kind import VARIADIC, OptionKind
from .parsers import OptgridParsers, get_arg_parsers, get_root_parser, get_subparsers
from .registry import OptionEntry, OptionGroup, Registry, build_registry

__all__ = [
    "Classification",
    "classify",
    "DEFAULT_GROUP",
    "OPTION_END",
    "OptionDescriptor",
    "OptionEngine",
    "print_help",
    "render_all",
    "render_one",
    "VARIADIC",
    "OptionKind",
    "OptgridParsers",
    "get_arg_parsers",
    "get_root_parser",
    "get_subparsers",
    "OptionEntry",
    "OptionGroup",
    "Registry",
    "build_registry",
]
