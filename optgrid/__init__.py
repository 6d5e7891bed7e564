"""
Optgrid Option Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ConfigError,
    DeclarationError,
    DuplicateIdentifierError,
    InvalidArgumentError,
    InvalidDescriptorError,
    LifecycleError,
    OptgridError,
    UnknownFlagError,
    UsageError,
)
from .layout import join, wrap
from .parser import (
    OPTION_END,
    VARIADIC,
    Classification,
    OptionDescriptor,
    OptionEngine,
    Registry,
    build_registry,
    classify,
    print_help,
    render_all,
    render_one,
)
from .version import __version__

logger = logging.getLogger("optgrid")


__all__ = [
    "OptionDescriptor",
    "OptionEngine",
    "OPTION_END",
    "VARIADIC",
    "Registry",
    "Classification",
    "build_registry",
    "classify",
    "render_all",
    "render_one",
    "print_help",
    "wrap",
    "join",
    "OptgridError",
    "DeclarationError",
    "InvalidDescriptorError",
    "DuplicateIdentifierError",
    "UsageError",
    "UnknownFlagError",
    "InvalidArgumentError",
    "LifecycleError",
    "ConfigError",
    "__version__",
]
