# Optgrid Option Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionEngine`, the single-shot lifecycle around registry and classifier.

A process declares its options once and classifies its arguments once. The
engine enforces that order on an owned instance rather than on module state:

    engine = OptionEngine()
    engine.setup(OPTIONS, version="1.2.0")
    engine.classify()                # sys.argv by default
    if engine.has("--verbose"):
        ...
    print(engine.render_all(80))
    engine.teardown()

Calling `setup` or `classify` twice, classifying before setup, or using the
engine after `teardown` raises `LifecycleError`.
"""
from __future__ import annotations

import sys
from typing import Sequence

from optgrid.exceptions import LifecycleError
from optgrid.logger import logger
from optgrid.parser.classifier import Classification, classify
from optgrid.parser.descriptor import OptionDescriptor
from optgrid.parser.help import render_all, render_one
from optgrid.parser.registry import Registry, build_registry


class OptionEngine:
    """
    Owns one option registry and one classification result.

    Attributes:
        registry (Registry): The validated table, available after `setup`.
        classification (Classification): The result, available after `classify`.
    """

    def __init__(self) -> None:
        self._registry: Registry | None = None
        self._classification: Classification | None = None
        self._closed: bool = False

    def _ensure_open(self) -> None:
        if self._closed:
            raise LifecycleError("Option engine has been torn down")

    @property
    def registry(self) -> Registry:
        self._ensure_open()
        if self._registry is None:
            raise LifecycleError("setup() must be called before using the registry")
        return self._registry

    @property
    def classification(self) -> Classification:
        self._ensure_open()
        if self._classification is None:
            raise LifecycleError("classify() must be called before reading results")
        return self._classification

    @property
    def value_flags(self) -> tuple[int, ...]:
        return self.classification.value_flags

    @property
    def bool_flags(self) -> tuple[int, ...]:
        return self.classification.bool_flags

    @property
    def positionals(self) -> tuple[str, ...]:
        return self.classification.positionals

    def setup(self, descriptors: Sequence[OptionDescriptor], version: str) -> Registry:
        """Validate and group the option table. May only be called once."""
        self._ensure_open()
        if self._registry is not None:
            raise LifecycleError("setup() may only be called once")
        self._registry = build_registry(descriptors, version)
        return self._registry

    def classify(self, argv: Sequence[str] | None = None) -> Classification:
        """Classify `argv` (default `sys.argv`). May only be called once, after setup."""
        registry = self.registry
        if self._classification is not None:
            raise LifecycleError("classify() may only be called once")
        self._classification = classify(registry, sys.argv if argv is None else argv)
        return self._classification

    def has(self, identifier: str) -> bool:
        """Return True if the option named by `identifier` was encountered."""
        index = self.registry.find(identifier)
        return index is not None and self.classification.has(index)

    def render_all(self, width: int) -> str:
        return render_all(self.registry, width)

    def render_one(self, identifier: str, width: int) -> str | None:
        return render_one(self.registry, identifier, width)

    def teardown(self) -> None:
        """Release the registry and results. The engine cannot be used afterwards."""
        self._ensure_open()
        self._registry = None
        self._classification = None
        self._closed = True
        logger.debug("Option engine torn down")
