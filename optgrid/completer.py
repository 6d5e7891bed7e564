# Optgrid Option Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `OptionCompleter`, a Prompt Toolkit completer for declared options.

Completions are generated from a validated `Registry`:
- `--long` names when the stub starts with `--`
- `-s` short flags when the stub starts with a single `-`
- keywords otherwise, and every flag form when the stub is empty

Used by the `optgrid shell` session to classify arguments interactively.
"""

from __future__ import annotations

import os
import shlex
from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from optgrid.parser.registry import Registry


class OptionCompleter(Completer):
    """
    Prompt Toolkit completer for the options of one registry.

    Args:
        registry (Registry): The validated option table to complete from.
    """

    def __init__(self, registry: Registry):
        self.registry = registry

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        """
        Compute completions for the token under the cursor.

        Yields:
            Completion: One or more completions matching the current stub text.
        """
        text = document.text_before_cursor
        try:
            tokens = shlex.split(text)
        except ValueError:
            return

        cursor_at_end_of_token = text.endswith((" ", "\t"))
        stub = "" if cursor_at_end_of_token or not tokens else tokens[-1]
        yield from self._yield_lcp_completions(self.suggest(stub), stub)

    def suggest(self, stub: str) -> list[str]:
        """Return the option spellings that could complete `stub`."""
        longs = [f"--{d.long}" for d in self.registry.descriptors if d.long]
        shorts = [f"-{d.short}" for d in self.registry.descriptors if d.short]
        keywords = [d.keyword for d in self.registry.descriptors if d.keyword]
        if stub.startswith("--"):
            candidates = longs
        elif stub.startswith("-"):
            candidates = shorts + longs
        elif stub:
            candidates = keywords
        else:
            candidates = longs + shorts + keywords
        return sorted(candidate for candidate in candidates if candidate.startswith(stub))

    def _ensure_quote(self, text: str) -> str:
        if " " in text or "\t" in text:
            return f'"{text}"'
        return text

    def _yield_lcp_completions(self, suggestions, stub):
        """
        Yield completions for the current stub using longest-common-prefix logic.

        Behavior:
        - If only one match → yield it fully.
        - If multiple matches share a longer prefix → insert the prefix, but also
            display all matches in the menu.
        - If no shared prefix → list all matches individually.
        """
        matches = [s for s in suggestions if s.startswith(stub)]
        if not matches:
            return

        lcp = os.path.commonprefix(matches)

        if len(matches) == 1:
            yield Completion(
                self._ensure_quote(matches[0]),
                start_position=-len(stub),
                display=matches[0],
            )
        elif len(lcp) > len(stub) and not lcp.startswith("-"):
            yield Completion(lcp, start_position=-len(stub), display=lcp)
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
        else:
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
