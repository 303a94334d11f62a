# -*- coding: utf-8 -*-
"""Interactive capability used by flows that need to ask the user.

Core code depends only on :class:`Prompter`; the CLI supplies
``krakn.cli.utils.ClickPrompter`` and tests supply a scripted fake.
"""
from __future__ import annotations

from typing import List, Optional, Protocol, Sequence


class Prompter(Protocol):
    def echo(self, message: str = "") -> None:
        """Show an informational line."""

    def confirm(self, prompt: str, default: bool = True) -> bool:
        """Ask a yes/no question."""

    def ask(self, prompt: str, default: str = "") -> str:
        """Ask for free text; returns ``default`` on empty input."""

    def choose(
        self,
        prompt: str,
        options: Sequence[str],
        default: Optional[int] = None,
    ) -> int:
        """Pick one option; returns its zero-based index."""

    def choose_many(self, prompt: str, options: Sequence[str]) -> List[int]:
        """Pick any subset of options; returns zero-based indices."""
