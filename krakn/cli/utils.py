# -*- coding: utf-8 -*-
"""Shared CLI helpers: file locations and click-backed prompting."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

import click
from pydantic import BaseModel

from ..config import get_config_path
from ..constant import GIT_CONFIG_OVERRIDE, GLOBAL_GIT_CONFIG, SSH_DIR


class KraknPaths(BaseModel):
    """Files the commands read and write.

    ``global_config=None`` leaves git on its own default global file.
    """

    config_path: Path
    ssh_dir: Path
    ssh_config: Path
    global_config: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "KraknPaths":
        return cls(
            config_path=get_config_path(),
            ssh_dir=SSH_DIR,
            ssh_config=SSH_DIR / "config",
            global_config=GLOBAL_GIT_CONFIG if GIT_CONFIG_OVERRIDE else None,
        )

    @property
    def global_config_file(self) -> Path:
        return self.global_config or GLOBAL_GIT_CONFIG


def get_paths(ctx: click.Context) -> KraknPaths:
    obj = ctx.find_object(KraknPaths)
    if obj is None:
        obj = KraknPaths.from_env()
    return obj


# ---------------------------------------------------------------------------
# Prompt helpers
# ---------------------------------------------------------------------------


def prompt_choice_index(
    prompt_text: str,
    options: Sequence[str],
    default: Optional[str] = None,
) -> int:
    """Show a numbered list and return the zero-based index chosen."""
    click.echo(prompt_text)
    for i, label in enumerate(options, start=1):
        click.echo(f"  {i}. {label}")
    default_num = options.index(default) + 1 if default in options else None
    number = click.prompt(
        "Enter choice",
        type=click.IntRange(1, len(options)),
        default=default_num,
    )
    return number - 1


def parse_multi_choice(raw: str, count: int) -> Optional[List[int]]:
    """Parse ``"1,3"`` style input into zero-based indices.

    ``"0"`` or empty means none, ``"all"`` means every option. Returns None
    when the input is invalid.
    """
    raw = raw.strip().lower()
    if raw in ("", "0"):
        return []
    if raw == "all":
        return list(range(count))
    indices: List[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part.isdigit():
            return None
        number = int(part)
        if number < 1 or number > count:
            return None
        if number - 1 not in indices:
            indices.append(number - 1)
    return indices


def prompt_confirm(prompt_text: str, default: bool = True) -> bool:
    return click.confirm(prompt_text, default=default)


def prompt_path(prompt_text: str, default: str = "") -> str:
    """Prompt for a filesystem path, expanding ``~``."""
    value = click.prompt(prompt_text, default=default, show_default=bool(default))
    return str(Path(value).expanduser()) if value else ""


class ClickPrompter:
    """:class:`krakn.prompting.Prompter` on top of click."""

    def echo(self, message: str = "") -> None:
        click.echo(message)

    def confirm(self, prompt: str, default: bool = True) -> bool:
        return prompt_confirm(prompt, default=default)

    def ask(self, prompt: str, default: str = "") -> str:
        return click.prompt(prompt, default=default, show_default=bool(default))

    def choose(
        self,
        prompt: str,
        options: Sequence[str],
        default: Optional[int] = None,
    ) -> int:
        default_label = options[default] if default is not None else None
        return prompt_choice_index(prompt, options, default=default_label)

    def choose_many(self, prompt: str, options: Sequence[str]) -> List[int]:
        click.echo(prompt)
        click.echo("  0. None")
        for i, label in enumerate(options, start=1):
            click.echo(f"  {i}. {label}")
        while True:
            raw = click.prompt(
                "Enter choice(s) separated by commas, or 'all'",
                default="all",
            )
            indices = parse_multi_choice(raw, len(options))
            if indices is not None:
                return indices
            click.echo(click.style(f"Invalid choice: {raw}", fg="red"))
