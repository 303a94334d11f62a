# -*- coding: utf-8 -*-
"""Applying account identities to git configuration.

Covers identity keys at global or repository scope, the per-directory
config file, and ``[includeIf "gitdir:..."]`` stanzas in the global
config that point directories at those files.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import List, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel

from ..config import Account
from ..constant import DIRECTORY_CONFIG_NAME, GLOBAL_GIT_CONFIG
from ..errors import ConfigIOError, NotARepositoryError, UserInputError
from ..parsing import escape_git_string, parse_include_if_stanzas
from .runner import get_config_value, set_config_value

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ConfigScope(BaseModel):
    """Where identity keys are written: global, or one repository."""

    repo_path: Optional[Path] = None

    @classmethod
    def global_scope(cls) -> "ConfigScope":
        return cls()

    @classmethod
    def local(cls, repo_path: PathLike) -> "ConfigScope":
        return cls(repo_path=Path(repo_path).expanduser())

    @property
    def is_global(self) -> bool:
        return self.repo_path is None

    def describe(self) -> str:
        if self.is_global:
            return "globally"
        return f"for repository at {self.repo_path}"


class ConditionalInclude(NamedTuple):
    gitdir: str
    path: str


def _resolve(global_config: Optional[Path]) -> Path:
    return Path(global_config) if global_config is not None else GLOBAL_GIT_CONFIG


def _read(path: Path) -> str:
    # git accepts any bytes here; the file is only appended to.
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return ""
    except OSError as exc:
        raise ConfigIOError("read", path, exc) from exc


_PLAIN_VALUE_RE = re.compile(r'^[^\s"\\#;](?:[^"\\#;\n]*[^\s"\\#;])?\Z')


def _git_value(value: str) -> str:
    """Quote *value* for a git config file when it is not plain text."""
    if _PLAIN_VALUE_RE.match(value):
        return value
    return f'"{escape_git_string(value)}"'


def is_git_repository(path: PathLike) -> bool:
    return (Path(path).expanduser() / ".git").is_dir()


def normalize_gitdir(directory: PathLike) -> str:
    """Absolute form of *directory* with exactly one trailing slash.

    git treats a ``gitdir:`` pattern ending in ``/`` as "this directory
    and everything below it".
    """
    absolute = os.path.abspath(os.path.expanduser(str(directory)))
    absolute = absolute.replace(os.sep, "/")
    return absolute.rstrip("/") + "/"


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------


def set_identity(
    name: str,
    email: str,
    scope: ConfigScope,
    *,
    global_config: Optional[Path] = None,
) -> None:
    """Set ``user.name`` and ``user.email`` at *scope*."""
    if not scope.is_global and not is_git_repository(scope.repo_path):
        raise NotARepositoryError(scope.repo_path)
    for key, value in (("user.name", name), ("user.email", email)):
        set_config_value(
            key,
            value,
            repo_path=scope.repo_path,
            global_config=global_config,
        )


def get_identity(
    scope: Optional[ConfigScope] = None,
    *,
    global_config: Optional[Path] = None,
) -> Tuple[str, str]:
    """Return ``(user.name, user.email)``; empty strings when unset.

    With no scope, reads the values in effect for the working directory.
    """
    repo_path = Path.cwd() if scope is None else scope.repo_path
    name, email = (
        get_config_value(key, repo_path=repo_path, global_config=global_config)
        for key in ("user.name", "user.email")
    )
    return name, email


# ---------------------------------------------------------------------------
# Directory config + conditional includes
# ---------------------------------------------------------------------------


def directory_config_path(directory: PathLike) -> Path:
    return Path(directory).expanduser().absolute() / DIRECTORY_CONFIG_NAME


def write_directory_config(directory: PathLike, account: Account) -> Path:
    """Write ``<directory>/.gitconfig`` with the account identity.

    Overwrites any existing file. Returns the written path.
    """
    path = directory_config_path(directory)
    content = (
        "[user]\n"
        f"\tname = {_git_value(account.username)}\n"
        f"\temail = {_git_value(account.email)}\n"
    )
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ConfigIOError("write", path, exc) from exc
    logger.info("Wrote %s for account '%s'", path, account.name)
    return path


def list_conditional_includes(
    global_config: Optional[Path] = None,
) -> List[ConditionalInclude]:
    """Return ``(gitdir pattern, included path)`` pairs in file order.

    Stanzas with no ``path`` line are left out.
    """
    text = _read(_resolve(global_config))
    return [
        ConditionalInclude(stanza.gitdir, stanza.path)
        for stanza in parse_include_if_stanzas(text)
        if stanza.path is not None
    ]


def add_conditional_include(
    directory: PathLike,
    included_config: PathLike,
    global_config: Optional[Path] = None,
) -> bool:
    """Append an includeIf stanza for *directory* to the global config.

    Returns False without writing if a stanza for the same normalized
    directory already exists.
    """
    global_config = _resolve(global_config)
    pattern = normalize_gitdir(directory)
    if "\n" in pattern or "\n" in str(included_config):
        raise UserInputError(
            "Paths with line breaks cannot be used in git config",
        )
    existing = _read(global_config)

    if any(s.gitdir == pattern for s in parse_include_if_stanzas(existing)):
        logger.info("includeIf for %s already in %s", pattern, global_config)
        return False

    if not existing:
        separator = ""
    elif existing.endswith("\n"):
        separator = "\n"
    else:
        separator = "\n\n"
    stanza = (
        f'[includeIf "gitdir:{escape_git_string(pattern)}"]\n'
        f"\tpath = {_git_value(str(included_config))}\n"
    )

    try:
        global_config.parent.mkdir(parents=True, exist_ok=True)
        with open(global_config, "a", encoding="utf-8") as fh:
            fh.write(separator + stanza)
    except OSError as exc:
        raise ConfigIOError("write", global_config, exc) from exc

    logger.info("Added includeIf for %s to %s", pattern, global_config)
    return True


def configure_directory(
    directory: PathLike,
    account: Account,
    global_config: Optional[Path] = None,
) -> Tuple[Path, bool]:
    """Write the directory config and include it for that directory.

    Returns the config path and whether a new stanza was added.
    """
    path = write_directory_config(directory, account)
    added = add_conditional_include(directory, path, global_config)
    return path, added
