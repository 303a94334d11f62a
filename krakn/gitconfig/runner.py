# -*- coding: utf-8 -*-
"""Thin wrapper around the ``git config`` command line."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

from ..constant import GIT_CONFIG_OVERRIDE
from ..errors import GitCommandFailedError

logger = logging.getLogger(__name__)


def _env(global_config: Optional[Path]) -> Optional[Dict[str, str]]:
    """Environment for git, pointing it at *global_config* if given."""
    if global_config is None and GIT_CONFIG_OVERRIDE:
        global_config = Path(GIT_CONFIG_OVERRIDE).expanduser()
    if global_config is None:
        return None
    env = dict(os.environ)
    env["GIT_CONFIG_GLOBAL"] = str(global_config)
    return env


def _config_argv(
    args: List[str],
    repo_path: Optional[Path],
) -> List[str]:
    if repo_path is None:
        return ["git", "config", "--global", *args]
    return ["git", "-C", str(repo_path), "config", *args]


def run_git_config(
    args: List[str],
    *,
    repo_path: Optional[Path] = None,
    global_config: Optional[Path] = None,
) -> subprocess.CompletedProcess:
    """Run ``git config`` globally, or in *repo_path* when given.

    Raises GitCommandFailedError only when git cannot be started; the
    caller inspects the exit status.
    """
    argv = _config_argv(args, repo_path)
    logger.debug("Running %s", argv)
    try:
        return subprocess.run(
            argv,
            capture_output=True,
            text=True,
            check=False,
            env=_env(global_config),
        )
    except OSError as exc:
        logger.error("Could not start git: %s", exc)
        raise GitCommandFailedError(argv) from exc


def get_config_value(
    key: str,
    *,
    repo_path: Optional[Path] = None,
    global_config: Optional[Path] = None,
) -> str:
    """Return the value of *key*, or "" when unset or git is unavailable."""
    try:
        result = run_git_config(
            ["--get", key],
            repo_path=repo_path,
            global_config=global_config,
        )
    except GitCommandFailedError:
        return ""
    if result.returncode != 0:
        return ""
    return result.stdout.strip()


def set_config_value(
    key: str,
    value: str,
    *,
    repo_path: Optional[Path] = None,
    global_config: Optional[Path] = None,
) -> None:
    result = run_git_config(
        [key, value],
        repo_path=repo_path,
        global_config=global_config,
    )
    if result.returncode != 0:
        raise GitCommandFailedError(
            _config_argv([key, value], repo_path),
            result.returncode,
            result.stderr,
        )
    logger.info("Set %s = %s", key, value)
