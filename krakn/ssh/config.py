# -*- coding: utf-8 -*-
"""Host-alias blocks in the SSH client config (~/.ssh/config).

The file is only ever appended to, never rewritten.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from ..config import Account
from ..constant import SSH_CONFIG_FILE
from ..errors import ConfigIOError
from ..parsing import HostBlock, parse_host_blocks
from .keys import ensure_private_dir

logger = logging.getLogger(__name__)


def _resolve(ssh_config: Optional[Path]) -> Path:
    return Path(ssh_config) if ssh_config is not None else SSH_CONFIG_FILE


def _read(ssh_config: Path) -> str:
    try:
        return ssh_config.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return ""
    except OSError as exc:
        raise ConfigIOError("read", ssh_config, exc) from exc


def render_host_alias(account: Account, ssh_dir: Optional[Path] = None) -> str:
    """Return the ``Host`` block for *account*, newline terminated."""
    provider = account.provider
    lines = [
        f"Host {account.ssh_host}",
        f"  HostName {provider.hostname}",
        f"  User {provider.ssh_user}",
        f"  IdentityFile {account.key_path(ssh_dir)}",
    ]
    if provider.custom_port is not None:
        lines.append(f"  Port {provider.custom_port}")
    return "\n".join(lines) + "\n"


def list_host_aliases(ssh_config: Optional[Path] = None) -> List[HostBlock]:
    return parse_host_blocks(_read(_resolve(ssh_config)))


def has_host_alias(alias: str, ssh_config: Optional[Path] = None) -> bool:
    return any(alias in block.patterns for block in list_host_aliases(ssh_config))


def append_host_alias(
    account: Account,
    ssh_config: Optional[Path] = None,
    ssh_dir: Optional[Path] = None,
) -> bool:
    """Append the host-alias block for *account* unless already present.

    Returns True if the block was written, False if a ``Host`` line for
    the alias already exists.
    """
    ssh_config = _resolve(ssh_config)
    existing = _read(ssh_config)
    alias = account.ssh_host
    if any(alias in b.patterns for b in parse_host_blocks(existing)):
        logger.info("Host %s already present in %s", alias, ssh_config)
        return False

    if not existing:
        separator = ""
    elif existing.endswith("\n\n"):
        separator = ""
    elif existing.endswith("\n"):
        separator = "\n"
    else:
        separator = "\n\n"

    ensure_private_dir(ssh_config.parent)
    try:
        fd = os.open(
            str(ssh_config),
            os.O_WRONLY | os.O_APPEND | os.O_CREAT,
            0o600,
        )
        with os.fdopen(fd, "a", encoding="utf-8") as fh:
            fh.write(separator + render_host_alias(account, ssh_dir))
    except OSError as exc:
        raise ConfigIOError("write", ssh_config, exc) from exc

    logger.info("Appended Host %s to %s", alias, ssh_config)
    return True
