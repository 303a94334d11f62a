# -*- coding: utf-8 -*-
"""Discovery of identities already configured on this machine.

Purely advisory: missing or unreadable files yield no candidates and
nothing is ever written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from ..constant import SSH_CONFIG_FILE
from ..errors import InvalidHostnameError
from ..gitconfig import ConfigScope, get_identity
from ..parsing import HostBlock, parse_host_blocks
from ..providers import (
    PROVIDERS,
    Provider,
    detect_provider,
    find_provider_by_hostname,
    make_custom_provider,
)

logger = logging.getLogger(__name__)

GLOBAL_GIT_SOURCE = "Global Git Config"


class DiscoveredAccount(BaseModel):
    """A candidate account found in existing configuration."""

    name: str = ""
    email: str = ""
    username: str = ""
    source: str = Field(..., description="Where the candidate came from")
    suggested: bool = False
    alias: str = Field(
        default="",
        description="Suffix of the SSH host alias, e.g. 'work'",
    )
    provider: Optional[Provider] = None
    key_path: str = Field(default="", description="IdentityFile, if any")


def _provider_for(hostname: str) -> Optional[Provider]:
    provider = find_provider_by_hostname(hostname)
    if provider is not None:
        return provider
    try:
        return make_custom_provider(hostname)
    except InvalidHostnameError:
        return None


def _split_alias(pattern: str, hostname: str) -> str:
    """Return the suffix of ``<hostname>-<suffix>``, or "" if no match."""
    prefix = f"{hostname}-"
    if not pattern.startswith(prefix):
        return ""
    suffix = pattern[len(prefix):]
    return "" if suffix == hostname else suffix


def _match_alias(block: HostBlock) -> Optional[Tuple[str, str, Provider]]:
    hostnames = [p.hostname for p in PROVIDERS.values()]
    if block.option("hostname"):
        hostnames.append(block.option("hostname"))

    for pattern in block.patterns:
        for hostname in hostnames:
            suffix = _split_alias(pattern, hostname)
            provider = _provider_for(hostname) if suffix else None
            if provider is not None:
                return pattern, suffix, provider

    # No HostName line to go by: guess the host from the alias itself.
    for pattern in block.patterns:
        provider = detect_provider(pattern)
        if provider is None or "." not in provider.hostname:
            continue
        suffix = _split_alias(pattern, provider.hostname)
        if suffix:
            return pattern, suffix, provider
    return None


def _match_block(block: HostBlock) -> Optional[DiscoveredAccount]:
    user = block.option("user")
    if not user:
        return None
    match = _match_alias(block)
    if match is None:
        return None
    pattern, suffix, provider = match
    return DiscoveredAccount(
        username=user,
        source=f"SSH Config ({pattern})",
        suggested=False,
        alias=suffix,
        provider=provider,
        key_path=block.option("identityfile"),
    )


def scan_ssh_config(ssh_config: Optional[Path] = None) -> List[DiscoveredAccount]:
    ssh_config = Path(ssh_config) if ssh_config is not None else SSH_CONFIG_FILE
    try:
        text = ssh_config.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.debug("No SSH config to scan at %s: %s", ssh_config, exc)
        return []

    found = []
    for block in parse_host_blocks(text):
        candidate = _match_block(block)
        if candidate is not None:
            found.append(candidate)
    return found


def scan(
    *,
    ssh_config: Optional[Path] = None,
    global_config: Optional[Path] = None,
) -> List[DiscoveredAccount]:
    """Return candidates: the global git identity first, then SSH aliases."""
    discovered: List[DiscoveredAccount] = []

    name, email = get_identity(
        ConfigScope.global_scope(),
        global_config=global_config,
    )
    if name or email:
        discovered.append(
            DiscoveredAccount(
                name=name,
                email=email,
                source=GLOBAL_GIT_SOURCE,
                suggested=True,
            ),
        )

    discovered.extend(scan_ssh_config(ssh_config))
    logger.debug("Discovered %d candidate account(s)", len(discovered))
    return discovered
