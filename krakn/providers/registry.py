# -*- coding: utf-8 -*-
"""Built-in provider definitions and registry."""

from __future__ import annotations

from typing import List, Optional

from ..constant import DEFAULT_SSH_PORT, DEFAULT_SSH_USER
from ..errors import InvalidHostnameError
from .models import CUSTOM_PROVIDER_NAME, Provider, is_valid_hostname

# ---------------------------------------------------------------------------
# Provider definitions
# ---------------------------------------------------------------------------

PROVIDER_GITHUB = Provider(
    name="github",
    display_name="GitHub",
    hostname="github.com",
    web_url="https://github.com/settings/ssh/new",
    key_suffix="gh",
)

PROVIDER_GITLAB = Provider(
    name="gitlab",
    display_name="GitLab",
    hostname="gitlab.com",
    web_url="https://gitlab.com/-/profile/keys",
    key_suffix="gl",
)

PROVIDER_GITEA = Provider(
    name="gitea",
    display_name="Gitea",
    hostname="gitea.com",
    web_url="https://gitea.com/user/settings/keys",
    key_suffix="gitea",
)

# Registry: provider name -> Provider, in menu order
PROVIDERS: dict[str, Provider] = {
    PROVIDER_GITHUB.name: PROVIDER_GITHUB,
    PROVIDER_GITLAB.name: PROVIDER_GITLAB,
    PROVIDER_GITEA.name: PROVIDER_GITEA,
}

DEFAULT_PROVIDER = PROVIDER_GITHUB

_STRIPPED_PREFIXES = ("git.", "code.", "source.")

KEY_SUFFIX_MAX_LEN = 8


def get_provider(name: str) -> Optional[Provider]:
    """Return a copy of a built-in provider by name, or None."""
    provider = PROVIDERS.get(name)
    return provider.model_copy() if provider is not None else None


def list_providers() -> List[Provider]:
    """Return all built-in providers."""
    return [p.model_copy() for p in PROVIDERS.values()]


def derive_key_suffix(hostname: str) -> str:
    """Derive a short key-filename token from a hostname.

    Example: ``"git.company.com"`` → ``"company"``
    """
    for prefix in _STRIPPED_PREFIXES:
        if hostname.startswith(prefix):
            hostname = hostname[len(prefix):]
    parts = hostname.split(".")
    if len(parts) >= 2:
        return parts[0][:KEY_SUFFIX_MAX_LEN]
    return hostname[:KEY_SUFFIX_MAX_LEN]


def make_custom_provider(
    hostname: str,
    *,
    display_name: Optional[str] = None,
    ssh_user: str = DEFAULT_SSH_USER,
    ssh_port: Optional[int] = None,
    web_url: Optional[str] = None,
) -> Provider:
    """Build a provider for a self-hosted or otherwise unknown host."""
    hostname = hostname.strip()
    if not is_valid_hostname(hostname):
        raise InvalidHostnameError(hostname)
    if ssh_port == DEFAULT_SSH_PORT:
        ssh_port = None
    return Provider(
        name=CUSTOM_PROVIDER_NAME,
        display_name=display_name or hostname,
        hostname=hostname,
        ssh_user=ssh_user or DEFAULT_SSH_USER,
        ssh_port=ssh_port,
        web_url=web_url or f"https://{hostname}",
        key_suffix=derive_key_suffix(hostname),
    )


def find_provider_by_hostname(hostname: str) -> Optional[Provider]:
    for provider in PROVIDERS.values():
        if provider.hostname == hostname:
            return provider.model_copy()
    return None


def detect_provider(host_alias: str) -> Optional[Provider]:
    """Guess the provider behind an SSH host alias like ``github.com-work``."""
    if "github.com" in host_alias:
        return get_provider("github")
    if "gitlab.com" in host_alias:
        return get_provider("gitlab")
    if "gitea" in host_alias:
        return get_provider("gitea")

    hostname, sep, _ = host_alias.rpartition("-")
    if not sep or not is_valid_hostname(hostname):
        return None
    return make_custom_provider(hostname, display_name="Custom Git Host")
