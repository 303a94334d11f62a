# -*- coding: utf-8 -*-
"""Pydantic models for accounts and the persisted root (config.json)."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from ..constant import CONFIG_VERSION, KEY_ALGORITHM, SSH_DIR
from ..providers import DEFAULT_PROVIDER, Provider


class Account(BaseModel):
    """One configured identity on one provider."""

    name: str = Field(..., description="Unique account slug, e.g. 'work'")
    email: str = Field(default="", description="Commit email")
    ssh_key: str = Field(
        default="",
        description="Private key path; empty means not generated yet",
    )
    username: str = Field(default="", description="Login on the provider")
    provider: Provider = Field(
        default_factory=DEFAULT_PROVIDER.model_copy,
    )
    # Derived from ConfigStore.current_account on save.
    is_default: bool = Field(default=False)

    @property
    def ssh_host(self) -> str:
        """The SSH host alias, e.g. ``github.com-work``."""
        return f"{self.provider.hostname}-{self.name}"

    def clone_url(self, repo: str) -> str:
        return f"git@{self.ssh_host}:{repo}"

    def default_key_path(self, ssh_dir: Optional[Path] = None) -> Path:
        ssh_dir = ssh_dir if ssh_dir is not None else SSH_DIR
        filename = f"id_{KEY_ALGORITHM}_{self.provider.key_suffix}_{self.name}"
        return Path(ssh_dir) / filename

    def key_path(self, ssh_dir: Optional[Path] = None) -> Path:
        """The configured key path, or the conventional one if unset."""
        if self.ssh_key:
            return Path(self.ssh_key).expanduser()
        return self.default_key_path(ssh_dir)


class ConfigStore(BaseModel):
    """Root config (config.json)."""

    accounts: List[Account] = Field(default_factory=list)
    current_account: str = Field(
        default="",
        description="Name of the current account; empty if none",
    )
    migration_done: bool = Field(
        default=False,
        description="Set once the first-run import ran or was skipped",
    )
    config_version: int = Field(default=CONFIG_VERSION)
