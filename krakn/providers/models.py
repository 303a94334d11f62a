# -*- coding: utf-8 -*-
"""Pydantic data model for git hosting providers."""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..constant import DEFAULT_SSH_PORT, DEFAULT_SSH_USER

CUSTOM_PROVIDER_NAME = "custom"

_HOSTNAME_RE = re.compile(r"^[a-zA-Z0-9]([a-zA-Z0-9\-.]*[a-zA-Z0-9])?$")


def is_valid_hostname(hostname: str) -> bool:
    """Conservative check: letters, digits, dots and hyphens only."""
    if not hostname:
        return False
    return _HOSTNAME_RE.match(hostname) is not None


class Provider(BaseModel):
    """A git hosting service (built-in or custom)."""

    name: str = Field(
        ...,
        description="Canonical key: github, gitlab, gitea or custom",
    )
    display_name: str = Field(default="", description="Human-readable name")
    hostname: str = Field(..., description="SSH hostname, e.g. github.com")
    ssh_user: str = Field(default=DEFAULT_SSH_USER, description="SSH user")
    ssh_port: Optional[int] = Field(
        default=None,
        description="SSH port; None means the default (22)",
    )
    web_url: str = Field(
        default="",
        description="Page where SSH keys are registered",
    )
    key_suffix: str = Field(
        default="",
        description="Short token used in generated key filenames",
    )

    @field_validator("hostname")
    @classmethod
    def _check_hostname(cls, value: str) -> str:
        if not is_valid_hostname(value):
            raise ValueError(f"invalid hostname: {value!r}")
        return value

    @field_validator("ssh_port", mode="before")
    @classmethod
    def _blank_port_is_default(cls, value):
        # Older files stored the port as a string, "" meaning default.
        if value in ("", None):
            return None
        return value

    @property
    def is_custom(self) -> bool:
        return self.name == CUSTOM_PROVIDER_NAME

    @property
    def label(self) -> str:
        return self.display_name or self.hostname

    @property
    def custom_port(self) -> Optional[int]:
        """The port to write to SSH config, or None when it is 22."""
        if self.ssh_port is None or self.ssh_port == DEFAULT_SSH_PORT:
            return None
        return self.ssh_port
