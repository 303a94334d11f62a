# -*- coding: utf-8 -*-
"""SSH keys and SSH client config host aliases."""

from .config import (
    append_host_alias,
    has_host_alias,
    list_host_aliases,
    render_host_alias,
)
from .keys import (
    delete_key_pair,
    generate_key_pair,
    list_existing_keys,
    public_key_path,
    read_public_key,
)

__all__ = [
    # config
    "append_host_alias",
    "has_host_alias",
    "list_host_aliases",
    "render_host_alias",
    # keys
    "delete_key_pair",
    "generate_key_pair",
    "list_existing_keys",
    "public_key_path",
    "read_public_key",
]
