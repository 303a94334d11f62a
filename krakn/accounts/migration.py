# -*- coding: utf-8 -*-
"""First-run import of existing identities (``krakn migrate``)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from ..config import Account, ConfigStore, load_config, save_config
from ..constant import SSH_DIR
from ..prompting import Prompter
from ..providers import DEFAULT_PROVIDER
from ..ssh import list_existing_keys
from .discovery import DiscoveredAccount, scan
from .resolver import (
    get_current_account,
    is_valid_account_name,
    upsert_account,
)

logger = logging.getLogger(__name__)

DEFAULT_ACCOUNT_NAME = "default"


def _describe(candidate: DiscoveredAccount) -> str:
    parts = [candidate.source]
    if candidate.name:
        parts.append(f"Name: {candidate.name}")
    if candidate.email:
        parts.append(f"Email: {candidate.email}")
    if candidate.username:
        parts.append(f"Username: {candidate.username}")
    return " - ".join(parts)


def select_ssh_key(
    prompter: Prompter,
    account_name: str,
    ssh_dir: Optional[Path] = None,
) -> str:
    """Let the user pick an existing key, type a path, or skip.

    Returns the chosen private key path, or "" to generate one later.
    """
    ssh_dir = Path(ssh_dir) if ssh_dir is not None else SSH_DIR
    keys = list_existing_keys(ssh_dir)
    if not keys:
        prompter.echo("No existing SSH keys found.")
        return prompter.ask(
            "SSH key path (leave empty to generate later)",
            default="",
        ).strip()

    options = ["Generate new key later"]
    for key in keys:
        hint = " (suggested)" if account_name in key else ""
        options.append(f"{key}{hint}")
    options.append("Enter a custom path")

    choice = prompter.choose("Select SSH key", options, default=0)
    if choice == 0:
        return ""
    if choice <= len(keys):
        return str(ssh_dir / keys[choice - 1])

    while True:
        raw = prompter.ask("SSH key path", default="").strip()
        if not raw:
            return ""
        path = Path(raw).expanduser()
        if path.is_file():
            return str(path)
        prompter.echo(f"SSH key not found: {path}")


def import_candidate(
    prompter: Prompter,
    candidate: DiscoveredAccount,
    ssh_dir: Optional[Path] = None,
) -> Account:
    """Fill in what discovery could not know and build an Account."""
    prompter.echo(f"Migrating: {candidate.source}")

    default_name = candidate.alias or candidate.username or DEFAULT_ACCOUNT_NAME
    while True:
        name = prompter.ask("Account name", default=default_name).strip()
        name = name or default_name
        if is_valid_account_name(name):
            break
        prompter.echo(f"Invalid account name: {name!r}")

    email = candidate.email or prompter.ask("Email address", default="").strip()

    username = candidate.username
    if not username:
        username = prompter.ask("Username", default=candidate.name).strip()

    ssh_key = candidate.key_path or select_ssh_key(prompter, name, ssh_dir)

    provider = candidate.provider or DEFAULT_PROVIDER.model_copy()
    return Account(
        name=name,
        email=email,
        ssh_key=ssh_key,
        username=username,
        provider=provider,
    )


def check_and_offer_migration(
    prompter: Prompter,
    *,
    force: bool = False,
    config_path: Optional[Path] = None,
    ssh_dir: Optional[Path] = None,
    ssh_config: Optional[Path] = None,
    global_config: Optional[Path] = None,
) -> List[Account]:
    """Offer to import discovered identities on first run.

    Skipped when the store is marked done or already holds accounts,
    unless *force*. Returns the imported accounts.
    """
    store = load_config(config_path)
    if not force and (store.migration_done or store.accounts):
        return []

    discovered = scan(ssh_config=ssh_config, global_config=global_config)
    if not discovered:
        logger.debug("Nothing to migrate")
        _finish(store, config_path)
        return []

    prompter.echo("Found existing git/SSH configuration:")
    for i, candidate in enumerate(discovered, start=1):
        prompter.echo(f"  {i}. {_describe(candidate)}")

    if not prompter.confirm("Import any of these accounts?", default=True):
        _finish(store, config_path)
        return []

    labels = [
        c.source + (" (recommended)" if c.suggested else "")
        for c in discovered
    ]
    chosen = prompter.choose_many("Select accounts to import", labels)

    imported: List[Account] = []
    for index in chosen:
        account = import_candidate(prompter, discovered[index], ssh_dir)
        upsert_account(store, account)
        imported.append(account)

    if imported and get_current_account(store) is None:
        store.current_account = imported[0].name

    _finish(store, config_path)
    logger.info("Imported %d account(s)", len(imported))
    return imported


def _finish(store: ConfigStore, config_path: Optional[Path]) -> None:
    store.migration_done = True
    save_config(store, config_path)
