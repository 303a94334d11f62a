# -*- coding: utf-8 -*-
"""Account lookup and in-place mutation of a loaded ConfigStore.

Nothing here touches the disk: callers load the store, mutate it through
these helpers and save it back.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..config import Account, ConfigStore
from ..errors import AccountNotFoundError, UserInputError

logger = logging.getLogger(__name__)

# Names end up in SSH host aliases and key filenames.
_ACCOUNT_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*\Z")


def is_valid_account_name(name: str) -> bool:
    return bool(_ACCOUNT_NAME_RE.match(name)) and ".." not in name


def validate_account_name(name: str) -> str:
    """Return the stripped *name*, or raise UserInputError."""
    name = name.strip()
    if not is_valid_account_name(name):
        raise UserInputError(
            f"Invalid account name: {name!r}. Use letters, digits, "
            "'.', '_' or '-', starting with a letter or digit",
        )
    return name


def find_by_name(store: ConfigStore, name: str) -> Optional[Account]:
    """Return the account named *name* (exact, case-sensitive) or None."""
    for account in store.accounts:
        if account.name == name:
            return account
    return None


def list_names(store: ConfigStore) -> List[str]:
    return [a.name for a in store.accounts]


def require_account(store: ConfigStore, name: str) -> Account:
    """Like :func:`find_by_name` but raises AccountNotFoundError."""
    account = find_by_name(store, name)
    if account is None:
        raise AccountNotFoundError(name, list_names(store))
    return account


def get_current_account(store: ConfigStore) -> Optional[Account]:
    """Return the current account; a dangling reference counts as none."""
    if not store.current_account:
        return None
    return find_by_name(store, store.current_account)


def upsert_account(store: ConfigStore, account: Account) -> bool:
    """Add *account*, replacing any account with the same name in place.

    Returns True if an existing entry was replaced. The first account
    added to an empty store becomes the current one.
    """
    for i, existing in enumerate(store.accounts):
        if existing.name == account.name:
            store.accounts[i] = account
            logger.info("Replaced account '%s'", account.name)
            return True

    store.accounts.append(account)
    logger.info("Added account '%s'", account.name)
    if len(store.accounts) == 1 and get_current_account(store) is None:
        store.current_account = account.name
    return False


def set_current(store: ConfigStore, name: str) -> Account:
    """Point ``current_account`` at *name*; the caller must save."""
    account = require_account(store, name)
    store.current_account = name
    return account


def remove_account(store: ConfigStore, name: str) -> Account:
    """Remove and return the account named *name*.

    If it was current, the first remaining account becomes current.
    """
    account = require_account(store, name)
    store.accounts = [a for a in store.accounts if a.name != name]
    if store.current_account == name:
        store.current_account = (
            store.accounts[0].name if store.accounts else ""
        )
    logger.info("Removed account '%s'", name)
    return account
