# -*- coding: utf-8 -*-
"""Account resolution, discovery and first-run migration."""

from .discovery import DiscoveredAccount, scan
from .migration import check_and_offer_migration
from .resolver import (
    find_by_name,
    get_current_account,
    list_names,
    remove_account,
    require_account,
    is_valid_account_name,
    set_current,
    upsert_account,
    validate_account_name,
)

__all__ = [
    "DiscoveredAccount",
    "check_and_offer_migration",
    "find_by_name",
    "get_current_account",
    "is_valid_account_name",
    "list_names",
    "remove_account",
    "require_account",
    "scan",
    "set_current",
    "upsert_account",
    "validate_account_name",
]
