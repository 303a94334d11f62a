# -*- coding: utf-8 -*-
"""Reading and writing the account store (config.json)."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..constant import CONFIG_FILE, CONFIG_VERSION, WORKING_DIR
from ..errors import ConfigIOError
from ..providers import DEFAULT_PROVIDER
from .config import Account, ConfigStore

logger = logging.getLogger(__name__)


def get_config_path() -> Path:
    """Return the default config.json path."""
    return WORKING_DIR / CONFIG_FILE


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_legacy_format(raw: dict) -> ConfigStore:
    """Parse the single-provider format (no ``config_version``).

    Accounts had no provider then; they were all GitHub accounts.
    """
    accounts = []
    for value in raw.get("accounts") or []:
        if not isinstance(value, dict):
            continue
        value = dict(value)
        value.setdefault("provider", DEFAULT_PROVIDER.model_dump())
        accounts.append(Account.model_validate(value))
    logger.info("Upgrading %d account(s) from the legacy format", len(accounts))
    return ConfigStore(
        accounts=accounts,
        current_account=raw.get("current_account") or "",
        migration_done=bool(raw.get("migration_done", False)),
        config_version=CONFIG_VERSION,
    )


def _parse_current_format(raw: dict) -> ConfigStore:
    store = ConfigStore.model_validate(raw)
    store.config_version = CONFIG_VERSION
    return store


def _validate_current_account(store: ConfigStore) -> None:
    """Clear ``current_account`` if it names no stored account."""
    if not store.current_account:
        return
    if any(a.name == store.current_account for a in store.accounts):
        return
    logger.warning(
        "Current account '%s' does not exist; clearing it",
        store.current_account,
    )
    store.current_account = ""


def _sync_default_flags(store: ConfigStore) -> None:
    for account in store.accounts:
        account.is_default = account.name == store.current_account


# ---------------------------------------------------------------------------
# Load / Save
# ---------------------------------------------------------------------------


def load_config(path: Optional[Path] = None) -> ConfigStore:
    """Load config.json; a missing file yields an empty store."""
    if path is None:
        path = get_config_path()

    if not path.is_file():
        logger.debug("No config at %s, starting empty", path)
        return ConfigStore()

    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
    except OSError as exc:
        raise ConfigIOError("read", path, exc) from exc
    except json.JSONDecodeError as exc:
        raise ConfigIOError("parse", path, exc) from exc

    if not isinstance(raw, dict):
        raise ConfigIOError("parse", path, "top-level value is not an object")

    try:
        if int(raw.get("config_version") or 0) < CONFIG_VERSION:
            store = _parse_legacy_format(raw)
        else:
            store = _parse_current_format(raw)
    except (ValidationError, ValueError, TypeError) as exc:
        raise ConfigIOError("parse", path, exc) from exc

    _validate_current_account(store)
    return store


def save_config(store: ConfigStore, path: Optional[Path] = None) -> None:
    """Write the store to config.json, replacing the file atomically."""
    if path is None:
        path = get_config_path()

    _sync_default_flags(store)
    out = store.model_dump(mode="json")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.",
            suffix=".tmp",
            dir=str(path.parent),
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(out, fh, indent=2, ensure_ascii=False)
                fh.write("\n")
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
    except OSError as exc:
        raise ConfigIOError("write", path, exc) from exc
    logger.debug("Saved %d account(s) to %s", len(store.accounts), path)
